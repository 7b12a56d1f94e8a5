# rotor_and_reflector.py
from __future__ import annotations
from debug import Debug
from errors import ConfigurationError

debug = Debug()
debug.disable("rotor", "reflector")

ALPHABET = b"abcdefghijklmnopqrstuvwxyz"
SIZE = len(ALPHABET)
A = ALPHABET[0]


def _check_permutation(wiring: bytes, what: str) -> bytes:
    if len(wiring) != SIZE or sorted(wiring) != list(ALPHABET):
        raise ConfigurationError(f"{what} wiring must be a permutation of a-z")
    return wiring


def check_letter(letter: int) -> int:
    if not A <= letter < A + SIZE:
        raise ValueError(f"Letter {letter!r} is not in a-z")
    return letter - A


def _as_bytes(wiring: str | bytes) -> bytes:
    if not isinstance(wiring, str):
        return bytes(wiring)
    try:
        return wiring.encode("ascii")
    except UnicodeEncodeError as exc:
        raise ConfigurationError("Wiring must be ASCII") from exc


class Rotor:
    """A shifting substitution alphabet.

    `position` is an unbounded step counter; it is only reduced mod 26 when
    indexing the wiring or testing alignment.
    """

    def __init__(self, wiring: str | bytes, notch: int, position: int = 0) -> None:
        self.wiring = _check_permutation(_as_bytes(wiring), "Rotor")
        if not 0 <= notch < SIZE:
            raise ConfigurationError("Notch should be in the range 0 to 25")
        if position < 0:
            raise ConfigurationError("Position cannot be negative")

        self.notch = notch
        self.position = position

    # ── signal paths ---------------------------------------------
    def forward(self, letter: int) -> int:
        index = (check_letter(letter) + self.position) % SIZE
        return self.wiring[index]

    def inverse(self, letter: int) -> int:
        check_letter(letter)
        index = self.wiring.index(letter)
        return A + (index + SIZE - self.position % SIZE) % SIZE

    # ── stepping --------------------------------------------------
    def is_aligned(self) -> bool:
        # the notch engages one step before its visible letter
        return self.position % SIZE == (self.notch + 19) % SIZE

    def step(self) -> None:
        self.position += 1
        debug.log("rotor", f"{self!r} aligned={self.is_aligned()}")

    # ── niceties --------------------------------------------------
    def __repr__(self) -> str:
        return f"<Rotor {self.wiring.decode()} notch={self.notch} pos={self.position}>"


class Reflector:
    def __init__(self, wiring: str | bytes) -> None:
        # a permutation is enough; involution is the caller's business
        self.wiring = _check_permutation(_as_bytes(wiring), "Reflector")

    def reflect(self, letter: int) -> int:
        mapped = self.wiring[check_letter(letter)]
        debug.log("reflector", f"{chr(letter)}->{chr(mapped)}")
        return mapped

    def __repr__(self) -> str:
        return f"<Reflector {self.wiring.decode()}>"
