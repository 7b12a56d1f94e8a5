# keyboard_and_plugboard.py
from __future__ import annotations

from collections.abc import Iterable, Sequence
from debug import Debug
from errors import ConfigurationError
from rotor_and_reflector import ALPHABET, A, check_letter

debug = Debug()
debug.disable("keyboard", "plugboard")


# ── Keyboard ──────────────────────────────────────────────────────
class Keyboard:
    """Reduces arbitrary bytes to the lowercase letters the machine accepts."""

    def __init__(self) -> None:
        self.keys: frozenset[int] = frozenset(ALPHABET)

    # byte → lowercase letter, or None when there is no such key
    def press(self, byte: int) -> int | None:
        if 0x41 <= byte <= 0x5A:        # A-Z
            byte |= 0x20
        return byte if byte in self.keys else None

    def type(self, data: Iterable[int]) -> bytes:
        letters = bytearray()
        for byte in data:
            letter = self.press(byte)
            if letter is not None:
                letters.append(letter)
        debug.log("keyboard", f"{len(letters)} letters kept")
        return bytes(letters)


# ── Plugboard ─────────────────────────────────────────────────────
def parse_pairs(pairs: str | Sequence[str]) -> list[tuple[int, int]]:
    """Split a pair string such as ``"po ml iu"`` into letter tuples."""
    tokens = pairs.split() if isinstance(pairs, str) else list(pairs)
    parsed: list[tuple[int, int]] = []

    for raw in tokens:
        token = raw.lower()
        if len(token) != 2 or not all(c in "abcdefghijklmnopqrstuvwxyz" for c in token):
            raise ConfigurationError(f"Plugboard pair {raw!r} must be exactly 2 letters")
        parsed.append((ord(token[0]), ord(token[1])))
    return parsed


class Plugboard:
    def __init__(self, pairs: str | Sequence[str] = "") -> None:
        wiring = bytearray(ALPHABET)

        # letters reused across pairs are not rejected; the swaps simply compose
        for a, b in parse_pairs(pairs):
            i, j = a - A, b - A
            wiring[i], wiring[j] = wiring[j], wiring[i]

        self.wiring = bytes(wiring)

    def get_output(self, letter: int) -> int:
        mapped = self.wiring[check_letter(letter)]
        debug.log("plugboard", f"{chr(letter)}->{chr(mapped)}")
        return mapped

    # nicety for debugging
    def __repr__(self) -> str:
        swaps = [
            f"{chr(A + i)}{chr(m)}" for i, m in enumerate(self.wiring) if A + i < m
        ]
        return f"<Plugboard {' '.join(swaps)}>"


__all__ = ["Keyboard", "Plugboard", "parse_pairs"]
