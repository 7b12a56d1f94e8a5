# enigma_machine.py  ─────────────────────────────────────────────────
from __future__ import annotations

from copy import deepcopy
from typing import Iterable

from debug import Debug
from errors import ConfigurationError
from keyboard_and_plugboard import Keyboard, Plugboard
from rotor_and_reflector import Reflector, Rotor
from settings import EnigmaArgs, EnigmaConfig
from utilities import parse_enigma_args

debug = Debug()
debug.disable("stepping", "encipher")


class RotorAssembly:
    """Three rotors; slot 0 is the leftmost (slowest), slot 2 the rightmost."""

    def __init__(self, rotors: Iterable[Rotor]) -> None:
        self.rotors = list(rotors)
        if len(self.rotors) != 3:
            raise ConfigurationError("A rotor assembly holds exactly 3 rotors")

    # ── stepping logic  ─────────────────────────────────────────

    def rotate(self) -> None:
        """Advance the rotors for one key-press, double-step included."""
        left, middle, right = self.rotors

        # decide which rotors step before moving any of them
        step_L = left.is_aligned() or middle.is_aligned()
        step_M = middle.is_aligned() or right.is_aligned()

        if step_L:
            left.step()
        if step_M:
            middle.step()
        right.step()

        debug.log("stepping", f"Rotor pos {self.positions}")

    @property
    def positions(self) -> list[int]:
        return [r.position for r in self.rotors]

    # ── signal paths  ───────────────────────────────────────────

    def get_output(self, letter: int) -> int:
        for rotor in reversed(self.rotors):
            letter = rotor.forward(letter)
        return letter

    def get_output_inverse(self, letter: int) -> int:
        for rotor in self.rotors:
            letter = rotor.inverse(letter)
        return letter

    def __repr__(self) -> str:
        return f"<RotorAssembly pos={self.positions}>"


class Enigma:
    def __init__(self, args: EnigmaArgs | EnigmaConfig) -> None:
        config = args if isinstance(args, EnigmaConfig) else parse_enigma_args(args)

        self.config     = config
        self.kb         = Keyboard()
        self.pb         = Plugboard(config.plugboard)
        self.reflector  = Reflector(config.reflector)

        # never stepped itself; every call works on a copy
        self.rotors = RotorAssembly(
            Rotor(r.wiring, r.notch, r.position) for r in config.rotors
        )

    def rewind(self) -> RotorAssembly:
        """Return a working assembly at the configured start positions."""
        return deepcopy(self.rotors)

    # ── encipher one symbol  ────────────────────────────────────

    def encipher(self, letter: int, rotors: RotorAssembly) -> int:
        rotors.rotate()

        signal = self.pb.get_output(letter)
        signal = rotors.get_output(signal)
        signal = self.reflector.reflect(signal)
        signal = rotors.get_output_inverse(signal)
        signal = self.pb.get_output(signal)

        debug.log("encipher", f"{chr(letter)}->{chr(signal)}")
        return signal

    # ── public API ──────────────────────────────────────────────

    def encrypt(self, data: bytes) -> bytes:
        """Encipher the letters of *data*; everything else is dropped."""
        rotors = self.rewind()
        return bytes(self.encipher(letter, rotors) for letter in self.kb.type(data))

    def decrypt(self, data: bytes) -> bytes:
        # the machine is its own inverse from the same start positions
        return self.encrypt(data)

    def __repr__(self) -> str:
        return f"<Enigma {self.rotors!r} {self.pb!r}>"
