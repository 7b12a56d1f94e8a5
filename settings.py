# settings.py
"""Settings handed to the cipher engine by whoever owns the user's choices.

The ``*Args`` classes carry raw, optional strings exactly as a settings form
would hold them.  The frozen ``*Config`` classes are what survives
validation (see ``utilities.parse_*``) and are shared read-only by cipher
instances.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from suites import AlgorithmOption


# ────────────────────────────────────────────────────────────────────────
#  Raw settings (strings, possibly missing)
# ────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class EnigmaArgs:
    refl_wiring: Optional[str] = "yruhqsldpxngokmiebfzcwvjat"

    rot1_wiring: Optional[str] = "ekmflgdqvzntowyhxuspaibrcj"
    rot1_notch: Optional[str] = "8"
    rot1_position: Optional[str] = "0"

    rot2_wiring: Optional[str] = "ajdksiruxblhwtmcqgznpyfvoe"
    rot2_notch: Optional[str] = "8"
    rot2_position: Optional[str] = "0"

    rot3_wiring: Optional[str] = "bdfhjlcprtxvznyeiwgakmusqo"
    rot3_notch: Optional[str] = "0"
    rot3_position: Optional[str] = "0"

    plugboard: Optional[str] = "po ml iu kj nh yt gb vf re dc"


@dataclass(slots=True)
class XxteaArgs:
    key: Optional[str] = "SecureKey"


@dataclass(slots=True)
class XxteaCfbArgs:
    key: Optional[str] = "SecureKey"
    iv: Optional[str] = "asdjgasdjgasdjfasdjkhasdf"
    block_size: Optional[str] = "8"


@dataclass(slots=True)
class SettingsState:
    algorithm_option: AlgorithmOption = AlgorithmOption.ENIGMA
    enigma_args: EnigmaArgs = field(default_factory=EnigmaArgs)
    xxtea_args: XxteaArgs = field(default_factory=XxteaArgs)
    xxtea_cfb_args: XxteaCfbArgs = field(default_factory=XxteaCfbArgs)


# ────────────────────────────────────────────────────────────────────────
#  Validated settings
# ────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class RotorSetting:
    wiring: bytes
    notch: int
    position: int


@dataclass(frozen=True, slots=True)
class EnigmaConfig:
    reflector: bytes
    rotors: Tuple[RotorSetting, RotorSetting, RotorSetting]
    plugboard: str = ""


@dataclass(frozen=True, slots=True)
class XxteaCfbConfig:
    key: Tuple[int, int, int, int]
    iv: bytes
    block_size: int
