# utilities.py
from __future__ import annotations

from typing import Dict, Optional, Tuple

from errors import ConfigurationError
from keyboard_and_plugboard import Keyboard, parse_pairs
from rotor_and_reflector import ALPHABET, SIZE
from settings import EnigmaArgs, EnigmaConfig, RotorSetting, XxteaCfbArgs, XxteaCfbConfig
from word_packer import key_to_words

MIN_BLOCK_SIZE = 8

# ────────────────────────────────────────────────────────────────────────
#  0. Trivial helpers
# ────────────────────────────────────────────────────────────────────────


def _require(value: Optional[str], what: str) -> str:
    if value is None:
        raise ConfigurationError(f"{what} is missing")
    return value


def _small_int(value: Optional[str], what: str) -> int:
    text = _require(value, what).strip()
    if not text or not text.isascii() or not text.isdigit():
        raise ConfigurationError(f"{what} should be all digits")
    number = int(text)
    if number >= SIZE:
        raise ConfigurationError(f"{what} should be in the range 0 to {SIZE - 1}")
    return number


# ────────────────────────────────────────────────────────────────────────
#  1. Enigma settings
# ────────────────────────────────────────────────────────────────────────


def parse_wiring(value: Optional[str], what: str = "wiring") -> bytes:
    """Return the wiring as bytes; 26 distinct lowercase letters are required."""
    text = _require(value, what).strip().lower()
    if len(text) != SIZE or not all(c in "abcdefghijklmnopqrstuvwxyz" for c in text):
        raise ConfigurationError(f"{what} must be exactly {SIZE} letters a-z")
    wiring = text.encode("ascii")
    if sorted(wiring) != list(ALPHABET):
        raise ConfigurationError(f"{what} must not repeat letters")
    return wiring


def parse_notch(value: Optional[str], what: str = "notch") -> int:
    return _small_int(value, what)


def parse_position(value: Optional[str], what: str = "position") -> int:
    return _small_int(value, what)


def parse_plugboard(value: Optional[str]) -> str:
    """Validate the pair string and return it normalised (lowercase, single spaces)."""
    pairs = parse_pairs(_require(value, "plugboard"))
    return " ".join(chr(a) + chr(b) for a, b in pairs)


def parse_enigma_args(args: EnigmaArgs) -> EnigmaConfig:
    rotors = tuple(
        RotorSetting(
            wiring=parse_wiring(getattr(args, f"rot{i}_wiring"), f"rotor {i} wiring"),
            notch=parse_notch(getattr(args, f"rot{i}_notch"), f"rotor {i} notch"),
            position=parse_position(
                getattr(args, f"rot{i}_position"), f"rotor {i} position"
            ),
        )
        for i in (1, 2, 3)
    )
    return EnigmaConfig(
        reflector=parse_wiring(args.refl_wiring, "reflector wiring"),
        rotors=rotors,  # type: ignore[arg-type]
        plugboard=parse_plugboard(args.plugboard),
    )


# ────────────────────────────────────────────────────────────────────────
#  2. XXTEA settings
# ────────────────────────────────────────────────────────────────────────


def _as_bytes(value: str | bytes) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def parse_key(value: Optional[str | bytes]) -> Tuple[int, int, int, int]:
    raw = _as_bytes(_require(value, "key"))  # type: ignore[arg-type]
    if not raw:
        raise ConfigurationError("key must not be empty")
    return key_to_words(raw)


def parse_block_size(value: Optional[str | int]) -> int:
    if isinstance(value, int):
        size = value
    else:
        text = _require(value, "block size").strip()
        if not text.isascii() or not text.isdigit():
            raise ConfigurationError("block size should be all digits")
        size = int(text)
    if size < MIN_BLOCK_SIZE:
        raise ConfigurationError(f"block size must be at least {MIN_BLOCK_SIZE}")
    if size % 4:
        raise ConfigurationError("block size must be a multiple of 4")
    return size


def parse_xxtea_cfb_args(args: XxteaCfbArgs) -> XxteaCfbConfig:
    key = parse_key(args.key)
    block_size = parse_block_size(args.block_size)
    iv = _as_bytes(_require(args.iv, "iv"))  # type: ignore[arg-type]
    if len(iv) < block_size:
        raise ConfigurationError(
            f"iv is {len(iv)} bytes but must be at least block size ({block_size})"
        )
    return XxteaCfbConfig(key=key, iv=iv[:block_size], block_size=block_size)


# ────────────────────────────────────────────────────────────────────────
#  3. Text preprocessing
# ────────────────────────────────────────────────────────────────────────


def preprocess_message(data: bytes) -> bytes:
    """Lower-case ASCII letters and drop every other byte."""
    return Keyboard().type(data)


# ────────────────────────────────────────────────────────────────────────
#  4. Wheel database
# ────────────────────────────────────────────────────────────────────────

rotor_dict: Dict[str, str] = {
    "I":   "ekmflgdqvzntowyhxuspaibrcj",
    "II":  "ajdksiruxblhwtmcqgznpyfvoe",
    "III": "bdfhjlcprtxvznyeiwgakmusqo",
    "IV":  "esovpzjayquirhxlnftgkdcmwb",
    "V":   "vzbrgityupsdnhlxawmjqofeck",
    "VI":  "jpgvoumfyqbenhzrdkasxlictw",
    "VII": "nzjhgrcxmyswboufaivlpekqdt",
}

reflector_dict: Dict[str, str] = {
    "A": "ejmzalyxvbwfcrquontspikhgd",
    "B": "yruhqsldpxngokmiebfzcwvjat",
    "C": "fvpjiaoyedrzxwgctkuqsbnmhl",
}


def resolve_wiring(value: str, table: Dict[str, str]) -> str:
    """Map a wheel name such as ``II`` onto its wiring; anything else passes through."""
    return table.get(value.strip().upper(), value)


__all__ = [
    "parse_block_size",
    "parse_enigma_args",
    "parse_key",
    "parse_notch",
    "parse_plugboard",
    "parse_position",
    "parse_wiring",
    "parse_xxtea_cfb_args",
    "preprocess_message",
    "reflector_dict",
    "resolve_wiring",
    "rotor_dict",
]
