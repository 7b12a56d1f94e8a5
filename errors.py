# errors.py
from __future__ import annotations


class CipherError(Exception):
    """Base exception for every failure the cipher engine reports."""


class ConfigurationError(CipherError, ValueError):
    """Malformed wiring, notch, position, plugboard, key, IV or block size."""


class CorruptionError(CipherError, ValueError):
    """Ciphertext was not produced by this cipher/key pair, or was truncated."""


class InvariantError(AssertionError):
    """Internal defect: the packer or the core returned an impossible shape."""
