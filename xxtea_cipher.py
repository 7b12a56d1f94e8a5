# xxtea_cipher.py
"""XXTEA (corrected block TEA) over whole buffers.

All arithmetic is done on Python ints and masked back to 32 bits after
every addition, subtraction and left shift.
"""
from __future__ import annotations

from typing import List, Sequence

from debug import Debug
from errors import CorruptionError
from word_packer import MASK, bytes_to_words, key_to_words, words_to_bytes
from settings import XxteaArgs
from utilities import parse_key

debug = Debug()
debug.disable("xxtea")

DELTA = 0x9E3779B9


def mx(sum_: int, y: int, z: int, p: int, e: int, k: Sequence[int]) -> int:
    return (
        (((z >> 5) ^ (y << 2) & MASK) + ((y >> 3) ^ (z << 4) & MASK))
        ^ ((sum_ ^ y) + (k[(p & 3) ^ e] ^ z))
    ) & MASK


def encrypt_words(v: List[int], k: Sequence[int]) -> List[int]:
    """Encrypt the word list *v* in place and return it."""
    if not v:
        return v

    n = len(v) - 1
    z = v[n]
    sum_ = 0

    for _ in range(6 + 52 // len(v)):
        sum_ = (sum_ + DELTA) & MASK
        e = (sum_ >> 2) & 3

        for p in range(n):
            y = v[p + 1]
            v[p] = (v[p] + mx(sum_, y, z, p, e, k)) & MASK
            z = v[p]

        # with a single word this is a self-referential update of v[0]
        y = v[0]
        v[n] = (v[n] + mx(sum_, y, z, n, e, k)) & MASK
        z = v[n]

    return v


def decrypt_words(v: List[int], k: Sequence[int]) -> List[int]:
    """Decrypt the word list *v* in place and return it."""
    if not v:
        return v

    n = len(v) - 1
    y = v[0]
    sum_ = ((6 + 52 // len(v)) * DELTA) & MASK

    while sum_ != 0:
        e = (sum_ >> 2) & 3

        for p in range(n, 0, -1):
            z = v[p - 1]
            v[p] = (v[p] - mx(sum_, y, z, p, e, k)) & MASK
            y = v[p]

        z = v[n]
        v[0] = (v[0] - mx(sum_, y, z, 0, e, k)) & MASK
        y = v[0]

        sum_ = (sum_ - DELTA) & MASK

    return v


# ────────────────────────────────────────────────────────────────────────
#  Byte-level helpers
# ────────────────────────────────────────────────────────────────────────


def _key(key: str | bytes) -> Sequence[int]:
    return key_to_words(key.encode("utf-8") if isinstance(key, str) else key)


def encrypt(data: bytes, key: str | bytes) -> bytes:
    """Encrypt with a trailing length word so padding can be undone."""
    return words_to_bytes(encrypt_words(bytes_to_words(data, True), _key(key)), False)


def decrypt(data: bytes, key: str | bytes) -> bytes:
    return words_to_bytes(decrypt_words(bytes_to_words(data, False), _key(key)), True)


def encrypt_raw(data: bytes, key: str | bytes) -> bytes:
    """Encrypt without a length word; output is rounded up to whole words."""
    return words_to_bytes(encrypt_words(bytes_to_words(data, False), _key(key)), False)


def decrypt_raw(data: bytes, key: str | bytes) -> bytes:
    return words_to_bytes(decrypt_words(bytes_to_words(data, False), _key(key)), False)


class Xxtea:
    """Whole-buffer XXTEA carrying the plaintext length in the last word."""

    def __init__(self, args: XxteaArgs) -> None:
        self.key = parse_key(args.key)

    def encrypt(self, data: bytes) -> bytes:
        words = encrypt_words(bytes_to_words(data, True), self.key)
        debug.log("xxtea", f"encrypted {len(data)} bytes into {len(words)} words")
        return words_to_bytes(words, False)

    def decrypt(self, data: bytes) -> bytes:
        if not data or len(data) & 3:
            raise CorruptionError(
                f"Ciphertext length {len(data)} is not a positive multiple of 4"
            )
        words = decrypt_words(bytes_to_words(data, False), self.key)
        debug.log("xxtea", f"decrypted {len(words)} words")
        return words_to_bytes(words, True)

    def __repr__(self) -> str:
        return "<Xxtea>"


__all__ = [
    "DELTA",
    "Xxtea",
    "decrypt",
    "decrypt_raw",
    "decrypt_words",
    "encrypt",
    "encrypt_raw",
    "encrypt_words",
    "mx",
]
