# word_packer.py
"""Little-endian byte <-> 32-bit word packing used by the XXTEA ciphers."""
from __future__ import annotations

from typing import List, Sequence, Tuple

from debug import Debug
from errors import CorruptionError

debug = Debug()
debug.disable("packer")

MASK = 0xFFFFFFFF
KEY_WORDS = 4


def bytes_to_words(data: bytes, include_length: bool) -> List[int]:
    """Pack *data* four bytes per word, zero-padding the last word.

    With *include_length* an extra word holding ``len(data)`` is appended so
    the padding can be stripped again on the way back.
    """
    length = len(data)
    n = (length + 3) >> 2
    words = [0] * (n + 1 if include_length else n)

    for i, byte in enumerate(data):
        words[i >> 2] |= byte << ((i & 3) << 3)

    if include_length:
        words[n] = length & MASK

    debug.log("packer", f"{length} bytes -> {len(words)} words (length={include_length})")
    return words


def words_to_bytes(words: Sequence[int], include_length: bool) -> bytes:
    """Unpack *words*; with *include_length* the last word is the true byte count."""
    n = len(words) << 2

    if include_length:
        if not words:
            raise CorruptionError("No length word present")
        m = words[-1]
        n -= 4
        if m < n - 3 or m > n:
            raise CorruptionError(
                f"Embedded length {m} does not fit {n} payload bytes"
            )
        n = m

    out = bytes((words[i >> 2] >> ((i & 3) << 3)) & 0xFF for i in range(n))
    debug.log("packer", f"{len(words)} words -> {n} bytes (length={include_length})")
    return out


def key_to_words(key: bytes) -> Tuple[int, int, int, int]:
    """Pack a key string into exactly four words, truncating or zero-padding."""
    words = bytes_to_words(key, include_length=False)[:KEY_WORDS]
    words += [0] * (KEY_WORDS - len(words))
    return tuple(words)  # type: ignore[return-value]
