# xxtea_cfb.py
"""XXTEA in ciphertext-feedback mode.

Each block's mask is the raw XXTEA encryption of the previous ciphertext
block (the IV for the first one).  Decryption only ever runs the cipher
forwards, so the degenerate single-word case never arises here.
"""
from __future__ import annotations

from debug import Debug
from errors import InvariantError
from settings import XxteaCfbArgs, XxteaCfbConfig
from utilities import parse_xxtea_cfb_args
import word_packer
from xxtea_cipher import encrypt_words

debug = Debug()
debug.disable("cfb")


class XxteaCfb:
    def __init__(self, args: XxteaCfbArgs | XxteaCfbConfig) -> None:
        config = args if isinstance(args, XxteaCfbConfig) else parse_xxtea_cfb_args(args)

        self.key = config.key
        self.iv = config.iv
        self.block_size = config.block_size

    def _mask(self, prev: bytes) -> bytes:
        words = encrypt_words(word_packer.bytes_to_words(prev, False), self.key)
        intermediate = word_packer.words_to_bytes(words, False)
        if len(intermediate) != self.block_size:
            raise InvariantError(
                f"Intermediate block is {len(intermediate)} bytes, "
                f"expected {self.block_size}"
            )
        return intermediate

    def _chunks(self, data: bytes):
        for start in range(0, len(data), self.block_size):
            yield data[start : start + self.block_size]

    def encrypt(self, data: bytes) -> bytes:
        out = bytearray()
        prev = self.iv[: self.block_size]

        for chunk in self._chunks(data):
            mask = self._mask(prev)
            cipher = bytes(a ^ b for a, b in zip(chunk, mask))
            out += cipher
            prev = cipher

        debug.log("cfb", f"encrypted {len(data)} bytes in blocks of {self.block_size}")
        return bytes(out)

    def decrypt(self, data: bytes) -> bytes:
        out = bytearray()
        prev = self.iv[: self.block_size]

        for chunk in self._chunks(data):
            mask = self._mask(prev)
            out += bytes(a ^ b for a, b in zip(chunk, mask))
            # feedback is the received ciphertext, never the recovered plaintext
            prev = chunk

        debug.log("cfb", f"decrypted {len(data)} bytes in blocks of {self.block_size}")
        return bytes(out)

    def __repr__(self) -> str:
        return f"<XxteaCfb block_size={self.block_size}>"
