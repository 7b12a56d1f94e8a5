# algorithms.py
"""The cipher facade: one interface, a closed set of implementations."""
from __future__ import annotations

from typing import Protocol, Union

from enigma_machine import Enigma
from settings import SettingsState
from suites import AlgorithmOption, Operation
from xxtea_cfb import XxteaCfb
from xxtea_cipher import Xxtea


class Algorithm(Protocol):
    def encrypt(self, data: bytes) -> bytes: ...

    def decrypt(self, data: bytes) -> bytes: ...


Cipher = Union[Enigma, Xxtea, XxteaCfb]


def get_algorithm(settings: SettingsState) -> Cipher:
    """Build the cipher selected in *settings*; raises ConfigurationError."""
    option = settings.algorithm_option
    if option is AlgorithmOption.ENIGMA:
        return Enigma(settings.enigma_args)
    if option is AlgorithmOption.XXTEA:
        return Xxtea(settings.xxtea_args)
    if option is AlgorithmOption.XXTEA_CFB:
        return XxteaCfb(settings.xxtea_cfb_args)
    raise ValueError(f"Unknown algorithm option {option!r}")


def run(algorithm: Algorithm, operation: Operation, data: bytes) -> bytes:
    if operation is Operation.ENCRYPT:
        return algorithm.encrypt(data)
    return algorithm.decrypt(data)


__all__ = [
    "Algorithm",
    "AlgorithmOption",
    "Cipher",
    "Operation",
    "get_algorithm",
    "run",
]
