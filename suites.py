# suites.py
from __future__ import annotations

from enum import Enum
from typing import Dict


class AlgorithmOption(Enum):
    ENIGMA = "enigma"
    XXTEA = "xxtea"
    XXTEA_CFB = "xxtea-cfb"

    def __str__(self) -> str:
        return DISPLAY_NAMES[self]


class Operation(Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


DISPLAY_NAMES: Dict[AlgorithmOption, str] = {
    AlgorithmOption.ENIGMA: "Enigma",
    AlgorithmOption.XXTEA: "XXTEA",
    AlgorithmOption.XXTEA_CFB: "XXTEA CFB",
}
