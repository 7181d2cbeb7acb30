"""
Cipher dispatch
===============
One entry point for every cipher in the suite:

    process(text, key, mode) → CipherResult

The key-material type *is* the cipher selector: a `VigenereKey` runs
Vigenère, an `EnigmaConfig` runs the Enigma, and so on. The set of
variants is closed; anything else is an `InvalidSelection` failure.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Sequence, Union

from .ciphers.affine import AffineCipher
from .ciphers.enigma import EnigmaConfig, EnigmaMachine
from .ciphers.hill import HillCipher
from .ciphers.playfair import PlayfairCipher
from .ciphers.vigenere import VigenereCipher
from .result import CipherResult, InvalidSelectionError, total

logger = logging.getLogger(__name__)


class Mode(enum.Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


@dataclass(frozen=True)
class VigenereKey:
    key: str


@dataclass(frozen=True)
class AffineKey:
    a: int
    b: int


@dataclass(frozen=True)
class PlayfairKey:
    keyword: str


@dataclass(frozen=True)
class HillKey:
    matrix: Sequence[Sequence[int]]


CipherKey = Union[VigenereKey, AffineKey, PlayfairKey, HillKey, EnigmaConfig]


def _build(key: CipherKey):
    if isinstance(key, VigenereKey):
        return VigenereCipher(key.key)
    if isinstance(key, AffineKey):
        return AffineCipher(key.a, key.b)
    if isinstance(key, PlayfairKey):
        return PlayfairCipher(key.keyword)
    if isinstance(key, HillKey):
        return HillCipher(key.matrix)
    if isinstance(key, EnigmaConfig):
        return EnigmaMachine(key)
    raise InvalidSelectionError(f"Unknown cipher key type: {type(key).__name__}.")


@total
def process(text: str, key: CipherKey, mode: Mode = Mode.ENCRYPT) -> CipherResult:
    """Run the cipher selected by `key`. Enigma ignores `mode`."""
    if not isinstance(mode, Mode):
        raise InvalidSelectionError(f"Unknown mode: {mode!r}.")
    cipher = _build(key)
    logger.debug(f"process: {type(cipher).__name__} {mode.value}")
    if mode is Mode.DECRYPT:
        return cipher.decrypt(text)
    return cipher.encrypt(text)
