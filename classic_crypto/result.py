"""
Cipher results and the error taxonomy
=====================================
Every cipher returns a `CipherResult`. The class-level API raises a
`CipherError` subclass on bad input; the module-level functions are
wrapped with `total` so callers (a UI, the CLI) always get a result
back, with `error` populated instead of an exception.

Error codes:
    InvalidInput      text or key is not a string
    EmptyInput        text or key has no letters after cleaning
    InvalidKey        key material fails a cipher precondition
    InvalidSelection  unknown rotor / reflector / cipher
    InvalidPosition   Enigma start position is not a single letter
    InvalidRing       Enigma ring setting is not a single letter
    InvalidPlugboard  malformed, self or duplicate plugboard pair
    NoInverse         affine `a` has no inverse mod 26
    SingularMatrix    Hill matrix is not invertible mod 26
    OddLength         Playfair ciphertext cannot be split into digraphs
"""

import functools
import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

logger = logging.getLogger(__name__)


class CipherError(ValueError):
    """Base class. `code` is the stable, machine-readable error name."""

    code = "CipherError"


class InvalidInputError(CipherError):
    code = "InvalidInput"


class EmptyInputError(CipherError):
    code = "EmptyInput"


class InvalidKeyError(CipherError):
    code = "InvalidKey"


class InvalidSelectionError(CipherError):
    code = "InvalidSelection"


class InvalidPositionError(CipherError):
    code = "InvalidPosition"


class InvalidRingError(CipherError):
    code = "InvalidRing"


class InvalidPlugboardError(CipherError):
    code = "InvalidPlugboard"


class NoInverseError(CipherError):
    code = "NoInverse"


class SingularMatrixError(CipherError):
    code = "SingularMatrix"


class OddLengthError(CipherError):
    code = "OddLength"


@dataclass(frozen=True)
class CipherResult:
    result: str
    trace: Tuple[str, ...] = field(default_factory=tuple)
    error: Optional[str] = None
    error_code: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, result: str, trace) -> "CipherResult":
        return cls(result=result, trace=tuple(trace))

    @classmethod
    def failure(cls, exc: CipherError) -> "CipherResult":
        return cls(result="", trace=(), error=str(exc), error_code=exc.code)


def total(func):
    """Turn a raising cipher call into one that always returns a CipherResult."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> CipherResult:
        try:
            return func(*args, **kwargs)
        except CipherError as exc:
            logger.info(f"{func.__name__} rejected input: {exc.code}: {exc}")
            return CipherResult.failure(exc)

    return wrapper
