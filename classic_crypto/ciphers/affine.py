"""
Affine Linear Substitution
==========================
A monoalphabetic cipher built from a linear function mod 26:

    E(x) = (a·x + b) mod 26
    D(y) = a⁻¹·(y − b) mod 26

`a` must be invertible mod 26 (coprime with 26), which leaves exactly
twelve usable values. With a = 1 this degenerates to a Caesar shift.

Key space: 12 × 26 = 312 keys. Trivially brute-forced; educational only.
"""

import logging

from ..alphabet import SIZE, clean, mod, modular_inverse, to_index, to_letter
from ..result import CipherResult, EmptyInputError, InvalidKeyError, NoInverseError, total

logger = logging.getLogger(__name__)

VALID_A_VALUES = (1, 3, 5, 7, 9, 11, 15, 17, 19, 21, 23, 25)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class AffineCipher:
    """Affine cipher E(x) = (a·x + b) mod 26."""

    def __init__(self, a: int, b: int):
        if not _is_int(a) or a not in VALID_A_VALUES:
            raise InvalidKeyError(
                f"'a' must be coprime with 26. Valid values: "
                f"{', '.join(str(v) for v in VALID_A_VALUES)}."
            )
        if not _is_int(b) or not 0 <= b < SIZE:
            raise InvalidKeyError("'b' must be between 0 and 25.")
        self.a = a
        self.b = b

    @property
    def inverse(self) -> int:
        """a⁻¹ mod 26. Cannot fail for a validated key."""
        inv = modular_inverse(self.a)
        if inv is None:
            raise NoInverseError(f"No modular inverse exists for a={self.a} mod 26.")
        return inv

    def encrypt(self, plaintext: str) -> CipherResult:
        text = clean(plaintext)
        if not text:
            raise EmptyInputError("Plaintext cannot be empty.")
        logger.debug(f"Affine encrypt: a={self.a} b={self.b}, {len(text)} letters")

        out, steps = [], []
        for ch in text:
            x = to_index(ch)
            c = mod(self.a * x + self.b)
            out.append(to_letter(c))
            steps.append(
                f"E({ch}) = ({self.a}×{x} + {self.b}) mod 26 = {c}  →  {to_letter(c)}"
            )
        return CipherResult.success("".join(out), steps)

    def decrypt(self, ciphertext: str) -> CipherResult:
        inv = self.inverse
        text = clean(ciphertext)
        if not text:
            raise EmptyInputError("Ciphertext cannot be empty.")
        logger.debug(f"Affine decrypt: a⁻¹={inv} b={self.b}, {len(text)} letters")

        out, steps = [], []
        for ch in text:
            y = to_index(ch)
            p = mod(inv * (y - self.b))
            out.append(to_letter(p))
            steps.append(
                f"D({ch}) = {inv}×({y} − {self.b}) mod 26 = {p}  →  {to_letter(p)}"
            )
        return CipherResult.success("".join(out), steps)


@total
def affine_encrypt(text: str, a: int, b: int) -> CipherResult:
    return AffineCipher(a, b).encrypt(text)


@total
def affine_decrypt(text: str, a: int, b: int) -> CipherResult:
    return AffineCipher(a, b).decrypt(text)
