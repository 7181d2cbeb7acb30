"""
Hill Linear-Algebraic Block Cipher
==================================
Lester S. Hill, 1929. The first polygraphic cipher practical for more
than three letters at a time.

Text is split into blocks of n letters; each block is a column vector
of letter indices, multiplied by the n×n key matrix mod 26:

    C = K · P  (mod 26)
    P = K⁻¹ · C  (mod 26)

The key must be invertible mod 26. That is checked before any text is
touched, for encryption as well as decryption, so a key that could
never be decrypted is never used to encrypt.

Supported sizes: 2×2, 3×3, 4×4, 5×5. Text is padded with X to a
multiple of n; the padding is not removed on decryption.
"""

import logging
from typing import List, Sequence

from ..alphabet import chunk, clean, mod, to_index, to_letter
from ..matrix import MatrixReport, invert_matrix, mat_vec_mul, validate_matrix
from ..result import CipherResult, EmptyInputError, InvalidKeyError, total

logger = logging.getLogger(__name__)

MATRIX_SIZES = (2, 3, 4, 5)

DEFAULT_MATRIX_VALUES = {
    2: (3, 3, 2, 5),
    3: (6, 24, 1, 13, 16, 10, 20, 17, 15),
    4: (3, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5, 8, 9, 8, 9, 3),
    5: (2, 4, 5, 0, 1, 9, 2, 1, 0, 6, 3, 5, 8, 1, 11, 1, 0, 3, 21, 2, 4, 7, 2, 1, 7),
}


def build_matrix(values: Sequence[int], n: int) -> List[List[int]]:
    """Row-major n×n matrix from a flat list. Missing cells are 0."""
    cells = list(values)
    cells += [0] * (n * n - len(cells))
    return [[cells[i * n + j] for j in range(n)] for i in range(n)]


def _check_shape(matrix) -> List[List[int]]:
    try:
        rows = [list(row) for row in matrix]
    except TypeError:
        raise InvalidKeyError("Key matrix must be a list of rows.")
    n = len(rows)
    if n not in MATRIX_SIZES:
        raise InvalidKeyError(
            f"Key matrix must be n×n with n in {', '.join(str(s) for s in MATRIX_SIZES)}."
        )
    if any(len(row) != n for row in rows):
        raise InvalidKeyError("Key matrix must be square.")
    for row in rows:
        for v in row:
            if not isinstance(v, int) or isinstance(v, bool):
                raise InvalidKeyError(f"Key matrix entries must be integers, got {v!r}.")
    return [[mod(v) for v in row] for row in rows]


class HillCipher:
    """Hill cipher with an n×n key matrix (n = 2..5)."""

    PAD = "X"

    def __init__(self, matrix: Sequence[Sequence[int]]):
        self.matrix  = _check_shape(matrix)
        self.n       = len(self.matrix)
        # raises SingularMatrixError
        self.inverse = invert_matrix(self.matrix)

    def report(self) -> MatrixReport:
        return validate_matrix(self.matrix)

    def _prepare(self, text: str, what: str) -> str:
        t = clean(text)
        if not t:
            raise EmptyInputError(f"{what} cannot be empty.")
        if len(t) % self.n:
            t += self.PAD * (self.n - len(t) % self.n)
        return t

    def _apply(self, text: str, matrix, label: str) -> CipherResult:
        out, steps = [], []
        for block in chunk(text, self.n):
            v = [to_index(c) for c in block]
            r = mat_vec_mul(matrix, v)
            letters = "".join(to_letter(x) for x in r)
            out.append(letters)
            steps.append(
                f"[{','.join(block)}]=[{','.join(map(str, v))}]  ×  {label}  =  "
                f"[{','.join(map(str, r))}]  →  {letters}"
            )
        return CipherResult.success("".join(out), steps)

    def encrypt(self, plaintext: str) -> CipherResult:
        text = self._prepare(plaintext, "Plaintext")
        logger.debug(f"Hill encrypt: {self.n}×{self.n} key, {len(text) // self.n} blocks")
        return self._apply(text, self.matrix, "M")

    def decrypt(self, ciphertext: str) -> CipherResult:
        text = self._prepare(ciphertext, "Ciphertext")
        logger.debug(f"Hill decrypt: {self.n}×{self.n} key, {len(text) // self.n} blocks")
        return self._apply(text, self.inverse, "M⁻¹")


def matrix_report(matrix: Sequence[Sequence[int]]) -> MatrixReport:
    """Validity report for a candidate key; shape errors raise InvalidKeyError."""
    return validate_matrix(_check_shape(matrix))


@total
def hill_encrypt(text: str, key_matrix: Sequence[Sequence[int]]) -> CipherResult:
    return HillCipher(key_matrix).encrypt(text)


@total
def hill_decrypt(text: str, key_matrix: Sequence[Sequence[int]]) -> CipherResult:
    return HillCipher(key_matrix).decrypt(text)
