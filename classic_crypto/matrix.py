"""
Matrix Algebra over Z/26Z
=========================
Square integer matrices reduced mod 26, as used by the Hill cipher.

Inversion is Gauss-Jordan elimination on the augmented matrix [M | I].
26 is not prime, so a pivot must be a *unit* mod 26 (odd and not 13),
not merely non-zero. When no row has a unit in the pivot column, the
column can still be unimodular (e.g. 2 and 13): adding one row to
another then produces a unit. Only when that fails too is the matrix
singular, which makes "invertible" agree exactly with
gcd(det mod 26, 26) = 1.

The determinant is only used for reporting. Python integers do not
overflow, so plain Laplace expansion is exact for every supported size.
"""

import logging
from collections import namedtuple
from typing import List, Optional, Sequence

from .alphabet import SIZE, mod, modular_inverse
from .result import SingularMatrixError

logger = logging.getLogger(__name__)

Matrix = List[List[int]]

MatrixReport = namedtuple("MatrixReport", "valid determinant determinant_inverse message")


def identity(n: int) -> Matrix:
    return [[1 if i == j else 0 for j in range(n)] for i in range(n)]


def mat_vec_mul(matrix: Sequence[Sequence[int]], vector: Sequence[int]) -> List[int]:
    """M·v mod 26, with v treated as a column vector."""
    return [mod(sum(mod(a) * x for a, x in zip(row, vector))) for row in matrix]


def mat_mul(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    cols = list(zip(*b))
    return [[mod(sum(x * y for x, y in zip(row, col))) for col in cols] for row in a]


def _find_pivot(aug: Matrix, col: int) -> Optional[int]:
    n = len(aug)
    for row in range(col, n):
        if modular_inverse(aug[row][col]) is not None:
            return row

    # no unit on its own: try row[r] += k·row[s]
    for r in range(col, n):
        for s in range(col, n):
            if s == r:
                continue
            for k in range(1, SIZE):
                if modular_inverse(aug[r][col] + k * aug[s][col]) is not None:
                    aug[r] = [mod(x + k * y) for x, y in zip(aug[r], aug[s])]
                    return r
    return None


def invert_matrix(matrix: Sequence[Sequence[int]]) -> Matrix:
    """
    Inverse of `matrix` mod 26.

    Raises SingularMatrixError if the matrix is not invertible mod 26.
    """
    n = len(matrix)
    aug = [[mod(v) for v in row] + ident for row, ident in zip(matrix, identity(n))]

    for col in range(n):
        pivot = _find_pivot(aug, col)
        if pivot is None:
            logger.debug(f"No usable pivot in column {col}: matrix is singular mod 26")
            raise SingularMatrixError(
                "Matrix is not invertible mod 26. Choose different key values."
            )
        if pivot != col:
            aug[col], aug[pivot] = aug[pivot], aug[col]

        inv = modular_inverse(aug[col][col])
        aug[col] = [mod(v * inv) for v in aug[col]]

        for row in range(n):
            if row == col:
                continue
            factor = aug[row][col]
            if factor == 0:
                continue
            aug[row] = [mod(v - factor * p) for v, p in zip(aug[row], aug[col])]

    return [row[n:] for row in aug]


def determinant(matrix: Sequence[Sequence[int]]) -> int:
    """Exact integer determinant by cofactor expansion along the first row."""
    n = len(matrix)
    if n == 1:
        return matrix[0][0]
    if n == 2:
        return matrix[0][0] * matrix[1][1] - matrix[0][1] * matrix[1][0]
    det = 0
    for j in range(n):
        minor = [row[:j] + row[j + 1:] for row in matrix[1:]]
        sign = 1 if j % 2 == 0 else -1
        det += sign * matrix[0][j] * determinant(minor)
    return det


def validate_matrix(matrix: Sequence[Sequence[int]]) -> MatrixReport:
    """Validity / determinant report for display. Validity comes from inversion."""
    try:
        invert_matrix(matrix)
        valid = True
    except SingularMatrixError:
        valid = False

    det = mod(determinant([[mod(v) for v in row] for row in matrix]))
    det_inv = modular_inverse(det)
    if valid:
        message = f"det mod 26 = {det}  →  invertible ✓  (det⁻¹ = {det_inv})"
    else:
        message = f"det mod 26 = {det}  →  NOT invertible ✗ — choose different values"
    return MatrixReport(valid, det, det_inv, message)
