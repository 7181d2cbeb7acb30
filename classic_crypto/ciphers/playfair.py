"""
Playfair Digraph Substitution
=============================
Charles Wheatstone, 1854; promoted by Lord Playfair. Encrypts pairs of
letters (digraphs) using a 5×5 key square with J merged into I.

Key square: keyword letters first (deduplicated, in order), then the
remaining letters of AZ25 in order.

Rules for a digraph (a, b), applied in this order:
    same row      → take the letter to the right (left when decrypting)
    same column   → take the letter below (above when decrypting)
    otherwise     → rectangle: keep rows, swap columns

Plaintext preparation inserts a filler X between doubled letters of a
pair and pads an odd tail with X. Decryption cannot know which X's were
fillers, so it drops an X sitting between two equal letters and one
trailing X. That cleanup is lossy: a genuine X in such a spot is lost
too (e.g. "AXA" decrypts to "AA"). The raw text is kept in the trace.
"""

import logging
from typing import List, Tuple

from ..alphabet import clean
from ..result import CipherResult, EmptyInputError, OddLengthError, total

logger = logging.getLogger(__name__)

AZ25   = "ABCDEFGHIKLMNOPQRSTUVWXYZ"  # J merged to I
FILLER = "X"
SIDE   = 5


def _norm(text: str) -> str:
    return clean(text).replace("J", "I")


def build_matrix(keyword: str) -> List[str]:
    """The 25-letter key square, row-major."""
    matrix = []
    for ch in _norm(keyword) + AZ25:
        if ch not in matrix:
            matrix.append(ch)
    return matrix


def matrix_rows(keyword: str) -> List[str]:
    """The key square as five 5-letter rows, for display."""
    matrix = build_matrix(keyword)
    return ["".join(matrix[r * SIDE:(r + 1) * SIDE]) for r in range(SIDE)]


def prepare_plaintext(text: str, filler: str = FILLER) -> str:
    """J→I, letters only, split doubled pairs with the filler, pad to even length."""
    t = _norm(text)
    out = []
    i = 0
    while i < len(t):
        a = t[i]
        b = t[i + 1] if i + 1 < len(t) else None
        if b is None:
            out.append(a + filler)
            break
        if a == b:
            out.append(a + filler)
            i += 1
        else:
            out.append(a + b)
            i += 2
    return "".join(out)


def cleanup_decrypted(text: str, filler: str = FILLER) -> str:
    """Drop fillers between equal letters and one trailing filler (heuristic)."""
    out = []
    for i, cur in enumerate(text):
        prev = text[i - 1] if i > 0 else None
        nxt  = text[i + 1] if i + 1 < len(text) else None
        if cur == filler and prev is not None and prev == nxt:
            continue
        out.append(cur)
    result = "".join(out)
    if result.endswith(filler):
        result = result[:-1]
    return result


class PlayfairCipher:
    """Playfair cipher over a keyword-derived 5×5 square."""

    FILLER = FILLER

    def __init__(self, keyword: str):
        if not _norm(keyword):
            raise EmptyInputError("Keyword is required.")
        self.keyword = keyword
        self.matrix  = build_matrix(keyword)
        self._pos    = {ch: divmod(i, SIDE) for i, ch in enumerate(self.matrix)}

    def rows(self) -> List[str]:
        return matrix_rows(self.keyword)

    def _at(self, row: int, col: int) -> str:
        return self.matrix[(row % SIDE) * SIDE + (col % SIDE)]

    def _digraph(self, a: str, b: str, shift: int) -> Tuple[str, str, str]:
        ra, ca = self._pos[a]
        rb, cb = self._pos[b]
        if ra == rb:
            return self._at(ra, ca + shift), self._at(rb, cb + shift), "row"
        if ca == cb:
            return self._at(ra + shift, ca), self._at(rb + shift, cb), "column"
        return self._at(ra, cb), self._at(rb, ca), "rectangle"

    def _run(self, text: str, shift: int) -> Tuple[str, List[str]]:
        out, steps = [], []
        for i in range(0, len(text), 2):
            a, b = text[i], text[i + 1]
            x, y, rule = self._digraph(a, b, shift)
            out.append(x + y)
            steps.append(f"{a}{b} → {x}{y}  ({rule})")
        return "".join(out), steps

    def encrypt(self, plaintext: str) -> CipherResult:
        prepared = prepare_plaintext(plaintext, self.FILLER)
        if not prepared:
            raise EmptyInputError("Plaintext cannot be empty.")
        logger.debug(f"Playfair encrypt: {len(prepared) // 2} digraphs")

        result, steps = self._run(prepared, +1)
        pairs = " ".join(prepared[i:i + 2] for i in range(0, len(prepared), 2))
        return CipherResult.success(result, [f"Prepared: {pairs}"] + steps)

    def decrypt(self, ciphertext: str) -> CipherResult:
        prepared = _norm(ciphertext)
        if not prepared:
            raise EmptyInputError("Ciphertext cannot be empty.")
        if len(prepared) % 2:
            raise OddLengthError("Ciphertext length must be even.")
        logger.debug(f"Playfair decrypt: {len(prepared) // 2} digraphs")

        raw, steps = self._run(prepared, -1)
        pairs = " ".join(prepared[i:i + 2] for i in range(0, len(prepared), 2))
        return CipherResult.success(
            cleanup_decrypted(raw, self.FILLER),
            [f"Ciphertext: {pairs}"] + steps + [f"Raw: {raw}"],
        )


@total
def playfair_encrypt(text: str, keyword: str) -> CipherResult:
    return PlayfairCipher(keyword).encrypt(text)


@total
def playfair_decrypt(text: str, keyword: str) -> CipherResult:
    return PlayfairCipher(keyword).decrypt(text)
