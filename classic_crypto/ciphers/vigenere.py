"""
Vigenère Polyalphabetic Cipher
==============================
Each plaintext letter is shifted by the key letter at the same position,
with the key repeated as often as needed:

    C[i] = (P[i] + K[i mod len(K)]) mod 26
    P[i] = (C[i] - K[i mod len(K)]) mod 26

Historical note: Giovan Battista Bellaso, 1553, later credited to Blaise
de Vigenère. Called "le chiffre indéchiffrable" for 300 years until
Kasiski (1863) showed how to recover the key length.

Input is reduced to A-Z before processing; spaces and punctuation are
dropped, not passed through.
"""

import logging
from collections import namedtuple
from typing import List

from ..alphabet import ALPHABET, clean, mod, to_index, to_letter
from ..result import CipherResult, EmptyInputError, total

logger = logging.getLogger(__name__)

TableauRow = namedtuple("TableauRow", "letter row")


class VigenereCipher:
    """Vigenère cipher with a repeating alphabetic key."""

    TABLEAU_ROWS = 6

    def __init__(self, key: str):
        self._key = clean(key)
        if not self._key:
            raise EmptyInputError("Key must contain at least one letter (A–Z).")

    @property
    def key(self) -> str:
        return self._key

    def _shifts(self) -> List[int]:
        return [to_index(k) for k in self._key]

    def encrypt(self, plaintext: str) -> CipherResult:
        text = clean(plaintext)
        if not text:
            raise EmptyInputError("Plaintext cannot be empty.")
        shifts = self._shifts()
        logger.debug(f"Vigenère encrypt: {len(text)} letters, key period {len(shifts)}")

        out, steps = [], []
        for i, ch in enumerate(text):
            p  = to_index(ch)
            k  = shifts[i % len(shifts)]
            c  = mod(p + k)
            out.append(to_letter(c))
            steps.append(
                f"[{i + 1:02d}]  {ch}({p}) + {self._key[i % len(shifts)]}({k}) = {to_letter(c)}({c})"
            )
        return CipherResult.success("".join(out), steps)

    def decrypt(self, ciphertext: str) -> CipherResult:
        text = clean(ciphertext)
        if not text:
            raise EmptyInputError("Ciphertext cannot be empty.")
        shifts = self._shifts()
        logger.debug(f"Vigenère decrypt: {len(text)} letters, key period {len(shifts)}")

        out, steps = [], []
        for i, ch in enumerate(text):
            c  = to_index(ch)
            k  = shifts[i % len(shifts)]
            p  = mod(c - k)
            out.append(to_letter(p))
            steps.append(
                f"[{i + 1:02d}]  {ch}({c}) − {self._key[i % len(shifts)]}({k}) = {to_letter(p)}({p})"
            )
        return CipherResult.success("".join(out), steps)

    def tableau(self, max_rows: int = TABLEAU_ROWS) -> List[TableauRow]:
        return build_tableau(self._key, max_rows)


def build_tableau(key: str, max_rows: int = VigenereCipher.TABLEAU_ROWS) -> List[TableauRow]:
    """
    Rows of the tabula recta for the first `max_rows` key letters.
    Each row is the alphabet rotated left by the letter's value.
    """
    rows = []
    for letter in clean(key)[:max_rows]:
        shift = to_index(letter)
        rows.append(TableauRow(letter, ALPHABET[shift:] + ALPHABET[:shift]))
    return rows


@total
def vigenere_encrypt(text: str, key: str) -> CipherResult:
    if not clean(text):
        raise EmptyInputError("Plaintext cannot be empty.")
    return VigenereCipher(key).encrypt(text)


@total
def vigenere_decrypt(text: str, key: str) -> CipherResult:
    if not clean(text):
        raise EmptyInputError("Ciphertext cannot be empty.")
    return VigenereCipher(key).decrypt(text)
