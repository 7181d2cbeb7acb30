"""
Alphabet Utilities
==================
The 26-letter Latin alphabet every cipher in the suite works over.

Letters map bijectively to 0..25 (A=0 … Z=25) and all arithmetic is
done mod 26. Python's `%` already returns a non-negative remainder for
a positive modulus, but `mod()` is kept as the single place the ciphers
reduce values so the formulas read the same everywhere.
"""

from typing import List, Optional

from .result import InvalidInputError

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
SIZE     = len(ALPHABET)

_INDEX = {ch: i for i, ch in enumerate(ALPHABET)}


def clean(text: Optional[str]) -> str:
    """Uppercase and keep A-Z only. Everything else is discarded."""
    if text is None:
        return ""
    if not isinstance(text, str):
        raise InvalidInputError(f"Expected text, got {type(text).__name__}.")
    return "".join(ch for ch in text.upper() if ch in _INDEX)


def is_letter(ch) -> bool:
    return isinstance(ch, str) and len(ch) == 1 and ch in _INDEX


def to_index(letter: str) -> int:
    try:
        return _INDEX[letter]
    except KeyError:
        raise ValueError(f"Invalid character {letter!r}: expected A-Z.")


def to_letter(index: int) -> str:
    return ALPHABET[index % SIZE]


def mod(n: int, m: int = SIZE) -> int:
    """Non-negative remainder of n mod m, for n that may be negative."""
    return ((n % m) + m) % m


def modular_inverse(a: int, m: int = SIZE) -> Optional[int]:
    """
    Return x with a·x ≡ 1 (mod m), or None if gcd(a, m) != 1.

    Linear search: the ring is tiny and fixed, so there is no point
    in an extended-Euclid implementation here.
    """
    a = mod(a, m)
    for x in range(1, m):
        if (a * x) % m == 1:
            return x
    return None


def chunk(text: str, size: int) -> List[str]:
    return [text[i:i + size] for i in range(0, len(text), size)]
