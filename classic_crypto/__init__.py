"""
classic_crypto — Classical Cipher Suite
=======================================
Five pre-modern ciphers, from 1553 to 1945, with step-by-step traces.

Ciphers:
    VIGENÈRE   — Polyalphabetic shift (Bellaso / Vigenère, 1553)
    AFFINE     — Linear substitution E(x) = (a·x + b) mod 26
    PLAYFAIR   — 5×5 digraph substitution (Wheatstone, 1854)
    HILL       — n×n matrix block substitution mod 26 (Hill, 1929)
    ENIGMA     — Enigma I rotor machine: rings, plugboard, double stepping

Every cipher comes as a class that raises `CipherError` on bad input,
and as a module-level function that always returns a `CipherResult`.
None of these is secure. They are here to be taken apart.

License: Apache 2.0
"""

__version__ = "1.0.0"

from .result                 import (
    CipherError,
    CipherResult,
    EmptyInputError,
    InvalidInputError,
    InvalidKeyError,
    InvalidPlugboardError,
    InvalidPositionError,
    InvalidRingError,
    InvalidSelectionError,
    NoInverseError,
    OddLengthError,
    SingularMatrixError,
)
from .alphabet               import ALPHABET, clean, mod, modular_inverse
from .matrix                 import invert_matrix, validate_matrix
from .ciphers.vigenere       import VigenereCipher, build_tableau, vigenere_encrypt, vigenere_decrypt
from .ciphers.affine         import AffineCipher, VALID_A_VALUES, affine_encrypt, affine_decrypt
from .ciphers.playfair       import PlayfairCipher, matrix_rows, playfair_encrypt, playfair_decrypt
from .ciphers.hill           import (
    DEFAULT_MATRIX_VALUES,
    MATRIX_SIZES,
    HillCipher,
    build_matrix,
    hill_decrypt,
    hill_encrypt,
    matrix_report,
)
from .ciphers.enigma         import (
    REFLECTOR_KEYS,
    REFLECTORS,
    ROTOR_KEYS,
    ROTORS,
    EnigmaConfig,
    EnigmaMachine,
    enigma_process,
)
from .suite                  import AffineKey, HillKey, Mode, PlayfairKey, VigenereKey, process

__all__ = [
    "CipherError",
    "CipherResult",
    "EmptyInputError",
    "InvalidInputError",
    "InvalidKeyError",
    "InvalidPlugboardError",
    "InvalidPositionError",
    "InvalidRingError",
    "InvalidSelectionError",
    "NoInverseError",
    "OddLengthError",
    "SingularMatrixError",
    "ALPHABET",
    "clean",
    "mod",
    "modular_inverse",
    "invert_matrix",
    "validate_matrix",
    "VigenereCipher",
    "build_tableau",
    "vigenere_encrypt",
    "vigenere_decrypt",
    "AffineCipher",
    "VALID_A_VALUES",
    "affine_encrypt",
    "affine_decrypt",
    "PlayfairCipher",
    "matrix_rows",
    "playfair_encrypt",
    "playfair_decrypt",
    "HillCipher",
    "DEFAULT_MATRIX_VALUES",
    "MATRIX_SIZES",
    "build_matrix",
    "matrix_report",
    "hill_encrypt",
    "hill_decrypt",
    "EnigmaConfig",
    "EnigmaMachine",
    "ROTORS",
    "REFLECTORS",
    "ROTOR_KEYS",
    "REFLECTOR_KEYS",
    "enigma_process",
    "Mode",
    "VigenereKey",
    "AffineKey",
    "PlayfairKey",
    "HillKey",
    "process",
]
