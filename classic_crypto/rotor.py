"""
Rotor Signal Path
=================
Building blocks of the Enigma I: rotors, reflectors, plugboard, and the
per-letter rotor state.

Wheels here are *stateless* wiring descriptions. The moving part, the
three rotor positions, lives in `RotorState`, an immutable value that
the machine re-creates on every keypress. Nothing in this module keeps
state between calls.

Ring setting (Ringstellung) shifts the wiring relative to the visible
letter:

    forward(n)  = W[(n + pos − ring) mod 26] − pos + ring   (mod 26)
    backward(n) = W⁻¹[(n + pos − ring) mod 26] − pos + ring (mod 26)

The notch is fixed to the wiring core, so the visible turnover letter
moves with the ring: a rotor is at its notch when
pos == (notch − ring) mod 26.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Tuple

from .alphabet import ALPHABET, SIZE, is_letter, mod, to_index, to_letter
from .result import InvalidPlugboardError

logger = logging.getLogger(__name__)


class Rotor:
    def __init__(self, name: str, wiring: str, notch: str):
        if sorted(wiring) != sorted(ALPHABET):
            raise ValueError("wiring must be a permutation of the alphabet")
        if not is_letter(notch):
            raise ValueError("notch must be a single letter A-Z")
        self.name   = name
        self.wiring = wiring
        self.notch  = notch
        self._fwd   = [to_index(c) for c in wiring]
        self._rev   = [wiring.index(c) for c in ALPHABET]

    def forward(self, n: int, pos: int, ring: int) -> int:
        return mod(self._fwd[mod(n + pos - ring)] - pos + ring)

    def backward(self, n: int, pos: int, ring: int) -> int:
        return mod(self._rev[mod(n + pos - ring)] - pos + ring)

    def at_notch(self, pos: int, ring: int) -> bool:
        return pos == mod(to_index(self.notch) - ring)

    def __repr__(self) -> str:
        return f"<Rotor {self.name} notch={self.notch}>"


class Reflector:
    def __init__(self, name: str, wiring: str, label: str = ""):
        if len(wiring) != SIZE:
            raise ValueError("Reflector wiring length must match alphabet length")
        # involution (w[i] = j ⇒ w[j] = i) with no self-maps
        for i, c in enumerate(wiring):
            j = to_index(c)
            if wiring[j] != ALPHABET[i] or i == j:
                raise ValueError("Reflector wiring must be an involution with no fixed points")
        self.name   = name
        self.label  = label or name
        self.wiring = wiring
        self._map   = [to_index(c) for c in wiring]

    def reflect(self, n: int) -> int:
        return self._map[n]

    def __repr__(self) -> str:
        return f"<Reflector {self.label}>"


class Plugboard:
    """Steckerbrett: a symmetric swap of up to 13 letter pairs."""

    def __init__(self, mapping: Dict[str, str]):
        self._map = MappingProxyType(dict(mapping))

    @classmethod
    def parse(cls, text: str) -> "Plugboard":
        """Parse "AB CD EF". Raises InvalidPlugboardError on a bad pair."""
        if text is not None and not isinstance(text, str):
            raise InvalidPlugboardError(
                f"Plugboard must be a string of letter pairs, got {type(text).__name__}."
            )
        mapping: Dict[str, str] = {}
        for pair in (text or "").upper().split():
            if len(pair) != 2 or not all(is_letter(c) for c in pair):
                raise InvalidPlugboardError(
                    f'Invalid plugboard pair: "{pair}". Use letter pairs like "AB CD".'
                )
            a, b = pair
            if a == b:
                raise InvalidPlugboardError(f'Cannot plug a letter to itself: "{pair}".')
            if a in mapping or b in mapping:
                raise InvalidPlugboardError(
                    f'Letter used more than once in plugboard: "{pair}".'
                )
            mapping[a], mapping[b] = b, a
        return cls(mapping)

    def swap(self, letter: str) -> str:
        return self._map.get(letter, letter)

    def __len__(self) -> int:
        return len(self._map) // 2

    def __repr__(self) -> str:
        swaps = [f"{a}{b}" for a, b in self._map.items() if a < b]
        return f"<Plugboard {' '.join(swaps)}>"


@dataclass(frozen=True)
class RotorState:
    """Positions of the (left, middle, right) rotors, 0..25."""

    left: int
    middle: int
    right: int

    @classmethod
    def from_letters(cls, letters: str) -> "RotorState":
        l, m, r = (to_index(c) for c in letters)
        return cls(l, m, r)

    def stepped(self, rotors: Tuple[Rotor, Rotor, Rotor], rings: Tuple[int, int, int]) -> "RotorState":
        """
        Advance for one keypress, before the signal passes.

        The middle rotor also steps when it is itself at its notch:
        that is the double-step anomaly of the real machine.
        """
        _, middle, right = rotors
        middle_at_notch = middle.at_notch(self.middle, rings[1])
        right_at_notch  = right.at_notch(self.right, rings[2])

        left_pos   = self.left + 1 if middle_at_notch else self.left
        middle_pos = self.middle + 1 if (right_at_notch or middle_at_notch) else self.middle
        state = RotorState(mod(left_pos), mod(middle_pos), mod(self.right + 1))
        logger.debug(f"step {self.letters()} -> {state.letters()}")
        return state

    def letters(self) -> str:
        return to_letter(self.left) + to_letter(self.middle) + to_letter(self.right)
