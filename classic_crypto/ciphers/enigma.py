"""
Enigma I Rotor Machine
======================
Simulation of the three-rotor Wehrmacht/Luftwaffe Enigma I:

    rotors I–V      (historical wirings and turnover notches)
    reflectors B, C (UKW-B, UKW-C)
    ring settings   (Ringstellung)
    plugboard       (Steckerbrett, up to 13 pairs)
    double stepping of the middle rotor

Per keypress the rotors step first, then the signal runs:

    plugboard → right → middle → left → reflector
              → left → middle → right → plugboard

Because the reflector is an involution without fixed points the machine
is self-reciprocal (the same settings decrypt what they encrypt) and no
letter ever encrypts to itself.

Rotor positions are an immutable `RotorState` created from the
configuration at the start of each `process()` call and threaded through
the loop, so a machine object can be reused and shared freely.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Tuple

from ..alphabet import clean, is_letter, to_index, to_letter
from ..result import (
    CipherResult,
    EmptyInputError,
    InvalidPositionError,
    InvalidRingError,
    InvalidSelectionError,
    total,
)
from ..rotor import Plugboard, Reflector, Rotor, RotorState

logger = logging.getLogger(__name__)

ROTORS = MappingProxyType({
    "I":   Rotor("I",   "EKMFLGDQVZNTOWYHXUSPAIBRCJ", "Q"),
    "II":  Rotor("II",  "AJDKSIRUXBLHWTMCQGZNPYFVOE", "E"),
    "III": Rotor("III", "BDFHJLCPRTXVZNYEIWGAKMUSQO", "V"),
    "IV":  Rotor("IV",  "ESOVPZJAYQUIRHXLNFTGKDCMWB", "J"),
    "V":   Rotor("V",   "VZBRGITYUPSDNHLXAWMJQOFECK", "Z"),
})

REFLECTORS = MappingProxyType({
    "B": Reflector("B", "YRUHQSLDPXNGOKMIEBFZCWVJAT", "UKW-B"),
    "C": Reflector("C", "FVPJIAOYEDRZXWGCTKUQSBNMHL", "UKW-C"),
})

ROTOR_KEYS     = tuple(ROTORS)
REFLECTOR_KEYS = tuple(REFLECTORS)

DEFAULT_RING = "A"


@dataclass(frozen=True)
class EnigmaConfig:
    """
    Machine settings, left to right.

    `positions` and `rings` take three letters, either as a string
    ("AAZ") or a sequence (("A", "A", "Z")).
    """

    rotors: Tuple[str, str, str] = ("I", "II", "III")
    positions: str = "AAA"
    rings: str = DEFAULT_RING * 3
    reflector: str = "B"
    plugboard: str = ""


def _three_letters(values, error, message: str, default: str = None) -> Tuple[int, int, int]:
    try:
        items = list(values)
    except TypeError:
        raise error(message)
    if len(items) != 3:
        raise error(message)
    out = []
    for v in items:
        if default is not None and v in (None, ""):
            v = default
        if isinstance(v, str):
            v = v.upper()
        if not is_letter(v):
            raise error(message)
        out.append(to_index(v))
    return tuple(out)


class EnigmaMachine:
    """A configured Enigma I. Validation happens here, before any text."""

    def __init__(self, config: EnigmaConfig):
        names = tuple(config.rotors) if not isinstance(config.rotors, str) else ()
        if len(names) != 3 or not all(isinstance(n, str) and n in ROTORS for n in names):
            raise InvalidSelectionError("Invalid rotor selection.")
        if not isinstance(config.reflector, str) or config.reflector not in REFLECTORS:
            raise InvalidSelectionError("Invalid reflector selection.")

        self.config    = config
        self.rotors    = tuple(ROTORS[n] for n in names)
        self.reflector = REFLECTORS[config.reflector]
        self.start     = RotorState(*_three_letters(
            config.positions, InvalidPositionError,
            "Invalid start positions. Use letters A–Z for pos1/pos2/pos3.",
        ))
        self.rings     = _three_letters(
            config.rings, InvalidRingError,
            "Invalid ring settings. Use letters A–Z for ring1/ring2/ring3.",
            default=DEFAULT_RING,
        )
        # raises InvalidPlugboardError
        self.plugboard = Plugboard.parse(config.plugboard)

    def _encipher(self, letter: str, state: RotorState) -> str:
        left, middle, right = self.rotors
        r_left, r_middle, r_right = self.rings

        n = to_index(self.plugboard.swap(letter))

        n = right.forward(n, state.right, r_right)
        n = middle.forward(n, state.middle, r_middle)
        n = left.forward(n, state.left, r_left)

        n = self.reflector.reflect(n)

        n = left.backward(n, state.left, r_left)
        n = middle.backward(n, state.middle, r_middle)
        n = right.backward(n, state.right, r_right)

        return self.plugboard.swap(to_letter(n))

    def _describe(self, i: int, letter: str, state: RotorState, out: str) -> str:
        left, middle, right = self.rotors
        ring = [to_letter(r) for r in self.rings]
        return (
            f"[{i + 1:02d}] {letter} → plugboard → "
            f"{right.name}[{to_letter(state.right)} R:{ring[2]}]/"
            f"{middle.name}[{to_letter(state.middle)} R:{ring[1]}]/"
            f"{left.name}[{to_letter(state.left)} R:{ring[0]}] → "
            f"reflector {self.reflector.name} → {out}"
        )

    def process(self, message: str) -> CipherResult:
        text = clean(message)
        if not text:
            raise EmptyInputError("Message cannot be empty.")
        logger.debug(
            f"Enigma: rotors {'-'.join(r.name for r in self.rotors)} "
            f"start {self.start.letters()} reflector {self.reflector.name} "
            f"plugs {len(self.plugboard)}, {len(text)} letters"
        )

        state = self.start
        out: List[str] = []
        steps: List[str] = []
        for i, ch in enumerate(text):
            state = state.stepped(self.rotors, self.rings)
            enc = self._encipher(ch, state)
            out.append(enc)
            steps.append(self._describe(i, ch, state, enc))
        return CipherResult.success("".join(out), steps)

    # self-reciprocal
    encrypt = process
    decrypt = process


@total
def enigma_process(
    text: str,
    rotor1: str, rotor2: str, rotor3: str,
    pos1: str, pos2: str, pos3: str,
    ring1: str = DEFAULT_RING, ring2: str = DEFAULT_RING, ring3: str = DEFAULT_RING,
    reflector: str = "B",
    plugboard: str = "",
) -> CipherResult:
    config = EnigmaConfig(
        rotors=(rotor1, rotor2, rotor3),
        positions=(pos1, pos2, pos3),
        rings=(ring1, ring2, ring3),
        reflector=reflector,
        plugboard=plugboard,
    )
    return EnigmaMachine(config).process(text)
