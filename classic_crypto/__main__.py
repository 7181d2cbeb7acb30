"""
Command-line front-end.

    python -m classic_crypto vigenere encrypt "ATTACK AT DAWN" --key LEMON
    python -m classic_crypto affine decrypt RCLLA -a 5 -b 8
    python -m classic_crypto playfair encrypt "HIDE THE GOLD" --keyword PLAYFAIR
    python -m classic_crypto hill encrypt HELLOWORLD --matrix 3,3,2,5
    python -m classic_crypto enigma encrypt HELLO --rotors I II III --positions AAA \\
        --rings AAA --reflector B --plugboard "AB CD"
"""

import argparse
import logging
import math
import sys

from .ciphers.enigma import REFLECTOR_KEYS, ROTOR_KEYS, EnigmaConfig
from .suite import AffineKey, HillKey, Mode, PlayfairKey, VigenereKey, process


def parse_matrix(text: str):
    """'3,3,2,5' → [[3, 3], [2, 5]]. The number of cells must be a square."""
    try:
        cells = [int(v) for v in text.replace(";", ",").replace(" ", ",").split(",") if v]
    except ValueError:
        raise argparse.ArgumentTypeError(f"matrix cells must be integers: {text!r}")
    n = math.isqrt(len(cells))
    if n * n != len(cells) or n == 0:
        raise argparse.ArgumentTypeError(f"matrix needs a square number of cells, got {len(cells)}")
    return [cells[i * n:(i + 1) * n] for i in range(n)]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="classic_crypto",
        description="Classical ciphers: Vigenère, Affine, Playfair, Hill, Enigma.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--trace", action="store_true", help="print the step-by-step trace")
    sub = parser.add_subparsers(dest="cipher", required=True)

    def add(name: str, help_text: str) -> argparse.ArgumentParser:
        p = sub.add_parser(name, help=help_text)
        p.add_argument("mode", choices=[m.value for m in Mode])
        p.add_argument("text")
        return p

    p = add("vigenere", "polyalphabetic shift")
    p.add_argument("--key", required=True)

    p = add("affine", "E(x) = (a·x + b) mod 26")
    p.add_argument("-a", type=int, required=True)
    p.add_argument("-b", type=int, required=True)

    p = add("playfair", "5×5 digraph substitution")
    p.add_argument("--keyword", required=True)

    p = add("hill", "n×n matrix block substitution")
    p.add_argument("--matrix", type=parse_matrix, required=True,
                   help="row-major cells, e.g. 3,3,2,5")

    p = add("enigma", "Enigma I rotor machine (mode is ignored)")
    p.add_argument("--rotors", nargs=3, default=["I", "II", "III"],
                   metavar="ROTOR", help=f"left middle right, from {' '.join(ROTOR_KEYS)}")
    p.add_argument("--positions", default="AAA")
    p.add_argument("--rings", default="AAA")
    p.add_argument("--reflector", default="B", help=f"one of {' '.join(REFLECTOR_KEYS)}")
    p.add_argument("--plugboard", default="")

    return parser


def key_from_args(args):
    if args.cipher == "vigenere":
        return VigenereKey(args.key)
    if args.cipher == "affine":
        return AffineKey(args.a, args.b)
    if args.cipher == "playfair":
        return PlayfairKey(args.keyword)
    if args.cipher == "hill":
        return HillKey(args.matrix)
    return EnigmaConfig(
        rotors=tuple(r.upper() for r in args.rotors),
        positions=args.positions,
        rings=args.rings,
        reflector=args.reflector.upper(),
        plugboard=args.plugboard,
    )


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=" %(name)s: %(message)s",
    )

    result = process(args.text, key_from_args(args), Mode(args.mode))
    if not result.ok:
        print(f"Error: {result.error}", file=sys.stderr)
        return 1

    if args.trace:
        for line in result.trace:
            print(f"  {line}")
    print(result.result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
