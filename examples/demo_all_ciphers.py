"""
classic_crypto — Live Demo: All Five Ciphers
============================================
Run:  python examples/demo_all_ciphers.py [-v]

Shows every cipher encrypting and decrypting a real message, with the
first few trace steps, timing, and one deliberate failure per cipher.
"""

import sys, os, time, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from classic_crypto.ciphers.vigenere  import build_tableau, vigenere_encrypt, vigenere_decrypt
from classic_crypto.ciphers.affine    import VALID_A_VALUES, affine_encrypt, affine_decrypt
from classic_crypto.ciphers.playfair  import matrix_rows, playfair_encrypt, playfair_decrypt
from classic_crypto.ciphers.hill      import (
    DEFAULT_MATRIX_VALUES, build_matrix, hill_encrypt, hill_decrypt, matrix_report,
)
from classic_crypto.ciphers.enigma    import ROTORS, REFLECTORS, enigma_process

logging.basicConfig(
    level=logging.DEBUG if "-v" in sys.argv else logging.WARNING,
    format=" %(name)s: %(message)s",
)

LINE = "═" * 70
MSG  = "Hide the gold in the tree stump"

def header(n, name):
    print(f"\n{LINE}")
    print(f"  {n} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

def show(result, steps=3):
    for line in result.trace[:steps]:
        print(f"       {line}")
    if len(result.trace) > steps:
        print(f"       … {len(result.trace) - steps} more steps")

def refused(result):
    print(f"  ✗  Refused [{result.error_code}]: {result.error}")

# ─────────────────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  classic_crypto — Five Classical Ciphers")
print(LINE)
print(f"  Message: {MSG}\n")

# ── VIGENÈRE ─────────────────────────────────────────────────────────────────
header(1, "VIGENÈRE — key LEMON")
t0 = time.perf_counter()
ct = vigenere_encrypt(MSG, "LEMON")
pt = vigenere_decrypt(ct.result, "LEMON")
elapsed = time.perf_counter() - t0
ok("Encrypted", ct.result)
show(ct)
ok("Decrypted", pt.result)
ok("Round-trip", f"{elapsed*1000:.2f} ms")
for row in build_tableau("LEMON", 3):
    print(f"       {row.letter} | {' '.join(row.row)}")
refused(vigenere_encrypt(MSG, "1234"))

# ── AFFINE ───────────────────────────────────────────────────────────────────
header(2, "AFFINE — a=5, b=8")
ct = affine_encrypt(MSG, 5, 8)
pt = affine_decrypt(ct.result, 5, 8)
ok("Encrypted", ct.result)
show(ct)
ok("Decrypted", pt.result)
ok("Valid a", ", ".join(str(a) for a in VALID_A_VALUES))
refused(affine_encrypt(MSG, 13, 8))

# ── PLAYFAIR ─────────────────────────────────────────────────────────────────
header(3, "PLAYFAIR — keyword PLAYFAIR")
for row in matrix_rows("PLAYFAIR"):
    print(f"       {' '.join(row)}")
ct = playfair_encrypt(MSG, "PLAYFAIR")
pt = playfair_decrypt(ct.result, "PLAYFAIR")
ok("Encrypted", ct.result)
show(ct, 4)
ok("Decrypted", pt.result)
ok(pt.trace[-1])
refused(playfair_decrypt("BMO", "PLAYFAIR"))

# ── HILL ─────────────────────────────────────────────────────────────────────
for n in sorted(DEFAULT_MATRIX_VALUES):
    key = build_matrix(DEFAULT_MATRIX_VALUES[n], n)
    header(4, f"HILL — {n}×{n} key")
    ok("Key", matrix_report(key).message)
    t0 = time.perf_counter()
    ct = hill_encrypt(MSG, key)
    pt = hill_decrypt(ct.result, key)
    elapsed = time.perf_counter() - t0
    ok("Encrypted", ct.result)
    show(ct, 2)
    ok("Decrypted", pt.result)
    ok("Round-trip", f"{elapsed*1000:.2f} ms")
refused(hill_decrypt(MSG, [[2, 4], [1, 2]]))

# ── ENIGMA ───────────────────────────────────────────────────────────────────
header(5, "ENIGMA I — rotors I-II-III, start ADU, rings AAA, UKW-B, plugs AQ EP")
ok("Rotors", "  ".join(f"{r.name}(notch {r.notch})" for r in ROTORS.values()))
ok("Reflectors", "  ".join(r.label for r in REFLECTORS.values()))
settings = ("I", "II", "III", "A", "D", "U", "A", "A", "A", "B", "AQ EP")
ct = enigma_process(MSG, *settings)
pt = enigma_process(ct.result, *settings)
ok("Encrypted", ct.result)
show(ct, 4)   # middle rotor double-steps on keys 2 and 3
ok("Decrypted", pt.result)
refused(enigma_process(MSG, "I", "II", "III", "A", "D", "U", plugboard="AB BC"))

# ── Summary ──────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  ALL CIPHERS COMPLETE")
print(f"  {LINE}")
print("  Vigenère   1553  — Polyalphabetic shift")
print("  Affine           — Linear substitution mod 26")
print("  Playfair   1854  — Digraph square")
print("  Hill       1929  — Matrix blocks mod 26")
print("  Enigma I   1930s — Rotors, rings, plugboard, double step")
print(f"  {LINE}")
print("  None of these is secure. All of them are worth taking apart.")
print(LINE + "\n")
