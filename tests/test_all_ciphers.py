"""
classic_crypto — Cipher Test Suite
==================================
Run with:  python -m pytest tests/ -v
       or:  python tests/test_all_ciphers.py
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from classic_crypto.alphabet          import modular_inverse
from classic_crypto.result            import (
    EmptyInputError,
    InvalidKeyError,
    NoInverseError,
    SingularMatrixError,
)
from classic_crypto.ciphers.vigenere  import VigenereCipher, build_tableau, vigenere_encrypt, vigenere_decrypt
from classic_crypto.ciphers.affine    import AffineCipher, VALID_A_VALUES, affine_encrypt, affine_decrypt
from classic_crypto.ciphers.playfair  import (
    PlayfairCipher,
    matrix_rows,
    prepare_plaintext,
    playfair_encrypt,
    playfair_decrypt,
)
from classic_crypto.ciphers.hill      import (
    DEFAULT_MATRIX_VALUES,
    HillCipher,
    build_matrix,
    hill_encrypt,
    hill_decrypt,
    matrix_report,
)
from classic_crypto.ciphers.enigma    import EnigmaConfig, EnigmaMachine, enigma_process

MSG = "Attack at dawn, hold the eastern ridge!"
MSG_CLEAN = "ATTACKATDAWNHOLDTHEEASTERNRIDGE"

# ── Vigenère ─────────────────────────────────────────────────────────────────
def test_vigenere_textbook():
    r = vigenere_encrypt("ATTACKATDAWN", "LEMON")
    assert r.ok
    assert r.result == "LXFOPVEFRNHR"
    assert r.trace[0] == "[01]  A(0) + L(11) = L(11)"
    assert len(r.trace) == 12

def test_vigenere_decrypt_textbook():
    r = vigenere_decrypt("LXFOPVEFRNHR", "LEMON")
    assert r.result == "ATTACKATDAWN"
    assert r.trace[0] == "[01]  L(11) − L(11) = A(0)"

@pytest.mark.parametrize("key", ["LEMON", "k", "Kasiski 1863", "ZZZ"])
def test_vigenere_roundtrip(key):
    ct = vigenere_encrypt(MSG, key).result
    assert vigenere_decrypt(ct, key).result == MSG_CLEAN

def test_vigenere_key_is_cleaned():
    assert vigenere_encrypt("attack at dawn", "le-mon 42").result == "LXFOPVEFRNHR"

@pytest.mark.parametrize("text,key", [("", "KEY"), ("1234 !!", "KEY"), ("HELLO", ""), ("HELLO", "99")])
def test_vigenere_empty_input(text, key):
    r = vigenere_encrypt(text, key)
    assert not r.ok
    assert r.error_code == "EmptyInput"
    assert r.result == "" and r.trace == ()

def test_vigenere_reports_text_before_key():
    assert vigenere_encrypt("", "").error == "Plaintext cannot be empty."
    assert vigenere_decrypt("", "").error == "Ciphertext cannot be empty."
    assert vigenere_encrypt("HELLO", "").error == "Key must contain at least one letter (A–Z)."

def test_vigenere_non_string_input():
    r = vigenere_encrypt(123, "K")
    assert not r.ok
    assert r.error_code == "InvalidInput"
    assert vigenere_encrypt("HELLO", 7).error_code == "InvalidInput"

def test_vigenere_class_raises():
    with pytest.raises(EmptyInputError):
        VigenereCipher("123")

def test_vigenere_tableau():
    rows = build_tableau("LEMON", 2)
    assert [r.letter for r in rows] == ["L", "E"]
    assert rows[0].row == "LMNOPQRSTUVWXYZABCDEFGHIJK"
    assert rows[1].row == "EFGHIJKLMNOPQRSTUVWXYZABCD"
    assert len(build_tableau("ABCDEFGHIJ")) == 6

# ── Affine ───────────────────────────────────────────────────────────────────
def test_affine_hello():
    r = affine_encrypt("HELLO", 5, 8)
    assert r.result == "RCLLA"
    assert r.trace[0] == "E(H) = (5×7 + 8) mod 26 = 17  →  R"

def test_affine_decrypt_hello():
    r = affine_decrypt("RCLLA", 5, 8)
    assert r.result == "HELLO"
    assert r.trace[0] == "D(R) = 21×(17 − 8) mod 26 = 7  →  H"

@pytest.mark.parametrize("a", VALID_A_VALUES)
def test_affine_roundtrip_every_a(a):
    ct = affine_encrypt(MSG, a, 17).result
    assert affine_decrypt(ct, a, 17).result == MSG_CLEAN

def test_affine_key_domain():
    assert len(VALID_A_VALUES) == 12
    for a in range(26):
        inv = modular_inverse(a, 26)
        if a in VALID_A_VALUES:
            assert inv is not None and (a * inv) % 26 == 1
        else:
            assert inv is None

@pytest.mark.parametrize("a,b", [(2, 3), (13, 0), (0, 0), (5, 26), (5, -1), (True, 3), (5.0, 3), (5, "8")])
def test_affine_invalid_key(a, b):
    r = affine_encrypt("HELLO", a, b)
    assert r.error_code == "InvalidKey"
    assert affine_decrypt("HELLO", a, b).error_code == "InvalidKey"

def test_affine_key_checked_before_text():
    assert affine_encrypt("", 2, 3).error_code == "InvalidKey"
    assert affine_encrypt("", 3, 3).error_code == "EmptyInput"

def test_affine_no_inverse_guard():
    c = AffineCipher(5, 8)
    c.a = 13
    with pytest.raises(NoInverseError):
        c.decrypt("HELLO")

def test_affine_class_raises():
    with pytest.raises(InvalidKeyError):
        AffineCipher(4, 1)

# ── Playfair ─────────────────────────────────────────────────────────────────
def test_playfair_matrix():
    assert matrix_rows("PLAYFAIR EXAMPLE") == ["PLAYF", "IREXM", "BCDGH", "KNOQS", "TUVWZ"]
    assert matrix_rows("PLAYFAIR") == ["PLAYF", "IRBCD", "EGHKM", "NOQST", "UVWXZ"]
    assert matrix_rows("jojo")[0] == "IOABC"

def test_playfair_textbook():
    r = playfair_encrypt("Hide the gold in the tree stump", "PLAYFAIR EXAMPLE")
    assert r.result == "BMODZBXDNABEKUDMUIXMMOUVIF"
    assert r.trace[0] == "Prepared: HI DE TH EG OL DI NT HE TR EX ES TU MP"
    assert r.trace[1] == "HI → BM  (rectangle)"
    assert "EX → XM  (row)" in r.trace
    assert "DE → OD  (column)" in r.trace

def test_playfair_keyword_without_example():
    r = playfair_encrypt("Hide the gold in the tree stump", "PLAYFAIR")
    assert r.result == "EBIMQMGHVRIRONKGODKUKNNZEF"
    assert playfair_decrypt(r.result, "PLAYFAIR").result == "HIDETHEGOLDINTHETREESTUMP"

def test_playfair_decrypt_textbook():
    r = playfair_decrypt("BMODZBXDNABEKUDMUIXMMOUVIF", "PLAYFAIR EXAMPLE")
    assert r.result == "HIDETHEGOLDINTHETREESTUMP"
    assert r.trace[-1] == "Raw: HIDETHEGOLDINTHETREXESTUMP"

def test_playfair_preparation():
    assert prepare_plaintext("balloon") == "BALXLOON"
    assert prepare_plaintext("jam") == "IAMX"
    assert prepare_plaintext("") == ""

def test_playfair_doubled_letters_recovered():
    ct = playfair_encrypt("BALLOON", "MONARCHY").result
    assert len(ct) == 8
    assert playfair_decrypt(ct, "MONARCHY").result == "BALLOON"

def test_playfair_cleanup_is_lossy():
    # a genuine X between equal letters is indistinguishable from a filler
    ct = playfair_encrypt("AXA", "KEYWORD").result
    assert playfair_decrypt(ct, "KEYWORD").result == "AA"

def test_playfair_odd_length():
    r = playfair_decrypt("BMO", "PLAYFAIR")
    assert r.error_code == "OddLength"

@pytest.mark.parametrize("keyword", ["", "   ", "1234"])
def test_playfair_empty_keyword(keyword):
    assert playfair_encrypt("HELLO", keyword).error_code == "EmptyInput"
    assert playfair_decrypt("HELLO", keyword).error_code == "EmptyInput"

def test_playfair_empty_text():
    assert playfair_encrypt("!!", "KEY").error_code == "EmptyInput"
    assert playfair_decrypt("", "KEY").error_code == "EmptyInput"

def test_playfair_class():
    c = PlayfairCipher("PLAYFAIR EXAMPLE")
    assert len(c.matrix) == 25 and "J" not in c.matrix
    assert c.rows()[1] == "IREXM"

# ── Hill ─────────────────────────────────────────────────────────────────────
KEY_2X2 = [[3, 3], [2, 5]]

def test_hill_encrypt_2x2():
    r = hill_encrypt("HELLOWORLD", KEY_2X2)
    assert r.result == "HIOZEIPJQL"
    assert r.trace[0] == "[H,E]=[7,4]  ×  M  =  [7,8]  →  HI"

def test_hill_decrypt_2x2():
    r = hill_decrypt("HIOZEIPJQL", KEY_2X2)
    assert r.result == "HELLOWORLD"
    assert r.trace[0].startswith("[H,I]=[7,8]  ×  M⁻¹")

def test_hill_inverse():
    assert HillCipher(KEY_2X2).inverse == [[15, 17], [20, 9]]

def test_hill_3x3_textbook():
    assert hill_encrypt("ACT", [[6, 24, 1], [13, 16, 10], [20, 17, 15]]).result == "POH"

def test_hill_padding():
    r = hill_encrypt("HELLO", KEY_2X2)
    assert len(r.result) == 6
    assert hill_decrypt(r.result, KEY_2X2).result == "HELLOX"

@pytest.mark.parametrize("n", sorted(DEFAULT_MATRIX_VALUES))
def test_hill_roundtrip_defaults(n):
    key = build_matrix(DEFAULT_MATRIX_VALUES[n], n)
    assert matrix_report(key).valid
    ct = hill_encrypt(MSG, key).result
    pt = hill_decrypt(ct, key).result
    assert pt[:len(MSG_CLEAN)] == MSG_CLEAN
    assert set(pt[len(MSG_CLEAN):]) <= {"X"}

def test_hill_roundtrip_without_single_unit_pivot():
    # no entry in column 0 is a unit mod 26, yet det = 17 is
    key = [[2, 13], [13, 2]]
    ct = hill_encrypt("GOLDEN", key).result
    assert hill_decrypt(ct, key).result == "GOLDEN"

@pytest.mark.parametrize("key", [
    [[0, 0], [0, 0]],
    [[2, 4], [1, 2]],
    [[2, 0], [0, 2]],
    [[13, 0, 0], [0, 1, 0], [0, 0, 1]],
])
def test_hill_singular(key):
    assert hill_encrypt("HELLOWORLD", key).error_code == "SingularMatrix"
    assert hill_decrypt("HELLOWORLD", key).error_code == "SingularMatrix"

@pytest.mark.parametrize("key", [[[1]], [[1, 2, 3], [4, 5, 6]], [[1, 2], [3]], [[1, 2], [3, "4"]], 7, [[1] * 6] * 6])
def test_hill_bad_shape(key):
    assert hill_encrypt("HELLO", key).error_code == "InvalidKey"

def test_hill_empty_text():
    assert hill_encrypt("  ", KEY_2X2).error_code == "EmptyInput"

def test_hill_class_raises():
    with pytest.raises(SingularMatrixError):
        HillCipher([[0, 0], [0, 0]])

def test_hill_report():
    good = matrix_report(KEY_2X2)
    assert good.valid and good.determinant == 9 and good.determinant_inverse == 3
    bad = matrix_report([[2, 4], [1, 2]])
    assert not bad.valid and bad.determinant == 0
    assert "NOT invertible" in bad.message

# ── Enigma ───────────────────────────────────────────────────────────────────
def test_enigma_reference_vector():
    r = enigma_process("AAAAA", "I", "II", "III", "A", "A", "A", reflector="B")
    assert r.result == "BDZGO"
    assert r.trace[0] == "[01] A → plugboard → III[B R:A]/II[A R:A]/I[A R:A] → reflector B → B"

def test_enigma_hello_world():
    r = enigma_process("HELLO WORLD", "I", "II", "III", "A", "A", "A", reflector="B")
    assert r.result == "ILBDAAMTAZ"

def test_enigma_ring_settings():
    r = enigma_process("AAAAA", "I", "II", "III", "A", "A", "A", "B", "B", "B", reflector="B")
    assert r.result == "EWTYX"

@pytest.mark.parametrize("config", [
    EnigmaConfig(),
    EnigmaConfig(("IV", "V", "I"), "QEV", "BUL", "C", "AZ BY CX DW"),
    EnigmaConfig(("II", "IV", "III"), "XDU", "ZZA", "B", "PO ML IU KJ NH YT GB VF RE DC"),
])
def test_enigma_self_reciprocal(config):
    machine = EnigmaMachine(config)
    ct = machine.process(MSG).result
    assert ct != MSG_CLEAN
    assert machine.process(ct).result == MSG_CLEAN
    assert all(c != p for c, p in zip(ct, MSG_CLEAN))

def test_enigma_double_step_trace():
    r = enigma_process("AAAA", "I", "II", "III", "A", "D", "U", reflector="B")
    windows = [line.split(" → ")[2] for line in r.trace]
    assert windows == [
        "III[V R:A]/II[D R:A]/I[A R:A]",
        "III[W R:A]/II[E R:A]/I[A R:A]",
        "III[X R:A]/II[F R:A]/I[B R:A]",
        "III[Y R:A]/II[F R:A]/I[B R:A]",
    ]

def test_enigma_calls_are_independent():
    machine = EnigmaMachine(EnigmaConfig(positions="QEV"))
    assert machine.process("HELLO").result == machine.process("HELLO").result

def test_enigma_plugboard_changes_output():
    plain = enigma_process("AAAAA", "I", "II", "III", "A", "A", "A").result
    plugged = enigma_process("AAAAA", "I", "II", "III", "A", "A", "A", plugboard="AQ").result
    assert plain != plugged

@pytest.mark.parametrize("args,code", [
    (("VI", "II", "III", "A", "A", "A"), "InvalidSelection"),
    (("I", "II", "iii", "A", "A", "A"), "InvalidSelection"),
    (("I", "II", "III", "AB", "A", "A"), "InvalidPosition"),
    (("I", "II", "III", "1", "A", "A"), "InvalidPosition"),
    (("I", "II", "III", None, "A", "A"), "InvalidPosition"),
])
def test_enigma_invalid_config(args, code):
    assert enigma_process("HELLO", *args).error_code == code

def test_enigma_invalid_reflector():
    r = enigma_process("HELLO", "I", "II", "III", "A", "A", "A", reflector="A")
    assert r.error_code == "InvalidSelection"

def test_enigma_invalid_ring():
    r = enigma_process("HELLO", "I", "II", "III", "A", "A", "A", "A", "?", "A")
    assert r.error_code == "InvalidRing"

def test_enigma_blank_ring_defaults_to_a():
    blank = enigma_process("HELLO", "I", "II", "III", "A", "A", "A", "", None, "")
    assert blank.result == enigma_process("HELLO", "I", "II", "III", "a", "a", "a").result

@pytest.mark.parametrize("plugboard", ["AA", "AB BC", "ABC", "A1", "AB CD DE"])
def test_enigma_invalid_plugboard(plugboard):
    r = enigma_process("HELLO", "I", "II", "III", "A", "A", "A", plugboard=plugboard)
    assert r.error_code == "InvalidPlugboard"

def test_enigma_non_string_plugboard():
    r = enigma_process("HELLO", "I", "II", "III", "A", "A", "A", plugboard=5)
    assert r.error_code == "InvalidPlugboard"
    assert enigma_process(42, "I", "II", "III", "A", "A", "A").error_code == "InvalidInput"

def test_enigma_empty_message():
    assert enigma_process("123", "I", "II", "III", "A", "A", "A").error_code == "EmptyInput"

# ── run directly ─────────────────────────────────────────────────────────────
if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
