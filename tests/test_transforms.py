"""
Tests for the shift primitive and whole-string transforms.
"""

import string

import pytest

from cryptanalysis.errors import InvalidArgumentError
from cryptanalysis.shift import calculate_shift, normalize_shift, shift_char
from cryptanalysis.transforms import brute_force, decode, encode, encode_text, rot13

LETTERS_SAMPLE = "TheQuickBrownFoxJumpsOverTheLazyDog"
MIXED_SAMPLE = "Hello, World! 123 -- l'école, año 2024?"


def test_shift_char_basic():
    assert shift_char("a", 1) == "b"
    assert shift_char("z", 1) == "a"
    assert shift_char("Z", 3) == "C"
    assert shift_char("m", -13) == "z"


def test_shift_char_non_letters_unchanged():
    for c in " .,!?0123456789-'\n":
        assert shift_char(c, 5) == c


def test_shift_char_folds_accents_and_keeps_case():
    assert shift_char("é", 1) == "f"
    assert shift_char("É", 1) == "F"
    assert shift_char("ñ", 0) == "n"
    assert shift_char("Ç", 2) == "E"


def test_shift_char_unknown_non_ascii_passes_through():
    assert shift_char("ß", 3) == "ß"
    assert shift_char("ø", 3) == "ø"


def test_normalize_shift():
    assert normalize_shift(0) == 0
    assert normalize_shift(26) == 0
    assert normalize_shift(-1) == 25
    assert normalize_shift(-27) == 25
    assert normalize_shift(53) == 1


def test_calculate_shift():
    assert calculate_shift("d", "a") == 3
    assert calculate_shift("a", "d") == 23
    assert calculate_shift("A", "a") == 0
    assert calculate_shift("x", "é") is None


def test_encode_hello_world():
    assert encode("Hello, World!", 3) == "Khoor, Zruog!"
    assert decode("Khoor, Zruog!", 3) == "Hello, World!"


@pytest.mark.parametrize("shift", range(26))
def test_round_trip(shift):
    assert decode(encode(LETTERS_SAMPLE, shift), shift) == LETTERS_SAMPLE


@pytest.mark.parametrize("shift", [-30, -1, 0, 5, 13, 25, 40])
def test_shift_normalization(shift):
    expected = encode(MIXED_SAMPLE, shift)
    assert encode(MIXED_SAMPLE, shift + 26) == expected
    assert encode(MIXED_SAMPLE, shift - 26) == expected


def test_identity_shift():
    assert encode(LETTERS_SAMPLE, 0) == LETTERS_SAMPLE
    assert encode("12 + 3 = 15 !", 0) == "12 + 3 = 15 !"


@pytest.mark.parametrize("shift", [1, 7, 13, 25])
def test_non_letters_preserved(shift):
    encoded = encode(MIXED_SAMPLE, shift)
    assert len(encoded) == len(MIXED_SAMPLE)
    for original, out in zip(MIXED_SAMPLE, encoded):
        if original not in string.ascii_letters and original not in "éñ":
            assert out == original


def test_accents_lost_on_shift():
    assert encode("café", 1) == "dbgf"


def test_rot13_involution():
    once = rot13("Attack at dawn")
    assert once == {"original": "Attack at dawn", "encoded": "Nggnpx ng qnja"}
    assert rot13(once["encoded"])["encoded"] == "Attack at dawn"


def test_brute_force_completeness():
    results = brute_force("Khoor, Zruog!")
    assert [r["shift"] for r in results] == list(range(26))
    for r in results:
        assert r["text"] == decode("Khoor, Zruog!", r["shift"])
    assert results[0]["text"] == "Khoor, Zruog!"
    assert results[3]["text"] == "Hello, World!"


def test_encode_rejects_bad_arguments():
    with pytest.raises(InvalidArgumentError):
        encode(123, 3)
    with pytest.raises(InvalidArgumentError):
        encode("abc", "3")
    with pytest.raises(InvalidArgumentError):
        decode("abc", 1.5)
    with pytest.raises(InvalidArgumentError):
        encode("abc", True)


def test_encode_text_stats():
    result = encode_text("Hello, World!", 3)
    assert result["encoded"] == "Khoor, Zruog!"
    assert result["shift"] == 3
    assert result["stats"] == {"letterCount": 10, "wordCount": 2, "preservedChars": 3}
    assert result["timestamp"].endswith("Z")


@pytest.mark.parametrize("text,shift", [("", 3), ("abc", 0), ("abc", 26), ("abc", -1)])
def test_encode_text_strict_validation(text, shift):
    with pytest.raises(InvalidArgumentError):
        encode_text(text, shift)
