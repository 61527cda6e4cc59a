import string

import pytest

from caesar_app.domain.cipher import cipher, decrypt, encrypt


def test_known_vector():
    assert cipher("Hello, World!", 3) == "Khoor, Zruog!"


@pytest.mark.parametrize(
    "text, shift, expected",
    [
        ("Z", 1, "A"),
        ("z", 1, "a"),
        ("a", -1, "z"),
        ("A", -1, "Z"),
        ("abc", 6, "ghi"),
        ("abc", 10, "klm"),
        ("xyz", 3, "abc"),
    ],
)
def test_wraparound(text, shift, expected):
    assert cipher(text, shift) == expected


def test_cases_shift_independently():
    assert cipher("AbYz", 2) == "CdAb"


def test_non_letters_pass_through():
    text = "0123 !?-_\n\té ß Ж Ωmega"
    out = cipher(text, 7)
    for original, shifted in zip(text, out):
        if original in string.ascii_letters:
            assert shifted in string.ascii_letters
        else:
            assert shifted == original
    assert len(out) == len(text)


def test_shift_is_taken_mod_26():
    assert cipher("Hello", 29) == cipher("Hello", 3)
    assert cipher("Hello", -23) == cipher("Hello", 3)
    assert cipher("Hello", 26) == "Hello"
    assert cipher("Hello", 0) == "Hello"


def test_empty_text():
    assert cipher("", 5) == ""


@pytest.mark.parametrize("shift", [-53, -26, -1, 1, 6, 13, 25, 26, 100])
def test_round_trip(shift):
    text = "The quick brown fox jumps over the lazy dog. 42 ÄÖÜ"
    assert cipher(cipher(text, shift), -shift) == text


def test_encrypt_decrypt_helpers():
    assert encrypt("attack at dawn", 13) == "nggnpx ng qnja"
    assert decrypt("nggnpx ng qnja", 13) == "attack at dawn"
