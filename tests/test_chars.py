import string

import pytest

from sigtalk.chars import isalnum, isalpha, isascii, isdigit, isprint, tolower, toupper


ASCII_CODES = range(128)


def test_isalpha_matches_ascii_letters():
    letters = {ord(ch) for ch in string.ascii_letters}
    assert {c for c in ASCII_CODES if isalpha(c)} == letters


def test_isdigit_matches_ascii_digits():
    digits = {ord(ch) for ch in string.digits}
    assert {c for c in ASCII_CODES if isdigit(c)} == digits


def test_isalnum_is_union_of_alpha_and_digit():
    for c in range(-5, 300):
        assert isalnum(c) == (isalpha(c) or isdigit(c))


def test_isascii_bounds():
    assert isascii(0) is True
    assert isascii(127) is True
    assert isascii(128) is False
    assert isascii(-1) is False


def test_isprint_bounds():
    assert isprint(" ") is True
    assert isprint("~") is True
    assert isprint(31) is False
    assert isprint(127) is False


def test_string_and_int_agree():
    for ch in string.printable:
        assert isalpha(ch) == isalpha(ord(ch))
        assert isprint(ch) == isprint(ord(ch))


def test_non_ascii_letters_are_not_alpha():
    assert isalpha("é") is False
    assert isalnum("é") is False


def test_tolower_on_string_letters():
    assert "".join(tolower(ch) for ch in string.ascii_uppercase) == string.ascii_lowercase


def test_toupper_on_string_letters():
    assert "".join(toupper(ch) for ch in string.ascii_lowercase) == string.ascii_uppercase


def test_case_conversion_on_int_codes_keeps_type():
    assert tolower(ord("Q")) == ord("q")
    assert toupper(ord("q")) == ord("Q")


@pytest.mark.parametrize("ch", list(string.digits + string.punctuation + " \t"))
def test_non_letters_unchanged(ch):
    assert tolower(ch) == ch
    assert toupper(ch) == ch


def test_round_trip_case():
    for ch in string.ascii_letters:
        assert tolower(toupper(ch)) == ch.lower()
        assert toupper(tolower(ch)) == ch.upper()


def test_multi_char_string_rejected():
    with pytest.raises(ValueError):
        isalpha("ab")
    with pytest.raises(ValueError):
        tolower("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        isdigit(1.5)
    with pytest.raises(TypeError):
        toupper(None)