import string

import pytest

from minitalk.chars import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    tolower,
    toupper,
)

ASCII_CODES = range(128)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_isalpha_matches_ascii_letters(code):
    assert isalpha(code) == (chr(code) in string.ascii_letters)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_isdigit_matches_ascii_digits(code):
    assert isdigit(code) == (chr(code) in string.digits)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_isalnum_is_alpha_or_digit(code):
    assert isalnum(code) == (isalpha(code) or isdigit(code))


@pytest.mark.parametrize("code", ASCII_CODES)
def test_isprint_matches_printable_ascii(code):
    assert isprint(code) == chr(code).isprintable()


def test_non_ascii_letters_are_not_letters():
    assert chr(0xE9).isalpha()
    assert isalpha(0xE9) is False
    assert isalnum("é") is False


def test_isascii_bounds():
    assert isascii(0) is True
    assert isascii(127) is True
    assert isascii(128) is False
    assert isascii(-1) is False


def test_isprint_bounds():
    assert isprint(" ") is True
    assert isprint("~") is True
    assert isprint(127) is False
    assert isprint(31) is False


def test_string_arguments_are_accepted():
    assert isalpha("q") is True
    assert isdigit("7") is True
    assert isdigit("x") is False


@pytest.mark.parametrize("letter", string.ascii_uppercase)
def test_tolower_on_capitals(letter):
    assert tolower(letter) == letter.lower()
    assert tolower(ord(letter)) == ord(letter.lower())


@pytest.mark.parametrize("letter", string.ascii_lowercase)
def test_toupper_on_small_letters(letter):
    assert toupper(letter) == letter.upper()
    assert toupper(ord(letter)) == ord(letter.upper())


@pytest.mark.parametrize("code", [c for c in range(256) if chr(c) not in string.ascii_letters])
def test_case_conversion_leaves_non_letters_alone(code):
    assert tolower(code) == code
    assert toupper(code) == code


@pytest.mark.parametrize("letter", string.ascii_letters)
def test_case_round_trip(letter):
    assert tolower(toupper(letter)) == letter.lower()
    assert toupper(tolower(letter)) == letter.upper()


def test_case_conversion_keeps_argument_type():
    lowered_text = tolower("A")
    lowered_code = tolower(65)
    raised_text = toupper("b")
    raised_code = toupper(98)
    assert lowered_text == "a" and type(lowered_text) is str
    assert lowered_code == 97 and type(lowered_code) is int
    assert raised_text == "B" and type(raised_text) is str
    assert raised_code == 66 and type(raised_code) is int


@pytest.mark.parametrize("bad", ["", "ab", 1.5, None])
def test_bad_arguments_raise(bad):
    with pytest.raises(TypeError):
        isalpha(bad)