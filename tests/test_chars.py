import string

import pytest

from pushswap.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("char", list(string.ascii_letters))
def test_letters_are_alpha_and_alnum(char):
    assert is_alpha(ord(char)) is True
    assert is_alnum(ord(char)) is True
    assert is_digit(ord(char)) is False


@pytest.mark.parametrize("char", list(string.digits))
def test_digits(char):
    assert is_digit(ord(char)) is True
    assert is_alnum(char) is True
    assert is_alpha(char) is False


@pytest.mark.parametrize("char", ["@", "[", "`", "{", "/", ":", " "])
def test_neighbours_of_ranges_are_not_alnum(char):
    assert is_alnum(ord(char)) is False


@pytest.mark.parametrize(
    ("code", "expected"), [(-1, False), (0, True), (127, True), (128, False)]
)
def test_is_ascii_bounds(code, expected):
    assert is_ascii(code) is expected


@pytest.mark.parametrize(
    ("code", "expected"), [(31, False), (32, True), (126, True), (127, False)]
)
def test_is_print_bounds(code, expected):
    assert is_print(code) is expected


def test_case_conversion_on_codes():
    assert to_lower(ord("A")) == ord("a")
    assert to_upper(ord("z")) == ord("Z")


def test_case_conversion_on_strings():
    assert to_lower("Q") == "q"
    assert to_upper("q") == "Q"


@pytest.mark.parametrize("char", list(string.ascii_letters))
def test_case_round_trip(char):
    assert to_upper(to_lower(char)) == char.upper()
    assert to_lower(to_upper(char)) == char.lower()


@pytest.mark.parametrize("char", ["1", "@", "[", "`", "{", " "])
def test_non_letters_unchanged(char):
    assert to_lower(char) == char
    assert to_upper(ord(char)) == ord(char)