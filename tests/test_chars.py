import string

import pytest

from sigtalk import chars


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   -42", -42),
        ("\t\n\v\f\r+17xyz", 17),
        ("abc", 0),
        ("", 0),
        ("--5", 0),
        ("+-5", 0),
        ("  12 34", 12),
    ],
)
def test_atoi_parses_leading_number(text, expected):
    assert chars.atoi(text) == expected


def test_atoi_limits_and_wraparound():
    assert chars.atoi("2147483647") == 2147483647
    assert chars.atoi("-2147483648") == -2147483648
    assert chars.atoi("2147483648") == -2147483648


def test_atol_handles_values_beyond_int():
    assert chars.atol("2147483648") == 2147483648
    assert chars.atol("-9223372036854775808") == -9223372036854775808
    assert chars.atol("  +99") == 99


@pytest.mark.parametrize("n", [0, 1, -1, 7, -2147483648, 2147483647, 123456])
def test_itoa_round_trips_through_atoi(n):
    assert chars.atoi(chars.itoa(n)) == n


def test_itoa_extremes():
    assert chars.itoa(-2147483648) == "-2147483648"
    assert chars.itoa(0) == "0"


def test_itoa_rejects_out_of_range():
    with pytest.raises(OverflowError):
        chars.itoa(2147483648)


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        chars.itoa("12")


def test_predicates_match_ascii_classes():
    for code in range(-5, 300):
        ch_is_ascii = 0 <= code <= 127
        assert chars.isascii(code) == ch_is_ascii
        c = chr(code) if code >= 0 else None
        letter = c is not None and c in string.ascii_letters
        digit = c is not None and c in string.digits
        assert chars.isalpha(code) == letter
        assert chars.isdigit(code) == digit
        assert chars.isalnum(code) == (letter or digit)


def test_isprint_range():
    assert chars.isprint(" ")
    assert chars.isprint("~")
    assert not chars.isprint(31)
    assert not chars.isprint(127)


def test_predicates_accept_strings():
    assert chars.isalpha("q")
    assert not chars.isdigit("q")
    assert chars.isalnum("7")


def test_case_mapping_strings():
    assert chars.toupper("a") == "A"
    assert chars.tolower("Z") == "z"
    assert chars.toupper("5") == "5"
    assert chars.tolower("@") == "@"


def test_case_mapping_round_trip():
    for letter in string.ascii_lowercase:
        assert chars.tolower(chars.toupper(letter)) == letter
    for letter in string.ascii_uppercase:
        assert chars.toupper(chars.tolower(letter)) == letter


def test_case_mapping_ints_keep_type():
    assert chars.toupper(ord("b")) == ord("B")
    assert chars.tolower(ord("B")) == ord("b")


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        chars.isalpha("ab")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        chars.isdigit(3.5)