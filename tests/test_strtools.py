import pytest

from sigtalk.strtools import (
    split,
    strchr,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
    word_count,
)


def test_split_drops_empty_pieces():
    assert split("  hello   world ", " ") == ["hello", "world"]


def test_split_without_separator_gives_whole_text():
    assert split("hello", ",") == ["hello"]


def test_split_of_only_separators_is_empty():
    assert split(",,,", ",") == []


def test_split_rejects_multi_char_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


@pytest.mark.parametrize("text", ["", "a", ",a,,b,", "a,b,c", ",,,"])
def test_word_count_matches_split(text):
    assert word_count(text, ",") == len(split(text, ","))


@pytest.mark.parametrize("text", ["a,b", "x,,y,z", "one"])
def test_split_pieces_contain_no_separator(text):
    pieces = split(text, ",")
    assert all(piece and "," not in piece for piece in pieces)
    assert ",".join(pieces) == ",".join(p for p in text.split(",") if p)


def test_strtrim_both_ends():
    assert strtrim("xyhixy", "xy") == "hi"


def test_strtrim_everything():
    assert strtrim("xxxx", "x") == ""


def test_strtrim_empty_set_keeps_text():
    assert strtrim("  abc  ", "") == "  abc  "


def test_strtrim_keeps_inner_characters():
    assert strtrim("xaxbx", "x") == "axb"


def test_substr_middle():
    assert substr("hello", 1, 3) == "ell"


def test_substr_start_past_end_is_empty():
    assert substr("hello", 10, 3) == ""


def test_substr_length_past_end_is_clamped():
    assert substr("hello", 2, 100) == "llo"


def test_substr_negative_start_raises():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strnstr_finds_within_length():
    haystack = "lorem ipsum dolor"
    assert strnstr(haystack, "ipsum", len(haystack)) == haystack.index("ipsum")


def test_strnstr_match_must_fit_within_length():
    haystack = "lorem ipsum dolor"
    end = haystack.index("ipsum") + len("ipsum")
    assert strnstr(haystack, "ipsum", end) == haystack.index("ipsum")
    assert strnstr(haystack, "ipsum", end - 1) is None


def test_strnstr_empty_needle_is_zero():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_missing_needle():
    assert strnstr("abc", "zz", 3) is None


def test_strncmp_equal_strings():
    assert strncmp("abc", "abc", 3) == 0


def test_strncmp_only_first_n_compared():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_shorter_string_sorts_first():
    assert strncmp("ab", "abc", 5) < 0
    assert strncmp("abc", "ab", 5) > 0


def test_strncmp_zero_length():
    assert strncmp("a", "b", 0) == 0


def test_strncmp_is_antisymmetric():
    assert strncmp("apple", "apricot", 7) == -strncmp("apricot", "apple", 7)


def test_strchr_first_occurrence():
    text = "hello"
    assert strchr(text, "l") == text.index("l")


def test_strchr_nul_finds_end():
    assert strchr("hello", "\0") == len("hello")


def test_strchr_missing():
    assert strchr("hello", "z") is None


def test_strrchr_last_occurrence():
    text = "hello"
    assert strrchr(text, "l") == text.rindex("l")


def test_strrchr_nul_finds_end():
    assert strrchr("abc", "\0") == len("abc")


def test_strrchr_missing():
    assert strrchr("hello", "z") is None


def test_strchr_rejects_empty_character():
    with pytest.raises(ValueError):
        strchr("hello", "")