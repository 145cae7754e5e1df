"""String searching, comparison, splitting and trimming helpers."""

from __future__ import annotations

from itertools import zip_longest
from typing import List, Optional

_NUL = "\0"


def _single_char(value: str, what: str) -> str:
    """Check that ``value`` is exactly one character and return it."""
    if not isinstance(value, str):
        raise TypeError(f"{what} must be a str, not {type(value).__name__}")
    if len(value) != 1:
        raise ValueError(f"{what} must be a single character, got {value!r}")
    return value


def _non_negative(value: int, what: str) -> int:
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")
    return value


def split(text: str, sep: str) -> List[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    sep = _single_char(sep, "separator")
    return [word for word in text.split(sep) if word]


def word_count(text: str, sep: str) -> int:
    """Count the non-empty runs of ``text`` between occurrences of ``sep``."""
    return len(split(text, sep))


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start past the end of the text yields an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    Returns the index of the first match, or None. An empty needle matches
    at index 0.
    """
    _non_negative(length, "length")
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns zero when they match, otherwise the difference between the codes
    of the first differing characters; a shorter string compares as if padded
    with NUL characters.
    """
    _non_negative(n, "n")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            return 0
    return 0


def strchr(text: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``text``, or None.

    Searching for NUL finds the end of the string.
    """
    c = _single_char(c, "character")
    index = text.find(c)
    if index >= 0:
        return index
    return len(text) if c == _NUL else None


def strrchr(text: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``text``, or None.

    Searching for NUL finds the end of the string.
    """
    c = _single_char(c, "character")
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index