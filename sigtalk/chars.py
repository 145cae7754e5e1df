"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_INT_BITS = 32
_LONG_BITS = 64
_WHITESPACE = frozenset({9, 10, 11, 12, 13, 32})


def _code(c: CharLike) -> int:
    """Return the character code of a one-character string or an int."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, not bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError(f"expected a character or an integer code, not {type(c).__name__}")


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's-complement signed integer of ``bits`` bits."""
    modulus = 1 << bits
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def _parse_number(text: str) -> int:
    """Parse leading whitespace, an optional sign and decimal digits."""
    index = 0
    length = len(text)
    while index < length and ord(text[index]) in _WHITESPACE:
        index += 1
    negative = False
    if index < length and text[index] in "+-":
        negative = text[index] == "-"
        index += 1
    start = index
    while index < length and "0" <= text[index] <= "9":
        index += 1
    digits = text[start:index]
    value = int(digits) if digits else 0
    return -value if negative else value


def atoi(text: str) -> int:
    """Convert the leading decimal number of ``text`` to a 32-bit signed int.

    Leading whitespace and a single sign are accepted; parsing stops at the
    first non-digit. Values outside the 32-bit range wrap around.
    """
    return _wrap(_parse_number(text), _INT_BITS)


def atol(text: str) -> int:
    """Convert the leading decimal number of ``text`` to a 64-bit signed int."""
    return _wrap(_parse_number(text), _LONG_BITS)


def isalpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def tolower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; other input is unchanged.

    The result has the same kind (str or int) as the argument.
    """
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def toupper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; other input is unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def itoa(n: int) -> str:
    """Return the decimal representation of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, not {type(n).__name__}")
    if _wrap(n, _INT_BITS) != n:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)