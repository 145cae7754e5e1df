"""Text produced by the individual printf conversions."""

from __future__ import annotations

from typing import Optional, Union

_UINT_BITS = 32
_ULONG_BITS = 64
_CHAR_BITS = 8

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"


def _integer(value: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an int, not {type(value).__name__}")
    return value


def _unsigned(value: int, bits: int) -> int:
    """Reduce ``value`` modulo 2**bits, as an unsigned C integer would."""
    return value % (1 << bits)


def _signed(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's-complement signed integer of ``bits`` bits."""
    value = _unsigned(value, bits)
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def format_char(c: Union[int, str]) -> str:
    """Render ``%c``: one character, given as a str or as a byte code.

    Integer codes are truncated to a single byte.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(_unsigned(_integer(c, "character code"), _CHAR_BITS))


def format_int(n: int) -> str:
    """Render ``%d`` / ``%i``: a 32-bit signed decimal integer."""
    return str(_signed(_integer(n, "value"), _UINT_BITS))


def format_unsigned(n: int) -> str:
    """Render ``%u``: a 32-bit unsigned decimal integer."""
    return str(_unsigned(_integer(n, "value"), _UINT_BITS))


def format_hex(n: int, upper: bool = False) -> str:
    """Render ``%x`` (or ``%X`` when ``upper``): a 32-bit unsigned hex integer."""
    value = _unsigned(_integer(n, "value"), _UINT_BITS)
    return format(value, "X" if upper else "x")


def format_pointer(address: Optional[int]) -> str:
    """Render ``%p``: ``0x`` and lower-case hex, or ``(nil)`` for a null address."""
    if address is None:
        return NULL_POINTER
    value = _unsigned(_integer(address, "address"), _ULONG_BITS)
    if value == 0:
        return NULL_POINTER
    return "0x" + format(value, "x")


def format_str(s: Optional[str]) -> str:
    """Render ``%s``: the string itself, or ``(null)`` for None."""
    if s is None:
        return NULL_STRING
    if not isinstance(s, str):
        raise TypeError(f"expected a str, not {type(s).__name__}")
    return s


def format_percent() -> str:
    """Render ``%%``: a literal percent sign."""
    return "%"