"""A small printf: %c %s %p %d %i %u %x %X %% and the ' ', '+' and '#' flags."""

from __future__ import annotations

import re
import sys
from typing import Any, Callable, Dict, Iterator, Optional, TextIO

from .conversions import (
    format_char,
    format_hex,
    format_int,
    format_percent,
    format_pointer,
    format_str,
    format_unsigned,
)

# A directive is '%', an optional run of one repeated flag, then one character.
_DIRECTIVE = re.compile(r"%( +|\++|#+)?(.?)", re.DOTALL)

_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "d": format_int,
    "i": format_int,
    "u": format_unsigned,
    "x": lambda value: format_hex(value, False),
    "X": lambda value: format_hex(value, True),
    "c": format_char,
    "s": format_str,
    "p": format_pointer,
}


def _argument_source(args: tuple) -> Callable[[], Any]:
    remaining: Iterator[Any] = iter(args)

    def take() -> Any:
        try:
            return next(remaining)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    return take


def _signed_with(prefix: str, value: Any) -> str:
    text = format_int(value)
    return text if text.startswith("-") else prefix + text


def _flagged(flag: str, spec: str, take: Callable[[], Any]) -> str:
    if flag == " ":
        if spec in ("d", "i"):
            return _signed_with(" ", take())
        if spec == "s":
            return format_str(take())
        return ""
    if flag == "+":
        if spec in ("d", "i"):
            return _signed_with("+", take())
        return ""
    if spec in ("x", "X"):
        upper = spec == "X"
        digits = format_hex(take(), upper)
        if digits == "0":
            return digits
        return ("0X" if upper else "0x") + digits
    return ""


def _convert(match: "re.Match[str]", take: Callable[[], Any]) -> str:
    flags, spec = match.group(1), match.group(2)
    if flags:
        return _flagged(flags[0], spec, take)
    if spec == "%":
        return format_percent()
    conversion = _CONVERSIONS.get(spec)
    if conversion is None:
        return ""
    return conversion(take())


def format_string(fmt: Optional[str], *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the text.

    Unknown conversions produce nothing and use no argument. A flag applies
    only to the conversions it supports: ' ' to d, i and s, '+' to d and i,
    '#' to x and X; with any other conversion the directive produces nothing.
    A missing argument raises TypeError; extra arguments are ignored.
    """
    if fmt is None:
        return ""
    take = _argument_source(args)
    return _DIRECTIVE.sub(lambda match: _convert(match, take), fmt)


def printf(fmt: Optional[str], *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the expanded text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    stream.flush()
    return len(text)