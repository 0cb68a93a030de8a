"""Formatted output with a small printf and character/string writers."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

from pushswap.conversions import int_to_str, to_hex

_UINT_MASK = 0xFFFFFFFF


def _wrap_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - 2**32 if value >= 2**31 else value


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(value & 0xFF)


def _pointer(value: Any) -> str:
    if not value:
        return "(nil)"
    return "0x" + format(value, "x")


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise ValueError(f"no argument left for %{spec}") from None
    if spec == "c":
        return _as_char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _pointer(value)
    if spec in "di":
        return int_to_str(_wrap_int32(value))
    if spec == "u":
        return str(value & _UINT_MASK)
    return to_hex(value, upper=spec == "X")


def format_string(fmt: str, *args: Any) -> str:
    """Expand %c %s %p %d %i %u %x %X and %% in ``fmt``.

    An unknown conversion character is dropped and takes no argument.
    """
    values = iter(args)
    pieces: list[str] = []
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, "")
        if spec:
            pieces.append(_convert(spec, values))
    return "".join(pieces)


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text and return the number of characters written."""
    text = format_string(fmt, *args)
    _target(stream).write(text)
    return len(text)


def put_char(char: str, stream: TextIO | None = None) -> int:
    """Write one character; return 1."""
    _target(stream).write(_as_char(char))
    return 1


def put_str(text: str | None, stream: TextIO | None = None) -> int:
    """Write ``text`` (``(null)`` for None); return its length."""
    written = "(null)" if text is None else text
    _target(stream).write(written)
    return len(written)


def put_line(text: str, stream: TextIO | None = None) -> int:
    """Write ``text`` and a newline; return the number written."""
    _target(stream).write(text + "\n")
    return len(text) + 1


def put_number(number: int, stream: TextIO | None = None) -> int:
    """Write a signed 32-bit integer in decimal; return the digits written."""
    text = int_to_str(number)
    _target(stream).write(text)
    return len(text)