"""Integer conversions: decimal parsing, decimal and hexadecimal text."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_UINT_MASK = 0xFFFFFFFF
_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")


def _wrap_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - 2**32 if value > INT_MAX else value


def parse_int(text: str) -> int:
    """Read a decimal integer the way atoi does.

    Leading whitespace is skipped, one optional sign is read, then digits
    up to the first non-digit. No digits gives 0. The result wraps to a
    signed 32-bit integer.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if char not in _DIGITS:
            break
        digits.append(char)
    magnitude = int("".join(digits)) if digits else 0
    return _wrap_int32(sign * magnitude)


def int_to_str(number: int) -> str:
    """Decimal text of a signed 32-bit integer."""
    if not INT_MIN <= number <= INT_MAX:
        raise ValueError(f"{number} does not fit in a 32-bit signed integer")
    return str(number)


def to_hex(number: int, upper: bool = False) -> str:
    """Hexadecimal text of ``number`` taken as an unsigned 32-bit integer."""
    return format(number & _UINT_MASK, "X" if upper else "x")