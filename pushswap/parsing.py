"""Reading the puzzle's numbers from command-line text."""

from __future__ import annotations

from collections.abc import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_DIGITS = frozenset("0123456789")


class InputError(ValueError):
    """Raised when the numbers given are not a valid puzzle input."""


def split_string(text: str, delimiter: str) -> list[str]:
    """Split on a delimiter character, dropping empty pieces."""
    return [part for part in text.split(delimiter) if part]


def has_syntax_error(token: str) -> bool:
    """Return True unless the token is an optional sign followed by digits."""
    if not token or (token[0] not in "+-" and token[0] not in _DIGITS):
        return True
    body = token[1:] if token[0] in "+-" else token
    return not all(char in _DIGITS for char in body)


def _to_int(token: str) -> int:
    sign = -1 if token[0] == "-" else 1
    digits = token[1:] if token[0] in "+-" else token
    return sign * int(digits or "0")


def parse_numbers(tokens: Iterable[str]) -> list[int]:
    """Convert tokens to distinct 32-bit integers, raising InputError otherwise."""
    numbers: list[int] = []
    seen: set[int] = set()
    for token in tokens:
        if has_syntax_error(token):
            raise InputError(f"invalid number: {token!r}")
        value = _to_int(token)
        if not INT_MIN <= value <= INT_MAX:
            raise InputError(f"number out of range: {token!r}")
        if value in seen:
            raise InputError(f"duplicate number: {token!r}")
        seen.add(value)
        numbers.append(value)
    return numbers