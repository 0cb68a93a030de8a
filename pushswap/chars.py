"""ASCII character classes and case conversion on character codes."""

from __future__ import annotations


def _code(char: int | str) -> int:
    return ord(char) if isinstance(char, str) else char


def _like(original: int | str, code: int) -> int | str:
    return chr(code) if isinstance(original, str) else code


def is_alpha(code: int | str) -> bool:
    """True for an ASCII letter."""
    value = _code(code)
    return ord("a") <= value <= ord("z") or ord("A") <= value <= ord("Z")


def is_digit(code: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(code) <= ord("9")


def is_alnum(code: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(code) or is_digit(code)


def is_ascii(code: int | str) -> bool:
    """True for a code from 0 to 127."""
    return 0 <= _code(code) <= 127


def is_print(code: int | str) -> bool:
    """True for a printable ASCII code, space to tilde."""
    return 32 <= _code(code) <= 126


def to_lower(code: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; leave anything else as it is."""
    value = _code(code)
    if 65 <= value <= 90:
        return _like(code, value + 32)
    return code


def to_upper(code: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; leave anything else as it is."""
    value = _code(code)
    if 97 <= value <= 122:
        return _like(code, value - 32)
    return code