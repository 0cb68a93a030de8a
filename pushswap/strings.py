"""String helpers: splitting, searching, bounded copies, trimming."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_NUL = "\0"


def _single(char: str) -> str:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def split_words(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on a delimiter character, dropping empty words."""
    return [word for word in text.split(_single(delimiter)) if word]


def find_char(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``, or None.

    Searching for NUL finds the end of the text.
    """
    if _single(char) == _NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def rfind_char(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``, or None.

    Searching for NUL finds the end of the text.
    """
    if _single(char) == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def join(first: str, second: str) -> str:
    """Return the two strings one after the other."""
    return first + second


def bounded_copy(source: str, size: int) -> tuple[str, int]:
    """Copy into a buffer of ``size`` slots, one kept for the terminator.

    Returns the text that fits (empty when ``size`` is 0) and the full
    length of ``source``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = source[: size - 1] if size else ""
    return copied, len(source)


def bounded_concat(destination: str, source: str, size: int) -> tuple[str, int]:
    """Append ``source`` to ``destination`` within a buffer of ``size`` slots.

    Returns the resulting text and the length it tried to create. When the
    destination is already longer than ``size``, or ``size`` is 0, the
    destination is left as it is and ``size + len(source)`` is returned.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if len(destination) > size or size == 0:
        return destination, size + len(source)
    room = max(0, size - 1 - len(destination))
    return destination + source[:room], len(destination) + len(source)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def each_indexed(
    chars: MutableSequence[str], func: Callable[[int, str], str]
) -> None:
    """Replace every character in place by ``func(index, char)``."""
    for index, char in enumerate(chars):
        chars[index] = func(index, char)


def compare_prefix(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters; return the code difference.

    Zero means the prefixes match; the sign tells which string sorts first.
    """
    if count <= 0:
        return 0
    for left, right in zip(first[:count] + _NUL, second[:count] + _NUL):
        if left != right or left == _NUL:
            return ord(left) - ord(right)
    return 0


def find_within(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` chars."""
    if not needle:
        return 0
    index = haystack[: max(0, length)].find(needle)
    return None if index < 0 else index


def trim(text: str, charset: str) -> str:
    """Strip characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset) if charset else text


def substring(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``.

    A start past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start : start + length]