"""Byte-buffer helpers: fill, search, compare and copy."""

from __future__ import annotations

from collections.abc import Sequence


def _check_count(count: int, *lengths: int) -> None:
    if count < 0:
        raise ValueError("count must not be negative")
    if any(count > length for length in lengths):
        raise ValueError(f"count {count} runs past the end of a buffer")


def fill(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes to ``value`` (taken modulo 256)."""
    _check_count(count, len(buffer))
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def zero(buffer: bytearray, count: int) -> bytearray:
    """Set the first ``count`` bytes to zero."""
    return fill(buffer, 0, count)


def allocate_zeroed(count: int, size: int) -> bytearray:
    """A zeroed buffer of ``count * size`` bytes, at least one byte long."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        count = size = 1
    return bytearray(count * size)


def find_byte(data: Sequence[int], value: int, count: int) -> int | None:
    """Index of the first byte equal to ``value`` within ``count`` bytes."""
    _check_count(count, len(data))
    wanted = value & 0xFF
    return next(
        (index for index, byte in enumerate(data[:count]) if byte == wanted),
        None,
    )


def compare_bytes(first: Sequence[int], second: Sequence[int], count: int) -> int:
    """Difference of the first differing bytes within ``count``, else 0."""
    _check_count(count, len(first), len(second))
    for left, right in zip(first[:count], second[:count]):
        if left != right:
            return left - right
    return 0


def copy_bytes(
    destination: bytearray, source: Sequence[int], count: int
) -> bytearray:
    """Copy ``count`` bytes from ``source`` to the start of ``destination``."""
    _check_count(count, len(destination), len(source))
    destination[:count] = bytes(source[:count])
    return destination


def move_bytes(
    buffer: bytearray, destination: int, source: int, count: int
) -> bytearray:
    """Copy ``count`` bytes from offset ``source`` to offset ``destination``.

    The regions may overlap; the result is as if the source were copied
    aside first.
    """
    if destination < 0 or source < 0:
        raise ValueError("offsets must not be negative")
    _check_count(count, len(buffer) - destination, len(buffer) - source)
    buffer[destination : destination + count] = buffer[source : source + count]
    return buffer