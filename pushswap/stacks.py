"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import Enum


class Operation(str, Enum):
    """An operation on the stacks, valued by its printed name."""

    PA = "pa"
    PB = "pb"
    SA = "sa"
    SB = "sb"
    SS = "ss"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def _swap(stack: deque[int]) -> None:
    if len(stack) > 1:
        first = stack.popleft()
        second = stack.popleft()
        stack.appendleft(first)
        stack.appendleft(second)


def _rotate(stack: deque[int]) -> None:
    if len(stack) > 1:
        stack.rotate(-1)


def _reverse_rotate(stack: deque[int]) -> None:
    if len(stack) > 1:
        stack.rotate(1)


def _push(destination: deque[int], source: deque[int]) -> None:
    if source:
        destination.appendleft(source.popleft())


class Stacks:
    """Stacks ``a`` and ``b`` (top at the left) and the operations applied."""

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.operations: list[Operation] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)}, b={list(self.b)})"

    def apply(self, operation: Operation | str) -> None:
        """Apply one operation, given as an Operation or its name."""
        try:
            operation = Operation(operation)
        except ValueError:
            raise ValueError(f"unknown operation: {operation!r}") from None
        getattr(self, operation.value)()

    def pa(self) -> None:
        """Move the top of b onto a."""
        _push(self.a, self.b)
        self.operations.append(Operation.PA)

    def pb(self) -> None:
        """Move the top of a onto b."""
        _push(self.b, self.a)
        self.operations.append(Operation.PB)

    def sa(self) -> None:
        """Swap the two top elements of a."""
        _swap(self.a)
        self.operations.append(Operation.SA)

    def sb(self) -> None:
        """Swap the two top elements of b."""
        _swap(self.b)
        self.operations.append(Operation.SB)

    def ss(self) -> None:
        """Swap the top elements of both stacks."""
        _swap(self.a)
        _swap(self.b)
        self.operations.append(Operation.SS)

    def ra(self) -> None:
        """Move the top of a to its bottom."""
        _rotate(self.a)
        self.operations.append(Operation.RA)

    def rb(self) -> None:
        """Move the top of b to its bottom."""
        _rotate(self.b)
        self.operations.append(Operation.RB)

    def rr(self) -> None:
        """Rotate both stacks."""
        _rotate(self.a)
        _rotate(self.b)
        self.operations.append(Operation.RR)

    def rra(self) -> None:
        """Move the bottom of a to its top."""
        _reverse_rotate(self.a)
        self.operations.append(Operation.RRA)

    def rrb(self) -> None:
        """Move the bottom of b to its top."""
        _reverse_rotate(self.b)
        self.operations.append(Operation.RRB)

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self.operations.append(Operation.RRR)


def is_sorted(values: Iterable[int]) -> bool:
    """Return True when the values never decrease from first to last."""
    items = list(values)
    return all(left <= right for left, right in zip(items, items[1:]))