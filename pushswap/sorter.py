"""Sorting stack ``a`` with the stack operations, cheapest move first."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable

from pushswap.stacks import Operation, Stacks, is_sorted


def _above_median(stack: deque[int], value: int) -> bool:
    return stack.index(value) <= len(stack) // 2


def _moves_to_top(stack: deque[int], value: int) -> int:
    position = stack.index(value)
    return position if position <= len(stack) // 2 else len(stack) - position


def _target(a: deque[int], value: int) -> int:
    """The smallest value of a above ``value``, or the minimum of a."""
    larger = [candidate for candidate in a if candidate > value]
    return min(larger) if larger else min(a)


def _cheapest(stacks: Stacks) -> tuple[int, int]:
    """The value of b cheapest to insert into a, with its target in a."""

    def cost(value: int) -> int:
        target = _target(stacks.a, value)
        return _moves_to_top(stacks.b, value) + _moves_to_top(stacks.a, target)

    chosen = min(stacks.b, key=cost)
    return chosen, _target(stacks.a, chosen)


def _bring_to_top(
    stack: deque[int],
    value: int,
    forward: Callable[[], None],
    backward: Callable[[], None],
) -> None:
    step = forward if _above_median(stack, value) else backward
    while stack[0] != value:
        step()


def _move_cheapest(stacks: Stacks) -> None:
    value, target = _cheapest(stacks)
    value_up = _above_median(stacks.b, value)
    target_up = _above_median(stacks.a, target)
    if value_up and target_up:
        while stacks.a[0] != target and stacks.b[0] != value:
            stacks.rr()
    elif not value_up and not target_up:
        while stacks.a[0] != target and stacks.b[0] != value:
            stacks.rrr()
    _bring_to_top(stacks.b, value, stacks.rb, stacks.rrb)
    _bring_to_top(stacks.a, target, stacks.ra, stacks.rra)
    stacks.pa()


def sort_three(stacks: Stacks) -> None:
    """Sort a stack ``a`` of three (or two) values in at most two operations."""
    a = stacks.a
    if len(a) < 2:
        raise ValueError("sort_three needs at least two values in stack a")
    top = max(a)
    if a[0] == top:
        stacks.ra()
    elif a[1] == top:
        stacks.rra()
    if a[0] > a[1]:
        stacks.sa()


def push_swap(stacks: Stacks) -> None:
    """Sort stack ``a`` using stack ``b`` as scratch space."""
    length = len(stacks.a)
    if length > 3:
        for _ in range(length - 3):
            stacks.pb()
        sort_three(stacks)
    elif length == 3:
        sort_three(stacks)
    elif length == 2:
        stacks.sa()
    while stacks.b:
        _move_cheapest(stacks)
    if not stacks.a:
        return
    _bring_to_top(stacks.a, min(stacks.a), stacks.ra, stacks.rra)


def sort_operations(values: Iterable[int]) -> list[Operation]:
    """Return the operations that sort the given values, top first."""
    stacks = Stacks(values)
    if not is_sorted(stacks.a):
        if len(stacks.a) == 2:
            stacks.sa()
        elif len(stacks.a) == 3:
            sort_three(stacks)
        else:
            push_swap(stacks)
    return stacks.operations