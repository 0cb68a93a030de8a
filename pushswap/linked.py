"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One link: its content and the next node."""

    content: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list held by its head node."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self.head: Node | None = None
        for item in items or ():
            self.push_back(item)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Add a node at the front and return it."""
        self.head = Node(content, self.head)
        return self.head

    def push_back(self, content: Any) -> Node:
        """Add a node at the end and return it."""
        node = Node(content)
        end = self.last()
        if end is None:
            self.head = node
        else:
            end.next = node
        return node

    def last(self) -> Node | None:
        """The last node, or None for an empty list."""
        end = None
        for end in self._nodes():
            pass
        return end

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def clear(self, deleter: Callable[[Any], None]) -> None:
        """Pass every content to ``deleter`` in order, then empty the list."""
        node = self.head
        while node is not None:
            following = node.next
            deleter(node.content)
            node = following
            self.head = following
        self.head = None

    def for_each(self, func: Callable[[Any], None]) -> None:
        """Call ``func`` on every content in order."""
        for content in self:
            func(content)

    def map(
        self, func: Callable[[Any], Any], deleter: Callable[[Any], None]
    ) -> LinkedList:
        """A new list of ``func(content)`` for every content.

        If ``func`` fails, the contents already made are passed to
        ``deleter`` and the error is raised again.
        """
        result = LinkedList()
        for content in self:
            try:
                mapped = func(content)
            except Exception:
                result.clear(deleter)
                raise
            result.push_back(mapped)
        return result