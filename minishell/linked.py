"""A singly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["Node", "LinkedList"]


@dataclass(eq=False)
class Node:
    """One link of a list: a value and the node after it."""

    value: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list that keeps a pointer to its first node."""

    def __init__(self, values: Iterable[Any] | None = None) -> None:
        self.head: Node | None = None
        for value in values or ():
            self.push_back(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, value: Any) -> Node:
        """Put ``value`` at the start of the list; return its node."""
        self.head = Node(value, self.head)
        return self.head

    def push_back(self, value: Any) -> Node:
        """Put ``value`` at the end of the list; return its node."""
        node = Node(value)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """The final node, or ``None`` for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Remove every node, first handing each value to ``delete`` if given."""
        while self.head is not None:
            node = self.head
            self.head = node.next
            if delete is not None:
                delete(node.value)
            node.next = None

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every value, front to back."""
        if func is None:
            raise TypeError("for_each: no function given")
        for value in self:
            func(value)

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """A new list holding ``func(value)`` for every value."""
        if func is None:
            raise TypeError("map: no function given")
        return LinkedList(func(value) for value in self)