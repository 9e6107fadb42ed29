"""A singly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One link of a list: a value and the node after it."""

    value: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list with front and back insertion."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for value in values:
            self.push_back(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, value: Any) -> Node:
        """Insert ``value`` at the front and return its node."""
        node = Node(value, self.head)
        self.head = node
        return node

    def push_back(self, value: Any) -> Node:
        """Append ``value`` at the end and return its node."""
        node = Node(value)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """The final node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Callable[[Any], None] | None = None) -> None:
        """Remove every node, passing each value to ``delete`` first when given."""
        if delete is not None:
            for node in self._nodes():
                delete(node.value)
        self.head = None

    def for_each(self, func: Callable[[Any], None]) -> None:
        """Call ``func`` on every value in order."""
        for node in self._nodes():
            func(node.value)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], None] | None = None,
    ) -> "LinkedList":
        """Return a new list of ``func(value)`` for every value.

        If ``func`` raises, the values already produced are passed to
        ``delete`` and the exception propagates.
        """
        result = LinkedList()
        try:
            for node in self._nodes():
                result.push_back(func(node.value))
        except Exception:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.value

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"