"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One link of the list."""

    content: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list with constant-time front and back insertion."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items:
            self.append(item)

    def push_front(self, content: Any) -> Node:
        """Insert content at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def append(self, content: Any) -> Node:
        """Insert content at the back and return its node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Node | None:
        """Return the last node, or None for an empty list."""
        return self._tail

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Empty the list, calling delete on each content from front to back."""
        node = self.head
        self.head = self._tail = None
        self._size = 0
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call func on each content from front to back."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], Any] | None = None,
    ) -> LinkedList:
        """Return a new list of func applied to each content.

        If func raises, the contents produced so far are passed to delete
        before the error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.append(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"