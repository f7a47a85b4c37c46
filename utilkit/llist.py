"""A singly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["LinkedList", "LinkedListNode"]


@dataclass(eq=False)
class LinkedListNode:
    """One link of a singly linked list."""

    data: Any
    next: LinkedListNode | None = None


class LinkedList:
    """A singly linked list supporting positional insert and remove."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._head: LinkedListNode | None = None
        self._tail: LinkedListNode | None = None
        self._size = 0
        for item in items or ():
            self.append(item)

    def append(self, data: Any) -> None:
        """Add ``data`` at the end of the list."""
        node = LinkedListNode(data)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert(self, idx: int, data: Any) -> None:
        """Insert ``data`` so it sits at position ``idx``.

        An index at or past the end appends; a negative index raises IndexError.
        """
        if idx < 0:
            raise IndexError("linked list index must not be negative")
        if idx >= self._size:
            self.append(data)
            return
        if idx == 0:
            self._head = LinkedListNode(data, self._head)
            self._size += 1
            return
        previous = self._node_at(idx - 1)
        previous.next = LinkedListNode(data, previous.next)
        self._size += 1

    def remove(self, idx: int) -> Any:
        """Remove the node at ``idx`` and return its data."""
        if idx < 0 or idx >= self._size:
            raise IndexError("linked list index out of range")
        assert self._head is not None
        if idx == 0:
            removed = self._head
            self._head = removed.next
            if self._head is None:
                self._tail = None
        else:
            previous = self._node_at(idx - 1)
            removed = previous.next
            assert removed is not None
            previous.next = removed.next
            if removed is self._tail:
                self._tail = previous
        self._size -= 1
        return removed.data

    def _node_at(self, idx: int) -> LinkedListNode:
        node = self._head
        for _ in range(idx):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def first_node(self) -> LinkedListNode | None:
        """Return the head node, or None when empty."""
        return self._head

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"