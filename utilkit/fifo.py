"""A first-in first-out queue built on a doubly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["Queue", "QueueNode"]


@dataclass(eq=False)
class QueueNode:
    """One link of the queue, pointing both ways."""

    data: Any
    next: QueueNode | None = None
    prev: QueueNode | None = None


class Queue:
    """FIFO queue: push at the tail, pop from the head."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._head: QueueNode | None = None
        self._tail: QueueNode | None = None
        self._size = 0
        for item in items or ():
            self.push(item)

    def push(self, data: Any) -> None:
        """Add ``data`` at the back of the queue."""
        node = QueueNode(data)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
            node.prev = self._tail
        self._tail = node
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the front item; IndexError when empty."""
        if self._head is None:
            raise IndexError("pop from an empty queue")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._size -= 1
        return node.data

    def first_node(self) -> QueueNode | None:
        """Return the head node, or None when empty."""
        return self._head

    def last_node(self) -> QueueNode | None:
        """Return the tail node, or None when empty."""
        return self._tail

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __repr__(self) -> str:
        return f"Queue({list(self)!r})"