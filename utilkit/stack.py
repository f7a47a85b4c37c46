"""A last-in first-out stack built on a singly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["Stack", "StackNode"]


@dataclass(eq=False)
class StackNode:
    """One link of the stack."""

    data: Any
    next: StackNode | None = None


class Stack:
    """LIFO stack: push and pop at the head."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._head: StackNode | None = None
        self._size = 0
        for item in items or ():
            self.push(item)

    def push(self, data: Any) -> None:
        """Put ``data`` on top of the stack."""
        self._head = StackNode(data, self._head)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top item; IndexError when empty."""
        if self._head is None:
            raise IndexError("pop from an empty stack")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.data

    def first_node(self) -> StackNode | None:
        """Return the top node, or None when empty."""
        return self._head

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"Stack({list(self)!r})"