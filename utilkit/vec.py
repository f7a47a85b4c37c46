"""A growable array that tracks an explicit capacity."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

__all__ = ["GROW_FACTOR", "INITIAL_CAPACITY", "Vec"]

GROW_FACTOR = 2
INITIAL_CAPACITY = 8


class Vec:
    """A dynamic array with bounds-checked access and capacity management."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._items: list[Any] = []
        self._cap = 0
        for item in items or ():
            self.push(item)

    def _check_index(self, idx: int, limit: int, what: str) -> None:
        if not 0 <= idx < limit:
            raise IndexError(f"{what}: index out of bounds")

    def push(self, item: Any) -> None:
        """Append ``item``, growing the capacity when needed."""
        if len(self._items) >= self._cap:
            self._cap = INITIAL_CAPACITY if self._cap == 0 else self._cap * GROW_FACTOR
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the last item."""
        if not self._items:
            raise IndexError("pop: vec is empty")
        return self._items.pop()

    def first(self) -> Any:
        """Return the first item."""
        if not self._items:
            raise IndexError("first: vec is empty")
        return self._items[0]

    def last(self) -> Any:
        """Return the last item."""
        if not self._items:
            raise IndexError("last: vec is empty")
        return self._items[-1]

    def __getitem__(self, idx: int) -> Any:
        self._check_index(idx, len(self._items), "get")
        return self._items[idx]

    def __setitem__(self, idx: int, value: Any) -> None:
        self._check_index(idx, len(self._items), "set")
        self._items[idx] = value

    def insert(self, idx: int, item: Any) -> None:
        """Insert ``item`` at ``idx`` (0 to len inclusive), shifting the rest."""
        self._check_index(idx, len(self._items) + 1, "insert")
        self.push(item)
        self._items.pop()
        self._items.insert(idx, item)

    def remove(self, idx: int) -> Any:
        """Remove and return the item at ``idx``, keeping order."""
        self._check_index(idx, len(self._items), "remove")
        return self._items.pop(idx)

    def remove_fast(self, idx: int) -> Any:
        """Remove the item at ``idx`` by moving the last item into its place."""
        self._check_index(idx, len(self._items), "remove_fast")
        removed = self._items[idx]
        last = self._items.pop()
        if idx < len(self._items):
            self._items[idx] = last
        return removed

    def sort(self, key: Callable[[Any], Any] | None = None) -> None:
        """Sort the items in place."""
        self._items.sort(key=key)

    def clear(self) -> None:
        """Drop every item, keeping the capacity."""
        self._items.clear()

    def shrink(self) -> None:
        """Reduce the capacity to the length, unless empty."""
        if 0 < len(self._items) < self._cap:
            self._cap = len(self._items)

    def reserve(self, min_cap: int) -> None:
        """Ensure the capacity is at least ``min_cap``."""
        if self._cap < min_cap:
            self._cap = min_cap

    def capacity(self) -> int:
        """Return the current capacity."""
        return self._cap

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Vec({self._items!r})"