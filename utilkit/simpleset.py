"""An open-addressing hash set of string or byte keys with set algebra."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import IntEnum

__all__ = ["SetComparison", "SetFullError", "SimpleSet", "default_hash"]

_FNV_OFFSET = 14695981039346656037
_FNV_PRIME = 1099511628211
_MASK64 = (1 << 64) - 1

Key = str | bytes | bytearray
HashFunction = Callable[[bytes], int]


class SetComparison(IntEnum):
    """Outcome of comparing two sets."""

    EQUAL = 0
    LEFT_GREATER = 1
    UNEQUAL = 2
    RIGHT_GREATER = 3


class SetFullError(Exception):
    """Raised when no open slot can be found for a new key."""


def default_hash(key: Key) -> int:
    """Return the 64-bit FNV-1a hash of ``key``."""
    h = _FNV_OFFSET
    for byte in _as_bytes(key):
        h = ((h ^ byte) * _FNV_PRIME) & _MASK64
    return h


def _as_bytes(key: Key) -> bytes:
    if isinstance(key, str):
        return key.encode("utf-8")
    if isinstance(key, (bytes, bytearray)):
        return bytes(key)
    raise TypeError(f"set keys must be str or bytes, not {type(key).__name__}")


@dataclass(slots=True)
class _Node:
    key: Key
    data: bytes
    hash: int


class SimpleSet:
    """A set of keys stored with linear probing; grows when a quarter full."""

    def __init__(self, num_els: int = 1024, hash_function: HashFunction | None = None) -> None:
        if num_els < 1:
            raise ValueError("num_els must be at least 1")
        self._nodes: list[_Node | None] = [None] * num_els
        self._used = 0
        self._hash_function: HashFunction = hash_function or default_hash

    def _hash(self, data: bytes) -> int:
        return self._hash_function(data) & _MASK64

    def _find(self, hash_value: int, data: bytes) -> tuple[bool, int | None]:
        """Probe for ``data``: (True, slot) if found, (False, open slot), or (False, None) if full."""
        n = len(self._nodes)
        start = hash_value % n
        i = start
        while True:
            node = self._nodes[i]
            if node is None:
                return False, i
            if node.hash == hash_value and node.data == data:
                return True, i
            i = (i + 1) % n
            if i == start:
                return False, None

    def _relayout(self, start: int, end_on_null: bool) -> None:
        n = len(self._nodes)
        for j in range(n):
            i = (start + j) % n
            node = self._nodes[i]
            if node is not None:
                found, index = self._find(node.hash, node.data)
                if not found and index is not None:
                    self._nodes[index] = node
                    self._nodes[i] = None
            elif not end_on_null and j != 0:
                break

    def _grow(self) -> None:
        self._nodes.extend([None] * len(self._nodes))
        self._relayout(0, True)

    def add(self, key: Key) -> bool:
        """Add ``key``; return True if it was added, False if already present."""
        data = _as_bytes(key)
        hash_value = self._hash(data)
        found, _ = self._find(hash_value, data)
        if found:
            return False
        if self._used * 4 > len(self._nodes):
            self._grow()
        found, index = self._find(hash_value, data)
        if index is None:
            raise SetFullError("unable to insert: the set is full")
        if found:
            return False
        self._nodes[index] = _Node(key, data, hash_value)
        self._used += 1
        return True

    def remove(self, key: Key) -> None:
        """Remove ``key``; raise KeyError if it is not present."""
        data = _as_bytes(key)
        found, index = self._find(self._hash(data), data)
        if not found or index is None:
            raise KeyError(key)
        self._nodes[index] = None
        self._relayout(index, False)
        self._used -= 1

    def clear(self) -> None:
        """Remove every key, keeping the current capacity."""
        self._nodes = [None] * len(self._nodes)
        self._used = 0

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (str, bytes, bytearray)):
            return False
        data = _as_bytes(key)
        found, _ = self._find(self._hash(data), data)
        return found

    def __len__(self) -> int:
        return self._used

    def __iter__(self) -> Iterator[Key]:
        return (node.key for node in self._nodes if node is not None)

    def __repr__(self) -> str:
        return f"SimpleSet({self.to_list()!r})"

    def to_list(self) -> list[Key]:
        """Return the keys in storage order."""
        return list(self)

    def _new_like(self) -> SimpleSet:
        return SimpleSet(hash_function=self._hash_function)

    def union(self, other: SimpleSet) -> SimpleSet:
        """Return the keys in either set."""
        result = self._new_like()
        for key in self:
            result.add(key)
        for key in other:
            result.add(key)
        return result

    def intersection(self, other: SimpleSet) -> SimpleSet:
        """Return the keys in both sets."""
        result = self._new_like()
        for key in self:
            if key in other:
                result.add(key)
        return result

    def difference(self, other: SimpleSet) -> SimpleSet:
        """Return the keys in this set but not in ``other``."""
        result = self._new_like()
        for key in self:
            if key not in other:
                result.add(key)
        return result

    def symmetric_difference(self, other: SimpleSet) -> SimpleSet:
        """Return the keys in exactly one of the two sets."""
        result = self._new_like()
        for key in self:
            if key not in other:
                result.add(key)
        for key in other:
            if key not in self:
                result.add(key)
        return result

    def is_subset(self, other: SimpleSet) -> bool:
        """True if every key of this set is in ``other``."""
        return all(key in other for key in self)

    def is_superset(self, other: SimpleSet) -> bool:
        """True if every key of ``other`` is in this set."""
        return other.is_subset(self)

    def is_strict_subset(self, other: SimpleSet) -> bool:
        """True if this set is a subset of ``other`` and smaller than it."""
        if len(self) >= len(other):
            return False
        return self.is_subset(other)

    def is_strict_superset(self, other: SimpleSet) -> bool:
        """True if this set is a superset of ``other`` and larger than it."""
        return other.is_strict_subset(self)

    def compare(self, other: SimpleSet) -> SetComparison:
        """Compare sizes first, then contents."""
        if len(self) < len(other):
            return SetComparison.RIGHT_GREATER
        if len(other) < len(self):
            return SetComparison.LEFT_GREATER
        if all(key in other for key in self):
            return SetComparison.EQUAL
        return SetComparison.UNEQUAL