"""A string-keyed hash map using open addressing with linear probing."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["HashMap", "HashMapFullError", "HashMapStats", "fnv1a_64"]

_FNV_OFFSET = 14695981039346656037
_FNV_PRIME = 1099511628211
_MASK64 = (1 << 64) - 1
_MAX_FULLNESS = 0.25

HashFunction = Callable[[str], int]

_MISSING = object()


class HashMapFullError(Exception):
    """Raised when no open slot can be found for a new key."""


def fnv1a_64(key: str | bytes) -> int:
    """Return the 64-bit FNV-1a hash of ``key``."""
    data = key.encode("utf-8") if isinstance(key, str) else bytes(key)
    h = _FNV_OFFSET
    for byte in data:
        h = ((h ^ byte) * _FNV_PRIME) & _MASK64
    return h


@dataclass(slots=True)
class _Node:
    key: str
    value: Any
    hash: int


@dataclass(frozen=True)
class HashMapStats:
    """Probe-length and collision figures for a hash map."""

    number_nodes: int
    used_nodes: int
    fullness: float
    avg_big_o: float
    avg_used_big_o: float
    max_big_o: int
    worst_case: int
    hash_collisions: int
    index_collisions: int

    def report(self) -> str:
        """Return the statistics as a human-readable block of text."""
        return (
            "HashMap:\n"
            f"    Number Nodes: {self.number_nodes}\n"
            f"    Used Nodes: {self.used_nodes}\n"
            f"    Fullness: {self.fullness:f}%\n"
            f"    Average O(n): {self.avg_big_o:f}\n"
            f"    Average Used O(n): {self.avg_used_big_o:f}\n"
            f"    Max O(n): {self.max_big_o}\n"
            f"    Max Consecutive Buckets Used: {self.worst_case}\n"
            f"    Number Hash Collisions: {self.hash_collisions}\n"
            f"    Number Index Collisions: {self.index_collisions}\n"
        )


class HashMap:
    """Map of string keys to values; doubles its table when a quarter full."""

    def __init__(self, num_els: int = 1024, hash_function: HashFunction | None = None) -> None:
        if num_els < 1:
            raise ValueError("num_els must be at least 1")
        self._nodes: list[_Node | None] = [None] * num_els
        self._used = 0
        self._hash_function: HashFunction = hash_function or fnv1a_64

    def _hash(self, key: str) -> int:
        return self._hash_function(key) & _MASK64

    def _find(self, key: str, hash_value: int) -> tuple[bool, int | None]:
        """Probe for ``key``: (True, slot), (False, open slot) or (False, None) if full."""
        n = len(self._nodes)
        start = hash_value % n
        i = start
        while True:
            node = self._nodes[i]
            if node is None:
                return False, i
            if node.hash == hash_value and node.key == key:
                return True, i
            i = (i + 1) % n
            if i == start:
                return False, None

    def _relayout(self, start: int, end_on_null: bool) -> bool:
        """Move nodes to better slots; return True if any moved."""
        moved = False
        n = len(self._nodes)
        for j in range(n):
            i = (start + j) % n
            node = self._nodes[i]
            if node is not None:
                found, index = self._find(node.key, node.hash)
                if not found and index is not None:
                    moved = True
                    self._nodes[index] = node
                    self._nodes[i] = None
            elif not end_on_null and j != 0:
                break
        return moved

    def _grow(self) -> None:
        self._nodes.extend([None] * len(self._nodes))
        while self._relayout(0, True):
            pass

    def _fraction_full(self) -> float:
        return self._used / len(self._nodes)

    def set(self, key: str, value: Any) -> Any:
        """Store ``value`` under ``key``.

        Returns the replaced value when the key already existed, otherwise
        the newly stored value.
        """
        if self._fraction_full() >= _MAX_FULLNESS:
            self._grow()
        hash_value = self._hash(key)
        found, index = self._find(key, hash_value)
        if index is None:
            raise HashMapFullError("unable to insert: the hashmap is full")
        if found:
            node = self._nodes[index]
            assert node is not None
            previous, node.value = node.value, value
            return previous
        self._nodes[index] = _Node(key, value, hash_value)
        self._used += 1
        return value

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def _locate(self, key: str) -> int | None:
        found, index = self._find(key, self._hash(key))
        return index if found else None

    def __getitem__(self, key: str) -> Any:
        index = self._locate(key)
        if index is None:
            raise KeyError(key)
        node = self._nodes[index]
        assert node is not None
        return node.value

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value for ``key`` or ``default`` if absent."""
        index = self._locate(key)
        if index is None:
            return default
        node = self._nodes[index]
        assert node is not None
        return node.value

    def pop(self, key: str, default: Any = _MISSING) -> Any:
        """Remove ``key`` and return its value; KeyError if absent and no default."""
        index = self._locate(key)
        if index is None:
            if default is _MISSING:
                raise KeyError(key)
            return default
        node = self._nodes[index]
        assert node is not None
        self._nodes[index] = None
        self._used -= 1
        self._relayout(index, False)
        return node.value

    def __delitem__(self, key: str) -> None:
        self.pop(key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._locate(key) is not None

    def __len__(self) -> int:
        return self._used

    def __iter__(self) -> Iterator[str]:
        return (node.key for node in self._nodes if node is not None)

    def __repr__(self) -> str:
        items = ", ".join(f"{node.key!r}: {node.value!r}" for node in self._nodes if node is not None)
        return f"HashMap({{{items}}})"

    def keys(self) -> list[str]:
        """Return the keys in storage order."""
        return list(self)

    def clear(self) -> None:
        """Remove every entry, keeping the current capacity."""
        self._nodes = [None] * len(self._nodes)
        self._used = 0

    def fullness(self) -> float:
        """Return the percentage of slots in use."""
        return self._fraction_full() * 100.0

    def stats(self) -> HashMapStats:
        """Compute probe-length and collision statistics."""
        n = len(self._nodes)
        total = used_total = max_big_o = worst_case = run = 0
        hashes: list[int] = []
        indexes: list[int] = []
        if self._used:
            for i, node in enumerate(self._nodes):
                if node is not None:
                    run += 1
                    home = node.hash % n
                    big_o = i + n - home + 1 if i < home else 1 + i - home
                    used_total += big_o
                    total += big_o
                    max_big_o = max(max_big_o, big_o)
                    hashes.append(node.hash)
                    indexes.append(home)
                else:
                    total += 1
                    worst_case = max(worst_case, run)
                    run = 0
        else:
            total = n
        hashes.sort()
        indexes.sort()
        hash_collisions = sum(1 for a, b in zip(hashes, hashes[1:]) if a == b)
        index_collisions = sum(1 for a, b in zip(indexes, indexes[1:]) if a == b)
        return HashMapStats(
            number_nodes=n,
            used_nodes=self._used,
            fullness=self.fullness(),
            avg_big_o=total / n,
            avg_used_big_o=used_total / self._used if self._used else 0.0,
            max_big_o=max_big_o,
            worst_case=worst_case,
            hash_collisions=hash_collisions,
            index_collisions=index_collisions,
        )