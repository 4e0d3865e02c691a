"""Sequential and binary search, plus open-addressing and chained hash tables."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any


def sequential_search(values: Iterable[Any], target: Any) -> int:
    """Return the index of the first item equal to ``target``, or -1."""
    for index, value in enumerate(values):
        if value == target:
            return index
    return -1


def binary_search(values: Sequence[Any], target: Any) -> int:
    """Return an index of ``target`` in the ascending ``values``, or -1."""
    left, right = 0, len(values) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if values[mid] == target:
            return mid
        if target < values[mid]:
            right = mid - 1
        else:
            left = mid + 1
    return -1


class LinearProbingTable:
    """Hash table keyed by integers, hashing ``key % modulus`` with linear probing."""

    def __init__(self, size: int = 200, modulus: int = 199) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        if not 0 < modulus <= size:
            raise ValueError("modulus must be between 1 and the table size")
        self._size = size
        self._modulus = modulus
        self._slots: list[tuple[int, Any] | None] = [None] * size
        self._count = 0

    def _probe_sequence(self, key: int) -> Iterator[int]:
        start = key % self._modulus
        for offset in range(self._size):
            yield (start + offset) % self._size

    def insert(self, key: int, value: Any = None) -> None:
        """Store ``value`` under ``key`` in the first free slot of its probe run."""
        for slot in self._probe_sequence(key):
            if self._slots[slot] is None:
                self._slots[slot] = (key, value)
                self._count += 1
                return
        raise OverflowError("hash table is full")

    def probe(self, key: int) -> tuple[int | None, list[int]]:
        """Return the slot holding ``key`` (or None) and the keys examined on the way."""
        visited: list[int] = []
        for slot in self._probe_sequence(key):
            entry = self._slots[slot]
            if entry is None:
                break
            visited.append(entry[0])
            if entry[0] == key:
                return slot, visited
        return None, visited

    def search(self, key: int) -> Any:
        """Return the value stored under ``key``."""
        slot, _ = self.probe(key)
        if slot is None:
            raise KeyError(key)
        entry = self._slots[slot]
        assert entry is not None
        return entry[1]

    def __len__(self) -> int:
        return self._count


class ChainedHashTable:
    """Hash table keyed by integers, resolving collisions by chaining."""

    def __init__(self, size: int = 100) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self._buckets: list[list[tuple[int, Any]]] = [[] for _ in range(size)]
        self._count = 0

    def insert(self, key: int, value: Any = None) -> None:
        """Put ``key`` at the front of its chain."""
        self._buckets[key % len(self._buckets)].insert(0, (key, value))
        self._count += 1

    def search(self, key: int) -> Any:
        """Return the value of the most recently inserted entry for ``key``."""
        for stored_key, value in self._buckets[key % len(self._buckets)]:
            if stored_key == key:
                return value
        raise KeyError(key)

    def __len__(self) -> int:
        return self._count