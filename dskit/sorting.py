"""Comparison sorts, a quickselect-based top-k and a binary max-heap."""

from __future__ import annotations

import bisect
import operator
from collections.abc import Callable, Iterable
from typing import Any

Before = Callable[[Any, Any], bool]


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy, bubbling the smallest item forward on each pass."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        swapped = False
        for j in range(n - 1, i, -1):
            if items[j] < items[j - 1]:
                items[j], items[j - 1] = items[j - 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def _partition(items: list[Any], left: int, right: int, before: Before) -> int:
    """Place ``items[left]`` at its final position within ``[left, right]``."""
    pivot = items[left]
    while left < right:
        while left < right and not before(items[right], pivot):
            right -= 1
        items[left] = items[right]
        while left < right and not before(pivot, items[left]):
            left += 1
        items[right] = items[left]
    items[left] = pivot
    return left


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using first-element-pivot quicksort."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        left, right = pending.pop()
        if left < right:
            mid = _partition(items, left, right, operator.lt)
            pending.append((left, mid - 1))
            pending.append((mid + 1, right))
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using straight insertion."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and items[j] > current:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def binary_insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy, locating each insertion point by binary search."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        position = bisect.bisect_right(items, current, 0, i)
        items[position + 1 : i + 1] = items[position:i]
        items[position] = current
    return items


def shell_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using Shell's gap sequence n/2, n/4, ..., 1."""
    items = list(values)
    n = len(items)
    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            current = items[i]
            j = i - gap
            while j >= 0 and items[j] > current:
                items[j + gap] = items[j]
                j -= gap
            items[j + gap] = current
        gap //= 2
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using simple selection."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        smallest = min(range(i, n), key=items.__getitem__)
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _sift_down(items: list[Any], low: int, high: int) -> None:
    """Restore the max-heap property below ``low`` within ``items[:high + 1]``."""
    i = low
    j = 2 * i + 1
    root = items[i]
    while j <= high:
        if j < high and items[j] < items[j + 1]:
            j += 1
        if root < items[j]:
            items[i] = items[j]
            i = j
            j = 2 * i + 1
        else:
            break
    items[i] = root


def _heapify(items: list[Any]) -> None:
    n = len(items)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(items, i, n - 1)


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using an in-place max-heap."""
    items = list(values)
    _heapify(items)
    for i in range(len(items) - 1, 0, -1):
        items[0], items[i] = items[i], items[0]
        _sift_down(items, 0, i - 1)
    return items


def top_k(values: Iterable[Any], k: int) -> list[Any]:
    """Return the ``k`` largest values, largest first, found by quickselect."""
    items = list(values)
    if not 0 <= k <= len(items):
        raise ValueError(f"k must be between 0 and {len(items)}, got {k}")
    left, right, remaining = 0, len(items) - 1, k
    while remaining and left < right:
        mid = _partition(items, left, right, operator.gt)
        size = mid - left + 1
        if size < remaining:
            remaining -= size
            left = mid + 1
        elif size > remaining:
            right = mid - 1
        else:
            break
    return sorted(items[:k], reverse=True)


class MaxHeap:
    """A binary max-heap stored in a list."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items = list(values)
        _heapify(self._items)

    def push(self, value: Any) -> None:
        """Add a value and sift it up to its place."""
        items = self._items
        items.append(value)
        child = len(items) - 1
        while child > 0:
            parent = (child - 1) // 2
            if items[child] > items[parent]:
                items[child], items[parent] = items[parent], items[child]
                child = parent
            else:
                break

    def pop(self) -> Any:
        """Remove and return the largest value."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            _sift_down(self._items, 0, len(self._items) - 1)
        return top

    def peek(self) -> Any:
        """Return the largest value without removing it."""
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)