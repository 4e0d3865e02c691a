"""An array-backed list with positional operations and sorted merging."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from dskit.linked_list import merge_sorted


class SeqList:
    """A sequential list of values stored contiguously."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items = list(values)

    def append(self, value: Any) -> None:
        """Add a value at the end."""
        self._items.append(value)

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` at position ``index``, shifting later items back."""
        if not 0 <= index <= len(self._items):
            raise IndexError("insertion index out of range")
        self._items.insert(index, value)

    def remove(self, index: int) -> Any:
        """Remove and return the value at ``index``."""
        try:
            return self._items.pop(index)
        except IndexError:
            raise IndexError("sequential list index out of range") from None

    def index(self, value: Any) -> int:
        """Return the position of the first item equal to ``value``."""
        try:
            return self._items.index(value)
        except ValueError:
            raise ValueError(f"{value!r} is not in the list") from None

    def remove_value(self, value: Any) -> int:
        """Remove every item equal to ``value`` and return how many were removed."""
        kept = [item for item in self._items if item != value]
        removed = len(self._items) - len(kept)
        self._items = kept
        return removed

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[index] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SeqList):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


def merge_seq_lists(first: Iterable[Any], second: Iterable[Any]) -> SeqList:
    """Merge two ascending sequences into one ascending sequential list."""
    return SeqList(merge_sorted(first, second))