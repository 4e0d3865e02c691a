"""Singly and doubly linked lists with a sentinel head, and sorted-list helpers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any = None, next: _Node | None = None) -> None:
        self.value = value
        self.next = next


class LinkedList:
    """A singly linked list built by tail insertion."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head = _Node()
        self._length = 0
        tail = self._head
        for value in values:
            tail.next = _Node(value)
            tail = tail.next
            self._length += 1

    @classmethod
    def from_head_insertion(cls, values: Iterable[Any]) -> LinkedList:
        """Build a list by inserting each value at the front, reversing their order."""
        result = cls()
        for value in values:
            result._head.next = _Node(value, result._head.next)
            result._length += 1
        return result

    def _position(self, index: int) -> int:
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError("linked list index out of range")
        return index

    def _node_before(self, index: int) -> _Node:
        """Return the node preceding position ``index`` (the sentinel for 0)."""
        node = self._head
        for _ in range(index):
            assert node.next is not None
            node = node.next
        return node

    def append(self, value: Any) -> None:
        """Add a value at the end."""
        self._node_before(self._length).next = _Node(value)
        self._length += 1

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at position ``index``."""
        if not 0 <= index <= self._length:
            raise IndexError("insertion index out of range")
        before = self._node_before(index)
        before.next = _Node(value, before.next)
        self._length += 1

    def remove(self, index: int) -> Any:
        """Remove and return the value at ``index``."""
        before = self._node_before(self._position(index))
        target = before.next
        assert target is not None
        before.next = target.next
        self._length -= 1
        return target.value

    def index(self, value: Any) -> int:
        """Return the position of the first item equal to ``value``."""
        for position, item in enumerate(self):
            if item == value:
                return position
        raise ValueError(f"{value!r} is not in the list")

    def reverse(self) -> None:
        """Reverse the list in place by relinking its nodes."""
        node = self._head.next
        self._head.next = None
        while node is not None:
            following = node.next
            node.next = self._head.next
            self._head.next = node
            node = following

    def __getitem__(self, index: int) -> Any:
        node = self._node_before(self._position(index)).next
        assert node is not None
        return node.value

    def __setitem__(self, index: int, value: Any) -> None:
        node = self._node_before(self._position(index)).next
        assert node is not None
        node.value = value

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        node = self._head.next
        while node is not None:
            yield node.value
            node = node.next

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class _DNode:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.prev: _DNode | None = None
        self.next: _DNode | None = None


class DoublyLinkedList:
    """A doubly linked list built by tail insertion."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head = _DNode()
        self._tail = self._head
        self._length = 0
        for value in values:
            self.insert(self._length, value)

    @classmethod
    def from_head_insertion(cls, values: Iterable[Any]) -> DoublyLinkedList:
        """Build a list by inserting each value at the front, reversing their order."""
        result = cls()
        for value in values:
            result.insert(0, value)
        return result

    def _node_at(self, index: int) -> _DNode:
        """Return the node at ``index``, where -1 denotes the sentinel head."""
        node = self._head
        for _ in range(index + 1):
            assert node.next is not None
            node = node.next
        return node

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at position ``index``."""
        if not 0 <= index <= self._length:
            raise IndexError("insertion index out of range")
        before = self._node_at(index - 1)
        node = _DNode(value)
        node.next = before.next
        if before.next is not None:
            before.next.prev = node
        else:
            self._tail = node
        before.next = node
        node.prev = before
        self._length += 1

    def remove(self, index: int) -> Any:
        """Remove and return the value at ``index``."""
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError("linked list index out of range")
        node = self._node_at(index)
        assert node.prev is not None
        node.prev.next = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev
        self._length -= 1
        return node.value

    def __iter__(self) -> Iterator[Any]:
        node = self._head.next
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not self._head:
            yield node.value
            assert node.prev is not None
            node = node.prev

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


_MISSING = object()


def _merge(first: Iterable[Any], second: Iterable[Any]) -> Iterator[Any]:
    left, right = iter(first), iter(second)
    x, y = next(left, _MISSING), next(right, _MISSING)
    while x is not _MISSING and y is not _MISSING:
        if x < y:
            yield x
            x = next(left, _MISSING)
        else:
            yield y
            y = next(right, _MISSING)
    if x is not _MISSING:
        yield x
        yield from left
    if y is not _MISSING:
        yield y
        yield from right


def merge_sorted(first: Iterable[Any], second: Iterable[Any]) -> LinkedList:
    """Merge two ascending sequences into one ascending linked list."""
    return LinkedList(_merge(first, second))


def intersect_sorted(first: Iterable[Any], second: Iterable[Any]) -> LinkedList:
    """Return the common values of two ascending sequences of distinct values."""
    left, right = iter(first), iter(second)
    x, y = next(left, _MISSING), next(right, _MISSING)
    common = LinkedList()
    while x is not _MISSING and y is not _MISSING:
        if x == y:
            common.append(x)
            x, y = next(left, _MISSING), next(right, _MISSING)
        elif x > y:
            y = next(right, _MISSING)
        else:
            x = next(left, _MISSING)
    return common


def negatives_first(values: Iterable[Any]) -> LinkedList:
    """Return a list with the negative values first, each group keeping its order."""
    items = list(values)
    return LinkedList([v for v in items if v < 0] + [v for v in items if not v < 0])