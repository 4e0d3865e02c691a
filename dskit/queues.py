"""Sequential, circular and linked queues, and classic queue exercises."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from itertools import pairwise
from typing import Any


class SequentialQueue:
    """A non-circular array queue: slots freed at the front are never reused."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._data: list[Any] = [None] * capacity
        self._front = -1
        self._rear = -1

    def push(self, value: Any) -> None:
        """Add a value at the back, failing once the last slot has been used."""
        if self._rear == len(self._data) - 1:
            raise OverflowError("queue is full")
        self._rear += 1
        self._data[self._rear] = value

    def pop(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise IndexError("pop from an empty queue")
        self._front += 1
        value = self._data[self._front]
        self._data[self._front] = None
        return value

    def peek(self) -> Any:
        """Return the value at the front without removing it."""
        if self.is_empty():
            raise IndexError("peek at an empty queue")
        return self._data[self._front + 1]

    def is_empty(self) -> bool:
        return self._front == self._rear

    def __len__(self) -> int:
        return self._rear - self._front


class CircularQueue:
    """A circular array queue that keeps one slot free to tell full from empty."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 2:
            raise ValueError("capacity must be at least 2")
        self._data: list[Any] = [None] * capacity
        self._front = 0
        self._rear = 0

    def push(self, value: Any) -> None:
        """Add a value at the back."""
        following = (self._rear + 1) % len(self._data)
        if following == self._front:
            raise OverflowError("queue is full")
        self._rear = following
        self._data[self._rear] = value

    def pop(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise IndexError("pop from an empty queue")
        self._front = (self._front + 1) % len(self._data)
        value = self._data[self._front]
        self._data[self._front] = None
        return value

    def peek(self) -> Any:
        """Return the value at the front without removing it."""
        if self.is_empty():
            raise IndexError("peek at an empty queue")
        return self._data[(self._front + 1) % len(self._data)]

    def is_empty(self) -> bool:
        return self._front == self._rear

    def __len__(self) -> int:
        return (self._rear - self._front) % len(self._data)


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: _Node | None = None


class LinkedQueue:
    """A queue of linked nodes with front and rear pointers."""

    def __init__(self) -> None:
        self._front: _Node | None = None
        self._rear: _Node | None = None
        self._length = 0

    def push(self, value: Any) -> None:
        """Add a value at the back."""
        node = _Node(value)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._length += 1

    def pop(self) -> Any:
        """Remove and return the value at the front."""
        if self._front is None:
            raise IndexError("pop from an empty queue")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._length -= 1
        return node.value

    def peek(self) -> Any:
        """Return the value at the front without removing it."""
        if self._front is None:
            raise IndexError("peek at an empty queue")
        return self._front.value

    def is_empty(self) -> bool:
        return self._front is None

    def __len__(self) -> int:
        return self._length


def josephus(n: int, m: int) -> list[int]:
    """Return the order in which people 1..n leave when every ``m``-th is counted out."""
    if n < 0:
        raise ValueError("n must not be negative")
    if m < 1:
        raise ValueError("m must be at least 1")
    queue = LinkedQueue()
    for person in range(1, n + 1):
        queue.push(person)
    order: list[int] = []
    while not queue.is_empty():
        for _ in range(m - 1):
            queue.push(queue.pop())
        order.append(queue.pop())
    return order


def pascal_rows(n: int) -> list[list[int]]:
    """Return the first ``n + 1`` rows of Pascal's triangle, starting with ``[1]``."""
    if n < 0:
        raise ValueError("n must not be negative")
    rows = [[1]]
    for _ in range(n):
        rows.append([1, *(a + b for a, b in pairwise(rows[-1])), 1])
    return rows


def evens_before_odds(values: Iterable[int]) -> list[int]:
    """Return the even values followed by the odd ones, each keeping its order."""
    evens: deque[int] = deque()
    odds: deque[int] = deque()
    for value in values:
        (odds if value % 2 else evens).append(value)
    evens.extend(odds)
    return list(evens)


def team_queue(teams: Iterable[Iterable[int]], commands: Iterable[str]) -> list[int]:
    """Run a team queue and return the people in the order they are dequeued.

    A newcomer joins behind the last waiting member of their team, or at the
    back if no teammate is waiting. Commands are ``"ENQUEUE <id>"``,
    ``"DEQUEUE"`` and ``"STOP"``; only their first letter is significant.
    """
    team_of: dict[int, int] = {}
    for index, members in enumerate(teams):
        for person in members:
            team_of[person] = index
    order: deque[int] = deque()
    waiting: dict[int, deque[int]] = {}
    dequeued: list[int] = []
    for command in commands:
        parts = command.split()
        if not parts:
            raise ValueError("empty command")
        kind = parts[0][0].upper()
        if kind == "S":
            break
        if kind == "E":
            if len(parts) != 2:
                raise ValueError(f"enqueue needs one person id: {command!r}")
            person = int(parts[1])
            if person not in team_of:
                raise KeyError(f"person {person} belongs to no team")
            members = waiting.setdefault(team_of[person], deque())
            if not members:
                order.append(team_of[person])
            members.append(person)
        else:
            if not order:
                raise IndexError("dequeue from an empty team queue")
            members = waiting[order[0]]
            dequeued.append(members.popleft())
            if not members:
                order.popleft()
    return dequeued