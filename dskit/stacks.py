"""Array and linked stacks, stack/queue emulations and classic stack exercises."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

_DIGITS = "0123456789abcdef"
_OPENERS = {")": "(", "]": "[", "}": "{"}


class ArrayStack:
    """A stack stored in a list, with a fixed capacity."""

    def __init__(self, capacity: int = 1005) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put a value on top of the stack."""
        if len(self._items) >= self._capacity:
            raise OverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next: _Node | None = None) -> None:
        self.value = value
        self.next = next


class LinkedStack:
    """A stack of linked nodes, the top being the first node."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._length = 0

    def push(self, value: Any) -> None:
        """Put a value on top of the stack."""
        self._top = _Node(value, self._top)
        self._length += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise IndexError("pop from an empty stack")
        node = self._top
        self._top = node.next
        self._length -= 1
        return node.value

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self._top is None:
            raise IndexError("peek at an empty stack")
        return self._top.value

    def reverse(self) -> None:
        """Turn the stack upside down, so the bottom value becomes the top."""
        node = self._top
        self._top = None
        while node is not None:
            following = node.next
            node.next = self._top
            self._top = node
            node = following

    def __iter__(self) -> Iterator[Any]:
        """Yield values from the top of the stack to the bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._length


class QueueBackedStack:
    """A stack built from two FIFO queues."""

    def __init__(self) -> None:
        self._main: deque[Any] = deque()
        self._spare: deque[Any] = deque()

    def push(self, value: Any) -> None:
        """Put a value on top, keeping the main queue in pop order."""
        self._spare.append(value)
        while self._main:
            self._spare.append(self._main.popleft())
        self._main, self._spare = self._spare, self._main

    def pop(self) -> Any:
        """Remove and return the most recently pushed value."""
        if not self._main:
            raise IndexError("pop from an empty stack")
        return self._main.popleft()

    def is_empty(self) -> bool:
        return not self._main


class StackBackedQueue:
    """A FIFO queue built from two stacks."""

    def __init__(self) -> None:
        self._inbox: list[Any] = []
        self._outbox: list[Any] = []

    def _shift(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        if not self._outbox:
            raise IndexError("queue is empty")

    def push(self, value: Any) -> None:
        """Add a value at the back."""
        self._inbox.append(value)

    def pop(self) -> Any:
        """Remove and return the value at the front."""
        self._shift()
        return self._outbox.pop()

    def peek(self) -> Any:
        """Return the value at the front without removing it."""
        self._shift()
        return self._outbox[-1]

    def is_empty(self) -> bool:
        return not self._inbox and not self._outbox


def brackets_balanced(text: str) -> bool:
    """Tell whether the (), [] and {} brackets in ``text`` nest properly."""
    stack: list[str] = []
    for char in text:
        if char in "([{":
            stack.append(char)
        elif char in _OPENERS:
            if not stack or stack.pop() != _OPENERS[char]:
                return False
    return not stack


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same backwards."""
    stack = list(text)
    return all(stack.pop() == char for char in text)


def is_valid_pop_sequence(pushed: Sequence[Any], popped: Sequence[Any]) -> bool:
    """Tell whether ``popped`` can come out of a stack fed with ``pushed`` in order."""
    if len(pushed) != len(popped):
        return False
    stack: list[Any] = []
    j = 0
    for value in pushed:
        stack.append(value)
        while stack and j < len(popped) and stack[-1] == popped[j]:
            stack.pop()
            j += 1
    return not stack


def is_mirrored(text: str) -> bool:
    """Tell whether ``text`` is ``first@second`` with one '@' and second the reverse of first."""
    first, separator, second = text.partition("@")
    if not separator or "@" in second:
        return False
    stack = list(first)
    if len(stack) != len(second):
        return False
    return all(stack.pop() == char for char in second)


def to_base(number: int, base: int) -> str:
    """Write a non-negative integer in ``base`` (2 to 16) with lower-case digits."""
    if not 2 <= base <= 16:
        raise ValueError("base must be between 2 and 16")
    if number < 0:
        raise ValueError("number must not be negative")
    if number == 0:
        return "0"
    stack: list[str] = []
    while number:
        number, digit = divmod(number, base)
        stack.append(_DIGITS[digit])
    return "".join(reversed(stack))


def odd_before_even(cars: Iterable[int]) -> tuple[list[str], list[int]]:
    """Reorder cars through a siding stack so odd numbers leave before even ones.

    Returns the PUSH/POP operations performed and the order the cars leave in.
    Odd cars pass straight through; even cars wait on the stack until the end.
    """
    operations: list[str] = []
    leaving: list[int] = []
    siding: list[int] = []
    for car in cars:
        operations.append("PUSH")
        if car % 2:
            operations.append("POP")
            leaving.append(car)
        else:
            siding.append(car)
    while siding:
        operations.append("POP")
        leaving.append(siding.pop())
    return operations, leaving