"""Binary search trees keyed by comparable keys, and search-cost counting."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass
class BSTNode:
    """A node of a binary search tree."""

    key: Any
    value: Any = None
    left: BSTNode | None = None
    right: BSTNode | None = None


class BinarySearchTree:
    """A binary search tree mapping keys to values."""

    def __init__(self, items: Iterable[tuple[Any, Any]] = ()) -> None:
        self.root: BSTNode | None = None
        self._size = 0
        for key, value in items:
            self.insert(key, value)

    def insert(self, key: Any, value: Any = None) -> None:
        """Add ``key``, or replace its value if it is already present."""
        if self.root is None:
            self.root = BSTNode(key, value)
            self._size += 1
            return
        node = self.root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = BSTNode(key, value)
                    break
                node = node.left
            elif key > node.key:
                if node.right is None:
                    node.right = BSTNode(key, value)
                    break
                node = node.right
            else:
                node.value = value
                return
        self._size += 1

    def _find(self, key: Any) -> BSTNode | None:
        node = self.root
        while node is not None and node.key != key:
            node = node.left if key < node.key else node.right
        return node

    def search(self, key: Any) -> Any:
        """Return the value stored under ``key``."""
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __len__(self) -> int:
        return self._size

    def delete(self, key: Any) -> bool:
        """Remove ``key``; return whether it was present.

        A node with two children takes the key of its in-order predecessor.
        """
        parent: BSTNode | None = None
        node = self.root
        while node is not None and node.key != key:
            parent = node
            node = node.left if key < node.key else node.right
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            holder = node
            pred = node.left
            while pred.right is not None:
                holder = pred
                pred = pred.right
            node.key, node.value = pred.key, pred.value
            if holder is node:
                node.left = pred.left
            else:
                holder.right = pred.left
        else:
            replacement = node.left if node.right is None else node.right
            if parent is None:
                self.root = replacement
            elif parent.left is node:
                parent.left = replacement
            else:
                parent.right = replacement
        self._size -= 1
        return True

    def comparisons(self, key: Any) -> int:
        """Count comparisons to look up ``key``; a miss also counts the empty link."""
        steps = 0
        node = self.root
        while node is not None:
            steps += 1
            if node.key == key:
                return steps
            node = node.left if key < node.key else node.right
        return steps + 1

    def inorder(self) -> list[Any]:
        """Return the keys in ascending order."""
        keys: list[Any] = []
        stack: list[BSTNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            keys.append(node.key)
            node = node.right
        return keys


def binary_search_comparisons(values: Sequence[Any], target: Any) -> int:
    """Count the probes a binary search over ``sorted(values)`` makes for ``target``."""
    items = sorted(values)
    probes = 0
    left, right = 0, len(items) - 1
    while left <= right:
        mid = left + (right - left) // 2
        probes += 1
        if items[mid] > target:
            right = mid - 1
        elif items[mid] < target:
            left = mid + 1
        else:
            break
    return probes