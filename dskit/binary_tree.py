"""Linked binary trees of single characters, with traversals and queries."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class TreeNode:
    """A binary tree node holding one value."""

    value: str
    left: TreeNode | None = None
    right: TreeNode | None = None


class BinaryTree:
    """A binary tree given by its root node."""

    def __init__(self, root: TreeNode | None = None) -> None:
        self.root = root

    @classmethod
    def from_parenthesized(cls, text: str) -> BinaryTree:
        """Build a tree from bracket notation such as ``A(B(D,E),C)``."""
        root: TreeNode | None = None
        stack: list[TreeNode] = []
        last: TreeNode | None = None
        as_left = True
        for char in text:
            if char == "(":
                if last is None:
                    raise ValueError("'(' must follow a node")
                stack.append(last)
                as_left = True
            elif char == ")":
                if not stack:
                    raise ValueError("unmatched ')'")
                stack.pop()
            elif char == ",":
                as_left = False
            else:
                node = TreeNode(char)
                if root is None:
                    root = node
                elif stack:
                    if as_left:
                        stack[-1].left = node
                    else:
                        stack[-1].right = node
                else:
                    raise ValueError("more than one root node")
                last = node
        if stack:
            raise ValueError("unmatched '('")
        return cls(root)

    @classmethod
    def from_preorder_sequence(cls, sequence: str) -> BinaryTree:
        """Build a tree from a preorder string where ``#`` marks an empty child."""
        chars = iter(sequence)

        def build() -> TreeNode | None:
            char = next(chars, "#")
            if char == "#":
                return None
            node = TreeNode(char)
            node.left = build()
            node.right = build()
            return node

        return cls(build())

    @classmethod
    def from_preorder_inorder(cls, preorder: str, inorder: str) -> BinaryTree:
        """Build the tree whose preorder and inorder traversals are given."""
        if sorted(preorder) != sorted(inorder):
            raise ValueError("traversals do not hold the same values")

        def build(pre_start: int, in_start: int, size: int) -> TreeNode | None:
            if size <= 0:
                return None
            node = TreeNode(preorder[pre_start])
            try:
                position = inorder.index(node.value, in_start, in_start + size)
            except ValueError:
                raise ValueError("traversals are inconsistent") from None
            left_size = position - in_start
            node.left = build(pre_start + 1, in_start, left_size)
            node.right = build(
                pre_start + 1 + left_size, position + 1, size - left_size - 1
            )
            return node

        return cls(build(0, 0, len(preorder)))

    def _nodes_preorder(self) -> Iterator[TreeNode]:
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def to_parenthesized(self) -> str:
        """Return the tree in bracket notation."""

        def show(node: TreeNode | None) -> str:
            if node is None:
                return ""
            if node.left is None and node.right is None:
                return node.value
            inner = show(node.left)
            if node.right is not None:
                inner += "," + show(node.right)
            return f"{node.value}({inner})"

        return show(self.root)

    def preorder(self) -> list[str]:
        """Return the values in root-left-right order."""
        result: list[str] = []

        def walk(node: TreeNode | None) -> None:
            if node is not None:
                result.append(node.value)
                walk(node.left)
                walk(node.right)

        walk(self.root)
        return result

    def inorder(self) -> list[str]:
        """Return the values in left-root-right order."""
        result: list[str] = []

        def walk(node: TreeNode | None) -> None:
            if node is not None:
                walk(node.left)
                result.append(node.value)
                walk(node.right)

        walk(self.root)
        return result

    def postorder(self) -> list[str]:
        """Return the values in left-right-root order."""
        result: list[str] = []

        def walk(node: TreeNode | None) -> None:
            if node is not None:
                walk(node.left)
                walk(node.right)
                result.append(node.value)

        walk(self.root)
        return result

    def level_order(self) -> list[str]:
        """Return the values level by level, left to right."""
        result: list[str] = []
        queue = deque([self.root] if self.root is not None else [])
        while queue:
            node = queue.popleft()
            result.append(node.value)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result

    def preorder_iterative(self) -> list[str]:
        """Return the preorder values, computed with an explicit stack."""
        return [node.value for node in self._nodes_preorder()]

    def find(self, value: str) -> TreeNode | None:
        """Return the first node in preorder holding ``value``, or None."""
        return next((n for n in self._nodes_preorder() if n.value == value), None)

    def height(self) -> int:
        """Return the number of levels; an empty tree has height 0."""

        def measure(node: TreeNode | None) -> int:
            if node is None:
                return 0
            return max(measure(node.left), measure(node.right)) + 1

        return measure(self.root)

    def node_count(self) -> int:
        """Return the number of nodes."""
        return sum(1 for _ in self._nodes_preorder())

    def leaves(self) -> list[str]:
        """Return the leaf values from left to right."""
        return [
            node.value
            for node in self._nodes_preorder()
            if node.left is None and node.right is None
        ]

    def swap_children(self) -> None:
        """Mirror the tree in place by swapping every node's children."""
        for node in self._nodes_preorder():
            node.left, node.right = node.right, node.left

    def level_of(self, value: str) -> int:
        """Return the level (root is 1) of the first node holding ``value``, or 0."""

        def search(node: TreeNode | None, level: int) -> int:
            if node is None:
                return 0
            if node.value == value:
                return level
            return search(node.left, level + 1) or search(node.right, level + 1)

        return search(self.root, 1)

    def count_at_level(self, k: int) -> int:
        """Return the number of nodes on level ``k`` (root is 1)."""
        if k < 1 or self.root is None:
            return 0
        level = [self.root]
        for _ in range(k - 1):
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return len(level)

    def ancestors(self, value: str) -> list[str]:
        """Return the values from the root down to the parent of ``value``."""
        path: list[str] = []

        def search(node: TreeNode | None) -> bool:
            if node is None:
                return False
            if node.value == value:
                return True
            path.append(node.value)
            if search(node.left) or search(node.right):
                return True
            path.pop()
            return False

        return path if search(self.root) else []

    def preorder_sequence(self) -> str:
        """Return the preorder string with ``#`` for every empty child."""

        def serialize(node: TreeNode | None) -> str:
            if node is None:
                return "#"
            return node.value + serialize(node.left) + serialize(node.right)

        return serialize(self.root)

    def sibling(self, value: str) -> TreeNode | None:
        """Return the sibling of the first node found holding ``value``, or None."""
        for node in self._nodes_preorder():
            if node.left is not None and node.left.value == value:
                return node.right
            if node.right is not None and node.right.value == value:
                return node.left
        return None