"""Binary tree exercises: level-array trees, width, fullness and common ancestors."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Mapping, Sequence
from typing import Any

from dskit.binary_tree import BinaryTree, TreeNode


def tree_from_level_values(values: Sequence[Any]) -> TreeNode | None:
    """Build a tree from values in level order, where ``None`` marks an empty slot.

    The children of the value at index ``i`` sit at ``2i + 1`` and ``2i + 2``.
    """

    def build(index: int) -> TreeNode | None:
        if index >= len(values) or values[index] is None:
            return None
        node = TreeNode(values[index])
        node.left = build(2 * index + 1)
        node.right = build(2 * index + 2)
        return node

    return build(0)


def from_level_string(text: str) -> BinaryTree:
    """Build a tree from characters in level order, where ``#`` marks an empty slot."""
    return BinaryTree(tree_from_level_values([None if c == "#" else c for c in text]))


def parse_level_list(text: str) -> list[int | None]:
    """Parse a list such as ``[1,2,null,-3]`` into integers and ``None``."""
    body = text.strip()
    if not (body.startswith("[") and body.endswith("]")):
        raise ValueError("level list must be enclosed in brackets")
    body = body[1:-1].strip()
    if not body:
        return []
    result: list[int | None] = []
    for token in body.split(","):
        token = token.strip()
        if token == "null":
            result.append(None)
        else:
            try:
                result.append(int(token))
            except ValueError:
                raise ValueError(f"bad entry {token!r} in level list") from None
    return result


def max_width(root: TreeNode | None) -> int:
    """Return the largest number of nodes on any one level."""
    if root is None:
        return 0
    widest = 0
    level = deque([root])
    while level:
        widest = max(widest, len(level))
        for _ in range(len(level)):
            node = level.popleft()
            if node.left is not None:
                level.append(node.left)
            if node.right is not None:
                level.append(node.right)
    return widest


def is_full(root: TreeNode | None) -> bool:
    """Tell whether every node has either no children or two."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if (node.left is None) != (node.right is None):
            return False
        if node.left is not None:
            stack.append(node.left)
            stack.append(node.right)
    return True


def _path_to_root(parents: Mapping[Hashable, Hashable], node: Hashable) -> list[Hashable]:
    path = [node]
    seen = {node}
    while True:
        parent = parents.get(node, node)
        if parent == node:
            return path
        if parent in seen:
            raise ValueError("parent links form a cycle")
        seen.add(parent)
        path.append(parent)
        node = parent


def lowest_common_ancestor(
    parents: Mapping[Hashable, Hashable], x: Hashable, y: Hashable
) -> Hashable:
    """Return the deepest common ancestor of ``x`` and ``y``.

    ``parents`` maps each node to its parent; a root maps to itself or is absent.
    A node counts as its own ancestor.
    """
    if x == y:
        return x
    ancestors_of_x = set(_path_to_root(parents, x))
    for node in _path_to_root(parents, y):
        if node in ancestors_of_x:
            return node
    raise ValueError(f"{x!r} and {y!r} lie in different trees")