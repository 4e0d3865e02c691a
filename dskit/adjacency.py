"""Adjacency-list graphs with traversals, path listing and topological sorting."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any

NO_EDGE = 0x3F3F3F3F
"""Matrix entry that, like 0, marks a missing edge."""


def _is_edge(weight: Any) -> bool:
    return weight is not None and weight != 0 and weight != NO_EDGE and weight != math.inf


class AdjacencyGraph:
    """A weighted graph on vertices ``0..n-1`` stored as adjacency lists.

    Each list is in ascending order of neighbouring vertex.
    """

    def __init__(self, matrix: Sequence[Sequence[Any]]) -> None:
        n = len(matrix)
        if any(len(row) != n for row in matrix):
            raise ValueError("matrix must be square")
        self._adj: list[list[tuple[int, Any]]] = [
            [(j, w) for j, w in enumerate(row) if _is_edge(w)] for row in matrix
        ]

    @classmethod
    def from_edges(
        cls, n: int, edges: Iterable[Sequence[Any]], directed: bool = True
    ) -> AdjacencyGraph:
        """Build a graph from ``(u, v)`` or ``(u, v, weight)`` edges; weight defaults to 1."""
        matrix: list[list[Any]] = [[0] * n for _ in range(n)]
        for edge in edges:
            u, v, *rest = edge
            weight = rest[0] if rest else 1
            for vertex in (u, v):
                if not 0 <= vertex < n:
                    raise ValueError(f"vertex {vertex} outside 0..{n - 1}")
            if not _is_edge(weight):
                raise ValueError(f"weight {weight!r} marks a missing edge")
            matrix[u][v] = weight
            if not directed:
                matrix[v][u] = weight
        return cls(matrix)

    def __len__(self) -> int:
        return len(self._adj)

    def _check(self, v: int) -> None:
        if not 0 <= v < len(self._adj):
            raise ValueError(f"vertex {v} outside 0..{len(self._adj) - 1}")

    def neighbors(self, v: int) -> list[int]:
        """Return the vertices that ``v`` has an edge to."""
        self._check(v)
        return [j for j, _ in self._adj[v]]

    def degree(self, v: int) -> tuple[int, int]:
        """Return the out-degree and in-degree of ``v``."""
        self._check(v)
        incoming = sum(1 for row in self._adj if any(j == v for j, _ in row))
        return len(self._adj[v]), incoming

    def dfs(self, start: int) -> list[int]:
        """Return the vertices in depth-first order from ``start``."""
        self._check(start)
        visited = {start}
        order = [start]
        stack = [iter(self.neighbors(start))]
        while stack:
            for nxt in stack[-1]:
                if nxt not in visited:
                    visited.add(nxt)
                    order.append(nxt)
                    stack.append(iter(self.neighbors(nxt)))
                    break
            else:
                stack.pop()
        return order

    def bfs(self, start: int, blocked: Iterable[int] = ()) -> list[int]:
        """Return the vertices in breadth-first order from ``start``, never
        entering a vertex in ``blocked``."""
        self._check(start)
        visited = set(blocked) | {start}
        order: list[int] = []
        queue = deque([start])
        while queue:
            u = queue.popleft()
            order.append(u)
            for v in self.neighbors(u):
                if v not in visited:
                    visited.add(v)
                    queue.append(v)
        return order

    def all_paths(self, source: int, target: int) -> Iterator[list[int]]:
        """Yield every simple path from ``source`` to ``target`` in depth-first order."""
        self._check(source)
        self._check(target)
        return self._paths(source, target)

    def _paths(self, source: int, target: int) -> Iterator[list[int]]:
        path = [source]
        on_path = {source}

        def walk(u: int) -> Iterator[list[int]]:
            if u == target:
                yield list(path)
                return
            for v in self.neighbors(u):
                if v not in on_path:
                    path.append(v)
                    on_path.add(v)
                    yield from walk(v)
                    path.pop()
                    on_path.discard(v)

        return walk(source)

    def topological_order(self) -> list[int]:
        """Return a topological order, taking ready vertices from a stack.

        Raises ValueError when the graph has a cycle.
        """
        indegree = [0] * len(self._adj)
        for row in self._adj:
            for j, _ in row:
                indegree[j] += 1
        stack = [v for v, d in enumerate(indegree) if d == 0]
        order: list[int] = []
        while stack:
            u = stack.pop()
            order.append(u)
            for j, _ in self._adj[u]:
                indegree[j] -= 1
                if indegree[j] == 0:
                    stack.append(j)
        if len(order) < len(self._adj):
            raise ValueError("graph has a cycle")
        return order

    def format(self) -> str:
        """Return one line per vertex, such as ``[0]-> (1,3) (2,4)``."""
        lines = []
        for i, row in enumerate(self._adj):
            line = f"[{i}]"
            if row:
                line += "->" + "".join(f" ({j},{w})" for j, w in row)
            lines.append(line)
        return "\n".join(lines)


def queue_topological_sort(
    n: int, successors: Mapping[int, Iterable[int]]
) -> list[int]:
    """Topologically sort vertices ``1..n`` using a queue of ready vertices.

    ``successors`` maps a vertex to the vertices it has edges to. Vertices
    become ready in ascending order of discovery. Raises ValueError on a cycle.
    """
    targets: dict[int, set[int]] = {v: set() for v in range(1, n + 1)}
    for u, outs in successors.items():
        if u not in targets:
            raise ValueError(f"vertex {u} outside 1..{n}")
        for t in outs:
            if t not in targets:
                raise ValueError(f"vertex {t} outside 1..{n}")
            targets[u].add(t)
    indegree = {v: 0 for v in targets}
    for outs in targets.values():
        for t in outs:
            indegree[t] += 1
    order = [v for v in range(1, n + 1) if indegree[v] == 0]
    queue = deque(order)
    while queue:
        u = queue.popleft()
        for v in sorted(targets[u]):
            indegree[v] -= 1
            if indegree[v] == 0:
                order.append(v)
                queue.append(v)
    if len(order) < n:
        raise ValueError("graph has a cycle")
    return order