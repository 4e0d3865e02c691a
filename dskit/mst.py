"""Disjoint sets and minimum spanning trees by Kruskal's and Prim's methods."""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterable, Sequence
from typing import Any


class DisjointSet:
    """Union-find over hashable elements, with union by rank and path compression."""

    def __init__(self, elements: Iterable[Hashable] = ()) -> None:
        self._parent: dict[Hashable, Hashable] = {}
        self._rank: dict[Hashable, int] = {}
        for element in elements:
            self._parent.setdefault(element, element)
            self._rank.setdefault(element, 0)

    def find(self, x: Hashable) -> Hashable:
        """Return the representative of the set holding ``x``."""
        if x not in self._parent:
            raise KeyError(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: Hashable, y: Hashable) -> bool:
        """Merge the sets of ``x`` and ``y``; return False if they were already one.

        The root of lower rank goes under the other; on equal ranks ``x``'s root wins.
        """
        root_x, root_y = self.find(x), self.find(y)
        if root_x == root_y:
            return False
        if self._rank[root_x] < self._rank[root_y]:
            self._parent[root_x] = root_y
        else:
            if self._rank[root_x] == self._rank[root_y]:
                self._rank[root_x] += 1
            self._parent[root_y] = root_x
        return True

    def __contains__(self, x: object) -> bool:
        return x in self._parent


def _check_vertex(vertex: int, n: int) -> None:
    if not 0 <= vertex < n:
        raise ValueError(f"vertex {vertex} outside 0..{n - 1}")


def _select_edges(
    vertices: Iterable[Hashable],
    weighted: Sequence[tuple[Any, Hashable, Hashable, Any]],
    needed: int,
) -> list[Any]:
    """Pick edges by ascending weight (stable), skipping those that close a cycle."""
    components = DisjointSet(vertices)
    chosen: list[Any] = []
    for _, u, v, item in sorted(weighted, key=lambda edge: edge[0]):
        if len(chosen) >= needed:
            break
        if components.union(u, v):
            chosen.append(item)
    return chosen


def kruskal(n: int, edges: Iterable[tuple[int, int, Any]]) -> Any:
    """Return the weight of a minimum spanning tree of vertices ``0..n-1``.

    ``edges`` holds ``(u, v, weight)`` triples of an undirected graph.
    Raises ValueError when the graph is not connected.
    """
    if n < 1:
        raise ValueError("a graph needs at least one vertex")
    weighted = []
    for u, v, w in edges:
        _check_vertex(u, n)
        _check_vertex(v, n)
        weighted.append((w, u, v, w))
    chosen = _select_edges(range(n), weighted, n - 1)
    if len(chosen) != n - 1:
        raise ValueError("graph is not connected, no spanning tree exists")
    return sum(chosen)


def kruskal_edge_ids(
    n: int, edges: Iterable[tuple[Any, Hashable, Hashable, Any]]
) -> tuple[Any, list[Any]]:
    """Return the weight of a minimum spanning tree and the sorted ids of its edges.

    ``edges`` holds ``(id, u, v, weight)`` tuples; ``n`` is the number of vertices.
    """
    if n < 1:
        raise ValueError("a graph needs at least one vertex")
    weighted = []
    vertices: set[Hashable] = set()
    for edge_id, u, v, w in edges:
        vertices.update((u, v))
        weighted.append((w, u, v, (edge_id, w)))
    if len(vertices) > n:
        raise ValueError("edges mention more than n vertices")
    chosen = _select_edges(vertices, weighted, n - 1)
    if len(chosen) != n - 1:
        raise ValueError("graph is not connected, no spanning tree exists")
    return sum(w for _, w in chosen), sorted(edge_id for edge_id, _ in chosen)


def prim(
    n: int, edges: Iterable[tuple[int, int, Any]], start: int = 0
) -> list[tuple[int, int, Any]]:
    """Return the edges ``(from, to, weight)`` of a minimum spanning tree, in the
    order Prim's method adds them when grown from ``start``.

    Vertices are ``0..n-1``; for repeated pairs the last edge given counts.
    """
    if n < 1:
        raise ValueError("a graph needs at least one vertex")
    _check_vertex(start, n)
    weights: list[list[Any]] = [[math.inf] * n for _ in range(n)]
    for x, y, w in edges:
        _check_vertex(x, n)
        _check_vertex(y, n)
        weights[x][y] = weights[y][x] = w
    dist = list(weights[start])
    closest = [start] * n
    in_tree = [False] * n
    in_tree[start] = True
    tree: list[tuple[int, int, Any]] = []
    for _ in range(n - 1):
        k = min((j for j in range(n) if not in_tree[j]), key=lambda j: dist[j])
        if dist[k] == math.inf:
            raise ValueError("graph is not connected, no spanning tree exists")
        tree.append((closest[k], k, dist[k]))
        in_tree[k] = True
        for j in range(n):
            if not in_tree[j] and dist[j] > weights[k][j]:
                dist[j] = weights[k][j]
                closest[j] = k
    return tree