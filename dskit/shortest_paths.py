"""Single-source and all-pairs shortest paths on weighted graphs.

Vertices are numbered ``1..n``; unreachable distances are ``math.inf``.
"""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterable, Mapping, Sequence
from typing import Any


def _check_vertex(vertex: int, n: int) -> None:
    if not 1 <= vertex <= n:
        raise ValueError(f"vertex {vertex} outside 1..{n}")


def dijkstra(
    n: int, edges: Iterable[tuple[int, int, Any]], source: int
) -> tuple[dict[int, Any], dict[int, int | None]]:
    """Return shortest distances from ``source`` and each vertex's predecessor.

    ``edges`` holds directed ``(u, v, weight)`` triples with non-negative weights;
    for a repeated pair the last edge given counts. Among equally near vertices
    the lowest-numbered is settled first.
    """
    _check_vertex(source, n)
    adjacent: dict[int, dict[int, Any]] = {v: {} for v in range(1, n + 1)}
    for u, v, w in edges:
        _check_vertex(u, n)
        _check_vertex(v, n)
        adjacent[u][v] = w
    dist: dict[int, Any] = {v: math.inf for v in range(1, n + 1)}
    pred: dict[int, int | None] = {v: None for v in range(1, n + 1)}
    for v, w in adjacent[source].items():
        dist[v] = w
        pred[v] = source
    dist[source] = 0
    pred[source] = None
    settled = {source}
    for _ in range(n - 1):
        candidates = [
            v for v in range(1, n + 1) if v not in settled and dist[v] < math.inf
        ]
        if not candidates:
            break
        k = min(candidates, key=lambda v: dist[v])
        settled.add(k)
        for j, w in adjacent[k].items():
            if j not in settled and dist[j] > dist[k] + w:
                dist[j] = dist[k] + w
                pred[j] = k
    return dist, pred


def reconstruct_path(
    predecessors: Mapping[Hashable, Hashable | None], source: Hashable, target: Hashable
) -> list[Hashable]:
    """Follow predecessors back from ``target`` and return the path from ``source``."""
    if target == source:
        return [source]
    path = [target]
    seen = {target}
    node = target
    while True:
        previous = predecessors.get(node)
        if previous is None:
            raise ValueError(f"{target!r} is not reachable from {source!r}")
        path.append(previous)
        if previous == source:
            break
        if previous in seen:
            raise ValueError("predecessor links form a cycle")
        seen.add(previous)
        node = previous
    path.reverse()
    return path


def floyd_warshall(
    n: int, edges: Iterable[tuple[int, int, Any]]
) -> tuple[dict[int, dict[int, Any]], dict[int, dict[int, int | None]]]:
    """Return all-pairs distances and, for each source, every vertex's predecessor.

    ``dist[i][j]`` is the shortest distance from ``i`` to ``j`` and
    ``pred[i][j]`` the vertex before ``j`` on that path.
    """
    vertices = range(1, n + 1)
    dist: dict[int, dict[int, Any]] = {
        i: {j: 0 if i == j else math.inf for j in vertices} for i in vertices
    }
    pred: dict[int, dict[int, int | None]] = {
        i: {j: None for j in vertices} for i in vertices
    }
    for u, v, w in edges:
        _check_vertex(u, n)
        _check_vertex(v, n)
        if u != v:
            dist[u][v] = w
            pred[u][v] = u
    for k in vertices:
        for i in vertices:
            through = dist[i][k]
            if through == math.inf:
                continue
            for j in vertices:
                if through + dist[k][j] < dist[i][j]:
                    dist[i][j] = through + dist[k][j]
                    pred[i][j] = pred[k][j]
    return dist, pred


def shortest_routes(
    n: int, edges: Iterable[tuple[int, int, Any]]
) -> list[tuple[int, int, Any, list[int]]]:
    """List ``(from, to, length, path)`` for every reachable ordered pair of vertices."""
    dist, pred = floyd_warshall(n, edges)
    routes = []
    for i in range(1, n + 1):
        for j in range(1, n + 1):
            if i != j and dist[i][j] != math.inf:
                routes.append((i, j, dist[i][j], reconstruct_path(pred[i], i, j)))
    return routes


def hospital_village(matrix: Sequence[Sequence[Any]]) -> int:
    """Return the village (numbered from 1) whose farthest village is nearest.

    ``matrix`` gives road lengths between villages, 0 meaning no direct road.
    Roads are two-way; where the two entries of a pair differ, the one read
    last in row order counts. Ties go to the lowest-numbered village.
    """
    n = len(matrix)
    if n == 0:
        raise ValueError("at least one village is needed")
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    d: list[list[Any]] = [[math.inf] * n for _ in range(n)]
    for i, row in enumerate(matrix):
        for j, w in enumerate(row):
            d[i][j] = d[j][i] = math.inf if w == 0 else w
    for i in range(n):
        d[i][i] = 0
    for k in range(n):
        for i in range(n):
            for j in range(n):
                if d[i][j] > d[i][k] + d[k][j]:
                    d[i][j] = d[i][k] + d[k][j]
    farthest = [max(row) for row in d]
    best = min(range(n), key=lambda i: farthest[i])
    if farthest[best] == math.inf:
        raise ValueError("some villages cannot be reached")
    return best + 1