"""Small exercises: maze search, spiral matrices, inversion counts and character runs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from itertools import groupby
from typing import Any

Cell = tuple[int, int]

_MOVES = ((0, 1), (1, 0), (-1, 0), (0, -1))


def maze_path(
    grid: Sequence[Sequence[int]], start: Cell, goal: Cell
) -> list[Cell] | None:
    """Return a shortest path of open (zero) cells from ``start`` to ``goal``, or None."""
    start, goal = tuple(start), tuple(goal)
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    parents: dict[Cell, Cell | None] = {start: None}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        if cell == goal:
            path: list[Cell] = []
            step: Cell | None = cell
            while step is not None:
                path.append(step)
                step = parents[step]
            path.reverse()
            return path
        row, col = cell
        for d_row, d_col in _MOVES:
            nxt = (row + d_row, col + d_col)
            if (
                0 <= nxt[0] < rows
                and 0 <= nxt[1] < cols
                and grid[nxt[0]][nxt[1]] == 0
                and nxt not in parents
            ):
                parents[nxt] = cell
                queue.append(nxt)
    return None


def spiral_matrix(n: int) -> list[list[int]]:
    """Return the ``n`` by ``n`` matrix holding 1..n*n in clockwise spiral order."""
    if n < 0:
        raise ValueError("size must not be negative")
    matrix = [[0] * n for _ in range(n)]
    top, bottom, left, right = 0, n - 1, 0, n - 1
    step = 1
    while top <= bottom and left <= right:
        for col in range(left, right + 1):
            matrix[top][col] = step
            step += 1
        top += 1
        for row in range(top, bottom + 1):
            matrix[row][right] = step
            step += 1
        right -= 1
        if top <= bottom:
            for col in range(right, left - 1, -1):
                matrix[bottom][col] = step
                step += 1
            bottom -= 1
        if left <= right:
            for row in range(bottom, top - 1, -1):
                matrix[row][left] = step
                step += 1
            left += 1
    return matrix


def _sort_counting(items: list[Any]) -> tuple[list[Any], int]:
    if len(items) <= 1:
        return items, 0
    mid = (len(items) + 1) // 2
    left, left_count = _sort_counting(items[:mid])
    right, right_count = _sort_counting(items[mid:])
    merged: list[Any] = []
    count = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            count += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, count


def inversion_count(sequence: Iterable[Any]) -> int:
    """Count the pairs that appear in the wrong order, by merge sort."""
    return _sort_counting(list(sequence))[1]


def sort_by_inversions(sequences: Iterable[Sequence[Any]]) -> list[Sequence[Any]]:
    """Order sequences from least to most sorted, keeping ties in input order."""
    return sorted(sequences, key=inversion_count)


def longest_run(text: str) -> str:
    """Return the first longest run of one repeated character in ``text``."""
    if len(text) <= 1:
        return text
    best = ""
    for char, group in groupby(text):
        run = char * sum(1 for _ in group)
        if len(run) > len(best):
            best = run
    return best