"""Equality join of two tables of rows on one column each."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def join_rows(
    left: Iterable[Sequence[Any]],
    right: Iterable[Sequence[Any]],
    left_column: int,
    right_column: int,
) -> list[list[Any]]:
    """Join rows whose 1-based columns match, each result being a left row then a right row.

    Results follow the order of the left rows, then of the right rows.
    """
    if left_column < 1 or right_column < 1:
        raise ValueError("columns are numbered from 1")
    right_rows = [list(row) for row in right]
    joined: list[list[Any]] = []
    for row in left:
        row = list(row)
        key = row[left_column - 1]
        for other in right_rows:
            if other[right_column - 1] == key:
                joined.append(row + other)
    return joined