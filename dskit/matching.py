"""Substring search: brute force, KMP and several occurrence queries."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import permutations


def brute_force_find(text: str, pattern: str) -> int:
    """Return the first index of ``pattern`` in ``text`` by naive scanning, or -1."""
    i = j = 0
    while i < len(text) and j < len(pattern):
        if text[i] == pattern[j]:
            i += 1
            j += 1
        else:
            i = i - j + 1
            j = 0
    return i - len(pattern) if j >= len(pattern) else -1


def kmp_next(pattern: str) -> list[int]:
    """Return the KMP failure table, with ``-1`` in the first position."""
    if not pattern:
        return []
    table = [-1] * len(pattern)
    i, j = 0, -1
    while i < len(pattern) - 1:
        if j == -1 or pattern[i] == pattern[j]:
            i += 1
            j += 1
            table[i] = j
        else:
            j = table[j]
    return table


def kmp_nextval(pattern: str) -> list[int]:
    """Return the improved KMP failure table that skips equal-character retries."""
    if not pattern:
        return []
    table = [-1] * len(pattern)
    i, j = 0, -1
    while i < len(pattern) - 1:
        if j == -1 or pattern[i] == pattern[j]:
            i += 1
            j += 1
            table[i] = j if pattern[i] != pattern[j] else table[j]
        else:
            j = table[j]
    return table


def kmp_find(text: str, pattern: str) -> int:
    """Return the first index of ``pattern`` in ``text`` using KMP, or -1."""
    if not pattern:
        return 0
    table = kmp_next(pattern)
    i = j = 0
    while i < len(text) and j < len(pattern):
        if j == -1 or text[i] == pattern[j]:
            i += 1
            j += 1
        else:
            j = table[j]
    return i - len(pattern) if j == len(pattern) else -1


def _full_next(pattern: str) -> list[int]:
    """Failure table with an extra entry for the position after a full match."""
    table = [-1] * (len(pattern) + 1)
    i, j = 0, -1
    while i < len(pattern):
        if j == -1 or pattern[i] == pattern[j]:
            i += 1
            j += 1
            table[i] = j
        else:
            j = table[j]
    return table


def kmp_find_all(text: str, pattern: str) -> list[int]:
    """Return every start index of ``pattern`` in ``text``, overlaps included."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    table = _full_next(pattern)
    positions: list[int] = []
    i = j = 0
    while i < len(text):
        if j == -1 or text[i] == pattern[j]:
            i += 1
            j += 1
            if j == len(pattern):
                positions.append(i - len(pattern))
                j = table[j]
        else:
            j = table[j]
    return positions


def find_concatenated_substrings(text: str, words: Iterable[str]) -> list[int]:
    """Return sorted start indices where some ordering of all ``words`` appears joined."""
    words = list(words)
    if not words:
        return []
    candidates = {"".join(order) for order in permutations(words)}
    positions: set[int] = set()
    for candidate in candidates:
        if candidate:
            positions.update(kmp_find_all(text, candidate))
    return sorted(positions)


def find_last(text: str, char: str) -> int:
    """Return the index of the last occurrence of ``char`` in ``text``, or -1."""
    if len(char) != 1:
        raise ValueError("char must be a single character")
    return text.rfind(char)


def count_occurrences(text: str, pattern: str) -> int:
    """Count occurrences of ``pattern`` in ``text``, overlaps included."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    last_start = len(text) - len(pattern)
    return sum(1 for start in range(last_start + 1) if text.startswith(pattern, start))


def find_non_overlapping(text: str, pattern: str) -> list[int]:
    """Return start indices of ``pattern``, scanning left to right without overlaps."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    positions: list[int] = []
    start = 0
    while start + len(pattern) <= len(text):
        if text.startswith(pattern, start):
            positions.append(start)
            start += len(pattern)
        else:
            start += 1
    return positions