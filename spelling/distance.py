# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Levenshtein edit distance"""
from __future__ import annotations


def distance(a: str, b: str) -> int:
    """Minimum number of single character insertions, deletions and substitutions turning `a` into `b`.

    Keeps only the previous row of the dynamic programming table, laid out over the shorter string.
    """
    if a == b:
        return 0
    if len(b) > len(a):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, 1):
        current = [i]
        for j, char_b in enumerate(b, 1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (char_a != char_b),
                )
            )
        previous = current

    return previous[-1]


def bounded_distance(a: str, b: str, limit: int) -> int | None:
    """Exact distance between `a` and `b` if it is at most `limit`, otherwise None.

    The row minimum never decreases from one row to the next, so a row where
    every entry exceeds `limit` ends the computation. No distance is within a
    negative limit.
    """
    if limit < 0:
        return None
    if a == b:
        return 0
    if len(b) > len(a):
        a, b = b, a
    if len(a) - len(b) > limit:
        return None
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, 1):
        current = [i]
        row_min = i
        for j, char_b in enumerate(b, 1):
            cell = min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + (char_a != char_b),
            )
            current.append(cell)
            if cell < row_min:
                row_min = cell
        if row_min > limit:
            return None
        previous = current

    result = previous[-1]
    return result if result <= limit else None
