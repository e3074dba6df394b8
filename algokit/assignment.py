"""Minimum-cost assignment on a square cost matrix (Hungarian method)."""

from __future__ import annotations

import math
import sys
from typing import Sequence


def hungarian(cost: Sequence[Sequence[int]]) -> tuple[int, list[tuple[int, int]]]:
    """Solve the assignment problem.

    Returns the minimal total cost and the chosen ``(row, column)`` pairs,
    zero-based and ordered by column.
    """
    n = len(cost)
    if any(len(row) != n for row in cost):
        raise ValueError("cost matrix must be square")
    # Potentials and matching are 1-based; slot 0 is the virtual column.
    u = [0] * (n + 1)
    v = [0] * (n + 1)
    match = [0] * (n + 1)
    way = [0] * (n + 1)
    for row in range(1, n + 1):
        match[0] = row
        column = 0
        minv = [math.inf] * (n + 1)
        used = [False] * (n + 1)
        while True:
            used[column] = True
            line = match[column]
            delta = math.inf
            nearest = 0
            for j in range(1, n + 1):
                if used[j]:
                    continue
                reduced = cost[line - 1][j - 1] - u[line] - v[j]
                if reduced < minv[j]:
                    minv[j] = reduced
                    way[j] = column
                if minv[j] < delta:
                    delta = minv[j]
                    nearest = j
            for j in range(n + 1):
                if used[j]:
                    u[match[j]] += delta
                    v[j] -= delta
                else:
                    minv[j] -= delta
            column = nearest
            if match[column] == 0:
                break
        while column:
            previous = way[column]
            match[column] = match[previous]
            column = previous
    pairs = [(match[j] - 1, j - 1) for j in range(1, n + 1)]
    total = sum(cost[r][c] for r, c in pairs)
    return total, pairs


def main(argv=None) -> int:
    """Read ``n`` and an ``n`` by ``n`` matrix; print the cost and the 1-based pairs."""
    numbers = iter(int(token) for token in sys.stdin.read().split())
    n = next(numbers)
    matrix = [[next(numbers) for _ in range(n)] for _ in range(n)]
    total, pairs = hungarian(matrix)
    print(total)
    for row, column in pairs:
        print(row + 1, column + 1)
    return 0