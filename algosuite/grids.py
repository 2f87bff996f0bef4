"""Routines over matrices and grid coordinates."""

from __future__ import annotations

from collections import defaultdict
from itertools import count, pairwise, takewhile
from typing import Dict, List, Sequence


def find_diagonal_order(nums: Sequence[Sequence[int]]) -> List[int]:
    """Walk anti-diagonals from the top-left, each from bottom to top.

    The walk stops at the first anti-diagonal that holds no element.
    """
    groups: Dict[int, List[int]] = defaultdict(list)
    for row_index, row in reversed(list(enumerate(nums))):
        for col_index, value in enumerate(row):
            groups[row_index + col_index].append(value)
    present = takewhile(groups.__contains__, count())
    return [value for diagonal in present for value in groups[diagonal]]


def num_special(mat: Sequence[Sequence[int]]) -> int:
    """Count cells holding the only 1 of both their row and their column."""
    column_ones = [column.count(1) for column in zip(*mat)]
    return sum(
        1
        for row in mat
        if list(row).count(1) == 1 and column_ones[list(row).index(1)] == 1
    )


def largest_submatrix(matrix: Sequence[Sequence[int]]) -> int:
    """Area of the largest all-ones submatrix after reordering columns freely."""
    if not matrix:
        return 0
    heights = [0] * len(matrix[0])
    best = 0
    for row in matrix:
        heights = [height + 1 if cell != 0 else 0 for height, cell in zip(heights, row)]
        ordered = sorted(heights, reverse=True)
        best = max(best, max((height * (width + 1) for width, height in enumerate(ordered)), default=0))
    return best


def ones_minus_zeros(grid: Sequence[Sequence[int]]) -> List[List[int]]:
    """For each cell, ones minus zeros in its row plus ones minus zeros in its column."""
    if not grid:
        return []
    rows, cols = len(grid), len(grid[0])
    row_ones = [sum(row) for row in grid]
    col_ones = [sum(column) for column in zip(*grid)]
    return [[2 * (r + c) - rows - cols for c in col_ones] for r in row_ones]


def transpose(matrix: Sequence[Sequence[int]]) -> List[List[int]]:
    """Swap rows and columns."""
    return [list(column) for column in zip(*matrix)]


def min_time_to_visit_all_points(points: Sequence[Sequence[int]]) -> int:
    """Seconds to visit the points in order, moving one step in any of eight directions per second."""
    return sum(
        max(abs(a[0] - b[0]), abs(a[1] - b[1]))
        for a, b in pairwise(points)
    )


def is_reachable_at_time(sx: int, sy: int, fx: int, fy: int, t: int) -> bool:
    """Return True if (fx, fy) can be reached from (sx, sy) in exactly t moves."""
    width = abs(sx - fx)
    height = abs(sy - fy)
    if width == 0 and height == 0 and t == 1:
        return False
    return t >= max(width, height)