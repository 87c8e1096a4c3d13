"""Path counting and minimum path sums on rectangular grids."""

from collections.abc import Sequence
from itertools import accumulate

__all__ = ["unique_paths", "min_path_sum"]


def unique_paths(m: int, n: int) -> int:
    """Return the number of right/down paths across an m by n grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    if m == 1 or n == 1:
        return 1
    row = [1] * n
    for _ in range(1, m):
        row = list(accumulate(row))
    return row[-1]


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Return the smallest sum along a right/down path from corner to corner."""
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    width = len(grid[0])
    if any(len(line) != width for line in grid):
        raise ValueError("grid rows must all have the same length")
    row = list(accumulate(grid[0]))
    for line in grid[1:]:
        new_row = [row[0] + line[0]]
        for above, value in zip(row[1:], line[1:]):
            new_row.append(min(above, new_row[-1]) + value)
        row = new_row
    return row[-1]