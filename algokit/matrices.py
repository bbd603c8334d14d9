"""Square-matrix transforms, Pascal's triangle and grid queries."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import MutableSequence, Sequence


def rotate(matrix: Sequence[MutableSequence[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    for i in range(size):
        for j in range(i + 1, size):
            matrix[i][j], matrix[j][i] = matrix[j][i], matrix[i][j]
    for row in matrix:
        row.reverse()


def _next_row(row: Sequence[int]) -> list[int]:
    return [1, *(a + b for a, b in zip(row, row[1:])), 1]


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """The first ``num_rows`` rows of Pascal's triangle."""
    if num_rows < 1:
        raise ValueError("num_rows must be at least 1")
    rows = [[1]]
    while len(rows) < num_rows:
        rows.append(_next_row(rows[-1]))
    return rows


def pascal_row(row_index: int) -> list[int]:
    """Row ``row_index`` (counted from 0) of Pascal's triangle."""
    if row_index < 0:
        raise ValueError("row_index must not be negative")
    row = [1]
    for _ in range(row_index):
        row = _next_row(row)
    return row


def max_increase_keeping_skyline(grid: Sequence[Sequence[int]]) -> int:
    """Total height that can be added without changing any row or column maximum."""
    size = len(grid)
    if any(len(row) != size for row in grid):
        raise ValueError("grid must be square")
    row_max = [max(row, default=0) for row in grid]
    col_max = [max(col, default=0) for col in zip(*grid)]
    return sum(
        min(row_max[i], col_max[j]) - height
        for i, row in enumerate(grid)
        for j, height in enumerate(row)
    )


def largest_overlap(img1: Sequence[Sequence[int]], img2: Sequence[Sequence[int]]) -> int:
    """Most ones shared by two square binary images under any translation."""
    size = len(img1)
    if len(img2) != size or any(len(row) != size for row in (*img1, *img2)):
        raise ValueError("images must be square and of equal size")
    ones1 = [(i, j) for i, row in enumerate(img1) for j, v in enumerate(row) if v == 1]
    ones2 = [(i, j) for i, row in enumerate(img2) for j, v in enumerate(row) if v == 1]
    shifts = Counter((i2 - i1, j2 - j1) for i1, j1 in ones1 for i2, j2 in ones2)
    return max(shifts.values(), default=0)


@dataclass(frozen=True)
class _Update:
    row1: int
    col1: int
    row2: int
    col2: int
    value: int

    def covers(self, row: int, col: int) -> bool:
        return self.row1 <= row <= self.row2 and self.col1 <= col <= self.col2


class SubrectangleQueries:
    """A rectangle of values that supports overwriting sub-rectangles."""

    def __init__(self, rectangle: Sequence[Sequence[int]]) -> None:
        self._rect = [list(row) for row in rectangle]
        self._updates: list[_Update] = []

    def update_subrectangle(
        self, row1: int, col1: int, row2: int, col2: int, new_value: int
    ) -> None:
        self._updates.append(_Update(row1, col1, row2, col2, new_value))

    def get_value(self, row: int, col: int) -> int:
        for update in reversed(self._updates):
            if update.covers(row, col):
                return update.value
        return self._rect[row][col]