"""Backtracking searches: sudoku, n-queens, permutations and palindromic splits."""

from __future__ import annotations

from math import factorial
from typing import Iterator, MutableSequence, Sequence

EMPTY = "."
_DIGITS = "123456789"


def _allowed(board: Sequence[Sequence[str]], row: int, col: int, digit: str) -> bool:
    if digit in board[row]:
        return False
    if any(board[r][col] == digit for r in range(9)):
        return False
    top, left = row - row % 3, col - col % 3
    return all(
        board[r][c] != digit
        for r in range(top, top + 3)
        for c in range(left, left + 3)
    )


def solve_sudoku(board: Sequence[MutableSequence[str]]) -> bool:
    """Fill the empty (``"."``) cells of a 9x9 board in place.

    Returns True when a solution was written; on failure the board is left
    as it was given.
    """
    if len(board) != 9 or any(len(row) != 9 for row in board):
        raise ValueError("board must be 9 by 9")
    empties = [
        (r, c) for r, row in enumerate(board) for c, cell in enumerate(row) if cell == EMPTY
    ]

    def place(index: int) -> bool:
        if index == len(empties):
            return True
        row, col = empties[index]
        for digit in _DIGITS:
            if _allowed(board, row, col, digit):
                board[row][col] = digit
                if place(index + 1):
                    return True
                board[row][col] = EMPTY
        return False

    return place(0)


def _queen_placements(n: int) -> Iterator[tuple[int, ...]]:
    columns: list[int] = []
    used_cols: set[int] = set()
    used_diag: set[int] = set()
    used_anti: set[int] = set()

    def extend(row: int) -> Iterator[tuple[int, ...]]:
        if row == n:
            yield tuple(columns)
            return
        for col in range(n):
            if col in used_cols or row - col in used_diag or row + col in used_anti:
                continue
            columns.append(col)
            used_cols.add(col)
            used_diag.add(row - col)
            used_anti.add(row + col)
            yield from extend(row + 1)
            columns.pop()
            used_cols.discard(col)
            used_diag.discard(row - col)
            used_anti.discard(row + col)

    return extend(0)


def solve_n_queens(n: int) -> list[list[str]]:
    """Every placement of ``n`` non-attacking queens, drawn with ``Q`` and ``.``."""
    if n < 0:
        raise ValueError("n must not be negative")
    return [
        ["." * col + "Q" + "." * (n - col - 1) for col in placement]
        for placement in _queen_placements(n)
    ]


def total_n_queens(n: int) -> int:
    """Number of distinct placements of ``n`` non-attacking queens."""
    if n < 0:
        raise ValueError("n must not be negative")
    return sum(1 for _ in _queen_placements(n))


def get_permutation(n: int, k: int) -> str:
    """The ``k``-th lexicographic permutation of ``1..n`` as a string.

    A ``k`` outside ``1..n!`` yields the first permutation.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if not 1 <= k <= factorial(n):
        k = 1
    remaining = list(range(1, n + 1))
    rank = k - 1
    chosen = []
    for size in range(n, 0, -1):
        index, rank = divmod(rank, factorial(size - 1))
        chosen.append(remaining.pop(index))
    return "".join(chr(ord("0") + value) for value in chosen)


def partition_palindromes(s: str) -> list[list[str]]:
    """Every way to cut ``s`` into palindromic pieces."""
    path: list[str] = []

    def split(start: int) -> Iterator[list[str]]:
        if start == len(s):
            yield list(path)
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if piece == piece[::-1]:
                path.append(piece)
                yield from split(end)
                path.pop()

    return list(split(0))