"""The N-queens puzzle solved by backtracking."""

from __future__ import annotations

from collections.abc import Sequence


def solve_n_queens(n: int) -> list[list[int]] | None:
    """Return the first placement of ``n`` non-attacking queens, or None.

    Queens are placed column by column, trying rows from the top. The board
    is a list of rows in which 1 marks a queen.
    """
    if n < 0:
        raise ValueError(f"board size must not be negative, got {n}")
    rows_by_column: list[int] = []
    used_rows: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(column: int) -> bool:
        if column == n:
            return True
        for row in range(n):
            if row in used_rows or row - column in diagonals or row + column in anti_diagonals:
                continue
            used_rows.add(row)
            diagonals.add(row - column)
            anti_diagonals.add(row + column)
            rows_by_column.append(row)
            if place(column + 1):
                return True
            rows_by_column.pop()
            used_rows.discard(row)
            diagonals.discard(row - column)
            anti_diagonals.discard(row + column)
        return False

    if not place(0):
        return None
    board = [[0] * n for _ in range(n)]
    for column, row in enumerate(rows_by_column):
        board[row][column] = 1
    return board


def format_board(board: Sequence[Sequence[int]]) -> str:
    """Render a board one row per line, each cell followed by a space."""
    return "".join("".join(f"{cell} " for cell in row) + "\n" for row in board)