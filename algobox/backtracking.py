"""Backtracking solvers: a rat in a maze and sudoku."""

from __future__ import annotations

from typing import Sequence

Grid = list[list[int]]

SUDOKU_SIZE = 9
BOX_SIZE = 3


def solve_maze(maze: Sequence[Sequence[int]]) -> Grid | None:
    """Find a path of open cells (1) from the top-left to the bottom-right corner.

    The rat moves only right or down and tries right first. The result has
    the maze's shape with 1 on every cell of the path, or is None when no
    path exists. The start cell is entered whatever it holds.
    """
    rows = len(maze)
    if rows == 0 or len(maze[0]) == 0:
        raise ValueError("maze must not be empty")
    cols = len(maze[0])
    if any(len(row) != cols for row in maze):
        raise ValueError("maze rows must all have the same length")

    solution = [[0] * cols for _ in range(rows)]

    def step(row: int, col: int) -> bool:
        solution[row][col] = 1
        if row == rows - 1 and col == cols - 1:
            return True
        if col < cols - 1 and maze[row][col + 1] == 1 and step(row, col + 1):
            return True
        if row < rows - 1 and maze[row + 1][col] == 1 and step(row + 1, col):
            return True
        solution[row][col] = 0
        return False

    return solution if step(0, 0) else None


def _check_sudoku(grid: Sequence[Sequence[int]]) -> None:
    if len(grid) != SUDOKU_SIZE or any(len(row) != SUDOKU_SIZE for row in grid):
        raise ValueError("a sudoku grid must be 9 by 9")
    if any(not 0 <= cell <= SUDOKU_SIZE for row in grid for cell in row):
        raise ValueError("sudoku cells must hold 0 (blank) to 9")


def is_possible(grid: Sequence[Sequence[int]], row: int, col: int, number: int) -> bool:
    """Tell whether number may go at (row, col): not in its row, column or box."""
    if any(grid[row][x] == number or grid[x][col] == number for x in range(SUDOKU_SIZE)):
        return False
    top = (row // BOX_SIZE) * BOX_SIZE
    left = (col // BOX_SIZE) * BOX_SIZE
    return all(
        grid[r][c] != number
        for r in range(top, top + BOX_SIZE)
        for c in range(left, left + BOX_SIZE)
    )


def solve_sudoku(grid: Sequence[Sequence[int]]) -> Grid | None:
    """Solve a sudoku whose blanks are 0; return the filled grid or None.

    Blanks are filled in row order, each trying 1 to 9 in turn. The given
    grid is left untouched.
    """
    _check_sudoku(grid)
    board = [list(row) for row in grid]
    blanks = [
        (r, c) for r in range(SUDOKU_SIZE) for c in range(SUDOKU_SIZE) if board[r][c] == 0
    ]

    def fill(index: int) -> bool:
        if index == len(blanks):
            return True
        row, col = blanks[index]
        for number in range(1, SUDOKU_SIZE + 1):
            if is_possible(board, row, col, number):
                board[row][col] = number
                if fill(index + 1):
                    return True
        board[row][col] = 0
        return False

    return board if fill(0) else None


def format_sudoku(grid: Sequence[Sequence[int]]) -> str:
    """Render a grid with a tab after every third column and a blank line after every third row."""
    parts: list[str] = []
    for row_number, row in enumerate(grid, start=1):
        for col_number, cell in enumerate(row, start=1):
            parts.append(f"{cell} ")
            if col_number % BOX_SIZE == 0:
                parts.append("\t")
        parts.append("\n")
        if row_number % BOX_SIZE == 0:
            parts.append("\n")
    return "".join(parts)