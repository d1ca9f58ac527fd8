"""Building a numbered matrix and reading it in spiral order."""

from __future__ import annotations

from collections.abc import Sequence


def generate_matrix(rows: int, cols: int) -> list[list[int]]:
    """A rows by cols matrix holding 1, 2, 3, ... in row-major order."""
    if rows < 0 or cols < 0:
        raise ValueError("dimensions must not be negative")
    return [list(range(r * cols + 1, (r + 1) * cols + 1)) for r in range(rows)]


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """The matrix's entries read clockwise from the top-left corner inwards."""
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    total = rows * cols
    order: list[int] = []
    top, bottom = 0, rows - 1
    left, right = 0, cols - 1

    while top <= bottom and left <= right:
        order.extend(matrix[top][c] for c in range(left, right + 1))
        top += 1
        order.extend(matrix[r][right] for r in range(top, bottom + 1))
        right -= 1
        if len(order) == total:
            break
        order.extend(matrix[bottom][c] for c in range(right, left - 1, -1))
        bottom -= 1
        if len(order) == total:
            break
        order.extend(matrix[r][left] for r in range(bottom, top - 1, -1))
        left += 1
    return order