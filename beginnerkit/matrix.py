"""Integer matrix multiplication and tab-separated matrix formatting."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["DimensionError", "multiply", "format_matrix"]

Matrix = Sequence[Sequence[int]]


class DimensionError(ValueError):
    """Raised when two matrices cannot be multiplied."""


def _shape(matrix: Matrix, name: str) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise DimensionError(f"matrix {name} has rows of different lengths")
    return rows, cols


def multiply(a: Matrix, b: Matrix) -> list[list[int]]:
    """Multiply a by b.

    Multiplication is possible only when the row count of a equals the
    column count of b.  The result has the shape of a, and each cell sums
    over as many terms as a has rows, so a must be square and b must have
    at least as many rows as a.
    """
    rows_a, cols_a = _shape(a, "a")
    rows_b, cols_b = _shape(b, "b")
    if rows_a != cols_b:
        raise DimensionError(
            f"rows of a ({rows_a}) must equal columns of b ({cols_b})"
        )
    if rows_a > cols_a or rows_a > rows_b or cols_a > cols_b:
        raise DimensionError(
            f"cannot multiply a {rows_a}x{cols_a} matrix by a {rows_b}x{cols_b} matrix"
        )
    return [
        [sum(row[k] * b[k][j] for k in range(rows_a)) for j in range(cols_a)]
        for row in a
    ]


def format_matrix(matrix: Matrix) -> str:
    """Render each element followed by a tab, one row per line."""
    return "".join("".join(f"{value}\t" for value in row) + "\n" for row in matrix)