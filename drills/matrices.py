"""Matrix exercises on lists of rows."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def _rows(matrix: Matrix) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("matrix rows must all have the same length")
    return rows


def _square(matrix: Matrix) -> list[list[int]]:
    rows = _rows(matrix)
    if rows and len(rows[0]) != len(rows):
        raise ValueError("matrix must be square")
    return rows


def is_identity(matrix: Matrix) -> bool:
    """Return True if the square matrix has ones on the diagonal and zeros elsewhere."""
    rows = _square(matrix)
    return all(
        value == (1 if i == j else 0)
        for i, row in enumerate(rows)
        for j, value in enumerate(row)
    )


def lower_triangle(matrix: Matrix) -> list[int]:
    """Return the elements on and below the diagonal, row by row."""
    rows = _square(matrix)
    return [value for i, row in enumerate(rows) for value in row[: i + 1]]


def upper_triangle(matrix: Matrix) -> list[int]:
    """Return the elements strictly above the diagonal, row by row."""
    rows = _square(matrix)
    return [value for i, row in enumerate(rows) for value in row[i + 1 :]]


def transpose(matrix: Matrix) -> list[list[int]]:
    """Return the transpose of the matrix."""
    return [list(column) for column in zip(*_rows(matrix))]


def multiply(a: Matrix, b: Matrix) -> list[list[int]]:
    """Return the matrix product a x b."""
    left = _rows(a)
    right = _rows(b)
    inner = len(left[0]) if left else 0
    if inner != len(right):
        raise ValueError("Matrix Multiplication not possible")
    columns = transpose(right)
    return [
        [sum(x * y for x, y in zip(row, column)) for column in columns]
        for row in left
    ]


def diagonal(matrix: Matrix) -> list[int]:
    """Return the main diagonal of a square matrix."""
    return [row[i] for i, row in enumerate(_square(matrix))]


def diagonal_sum(matrix: Matrix) -> int:
    """Return the sum of both diagonals, counting a shared centre once."""
    rows = _square(matrix)
    n = len(rows)
    total = 0
    for i, row in enumerate(rows):
        j = n - i - 1
        total += row[i] if i == j else row[i] + row[j]
    return total


def is_symmetric(matrix: Matrix) -> bool:
    """Return True if the matrix equals its transpose."""
    rows = _rows(matrix)
    return rows == transpose(rows)