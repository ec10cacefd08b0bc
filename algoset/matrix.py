"""In-place and traversal operations on rectangular matrices."""

from __future__ import annotations

from typing import List


def rotate(matrix: List[List[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    matrix.reverse()
    transposed = [list(column) for column in zip(*matrix)]
    for row, new_row in zip(matrix, transposed):
        row[:] = new_row


def spiral_order(matrix: List[List[int]]) -> List[int]:
    """Elements read clockwise in a spiral from the top-left corner."""
    rows = [list(row) for row in matrix]
    result: List[int] = []
    while rows and rows[0]:
        result.extend(rows.pop(0))
        rows = [list(column) for column in zip(*rows)][::-1]
    return result


def set_zeroes(matrix: List[List[int]]) -> None:
    """Zero every row and column that holds a zero, in place."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        for j in range(len(row)):
            if i in zero_rows or j in zero_cols:
                row[j] = 0