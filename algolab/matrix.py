"""Matrix multiplication and element-wise squaring of integer sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _check_rectangular(matrix: Sequence[Sequence[int]], name: str) -> int:
    widths = {len(row) for row in matrix}
    if len(widths) > 1:
        raise ValueError(f"{name} matrix has rows of different lengths")
    return widths.pop() if widths else 0


def multiply_matrices(
    first: Sequence[Sequence[int]], second: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Return the product of two matrices given as lists of rows.

    Raises ValueError if the rows are ragged or the column count of
    ``first`` differs from the row count of ``second``.
    """
    inner = _check_rectangular(first, "first")
    _check_rectangular(second, "second")
    if first and inner != len(second):
        raise ValueError("matrices are not multiplicable")
    columns = list(zip(*second))
    return [
        [sum(a * b for a, b in zip(row, column)) for column in columns] for row in first
    ]


def square_and_sum(values: Iterable[int]) -> tuple[list[int], int]:
    """Return the squares of ``values`` and the sum of those squares."""
    squares = [value * value for value in values]
    return squares, sum(squares)