"""Searching sorted matrices and rotated arrays, and walking matrices in a spiral."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any


def find_in_matrix(matrix: Sequence[Sequence[Any]], num: Any) -> bool:
    """Return whether ``num`` occurs in ``matrix``.

    Every row of ``matrix`` must be sorted ascending from left to right and
    every column ascending from top to bottom. The search starts at the
    top-right corner and drops a row or a column at each step.
    """
    rows = len(matrix)
    if rows == 0:
        return False
    columns = len(matrix[0])
    if columns == 0:
        return False

    row, column = 0, columns - 1
    while row < rows and column >= 0:
        current = matrix[row][column]
        if current == num:
            return True
        if current > num:
            column -= 1
        else:
            row += 1
    return False


def min_in_rotated(nums: Sequence[Any]) -> Any:
    """Return the smallest element of a rotation of an ascending sequence.

    Raises ``ValueError`` if ``nums`` is empty.
    """
    if not nums:
        raise ValueError("Invalid parameters")

    low, high = 0, len(nums) - 1
    middle = low
    while nums[low] >= nums[high]:
        if high - low == 1:
            middle = high
            break
        middle = (low + high) // 2
        if nums[low] == nums[high] == nums[middle]:
            # The halves cannot be told apart; fall back to a linear scan.
            return min(nums[low:high + 1])
        if nums[middle] >= nums[low]:
            low = middle
        elif nums[middle] <= nums[high]:
            high = middle
    return nums[middle]


def _ring(rows: list[list[Any]], n_rows: int, n_cols: int, start: int) -> Iterator[Any]:
    end_x = n_cols - 1 - start
    end_y = n_rows - 1 - start

    # Left to right along the top.
    yield from rows[start][start:end_x + 1]

    # Top to bottom down the right side.
    if start < end_y:
        for i in range(start + 1, end_y + 1):
            yield rows[i][end_x]

    # Right to left along the bottom.
    if start < end_x and start < end_y:
        for i in range(end_x - 1, start - 1, -1):
            yield rows[end_y][i]

    # Bottom to top up the left side.
    if start < end_x and start < end_y - 1:
        for i in range(end_y - 1, start, -1):
            yield rows[i][start]


def spiral_order(matrix: Sequence[Sequence[Any]]) -> list[Any]:
    """Return the elements of ``matrix`` in clockwise spiral order.

    Raises ``ValueError`` if the rows do not all have the same length.
    """
    rows = [list(row) for row in matrix]
    if not rows or not rows[0]:
        return []
    n_rows, n_cols = len(rows), len(rows[0])
    if any(len(row) != n_cols for row in rows):
        raise ValueError("matrix rows must all have the same length")

    result: list[Any] = []
    start = 0
    while n_cols > start * 2 and n_rows > start * 2:
        result.extend(_ring(rows, n_rows, n_cols, start))
        start += 1
    return result