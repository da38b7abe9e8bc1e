"""In-place partitioning of integer sequences around a random pivot."""

from __future__ import annotations

import random
from collections.abc import MutableSequence
from typing import Any, Optional


def partition(
    data: MutableSequence[Any],
    start: int = 0,
    end: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> int:
    """Partition ``data[start:end + 1]`` in place around a randomly chosen pivot.

    Afterwards every element left of the returned index is smaller than the
    pivot and every element right of it is greater than or equal to it.
    Returns the pivot's final index.
    """
    if not data:
        raise ValueError("Invalid Parameters")
    if end is None:
        end = len(data) - 1
    if start < 0 or end >= len(data) or start > end:
        raise ValueError("Invalid Parameters")

    chooser = rng if rng is not None else random
    pivot_index = chooser.randint(start, end)
    data[pivot_index], data[end] = data[end], data[pivot_index]
    pivot = data[end]

    small = start
    for index in range(start, end):
        if data[index] < pivot:
            if small != index:
                data[index], data[small] = data[small], data[index]
            small += 1

    data[small], data[end] = data[end], data[small]
    return small