"""Array puzzles: reordering, stack sequences, BST postorders, majorities, k smallest, max subarray."""

from __future__ import annotations

import heapq
from collections.abc import Callable, MutableSequence, Sequence
from typing import Any

from algoprobs.array_utils import partition


def reorder(data: MutableSequence[Any], predicate: Callable[[Any], bool]) -> None:
    """Reorder ``data`` in place so that elements matching ``predicate`` come last.

    Elements for which ``predicate`` is false are moved before all elements for
    which it is true. The relative order inside each group is not kept.
    """
    begin, end = 0, len(data) - 1
    while begin < end:
        while begin < end and not predicate(data[begin]):
            begin += 1
        while begin < end and predicate(data[end]):
            end -= 1
        if begin < end:
            data[begin], data[end] = data[end], data[begin]


def _is_even(n: int) -> bool:
    return (n & 1) == 0


def reorder_even_first(data: MutableSequence[int]) -> None:
    """Reorder ``data`` in place by the even test: odd numbers first, even numbers last."""
    reorder(data, _is_even)


def is_pop_order(pushed: Sequence[Any], popped: Sequence[Any]) -> bool:
    """Return whether ``popped`` can be the pop order of a stack pushed in ``pushed`` order.

    Empty sequences, or sequences of different lengths, give False.
    """
    length = len(pushed)
    if length == 0 or len(popped) != length:
        return False

    stack: list[Any] = []
    next_push = 0
    next_pop = 0
    while next_pop < length:
        while not stack or stack[-1] != popped[next_pop]:
            if next_push == length:
                break
            stack.append(pushed[next_push])
            next_push += 1
        if not stack or stack[-1] != popped[next_pop]:
            break
        stack.pop()
        next_pop += 1

    return not stack and next_pop == length


def verify_postorder_of_bst(sequence: Sequence[Any]) -> bool:
    """Return whether ``sequence`` is the post-order walk of some binary search tree.

    An empty sequence gives False.
    """
    if not sequence:
        return False

    root = sequence[-1]
    body = sequence[:-1]
    split = next((i for i, value in enumerate(body) if value > root), len(body))
    if any(value < root for value in body[split:]):
        return False

    left = verify_postorder_of_bst(body[:split]) if split > 0 else True
    right = verify_postorder_of_bst(body[split:]) if split < len(body) else True
    return left and right


def _check_more_than_half(nums: Sequence[Any], candidate: Any) -> Any:
    if sum(1 for value in nums if value == candidate) * 2 <= len(nums):
        raise ValueError("no element occurs more than half of the time")
    return candidate


def more_than_half_partition(nums: Sequence[Any]) -> Any:
    """Return the element occurring in more than half of ``nums``, found by partitioning.

    Raises ``ValueError`` if ``nums`` is empty or has no such element.
    The input is not modified.
    """
    if not nums:
        raise ValueError("input must not be empty")

    work = list(nums)
    middle = len(work) >> 1
    start, end = 0, len(work) - 1
    index = partition(work, start, end)
    while index != middle:
        if index > middle:
            end = index - 1
        else:
            start = index + 1
        index = partition(work, start, end)
    return _check_more_than_half(nums, work[middle])


def more_than_half_vote(nums: Sequence[Any]) -> Any:
    """Return the element occurring in more than half of ``nums``, found by majority vote.

    Raises ``ValueError`` if ``nums`` is empty or has no such element.
    """
    if not nums:
        raise ValueError("input must not be empty")

    result = nums[0]
    times = 1
    for value in nums[1:]:
        if times == 0:
            result = value
            times = 1
        elif value == result:
            times += 1
        else:
            times -= 1
    return _check_more_than_half(nums, result)


def least_numbers_partition(data: Sequence[Any], k: int) -> list[Any]:
    """Return the ``k`` smallest elements of ``data`` in ascending order, by partitioning.

    Gives an empty list when ``data`` is empty, ``k`` is not positive, or
    ``k`` exceeds the length of ``data``.
    """
    n = len(data)
    if n == 0 or k <= 0 or k > n:
        return []

    work = list(data)
    start, end = 0, n - 1
    index = partition(work, start, end)
    while index != k - 1:
        if index > k - 1:
            end = index - 1
        else:
            start = index + 1
        index = partition(work, start, end)
    return sorted(work[:k])


def least_numbers_heap(data: Sequence[int], k: int) -> list[int]:
    """Return the ``k`` smallest numbers of ``data`` in ascending order, using a bounded max-heap.

    Gives an empty list when ``k`` is less than 1 or exceeds the length of ``data``.
    """
    if k < 1 or len(data) < k:
        return []

    heap: list[int] = []  # negated values: heap[0] is minus the greatest kept
    for value in data:
        if len(heap) < k:
            heapq.heappush(heap, -value)
        elif value < -heap[0]:
            heapq.heapreplace(heap, -value)
    return sorted(-value for value in heap)


def max_subarray_sum(data: Sequence[int]) -> int:
    """Return the greatest sum of a non-empty contiguous run of ``data``.

    Raises ``ValueError`` if ``data`` is empty.
    """
    if not data:
        raise ValueError("input must not be empty")

    current = 0
    greatest = data[0]
    for index, value in enumerate(data):
        current = value if index == 0 or current <= 0 else current + value
        greatest = max(greatest, current)
    return greatest