"""String puzzles: escaping blanks, permutations, smallest concatenation, unique characters."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator
from functools import cmp_to_key
from typing import Optional


def replace_blank(text: str) -> str:
    """Return ``text`` with every space replaced by ``%20``."""
    return "".join("%20" if ch == " " else ch for ch in text)


def permutations(text: str) -> Iterator[str]:
    """Yield every arrangement of the characters of ``text``.

    Arrangements are produced by swapping each character into the first
    position in turn and permuting the rest; repeated characters yield
    repeated arrangements. An empty string yields one empty string.
    """
    chars = list(text)

    def permute(begin: int) -> Iterator[str]:
        if begin == len(chars):
            yield "".join(chars)
            return
        for index in range(begin, len(chars)):
            chars[index], chars[begin] = chars[begin], chars[index]
            yield from permute(begin + 1)
            chars[index], chars[begin] = chars[begin], chars[index]

    return permute(0)


def _compare_concatenations(first: str, second: str) -> int:
    combined1 = first + second
    combined2 = second + first
    return (combined1 > combined2) - (combined1 < combined2)


def min_number(nums: Iterable[int]) -> str:
    """Return the smallest number formed by concatenating ``nums``, as a string.

    An empty input gives an empty string.
    """
    pieces = [str(num) for num in nums]
    pieces.sort(key=cmp_to_key(_compare_concatenations))
    return "".join(pieces)


def first_not_repeating_char(text: str) -> Optional[str]:
    """Return the first character that occurs exactly once in ``text``, or None."""
    counts = Counter(text)
    return next((ch for ch in text if counts[ch] == 1), None)