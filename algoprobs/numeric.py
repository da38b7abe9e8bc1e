"""Number puzzles: bit counting, fast powers, digit counts and ugly numbers."""

from __future__ import annotations

from collections.abc import Iterator

_WORD_BITS = 32
_WORD_MASK = (1 << _WORD_BITS) - 1
_EPSILON = 0.0000001


def _as_word(n: int) -> int:
    """Return ``n`` as an unsigned 32-bit word (two's complement for negatives)."""
    return n & _WORD_MASK


def count_ones_by_mask(n: int) -> int:
    """Count the set bits of ``n`` as a 32-bit word by testing each bit in turn."""
    word = _as_word(n)
    return sum(1 for bit in range(_WORD_BITS) if word & (1 << bit))


def count_ones_by_clearing(n: int) -> int:
    """Count the set bits of ``n`` as a 32-bit word by clearing the lowest one repeatedly."""
    word = _as_word(n)
    count = 0
    while word:
        count += 1
        word &= word - 1
    return count


def _is_zero(value: float) -> bool:
    return -_EPSILON < value < _EPSILON


def _power_unsigned(base: float, exponent: int) -> float:
    if exponent == 0:
        return 1.0
    if exponent == 1:
        return base
    result = _power_unsigned(base, exponent >> 1)
    result *= result
    if exponent & 1:
        result *= base
    return result


def power(base: float, exponent: int) -> float:
    """Return ``base`` raised to the integer ``exponent`` by repeated squaring.

    Raises ``ValueError`` when ``base`` is zero and ``exponent`` is negative.
    Zero to the power zero is 1.
    """
    if _is_zero(base) and exponent < 0:
        raise ValueError("zero cannot be raised to a negative power")
    result = _power_unsigned(base, abs(exponent))
    if exponent < 0:
        result = 1.0 / result
    return result


def numbers_up_to_digits(n: int) -> Iterator[str]:
    """Yield, as decimal strings, every number from 1 to the largest with ``n`` digits.

    Numbers are built digit by digit, so ``n`` is not limited by any integer
    width. Nothing is yielded when ``n`` is not positive.
    """
    if n <= 0:
        return
    digits = ["0"] * n

    def fill(index: int) -> Iterator[str]:
        if index == n:
            text = "".join(digits).lstrip("0")
            if text:
                yield text
            return
        for digit in "0123456789":
            digits[index] = digit
            yield from fill(index + 1)

    yield from fill(0)


def _ones_in(number: int) -> int:
    count = 0
    while number:
        if number % 10 == 1:
            count += 1
        number //= 10
    return count


def count_digit_one_brute(n: int) -> int:
    """Count the digit 1 in every number from 1 to ``n`` by examining each number."""
    if n <= 0:
        return 0
    return sum(_ones_in(number) for number in range(1, n + 1))


def _count_ones_in_digits(digits: str) -> int:
    if not digits or not digits[0].isdigit():
        return 0
    first = int(digits[0])
    length = len(digits)
    if length == 1:
        return 1 if first > 0 else 0

    if first > 1:
        in_first_place = 10 ** (length - 1)
    elif first == 1:
        in_first_place = int(digits[1:]) + 1
    else:
        in_first_place = 0

    in_other_places = first * (length - 1) * 10 ** (length - 2)
    return in_first_place + in_other_places + _count_ones_in_digits(digits[1:])


def count_digit_one(n: int) -> int:
    """Count the digit 1 in every number from 1 to ``n`` digit position by position."""
    if n <= 0:
        return 0
    return _count_ones_in_digits(str(n))


def is_ugly(num: int) -> bool:
    """Return whether ``num`` has no prime factors other than 2, 3 and 5.

    Raises ``ValueError`` when ``num`` is not positive.
    """
    if num <= 0:
        raise ValueError("only positive numbers can be tested")
    for factor in (2, 3, 5):
        while num % factor == 0:
            num //= factor
    return num == 1


def ugly_number_brute(index: int) -> int:
    """Return the ``index``-th ugly number by testing every integer; 0 if ``index`` < 1."""
    if index <= 0:
        return 0
    count = 0
    num = 0
    while count < index:
        num += 1
        if is_ugly(num):
            count += 1
    return num


def ugly_number(index: int) -> int:
    """Return the ``index``-th ugly number by merging multiples; 0 if ``index`` < 1."""
    if index <= 0:
        return 0
    uglies = [1]
    i2 = i3 = i5 = 0
    while len(uglies) < index:
        following = min(uglies[i2] * 2, uglies[i3] * 3, uglies[i5] * 5)
        uglies.append(following)
        while uglies[i2] * 2 <= following:
            i2 += 1
        while uglies[i3] * 3 <= following:
            i3 += 1
        while uglies[i5] * 5 <= following:
            i5 += 1
    return uglies[-1]