"""Three ways to compute Fibonacci numbers, including by 2x2 matrix powers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Matrix2x2:
    """An immutable 2x2 integer matrix."""

    m00: int = 0
    m01: int = 0
    m10: int = 0
    m11: int = 0

    def __matmul__(self, other: "Matrix2x2") -> "Matrix2x2":
        return Matrix2x2(
            self.m00 * other.m00 + self.m01 * other.m10,
            self.m00 * other.m01 + self.m01 * other.m11,
            self.m10 * other.m00 + self.m11 * other.m10,
            self.m10 * other.m01 + self.m11 * other.m11,
        )


_BASE = Matrix2x2(1, 1, 1, 0)


def _check_index(n: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")


def matrix_power(n: int) -> Matrix2x2:
    """Return ``[[1, 1], [1, 0]]`` raised to the power ``n`` (``n`` > 0)."""
    if n <= 0:
        raise ValueError("n must be positive")
    if n == 1:
        return _BASE
    half = matrix_power(n // 2)
    result = half @ half
    if n % 2 == 1:
        result = result @ _BASE
    return result


def fibonacci_recursive(n: int) -> int:
    """Return the ``n``-th Fibonacci number by plain recursion."""
    _check_index(n)
    if n < 2:
        return n
    return fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2)


def fibonacci_iterative(n: int) -> int:
    """Return the ``n``-th Fibonacci number by iterating from the bottom up."""
    _check_index(n)
    previous, current = 0, 1
    if n == 0:
        return previous
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def fibonacci_matrix(n: int) -> int:
    """Return the ``n``-th Fibonacci number from a power of the Fibonacci matrix."""
    _check_index(n)
    if n < 2:
        return n
    return matrix_power(n - 1).m00