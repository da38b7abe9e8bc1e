import pytest
from hypothesis import given, strategies as st

from algoprobs.fibonacci import (
    Matrix2x2,
    fibonacci_iterative,
    fibonacci_matrix,
    fibonacci_recursive,
    matrix_power,
)

SOURCE_CASES = [
    (0, 0), (1, 1), (2, 1), (3, 2), (4, 3), (5, 5),
    (6, 8), (7, 13), (8, 21), (9, 34), (10, 55),
]


@pytest.mark.parametrize("n, expected", SOURCE_CASES)
def test_recursive_source_cases(n, expected):
    assert fibonacci_recursive(n) == expected


@pytest.mark.parametrize("n, expected", SOURCE_CASES + [(40, 102334155)])
def test_iterative_source_cases(n, expected):
    assert fibonacci_iterative(n) == expected


@pytest.mark.parametrize("n, expected", SOURCE_CASES + [(40, 102334155)])
def test_matrix_source_cases(n, expected):
    assert fibonacci_matrix(n) == expected


@pytest.mark.parametrize(
    "func", [fibonacci_recursive, fibonacci_iterative, fibonacci_matrix]
)
def test_negative_index_raises(func):
    with pytest.raises(ValueError):
        func(-1)


def test_matrix_power_requires_positive():
    with pytest.raises(ValueError):
        matrix_power(0)


def test_matrix_power_one_is_base():
    assert matrix_power(1) == Matrix2x2(1, 1, 1, 0)


def test_matrix_identity_multiplication():
    identity = Matrix2x2(1, 0, 0, 1)
    m = Matrix2x2(2, 3, 5, 7)
    assert m @ identity == m
    assert identity @ m == m


@given(st.integers(min_value=0, max_value=20))
def test_all_methods_agree(n):
    value = fibonacci_recursive(n)
    assert fibonacci_iterative(n) == value
    assert fibonacci_matrix(n) == value


@given(st.integers(min_value=2, max_value=300))
def test_recurrence_holds(n):
    assert fibonacci_matrix(n) == fibonacci_matrix(n - 1) + fibonacci_matrix(n - 2)
    assert fibonacci_iterative(n) == fibonacci_matrix(n)


@given(st.integers(min_value=1, max_value=30), st.integers(min_value=1, max_value=30))
def test_matrix_power_adds_exponents(a, b):
    assert matrix_power(a) @ matrix_power(b) == matrix_power(a + b)