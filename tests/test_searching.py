import pytest
from hypothesis import given, strategies as st

from algoprobs.searching import find_in_matrix, min_in_rotated, spiral_order

MATRIX = [
    [1, 2, 8, 9],
    [2, 4, 9, 12],
    [4, 7, 10, 13],
    [6, 8, 11, 15],
]


@pytest.mark.parametrize(
    "num, expected",
    [(7, True), (5, False), (1, True), (15, True)],
)
def test_find_in_matrix_source_cases(num, expected):
    assert find_in_matrix(MATRIX, num) is expected


def test_find_in_matrix_outside_range():
    assert find_in_matrix(MATRIX, 0) is False
    assert find_in_matrix(MATRIX, 16) is False


def test_find_in_matrix_empty():
    assert find_in_matrix([], 1) is False
    assert find_in_matrix([[]], 1) is False


@given(
    st.integers(min_value=1, max_value=6),
    st.integers(min_value=1, max_value=6),
    st.integers(min_value=-5, max_value=40),
)
def test_find_in_matrix_matches_membership(rows, cols, target):
    matrix = [[3 * i + 2 * j for j in range(cols)] for i in range(rows)]
    flat = {value for row in matrix for value in row}
    assert find_in_matrix(matrix, target) is (target in flat)


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([3, 4, 5, 1, 2], 1),
        ([3, 4, 5, 1, 1, 2], 1),
        ([3, 4, 5, 1, 2, 2], 1),
        ([1, 0, 1, 1, 1], 0),
        ([1, 2, 3, 4, 5], 1),
        ([2], 2),
    ],
)
def test_min_in_rotated_source_cases(nums, expected):
    assert min_in_rotated(nums) == expected


def test_min_in_rotated_empty_raises():
    with pytest.raises(ValueError):
        min_in_rotated([])


@given(st.lists(st.integers(-50, 50), min_size=1, max_size=30), st.integers(0, 100))
def test_min_in_rotated_matches_min(values, shift):
    ordered = sorted(values)
    k = shift % len(ordered)
    rotated = ordered[k:] + ordered[:k]
    assert min_in_rotated(rotated) == min(values)


def _numbered(cols, rows):
    return [[i * cols + j + 1 for j in range(cols)] for i in range(rows)]


def test_spiral_single_element():
    assert spiral_order(_numbered(1, 1)) == [1]


def test_spiral_two_by_two():
    assert spiral_order(_numbered(2, 2)) == [1, 2, 4, 3]


def test_spiral_four_by_four():
    assert spiral_order(_numbered(4, 4)) == [
        1, 2, 3, 4, 8, 12, 16, 15, 14, 13, 9, 5, 6, 7, 11, 10,
    ]


def test_spiral_single_row_and_column():
    assert spiral_order(_numbered(5, 1)) == [1, 2, 3, 4, 5]
    assert spiral_order(_numbered(1, 5)) == [1, 2, 3, 4, 5]


def test_spiral_empty():
    assert spiral_order([]) == []
    assert spiral_order([[]]) == []


def test_spiral_ragged_raises():
    with pytest.raises(ValueError):
        spiral_order([[1, 2], [3]])


@pytest.mark.parametrize(
    "cols, rows",
    [(1, 1), (2, 2), (4, 4), (5, 5), (1, 5), (2, 5), (3, 5), (4, 5), (5, 1), (5, 2), (5, 3), (5, 4)],
)
def test_spiral_source_shapes_visit_every_cell_once(cols, rows):
    matrix = _numbered(cols, rows)
    result = spiral_order(matrix)
    assert sorted(result) == list(range(1, cols * rows + 1))
    assert result[:cols] == matrix[0]
    assert result[cols:cols + rows - 1] == [row[-1] for row in matrix[1:]]


@given(st.integers(1, 8), st.integers(1, 8))
def test_spiral_is_permutation(cols, rows):
    matrix = _numbered(cols, rows)
    result = spiral_order(matrix)
    assert len(result) == cols * rows
    assert set(result) == {v for row in matrix for v in row}