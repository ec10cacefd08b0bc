import copy

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algoset.matrix import rotate, set_zeroes, spiral_order


def square_matrices():
    return st.integers(1, 6).flatmap(
        lambda n: st.lists(
            st.lists(st.integers(-9, 9), min_size=n, max_size=n),
            min_size=n,
            max_size=n,
        )
    )


def rect_matrices(values=st.integers(-9, 9)):
    return st.tuples(st.integers(1, 6), st.integers(1, 6)).flatmap(
        lambda shape: st.lists(
            st.lists(values, min_size=shape[1], max_size=shape[1]),
            min_size=shape[0],
            max_size=shape[0],
        )
    )


@given(square_matrices())
def test_rotate_maps_positions(matrix):
    original = copy.deepcopy(matrix)
    n = len(matrix)
    rotate(matrix)
    for i in range(n):
        for j in range(n):
            assert matrix[i][j] == original[n - 1 - j][i]


@given(square_matrices())
def test_rotate_four_times_is_identity(matrix):
    original = copy.deepcopy(matrix)
    for _ in range(4):
        rotate(matrix)
    assert matrix == original


def test_rotate_keeps_row_objects():
    matrix = [[1, 2], [3, 4]]
    rows = {id(row) for row in matrix}
    rotate(matrix)
    assert {id(row) for row in matrix} == rows


def test_rotate_rejects_non_square():
    with pytest.raises(ValueError):
        rotate([[1, 2, 3], [4, 5, 6]])


def test_spiral_worked_example():
    assert spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == [1, 2, 3, 6, 9, 8, 7, 4, 5]


@given(rect_matrices())
def test_spiral_is_permutation_starting_with_first_row(matrix):
    result = spiral_order(matrix)
    flat = [v for row in matrix for v in row]
    assert sorted(result) == sorted(flat)
    assert result[: len(matrix[0])] == matrix[0]


@given(rect_matrices())
def test_spiral_does_not_modify_input(matrix):
    original = copy.deepcopy(matrix)
    spiral_order(matrix)
    assert matrix == original


@given(st.lists(st.integers(), min_size=1, max_size=8))
def test_spiral_single_row_and_column(values):
    assert spiral_order([values]) == values
    assert spiral_order([[v] for v in values]) == values


def test_spiral_empty():
    assert spiral_order([]) == []


@given(rect_matrices(st.integers(0, 3)))
def test_set_zeroes(matrix):
    original = copy.deepcopy(matrix)
    set_zeroes(matrix)
    zero_rows = {i for i, row in enumerate(original) if 0 in row}
    zero_cols = {j for row in original for j, v in enumerate(row) if v == 0}
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            if i in zero_rows or j in zero_cols:
                assert value == 0
            else:
                assert value == original[i][j]


@given(rect_matrices(st.integers(1, 9)))
def test_set_zeroes_without_zeros_is_unchanged(matrix):
    original = copy.deepcopy(matrix)
    set_zeroes(matrix)
    assert matrix == original