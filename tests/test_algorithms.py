import pytest

from labkit.algorithms import (
    binary_search,
    find_second_max,
    in_array,
    multiplication_table,
)


@pytest.mark.parametrize("target", [4, 8, 15, 16, 23, 42])
def test_in_array_finds_present_values(target):
    assert in_array([4, 8, 15, 16, 23, 42], target) is True


@pytest.mark.parametrize("target", [0, 5, 100, -4])
def test_in_array_rejects_absent_values(target):
    assert in_array([4, 8, 15, 16, 23, 42], target) is False


def test_in_array_empty():
    assert in_array([], 1) is False


@pytest.mark.parametrize("arr", [[], [7]])
def test_find_second_max_short_input(arr):
    assert find_second_max(arr) == 0


@pytest.mark.parametrize(
    "arr",
    [[1, 9, 4, 7], [3, 2, 10, 6, 8], [-5, -1, -3], [0, 2, 1, 5, 4, 3]],
)
def test_find_second_max_distinct_with_smaller_first(arr):
    assert find_second_max(arr) == sorted(arr)[-2]


def test_find_second_max_ignores_duplicates_of_max():
    arr = [1, 9, 9, 4]
    assert find_second_max(arr) == 4


def test_find_second_max_when_first_is_largest():
    # Both maxima start at the first element, which is then never displaced.
    assert find_second_max([5, 3]) == 5


@pytest.mark.parametrize("target", [1, 3, 5, 7, 9, 11])
def test_binary_search_finds_each_element(target):
    arr = [1, 3, 5, 7, 9, 11]
    index = binary_search(arr, target)
    assert arr[index] == target


@pytest.mark.parametrize("target", [0, 2, 12, -1])
def test_binary_search_missing(target):
    assert binary_search([1, 3, 5, 7, 9, 11], target) == -1


def test_binary_search_empty():
    assert binary_search([], 3) == -1


def test_multiplication_table_small():
    assert multiplication_table(3) == [[1, 2, 3], [2, 4, 6], [3, 6, 9]]


def test_multiplication_table_zero():
    assert multiplication_table(0) == []


def test_multiplication_table_shape_and_symmetry():
    table = multiplication_table(9)
    assert len(table) == 9
    assert all(len(row) == 9 for row in table)
    assert all(table[i][j] == table[j][i] for i in range(9) for j in range(9))
    assert table[0] == list(range(1, 10))