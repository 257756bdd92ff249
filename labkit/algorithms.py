"""Small searching and table-building routines."""

from __future__ import annotations

from collections.abc import Sequence


def in_array(nums: Sequence[int], target: int) -> bool:
    """Return True if ``target`` occurs in ``nums``."""
    return any(value == target for value in nums)


def find_second_max(arr: Sequence[int]) -> int:
    """Return the second largest value of ``arr``, or 0 for fewer than two items.

    Both running maxima start at the first element, so when the first element
    is the largest the result is that element itself.
    """
    if len(arr) < 2:
        return 0

    first, *rest = arr
    max1 = max2 = first
    for value in rest:
        if value > max1:
            max2, max1 = max1, value
        elif value > max2 and value != max1:
            max2 = value
    return max2


def binary_search(arr: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in the sorted ``arr``, or -1 if absent."""
    left, right = 0, len(arr) - 1
    while left <= right:
        mid = (left + right) // 2
        if arr[mid] == target:
            return mid
        if arr[mid] > target:
            right = mid - 1
        else:
            left = mid + 1
    return -1


def multiplication_table(n: int) -> list[list[int]]:
    """Return an ``n`` by ``n`` multiplication table starting at 1."""
    return [[row * col for col in range(1, n + 1)] for row in range(1, n + 1)]