"""Searching in sorted sequences and in matrices."""

from __future__ import annotations

import math
from collections.abc import Sequence

NOT_FOUND = -1


def _bisect(items: Sequence[int], target: int, lo: int, hi: int) -> int:
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if items[mid] == target:
            return mid
        if items[mid] > target:
            hi = mid - 1
        else:
            lo = mid + 1
    return NOT_FOUND


def binary_search(items: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in sorted ``items``, or -1 if absent."""
    return _bisect(items, target, 0, len(items) - 1)


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> tuple[int, int] | None:
    """Return the (row, column) of the first cell equal to ``target``, or None."""
    return next(
        (
            (row_index, col_index)
            for row_index, row in enumerate(matrix)
            for col_index, value in enumerate(row)
            if value == target
        ),
        None,
    )


def exponential_search(items: Sequence[int], target: int) -> int:
    """Find ``target`` in sorted ``items`` by doubling the range, then bisecting."""
    if not items:
        return NOT_FOUND
    if items[0] == target:
        return 0
    size = len(items)
    bound = 1
    while bound < size and items[bound] <= target:
        bound *= 2
    return _bisect(items, target, bound // 2, min(bound, size - 1))


def interpolation_search(items: Sequence[int], target: int) -> int:
    """Find ``target`` in sorted ``items`` by probing where it should lie."""
    lo, hi = 0, len(items) - 1
    while lo <= hi and items[lo] <= target <= items[hi]:
        if lo == hi or items[lo] == items[hi]:
            return lo if items[lo] == target else NOT_FOUND
        pos = lo + int((hi - lo) / (items[hi] - items[lo]) * (target - items[lo]))
        if items[pos] == target:
            return pos
        if items[pos] < target:
            lo = pos + 1
        else:
            hi = pos - 1
    return NOT_FOUND


def jump_search(items: Sequence[int], target: int) -> int:
    """Find ``target`` in sorted ``items`` by jumping blocks of about sqrt(n)."""
    size = len(items)
    if size == 0:
        return NOT_FOUND
    root = math.sqrt(size)
    step = int(root)
    prev = 0
    while items[min(step, size) - 1] < target:
        prev = step
        step = int(step + root)
        if prev >= size:
            return NOT_FOUND
    while items[prev] < target:
        prev += 1
        if prev == min(step, size):
            return NOT_FOUND
    return prev if items[prev] == target else NOT_FOUND


def linear_search(items: Sequence[int], target: int) -> int:
    """Return the index of the first element equal to ``target``, or -1."""
    return next((index for index, item in enumerate(items) if item == target), NOT_FOUND)