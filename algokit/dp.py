"""Dynamic-programming solutions to classic counting and optimisation problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate

MOD = 10**9 + 7
"""Modulus applied to combination counts."""

FIZZ_DIVISOR = 3
BUZZ_DIVISOR = 5


def knapsack(capacity: int, weights: Iterable[int], values: Iterable[int]) -> int:
    """Return the best total value of items fitting in ``capacity`` (0-1 knapsack).

    Each item may be taken at most once. An empty knapsack (capacity zero)
    holds nothing, not even weightless items.
    """
    weights = list(weights)
    values = list(values)
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")
    if capacity <= 0:
        return 0

    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        best = [
            0
            if room == 0
            else best[room]
            if weight > room
            else max(best[room], value + best[room - weight])
            for room in range(capacity + 1)
        ]
    return best[capacity]


def coin_combinations(coins: Iterable[int], target: int) -> int:
    """Count ordered ways to make ``target`` from ``coins``, modulo ``MOD``."""
    coins = list(coins)
    if target < 0:
        raise ValueError("target must not be negative")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")

    ways = [1] + [0] * target
    for amount in range(1, target + 1):
        ways[amount] = sum(ways[amount - coin] for coin in coins if coin <= amount) % MOD
    return ways[target]


def _rob_line(nums: Sequence[int]) -> int:
    if not nums:
        return 0
    if len(nums) == 1:
        return nums[0]
    two_back, one_back = nums[0], max(nums[0], nums[1])
    for amount in nums[2:]:
        two_back, one_back = one_back, max(one_back, two_back + amount)
    return one_back


def rob(nums: Iterable[int]) -> int:
    """Return the most that can be taken from a row of houses, never two adjacent."""
    return _rob_line(list(nums))


def rob_circular(nums: Iterable[int]) -> int:
    """Like :func:`rob`, but the first and last houses are neighbours."""
    nums = list(nums)
    if not nums:
        return 0
    if len(nums) == 1:
        return nums[0]
    if len(nums) == 2:
        return max(nums)
    return max(_rob_line(nums[:-1]), _rob_line(nums[:0:-1]))


def trap(heights: Iterable[int]) -> int:
    """Return the units of rain water held between bars of the given heights."""
    heights = list(heights)
    if len(heights) < 3:
        return 0
    left = accumulate(heights, max)
    right = list(accumulate(reversed(heights), max))[::-1]
    return sum(min(lo, hi) - height for lo, hi, height in zip(left, right, heights))


def unique_paths(rows: int, cols: int) -> int:
    """Count right/down paths from the top-left to the bottom-right of a grid."""
    if rows < 1 or cols < 1:
        raise ValueError("grid dimensions must be positive")
    row = [1] * cols
    for _ in range(rows - 1):
        row = list(accumulate(row))
    return row[-1]


def _fizz_buzz_word(number: int) -> str:
    word = ("Fizz" if number % FIZZ_DIVISOR == 0 else "") + (
        "Buzz" if number % BUZZ_DIVISOR == 0 else ""
    )
    return word or str(number)


def fizz_buzz(start: int, stop: int) -> str:
    """Return the FizzBuzz words for ``start`` to ``stop`` inclusive, each followed by a space."""
    return "".join(f"{_fizz_buzz_word(number)} " for number in range(start, stop + 1))