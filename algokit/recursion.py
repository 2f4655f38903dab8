"""Recursive classics: keypad words, primes, stacks, Hanoi, factorials and sum triangles."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import pairwise, product

KEYPAD = ("", "", "ABC", "DEF", "GHI", "JKL", "MNO", "PQRS", "TUV", "WXYZ")
"""Letters printed on each phone key, indexed by digit."""


def keypad_words(number: int) -> list[str]:
    """Return every letter string that ``number`` spells on a phone keypad.

    Keys 0 and 1 carry no letters, so a number containing them (other than
    the number 0 itself, which spells the empty word) spells nothing. Words
    are ordered with the letter of the last digit varying slowest.
    """
    if number < 0:
        raise ValueError("number must not be negative")
    if number == 0:
        return [""]
    letter_sets = [KEYPAD[int(digit)] for digit in reversed(str(number))]
    return ["".join(reversed(letters)) for letters in product(*letter_sets)]


def is_prime(n: int) -> bool:
    """Return True if ``n`` is a prime number."""
    if n <= 2:
        return n == 2
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def reverse_stack(stack: Iterable[int]) -> list[int]:
    """Return the stack (top last) with its order reversed."""
    return list(stack)[::-1]


def sort_stack(stack: Iterable[int]) -> list[int]:
    """Return the stack sorted so that its largest element is on top (last)."""
    return sorted(stack)


@dataclass(frozen=True)
class Move:
    """One move of a disk from one rod to another."""

    disk: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"Move disk {self.disk} from rod {self.source} to rod {self.target}"


def tower_of_hanoi(
    n: int, source: str = "A", target: str = "C", auxiliary: str = "B"
) -> Iterator[Move]:
    """Yield the moves that carry ``n`` disks from ``source`` to ``target``."""
    if n < 0:
        raise ValueError("number of disks must not be negative")
    if n == 0:
        return
    yield from tower_of_hanoi(n - 1, source, auxiliary, target)
    yield Move(n, source, target)
    yield from tower_of_hanoi(n - 1, auxiliary, target, source)


def factorial(n: int) -> int:
    """Return ``n!``."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    return math.prod(range(2, n + 1))


def sum_triangle(values: Iterable[int]) -> list[list[int]]:
    """Return the sum triangle built on ``values``, apex row first.

    Each row above the base holds the sums of adjacent pairs of the row below.
    """
    row = list(values)
    rows: list[list[int]] = []
    while row:
        rows.append(row)
        row = [left + right for left, right in pairwise(row)]
    rows.reverse()
    return rows