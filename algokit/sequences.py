"""Digit-string sequences: additive splits, digit groupings and longest common subsequences."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import zip_longest

_DECIMAL_DIGITS = frozenset("0123456789")


def _require_digits(text: str, name: str) -> None:
    if not set(text) <= _DECIMAL_DIGITS:
        raise ValueError(f"{name} must contain only decimal digits: {text!r}")


def add_strings(a: str, b: str) -> str:
    """Add two non-negative decimal numbers given as digit strings."""
    _require_digits(a, "a")
    _require_digits(b, "b")
    digits: list[str] = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        carry, digit = divmod(int(x) + int(y) + carry, 10)
        digits.append(str(digit))
    if carry:
        digits.append(str(carry))
    return "".join(reversed(digits))


def _is_valid_number(number: str) -> bool:
    return not (len(number) > 1 and number.startswith("0"))


def _continue_sequence(first: str, second: str, rest: str) -> list[str] | None:
    """Return the terms after ``first`` and ``second`` that spell ``rest``, or None."""
    terms: list[str] = []
    while _is_valid_number(first) and _is_valid_number(second):
        total = add_strings(first, second)
        if total == rest:
            terms.append(total)
            return terms
        if len(rest) <= len(total) or not rest.startswith(total):
            return None
        terms.append(total)
        first, second, rest = second, total, rest[len(total):]
    return None


def additive_sequence(digits: str) -> list[str]:
    """Split ``digits`` into numbers where each is the sum of the two before it.

    Numbers may not have leading zeros. Returns the first split found,
    trying shorter leading numbers first, or an empty list if there is none.
    """
    _require_digits(digits, "digits")
    length = len(digits)
    for first_len in range(1, length // 2 + 1):
        for second_len in range(1, (length - first_len) // 2 + 1):
            first = digits[:first_len]
            second = digits[first_len : first_len + second_len]
            tail = _continue_sequence(first, second, digits[first_len + second_len :])
            if tail is not None:
                return [first, second, *tail]
    return []


def digit_groupings(digits: str) -> Iterator[tuple[str, ...]]:
    """Yield every way to cut ``digits`` into consecutive groups.

    Splits come before joins: the all-separate grouping is yielded first and
    the single whole group last.
    """
    if not digits:
        yield ()
        return
    for cut in range(1, len(digits) + 1):
        head = digits[:cut]
        for rest in digit_groupings(digits[cut:]):
            yield (head, *rest)


def _suffix_lcs_table(first: str, second: str) -> list[list[int]]:
    """Table whose cell (i, j) is the LCS length of ``first[i:]`` and ``second[j:]``."""
    table = [[0] * (len(second) + 1) for _ in range(len(first) + 1)]
    for i in reversed(range(len(first))):
        for j in reversed(range(len(second))):
            if first[i] == second[j]:
                table[i][j] = table[i + 1][j + 1] + 1
            else:
                table[i][j] = max(table[i + 1][j], table[i][j + 1])
    return table


def lcs_length(first: str, second: str) -> int:
    """Return the length of the longest common subsequence of two strings."""
    return _suffix_lcs_table(first, second)[0][0]


def all_lcs(first: str, second: str) -> list[str]:
    """Return every distinct longest common subsequence, in lexicographic order."""
    table = _suffix_lcs_table(first, second)
    alphabet = sorted(set(first) & set(second))

    def walk(start_first: int, start_second: int, remaining: int) -> Iterator[str]:
        if remaining == 0:
            yield ""
            return
        for char in alphabet:
            at_first = first.find(char, start_first)
            at_second = second.find(char, start_second)
            if at_first >= 0 and at_second >= 0 and table[at_first][at_second] == remaining:
                for tail in walk(at_first + 1, at_second + 1, remaining - 1):
                    yield char + tail

    return list(walk(0, 0, table[0][0]))