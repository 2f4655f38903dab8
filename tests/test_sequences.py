from itertools import pairwise

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.sequences import (
    add_strings,
    additive_sequence,
    all_lcs,
    digit_groupings,
    lcs_length,
)


def _is_subsequence(candidate, text):
    remaining = iter(text)
    return all(char in remaining for char in candidate)


def _is_additive(terms):
    return all(int(a) + int(b) == int(c) for a, b, c in zip(terms, terms[1:], terms[2:]))


@given(st.integers(min_value=0, max_value=10**30), st.integers(min_value=0, max_value=10**30))
def test_add_strings_matches_integer_sum(a, b):
    assert add_strings(str(a), str(b)) == str(a + b)


@given(st.integers(min_value=0, max_value=10**20), st.integers(min_value=0, max_value=10**20))
def test_add_strings_commutes(a, b):
    assert add_strings(str(a), str(b)) == add_strings(str(b), str(a))


@pytest.mark.parametrize("a, b", [("12a", "3"), ("1", "-2"), ("1.5", "2")])
def test_add_strings_rejects_non_digits(a, b):
    with pytest.raises(ValueError):
        add_strings(a, b)


def test_additive_sequence_fibonacci_example():
    assert additive_sequence("235813") == ["2", "3", "5", "8", "13"]


def test_additive_sequence_uneven_example():
    assert additive_sequence("199100199") == ["1", "99", "100", "199"]


def test_additive_sequence_none_found():
    assert additive_sequence("1234") == []


def test_additive_sequence_rejects_leading_zero_terms():
    result = additive_sequence("0235813")
    assert all(term == "0" or not term.startswith("0") for term in result)
    assert "".join(result) in ("", "0235813")


def test_additive_sequence_rejects_non_digits():
    with pytest.raises(ValueError):
        additive_sequence("12x3")


@given(st.integers(min_value=1, max_value=999), st.integers(min_value=1, max_value=999))
def test_additive_sequence_finds_generated_sequences(a, b):
    terms = [a, b]
    for _ in range(3):
        terms.append(terms[-1] + terms[-2])
    digits = "".join(map(str, terms))
    result = additive_sequence(digits)
    assert "".join(result) == digits
    assert len(result) >= 3
    assert _is_additive(result)


def test_digit_groupings_source_input():
    groupings = list(digit_groupings("1214"))
    assert len(groupings) == len(set(groupings)) == 2 ** (len("1214") - 1)
    assert all("".join(grouping) == "1214" for grouping in groupings)
    assert groupings[0] == tuple("1214")
    assert groupings[-1] == ("1214",)


def test_digit_groupings_empty():
    assert list(digit_groupings("")) == [()]


@given(st.text(alphabet="0123456789", min_size=1, max_size=8))
def test_digit_groupings_cover_input(digits):
    groupings = list(digit_groupings(digits))
    assert len(set(groupings)) == 2 ** (len(digits) - 1)
    assert all("".join(grouping) == digits for grouping in groupings)
    assert all(all(group) for grouping in groupings for group in grouping)


def test_all_lcs_source_example():
    first, second = "abcabcaa", "acbacba"
    length = lcs_length(first, second)
    results = all_lcs(first, second)
    assert results
    assert results == sorted(set(results))
    for candidate in results:
        assert len(candidate) == length
        assert _is_subsequence(candidate, first)
        assert _is_subsequence(candidate, second)


def test_all_lcs_with_empty_string():
    assert all_lcs("", "abc") == [""]


@given(st.text(alphabet="abc", max_size=8))
def test_all_lcs_of_identical_strings(text):
    assert lcs_length(text, text) == len(text)
    assert all_lcs(text, text) == [text]


@given(st.text(alphabet="abcd", max_size=8), st.text(alphabet="abcd", max_size=8))
def test_lcs_length_bounds_and_symmetry(first, second):
    length = lcs_length(first, second)
    assert length == lcs_length(second, first)
    assert 0 <= length <= min(len(first), len(second))


@given(st.text(alphabet="abc", max_size=7), st.text(alphabet="abc", max_size=7))
def test_all_lcs_are_common_longest_and_sorted(first, second):
    length = lcs_length(first, second)
    results = all_lcs(first, second)
    assert results
    assert all(lower < upper for lower, upper in pairwise(results))
    for candidate in results:
        assert len(candidate) == length
        assert _is_subsequence(candidate, first)
        assert _is_subsequence(candidate, second)
    assert set(results) == set(all_lcs(second, first))