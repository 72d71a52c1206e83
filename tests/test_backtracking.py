from itertools import combinations, combinations_with_replacement, permutations
from math import comb, factorial

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algosolve.backtracking import (
    combination_sum,
    combination_sum2,
    generate_parenthesis,
    letter_combinations,
    permute,
    permute_unique,
)


@given(st.lists(st.integers(1, 8), min_size=1, max_size=5, unique=True), st.integers(1, 16))
def test_combination_sum_finds_every_multiset(candidates, target):
    result = combination_sum(candidates, target)
    pool = sorted(candidates)
    expected = {
        combo
        for size in range(1, target // pool[0] + 1)
        for combo in combinations_with_replacement(pool, size)
        if sum(combo) == target
    }
    assert {tuple(combo) for combo in result} == expected
    assert len(result) == len(expected)
    assert result == sorted(result)


def test_combination_sum_rejects_non_positive_candidates():
    with pytest.raises(ValueError):
        combination_sum([0, 2], 4)


@given(st.lists(st.integers(1, 6), max_size=8), st.integers(1, 12))
def test_combination_sum2_finds_every_distinct_subset(candidates, target):
    result = combination_sum2(candidates, target)
    pool = sorted(candidates)
    expected = {
        combo
        for size in range(len(pool) + 1)
        for combo in combinations(pool, size)
        if sum(combo) == target
    }
    assert {tuple(combo) for combo in result} == expected
    assert len(result) == len(expected)


def _balanced(text):
    depth = 0
    for char in text:
        depth += 1 if char == "(" else -1
        if depth < 0:
            return False
    return depth == 0


@pytest.mark.parametrize("n", range(0, 8))
def test_generate_parenthesis(n):
    result = generate_parenthesis(n)
    assert len(result) == comb(2 * n, n) // (n + 1)
    assert len(set(result)) == len(result)
    assert result == sorted(result)
    assert all(len(text) == 2 * n and _balanced(text) for text in result)


def test_letter_combinations_single_digit():
    assert letter_combinations("2") == ["a", "b", "c"]
    assert letter_combinations("") == []


def test_letter_combinations_two_digits():
    result = letter_combinations("79")
    assert len(result) == len("pqrs") * len("wxyz")
    assert len(set(result)) == len(result)
    assert result == sorted(result)
    assert all(first in "pqrs" and second in "wxyz" for first, second in result)


def test_letter_combinations_rejects_digits_without_letters():
    with pytest.raises(ValueError):
        letter_combinations("21")


def test_permute_swap_order():
    assert permute([1, 2, 3]) == [
        [1, 2, 3],
        [1, 3, 2],
        [2, 1, 3],
        [2, 3, 1],
        [3, 2, 1],
        [3, 1, 2],
    ]


@given(st.lists(st.integers(-5, 5), max_size=6, unique=True))
def test_permute_gives_every_ordering(nums):
    original = list(nums)
    result = permute(nums)
    assert nums == original
    assert len(result) == factorial(len(nums))
    assert {tuple(p) for p in result} == set(permutations(nums))


@given(st.lists(st.integers(0, 3), max_size=6))
def test_permute_unique_gives_each_ordering_once(nums):
    assert permute_unique(nums) == [list(p) for p in sorted(set(permutations(nums)))]