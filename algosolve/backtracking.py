"""Backtracking searches that list combinations, permutations and strings."""

from __future__ import annotations

from itertools import product
from typing import Iterable

_PHONE_LETTERS = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def combination_sum(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Every ascending combination of candidates, each usable repeatedly, summing to ``target``."""
    pool = sorted(candidates)
    if any(value <= 0 for value in pool):
        raise ValueError("candidates must be positive")
    result: list[list[int]] = []
    chosen: list[int] = []

    def search(start: int, remaining: int) -> None:
        if remaining == 0:
            result.append(chosen.copy())
            return
        for index in range(start, len(pool)):
            value = pool[index]
            if value > remaining:
                return
            chosen.append(value)
            search(index, remaining - value)
            chosen.pop()

    search(0, target)
    return result


def combination_sum2(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Every distinct ascending combination, each candidate used once, summing to ``target``."""
    pool = sorted(candidates)
    result: list[list[int]] = []
    chosen: list[int] = []

    def search(start: int, remaining: int) -> None:
        if remaining == 0:
            result.append(chosen.copy())
            return
        for index in range(start, len(pool)):
            value = pool[index]
            if value > remaining:
                return
            if index > start and pool[index - 1] == value:
                continue
            chosen.append(value)
            search(index + 1, remaining - value)
            chosen.pop()

    search(0, target)
    return result


def generate_parenthesis(n: int) -> list[str]:
    """Every well-formed string of ``n`` pairs of parentheses, in sorted order."""
    result: list[str] = []
    chars: list[str] = []

    def search(opened: int, closed: int) -> None:
        if opened == n and closed == n:
            result.append("".join(chars))
            return
        if opened < n:
            chars.append("(")
            search(opened + 1, closed)
            chars.pop()
        if closed < opened:
            chars.append(")")
            search(opened, closed + 1)
            chars.pop()

    search(0, 0)
    return result


def letter_combinations(digits: str) -> list[str]:
    """Every letter string a phone keypad can spell for ``digits`` (2 to 9)."""
    if not digits:
        return []
    try:
        letters = [_PHONE_LETTERS[digit] for digit in digits]
    except KeyError as error:
        raise ValueError(f"no letters on the keypad for {error.args[0]!r}") from None
    return ["".join(combo) for combo in product(*letters)]


def permute(nums: Iterable[int]) -> list[list[int]]:
    """Every ordering of ``nums``, produced by successive swaps."""
    items = list(nums)
    result: list[list[int]] = []

    def search(start: int) -> None:
        if start >= len(items):
            result.append(items.copy())
            return
        for index in range(start, len(items)):
            items[start], items[index] = items[index], items[start]
            search(start + 1)
            items[start], items[index] = items[index], items[start]

    search(0)
    return result


def permute_unique(nums: Iterable[int]) -> list[list[int]]:
    """Every distinct ordering of ``nums``, in lexicographic order."""
    items = sorted(nums)
    used = [False] * len(items)
    result: list[list[int]] = []
    current: list[int] = []

    def search() -> None:
        if len(current) == len(items):
            result.append(current.copy())
            return
        for index, value in enumerate(items):
            if used[index]:
                continue
            if index > 0 and value == items[index - 1] and not used[index - 1]:
                continue
            used[index] = True
            current.append(value)
            search()
            current.pop()
            used[index] = False

    search()
    return result