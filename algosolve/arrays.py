"""Algorithms over lists of integers and small integer grids."""

from __future__ import annotations

from functools import reduce
from operator import xor
from typing import Iterable, MutableSequence, Sequence


def three_sum_closest(nums: Sequence[int], target: int) -> int:
    """Return the sum of three numbers that lies closest to ``target``."""
    if len(nums) < 3:
        raise ValueError("at least three numbers are required")
    values = sorted(nums)
    size = len(values)
    best = values[0] + values[1] + values[2]
    for i in range(size - 2):
        lo, hi = i + 1, size - 1
        while lo < hi:
            total = values[i] + values[lo] + values[hi]
            if total == target:
                return target
            if abs(total - target) < abs(best - target):
                best = total
            if total < target:
                lo += 1
            else:
                hi -= 1
    return best


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct ascending triple of numbers that adds up to zero."""
    values = sorted(nums)
    size = len(values)
    result: list[list[int]] = []
    for i in range(size - 2):
        first = values[i]
        if i > 0 and first == values[i - 1]:
            continue
        if first > 0:
            break
        lo, hi = i + 1, size - 1
        while lo < hi:
            total = first + values[lo] + values[hi]
            if total == 0:
                result.append([first, values[lo], values[hi]])
                while lo < hi and values[lo] == values[lo + 1]:
                    lo += 1
                while lo < hi and values[hi] == values[hi - 1]:
                    hi -= 1
                lo += 1
                hi -= 1
            elif total < 0:
                lo += 1
            else:
                hi -= 1
    return result


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Return every distinct ascending quadruple of numbers adding up to ``target``."""
    size = len(nums)
    if size < 4:
        return []
    values = sorted(nums)
    result: list[list[int]] = []
    for i in range(size - 3):
        if i > 0 and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, size - 2):
            if j > i + 1 and values[j] == values[j - 1]:
                continue
            lo, hi = j + 1, size - 1
            while lo < hi:
                total = values[i] + values[j] + values[lo] + values[hi]
                if total == target:
                    result.append([values[i], values[j], values[lo], values[hi]])
                    while lo < hi and values[lo] == values[lo + 1]:
                        lo += 1
                    while lo < hi and values[hi] == values[hi - 1]:
                        hi -= 1
                    lo += 1
                    hi -= 1
                elif total > target:
                    while lo < hi and values[hi] == values[hi - 1]:
                        hi -= 1
                    hi -= 1
                else:
                    while lo < hi and values[lo] == values[lo + 1]:
                        lo += 1
                    lo += 1
    return result


def max_profit(prices: Iterable[int]) -> int:
    """Best profit from one buy followed by one later sale, or 0."""
    it = iter(prices)
    try:
        lowest = next(it)
    except StopIteration:
        raise ValueError("prices must not be empty") from None
    best = 0
    for price in it:
        if price < lowest:
            lowest = price
        else:
            best = max(best, price - lowest)
    return best


def max_area(height: Sequence[int]) -> int:
    """Largest area of water held between two of the vertical lines."""
    lo, hi = 0, len(height) - 1
    best = 0
    while lo < hi:
        best = max(best, min(height[lo], height[hi]) * (hi - lo))
        if height[lo] < height[hi]:
            lo += 1
        else:
            hi -= 1
    return best


def contains_nearby_duplicate(nums: Sequence[int], k: int) -> bool:
    """Tell whether two equal values stand at most ``k`` positions apart."""
    if k < 0:
        raise ValueError("k must not be negative")
    if k == 0 or len(nums) <= 1:
        return False
    window: set[int] = set()
    for i, value in enumerate(nums):
        if value in window:
            return True
        window.add(value)
        if i >= k:
            window.discard(nums[i - k])
    return False


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Tell whether any value appears more than once."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def _digit_count(number: int) -> int:
    return len(str(number)) if number > 0 else 0


def find_numbers(nums: Iterable[int]) -> int:
    """Count the numbers with an even count of decimal digits.

    Numbers that are not positive count as having no digits.
    """
    return sum(1 for number in nums if _digit_count(number) % 2 == 0)


def jump(nums: Sequence[int]) -> int:
    """Fewest jumps needed to reach the last position."""
    furthest = jumps = window_end = 0
    for i, reach in enumerate(nums[:-1]):
        furthest = max(furthest, i + reach)
        if i == window_end:
            jumps += 1
            window_end = furthest
    return jumps


def majority_element(nums: Iterable[int]) -> int:
    """Return the value that fills more than half of ``nums`` (Boyer-Moore vote)."""
    candidate = None
    votes = 0
    for value in nums:
        if votes == 0:
            candidate = value
        votes += 1 if value == candidate else -1
    if candidate is None:
        raise ValueError("nums must not be empty")
    return candidate


def merge(nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1`` in place."""
    i, j, k = m - 1, n - 1, m + n - 1
    while i >= 0 and j >= 0:
        if nums1[i] > nums2[j]:
            nums1[k] = nums1[i]
            i -= 1
        else:
            nums1[k] = nums2[j]
            j -= 1
        k -= 1
    nums1[: j + 1] = nums2[: j + 1]


def next_permutation(nums: MutableSequence[int]) -> None:
    """Rearrange ``nums`` into the next permutation in lexicographic order.

    The last permutation wraps round to the first.
    """
    size = len(nums)
    if size < 2:
        return
    i = size - 1
    while i > 0 and nums[i] <= nums[i - 1]:
        i -= 1
    if i:
        j = size - 1
        while nums[j] <= nums[i - 1]:
            j -= 1
        nums[i - 1], nums[j] = nums[j], nums[i - 1]
    nums[i:] = nums[i:][::-1]


def pascal_row(row_index: int) -> list[int]:
    """Return row ``row_index`` (counted from 0) of Pascal's triangle."""
    if row_index < 0:
        raise ValueError("row_index must not be negative")
    row = [1] * (row_index + 1)
    for i in range(2, row_index + 1):
        for j in range(i - 1, 0, -1):
            row[j] += row[j - 1]
    return row


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle; always at least one."""
    rows = [[1]]
    for _ in range(1, num_rows):
        prev = rows[-1]
        rows.append([1, *(a + b for a, b in zip(prev, prev[1:])), 1])
    return rows


def plus_one(digits: MutableSequence[int]) -> MutableSequence[int]:
    """Add one to the decimal number held in ``digits``, in place, and return it."""
    for i in reversed(range(len(digits))):
        if digits[i] < 9:
            digits[i] += 1
            return digits
        digits[i] = 0
    digits.insert(0, 1)
    return digits


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact a sorted list so its distinct values lead; return how many there are."""
    if not nums:
        return 0
    kept = 1
    for value in nums[1:]:
        if value != nums[kept - 1]:
            nums[kept] = value
            kept += 1
    return kept


def remove_element(nums: MutableSequence[int], val: int) -> int:
    """Move every value other than ``val`` to the front; return how many there are."""
    kept = 0
    for value in nums:
        if value != val:
            nums[kept] = value
            kept += 1
    return kept


def rotate(matrix: list[list[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    size = len(matrix)
    for i in range(size):
        for j in range(i + 1, size):
            matrix[i][j], matrix[j][i] = matrix[j][i], matrix[i][j]
    for row in matrix:
        row.reverse()


def single_number(nums: Iterable[int]) -> int:
    """Return the one value that appears an odd number of times when all others pair up."""
    return reduce(xor, nums, 0)


def _no_repeats(cells: Iterable[str]) -> bool:
    digits = [cell for cell in cells if cell != "."]
    return len(digits) == len(set(digits))


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Tell whether no row, column or 3x3 box of a 9x9 board repeats a digit.

    Empty cells are marked with ``"."``.
    """
    boxes = (
        [board[top + i][left + j] for i in range(3) for j in range(3)]
        for top in range(0, 9, 3)
        for left in range(0, 9, 3)
    )
    return (
        all(_no_repeats(row[:9]) for row in board[:9])
        and all(_no_repeats(column) for column in zip(*board[:9]))
        and all(_no_repeats(box) for box in boxes)
    )