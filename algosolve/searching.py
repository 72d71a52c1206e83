"""Binary-search based algorithms over sorted sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Sequence


def search_range(nums: Sequence[int], target: int) -> list[int]:
    """Return ``[first, last]`` positions of ``target`` in sorted ``nums``, or ``[-1, -1]``."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return [-1, -1]
    return [first, bisect_right(nums, target) - 1]


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Find ``target`` in a rotated sorted list of distinct values; -1 if absent."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if nums[mid] == target:
            return mid
        if nums[lo] <= nums[mid]:
            if nums[lo] <= target < nums[mid]:
                hi = mid - 1
            else:
                lo = mid + 1
        elif nums[mid] < target <= nums[hi]:
            lo = mid + 1
        else:
            hi = mid - 1
    return -1


def search_insert(nums: Sequence[int], target: int) -> int:
    """Position of ``target`` in sorted ``nums``, or where it would be inserted."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] > target:
            hi = mid - 1
        else:
            lo = mid + 1
    return lo


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Median of the union of two sorted sequences, in logarithmic time."""
    if len(nums1) > len(nums2):
        nums1, nums2 = nums2, nums1
    size1, size2 = len(nums1), len(nums2)
    if size1 + size2 == 0:
        raise ValueError("at least one sequence must be non-empty")

    neg_inf, pos_inf = float("-inf"), float("inf")
    half = (size1 + size2 + 1) // 2
    lo, hi = 0, size1
    while lo <= hi:
        i = (lo + hi) // 2
        j = half - i
        max_left1 = nums1[i - 1] if i > 0 else neg_inf
        min_right1 = nums1[i] if i < size1 else pos_inf
        max_left2 = nums2[j - 1] if j > 0 else neg_inf
        min_right2 = nums2[j] if j < size2 else pos_inf

        if max_left1 <= min_right2 and max_left2 <= min_right1:
            left = max(max_left1, max_left2)
            if (size1 + size2) % 2:
                return float(left)
            return (left + min(min_right1, min_right2)) / 2.0
        if max_left1 > min_right2:
            hi = i - 1
        else:
            lo = i + 1
    raise ValueError("sequences must be sorted")


def my_sqrt(x: int) -> int:
    """Integer square root of ``x``, rounded down."""
    if x < 0:
        raise ValueError("x must not be negative")
    if x <= 1:
        return x
    lo, hi = 1, x
    result = 0
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        square = mid * mid
        if square == x:
            return mid
        if square < x:
            result = mid
            lo = mid + 1
        else:
            hi = mid - 1
    return result