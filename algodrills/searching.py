"""Binary searches over sorted and mountain-shaped sequences."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right
from collections.abc import Sequence


def search_range(nums: Sequence[int], target: int) -> list[int]:
    """Return the first and last index of ``target`` in a sorted sequence, or ``[-1, -1]``."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return [-1, -1]
    return [first, bisect_right(nums, target) - 1]


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in a sorted sequence, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        guess = (low + high) // 2
        if nums[guess] == target:
            return guess
        if nums[guess] < target:
            low = guess + 1
        else:
            high = guess - 1
    return -1


def peak_index_in_mountain_array(nums: Sequence[int]) -> int:
    """Return the index of the peak of a sequence that rises and then falls."""
    if not nums:
        raise ValueError("need at least one number")
    low, high = 0, len(nums) - 1
    while low < high:
        guess = (low + high) // 2
        if nums[guess] < nums[guess + 1]:
            low = guess + 1
        else:
            high = guess
    return low


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of the union of two sorted sequences."""
    if len(nums1) > len(nums2):
        nums1, nums2 = nums2, nums1
    n1, n2 = len(nums1), len(nums2)
    if n1 + n2 == 0:
        raise ValueError("need at least one number")
    half = (n1 + n2 + 1) // 2
    low, high = 0, n1
    while low <= high:
        cut1 = (low + high) // 2
        cut2 = half - cut1
        l1 = nums1[cut1 - 1] if cut1 else -math.inf
        l2 = nums2[cut2 - 1] if cut2 else -math.inf
        r1 = nums1[cut1] if cut1 < n1 else math.inf
        r2 = nums2[cut2] if cut2 < n2 else math.inf
        if l1 <= r2 and l2 <= r1:
            if (n1 + n2) % 2 == 0:
                return (max(l1, l2) + min(r1, r2)) / 2.0
            return float(max(l1, l2))
        if l1 > r2:
            high = cut1 - 1
        else:
            low = cut1 + 1
    raise ValueError("sequences must be sorted")