"""Array exercises solved by walking two indices towards each other."""

from __future__ import annotations

import math
from collections.abc import Sequence


def sorted_squares(nums: Sequence[int]) -> list[int]:
    """Square every value of an ascending sequence and return the squares ascending."""
    left, right = 0, len(nums) - 1
    descending = []
    while left <= right:
        if abs(nums[left]) > abs(nums[right]):
            descending.append(nums[left] * nums[left])
            left += 1
        else:
            descending.append(nums[right] * nums[right])
            right -= 1
    descending.reverse()
    return descending


def max_area(height: Sequence[int]) -> int:
    """Return the most water two of the given walls can hold between them."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct triple of values that sums to zero, each in ascending order."""
    values = sorted(nums)
    count = len(values)
    triples = []
    for i in range(count - 2):
        if i > 0 and values[i] == values[i - 1]:
            continue
        left, right = i + 1, count - 1
        while left < right:
            total = values[i] + values[left] + values[right]
            if total < 0:
                left += 1
            elif total > 0:
                right -= 1
            else:
                triples.append([values[i], values[left], values[right]])
                left += 1
                right -= 1
                while left < right and values[left] == values[left - 1]:
                    left += 1
                while left < right and values[right] == values[right + 1]:
                    right -= 1
    return triples


def three_sum_closest(nums: Sequence[int], target: int) -> int:
    """Return the sum of three values that lies closest to ``target``."""
    if len(nums) < 3:
        raise ValueError("need at least three numbers")
    values = sorted(nums)
    count = len(values)
    best_sum = values[0] + values[1] + values[2]
    best_diff = math.inf
    for i in range(count - 2):
        if i > 0 and values[i] == values[i - 1]:
            continue
        left, right = i + 1, count - 1
        while left < right:
            total = values[i] + values[left] + values[right]
            diff = abs(total - target)
            if diff < best_diff:
                best_diff = diff
                best_sum = total
            if total == target:
                return total
            if total < target:
                left += 1
            else:
                right -= 1
    return best_sum


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """Return the 1-based positions of two values summing to ``target``, or an empty list."""
    i, j = 0, len(numbers) - 1
    while i < j:
        total = numbers[i] + numbers[j]
        if total == target:
            return [i + 1, j + 1]
        if total < target:
            i += 1
        else:
            j -= 1
    return []


def find_duplicate(nums: Sequence[int]) -> int:
    """Find the repeated value among ``n`` numbers drawn from 1 to ``n - 1``."""
    size = len(nums)
    if size < 2 or any(not 1 <= value < size for value in nums):
        raise ValueError("values must lie between 1 and len(nums) - 1")
    slow = fast = 0
    while True:
        slow = nums[slow]
        fast = nums[nums[fast]]
        if slow == fast:
            break
    slow = 0
    while slow != fast:
        slow = nums[slow]
        fast = nums[fast]
    return slow


def reverse_string(chars: list[str]) -> None:
    """Reverse a list of characters in place."""
    left, right = 0, len(chars) - 1
    while left < right:
        chars[left], chars[right] = chars[right], chars[left]
        left += 1
        right -= 1


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in a single pass."""
    low = mid = 0
    high = len(nums) - 1
    while mid <= high:
        value = nums[mid]
        if value == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1


def remove_duplicates_sorted(nums: list[int]) -> int:
    """Move the distinct values of a sorted list to its front and return how many there are.

    Entries past the returned count are left untouched.
    """
    unique = [value for i, value in enumerate(nums) if i == 0 or value != nums[i - 1]]
    nums[:len(unique)] = unique
    return len(unique)