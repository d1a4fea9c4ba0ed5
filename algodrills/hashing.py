"""Exercises answered with dictionaries, counters and prefix sums."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Sequence

_BALLOON = Counter("balloon")


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return ``[later, earlier]`` indices of two values summing to ``target``, or ``[]``."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return [index, partner]
        seen[value] = index
    return []


def subarrays_div_by_k(nums: Sequence[int], k: int) -> int:
    """Count the non-empty contiguous runs whose sum is divisible by ``k``."""
    if k == 0:
        raise ValueError("k must not be zero")
    residues: Counter[int] = Counter({0: 1})
    total = 0
    count = 0
    for value in nums:
        total += value
        residue = total % k
        count += residues[residue]
        residues[residue] += 1
    return count


def contains_duplicate(nums: Sequence[Hashable]) -> bool:
    """Tell whether any value appears more than once."""
    seen: set[Hashable] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def contains_nearby_duplicate(nums: Sequence[Hashable], k: int) -> bool:
    """Tell whether two equal values sit at most ``k`` positions apart."""
    last_seen: dict[Hashable, int] = {}
    for index, value in enumerate(nums):
        previous = last_seen.get(value)
        if previous is not None and index - previous <= k:
            return True
        last_seen[value] = index
    return False


def find_max_length(nums: Sequence[int]) -> int:
    """Return the length of the longest run holding as many 0s as other values."""
    first_at: dict[int, int] = {0: -1}
    balance = 0
    best = 0
    for index, value in enumerate(nums):
        balance += 1 if value == 0 else -1
        if balance in first_at:
            best = max(best, index - first_at[balance])
        else:
            first_at[balance] = index
    return best


def subarray_sum(nums: Sequence[int], k: int) -> int:
    """Count the non-empty contiguous runs that sum to exactly ``k``."""
    prefixes: Counter[int] = Counter({0: 1})
    total = 0
    count = 0
    for value in nums:
        total += value
        count += prefixes[total - k]
        prefixes[total] += 1
    return count


def pivot_index(nums: Sequence[int]) -> int:
    """Return the leftmost index whose left and right sums agree, or -1."""
    total = sum(nums)
    left = 0
    for index, value in enumerate(nums):
        if left == total - value - left:
            return index
        left += value
    return -1


def max_number_of_balloons(text: str) -> int:
    """Return how many times the word "balloon" can be spelt from the letters of ``text``."""
    have = Counter(text)
    return min(have[ch] // needed for ch, needed in _BALLOON.items())


def can_construct(ransom_note: str, magazine: str) -> bool:
    """Tell whether ``ransom_note`` can be spelt using each letter of ``magazine`` once."""
    return not Counter(ransom_note) - Counter(magazine)


def first_unique_char(s: str) -> int:
    """Return the index of the first character that occurs only once, or -1."""
    counts = Counter(s)
    return next((index for index, ch in enumerate(s) if counts[ch] == 1), -1)


def longest_palindrome_length(s: str) -> int:
    """Return the length of the longest palindrome that the letters of ``s`` can form."""
    counts = Counter(s).values()
    paired = sum(count - count % 2 for count in counts)
    has_odd = any(count % 2 for count in counts)
    return paired + (1 if has_odd else 0)