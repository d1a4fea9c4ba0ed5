"""Exercises solved with a window that grows on the right and shrinks on the left."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Sequence


def longest_ones(nums: Sequence[int], k: int) -> int:
    """Return the longest run of 1s possible after flipping at most ``k`` other values."""
    if k < 0:
        raise ValueError("k must not be negative")
    best = 0
    low = 0
    others = 0
    for high, value in enumerate(nums):
        if value != 1:
            others += 1
        while others > k:
            if nums[low] != 1:
                others -= 1
            low += 1
        best = max(best, high - low + 1)
    return best


def min_subarray_len(target: int, nums: Sequence[int]) -> int:
    """Return the length of the shortest run summing to at least ``target``, or 0."""
    best = None
    low = 0
    total = 0
    for high, value in enumerate(nums):
        total += value
        while low <= high and total >= target:
            length = high - low + 1
            if best is None or length < best:
                best = length
            total -= nums[low]
            low += 1
    return best or 0


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring with no repeated character."""
    last_seen: dict[str, int] = {}
    low = 0
    best = 0
    for high, ch in enumerate(s):
        if last_seen.get(ch, -1) >= low:
            low = last_seen[ch] + 1
        last_seen[ch] = high
        best = max(best, high - low + 1)
    return best


def character_replacement(s: str, k: int) -> int:
    """Return the longest run of one letter reachable by replacing at most ``k`` characters."""
    if k < 0:
        raise ValueError("k must not be negative")
    counts: Counter[str] = Counter()
    low = 0
    best = 0
    for high, ch in enumerate(s):
        counts[ch] += 1
        while high - low + 1 - max(counts.values()) > k:
            counts[s[low]] -= 1
            low += 1
        best = max(best, high - low + 1)
    return best


def min_window(s: str, t: str) -> str:
    """Return the shortest substring of ``s`` holding every character of ``t``, or ""."""
    need = Counter(t)
    if not need:
        return ""
    have: Counter[str] = Counter()
    best: tuple[int, int] | None = None
    low = 0
    for high, ch in enumerate(s):
        have[ch] += 1
        while all(have[c] >= n for c, n in need.items()):
            if best is None or high + 1 - low < best[1] - best[0]:
                best = (low, high + 1)
            have[s[low]] -= 1
            low += 1
    if best is None:
        return ""
    return s[best[0]:best[1]]


def total_fruit(fruits: Sequence[Hashable]) -> int:
    """Return the longest run that holds at most two kinds of value."""
    counts: Counter[Hashable] = Counter()
    low = 0
    best = 0
    for high, fruit in enumerate(fruits):
        counts[fruit] += 1
        while len(counts) > 2:
            dropped = fruits[low]
            counts[dropped] -= 1
            if not counts[dropped]:
                del counts[dropped]
            low += 1
        best = max(best, high - low + 1)
    return best