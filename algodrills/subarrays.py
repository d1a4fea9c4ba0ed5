"""Best-sum and best-product questions over contiguous runs of an array."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def _split(nums: Iterable[int]) -> tuple[int, Iterator[int]]:
    values = iter(nums)
    try:
        first = next(values)
    except StopIteration:
        raise ValueError("need at least one number") from None
    return first, values


def max_subarray(nums: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run."""
    best, rest = _split(nums)
    ending_here = best
    for value in rest:
        ending_here = max(value, ending_here + value)
        best = max(best, ending_here)
    return best


def maximum_sum_one_deletion(nums: Iterable[int]) -> int:
    """Return the largest run sum when at most one element may be dropped from the run."""
    first, rest = _split(nums)
    kept = first
    dropped = 0
    best = first
    for value in rest:
        extend_kept = max(value, kept + value)
        extend_dropped = max(dropped + value, kept)
        best = max(best, extend_kept, extend_dropped)
        kept, dropped = extend_kept, extend_dropped
    return best


def max_product(nums: Iterable[int]) -> int:
    """Return the largest product of a non-empty contiguous run."""
    first, rest = _split(nums)
    low = high = best = first
    for value in rest:
        candidates = (value, low * value, high * value)
        low, high = min(candidates), max(candidates)
        best = max(best, high)
    return best


def max_absolute_sum(nums: Iterable[int]) -> int:
    """Return the largest absolute value of any non-empty run sum."""
    first, rest = _split(nums)
    high = low = first
    best = abs(first)
    for value in rest:
        high = max(value, high + value)
        low = min(value, low + value)
        best = max(best, abs(high), abs(low))
    return best


def max_subarray_sum_circular(nums: Iterable[int]) -> int:
    """Return the largest run sum when the array wraps around end to start."""
    first, rest = _split(nums)
    high = best_high = first
    low = best_low = first
    total = first
    for value in rest:
        high = max(high + value, value)
        best_high = max(best_high, high)
        low = min(low + value, value)
        best_low = min(best_low, low)
        total += value
    if best_high < 0:
        return best_high
    return max(best_high, total - best_low)