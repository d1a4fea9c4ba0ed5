"""Merging, inserting into and intersecting lists of closed intervals."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _merge_sorted(intervals: Iterable[tuple[int, int]]) -> list[list[int]]:
    merged: list[list[int]] = []
    for start, end in intervals:
        if merged and merged[-1][1] >= start:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def interval_intersection(
    first: Sequence[Sequence[int]], second: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Intersect two sorted lists of disjoint closed intervals."""
    result = []
    i = j = 0
    while i < len(first) and j < len(second):
        start1, end1 = first[i]
        start2, end2 = second[j]
        start, end = max(start1, start2), min(end1, end2)
        if start <= end:
            result.append([start, end])
        if end1 <= end2:
            i += 1
        else:
            j += 1
    return result


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching intervals, returning them in ascending order."""
    ordered = sorted((start, end) for start, end in intervals)
    return _merge_sorted(ordered)


def insert_interval(
    intervals: Sequence[Sequence[int]], new_interval: Sequence[int]
) -> list[list[int]]:
    """Insert an interval into a sorted list of intervals and merge any overlaps."""
    start, end = new_interval
    items = [(s, e) for s, e in intervals]
    position = next((i for i, (s, _) in enumerate(items) if s >= start), len(items))
    items.insert(position, (start, end))
    return _merge_sorted(items)