"""Exercises answered with a stack."""

from __future__ import annotations

from collections.abc import Sequence

_CLOSERS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_CLOSERS.values())


def remove_adjacent_duplicates(s: str) -> str:
    """Repeatedly remove pairs of equal adjacent characters."""
    stack: list[str] = []
    for ch in s:
        if stack and stack[-1] == ch:
            stack.pop()
        else:
            stack.append(ch)
    return "".join(stack)


def remove_adjacent_duplicates_k(s: str, k: int) -> str:
    """Repeatedly remove runs of ``k`` equal adjacent characters."""
    if k < 2:
        raise ValueError("k must be at least 2")
    stack: list[list] = []
    for ch in s:
        if not stack or stack[-1][0] != ch:
            stack.append([ch, 1])
        elif stack[-1][1] < k - 1:
            stack[-1][1] += 1
        else:
            stack.pop()
    return "".join(ch * count for ch, count in stack)


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every bracket in ``s`` is closed in the right order."""
    stack: list[str] = []
    for ch in s:
        if ch in _OPENERS:
            stack.append(ch)
        elif stack and stack[-1] == _CLOSERS.get(ch):
            stack.pop()
        else:
            return False
    return not stack


def next_greater_elements(nums: Sequence[int]) -> list[int]:
    """For each value, return the next larger value going round the list, or -1."""
    size = len(nums)
    result = [-1] * size
    stack: list[int] = list(reversed(nums[:-1])) if size else []
    for index in reversed(range(size)):
        value = nums[index]
        while stack and stack[-1] <= value:
            stack.pop()
        if stack:
            result[index] = stack[-1]
        stack.append(value)
    return result


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """For each day, return how many days until a warmer one, or 0 if none comes."""
    result = [0] * len(temperatures)
    stack: list[int] = []
    for index in reversed(range(len(temperatures))):
        current = temperatures[index]
        while stack and temperatures[stack[-1]] <= current:
            stack.pop()
        if stack:
            result[index] = stack[-1] - index
        stack.append(index)
    return result