"""Integer exercises: happy numbers, square roots, digit reversal."""

from __future__ import annotations

import math
from collections.abc import Sequence

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _digit_square_sum(n: int) -> int:
    total = 0
    while n > 0:
        n, digit = divmod(n, 10)
        total += digit * digit
    return total


def is_happy(n: int) -> bool:
    """Tell whether repeatedly summing squared digits reaches 1."""
    slow = fast = n
    while fast != 1:
        slow = _digit_square_sum(slow)
        fast = _digit_square_sum(_digit_square_sum(fast))
        if slow == fast and slow != 1:
            return False
    return True


def my_sqrt(x: int) -> int:
    """Return the integer square root of ``x``; values below 2 come back unchanged."""
    if x < 2:
        return x
    return math.isqrt(x)


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``, or return 0 if that leaves the 32-bit range."""
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    if not _INT_MIN <= result <= _INT_MAX:
        return 0
    return result


def is_palindrome_number(x: int) -> bool:
    """Tell whether ``x`` reads the same backwards; negatives never do."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number given as most-significant-first digits."""
    result = list(digits)
    for i in reversed(range(len(result))):
        if result[i] < 9:
            result[i] += 1
            return result
        result[i] = 0
    return [1, *result]