"""String exercises: Roman numerals, prefixes, palindromes and parsing."""

from __future__ import annotations

from collections.abc import Sequence

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_ROMAN_STEPS = (
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"),
    (100, "C"), (90, "XC"), (50, "L"), (40, "XL"),
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"),
    (1, "I"),
)

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def int_to_roman(num: int) -> str:
    """Write ``num`` as a Roman numeral; numbers below 1 give an empty string."""
    parts = []
    for value, symbol in _ROMAN_STEPS:
        count, num = divmod(num, value) if num > 0 else (0, num)
        parts.append(symbol * count)
    return "".join(parts)


def roman_to_int(s: str) -> int:
    """Read a Roman numeral."""
    try:
        values = [_ROMAN_VALUES[ch] for ch in s]
    except KeyError as exc:
        raise ValueError(f"not a Roman numeral digit: {exc.args[0]!r}") from None
    total = 0
    for current, following in zip(values, values[1:] + [0]):
        total += -current if current < following else current
    return total


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string."""
    if not strs:
        raise ValueError("need at least one string")
    prefix = strs[0]
    for word in strs[1:]:
        while not word.startswith(prefix):
            prefix = prefix[:-1]
            if not prefix:
                return ""
    return prefix


def _expand(s: str, left: int, right: int) -> str:
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return s[left + 1:right]


def longest_palindromic_substring(s: str) -> str:
    """Return the first longest palindromic substring of ``s``."""
    best = ""
    for centre in range(len(s)):
        for candidate in (_expand(s, centre, centre), _expand(s, centre, centre + 1)):
            if len(candidate) > len(best):
                best = candidate
    return best


def fizz_buzz(n: int) -> list[str]:
    """Return the FizzBuzz sequence from 1 to ``n``."""
    def word(i: int) -> str:
        if i % 15 == 0:
            return "FizzBuzz"
        if i % 3 == 0:
            return "Fizz"
        if i % 5 == 0:
            return "Buzz"
        return str(i)

    return [word(i) for i in range(1, n + 1)]


def zigzag_convert(s: str, num_rows: int) -> str:
    """Write ``s`` in a zigzag over ``num_rows`` rows and read it row by row."""
    if num_rows < 1:
        raise ValueError("need at least one row")
    if num_rows == 1 or num_rows >= len(s):
        return s
    rows = [[] for _ in range(num_rows)]
    row = 0
    step = -1
    for ch in s:
        rows[row].append(ch)
        if row in (0, num_rows - 1):
            step = -step
        row += step
    return "".join("".join(r) for r in rows)


def my_atoi(s: str) -> int:
    """Parse a leading signed integer, clamped to the 32-bit signed range."""
    rest = s.lstrip(" ")
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if ch not in "0123456789":
            break
        result = result * 10 + int(ch)
        if sign * result >= _INT_MAX:
            return _INT_MAX
        if sign * result <= _INT_MIN:
            return _INT_MIN
    return sign * result