import pytest

from algodrills.stacks import (
    daily_temperatures,
    is_valid_parentheses,
    next_greater_elements,
    remove_adjacent_duplicates,
    remove_adjacent_duplicates_k,
)


def test_remove_adjacent_duplicates_example():
    assert remove_adjacent_duplicates("abbaca") == "ca"


@pytest.mark.parametrize("s", ["abc", "xyz", "abbaca", "aaaaab"])
def test_remove_adjacent_duplicates_mirror_vanishes(s):
    assert remove_adjacent_duplicates(s + s[::-1]) == ""


@pytest.mark.parametrize("s", ["azxxzy", "aababaab", "abcd"])
def test_remove_adjacent_duplicates_leaves_no_pair(s):
    result = remove_adjacent_duplicates(s)
    assert all(a != b for a, b in zip(result, result[1:]))
    assert len(result) % 2 == len(s) % 2


def test_remove_adjacent_duplicates_k_example():
    assert remove_adjacent_duplicates_k("deeedbbcccbdaa", 3) == "aa"


def test_remove_adjacent_duplicates_k_keeps_short_runs():
    assert remove_adjacent_duplicates_k("abc", 2) == "abc"
    assert remove_adjacent_duplicates_k("aabbcc", 3) == "aabbcc"


def test_remove_adjacent_duplicates_k_removes_full_runs():
    assert remove_adjacent_duplicates_k("aaa", 3) == ""
    assert remove_adjacent_duplicates_k("abbbba", 4) == "aa"


def test_remove_adjacent_duplicates_k_rejects_small_k():
    with pytest.raises(ValueError):
        remove_adjacent_duplicates_k("aa", 1)


@pytest.mark.parametrize("s", ["()", "()[]{}", "{[]}", "", "([{}])"])
def test_valid_parentheses(s):
    assert is_valid_parentheses(s)


@pytest.mark.parametrize("s", ["(]", "([)]", "(", ")", "]", "(a)", "(()"])
def test_invalid_parentheses(s):
    assert not is_valid_parentheses(s)


def test_next_greater_elements_example():
    assert next_greater_elements([1, 2, 1]) == [2, -1, 2]


@pytest.mark.parametrize("nums", [[1, 2, 3, 4, 3], [5, 4, 3, 2, 1], [2, 7, 1, 8, 2, 8]])
def test_next_greater_elements_properties(nums):
    result = next_greater_elements(nums)
    assert len(result) == len(nums)
    for value, nxt in zip(nums, result):
        if value == max(nums):
            assert nxt == -1
        else:
            assert nxt > value


def test_next_greater_elements_equal_values():
    nums = [4, 4, 4]
    assert next_greater_elements(nums) == [-1] * len(nums)
    assert next_greater_elements([]) == []


@pytest.mark.parametrize(
    "temps", [[73, 74, 75, 71, 69, 72, 76, 73], [30, 40, 50, 60], [30, 60, 90]]
)
def test_daily_temperatures_points_at_first_warmer_day(temps):
    result = daily_temperatures(temps)
    assert len(result) == len(temps)
    for i, wait in enumerate(result):
        later = temps[i + 1:]
        if wait:
            assert temps[i + wait] > temps[i]
            assert all(t <= temps[i] for t in temps[i + 1:i + wait])
        else:
            assert all(t <= temps[i] for t in later)


def test_daily_temperatures_falling():
    temps = [90, 80, 70]
    assert daily_temperatures(temps) == [0] * len(temps)
    assert daily_temperatures([]) == []