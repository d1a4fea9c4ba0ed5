from collections import Counter

import pytest

from algodrills.sliding_window import (
    character_replacement,
    length_of_longest_substring,
    longest_ones,
    min_subarray_len,
    min_window,
    total_fruit,
)


def test_longest_ones_worked_example():
    assert longest_ones([1, 1, 1, 0, 0, 0, 1, 1, 1, 1, 0], 2) == 6


@pytest.mark.parametrize("nums", [[0, 1, 0, 0, 1], [1, 1, 1], [0, 0], []])
def test_longest_ones_enough_flips_covers_everything(nums):
    assert longest_ones(nums, nums.count(0)) == len(nums)


def test_longest_ones_no_flips_and_no_ones():
    assert not longest_ones([0, 0, 0], 0)


def test_longest_ones_rejects_negative_k():
    with pytest.raises(ValueError):
        longest_ones([1, 0], -1)


@pytest.mark.parametrize("nums", [[2, 3, 1, 2, 4, 3], [1, 4, 4], [5], [1, 1, 1, 1]])
def test_min_subarray_len_whole_sum_needs_everything(nums):
    assert min_subarray_len(sum(nums), nums) == len(nums)


@pytest.mark.parametrize("target, nums", [(7, [2, 3, 1, 2, 4, 3]), (4, [1, 4, 4]), (11, [1, 2, 3, 4, 5])])
def test_min_subarray_len_result_is_reachable(target, nums):
    size = min_subarray_len(target, nums)
    assert 1 <= size <= len(nums)
    assert any(sum(nums[i:i + size]) >= target for i in range(len(nums) - size + 1))


def test_min_subarray_len_unreachable_target():
    nums = [1, 1, 1]
    assert not min_subarray_len(sum(nums) + 1, nums)


def test_length_of_longest_substring_worked_example():
    assert length_of_longest_substring("abcabcbb") == 3


@pytest.mark.parametrize("s", ["abcdef", "x", "qwerty"])
def test_length_of_longest_substring_all_distinct(s):
    assert length_of_longest_substring(s) == len(s)


@pytest.mark.parametrize("s", ["pwwkew", "bbbbb", "dvdf", "abba", "tmmzuxt"])
def test_length_of_longest_substring_window_exists(s):
    size = length_of_longest_substring(s)
    assert 1 <= size <= len(set(s))
    assert any(len(set(s[i:i + size])) == size for i in range(len(s) - size + 1))


def test_length_of_longest_substring_empty():
    assert not length_of_longest_substring("")


@pytest.mark.parametrize("s, k", [("ABAB", 2), ("AABABBA", 1), ("ABCDE", 1), ("AAAA", 0)])
def test_character_replacement_window_is_achievable(s, k):
    size = character_replacement(s, k)
    assert 1 <= size <= len(s)
    assert any(
        size - max(Counter(s[i:i + size]).values()) <= k for i in range(len(s) - size + 1)
    )


def test_character_replacement_enough_replacements():
    s = "ABCDEFG"
    assert character_replacement(s, len(s)) == len(s)


def test_character_replacement_rejects_negative_k():
    with pytest.raises(ValueError):
        character_replacement("AB", -1)


def test_min_window_worked_example():
    assert min_window("ADOBECODEBANC", "ABC") == "BANC"


@pytest.mark.parametrize("s", ["abc", "aab", "z"])
def test_min_window_of_itself(s):
    assert min_window(s, s) == s


@pytest.mark.parametrize("s, t", [("a", "aa"), ("abc", "d"), ("anything", "")])
def test_min_window_without_window(s, t):
    assert not min_window(s, t)


def test_min_window_covers_target():
    s, t = "cabwefgewcwaefgcf", "cae"
    window = min_window(s, t)
    assert window in s
    assert Counter(t) <= Counter(window)


@pytest.mark.parametrize("fruits", [[1, 2, 1], [1, 2, 1, 2, 2], [7], []])
def test_total_fruit_two_kinds_take_everything(fruits):
    assert total_fruit(fruits) == len(fruits)


@pytest.mark.parametrize("fruits", [[0, 1, 2, 2], [1, 2, 3, 2, 2], [3, 3, 3, 1, 2, 1, 1, 2, 3, 3, 4]])
def test_total_fruit_window_has_two_kinds(fruits):
    size = total_fruit(fruits)
    assert 2 <= size < len(fruits)
    assert any(len(set(fruits[i:i + size])) <= 2 for i in range(len(fruits) - size + 1))