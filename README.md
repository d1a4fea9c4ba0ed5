# algodrills

A collection of well-known algorithm exercises, written as plain functions
over Python lists, strings and a small singly linked list type. The package
has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `algodrills.linked_list`

`ListNode` is a dataclass with `val` and `next`. Nodes compare by identity.

- `build_list(values)` builds a list and returns its head (`None` when empty);
  `list_values(head)` returns the values as a Python list and raises
  `ValueError` if the list has a cycle.
- `has_cycle(head)`, `detect_cycle(head)` (the node where the cycle starts,
  or `None`).
- `add_two_numbers(l1, l2)` adds numbers stored as reversed digit lists.
- `reverse_list(head)`, `reverse_between(head, left, right)` (1-based,
  inclusive positions; `ValueError` for positions out of range).
- `merge_two_lists(list1, list2)` splices two sorted lists together.
- `swap_pairs(head)`, `reverse_k_group(head, k)` (a short final group is left
  as it is; `k` below 1 raises `ValueError`).
- `rotate_right(head, k)` (negative `k` raises `ValueError`).
- `delete_duplicates(head)` removes repeats from a sorted list.
- `middle_node(head)` returns the second middle node for even lengths.

All of these rewire the nodes they are given rather than copying them.

### `algodrills.text`

`int_to_roman`, `roman_to_int` (`ValueError` on a non-Roman character),
`longest_common_prefix` (`ValueError` on an empty sequence),
`longest_palindromic_substring`, `fizz_buzz`, `zigzag_convert` (`ValueError`
for fewer than one row) and `my_atoi`, which parses a leading signed integer
and clamps it to the 32-bit signed range.

### `algodrills.integers`

`is_happy`, `my_sqrt` (integer square root), `reverse_integer` (returns 0 when
the result leaves the 32-bit signed range), `is_palindrome_number` and
`plus_one`, which returns a new digit list.

### `algodrills.two_pointers`

`sorted_squares`, `max_area`, `three_sum`, `three_sum_closest` (`ValueError`
for fewer than three numbers), `two_sum_sorted` (1-based positions, or `[]`),
`find_duplicate` (`ValueError` unless every value lies between 1 and
`len(nums) - 1`), and the in-place operations `reverse_string`, `sort_colors`
and `remove_duplicates_sorted` (returns the count of distinct values moved to
the front).

### `algodrills.sliding_window`

`longest_ones`, `min_subarray_len` (0 when no run reaches the target),
`length_of_longest_substring`, `character_replacement`, `min_window`
(`""` when no window exists) and `total_fruit`.

### `algodrills.subarrays`

`max_subarray`, `maximum_sum_one_deletion`, `max_product`, `max_absolute_sum`
and `max_subarray_sum_circular`. Each takes any iterable of numbers and raises
`ValueError` when it is empty.

### `algodrills.intervals`

`interval_intersection(first, second)`, `merge_intervals(intervals)` and
`insert_interval(intervals, new_interval)`. Intervals are closed; touching
intervals are merged. Results are lists of `[start, end]` lists.

### `algodrills.hashing`

`two_sum` (returns `[later_index, earlier_index]`, or `[]`),
`subarrays_div_by_k` (`ValueError` for `k == 0`), `contains_duplicate`,
`contains_nearby_duplicate`, `find_max_length`, `subarray_sum`,
`pivot_index`, `max_number_of_balloons`, `can_construct`,
`first_unique_char` and `longest_palindrome_length`.

### `algodrills.stacks`

`remove_adjacent_duplicates`, `remove_adjacent_duplicates_k` (`ValueError`
for `k` below 2), `is_valid_parentheses`, `next_greater_elements` (circular)
and `daily_temperatures`.

### `algodrills.searching`

`search_range` (`[-1, -1]` when absent), `binary_search` (-1 when absent),
`peak_index_in_mountain_array` and `find_median_sorted_arrays` (returns a
float; `ValueError` when both inputs are empty).

## Examples

```python
from algodrills.text import int_to_roman, roman_to_int
from algodrills.linked_list import build_list, list_values, reverse_k_group
from algodrills.intervals import merge_intervals
from algodrills.two_pointers import three_sum
from algodrills.sliding_window import min_window
from algodrills.hashing import two_sum
from algodrills.searching import find_median_sorted_arrays

int_to_roman(1994)            # "MCMXCIV"
roman_to_int("MCMXCIV")       # 1994

head = build_list([1, 2, 3, 4, 5])
list_values(reverse_k_group(head, 2))   # [2, 1, 4, 3, 5]

merge_intervals([[1, 3], [2, 6], [8, 10]])   # [[1, 6], [8, 10]]
three_sum([-1, 0, 1, 2, -1, -4])             # [[-1, -1, 2], [-1, 0, 1]]
min_window("ADOBECODEBANC", "ABC")           # "BANC"
two_sum([2, 7, 11, 15], 9)                   # [1, 0]
find_median_sorted_arrays([1, 3], [2])       # 2.0
```

## What it does not do

This is a library of functions only: there is no command-line tool, and
nothing reads input files or writes output on its own.