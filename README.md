# algoset

Classic algorithm and data-structure routines in plain Python, with no
dependencies beyond the standard library.

## Install

```
pip install .
pip install ".[test]"   # with the test tools
```

## What is inside

| Module | Contents |
| --- | --- |
| `algoset.linked_list` | `ListNode`, `from_values`, `to_values`, `reverse_list`, `reverse_between`, `reverse_k_group`, `merge_two_lists`, `add_two_numbers`, `middle_node`, `has_cycle`, `detect_cycle`, `is_palindrome_list`, `next_larger_nodes` |
| `algoset.containers` | `MinStack` (constant-time `get_min`), `QueueStack` (a stack kept in a queue), `StackQueue` (a queue built from two stacks) |
| `algoset.matching` | `regex_match` (`.` and `*`), `wildcard_match` (`?` and `*`) |
| `algoset.strings` | `is_valid_parentheses`, `longest_valid_parentheses`, `remove_outer_parentheses`, `generate_parentheses`, `remove_adjacent_duplicates`, `is_alnum_palindrome`, `longest_palindrome`, `compress`, `zigzag_convert`, `letter_combinations`, `reverse_chars` |
| `algoset.arithmetic` | `fib`, `add_digits`, `power`, `int_sqrt`, `reverse_integer`, `is_palindrome_number`, `is_perfect_number`, `int_to_roman`, `roman_to_int` |
| `algoset.arrays` | `two_sum`, `max_area`, `can_complete_circuit`, `single_number`, `find_median_sorted_arrays`, `find_max_consecutive_ones`, `next_greater_element`, `max_subarray`, `single_non_duplicate`, `max_count`, `largest_rectangle_area`, `sort_array` |
| `algoset.matrix` | `rotate`, `spiral_order`, `set_zeroes` |

## Examples

```python
from algoset.linked_list import from_values, to_values, reverse_k_group
from algoset.matching import regex_match
from algoset.arithmetic import int_to_roman, roman_to_int
from algoset.containers import MinStack

to_values(reverse_k_group(from_values([1, 2, 3, 4, 5]), 2))  # [2, 1, 4, 3, 5]
regex_match("aab", "c*a*b")                                  # True
int_to_roman(1994)                                           # 'MCMXCIV'
roman_to_int("MCMXCIV")                                      # 1994

stack = MinStack()
for value in (5, 2, 7):
    stack.push(value)
stack.get_min()                                              # 2
```

## Behaviour worth knowing

- `rotate`, `set_zeroes`, `compress`, `reverse_chars` and `sort_array`
  change the list they are given; `sort_array` also returns it.
- The linked-list functions that reorder nodes (`reverse_list`,
  `reverse_between`, `reverse_k_group`, `merge_two_lists`) relink the
  existing nodes rather than copying them. `ListNode` objects compare by
  identity.
- Taking from an empty `MinStack`, `QueueStack` or `StackQueue` raises
  `IndexError`.
- Inputs that have no answer raise `ValueError`, for example
  `roman_to_int("")`, `int_sqrt(-1)`, `fib(-1)`, `max_subarray([])`,
  `find_median_sorted_arrays([], [])`, `zigzag_convert(s, 0)` or a
  non-digit passed to `letter_combinations`.

## Limits

This is a library only: it has no command-line program and reads or
writes no files.

## Running the tests

```
pytest
```