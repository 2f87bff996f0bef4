# algosuite

Classic algorithm and data-structure routines, grouped by topic.
Pure Python, standard library only.

## Modules

- `algosuite.trees`: the `TreeNode` dataclass and `tree_from_level_order` (builds a tree from
  a level-order list where `None` marks a missing child), plus `is_valid_bst`, `is_same_tree`,
  `max_depth`, `sorted_array_to_bst`, `find_mode`, `largest_values`, `tree_to_str`,
  `inorder_traversal` and `validate_binary_tree_nodes`.
- `algosuite.combinatorics`: `combination_sum`, `combination_sum_unique`, `subsets_with_dup`,
  `combination_sum_k`, `combination_sum_count`, `num_rolls_to_target`, `pascal_row`,
  `count_vowel_permutation`, `num_factored_binary_trees`, `poor_pigs`, `kth_grammar`,
  `is_power_of_four`, `number_of_matches` and `total_money`. Counts that can grow large
  (`num_rolls_to_target`, `count_vowel_permutation`, `num_factored_binary_trees`) are taken
  modulo `MOD` = 1 000 000 007.
- `algosuite.strings`: `longest_palindrome`, `backspace_compare`, `min_steps_to_anagram`,
  `max_length_between_equal_characters`, `close_strings`, `count_homogenous`,
  `merge_alternately`, `largest_odd_number`, `is_circular_sentence`,
  `min_length_after_removals`, `sort_vowels`, `min_changes_beautiful`, `minimum_steps`,
  `min_cost_colorful` and `longest_common_prefix`.
- `algosuite.arrays`: `find_max_consecutive_ones`, `find_lhs`, `find_special_integer`,
  `constrained_subset_sum`, `job_scheduling`, `sort_by_bits`, `build_stack_operations`,
  `max_product`, `max_coins`, `check_arithmetic_subarrays`, `get_sum_absolute_differences`,
  `maximum_score`, `can_be_increasing`, `max_product_difference`, `build_array`,
  `eliminate_maximum`, `find_array` and `buy_choco`.
- `algosuite.grids`: `find_diagonal_order`, `num_special`, `largest_submatrix`,
  `ones_minus_zeros`, `transpose`, `min_time_to_visit_all_points` and `is_reachable_at_time`.
- `algosuite.graphs`: `minimum_time` (course scheduling with 1-based prerequisite pairs),
  `restore_array` (rebuild an array from its adjacent pairs) and `recover_array`
  (recover `n` integers from all `2**n` subset sums).
- `algosuite.designs`: the classes
  - `NestedIterator`: an iterator over the integers of a nested list, with `has_next()`;
  - `SeatManager`: `reserve()` hands out the lowest free seat, `unreserve(seat_number)`
    frees one; `reserve()` raises `IndexError` when no seat is free;
  - `FoodRatings`: `change_rating(food, new_rating)` and `highest_rated(cuisine)`;
  - `Graph`: directed weighted graph with `add_edge((from, to, cost))` and
    `shortest_path(node1, node2)`, which returns `-1` when there is no path;
  - `CalendarTwo`: `book(start, end)` refuses a booking that would triple-book any point;
  - `CircularDeque`: fixed-capacity deque with `insert_front`, `insert_last`,
    `delete_front`, `delete_last` (each returning `False` when it cannot act),
    `front()` and `rear()` (raising `IndexError` when empty), `is_empty()`, `is_full()`
    and `len()`.

Invalid input is reported by exceptions: for example `combination_sum` raises `ValueError`
for non-positive candidates, `min_steps_to_anagram` for strings of different lengths, and
`recover_array` when `sums` does not hold exactly `2**n` values.

## Installation

```
pip install .
```

## Examples

```python
from algosuite.trees import tree_from_level_order, max_depth, tree_to_str
from algosuite.combinatorics import combination_sum, pascal_row
from algosuite.designs import SeatManager, CircularDeque

root = tree_from_level_order([3, 9, 20, None, None, 15, 7])
max_depth(root)               # 3
tree_to_str(root)             # "3(9)(20(15)(7))"

combination_sum([2, 3, 6, 7], 7)   # [[2, 2, 3], [7]]
pascal_row(3)                       # [1, 3, 3, 1]

seats = SeatManager(5)
seats.reserve()               # 1
seats.reserve()               # 2
seats.unreserve(1)
seats.reserve()               # 1

dq = CircularDeque(3)
dq.insert_last(1)
dq.insert_front(2)
dq.front()                    # 2
dq.rear()                     # 1
```

## What it does not do

This is a library only: there is no command-line program, and nothing reads input files
or stores results. Call the functions and classes from your own code.

## Running the tests

```
pip install .[test]
pytest
```