# algosuite

A library of classic algorithms and data-structure routines. Each one is a
plain function on Python values: lists, strings, nested lists for grids, and
small node classes for linked lists and binary trees. It has no dependencies
beyond the standard library.

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

| Module | Contents |
| --- | --- |
| `algosuite.linked_lists` | `ListNode`, `build_list`, `list_values`, `add_two_numbers`, `remove_nth_from_end`, `merge_two_lists`, `merge_k_lists`, `reverse_k_group`, `rotate_right`, `partition_list`, `has_cycle`, `detect_cycle`, `get_intersection_node`, `reverse_list`, `middle_node`, `delete_middle` |
| `algosuite.design_list` | `LinkedList`, an index-addressable singly linked list with `get`, `add_at_head`, `add_at_tail`, `add_at_index`, `delete_at_index`, `len()` and iteration |
| `algosuite.numbers` | `reverse_integer`, `is_palindrome_number`, `climb_stairs`, `pascal_triangle`, `fib`, `tribonacci` |
| `algosuite.words` | `is_anagram`, `is_valid_word` |
| `algosuite.trees` | `TreeNode`, `build_tree`, `inorder_traversal`, `preorder_traversal`, `is_same_tree`, `level_order`, `zigzag_level_order`, `level_order_bottom`, `max_depth`, `right_side_view`, `count_nodes`, `leaf_similar` |
| `algosuite.tree_queries` | `LinkedTreeNode`, `connect`, `is_valid_bst`, `sorted_array_to_bst`, `has_path_sum`, `path_sum`, `sum_numbers`, `lowest_common_ancestor_bst`, `lowest_common_ancestor`, `binary_tree_paths`, `sum_of_left_leaves`, `find_mode`, `smallest_from_leaf` |
| `algosuite.dynamic` | `edit_distance`, `rob`, `coin_change`, `count_subsets_with_sum`, `can_partition`, `find_target_sum_ways`, `longest_palindrome_subseq`, `count_coin_combinations`, `delete_distance`, `find_length`, `longest_common_subsequence` |
| `algosuite.graphs` | `can_finish`, `find_order` (topological order of courses), `find_cheapest_price` (cheapest route with at most `k` stops) |
| `algosuite.arrays` | `search_rotated`, `binary_search`, `jump`, `can_jump`, `max_subarray`, `merge_intervals`, `insert_interval`, `sort_colors`, `merge_sorted`, `find_relative_ranks`, `find_max_length`, `subarray_sum`, `min_eating_speed`, `valid_mountain_array`, `ship_within_days`, `find_subarrays`, `count_days`, `maximum_length` |
| `algosuite.stacks` | `is_valid_parentheses`, `longest_valid_parentheses`, `find_132_pattern`, `daily_temperatures`, `replace_elements`, `final_prices`, `max_sum_min_product`, `sub_array_ranges` |
| `algosuite.grids` | `rotate`, `set_zeroes`, `num_islands`, `island_perimeter`, `update_matrix`, `flood_fill`, `oranges_rotting`, `shortest_path_binary_matrix` |
| `algosuite.backtracking` | `generate_parenthesis`, `combination_sum`, `combination_sum2`, `permute`, `subsets`, `subsets_with_dup`, `partition_palindromes`, `valid_strings` |

## Examples

```python
from algosuite.linked_lists import build_list, list_values, reverse_list
from algosuite.trees import build_tree, level_order
from algosuite.dynamic import edit_distance
from algosuite.backtracking import generate_parenthesis

list_values(reverse_list(build_list([1, 2, 3])))        # [3, 2, 1]
level_order(build_tree([3, 9, 20, None, None, 15, 7]))  # [[3], [9, 20], [15, 7]]
edit_distance("horse", "ros")                           # 3
generate_parenthesis(2)                                 # ['(())', '()()']
```

```python
from algosuite.design_list import LinkedList

items = LinkedList()
items.add_at_head(1)
items.add_at_tail(3)
items.add_at_index(1, 2)
items.get(1)   # 2
items.get(7)   # -1, out of range
len(items)     # 3
list(items)    # [1, 2, 3]
```

## Conventions

- `ListNode`, `TreeNode` and `LinkedTreeNode` compare by identity. Build them
  with `build_list` (values in order) and `build_tree` (level order, `None`
  for a missing child); read a list back with `list_values`.
- Linked-list functions relink the nodes they are given rather than copying
  them, and return the new head.
- `sort_colors`, `merge_sorted`, `rotate` and `set_zeroes` change their
  argument in place and return `None`. `flood_fill` changes the image in place
  and also returns it. `update_matrix` and `oranges_rotting` leave their input
  untouched.
- Where an input cannot be handled (an empty sequence for `max_subarray` or
  `maximum_length`, a non-square matrix for `rotate`, a negative `n` for
  `fib`, and the like) a `ValueError` is raised. `LinkedList` instead ignores
  out-of-range writes and answers out-of-range reads with `-1`.

## What it does not do

This is a library only: there is no command-line tool, and nothing reads
input files or stores results.