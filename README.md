# algokit

A library of classic algorithms in plain Python. It has no dependencies
outside the standard library and supports Python 3.10 and later.

## Installation

```
pip install .
```

## Modules

| Module | Contents |
| --- | --- |
| `algokit.lists` | `ListNode`, `add_two_numbers`, `add_two_numbers_forward`, `remove_nth_from_end`, `merge_nodes` |
| `algokit.trees` | `TreeNode`, `Codec`, `FindElements`, `bst_to_gst`, `deepest_leaves_sum`, `sum_even_grandparent`, `good_nodes`, `average_of_subtree`, `reverse_odd_levels` |
| `algokit.graphs` | `can_finish`, `find_circle_num`, `find_judge`, `find_center`, `valid_path` |
| `algokit.arrays` | `two_sum`, `remove_element`, `max_sub_array`, `contains_duplicate`, `summary_ranges`, `wiggle_sort`, `top_k_frequent`, `group_the_people`, `min_operations`, `count_points`, `build_array`, `get_concatenation`, `garbage_collection`, `find_array`, `minimize_array_value` |
| `algokit.searching` | `find_median_sorted_arrays`, `search_rotated`, `find_peak_element` |
| `algokit.strings` | `is_valid_parentheses`, `count_and_say`, `length_of_last_word`, `min_distance`, `min_window`, `UrlCodec`, `array_strings_are_equal`, `min_partitions` |
| `algokit.backtracking` | `solve_sudoku`, `solve_n_queens`, `total_n_queens`, `get_permutation`, `partition_palindromes` |
| `algokit.matrices` | `rotate`, `pascal_triangle`, `pascal_row`, `max_increase_keeping_skyline`, `largest_overlap`, `SubrectangleQueries` |

## Examples

```python
from algokit.lists import ListNode, add_two_numbers
from algokit.strings import min_distance, is_valid_parentheses
from algokit.matrices import pascal_triangle
from algokit.trees import Codec, TreeNode

total = add_two_numbers(ListNode.from_values([2, 4, 3]), ListNode.from_values([5, 6, 4]))
print(list(total))                          # [7, 0, 8]

print(min_distance("horse", "ros"))         # 3
print(is_valid_parentheses("()[]{}"))       # True
print(pascal_triangle(3))                   # [[1], [1, 1], [1, 2, 1]]

codec = Codec()
print(codec.serialize(TreeNode(1, TreeNode(2))))   # 1,2,null,null,null,
```

## Data structures

- `ListNode(val, next)` is a singly linked list node. `ListNode.from_values(values)`
  builds a list and returns `None` for no values; iterating a node yields the values
  from it to the end.
- `TreeNode(val, left, right)` is a binary tree node.
- `Codec` turns a tree into comma-terminated level-order values, with `null` for
  missing children, and back again. An empty string stands for an empty tree.
- `FindElements(root)` rewrites a tree so that the root holds 0 and the children
  of a node holding `x` hold `2x + 1` and `2x + 2`; `find(target)` says whether
  that value is in the tree.
- `UrlCodec` keeps every URL it encodes. Its short form is the URL itself, and
  `decode` passes unknown strings through unchanged.
- `SubrectangleQueries(rectangle)` copies a grid; `update_subrectangle` overwrites
  a rectangle of it and `get_value` reads a cell, the latest update winning.

## Things to know

Some functions change their input in place: `rotate`, `solve_sudoku`,
`wiggle_sort`, `remove_element` (which also sorts the list), `remove_nth_from_end`,
`bst_to_gst`, `reverse_odd_levels`, and the `FindElements` constructor.

A few results follow fixed conventions:

- `two_sum` returns `[i, j]` with `i > j`, or `[]` when no pair adds up.
- `find_judge` and `find_center` return `-1` when there is no such vertex.
- `search_rotated` returns `-1` when the target is absent.
- `get_permutation(n, k)` gives the first permutation when `k` is outside `1..n!`.
- `min_partitions("")` returns `-1`.
- `is_valid_parentheses` reads any character other than `(`, `[`, `{`, `)` and `]`
  as a closing `}`.
- `solve_sudoku` returns `True` once it has filled the board; when no solution
  exists it returns `False` and leaves the board as given.

Invalid input raises `ValueError`: empty sequences where a value is needed
(`max_sub_array`, `find_peak_element`, `minimize_array_value`,
`find_median_sorted_arrays`), vertices out of range in the graph functions,
a `k` larger than the number of distinct words in `top_k_frequent`, non-square
matrices, a board that is not 9 by 9, a truncated encoded tree, and the like.
`UrlCodec` raises `TypeError` for anything that is not a string.

The package is a library only; it has no command-line interface.

## Running the tests

```
pip install .[test]
pytest
```