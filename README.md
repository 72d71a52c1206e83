# algosolve

A small library of classic algorithm problems with plain Python solutions.
It has no runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install algosolve
```

To also install what the tests need:

```
pip install "algosolve[test]"
```

## Modules

| Module | What it holds |
| --- | --- |
| `algosolve.arrays` | `three_sum`, `three_sum_closest`, `four_sum`, `max_profit`, `max_area`, `contains_duplicate`, `contains_nearby_duplicate`, `find_numbers`, `jump`, `majority_element`, `merge`, `next_permutation`, `pascal_row`, `pascal_triangle`, `plus_one`, `remove_duplicates`, `remove_element`, `rotate`, `single_number`, `is_valid_sudoku` |
| `algosolve.searching` | `search_range`, `search_rotated`, `search_insert`, `find_median_sorted_arrays`, `my_sqrt` |
| `algosolve.numbers` | `climb_stairs`, `divide`, `is_happy`, `hamming_weight`, `reverse_bits`, `reverse_integer`, `int_to_roman`, and the 32-bit limits `INT_MIN` and `INT_MAX` |
| `algosolve.strings` | `add_binary`, `count_and_say`, `title_to_number`, `convert_to_title`, `str_str`, `group_anagrams`, `is_isomorphic`, `length_of_last_word`, `longest_palindrome`, `length_of_longest_substring`, `multiply`, `is_match`, `convert_zigzag`, `is_palindrome`, `my_atoi`, `find_substring` |
| `algosolve.backtracking` | `combination_sum`, `combination_sum2`, `generate_parenthesis`, `letter_combinations`, `permute`, `permute_unique` |
| `algosolve.linked_lists` | `ListNode`, `build_list`, `list_values`, `add_two_numbers`, `get_intersection_node`, `has_cycle`, `merge_k_lists`, `remove_elements`, `remove_nth_from_end`, `reverse_list`, `reverse_k_group`, `swap_pairs` |
| `algosolve.trees` | `TreeNode`, `build_tree`, `inorder_traversal`, `preorder_traversal`, `postorder_traversal`, `is_balanced`, `sorted_array_to_bst`, `count_nodes`, `invert_tree`, `max_depth`, `min_depth`, `has_path_sum`, `is_same_tree`, `is_symmetric` |
| `algosolve.structures` | `QueueStack`, a stack kept in a single queue |

## Examples

```python
from algosolve.arrays import three_sum, pascal_triangle
from algosolve.strings import is_match, convert_zigzag
from algosolve.numbers import int_to_roman

three_sum([-1, 0, 1, 2, -1, -4])       # [[-1, -1, 2], [-1, 0, 1]]
pascal_triangle(3)                     # [[1], [1, 1], [1, 2, 1]]
is_match("aab", "c*a*b")               # True
convert_zigzag("PAYPALISHIRING", 3)    # "PAHNAPLSIIGYIR"
int_to_roman(1994)                     # "MCMXCIV"
```

Linked lists and trees come with builders, so inputs can be written as lists:

```python
from algosolve.linked_lists import build_list, list_values, reverse_k_group
from algosolve.trees import build_tree, inorder_traversal, max_depth

list_values(reverse_k_group(build_list([1, 2, 3, 4, 5]), 2))  # [2, 1, 4, 3, 5]

root = build_tree([3, 9, 20, None, None, 15, 7])
max_depth(root)            # 3
inorder_traversal(root)    # [9, 3, 15, 20, 7]
```

`build_tree` reads values in level order, with `None` marking a missing child.
`ListNode` and `TreeNode` compare by identity, so `get_intersection_node`
finds a shared node, not merely an equal value.

A stack on top of a queue:

```python
from algosolve.structures import QueueStack

stack = QueueStack()
stack.push(1)
stack.push(2)
stack.top()    # 2
stack.pop()    # 2
stack.empty()  # False
len(stack)     # 1
```

`pop` and `top` on an empty stack raise `IndexError`.

## Behaviour worth knowing

- Functions that the problems define as in-place (`merge`, `next_permutation`,
  `rotate`, `remove_duplicates`, `remove_element`, `plus_one`) change the list
  they are given. The list and tree functions that rearrange nodes
  (`reverse_list`, `reverse_k_group`, `swap_pairs`, `remove_elements`,
  `remove_nth_from_end`, `merge_k_lists`, `invert_tree`) reuse and relink the
  nodes they are given.
- The tree traversals use Morris traversal; they relink nodes while running
  and leave the tree as it was.
- Inputs a problem cannot handle raise `ValueError`, for example an empty list
  to `max_profit` or `majority_element`, fewer than three numbers to
  `three_sum_closest`, a negative `x` to `my_sqrt`, non-digit text to
  `multiply` or `add_binary`, or words of unequal length to `find_substring`.
  `divide` by zero raises `ZeroDivisionError`.
- `divide`, `reverse_integer` and `my_atoi` keep to the signed 32-bit range;
  `hamming_weight` and `reverse_bits` work on 32-bit values.

## What it does not do

This is a library of functions only. It has no command-line tool and reads
and writes no files.

## Running the tests

```
pytest
```