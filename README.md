# algoprobs

Classic algorithm problems written as small, plain Python functions,
together with the basic data structures they work on: binary trees,
general trees, singly linked lists, a queue made of two stacks and a
stack that tracks its minimum.

The package has no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Contents

| Module | What it provides |
| --- | --- |
| `algoprobs.array_utils` | `partition(data, start=0, end=None, rng=None)`: in-place partition around a randomly chosen pivot, returning the pivot's final index |
| `algoprobs.binary_tree` | `BinaryTreeNode` (`value`, `left`, `right`), `connect_tree_nodes`, `describe_node`, `print_tree`, `iter_preorder` |
| `algoprobs.linked_list` | `ListNode` (`value`, `next`), `from_values`, `iter_values`, `add_to_tail`, `remove_node`, `values_reversed`, `connect_list_nodes`, `describe_node`, `print_list` |
| `algoprobs.tree` | `TreeNode` (`value`, `children`, `add_child`), `connect_tree_nodes`, `describe_node`, `print_tree` |
| `algoprobs.queues` | `TwoStackQueue` (`append_tail`, `delete_head`, `len()`), `StackWithMin` (`push`, `pop`, `top`, `min`, `len()`) |
| `algoprobs.searching` | `find_in_matrix`, `min_in_rotated`, `spiral_order` |
| `algoprobs.strings` | `replace_blank`, `permutations`, `min_number`, `first_not_repeating_char` |
| `algoprobs.fibonacci` | `fibonacci_recursive`, `fibonacci_iterative`, `fibonacci_matrix`, `Matrix2x2` (supports `a @ b`), `matrix_power` |
| `algoprobs.numeric` | `count_ones_by_mask`, `count_ones_by_clearing`, `power`, `numbers_up_to_digits`, `count_digit_one_brute`, `count_digit_one`, `is_ugly`, `ugly_number_brute`, `ugly_number` |
| `algoprobs.arrays` | `reorder`, `reorder_even_first`, `is_pop_order`, `verify_postorder_of_bst`, `more_than_half_partition`, `more_than_half_vote`, `least_numbers_partition`, `least_numbers_heap`, `max_subarray_sum` |
| `algoprobs.tree_algos` | `has_subtree`, `mirror_recursively`, `mirror_iteratively`, `level_order`, `construct` (from pre-order and in-order walks) |
| `algoprobs.tree_paths` | `find_paths`, `convert_to_linked_list`, `iter_forward`, `iter_backward` |
| `algoprobs.complex_list` | `ComplexListNode` (`value`, `next`, `sibling`), `build_node`, `describe_list`, `clone` |

## Examples

```python
from algoprobs.searching import find_in_matrix, spiral_order
from algoprobs.fibonacci import fibonacci_matrix
from algoprobs.strings import replace_blank, min_number
from algoprobs.queues import StackWithMin
from algoprobs.binary_tree import BinaryTreeNode, connect_tree_nodes
from algoprobs.tree_algos import level_order

matrix = [[1, 2, 8, 9], [2, 4, 9, 12], [4, 7, 10, 13], [6, 8, 11, 15]]
find_in_matrix(matrix, 7)          # True
spiral_order([[1, 2], [3, 4]])     # [1, 2, 4, 3]

fibonacci_matrix(40)               # 102334155
replace_blank("hello world")       # "hello%20world"
min_number([3, 32, 321])           # "321323"

stack = StackWithMin()
stack.push(3)
stack.push(2)
stack.min()                        # 2

root = BinaryTreeNode(10)
connect_tree_nodes(root, BinaryTreeNode(6), BinaryTreeNode(14))
level_order(root)                  # [10, 6, 14]
```

## Behaviour worth knowing

- Functions that reshape a structure work in place: `partition`,
  `reorder`, `reorder_even_first`, `mirror_recursively`,
  `mirror_iteratively` and `convert_to_linked_list` (which reuses each
  node's `left` and `right` as previous and next links). `clone` returns a
  deep copy and leaves the original list as it was.
- `add_to_tail` and `remove_node` return the (possibly new) head of the list.
- `describe_node` and `describe_list` return strings; `print_tree` and
  `print_list` write to the given file, or to standard output by default.
- `permutations` and `numbers_up_to_digits` are generators.
  `permutations` yields repeated arrangements when characters repeat.
- `count_ones_by_mask` and `count_ones_by_clearing` treat the number as a
  32-bit two's-complement word, so `-1` has 32 set bits.
- `has_subtree` compares node values with a small tolerance.

## Errors

Invalid input is reported by raising an exception:

- `ValueError` from `partition` (empty data or bad bounds),
  `connect_list_nodes` (no current node), `min_in_rotated` (empty input),
  `spiral_order` (ragged rows), `power` (zero to a negative power),
  `is_ugly` (non-positive number), the Fibonacci functions (negative index;
  `matrix_power` needs a positive one), `more_than_half_partition` and
  `more_than_half_vote` (empty input or no majority), `max_subarray_sum`
  (empty input) and `construct` (walks that do not belong to one tree).
- `IndexError` from `TwoStackQueue.delete_head` and from
  `StackWithMin.pop`, `top` and `min` when the container is empty.

Some functions instead return a neutral value, as their docstrings state:
`is_pop_order` and `verify_postorder_of_bst` give `False` for empty input,
`least_numbers_partition` and `least_numbers_heap` give `[]` for an
out-of-range `k`, `ugly_number` and `ugly_number_brute` give `0` for an
index below 1, `first_not_repeating_char` gives `None` when every character
repeats, and `construct` gives `None` for empty walks.

## What it does not do

This is a library only: it has no command-line program, and nothing in it
reads input files or stores data.