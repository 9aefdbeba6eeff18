# algokit

Classic algorithms and data structures in plain Python: sorting routines,
array tricks, singly and doubly linked lists, binary search trees, general
binary-tree problems, a 2-3-4 tree, an adjacency-matrix graph and union-find
structures. It has no runtime dependencies.

## Installation

From a checkout of the project:

```
pip install .
```

## Modules

| Module | Contents |
| --- | --- |
| `algokit.sorting` | `bubble_sort`, `insert_sort`, `insert_sort_with_front`, `merge_sort`, `sort_array`, `merge_down_top_sort`, `min_merge_sort`, `quick_sort`, `quick_sort_3way`, `select_sort`, `sort_colors` |
| `algokit.arrays` | `odd_even_partition`, `binary_search`, `binary_search_recursive`, `single_number`, `find_two_single_numbers`, `MaxHeap`, `find_kth_largest` |
| `algokit.linked_list` | `ListNode`, `DListNode`, `from_values`, `to_values`, `from_values_doubly`, `remove_middle`, `common_values`, `has_cycle`, `get_intersection_node`, `remove_by_ratio`, `remove_last_kth`, `remove_last_kth_doubly`, `reverse_list` |
| `algokit.bst` | `BSTNode`, `ParentLinkedNode`, `find`, `find_with_loop`, `insert`, `insert_with_loop`, `pre_order`, `pre_order_with_loop`, `in_order`, `in_order_with_loop`, `post_order`, `post_order_with_loop`, `post_order_one_stack`, `find_min`, `find_max`, `delete_key`, `delete_key_with_loop`, `delete_min`, `tree_size`, `floor`, `ceiling`, `select`, `rank`, `successor` |
| `algokit.tree_node` | `TreeNode`, `build_tree`, `tree_to_list` |
| `algokit.tree_traversal` | `preorder_traversal`, `inorder_traversal`, `postorder_traversal`, `level_order`, `average_of_levels`, `kth_smallest`, `kth_largest`, `convert_bi_node`, `increasing_bst`, `mirror_tree`, `invert_tree`, `merge_trees`, `sorted_array_to_bst`, `tree2str`, `binary_tree_paths`, `search_bst`, `lowest_common_ancestor`, `lowest_common_ancestor_bst`, `lowest_common_ancestor_by_path` |
| `algokit.tree_checks` | `is_same_tree`, `is_symmetric`, `max_depth`, `is_balanced`, `min_depth`, `has_path_sum`, `is_cousins`, `is_cousins_bfs`, `is_unival_tree`, `is_subtree`, `is_valid_bst`, `leaf_similar`, `find_target`, `sum_of_left_leaves`, `find_mode`, `get_minimum_difference`, `diameter_of_binary_tree`, `find_tilt`, `find_second_minimum_value`, `min_diff_in_bst`, `range_sum_bst`, `sum_root_to_leaf` |
| `algokit.tree234` | `Tree234Node`, `Tree234` |
| `algokit.graph` | `Graph`, `MAX_VERTICES` |
| `algokit.union_find` | `UnionFind`, `RankedUnionFind`, `num_islands`, `longest_consecutive` |

## Notes on behaviour

- Sorting functions work in place. `insert_sort`, `insert_sort_with_front`,
  `select_sort` and `sort_array` also return the list; `merge_sort`,
  `merge_down_top_sort`, `quick_sort`, `quick_sort_3way` and `sort_colors`
  return `None`. `min_merge_sort` sorts in place and returns the "small sum":
  for every element, the sum of strictly smaller elements before it.
- `bubble_sort` performs one exchange pass per position over a shrinking
  window and returns the list. It puts the smallest value first, but it does
  not fully sort every input (for example `[3, 2, 1]` becomes `[1, 3, 2]`).
- The `algokit.bst` traversals are generators of `(key, value)` pairs.
  `delete_key_with_loop` returns `(new_root, found)`. `select` raises
  `IndexError` for a rank outside the tree.
- `remove_last_kth` and `remove_last_kth_doubly` raise `ValueError` when
  `k < 1`; `MaxHeap.poll` raises `IndexError` on an empty heap.
- `Graph` holds at most `max_vertices` vertices (default `MAX_VERTICES`, 20)
  and is undirected unless created with `directed=True`. `dfs`, `bfs` and
  `mst` start at the first vertex added and return labels (or label pairs);
  `topological_sort` raises `ValueError` when the graph has cycles;
  `shortest_paths` returns hop-count distances and predecessors computed by
  Floyd-Warshall.

## Examples

Sorting:

```python
from algokit.sorting import quick_sort, min_merge_sort

nums = [5, 2, 9, 1]
quick_sort(nums)
print(nums)                                  # [1, 2, 5, 9]

print(min_merge_sort([1, 3, 5, 2, 4, 6]))    # the small sum of the sequence
```

Binary trees are built from level-order lists, with `None` for gaps:

```python
from algokit.tree_node import build_tree
from algokit.tree_traversal import inorder_traversal, level_order
from algokit.tree_checks import max_depth, is_valid_bst

root = build_tree([2, 1, 3])
print(inorder_traversal(root))   # [1, 2, 3]
print(level_order(root))         # [[2], [1, 3]]
print(max_depth(root))           # 2
print(is_valid_bst(root))        # True
```

Linked lists convert to and from Python lists:

```python
from algokit.linked_list import from_values, to_values, reverse_list

head = from_values([1, 2, 3])
print(to_values(reverse_list(head)))   # [3, 2, 1]
```

Union-find:

```python
from algokit.union_find import UnionFind, num_islands

uf = UnionFind(5)
uf.union(0, 1)
print(uf.connected(0, 1))   # True

grid = [list("110"), list("010"), list("001")]
print(num_islands(grid))    # 2
```

A 2-3-4 tree:

```python
from algokit.tree234 import Tree234

tree = Tree234()
for key in (50, 40, 60, 30, 70):
    tree.insert(key)
print(tree.keys())          # [30, 40, 50, 60, 70]
print(60 in tree)           # True
```

A graph:

```python
from algokit.graph import Graph

g = Graph()
for label in "ABC":
    g.add_vertex(label)
g.add_edge(0, 1)
g.add_edge(1, 2)
print(g.dfs())              # ['A', 'B', 'C']
```

## What it does not do

algokit is a library only: it has no command-line program and prints
nothing. Every function returns its result to the caller.

## Running the tests

```
pip install -e ".[test]"
pytest
```