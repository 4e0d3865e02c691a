# dskit

A small library of classic data structures and algorithms, written in plain
Python with no third-party dependencies.

## What is inside

- `dskit.sorting` – `bubble_sort`, `quick_sort`, `insertion_sort`,
  `binary_insertion_sort`, `shell_sort`, `selection_sort`, `merge_sort` and
  `heap_sort` (each returns a sorted copy), `top_k` (the `k` largest values,
  largest first, found by quickselect) and a `MaxHeap` with `push`, `pop`,
  `peek` and `len()`.
- `dskit.searching` – `sequential_search` and `binary_search` (index or -1),
  a `LinearProbingTable` (with `insert`, `search` and `probe`, which also
  reports the keys examined) and a `ChainedHashTable`.
- `dskit.matching` – `brute_force_find` and `kmp_find` (first index or -1),
  the failure tables `kmp_next` and `kmp_nextval`, `kmp_find_all`
  (overlapping matches), `find_concatenated_substrings`, `find_last`,
  `count_occurrences` and `find_non_overlapping`.
- `dskit.linked_list` – `LinkedList` and `DoublyLinkedList` with a sentinel
  head, plus `merge_sorted`, `intersect_sorted` and `negatives_first`.
- `dskit.sequential_list` – `SeqList`, an array-backed list with positional
  insert/remove and `remove_value`, and `merge_seq_lists`.
- `dskit.stacks` – `ArrayStack` (fixed capacity), `LinkedStack`,
  `QueueBackedStack`, `StackBackedQueue`, and the exercises
  `brackets_balanced`, `is_palindrome`, `is_valid_pop_sequence`,
  `is_mirrored`, `to_base` and `odd_before_even`.
- `dskit.queues` – `SequentialQueue`, `CircularQueue` and `LinkedQueue`, plus
  `josephus`, `pascal_rows`, `evens_before_odds` and `team_queue`.
- `dskit.expression` – `to_postfix`, `evaluate_postfix`, `evaluate`,
  `build_expression_tree` and `ExprNode` with pre-, in-, post- and
  level-order forms. Numbers in postfix are written as digits followed by
  `#` (`12+3` becomes `12#3#+`); arithmetic is on integers and division
  truncates toward zero.
- `dskit.binary_tree` – `TreeNode` and `BinaryTree`, built from bracket
  notation (`A(B(D,E),C)`), a `#`-marked preorder sequence, or preorder plus
  inorder traversals; with traversals, `find`, `height`, `node_count`,
  `leaves`, `swap_children`, `level_of`, `count_at_level`, `ancestors`,
  `preorder_sequence` and `sibling`.
- `dskit.tree_problems` – trees from level-order arrays
  (`tree_from_level_values`, `from_level_string`, `parse_level_list`),
  `max_width`, `is_full` and `lowest_common_ancestor` over parent links.
- `dskit.huffman` – `HuffmanNode`, `build_huffman_tree`, `huffman_codes`,
  `parse_code_table` (lines like `a:010`) and `decode`.
- `dskit.bst` – `BinarySearchTree` with `insert`, `search`, `delete`,
  `comparisons` and `inorder`, and `binary_search_comparisons`.
- `dskit.table_join` – `join_rows`, an equality join on 1-based columns.
- `dskit.mst` – `DisjointSet` (union by rank, path compression), `kruskal`,
  `kruskal_edge_ids` and `prim`.
- `dskit.shortest_paths` – `dijkstra`, `reconstruct_path`, `floyd_warshall`,
  `shortest_routes` and `hospital_village`, on vertices numbered from 1.
- `dskit.adjacency` – `AdjacencyGraph` (from a matrix or `from_edges`) with
  `neighbors`, `degree`, `dfs`, `bfs`, `all_paths`, `topological_order` and
  `format`, and `queue_topological_sort`.
- `dskit.puzzles` – `maze_path`, `spiral_matrix`, `inversion_count`,
  `sort_by_inversions` and `longest_run`.

## Examples

```python
from dskit.sorting import heap_sort, top_k
from dskit.matching import kmp_find
from dskit.expression import evaluate, to_postfix
from dskit.binary_tree import BinaryTree
from dskit.mst import kruskal

heap_sort([5, 3, 4, 6, 9, 8, 2, 1, 0, 7])   # [0, 1, 2, ..., 9]
top_k([5, 3, 4, 6, 9], 2)                   # [9, 6]
kmp_find("abcabd", "abd")                    # 3
to_postfix("(56-20)/(4+2)")                  # '56#20#-4#2#+/'
evaluate("(56-20)/(4+2)")                    # 6

tree = BinaryTree.from_parenthesized("A(B(D,E),C)")
tree.preorder()                              # ['A', 'B', 'D', 'E', 'C']
tree.height()                                # 3

kruskal(4, [(0, 1, 1), (1, 2, 2), (2, 3, 3), (0, 3, 4)])  # 6
```

## Errors

Failures are raised as exceptions: popping or peeking an empty stack, queue
or heap raises `IndexError`, pushing onto a full fixed-capacity container
raises `OverflowError`, and a missing key in a hash table or search tree
raises `KeyError`. `kruskal`, `kruskal_edge_ids` and `prim` raise
`ValueError` on a disconnected graph, `reconstruct_path` raises `ValueError`
for an unreachable target, and topological sorts raise `ValueError` on a
cycle. `dijkstra` and `floyd_warshall` report unreachable vertices with a
distance of `math.inf`.

## What it does not do

dskit is a library only. It has no command-line programs and does not read
input files; every function works on Python values passed to it.

## Running the tests

```
pip install -e ".[test]"
pytest
```