# algoshelf

A shelf of well-known algorithms written in plain Python, with no runtime
dependencies. Each module covers one family of problems. Functions take
ordinary Python values (lists, strings, integers) and return new values;
inputs are not modified. Invalid arguments raise `ValueError`, `KeyError`
or `IndexError`.

| Module | What it holds |
| --- | --- |
| `algoshelf.sorting` | `bubble_sort`, `bucket_sort`, `comb_sort`, `heap_sort`, `insertion_sort`, `merge`, `merge_sort`, `pigeonhole_sort`, `quick_sort`, `radix_sort`, `selection_sort`, `shell_sort` |
| `algoshelf.searching` | `binary_search` (index or `None`) and `linear_search` (all matching indices) |
| `algoshelf.graph` | `DirectedGraph` (tracks in-degrees) and `WeightedGraph` (non-negative integer weights, parallel edges allowed) |
| `algoshelf.traversal` | `bfs` (a generator), `ListGraph`, `dfs_path` over an adjacency matrix, and `dijkstra` |
| `algoshelf.trees` | `Node`, `BinarySearchTree`, `inorder`, `preorder`, `postorder`, `level_order`, `iterative_inorder`, `zigzag_level_order`, `height`, `from_level_values`, `render` |
| `algoshelf.number_theory` | `totient`, `totient_table`, `fibonacci` and `fibonacci_sum` (fast doubling), `mod_pow`, `factorial_mod`, `segmented_primes`, `factorial_divisor_count`, `cube_free_index`, `divisible_by_41`, `count_bits`, `count_operations`, `increasing_pair_sum`, `good_sets_count` |
| `algoshelf.dynamic` | `min_coins`, `knapsack`, `longest_common_subsequence`, `is_subset_sum`, `egg_drop` |
| `algoshelf.backtracking` | `count_n_queens` and `solve_sudoku` (any perfect-square side) |
| `algoshelf.greedy` | `Job`, `job_sequence` and `greedy_change` |
| `algoshelf.puzzles` | `tower_of_hanoi`, `random_enemies`, `place_bishops`, `monty_hall`, `running_character_counts` |
| `algoshelf.hashtable` | `LinearProbingTable`, a fixed-size open-addressing hash table, and `TableFullError` |

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Sorting and searching:

```python
from algoshelf.sorting import merge_sort, quick_sort
from algoshelf.searching import binary_search

quick_sort([10, 7, 8, 9, 1, 5])                                # [1, 5, 7, 8, 9, 10]
binary_search(merge_sort([3, 41, 52, 26, 38, 57, 9, 49]), 26)  # 2
```

Dynamic programming and greedy change:

```python
from algoshelf.dynamic import knapsack, is_subset_sum
from algoshelf.greedy import greedy_change

knapsack(50, [10, 20, 30], [60, 100, 120])   # 220
is_subset_sum([3, 34, 4, 12, 5, 2], 9)       # True
greedy_change(153)                           # [100, 50, 2, 1]
```

Graphs:

```python
from algoshelf.graph import WeightedGraph
from algoshelf.traversal import dijkstra

g = WeightedGraph()
g.connect("a", "b", 4)
g.connect("a", "c", 1)
g.connect("c", "b", 2)
dijkstra(g, "a")   # {'b': 'c', 'c': 'a'}: each reached vertex mapped to its predecessor
```

Trees:

```python
from algoshelf.trees import BinarySearchTree

tree = BinarySearchTree([15, 10, 20, 17, 25, 8, 12])
12 in tree           # True
tree.inorder()       # [8, 10, 12, 15, 17, 20, 25]
```

Backtracking:

```python
from algoshelf.backtracking import count_n_queens

count_n_queens(8)    # 92
```

A linear-probing hash table:

```python
from algoshelf.hashtable import LinearProbingTable

table = LinearProbingTable()
table.insert(3, 30)
table.search(3)      # 30
table.remove(3)
table.search(3)      # raises KeyError
```

## Command line

The `algoshelf-tree` command builds a binary tree from values given in level
order (the children of position i are at 2i+1 and 2i+2) and prints its
in-order, pre-order and post-order traversals, one per line. A value of `-`
is printed as a blank.

```
$ algoshelf-tree A B C D E F G
DBEAFCG
ABDECFG
DEBFGCA
```

## What it does not do

This is a library. Apart from `algoshelf-tree` there are no commands and no
interactive prompts or menus; results are returned as values, not printed.
`LinearProbingTable` never grows: once all its slots are taken, inserting a
new key raises `TableFullError`. The puzzles return results (moves, squares,
counts) and do not draw boards.