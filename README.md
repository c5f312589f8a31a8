# algopack

Classic algorithms and data structures in plain Python, using only the
standard library. Functions take ordinary Python values (lists, strings,
tuples, dicts) and return new values rather than changing their inputs,
except where a method says it works in place.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `algopack.sorting`

Each function takes any iterable and returns a new sorted list:
`bucket_sort` (values must lie in `[0, 1)`, otherwise `ValueError`),
`merge_sort`, `hoare_quick_sort`, `lomuto_quick_sort`, `bubble_sort`,
`insertion_sort`, `selection_sort`, `shell_sort`.
Two rearrangements that are not full sorts:

- `dutch_flag_sort` groups 0s, then 1s, then every other value, in one pass.
- `wave_sort` arranges values so that each even-indexed element is not
  smaller than its neighbours.

### `algopack.arrays`

- `leaders(values)`: elements greater than or equal to everything to their right.
- `rotate_left(values, d)`: rotation by `d` positions to the left.
- `power_set(text)`: all non-empty subsequences of a string, sorted.
- `sorted_union(a, b)`: distinct elements of both inputs, ascending.
- `binary_search(values, target)`: sorts the values and returns the index of
  `target` in that sorted order, or `None`.
- `matrix_multiply(a, b)`: product of two matrices given as lists of rows;
  `ValueError` when the shapes do not fit.
- `is_palindrome(text)`: `True` for a non-empty string that reads the same backwards.

### `algopack.expressions`

`prefix_to_infix(expr)` and `prefix_to_postfix(expr)` convert prefix
expressions of single-character operands and the operators `+ - * /`
(`is_operator` tests for them). Infix output has no brackets. Malformed
expressions raise `ValueError`.

### `algopack.cipher`

`encode(message)` and `decode(message)` apply and undo a fixed substitution
of letters and the space character. Any other character raises `ValueError`.

### `algopack.graphs`

- `WeightedGraph(vertex_count)`: undirected graph on vertices `0..n-1`;
  `add_edge(u, v, weight)` and `shortest_paths(source)` (Dijkstra; unreachable
  vertices get `math.inf`). Negative weights and unknown vertices raise `ValueError`.
- `bfs_levels(adjacency, source)`: breadth-first distance to every reachable node.
- `dfs_subtree_sizes(adjacency, root)`: subtree sizes in the depth-first tree.
- `topological_sort(node_count, edges)`: Kahn's algorithm over nodes
  `1..node_count`; raises `CycleError` when the graph has a cycle.

Adjacency may be a mapping from node to neighbours or a list indexed by node.

### `algopack.dynamic`

- `cut_rod(prices, length)`: best revenue from cutting a rod.
- `fibonacci(n)`: with `fibonacci(0) == 0`.
- `max_knapsack_value(items, capacity)`: best total value of `(weight, value)` items.
- `grid_traveler(rows, cols)`: number of right/down paths across a grid.
- `lcs_length(x, y)` and `shortest_supersequence_length(x, y)`.
- `wildcard_match(text, pattern)`: whole-string match with `?` and `*`.
- `max_subarray(values)`: Kadane's algorithm, returning a `Subarray`
  named tuple `(total, start, end)`; an empty input raises `ValueError`.

### `algopack.number_theory`

`prime_factors`, `prime_factor_counts`, `smallest_prime_factor_table`,
`factorize` (with such a table), `mod_pow`, `mod_inverse` (modulo a prime),
`BinomialTable(size, modulus)` with `ncr(n, r)`, `is_palindrome_number`
and `is_armstrong`.

### `algopack.linked`

- `Node`, `LinkedList` (`push` at the head, in-place `reverse`, iteration)
  and `has_cycle(head)` (Floyd's cycle detection).
- `Stack`, `Queue` and `Deque` containers. Popping or peeking an empty one
  raises `EmptyError`, a subclass of `IndexError`.
- `Polynomial`: terms kept in descending order of exponent; `add_term`,
  `terms()`, `+`, and `str()` giving e.g. `(3.0x^2)+(1.0x^0)` or `empty list`.

### `algopack.trees`

`build_cartesian_tree(values)` builds a max-heap ordered tree of
`TreeNode`s whose in-order walk (`inorder(root)`) gives back the values.

### `algopack.backtracking`

- `solve_maze(maze)`: a path of 1s from the top-left to the bottom-right
  moving only down or right, as a grid of 0s and 1s, or `None`.
- `n_queens(n)`: every solution, as the queen's column in each row.
- `hanoi_moves(disks, source, target, spare)`: the list of `(from, to)` moves.

### `algopack.games`

Rock-paper-scissors (`rps_result`, `computer_choice`, `Outcome`; choices are
`'s'` stone, `'p'` paper, `'z'` scissors) and `CricketGame`, where each
`play_ball(runs)` returns a `Ball` and the game ends as `GameState.WON` or
`GameState.OUT`. Pass a `random.Random` to make the computer's moves repeatable.

### `algopack.banker`

`need_matrix(allocation, maximum)` and
`safe_sequence(allocation, maximum, available)`, which returns the order in
which processes can finish or raises `UnsafeStateError` (its `completed`
attribute lists the processes that could finish).

## Examples

```python
from algopack.sorting import merge_sort
from algopack.dynamic import wildcard_match
from algopack.graphs import topological_sort

merge_sort([10, 5, 30, 15, 7])          # [5, 7, 10, 15, 30]
wildcard_match("adceb", "*a*b")         # True
topological_sort(6, [(6, 3), (6, 1), (5, 1), (5, 2), (3, 4), (4, 2)])
# [5, 6, 3, 1, 4, 2]
```

## Command line

The games can be played in a terminal:

```
algopack-games               # rock-paper-scissors
algopack-games cricket       # the cricket game
algopack-games --seed 42     # repeatable computer moves
```

## What it does not do

Apart from the games, the algorithms have no command-line front end: they
are called from Python. Nothing is stored on disk; all data structures live
in memory only.