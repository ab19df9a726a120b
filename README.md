# algocollection

A small library of classic algorithms, written as plain Python functions and
classes. It is meant for study and for small everyday jobs. It uses only the
standard library.

## Installing

```
pip install .
```

## Modules

### `algocollection.linear`

- `solve_3x3(equations)` solves three equations `a*x + b*y + c*z = d` with
  Cramer's rule. Each equation is given as `(a, b, c, d)`. It returns
  `(x, y, z)`. It raises `ValueError` for malformed input or a singular system.

### `algocollection.strings`

- `is_k_palindrome(text, k)` returns `True` when deleting at most `k`
  characters makes `text` a palindrome.

### `algocollection.partitions`

- `sum_combinations(n)` yields, in lexicographic order, every non-decreasing
  tuple of positive integers that sums to `n`. `n = 0` yields `()`. A negative
  `n` yields nothing.

### `algocollection.subarray`

- `max_subarray_sum(values)` finds the largest sum of a non-empty contiguous
  run, by divide and conquer.
- `kadane(values)` returns `(total, start, end)` for the best run, with
  inclusive bounds. When every value is negative, the run is the single
  largest value.
- `max_sum_rectangle(matrix)` returns a `Rectangle` with the fields `top`,
  `left`, `bottom`, `right` (all inclusive) and `total`.

Empty input raises `ValueError`.

### `algocollection.greedy`

- `egyptian_fraction(numerator, denominator)` splits a fraction in `[0, 1)`
  into distinct unit fractions, working greedily. It returns their
  denominators in increasing order.
- `fractional_knapsack(weights, prices, capacity)` ranks items by
  whole-number unit price. A part of an item earns that unit price for each
  unit of weight taken.

### `algocollection.heap`

- `MaxPriorityQueue(values=())` is a binary max-heap. It offers:
  - `insert(value)`
  - `pop()`, which returns the largest value and raises `IndexError` when the
    queue is empty.
  - `update(position, value)`, which replaces the value at a heap position.
  - `len()`

### `algocollection.sorting`

- The sorts `bubble_sort`, `insertion_sort`, `selection_sort`, `heap_sort`,
  `merge_sort`, `ternary_merge_sort` and `quick_sort` each return a sorted copy
  of any iterable.
- `time_sort(size, sorter=sorted, seed=None)` fills a list with `size` random
  values in `1..size` and sorts it with `sorter`. It returns the seconds
  elapsed, counting both the fill and the sort.

### `algocollection.graph_list`

This module works on graphs given as edge lists, with vertices numbered
`0 .. vertex_count - 1`.

- `bfs(vertex_count, edges)` searches an undirected graph from vertex 0. It
  returns a `BfsResult` with `distance`, `previous` and `has_cycle`.
- `dfs(vertex_count, edges)` searches a directed graph. It returns a
  `DfsResult` with `previous`, `discovered` and `finished` times. Times start
  at 1.
- `bellman_ford`, `dag_shortest_paths` and `dijkstra` compute shortest paths
  from vertex 0 over `(u, v, weight)` edges. Each returns `ShortestPaths`
  with `distance`, `previous` and `has_negative_cycle`. `dijkstra` rejects
  negative weights.
- `kruskal(vertex_count, edges)` returns the edges of a minimum spanning
  forest in the order they are chosen.
- `prim(vertex_count, edges)` returns `(parent, vertex, weight)` for each
  vertex except 0. It raises `ValueError` if the graph is not connected.

### `algocollection.graph_matrix_search`

This module searches graphs given as adjacency matrices. A non-zero entry
`matrix[u][v]` is an edge from `u` to `v`.

- `letter_bfs(matrix)` and `letter_dfs(matrix)` return the visiting order from
  `A` as letters. They accept at most 26 vertices.
- `bfs_tree(matrix, source)` returns a `BfsTree`.
- `dfs_times(matrix)` returns a `DfsTimes`.
- `adjacency_listing(matrix)` maps each vertex letter to the letters of its
  neighbours.
- `cut_edges(matrix)` lists the entries `(u, v)` whose removal alone leaves
  some vertex unreachable from vertex 0.
- `find_cycle(matrix)` returns the vertices of the first directed cycle the
  depth-first search meets, or `None` if there is no cycle.

### `algocollection.graph_matrix_paths`

This module computes paths and spanning trees on weighted adjacency matrices.
A zero entry means there is no edge.

- `bellman_ford(matrix)` and `dijkstra(matrix)` return `ShortestPaths` from
  vertex 0.
- `floyd_warshall(matrix)` returns `AllPairs` with `distance` and `next_hop`.
  Its `path(u, v)` method rebuilds a route, or returns `None` when there is no
  path.
- `kruskal(vertex_count, edges)`, `prim(matrix)` and `prim_heap(matrix)` return
  a `SpanningTree` with `edges` and `total`.

## Example

```python
from algocollection.sorting import merge_sort
from algocollection.subarray import kadane
from algocollection.heap import MaxPriorityQueue

print(merge_sort([5, 2, 9, 1]))     # [1, 2, 5, 9]
print(kadane([2, 3, -1, -3, 3]))    # (5, 0, 1)

queue = MaxPriorityQueue([4, 10, 7])
print(queue.pop(), len(queue))      # 10 2
```

## What it does not do

This is a library only. It has no command-line program, and it reads no
input from the keyboard or from files. You build graphs, matrices and
equations in Python and pass them to the functions. Results come back as
Python values; nothing is printed.

## Running the tests

```
pip install .[test]
pytest
```