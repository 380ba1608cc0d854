# algolab

Classic algorithms as plain Python functions: searching, recursion,
sorting, Strassen matrix multiplication, greedy choices, dynamic
programming, graph traversal, spanning trees and shortest paths,
N-queens backtracking and string matching. Only the standard library
is used.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Names |
| --- | --- |
| `algolab.searching` | `linear_search`, `binary_search`, `interpolation_search` |
| `algolab.recursion` | `factorial`, `sum_digits`, `to_binary` |
| `algolab.sorting` | `bubble_sort`, `selection_sort`, `merge_sort`, `quick_sort`, `heap_sort` |
| `algolab.matrix` | `strassen_multiply` |
| `algolab.greedy` | `fractional_knapsack`, `job_sequencing`, `Job`, `JobSchedule` |
| `algolab.dynamic` | `fib_naive`, `fib_dp`, `matrix_chain_order`, `knapsack_01` |
| `algolab.graphs` | `dfs`, `bfs`, `prim_mst`, `kruskal_mst`, `dijkstra`, `bellman_ford`, `floyd_warshall`, `NegativeCycleError` |
| `algolab.backtracking` | `solve_n_queens`, `format_board` |
| `algolab.strings` | `naive_search`, `prefix_function`, `kmp_search` |

## Behaviour in brief

- Search functions return the index of the match, or `None` when the key
  is absent. `binary_search` and `interpolation_search` expect ascending
  input; `interpolation_search` works on integers.
- Sorting functions accept any iterable, leave it untouched and return a
  new ascending list. `merge_sort` is stable; `quick_sort` partitions
  around the last element of each range.
- `factorial(n)` gives 1 for any `n` of 1 or less. `sum_digits` keeps the
  sign of a negative number. `to_binary` returns a string of binary
  digits and raises `ValueError` for negative numbers.
- `strassen_multiply(a, b)` multiplies two square matrices of the same
  power-of-two size and raises `ValueError` otherwise.
- `fractional_knapsack(items, capacity)` takes `(value, weight)` pairs and
  returns a float. `job_sequencing(jobs)` takes `Job(id, deadline, profit)`
  records and returns a `JobSchedule` holding the chosen jobs in slot order
  and their `total_profit`.
- `matrix_chain_order(dims)` takes the `k + 1` dimensions of a chain of
  `k` matrices. `knapsack_01(values, weights, capacity)` returns the best
  value of whole items.
- Graph matrices are dense: `matrix[u][v]` is the edge weight, and `0` or
  `None` off the diagonal means no edge. Edge lists hold `(u, v, weight)`
  triples. Unreachable vertices get a distance of `math.inf`.
  `prim_mst` and `kruskal_mst` return `(edges, total_cost)`; `prim_mst`
  raises `ValueError` on a disconnected graph, while `kruskal_mst` returns
  a spanning forest. `bellman_ford` raises `NegativeCycleError` (a
  `ValueError`) when a negative cycle is reachable from the source.
- `solve_n_queens(n)` returns the first placement found as a list of rows
  with 1 marking a queen, or `None`; `format_board` renders it as text.
- `naive_search` and `kmp_search` return every start index of the pattern,
  overlapping matches included.

## Examples

```python
from algolab.searching import binary_search
from algolab.sorting import merge_sort
from algolab.dynamic import knapsack_01
from algolab.strings import kmp_search

merge_sort([5, 2, 9, 1])                         # [1, 2, 5, 9]
binary_search([1, 3, 5, 7], 5)                   # 2
knapsack_01([60, 100, 120], [10, 20, 30], 50)    # 220
kmp_search("abababa", "aba")                     # [0, 2, 4]
```

```python
from algolab.graphs import bellman_ford, NegativeCycleError

try:
    distances = bellman_ford(3, [(0, 1, 4), (1, 2, -2)], 0)   # [0, 4, 2]
except NegativeCycleError:
    distances = None
```

## What it does not do

algolab is a library only. It has no command-line program and does not
prompt for or read input; each algorithm is called as a function and
returns its result. It does not time its functions either: comparing
`fib_naive` with `fib_dp` is left to the caller.