# cpalgos

The classic algorithms of competitive programming, together with solutions
to tasks from the CSES problem set. Everything is a plain Python function
that takes ordinary lists, tuples and strings and returns its answer; where
no answer exists, the function raises `ValueError` (or a subclass of it).
The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

### Algorithms

- `cpalgos.search`: `count_queens(n)`, `subsets(items)`,
  `permutations_of(n)` (a generator, lexicographic order),
  `binary_search(seq, x)` (index of `x` in a sorted sequence, the last one
  among equal values) and `first_not_greater(values, x)` (largest value
  at most `x`, or `None`).
- `cpalgos.bits`: `bit_string`, `set_bits`, `bit_set`, `bit_reset`,
  `bit_flip`, `twos_complement` and `mask_subsets`, working on
  fixed-width two's complement values (32 bits unless told otherwise).
- `cpalgos.greedy`: `max_customers(events)` for +1/-1 arrival and
  departure events, and `deadline_score(tasks)` for (duration, deadline)
  pairs.
- `cpalgos.dp`: `min_coins`, `count_coin_ways`, `lis_lengths`,
  `max_path_sums`, `knapsack_table`, `knapsack` and `elevator_rides`.
- `cpalgos.numeric`: `factorial_mods(n, mod)` and
  `nearly_equal(a, b, eps=1e-9)`.
- `cpalgos.traversal`: `dfs_recursive`, `dfs_iterative`, `bfs`,
  `grid_dfs`, `grid_bfs_distances`, `is_connected`, `has_cycle` and
  `is_bipartite` over adjacency lists and grids.
- `cpalgos.graph_dp`: `path_count` in a DAG, `shortest_path_predecessors`
  with `path_to`, `weighted_adjacency`, and the coin problem as a graph
  with `coin_graph` and `coin_distance`.
- `cpalgos.topsort`: `topological_sort(adj, vertices)`, which raises
  `CycleError` when the graph has a cycle.
- `cpalgos.successor`: `successor_table`, `successor(graph, x, k)` by
  binary lifting, and `cycle_length(graph, x)`.
- `cpalgos.shortest_path`: `bellman_ford` (returns distances and
  predecessors), `dijkstra`, `dijkstra_grid` and `floyd_warshall`.
  Unreachable nodes get `math.inf`.
- `cpalgos.mst`: the `Edge` dataclass, `DisjointSet` (union-find with
  `find`, `union` and `size_of`), `kruskal(edges, n)` and
  `prim(adj, n, start=1)`.

### CSES tasks

- `cpalgos.cses.introductory`: `longest_repetition`,
  `beautiful_permutation`, `number_spiral`, `two_knights`,
  `missing_number`, `two_sets`, `increasing_array_moves`, `bit_strings`.
- `cpalgos.cses.sorting`: `towers`, `apartments`, `ferris_wheel`,
  `concert_tickets`, `restaurant_customers`, `distinct_numbers`,
  `movie_festival`, `tasks_and_deadlines`, `sum_of_two`,
  `max_subarray_sum`.
- `cpalgos.cses.dynamic`: `book_shop`, `coin_combinations`,
  `removing_digits`, `grid_paths`, `elevator_rides`, `money_sums`,
  `array_description`.
- `cpalgos.cses.graphs`: `counting_rooms`, `labyrinth`, `monsters`,
  `building_roads`, `message_route`, `building_teams`, `round_trip`,
  `shortest_routes`, `road_construction`.

## Examples

```python
from cpalgos.search import count_queens
from cpalgos.dp import knapsack
from cpalgos.cses.introductory import bit_strings, number_spiral
from cpalgos.topsort import CycleError, topological_sort

count_queens(4)               # 2
knapsack([1, 3, 3, 5], 12)    # True
bit_strings(3)                # 8
number_spiral(2, 3)           # 8

try:
    topological_sort([[], [2], [1]], 2)
except CycleError:
    print("cycle")
```

## Command line

The `cses-solve` command reads a task's input in the judge's format, from a
file given as the second argument or from standard input, and prints the
answer in the judge's format:

```
cses-solve labyrinth maze.txt
echo "ATTCGGGA" | cses-solve repetitions
cses-solve --help
```

The task is named by name or by number:

| name                | number |
|---------------------|--------|
| `repetitions`       | 1069   |
| `towers`            | 1073   |
| `book-shop`         | 1158   |
| `counting-rooms`    | 1192   |
| `labyrinth`         | 1193   |
| `building-roads`    | 1666   |
| `road-construction` | 1676   |

On malformed input or an unreadable file the command prints
`error: ...` to standard error and exits with status 1. The same solving is
available in Python as `cpalgos.cses.cli.solve(problem, text)`, which returns
the answer text.

## Limitations

The command line covers only the seven tasks listed above. The other CSES
tasks, and all of the general algorithms, are available only as Python
functions; they do not read judge-format input or print judge-format output.