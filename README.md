# contestkit

A library of solutions to classic programming-contest problems. Each problem
is a plain function that takes Python values and returns the answer. Invalid
input, such as a vertex number outside the graph, raises `ValueError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `contestkit.grids`: flood fills and breadth-first searches on grids.
  - `count_painted(rows, cols, start, filled)`: cells painted by a fill that
    spreads in eight directions from `start`.
  - `shortest_exit(cave)`: fewest steps from the goblin (3) to an exit hall (0).
    Crystal halls (2) cannot be entered. Returns `None` when no exit can be
    reached.
  - `spread_lava(grid, threshold)`: floods `*` from the top-left cell through
    digit cells no higher than `threshold`.
- `contestkit.traversal`: an undirected `Graph` (`add_edge`, `neighbours`,
  `vertex_count`, `edge_count`) with `bfs_distances`, `shortest_path` and
  `connected_components`. Built on it, with stations and people numbered
  from 1 where the problem does so: `network_is_connected`,
  `generation_attendance`, `min_bus_lines` (which returns `None` when the
  target cannot be reached) and `count_components`.
- `contestkit.spanning`: `UnionFind` (`find`, `union`, `connected`,
  `component_count`), a frozen `Edge` dataclass with an optional `RoadKind`,
  and `kruskal(vertex_count, edges, key=None)` together with `mst_weight`.
  Built on these are `cup_cost` (every useful railway is taken before any
  highway), `freight_cost`, `map_reduction_cost` and `frog_distance`.
- `contestkit.paths`: `babel_shortest` (Dijkstra over word chains, `None` if
  there is none), `bridge_queries` (whether two vertices are linked by bridges
  alone), `dominators` and `format_dominators`, `mice_escaping` and
  `has_negative_cycle` (Bellman-Ford).
- `contestkit.numbers`: `davinci_decode`, `factorial_divisible`,
  `count_irreducible` (Euler's totient), `marbles`, `modular_fibonacci`
  (the n-th Fibonacci number modulo 2**m), `twin_prime_pair` (pairs whose
  smaller prime is at most twenty million), `pandigital_divisions` and
  `pseudo_random_cycle`.
- `contestkit.dynamic`: `bar_codes`, `bars_sum_possible`, `determine_it`,
  `exact_change`, `lcs_length` and `marriage_calls`.
- `contestkit.search`: backtracking over small spaces: `decode_bad_code`
  (at most `limit` decodings, 100 by default), `count_seatings` (up to eight
  people) and `domino_chain_possible`.
- `contestkit.numeric`: `clock_angle`, `internal_rate_of_return` and
  `solve_equation` (bisection, `None` when no root is found), and the tiered
  tariff functions `consumption_price` and `neighbour_bill`.
- `contestkit.strings`: `SubsequenceIndex` with `span`, `echo_blocks`,
  `count_occurrences` (overlaps included), `genetic_search`, `string_power`
  and `scrolled_length`.
- `contestkit.misc`: greedy methods and simulations: `matchmaking`,
  `dynamic_frog`, `removable_gas_stations`, `largest_square`,
  `rps_tournament`, `count_scarecrows`, `bus_overtime`, `pack_bags`,
  `find_card` and `positive_terms`.

## Example

```python
from contestkit.spanning import Edge, mst_weight
from contestkit.dynamic import lcs_length
from contestkit.strings import string_power
from contestkit.traversal import count_components

edges = [Edge(0, 1, 4), Edge(1, 2, 1), Edge(0, 2, 2)]
print(mst_weight(3, edges))                 # 3
print(lcs_length("abcd", "acbd"))           # 3
print(string_power("ababab"))               # 3
print(count_components(4, [(1, 2), (3, 4)]))  # 2
```

## What it does not do

contestkit has no command-line programs. Nothing reads problem input from
standard input or prints answers in a judge's output format. The one
exception is `format_dominators`, which draws a table as text. To run a
problem on judge input, parse that input yourself and call the function.