# wspbnb

Exact solutions to the wandering salesman problem (WSP): find the shortest
path that starts at city 0 and visits every other city exactly once. Unlike
the travelling salesman problem, the path does not return to its start.

The search is depth-first branch and bound. It drops any partial path whose
cost already meets or exceeds the best complete path found so far.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Input format

The first number in the input file is the number of cities `n` (from 1 to 19).
The lower triangle of a symmetric distance matrix follows it, row by row. Row
`i`, for `i` from 1 to `n-1`, holds the distances from city `i` to cities
`0 .. i-1`. Any whitespace may separate the numbers. Numbers after the last
one needed are ignored.

```
4
10
15 35
20 25 30
```

A file that is empty, holds something other than integers, gives a city count
outside 1..19, or has too few distances is rejected with
`wspbnb.problem.InputError` (a subclass of `ValueError`).

## Command-line use

Each of the three strategies has its own command. All of them read the
problem file given with `-i`.

```
wspbnb-serial -i cities.txt
wspbnb-round-robin -i cities.txt -n 4 -d 5
wspbnb-dynamic -i cities.txt -n 4 -d 6
```

- `wspbnb-serial` runs a single branch-and-bound search from city 0 and
  reports the processor time it took.
- `wspbnb-round-robin` lists every partial path of depth `-d` (default 5)
  starting at city 0 and deals them to `-n` workers in turn (default: the
  number of CPUs). Each worker keeps its own bound and does not share it; the
  best result across the workers is reported.
- `wspbnb-dynamic` has a coordinator hand out partial paths of depth `-d`
  (default 6) to `-n` workers as they ask for them. Each task carries the
  current best distance, and workers report every improvement to the
  coordinator, which answers with the global best. This command accepts at
  most 17 cities.

Each command prints the number of cities, the distance matrix, the best
distance, the best path and timing information. On a bad input file or bad
option values it prints an error to standard error and exits with status 1.

## Library use

```python
from wspbnb.problem import parse_problem
from wspbnb.solver import solve

problem = parse_problem("4\n10\n15 35\n20 25 30\n")
solution = solve(problem)
print(solution.distance, solution.path)   # 65 (0, 1, 3, 2)
```

`wspbnb.problem.read_problem(path)` reads the same format from a file. A
`Problem` gives `num_cities`, `distance(a, b)`, `path_cost(path)` and
`format_matrix()`.

The multi-worker strategies are functions as well:

```python
from wspbnb.round_robin import solve_round_robin
from wspbnb.dynamic import solve_dynamic

solve_round_robin(problem, workers=4, depth=5)
solve_dynamic(problem, workers=4, depth=6)
```

`wspbnb.solver.generate_tasks(num_cities, depth)` yields the partial paths of
a given depth that start at city 0, in lexicographic order.
`wspbnb.solver.BranchAndBound(problem, best_distance, on_improvement)`
continues a search from any partial path with `search_from(partial)`;
`on_improvement` is called with each better `Solution` and may return a
smaller distance to tighten the bound.

`wspbnb.serial.format_report(problem, solution, elapsed)` renders the summary
that `wspbnb-serial` prints.

## Limits

The workers of `wspbnb-round-robin` and `wspbnb-dynamic` are threads inside
one Python process. The package does not spread work across several
processes or machines, and it reports computation and total time only; it
does not measure time spent passing messages between workers.