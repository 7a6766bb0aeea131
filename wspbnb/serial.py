"""Command-line solver running a single branch-and-bound search."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Optional, Sequence

from .problem import InputError, Problem, read_problem
from .solver import Solution, solve

RULE = "-" * 54
START_CITY = 0


def format_report(problem: Problem, solution: Solution, elapsed: float) -> str:
    """Render the result summary printed after a serial run."""
    path = "".join(f"{city} " for city in solution.path)
    lines = [
        RULE,
        "WSP - Branch and Bound Results (Serial)",
        f"Start city: {START_CITY}",
        f"Best distance: {solution.distance}",
        f"Best path: {path}",
        f"Time taken: {elapsed:f} seconds",
        RULE,
    ]
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Shortest path through all cities, starting at city 0."
    )
    parser.add_argument("-i", dest="input", required=True, help="problem file")
    args = parser.parse_args(argv)

    try:
        problem = read_problem(args.input)
    except (OSError, InputError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"Number of cities: {problem.num_cities}")
    print("Distance matrix:")
    print(problem.format_matrix())

    start = time.process_time()
    solution = solve(problem)
    elapsed = time.process_time() - start

    print(format_report(problem, solution, elapsed))
    return 0


if __name__ == "__main__":
    sys.exit(main())