"""Solver that deals partial paths to workers in turn; workers never share bounds."""

from __future__ import annotations

import argparse
import os
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Sequence

from .problem import InputError, Problem, read_problem
from .solver import BranchAndBound, Solution, generate_tasks

DEPTH = 5
RULE = "-" * 54


def _run_share(problem: Problem, tasks: Sequence[tuple[int, ...]]) -> Optional[Solution]:
    search = BranchAndBound(problem)
    for task in tasks:
        search.search_from(task)
    return search.best


def _split_tasks(
    problem: Problem, workers: int, depth: int
) -> list[list[tuple[int, ...]]]:
    if workers < 1:
        raise ValueError(f"at least one worker is needed, got {workers}")
    tasks = list(generate_tasks(problem.num_cities, depth))
    return [tasks[worker::workers] for worker in range(workers)]


def solve_round_robin(problem: Problem, workers: int = 1, depth: int = DEPTH) -> Solution:
    """Search with ``workers`` independent searches, task ``k`` going to worker ``k % workers``.

    Each worker keeps its own bound across its tasks; the overall result is the
    best of the workers, the lowest-numbered worker winning a tie.
    """
    shares = _split_tasks(problem, workers, depth)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(_run_share, [problem] * workers, shares))
    found = [solution for solution in results if solution is not None]
    if not found:
        raise ValueError("no path found")
    return min(found, key=lambda solution: solution.distance)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Shortest path from city 0, tasks dealt to workers in turn."
    )
    parser.add_argument("-i", dest="input", required=True, help="problem file")
    parser.add_argument(
        "-n", dest="workers", type=int, default=os.cpu_count() or 1, help="number of workers"
    )
    parser.add_argument("-d", dest="depth", type=int, default=DEPTH, help="task depth")
    args = parser.parse_args(argv)

    start = time.perf_counter()
    try:
        problem = read_problem(args.input)
    except (OSError, InputError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"Number of cities: {problem.num_cities}")
    print("Distance matrix:")
    print(problem.format_matrix())

    try:
        task_count = sum(len(share) for share in _split_tasks(problem, args.workers, args.depth))
        print(
            f"Total task count: {task_count}, depth: {args.depth} , "
            f"average tasks per processors: {task_count // args.workers}"
        )
        comp_start = time.perf_counter()
        solution = solve_round_robin(problem, args.workers, args.depth)
        comp_time = time.perf_counter() - comp_start
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    path = "".join(f"{city} " for city in solution.path)
    print(RULE)
    print("WSP - Branch and Bound (Parallel, Round Robin)")
    print(f"Number of processes: {args.workers}")
    print(f"Number of cities: {problem.num_cities}")
    print(f"Global best distance: {solution.distance}")
    print(f"Best path: {path}")
    print(f"Maximum computation time = {comp_time:f} sec")
    print(f"Elapsed time: {time.perf_counter() - start:f} seconds")
    print(RULE)
    return 0


if __name__ == "__main__":
    sys.exit(main())