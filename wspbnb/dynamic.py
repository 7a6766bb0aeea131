"""Solver where a coordinator hands out tasks on request and shares the best bound."""

from __future__ import annotations

import argparse
import os
import sys
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Optional, Sequence

from .problem import InputError, Problem, read_problem
from .solver import BranchAndBound, Solution, generate_tasks

DEPTH = 6
MAX_CITIES = 17
RULE = "-" * 54


class _Coordinator:
    """Hands out tasks with the current bound and collects improvements."""

    def __init__(self, tasks: Iterable[tuple[int, ...]]) -> None:
        self._tasks = iter(tasks)
        self._lock = threading.Lock()
        self.best: Optional[Solution] = None

    def next_task(self) -> Optional[tuple[tuple[int, ...], Optional[int]]]:
        with self._lock:
            task = next(self._tasks, None)
            if task is None:
                return None
            bound = None if self.best is None else self.best.distance
            return task, bound

    def report(self, solution: Solution) -> int:
        with self._lock:
            if self.best is None or solution.distance < self.best.distance:
                self.best = solution
            return self.best.distance


def _work(problem: Problem, coordinator: _Coordinator) -> None:
    search = BranchAndBound(problem, on_improvement=coordinator.report)
    while (assignment := coordinator.next_task()) is not None:
        task, bound = assignment
        if bound is not None and (search.best_distance is None or bound < search.best_distance):
            search.best_distance = bound
        search.search_from(task)


def _tasks(problem: Problem, workers: int, depth: int) -> list[tuple[int, ...]]:
    if workers < 1:
        raise ValueError(f"at least one worker is needed, got {workers}")
    if problem.num_cities > MAX_CITIES:
        raise ValueError(
            f"at most {MAX_CITIES} cities are supported, got {problem.num_cities}"
        )
    return list(generate_tasks(problem.num_cities, depth))


def solve_dynamic(problem: Problem, workers: int = 1, depth: int = DEPTH) -> Solution:
    """Search with ``workers`` workers that request tasks and share improvements."""
    coordinator = _Coordinator(_tasks(problem, workers, depth))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(_work, problem, coordinator) for _ in range(workers)]
        for future in futures:
            future.result()
    if coordinator.best is None:
        raise ValueError("no path found")
    return coordinator.best


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Shortest path from city 0, tasks handed out on request."
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
        task_count = len(_tasks(problem, args.workers, args.depth))
        print(
            f"[MASTER] Starting work assignment with {task_count} tasks and "
            f"{args.workers} active workers with task depth {args.depth}."
        )
        comp_start = time.perf_counter()
        solution = solve_dynamic(problem, args.workers, args.depth)
        comp_time = time.perf_counter() - comp_start
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print("[MASTER] Work assignment complete.")

    path = "".join(f"{city} " for city in solution.path)
    print(RULE)
    print("MPI WSP - Branch and Bound (Parallel, Dynamic Distribution)")
    print(f"Number of Workers: {args.workers}")
    print(f"Number of Cities: {problem.num_cities}")
    print(f"Optimal WSP Distance: {solution.distance}")
    print(f"Best Path: {path}")
    print(f"Maximum computation time: {comp_time:f} s")
    print(f"Elapsed Total Time: {time.perf_counter() - start:f} seconds")
    print(RULE)
    return 0


if __name__ == "__main__":
    sys.exit(main())