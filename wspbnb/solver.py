"""Depth-first branch-and-bound search for the shortest open tour from city 0."""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import permutations
from typing import Callable, Iterator, Optional, Sequence

from .problem import Problem


@dataclass(frozen=True)
class Solution:
    """A complete path and its total distance."""

    distance: int
    path: tuple[int, ...]


ImprovementHook = Callable[[Solution], Optional[int]]


class BranchAndBound:
    """Search that extends partial paths, pruning any branch no shorter than the best.

    ``best_distance`` seeds the bound (``None`` means unbounded). Whenever a
    better complete path is found, ``on_improvement`` is called with it; if it
    returns a smaller distance, that becomes the new bound.
    """

    def __init__(
        self,
        problem: Problem,
        best_distance: Optional[int] = None,
        on_improvement: Optional[ImprovementHook] = None,
    ) -> None:
        self.problem = problem
        self.best_distance = best_distance
        self.best: Optional[Solution] = None
        self._on_improvement = on_improvement

    def _bound(self) -> float:
        return math.inf if self.best_distance is None else self.best_distance

    def search_from(self, partial: Sequence[int]) -> Optional[Solution]:
        """Explore every completion of ``partial`` and return the best found so far."""
        path = list(partial)
        n = self.problem.num_cities
        if not path:
            raise ValueError("a partial path needs at least one city")
        if any(not 0 <= city < n for city in path):
            raise ValueError(f"cities must lie in 0..{n - 1}")
        if len(set(path)) != len(path):
            raise ValueError("a partial path may not repeat a city")
        self._search(path, set(path), self.problem.path_cost(path))
        return self.best

    def _search(self, path: list[int], visited: set[int], cost: int) -> None:
        n = self.problem.num_cities
        if len(path) == n:
            if cost < self._bound():
                self._improve(cost, path)
            return

        row = self.problem.matrix[path[-1]]
        for city in range(n):
            if city in visited:
                continue
            new_cost = cost + row[city]
            if new_cost >= self._bound():
                continue
            visited.add(city)
            path.append(city)
            self._search(path, visited, new_cost)
            path.pop()
            visited.remove(city)

    def _improve(self, cost: int, path: list[int]) -> None:
        self.best_distance = cost
        self.best = Solution(cost, tuple(path))
        if self._on_improvement is not None:
            updated = self._on_improvement(self.best)
            if updated is not None and updated < cost:
                self.best_distance = updated


def generate_tasks(num_cities: int, depth: int) -> Iterator[tuple[int, ...]]:
    """Yield every partial path of ``depth`` cities starting at city 0, in order."""
    if depth < 1:
        raise ValueError("task depth must be at least 1")
    for tail in permutations(range(1, num_cities), depth - 1):
        yield (0, *tail)


def solve(problem: Problem) -> Solution:
    """Return the shortest path that starts at city 0 and visits every city once."""
    best = BranchAndBound(problem).search_from((0,))
    if best is None:
        raise ValueError("no path found")
    return best