import math
import random
from itertools import permutations

import pytest

from wspbnb.problem import Problem
from wspbnb.solver import BranchAndBound, Solution, generate_tasks, solve


def random_problem(n, seed):
    rng = random.Random(seed)
    matrix = [[0] * n for _ in range(n)]
    for i in range(1, n):
        for j in range(i):
            matrix[i][j] = matrix[j][i] = rng.randint(1, 50)
    return Problem(tuple(tuple(r) for r in matrix))


def line_problem(n):
    return Problem(tuple(tuple(abs(i - j) for j in range(n)) for i in range(n)))


def test_line_problem_has_obvious_optimum():
    solution = solve(line_problem(4))
    assert solution == Solution(3, (0, 1, 2, 3))


def test_single_city_solution():
    solution = solve(Problem(((0,),)))
    assert solution.path == (0,)
    assert solution.distance == 0


@pytest.mark.parametrize("seed", range(6))
def test_solution_is_consistent_and_optimal(seed):
    problem = random_problem(6, seed)
    solution = solve(problem)
    assert solution.path[0] == 0
    assert sorted(solution.path) == list(range(problem.num_cities))
    assert problem.path_cost(solution.path) == solution.distance
    for tail in permutations(range(1, problem.num_cities)):
        assert problem.path_cost((0, *tail)) >= solution.distance


def test_generate_tasks_shape_and_order():
    tasks = list(generate_tasks(6, 3))
    assert len(tasks) == math.perm(5, 2)
    assert tasks == sorted(tasks)
    assert len(set(tasks)) == len(tasks)
    for task in tasks:
        assert len(task) == 3
        assert task[0] == 0
        assert len(set(task)) == 3
        assert all(1 <= city < 6 for city in task[1:])


def test_generate_tasks_depth_one_and_too_deep():
    assert list(generate_tasks(4, 1)) == [(0,)]
    assert list(generate_tasks(3, 5)) == []


def test_generate_tasks_rejects_zero_depth():
    with pytest.raises(ValueError):
        list(generate_tasks(4, 0))


def test_tasks_cover_optimum():
    problem = random_problem(7, 42)
    best = min(
        (BranchAndBound(problem).search_from(task) for task in generate_tasks(7, 3)),
        key=lambda s: s.distance,
    )
    assert best.distance == solve(problem).distance


def test_search_from_partial_keeps_prefix():
    problem = random_problem(6, 3)
    result = BranchAndBound(problem).search_from((0, 4))
    assert result.path[:2] == (0, 4)
    assert result.distance >= solve(problem).distance
    assert problem.path_cost(result.path) == result.distance


def test_tight_initial_bound_finds_nothing():
    problem = random_problem(6, 1)
    optimum = solve(problem).distance
    search = BranchAndBound(problem, best_distance=optimum)
    assert search.search_from((0,)) is None
    assert search.best_distance == optimum


def test_improvements_strictly_decrease():
    problem = random_problem(7, 9)
    seen = []
    search = BranchAndBound(problem, on_improvement=lambda s: seen.append(s) or None)
    result = search.search_from((0,))
    assert seen[-1] == result
    distances = [s.distance for s in seen]
    assert all(a > b for a, b in zip(distances, distances[1:]))


def test_hook_returning_lower_bound_stops_further_improvements():
    problem = random_problem(7, 9)
    seen = []

    def hook(solution):
        seen.append(solution)
        return 0

    search = BranchAndBound(problem, on_improvement=hook)
    search.search_from((0,))
    assert len(seen) == 1
    assert search.best_distance == 0


@pytest.mark.parametrize("partial", [(), (0, 0), (0, 9)])
def test_invalid_partial_rejected(partial):
    with pytest.raises(ValueError):
        BranchAndBound(line_problem(4)).search_from(partial)