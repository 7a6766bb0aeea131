"""Problem definition for the wandering salesman problem: a symmetric distance matrix."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Sequence

MAX_CITIES = 19


class InputError(ValueError):
    """Raised when a problem description cannot be read."""


@dataclass(frozen=True)
class Problem:
    """A set of cities with a symmetric matrix of integer distances."""

    matrix: tuple[tuple[int, ...], ...]

    def __post_init__(self) -> None:
        rows = tuple(tuple(row) for row in self.matrix)
        if not rows:
            raise InputError("a problem needs at least one city")
        if any(len(row) != len(rows) for row in rows):
            raise InputError("the distance matrix must be square")
        object.__setattr__(self, "matrix", rows)

    @property
    def num_cities(self) -> int:
        return len(self.matrix)

    def distance(self, a: int, b: int) -> int:
        """Return the distance between cities ``a`` and ``b``."""
        return self.matrix[a][b]

    def path_cost(self, path: Sequence[int]) -> int:
        """Return the total length of walking ``path`` in order (no return leg)."""
        return sum(self.matrix[a][b] for a, b in zip(path, path[1:]))

    def format_matrix(self) -> str:
        """Render the full matrix, one row per line, each value followed by a space."""
        return "\n".join("".join(f"{value} " for value in row) for row in self.matrix)


def _integers(tokens: Iterable[str]) -> list[int]:
    values = []
    for token in tokens:
        try:
            values.append(int(token))
        except ValueError:
            raise InputError(f"not an integer: {token!r}") from None
    return values


def parse_problem(text: str) -> Problem:
    """Parse a city count followed by the lower triangle of the distance matrix."""
    tokens = text.split()
    if not tokens:
        raise InputError("input is empty")
    count, *rest = _integers(tokens)
    if count < 1:
        raise InputError(f"number of cities must be positive, got {count}")
    if count > MAX_CITIES:
        raise InputError(f"at most {MAX_CITIES} cities are supported, got {count}")
    needed = count * (count - 1) // 2
    if len(rest) < needed:
        raise InputError(f"expected {needed} distances, got {len(rest)}")

    matrix = [[0] * count for _ in range(count)]
    values = iter(rest)
    for i in range(1, count):
        for j in range(i):
            value = next(values)
            matrix[i][j] = value
            matrix[j][i] = value
    return Problem(tuple(tuple(row) for row in matrix))


def read_problem(path: str | PathLike[str]) -> Problem:
    """Read and parse a problem file."""
    with open(path, encoding="utf-8") as handle:
        return parse_problem(handle.read())