"""Branch-and-bound solvers for the wandering salesman problem: serial, round-robin and dynamic."""

__version__ = "0.1.0"
__all__ = ["problem", "solver", "serial", "round_robin", "dynamic"]