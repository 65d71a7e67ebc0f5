"""Shortest path search over risk graphs."""

from .frontier import PriorityQueue
from .dijkstra import INFINITY, shortest_distance, shortest_path, solve_grid

__all__ = [
    "PriorityQueue",
    "INFINITY",
    "shortest_path",
    "shortest_distance",
    "solve_grid",
]
