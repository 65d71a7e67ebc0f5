"""Graph views derived from risk grids."""

from .adjacency import AdjacencyGraph, Edge

__all__ = ["AdjacencyGraph", "Edge"]
