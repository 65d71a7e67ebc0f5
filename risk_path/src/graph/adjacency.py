"""Adjacency list view of a risk grid."""

from __future__ import annotations

from numbers import Integral
from typing import List, NamedTuple, Tuple

from risk_path.src.core.errors import IndexOutOfRangeError
from risk_path.src.core.grid import Grid

# (d_row, d_col) in edge order: up, down, left, right
_MOVES: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class Edge(NamedTuple):
    """Directed edge into ``target``; ``weight`` is the risk of entering it."""

    target: int
    weight: int


class AdjacencyGraph:
    """Graph with one vertex per grid cell and edges to orthogonal neighbours.

    Vertices are numbered row-major (``row * cols + col``). The weight of an
    edge is the value of the cell it leads into, so moving A -> B and B -> A
    generally cost different amounts.
    """

    def __init__(self, grid: Grid):
        self.grid = grid
        self._rows, self._cols = grid.shape()
        self._edges: Tuple[Tuple[Edge, ...], ...] = self._build_edges()

    @classmethod
    def build(cls, grid: Grid) -> "AdjacencyGraph":
        """Return the adjacency graph for ``grid``."""
        return cls(grid)

    def _build_edges(self) -> Tuple[Tuple[Edge, ...], ...]:
        rows, cols = self._rows, self._cols
        data = self.grid.data
        edges: List[Tuple[Edge, ...]] = []
        for r in range(rows):
            for c in range(cols):
                out: List[Edge] = []
                for dr, dc in _MOVES:
                    nr, nc = r + dr, c + dc
                    if 0 <= nr < rows and 0 <= nc < cols:
                        out.append(Edge(nr * cols + nc, data[nr][nc]))
                edges.append(tuple(out))
        return tuple(edges)

    # ------------------------------------------------------------------
    def vertex_count(self) -> int:
        return len(self._edges)

    def shape(self) -> Tuple[int, int]:
        return self._rows, self._cols

    def dimension(self) -> int:
        """Return the number of grid rows."""
        return self._rows

    def _check_vertex(self, vertex: int) -> int:
        if isinstance(vertex, bool) or not isinstance(vertex, Integral):
            raise IndexOutOfRangeError(f"Vertex index must be an integer, got {vertex!r}")
        if not 0 <= vertex < len(self._edges):
            raise IndexOutOfRangeError(
                f"Vertex {vertex} outside [0, {len(self._edges)})"
            )
        return int(vertex)

    def edges_of(self, vertex: int) -> Tuple[Edge, ...]:
        """Return the outgoing edges of ``vertex`` in up, down, left, right order."""
        return self._edges[self._check_vertex(vertex)]

    def vertex_index(self, row: int, col: int) -> int:
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexOutOfRangeError(f"Cell ({row}, {col}) outside grid {self.shape()}")
        return row * self._cols + col

    def cell_of(self, vertex: int) -> Tuple[int, int]:
        return divmod(self._check_vertex(vertex), self._cols)

    def source_vertex(self) -> int:
        """Return the top-left vertex."""
        return 0

    def target_vertex(self) -> int:
        """Return the bottom-right vertex."""
        return len(self._edges) - 1

    def __repr__(self) -> str:
        return f"AdjacencyGraph(shape={self.shape()}, vertices={self.vertex_count()})"


__all__ = ["Edge", "AdjacencyGraph"]
