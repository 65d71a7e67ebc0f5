"""Dijkstra shortest path search over risk graphs."""

from __future__ import annotations

import logging
import sys
from numbers import Integral
from typing import Iterable, List, Optional, Protocol, Tuple

from risk_path.src.core.errors import IndexOutOfRangeError
from risk_path.src.core.expander import expand_grid
from risk_path.src.core.grid import Grid
from risk_path.src.graph.adjacency import AdjacencyGraph
from risk_path.src.search.frontier import PriorityQueue

logger = logging.getLogger(__name__)

# sentinel for unreached vertices; no real path total reaches it
INFINITY = sys.maxsize


class WeightedGraph(Protocol):
    def vertex_count(self) -> int: ...

    def edges_of(self, vertex: int) -> Iterable[Tuple[int, int]]: ...


def _check_vertex(graph: WeightedGraph, vertex: int, role: str) -> int:
    count = graph.vertex_count()
    if isinstance(vertex, bool) or not isinstance(vertex, Integral):
        raise IndexOutOfRangeError(f"{role} must be an integer vertex index, got {vertex!r}")
    if not 0 <= vertex < count:
        raise IndexOutOfRangeError(f"{role} vertex {vertex} outside [0, {count})")
    return int(vertex)


def shortest_path(graph: WeightedGraph, source: int, target: int) -> List[int]:
    """Return the distance vector from ``source``, stopping once ``target`` is settled.

    Entries for vertices not reached before the search stops stay at
    :data:`INFINITY`. The entry for ``target`` is final when reachable.
    """

    source = _check_vertex(graph, source, "source")
    target = _check_vertex(graph, target, "target")

    distances = [INFINITY] * graph.vertex_count()
    distances[source] = 0

    frontier: PriorityQueue[Tuple[int, int]] = PriorityQueue(key=lambda entry: entry[1])
    frontier.push((source, 0))
    pops = pushes = stale = 0

    while frontier:
        u, dist_u = frontier.pop()
        pops += 1
        if u == target:
            break
        if dist_u > distances[u]:
            # superseded by a later, shorter push
            stale += 1
            continue
        for v, weight in graph.edges_of(u):
            alt = min(distances[u] + weight, INFINITY)
            if alt < distances[v]:
                distances[v] = alt
                frontier.push((v, alt))
                pushes += 1

    logger.debug(
        "search %d -> %d: %d pops, %d pushes, %d stale, distance %s",
        source,
        target,
        pops,
        pushes,
        stale,
        distances[target] if distances[target] != INFINITY else "unreached",
    )
    return distances


def shortest_distance(
    graph: AdjacencyGraph, source: Optional[int] = None, target: Optional[int] = None
) -> int:
    """Return the lowest total risk from ``source`` to ``target``.

    Defaults to the top-left and bottom-right corners. Returns
    :data:`INFINITY` when ``target`` cannot be reached.
    """

    if source is None:
        source = graph.source_vertex()
    if target is None:
        target = graph.target_vertex()
    return shortest_path(graph, source, target)[target]


def solve_grid(grid: Grid, tile_count: Optional[int] = None) -> int:
    """Return the corner-to-corner risk of ``grid``, expanded first if ``tile_count`` is set."""
    if tile_count is not None:
        grid = expand_grid(grid, tile_count)
    return shortest_distance(AdjacencyGraph.build(grid))


__all__ = ["INFINITY", "shortest_path", "shortest_distance", "solve_grid"]
