from risk_path.src.core.expander import expand_grid
from risk_path.src.core.grid import Grid
from risk_path.src.graph.adjacency import AdjacencyGraph
from risk_path.src.search.dijkstra import shortest_distance, solve_grid


def _bump_once(v):
    return 1 if v == 9 else v + 1


def _manual_tiling(data, count):
    """Concatenate tiles by hand, bumping each tile tr + tc times."""
    rows = []
    for tr in range(count):
        for row in data:
            out = []
            for tc in range(count):
                for v in row:
                    for _ in range(tr + tc):
                        v = _bump_once(v)
                    out.append(v)
            rows.append(out)
    return rows


def test_expanded_solve_matches_manual_tiling():
    data = [[1, 1, 6], [1, 3, 8], [2, 1, 3]]
    expanded = expand_grid(Grid(data), 5)
    manual = Grid(_manual_tiling(data, 5))
    assert expanded == manual
    assert shortest_distance(AdjacencyGraph.build(expanded)) == shortest_distance(
        AdjacencyGraph.build(manual)
    )
    assert solve_grid(Grid(data), tile_count=5) == shortest_distance(AdjacencyGraph.build(manual))


def test_expanded_uniform_nine_grid():
    # every tile wraps 9 -> 1 -> 2 ..., so costs grow along the diagonal
    data = [[9, 9], [9, 9]]
    manual = Grid(_manual_tiling(data, 3))
    assert expand_grid(Grid(data), 3) == manual
    assert solve_grid(Grid(data), tile_count=3) == shortest_distance(AdjacencyGraph.build(manual))


def test_expanded_single_cell_grid():
    expanded = expand_grid(Grid([[8]]), 5)
    # cell values depend only on the anti-diagonal, each entered once: 9+1+...+7
    graph = AdjacencyGraph.build(expanded)
    assert shortest_distance(graph) == 37
    assert solve_grid(Grid([[8]]), tile_count=5) == 37
