import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt

import pytest

from risk_path.src.core.grid import Grid
from risk_path.src.data.visualization import plot_distance_field, render_grid
from risk_path.src.graph.adjacency import AdjacencyGraph
from risk_path.src.search.dijkstra import INFINITY, shortest_path


def test_render_grid():
    assert render_grid(Grid([[1, 2], [3, 4]])) == "12\n34"


def test_plot_distance_field_saves_image(tmp_path):
    grid = Grid([[1, 1, 6], [1, 3, 8], [2, 1, 3]])
    graph = AdjacencyGraph.build(grid)
    distances = shortest_path(graph, 0, 8)
    out = tmp_path / "plots" / "field.png"
    fig = plot_distance_field(grid, distances, path=out, unreached=INFINITY)
    assert out.exists()
    assert fig is not None
    plt.close(fig)


def test_plot_distance_field_rejects_wrong_length():
    with pytest.raises(ValueError):
        plot_distance_field(Grid([[1, 2]]), [0])


def test_plot_distance_field_close_releases_figure(tmp_path):
    grid = Grid([[1, 2], [3, 4]])
    distances = shortest_path(AdjacencyGraph.build(grid), 0, 3)
    fig = plot_distance_field(grid, distances, path=tmp_path / "f.png", close=True)
    assert not plt.fignum_exists(fig.number)
    kept = plot_distance_field(grid, distances)
    assert plt.fignum_exists(kept.number)
    plt.close(kept)
