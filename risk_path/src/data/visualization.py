"""Visualization utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np

from risk_path.src.core.grid import Grid


def render_grid(grid: Grid) -> str:
    """Return ``grid`` as digit lines, one row per line."""
    return str(grid)


def plot_distance_field(
    grid: Grid,
    distances: Sequence[int],
    path: str | Path | None = None,
    unreached: int | None = None,
    close: bool = False,
):
    """Draw ``distances`` as a heatmap over ``grid`` and return the figure.

    Entries equal to ``unreached`` are masked out. The figure is saved to
    ``path`` when given. The caller owns the figure and should close it with
    ``plt.close(fig)``; pass ``close=True`` to have it closed after saving.
    """

    rows, cols = grid.shape()
    if len(distances) != rows * cols:
        raise ValueError(
            f"Distance vector has {len(distances)} entries, grid has {rows * cols} cells"
        )
    field = np.array(distances, dtype=float).reshape(rows, cols)
    if unreached is not None:
        field = np.ma.masked_where(field == float(unreached), field)

    fig, ax = plt.subplots()
    image = ax.imshow(field, interpolation="nearest", cmap="viridis")
    fig.colorbar(image, ax=ax, label="total risk")
    ax.set_axis_off()
    if path is not None:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(path)
    if close:
        plt.close(fig)
    return fig


__all__ = ["render_grid", "plot_distance_field"]
