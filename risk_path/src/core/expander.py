"""Grid expansion by tiling bumped copies of a risk grid."""

from __future__ import annotations

import numpy as np

from .errors import InvalidParameterError, MalformedInputError
from .grid import Grid

MIN_TILE_COUNT = 2
# safety cap only, no numeric limit behind it
MAX_TILE_COUNT = 70
MIN_RISK = 1
MAX_RISK = 9


def bump(value: int, steps: int) -> int:
    """Return ``value`` incremented ``steps`` times, wrapping from 9 back to 1."""
    return ((value - 1 + steps) % MAX_RISK) + 1


def _check_risk_levels(grid: Grid) -> None:
    for r, row in enumerate(grid.data):
        for c, v in enumerate(row):
            if not MIN_RISK <= v <= MAX_RISK:
                raise MalformedInputError(
                    f"Cell ({r}, {c}) holds risk level {v}, expected {MIN_RISK} to {MAX_RISK}"
                )


def derive_grid(grid: Grid) -> Grid:
    """Return a copy of ``grid`` with every risk level bumped once."""
    _check_risk_levels(grid)
    return Grid([[bump(v, 1) for v in row] for row in grid.data])


def _check_tile_count(tile_count: int) -> None:
    if isinstance(tile_count, bool) or not isinstance(tile_count, int):
        raise InvalidParameterError(
            f"tile_count must be an integer, got {type(tile_count).__name__}"
        )
    if not MIN_TILE_COUNT <= tile_count <= MAX_TILE_COUNT:
        raise InvalidParameterError(
            f"tile_count must be between {MIN_TILE_COUNT} and {MAX_TILE_COUNT}, "
            f"got {tile_count}"
        )


def expand_grid(grid: Grid, tile_count: int) -> Grid:
    """Return ``grid`` tiled ``tile_count`` x ``tile_count`` times.

    Parameters
    ----------
    grid:
        Source :class:`Grid`; every value must be a risk level from 1 to 9.
    tile_count:
        Number of tiles along each axis, between 2 and 70 inclusive.

    The tile at tile-row ``tr`` and tile-column ``tc`` holds every source
    value bumped ``tr + tc`` times. Each output cell depends only on its
    source value and tile coordinates, so the whole grid is computed in one
    vectorised pass.
    """

    _check_tile_count(tile_count)
    _check_risk_levels(grid)

    rows, cols = grid.shape()
    tiled = np.tile(grid.to_array(), (tile_count, tile_count))
    tile_offsets = np.add.outer(np.arange(tile_count), np.arange(tile_count))
    offsets = np.repeat(np.repeat(tile_offsets, rows, axis=0), cols, axis=1)
    expanded = (tiled - 1 + offsets) % MAX_RISK + 1
    return Grid.from_array(expanded)


__all__ = [
    "MIN_TILE_COUNT",
    "MAX_TILE_COUNT",
    "bump",
    "derive_grid",
    "expand_grid",
]
