"""Input helpers for risk grids."""

from .grid_loader import load_grid, parse_grid_lines

__all__ = ["load_grid", "parse_grid_lines"]
