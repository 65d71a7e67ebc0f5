"""Lowest total risk paths through digit grids."""
