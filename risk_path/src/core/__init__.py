"""Core grid data structures and transformations."""

from .errors import IndexOutOfRangeError, InvalidParameterError, MalformedInputError
from .grid import Grid
from .expander import bump, derive_grid, expand_grid

__all__ = [
    "Grid",
    "bump",
    "derive_grid",
    "expand_grid",
    "MalformedInputError",
    "InvalidParameterError",
    "IndexOutOfRangeError",
]
