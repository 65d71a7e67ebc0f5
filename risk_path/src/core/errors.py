"""Exceptions raised by the risk path core."""

from __future__ import annotations

__all__ = [
    "MalformedInputError",
    "InvalidParameterError",
    "IndexOutOfRangeError",
]


class MalformedInputError(ValueError):
    """Raised when grid input is empty, ragged or holds non-digit values."""


class InvalidParameterError(ValueError):
    """Raised when an operation receives a parameter outside its valid range."""


class IndexOutOfRangeError(IndexError):
    """Raised when a vertex index falls outside ``[0, vertex_count)``."""
