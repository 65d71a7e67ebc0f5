"""Risk grid data structure."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Sequence, Tuple

import numpy as np

from .errors import MalformedInputError


def _check_value(value: Any, row: int, col: int) -> int:
    # bool is an int subclass but never a valid risk level
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise MalformedInputError(
            f"Cell ({row}, {col}) holds non-integer value {value!r}"
        )
    if value < 0:
        raise MalformedInputError(f"Cell ({row}, {col}) holds negative value {value}")
    return int(value)


@dataclass(frozen=True, init=False, repr=False)
class Grid:
    """Immutable 2D grid of non-negative integer risk levels.

    Rows are stored as tuples so neither the grid nor the rows it hands out
    can be changed after construction.
    """

    data: Tuple[Tuple[int, ...], ...]

    def __init__(self, data: Iterable[Sequence[int]]) -> None:
        rows = [list(r) for r in data]
        if not rows:
            raise MalformedInputError("Grid cannot be empty")
        row_len = len(rows[0])
        if row_len == 0:
            raise MalformedInputError("Grid rows cannot be empty")
        checked: List[Tuple[int, ...]] = []
        for r, row in enumerate(rows):
            if len(row) != row_len:
                raise MalformedInputError(
                    f"All rows must have the same length: row {r} has {len(row)} "
                    f"values, expected {row_len}"
                )
            checked.append(tuple(_check_value(v, r, c) for c, v in enumerate(row)))
        object.__setattr__(self, "data", tuple(checked))

    @property
    def rows(self) -> int:
        return len(self.data)

    @property
    def cols(self) -> int:
        return len(self.data[0])

    def shape(self) -> Tuple[int, int]:
        """Return the grid shape as (rows, cols)."""
        return self.rows, self.cols

    def get(self, row: int, col: int, default: Any | None = None) -> Any:
        """Return the value at ``row``, ``col`` or ``default`` if out of bounds."""
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return self.data[row][col]
        return default

    def to_list(self) -> List[List[int]]:
        """Return a mutable deep list copy of the grid values."""
        return [list(row) for row in self.data]

    def to_array(self) -> np.ndarray:
        """Return the grid as a new ``numpy`` integer array."""
        return np.array(self.data, dtype=np.int64)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "Grid":
        """Build a grid from a 2D ``numpy`` array."""
        if arr.ndim != 2:
            raise MalformedInputError(f"Expected a 2D array, got {arr.ndim} dimensions")
        return cls(arr.tolist())

    def __str__(self) -> str:
        return "\n".join("".join(str(v) for v in row) for row in self.data)

    def __repr__(self) -> str:
        return f"Grid(shape={self.shape()})"
