"""Reading risk grids from digit text."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from risk_path.src.core.errors import MalformedInputError
from risk_path.src.core.grid import Grid


def parse_grid_lines(lines: Iterable[str]) -> Grid:
    """Parse lines of single-digit risk levels into a :class:`Grid`.

    Surrounding whitespace is stripped and blank lines are skipped. Every
    remaining character must be a decimal digit.
    """

    rows: List[List[int]] = []
    width = None
    for line_no, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue
        for col, ch in enumerate(line):
            if ch not in "0123456789":
                raise MalformedInputError(
                    f"Line {line_no}: non-digit character {ch!r} at column {col + 1}"
                )
        if width is None:
            width = len(line)
        elif len(line) != width:
            raise MalformedInputError(
                f"Line {line_no}: expected {width} digits, found {len(line)}"
            )
        rows.append([int(ch) for ch in line])
    if not rows:
        raise MalformedInputError("Input contains no grid rows")
    return Grid(rows)


def load_grid(path: str | Path) -> Grid:
    """Load a risk grid from the text file at ``path``."""
    with open(Path(path), "r", encoding="utf-8") as f:
        return parse_grid_lines(f)


__all__ = ["parse_grid_lines", "load_grid"]
