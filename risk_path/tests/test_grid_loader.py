from pathlib import Path

import pytest

from risk_path.src.core.errors import MalformedInputError
from risk_path.src.data.grid_loader import load_grid, parse_grid_lines


def test_parse_grid_lines():
    grid = parse_grid_lines(["116", "138", "213"])
    assert grid.to_list() == [[1, 1, 6], [1, 3, 8], [2, 1, 3]]


def test_parse_skips_blank_lines_and_whitespace():
    grid = parse_grid_lines(["  12\n", "\n", "34  \n", ""])
    assert grid.to_list() == [[1, 2], [3, 4]]


def test_parse_rejects_non_digits():
    with pytest.raises(MalformedInputError, match="Line 2"):
        parse_grid_lines(["12", "3x"])


def test_parse_rejects_ragged_rows():
    with pytest.raises(MalformedInputError, match="expected 3 digits"):
        parse_grid_lines(["123", "45"])


def test_parse_rejects_empty_input():
    with pytest.raises(MalformedInputError):
        parse_grid_lines(["", "   "])


def test_load_grid_from_file():
    grid = load_grid(Path(__file__).with_name("sample_cavern.txt"))
    assert grid.shape() == (10, 10)
    assert grid.get(0, 0) == 1
    assert grid.get(9, 9) == 1


def test_load_grid_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_grid(tmp_path / "missing.txt")
