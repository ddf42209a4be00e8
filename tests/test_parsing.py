from pathlib import Path

import pytest

from advent_grid.utils.parsing import GridParseError, load_digit_grid, parse_digit_grid


def test_parse_digit_grid_rows_and_values():
    assert parse_digit_grid("123\n456\n") == [[1, 2, 3], [4, 5, 6]]


def test_parse_ignores_blank_lines_and_whitespace():
    assert parse_digit_grid("\n  12 \n\n34\r\n") == [[1, 2], [3, 4]]


def test_parse_rejects_non_digit():
    with pytest.raises(GridParseError, match="line 2, column 3"):
        parse_digit_grid("123\n45x\n")


def test_parse_rejects_ragged_rows():
    with pytest.raises(GridParseError, match="expected 3 cells"):
        parse_digit_grid("123\n45\n")


def test_parse_rejects_empty_input():
    with pytest.raises(GridParseError):
        parse_digit_grid("\n\n")


def test_parse_error_is_value_error():
    assert issubclass(GridParseError, ValueError)


def test_load_digit_grid_reads_file(tmp_path: Path):
    path = tmp_path / "cave.txt"
    path.write_text("19\n91\n", encoding="utf-8")
    assert load_digit_grid(path) == [[1, 9], [9, 1]]


def test_load_missing_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_digit_grid(tmp_path / "missing.txt")
