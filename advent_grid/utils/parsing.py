"""Helpers for reading puzzle input made of decimal digits."""

from __future__ import annotations

from pathlib import Path
from typing import List


class GridParseError(ValueError):
    """Raised when puzzle text is not a rectangular grid of digits."""


def parse_digit_grid(text: str) -> List[List[int]]:
    """Return ``text`` as rows of single-digit integers.

    Blank lines are ignored and each line is stripped before parsing.
    """

    grid: List[List[int]] = []
    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        row: List[int] = []
        for col_no, ch in enumerate(line, start=1):
            if not ch.isdigit() or not ch.isascii():
                raise GridParseError(
                    f"line {line_no}, column {col_no}: expected a digit, got {ch!r}"
                )
            row.append(int(ch))
        if grid and len(row) != len(grid[0]):
            raise GridParseError(
                f"line {line_no}: expected {len(grid[0])} cells, got {len(row)}"
            )
        grid.append(row)

    if not grid:
        raise GridParseError("input contains no grid rows")
    return grid


def load_digit_grid(path: str | Path) -> List[List[int]]:
    """Read ``path`` and parse it with :func:`parse_digit_grid`."""

    return parse_digit_grid(Path(path).read_text(encoding="utf-8"))


__all__ = ["GridParseError", "load_digit_grid", "parse_digit_grid"]
