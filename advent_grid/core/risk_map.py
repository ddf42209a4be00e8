"""Traversal costs over a base grid repeated into a larger virtual grid."""

from __future__ import annotations

from typing import Sequence, Tuple

from .coord import ORIGIN, Coord


MAX_RISK = 9


def _wrap(cost: int) -> int:
    """Wrap ``cost`` past the ceiling as ``cost % 10 + 1``.

    The result stays in ``1..MAX_RISK`` only while ``cost`` is at most 18,
    i.e. for base risks 1..9 with fewer than 6 tiles per axis.
    """

    if cost > MAX_RISK:
        return cost % 10 + 1
    return cost


class RiskMap:
    """Cost lookup over ``tiles x tiles`` copies of ``grid``.

    Each copy is shifted by its row-tile plus column-tile index, so the
    virtual grid is never built. Only the goal coordinate is stored.
    """

    origin: Coord = ORIGIN

    def __init__(self, grid: Sequence[Sequence[int]], tiles: int = 1) -> None:
        if tiles < 1:
            raise ValueError(f"tiles must be at least 1, got {tiles}")
        if not grid or not grid[0]:
            raise ValueError("grid must have at least one row and one column")

        self._grid = grid
        self.rows = len(grid)
        self.cols = len(grid[0])
        self.tiles = tiles
        self.goal = Coord(self.rows * tiles - 1, self.cols * tiles - 1)

    @property
    def size(self) -> Tuple[int, int]:
        """Return ``(rows, cols)`` of the virtual grid."""

        return (self.goal.row + 1, self.goal.col + 1)

    def cost_at(self, coord: Tuple[int, int]) -> int:
        """Return the cost of entering ``coord``."""

        row, col = coord
        if not (0 <= row <= self.goal.row and 0 <= col <= self.goal.col):
            raise IndexError(f"{coord} outside risk map bounded by {self.goal}")

        shift = row // self.rows + col // self.cols
        return _wrap(self._grid[row % self.rows][col % self.cols] + shift)

    __getitem__ = cost_at

    def __repr__(self) -> str:
        return f"RiskMap(rows={self.rows}, cols={self.cols}, tiles={self.tiles})"


__all__ = ["MAX_RISK", "RiskMap"]
