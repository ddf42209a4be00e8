"""Grid coordinates and bounded neighborhood iteration."""

from __future__ import annotations

import math
from typing import List, NamedTuple, Sequence, Tuple, TypeVar


T = TypeVar("T")


class Coord(NamedTuple):
    """Row/column address of a grid cell."""

    row: int
    col: int

    def distance_to(self, other: Tuple[int, int]) -> float:
        """Return the straight-line distance between ``self`` and ``other``."""

        return math.hypot(self.row - other[0], self.col - other[1])


ORIGIN = Coord(0, 0)


def _bounding_box(max_coord: Coord, center: Coord) -> Tuple[Coord, Coord]:
    """Return the 3x3 block around ``center`` clipped to ``[0, max_coord]``."""

    if max_coord.row < 0 or max_coord.col < 0:
        raise ValueError(f"max coordinate must be non-negative, got {max_coord}")
    if not (0 <= center.row <= max_coord.row and 0 <= center.col <= max_coord.col):
        raise ValueError(f"center {center} lies outside grid bounded by {max_coord}")

    top_left = Coord(max(center.row - 1, 0), max(center.col - 1, 0))
    bottom_right = Coord(
        min(center.row + 1, max_coord.row),
        min(center.col + 1, max_coord.col),
    )
    return top_left, bottom_right


class Coords:
    """Forward-only iterator over the cells around a centre coordinate.

    Instances are built with :meth:`surrounding` (diagonals included) or
    :meth:`neighbors` (cardinal only). Cells are produced in row-major order
    and an exhausted instance stays exhausted.
    """

    def __init__(self, coords: List[Coord]) -> None:
        self._coords = coords
        self._index = 0

    @classmethod
    def surrounding(
        cls, max_coord: Tuple[int, int], center: Tuple[int, int]
    ) -> "Coords":
        """Return every cell of the clipped 3x3 block except ``center``."""

        max_coord, center = Coord(*max_coord), Coord(*center)
        top_left, bottom_right = _bounding_box(max_coord, center)
        return cls(
            [
                Coord(row, col)
                for row in range(top_left.row, bottom_right.row + 1)
                for col in range(top_left.col, bottom_right.col + 1)
                if row != center.row or col != center.col
            ]
        )

    @classmethod
    def neighbors(
        cls, max_coord: Tuple[int, int], center: Tuple[int, int]
    ) -> "Coords":
        """Return the cells sharing an edge with ``center``."""

        max_coord, center = Coord(*max_coord), Coord(*center)
        top_left, bottom_right = _bounding_box(max_coord, center)
        return cls(
            [
                Coord(row, col)
                for row in range(top_left.row, bottom_right.row + 1)
                for col in range(top_left.col, bottom_right.col + 1)
                if (row != center.row) != (col != center.col)
            ]
        )

    def __iter__(self) -> "Coords":
        return self

    def __next__(self) -> Coord:
        if self._index >= len(self._coords):
            raise StopIteration
        coord = self._coords[self._index]
        self._index += 1
        return coord


# ----------------------------------------------------------------------
# Grid helpers
# ----------------------------------------------------------------------
def grid_max(grid: Sequence[Sequence[T]]) -> Coord:
    """Return the largest valid coordinate of a rectangular ``grid``."""

    if not grid or not grid[0]:
        raise ValueError("grid must have at least one row and one column")
    return Coord(len(grid) - 1, len(grid[0]) - 1)


def surrounding_coords(grid: Sequence[Sequence[T]], center: Tuple[int, int]) -> Coords:
    return Coords.surrounding(grid_max(grid), center)


def neighbor_coords(grid: Sequence[Sequence[T]], center: Tuple[int, int]) -> Coords:
    return Coords.neighbors(grid_max(grid), center)


__all__ = [
    "Coord",
    "Coords",
    "ORIGIN",
    "grid_max",
    "neighbor_coords",
    "surrounding_coords",
]
