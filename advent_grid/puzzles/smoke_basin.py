"""Low points and basins of a cave height map."""

from __future__ import annotations

import math
from collections import deque
from typing import List, Sequence, Set

from ..core.coord import Coord, neighbor_coords, surrounding_coords


Grid = Sequence[Sequence[int]]

# Cells at this height belong to no basin.
BASIN_WALL = 9


def low_points(heights: Grid) -> List[Coord]:
    """Return cells lower than every surrounding cell, diagonals included."""

    points: List[Coord] = []
    for row, line in enumerate(heights):
        for col, height in enumerate(line):
            lowest_nearby = min(
                (heights[c.row][c.col] for c in surrounding_coords(heights, (row, col))),
                default=None,
            )
            if lowest_nearby is None or height < lowest_nearby:
                points.append(Coord(row, col))
    return points


def risk_level_sum(heights: Grid) -> int:
    return sum(heights[p.row][p.col] + 1 for p in low_points(heights))


def basin_sizes(heights: Grid) -> List[int]:
    """Return the size of every basin, largest first.

    A basin is a region of cells below :data:`BASIN_WALL` joined by
    cardinal moves.
    """

    seen: Set[Coord] = set()
    sizes: List[int] = []
    for row, line in enumerate(heights):
        for col, height in enumerate(line):
            start = Coord(row, col)
            if height >= BASIN_WALL or start in seen:
                continue
            seen.add(start)
            queue = deque([start])
            size = 0
            while queue:
                current = queue.popleft()
                size += 1
                for n in neighbor_coords(heights, current):
                    if n not in seen and heights[n.row][n.col] < BASIN_WALL:
                        seen.add(n)
                        queue.append(n)
            sizes.append(size)
    sizes.sort(reverse=True)
    return sizes


def largest_basins_product(heights: Grid, count: int = 3) -> int:
    """Multiply together the sizes of the ``count`` largest basins."""

    return math.prod(basin_sizes(heights)[:count])


__all__ = [
    "BASIN_WALL",
    "basin_sizes",
    "largest_basins_product",
    "low_points",
    "risk_level_sum",
]
