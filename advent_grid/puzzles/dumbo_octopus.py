"""Flashing octopus energy simulation."""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Sequence

from ..core.coord import Coord, surrounding_coords


FLASH_THRESHOLD = 9


def step(levels: List[List[int]]) -> int:
    """Advance ``levels`` in place by one step and return the flash count."""

    queue: Deque[Coord] = deque()
    flashes = 0
    for row, line in enumerate(levels):
        for col in range(len(line)):
            line[col] += 1
            if line[col] > FLASH_THRESHOLD:
                flashes += 1
                queue.append(Coord(row, col))

    while queue:
        center = queue.popleft()
        for coord in surrounding_coords(levels, center):
            # Each octopus flashes at most once per step.
            if levels[coord.row][coord.col] > FLASH_THRESHOLD:
                continue
            levels[coord.row][coord.col] += 1
            if levels[coord.row][coord.col] > FLASH_THRESHOLD:
                flashes += 1
                queue.append(coord)

    for line in levels:
        for col, level in enumerate(line):
            if level > FLASH_THRESHOLD:
                line[col] = 0
    return flashes


def count_flashes(levels: Sequence[Sequence[int]], steps: int) -> int:
    """Return total flashes over ``steps`` steps, leaving ``levels`` untouched."""

    grid = [list(line) for line in levels]
    return sum(step(grid) for _ in range(steps))


def first_synchronized_step(levels: Sequence[Sequence[int]]) -> int:
    """Return the first step after which every octopus has just flashed."""

    grid = [list(line) for line in levels]
    cells = sum(len(line) for line in grid)
    steps = 0
    while True:
        steps += 1
        if step(grid) == cells:
            return steps


__all__ = ["FLASH_THRESHOLD", "count_flashes", "first_synchronized_step", "step"]
