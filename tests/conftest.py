# tests/conftest.py
from typing import List

import pytest

from advent_grid.utils.parsing import parse_digit_grid


CAVE_EXAMPLE = """\
1163751742
1381373672
2136511328
3694931569
7463417111
1319128137
1359912421
3125421639
1293138521
2311944581
"""

HEIGHT_EXAMPLE = """\
2199943210
3987894921
9856789892
8767896789
9899965678
"""

OCTOPUS_EXAMPLE = """\
5483143223
2745854711
5264556173
6141336146
6357385478
4167524645
2176841721
6882881134
4846848554
5283751526
"""


@pytest.fixture
def cave_grid() -> List[List[int]]:
    return parse_digit_grid(CAVE_EXAMPLE)


@pytest.fixture
def height_grid() -> List[List[int]]:
    return parse_digit_grid(HEIGHT_EXAMPLE)


@pytest.fixture
def octopus_grid() -> List[List[int]]:
    return parse_digit_grid(OCTOPUS_EXAMPLE)
