"""Lowest-risk route through a cave of chitons."""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

from ..config import CONFIG
from ..core.risk_map import RiskMap
from ..search.pathfinding import PathNotFoundError, a_star
from ..utils.parsing import parse_digit_grid


logger = logging.getLogger(__name__)


def lowest_total_risk(grid: Sequence[Sequence[int]], tiles: int = 1) -> int:
    """Return the cheapest top-left to bottom-right risk over ``grid``."""

    risk_map = RiskMap(grid, tiles)
    total = a_star(risk_map)
    if total is None:
        raise PathNotFoundError(f"no route to {risk_map.goal} in {risk_map!r}")
    logger.info("Lowest total risk for %r: %d", risk_map, total)
    return total


def solve(text: str, tiles: Optional[int] = None) -> Tuple[int, int]:
    """Return answers for the single cave and the tiled cave."""

    grid = parse_digit_grid(text)
    if tiles is None:
        tiles = CONFIG.search.tiles
    return lowest_total_risk(grid, 1), lowest_total_risk(grid, tiles)


__all__ = ["lowest_total_risk", "solve"]
