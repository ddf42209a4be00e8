"""A* search over a :class:`~advent_grid.core.risk_map.RiskMap`."""

from __future__ import annotations

import logging
from heapq import heappop, heappush
from typing import Dict, List, Optional, Protocol, Sequence, Tuple

from ..core.coord import Coord, Coords


logger = logging.getLogger(__name__)


class CostMap(Protocol):
    """Anything exposing an origin, a goal and a per-cell entry cost."""

    origin: Coord
    goal: Coord

    def cost_at(self, coord: Tuple[int, int]) -> float:
        ...


class PathNotFoundError(RuntimeError):
    """Raised when the goal of a cost map cannot be reached."""


def _heuristic(a: Coord, b: Coord) -> float:
    """Return estimated remaining cost between two points.

    Straight-line distance never exceeds the number of cardinal steps, and
    every step costs at least 1, so the estimate stays admissible.
    """

    return a.distance_to(b)


def _reconstruct(came_from: Dict[Coord, Coord], current: Coord) -> List[Coord]:
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path


def _search(
    cost_map: CostMap, came_from: Optional[Dict[Coord, Coord]] = None
) -> Optional[float]:
    origin = Coord(*cost_map.origin)
    goal = Coord(*cost_map.goal)

    best: List[List[float]] = [
        [float("inf")] * (goal.col + 1) for _ in range(goal.row + 1)
    ]
    best[origin.row][origin.col] = 0

    open_set: List[Tuple[float, Coord]] = []
    heappush(open_set, (_heuristic(origin, goal), origin))
    expanded = 0

    while open_set:
        estimate, current = heappop(open_set)
        g = best[current.row][current.col]

        if current == goal:
            logger.debug(
                "Reached %s with cost %s after expanding %d nodes",
                goal,
                g,
                expanded,
            )
            return g

        # A cheaper entry for this cell was pushed after this one.
        if estimate > g + _heuristic(current, goal):
            continue
        expanded += 1

        for n in Coords.neighbors(goal, current):
            tentative_g = g + cost_map.cost_at(n)
            if tentative_g < best[n.row][n.col]:
                best[n.row][n.col] = tentative_g
                if came_from is not None:
                    came_from[n] = current
                heappush(open_set, (tentative_g + _heuristic(n, goal), n))

    logger.debug("Frontier exhausted after expanding %d nodes; %s unreachable", expanded, goal)
    return None


def a_star(cost_map: CostMap) -> Optional[float]:
    """Return the lowest total cost from ``cost_map.origin`` to its goal.

    Each cardinal step costs the value of the cell being entered; the origin
    itself is free. ``None`` is returned if the goal cannot be reached.
    """

    return _search(cost_map)


def a_star_path(cost_map: CostMap) -> List[Coord]:
    """Return a cheapest path from origin to goal, both ends included.

    An empty list means the goal is unreachable.
    """

    came_from: Dict[Coord, Coord] = {}
    if _search(cost_map, came_from) is None:
        return []
    return _reconstruct(came_from, Coord(*cost_map.goal))


def path_cost(cost_map: CostMap, path: Sequence[Tuple[int, int]]) -> float:
    """Return the cost of walking ``path``, excluding its first cell."""

    return sum(cost_map.cost_at(c) for c in path[1:])


__all__ = ["CostMap", "PathNotFoundError", "a_star", "a_star_path", "path_cost"]
