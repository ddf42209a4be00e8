"""cProfile helpers for measuring search performance."""

from __future__ import annotations

import cProfile
import logging
import pstats
import time
from pathlib import Path
from typing import Optional, Tuple

from ..search.pathfinding import CostMap, a_star


logger = logging.getLogger(__name__)


def profile_search(
    cost_map: CostMap,
    out_path: str | Path = "search.prof",
) -> Tuple[Optional[int], pstats.Stats]:
    """Run :func:`a_star` on ``cost_map`` under cProfile.

    Parameters
    ----------
    cost_map:
        Map to search.
    out_path:
        File to write cProfile data to.

    Returns
    -------
    tuple
        The search result and the profiling statistics for the run.
    """

    path = Path(out_path)
    profiler = cProfile.Profile()
    start = time.perf_counter()
    profiler.enable()
    result = a_star(cost_map)
    profiler.disable()
    elapsed = time.perf_counter() - start
    profiler.dump_stats(str(path))
    logger.info("Profiled search in %.3fs; stats written to %s", elapsed, path)
    return result, pstats.Stats(profiler)


__all__ = ["profile_search"]
