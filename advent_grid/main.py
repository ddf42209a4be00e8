"""Command line entry point for the grid puzzle solvers."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from dotenv import load_dotenv

from .config import CONFIG_PATH, Config, LoggingConfig, load_config
from .core.risk_map import RiskMap
from .puzzles import dumbo_octopus, smoke_basin
from .puzzles.chiton import lowest_total_risk
from .search.pathfinding import a_star_path
from .utils.parsing import GridParseError, load_digit_grid
from .utils.profiling import profile_search


logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "ADVENT_GRID_CONFIG"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(cfg: LoggingConfig, level_override: Optional[str] = None) -> None:
    """Set up root logging from ``cfg`` and apply per-module levels."""

    log_level_str = (level_override or cfg.global_level).upper()
    numeric_level = getattr(logging, log_level_str, logging.INFO)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, force=True)

    for module_name, level_str in cfg.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


# ----------------------------------------------------------------------
# Sub-commands
# ----------------------------------------------------------------------
def _chiton(grid: List[List[int]], args: argparse.Namespace, cfg: Config) -> None:
    tiles = args.tiles or cfg.search.tiles
    print(f"part1: {lowest_total_risk(grid, 1)}")
    print(f"part2: {lowest_total_risk(grid, tiles)}")
    if args.path:
        path = a_star_path(RiskMap(grid, tiles))
        print(f"path length: {len(path)}")


def _smoke_basin(grid: List[List[int]], args: argparse.Namespace, cfg: Config) -> None:
    print(f"part1: {smoke_basin.risk_level_sum(grid)}")
    print(f"part2: {smoke_basin.largest_basins_product(grid, cfg.basin.count)}")


def _octopus(grid: List[List[int]], args: argparse.Namespace, cfg: Config) -> None:
    steps = args.steps or cfg.octopus.steps
    print(f"part1: {dumbo_octopus.count_flashes(grid, steps)}")
    print(f"part2: {dumbo_octopus.first_synchronized_step(grid)}")


def _profile(grid: List[List[int]], args: argparse.Namespace, cfg: Config) -> None:
    tiles = args.tiles or cfg.search.tiles
    result, stats = profile_search(RiskMap(grid, tiles), args.out)
    print(f"result: {result}")
    stats.sort_stats("cumulative").print_stats(10)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="advent-grid", description=__doc__)
    parser.add_argument("--config", type=Path, default=None, help="YAML configuration file")
    parser.add_argument("--log-level", default=None, help="override the configured log level")
    sub = parser.add_subparsers(dest="command", required=True)

    chiton = sub.add_parser("chiton", help="lowest total risk through the cave")
    chiton.add_argument("input", type=Path)
    chiton.add_argument("--tiles", type=_positive_int, default=None)
    chiton.add_argument("--path", action="store_true", help="also report the path length")
    chiton.set_defaults(handler=_chiton)

    basin = sub.add_parser("smoke-basin", help="low points and basins of a height map")
    basin.add_argument("input", type=Path)
    basin.set_defaults(handler=_smoke_basin)

    octopus = sub.add_parser("octopus", help="flashing octopus simulation")
    octopus.add_argument("input", type=Path)
    octopus.add_argument("--steps", type=_positive_int, default=None)
    octopus.set_defaults(handler=_octopus)

    profile = sub.add_parser("profile", help="run the chiton search under cProfile")
    profile.add_argument("input", type=Path)
    profile.add_argument("--tiles", type=_positive_int, default=None)
    profile.add_argument("--out", type=Path, default=Path("search.prof"))
    profile.set_defaults(handler=_profile)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    env_path = Path(".env")
    if env_path.exists():
        load_dotenv(env_path)

    args = build_parser().parse_args(argv)
    config_path = args.config or os.getenv(CONFIG_ENV_VAR) or CONFIG_PATH
    cfg = load_config(config_path)
    configure_logging(cfg.logging, args.log_level)

    try:
        grid = load_digit_grid(args.input)
    except (OSError, GridParseError) as exc:
        logger.error("Could not read puzzle input %s: %s", args.input, exc)
        return 1

    args.handler(grid, args, cfg)
    return 0


if __name__ == "__main__":
    sys.exit(main())
