"""Simple configuration loader for advent_grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class SearchConfig:
    """Settings for the chiton risk search."""

    tiles: int = 5


@dataclass
class OctopusConfig:
    """Settings for the octopus flash simulation."""

    steps: int = 100


@dataclass
class BasinConfig:
    """Settings for the smoke basin puzzle."""

    count: int = 3


@dataclass
class LoggingConfig:
    """Root and per-module log levels."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    search: SearchConfig = field(default_factory=SearchConfig)
    octopus: OctopusConfig = field(default_factory=OctopusConfig)
    basin: BasinConfig = field(default_factory=BasinConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    search_data = data.get("search") or {}
    search = SearchConfig(tiles=int(search_data.get("tiles", 5)))

    octopus_data = data.get("octopus") or {}
    octopus = OctopusConfig(steps=int(octopus_data.get("steps", 100)))

    basin_data = data.get("basin") or {}
    basin = BasinConfig(count=int(basin_data.get("count", 3)))

    logging_data = data.get("logging") or {}
    log_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    return Config(search=search, octopus=octopus, basin=basin, logging=log_cfg)


def load_config(path: str | Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "BasinConfig",
    "CONFIG",
    "Config",
    "LoggingConfig",
    "OctopusConfig",
    "SearchConfig",
    "load_config",
]
