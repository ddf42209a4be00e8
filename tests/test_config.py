from pathlib import Path

import yaml

from advent_grid.config import (
    CONFIG,
    CONFIG_PATH,
    BasinConfig,
    LoggingConfig,
    OctopusConfig,
    SearchConfig,
    load_config,
)


def test_config_module_loads_config():
    assert isinstance(CONFIG.search, SearchConfig)
    assert isinstance(CONFIG.octopus, OctopusConfig)
    assert isinstance(CONFIG.basin, BasinConfig)
    assert isinstance(CONFIG.logging, LoggingConfig)
    assert CONFIG.search.tiles == 5


def test_repository_config_contains_keys():
    data = yaml.safe_load(CONFIG_PATH.read_text())
    assert data["search"]["tiles"] == 5
    assert data["octopus"]["steps"] == 100
    assert data["basin"]["count"] == 3
    assert data["logging"]["global_level"] == "INFO"


def test_missing_file_uses_defaults(tmp_path: Path):
    cfg = load_config(tmp_path / "nope.yaml")
    assert cfg.search.tiles == 5
    assert cfg.octopus.steps == 100
    assert cfg.logging.global_level == "INFO"
    assert cfg.logging.module_levels == {}


def test_partial_file_overrides(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "search:\n  tiles: 2\n"
        "logging:\n  global_level: debug\n  module_levels:\n    advent_grid.main: WARNING\n"
    )
    cfg = load_config(path)
    assert cfg.search.tiles == 2
    assert cfg.basin.count == 3
    assert cfg.logging.global_level == "DEBUG"
    assert cfg.logging.module_levels == {"advent_grid.main": "WARNING"}


def test_empty_file_uses_defaults(tmp_path: Path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path).octopus.steps == 100
