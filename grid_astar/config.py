"""Simple configuration loader for grid_astar."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class GridConfig:
    """Configuration values for the grid section."""

    size: Tuple[int, int] = (40, 30)
    start: Tuple[int, int] = (1, 1)
    test_obstacles: bool = True
    obstacles: List[Tuple[int, int]] = field(default_factory=list)


@dataclass
class SearchConfig:
    """Configuration for the A* engine."""

    max_nodes: int = 10000


@dataclass
class LoggingConfig:
    """Log levels applied by :func:`grid_astar.main.configure_logging`."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    grid: GridConfig
    search: SearchConfig
    logging: LoggingConfig


def _pair(value: Any, default: Tuple[int, int]) -> Tuple[int, int]:
    if value is None:
        return default
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"Expected an [x, y] pair, got {value!r}")
    return int(value[0]), int(value[1])


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    grid_data = data.get("grid", {}) or {}
    grid = GridConfig(
        size=_pair(grid_data.get("size"), (40, 30)),
        start=_pair(grid_data.get("start"), (1, 1)),
        test_obstacles=bool(grid_data.get("test_obstacles", True)),
        obstacles=[_pair(o, (0, 0)) for o in grid_data.get("obstacles", []) or []],
    )
    if grid.size[0] <= 0 or grid.size[1] <= 0:
        raise ValueError(f"grid.size must be positive, got {grid.size}")

    search_data = data.get("search", {}) or {}
    search = SearchConfig(max_nodes=int(search_data.get("max_nodes", 10000)))
    if search.max_nodes < 1:
        raise ValueError("search.max_nodes must be at least 1")

    logging_data = data.get("logging", {}) or {}
    log_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels", {}) or {}),
    )

    return Config(grid=grid, search=search, logging=log_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "GridConfig",
    "SearchConfig",
    "LoggingConfig",
    "load_config",
]
