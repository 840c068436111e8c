from pathlib import Path

import pytest

from grid_astar.config import CONFIG, load_config


def test_missing_file_uses_defaults(tmp_path: Path):
    cfg = load_config(tmp_path / "missing.yaml")
    assert cfg.grid.size == (40, 30)
    assert cfg.grid.start == (1, 1)
    assert cfg.grid.test_obstacles is True
    assert cfg.grid.obstacles == []
    assert cfg.search.max_nodes == 10000
    assert cfg.logging.global_level == "INFO"
    assert cfg.logging.module_levels == {}


def test_values_are_read_from_yaml(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "grid:\n"
        "  size: [8, 6]\n"
        "  start: [2, 3]\n"
        "  test_obstacles: false\n"
        "  obstacles: [[1, 1], [2, 1]]\n"
        "search:\n"
        "  max_nodes: 50\n"
        "logging:\n"
        "  global_level: debug\n"
        "  module_levels:\n"
        "    grid_astar.search: WARNING\n"
    )
    cfg = load_config(path)
    assert cfg.grid.size == (8, 6)
    assert cfg.grid.start == (2, 3)
    assert cfg.grid.test_obstacles is False
    assert cfg.grid.obstacles == [(1, 1), (2, 1)]
    assert cfg.search.max_nodes == 50
    assert cfg.logging.global_level == "DEBUG"
    assert cfg.logging.module_levels == {"grid_astar.search": "WARNING"}


def test_empty_file_uses_defaults(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(path).search.max_nodes == 10000


@pytest.mark.parametrize(
    "text",
    [
        "grid:\n  size: [0, 5]\n",
        "grid:\n  size: [5]\n",
        "search:\n  max_nodes: 0\n",
    ],
)
def test_invalid_values_raise(tmp_path: Path, text: str):
    path = tmp_path / "config.yaml"
    path.write_text(text)
    with pytest.raises(ValueError):
        load_config(path)


def test_module_level_config_loaded():
    assert CONFIG.search.max_nodes >= 1
