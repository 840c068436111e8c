import logging
from pathlib import Path

from grid_astar import main as main_module
from grid_astar.config import load_config
from grid_astar.search.pathfinder import PathFailure
from grid_astar.utils.cli import commands


def _write_config(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(
        "grid:\n"
        "  size: [6, 4]\n"
        "  start: [0, 0]\n"
        "  test_obstacles: false\n"
        "  obstacles: [[1, 0], [1, 1], [1, 2]]\n"
        "logging:\n"
        "  global_level: WARNING\n"
        "  module_levels:\n"
        "    grid_astar.search.engine: DEBUG\n"
    )
    return path


def test_bootstrap_builds_world_from_config(tmp_path: Path):
    world = main_module.bootstrap(_write_config(tmp_path))
    assert world.size == (6, 4)
    assert world.character.position == (0, 0)
    assert sorted(world.grid.blocked_cells()) == [(1, 0), (1, 1), (1, 2)]


def test_bootstrap_with_test_obstacles(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("grid:\n  size: [40, 30]\n  test_obstacles: true\n")
    world = main_module.bootstrap(path)
    assert not world.grid.is_walkable((10, 8))


def test_configure_logging_applies_module_levels(tmp_path: Path):
    cfg = load_config(_write_config(tmp_path))
    main_module.configure_logging(cfg)
    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("grid_astar.search.engine").level == logging.DEBUG


def test_run_executes_until_quit(tmp_path: Path):
    world = main_module.bootstrap(_write_config(tmp_path))
    lines = [
        "/goto 2 0\n",
        "not a command\n",
        "\n",
        "/step\n",
        "/quit\n",
        "/step\n",
    ]
    state = main_module.run(world, lines)
    assert state["running"] is False
    # Path detours under the wall column: (0,0) -> (0,1) first.
    assert world.character.position == (0, 1)
    assert world.character.has_path


def test_main_reads_commands_from_stdin(tmp_path: Path, monkeypatch, capsys):
    import io

    monkeypatch.setattr(main_module.sys, "stdin", io.StringIO("/path 0 0 2 0\n/show\n/quit\n"))
    main_module.main(["--config", str(_write_config(tmp_path))])
    out = capsys.readouterr().out
    assert "Available commands" in out
    assert "@#G" in out.splitlines()[-4]


def test_bootstrap_applies_configured_node_budget(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "grid:\n"
        "  size: [6, 6]\n"
        "  start: [0, 0]\n"
        "  test_obstacles: false\n"
        "search:\n"
        "  max_nodes: 3\n"
    )
    world = main_module.bootstrap(path)
    assert world.pathfinder.max_nodes == 3
    assert world.character.pathfinder is world.pathfinder

    state: dict = {}
    assert commands.execute("path", ["0", "0", "4", "4"], world, state) is False
    assert state["path"] == []
    assert world.pathfinder.last_failure is PathFailure.RESOURCE_EXHAUSTED

    assert world.plan_to((4, 4)) is False
    assert world.character.pathfinder.last_failure is PathFailure.RESOURCE_EXHAUSTED


def test_main_loads_config_once(tmp_path: Path, monkeypatch):
    import io

    calls = []
    real_load = main_module.load_config

    def counting_load(path):
        calls.append(path)
        return real_load(path)

    monkeypatch.setattr(main_module, "load_config", counting_load)
    monkeypatch.setattr(main_module.sys, "stdin", io.StringIO("/quit\n"))
    main_module.main(["--config", str(_write_config(tmp_path))])
    assert len(calls) == 1
