"""World bootstrap and the interactive command loop."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from .config import CONFIG_PATH, Config, load_config
from .core.world import World
from .search.pathfinder import Pathfinder
from .utils.cli.command_parser import parse_command
from .utils.cli.commands import HELP_TEXT, execute

logger = logging.getLogger(__name__)


def configure_logging(cfg: Config) -> None:
    numeric_level = getattr(logging, cfg.logging.global_level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    # Apply per-module levels if defined
    for module_name, level_str in cfg.logging.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if module_numeric_level is not None:
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def bootstrap(config_path: str | Path = CONFIG_PATH, cfg: Optional[Config] = None) -> World:
    """Build the world from ``cfg``, loading it from ``config_path`` if not given."""

    if cfg is None:
        cfg = load_config(Path(config_path))

    pathfinder = Pathfinder(max_nodes=cfg.search.max_nodes)
    world = World(cfg.grid.size, start=cfg.grid.start, pathfinder=pathfinder)
    if cfg.grid.test_obstacles:
        world.grid.add_test_obstacles()
    world.grid.set_blocked(cfg.grid.obstacles)

    if not world.grid.is_walkable(world.character.position):
        logger.warning(
            "[Bootstrap] Configured start %s is blocked; character cannot move until it is cleared",
            world.character.position,
        )
    logger.info(
        "[Bootstrap] Grid %dx%d with %d blocked cells, character at %s",
        world.size[0],
        world.size[1],
        len(world.grid.blocked_cells()),
        world.character.position,
    )
    return world


def run(world: World, lines: Iterable[str], state: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Execute ``/command`` lines against ``world`` until ``/quit`` or EOF."""

    state = state if state is not None else {}
    state["running"] = True
    for line in lines:
        cmd = parse_command(line)
        if cmd is None:
            if line.strip():
                logger.error("Commands start with '/'. Type /help for available commands.")
            continue
        execute(cmd.name, cmd.args, world, state)
        if not state["running"]:
            break
    return state


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Interactive A* grid pathfinding")
    parser.add_argument("--config", type=Path, default=CONFIG_PATH, help="YAML config file")
    args = parser.parse_args(argv)

    cfg = load_config(args.config)
    configure_logging(cfg)

    world = bootstrap(args.config, cfg)
    print(HELP_TEXT)
    try:
        run(world, sys.stdin)
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt caught. Shutting down...")


if __name__ == "__main__":
    main()
