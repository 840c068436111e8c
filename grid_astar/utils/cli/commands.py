"""Implementations of interactive CLI commands."""

from __future__ import annotations

from typing import Any, Dict, List
import logging

from ...core.grid import CellKind, Location
from ...core.world import World
from .command_parser import parse_coords
from .terminal_view import get_view

logger = logging.getLogger(__name__)

HELP_TEXT = """Available commands:
  /wall x y            block a cell
  /open x y            clear a cell
  /path x1 y1 x2 y2    find a path between two cells
  /goto x y            plan a path for the character
  /step                move the character one step along its path
  /move N|E|S|W        move the character one cell
  /show                print the grid
  /quit                exit"""


def help_command(state: Dict[str, Any]) -> None:
    state["last_output"] = HELP_TEXT
    print(HELP_TEXT)


def set_cell(world: World, args: List[str], kind: CellKind) -> bool:
    coords = parse_coords(args, 2)
    if coords is None:
        logger.error("Usage: /%s x y", "wall" if kind is CellKind.BLOCKED else "open")
        return False
    loc = Location(*coords)
    if not world.grid.in_bounds(loc):
        logger.error("Cell %s is outside the %dx%d grid", loc, *world.size)
        return False
    if kind is CellKind.BLOCKED and loc == world.character.position:
        logger.error("Cannot place a wall on the character at %s", loc)
        return False
    world.grid.set_cell(loc, kind)
    # Any planned path may now cross a wall or miss a shortcut.
    world.character.clear_path()
    world.goal = None
    logger.info("%s cell at %s", "Blocked" if kind is CellKind.BLOCKED else "Cleared", loc)
    return True


def path(world: World, args: List[str], state: Dict[str, Any]) -> bool:
    coords = parse_coords(args, 4)
    if coords is None:
        logger.error("Usage: /path x1 y1 x2 y2")
        return False
    result = world.pathfinder.find_path(world.grid, (coords[0], coords[1]), (coords[2], coords[3]))
    state["path"] = result.path
    if result.success:
        logger.info(
            "Path of %d positions, cost %.1f, %d search steps",
            len(result.path),
            result.cost,
            result.steps,
        )
    else:
        logger.info(
            "No path (%s) after %d search steps",
            result.failure.value if result.failure else "unknown",
            result.steps,
        )
    return result.success


def goto(world: World, args: List[str], state: Dict[str, Any]) -> bool:
    coords = parse_coords(args, 2)
    if coords is None:
        logger.error("Usage: /goto x y")
        return False
    found = world.plan_to((coords[0], coords[1]))
    state["path"] = list(world.character.current_path)
    if found:
        logger.info(
            "Character path planned: cost %.1f in %d steps",
            world.character.last_path_cost,
            world.character.last_search_steps,
        )
    else:
        logger.info("Character cannot reach (%d, %d)", coords[0], coords[1])
    return found


def step(world: World, state: Dict[str, Any]) -> None:
    if not world.character.has_path:
        logger.info("Character has no path. Use /goto first.")
        return
    pos = world.advance()
    state["path"] = list(world.character.current_path)
    logger.info("Character moved to %s", pos)


def move(world: World, args: List[str]) -> bool:
    moves = {
        "n": world.character.move_up,
        "e": world.character.move_right,
        "s": world.character.move_down,
        "w": world.character.move_left,
    }
    handler = moves.get(args[0].lower()) if args else None
    if handler is None:
        logger.error("Usage: /move N|E|S|W")
        return False
    moved = handler(world.grid)
    if moved:
        # Manual moves invalidate any planned route.
        world.character.clear_path()
        world.goal = None
    logger.info(
        "Character %s at %s", "moved" if moved else "blocked", world.character.position
    )
    return moved


def show(world: World, state: Dict[str, Any]) -> None:
    text = get_view().format(
        world.grid, state.get("path", ()), world.character.position
    )
    state["last_output"] = text
    print(text)


def execute(command: str, args: list[str], world: World, state: Dict[str, Any]) -> Any:
    if "running" not in state: state["running"] = True
    cmd_lower = command.lower()

    return_value: Any = None

    if cmd_lower == "help":
        help_command(state)
    elif cmd_lower in ("wall", "open"):
        kind = CellKind.BLOCKED if cmd_lower == "wall" else CellKind.WALKABLE
        return_value = set_cell(world, args, kind)
        if return_value:
            state.pop("path", None)
    elif cmd_lower == "path":
        return_value = path(world, args, state)
    elif cmd_lower == "goto":
        return_value = goto(world, args, state)
    elif cmd_lower == "step":
        step(world, state)
    elif cmd_lower == "move":
        return_value = move(world, args)
    elif cmd_lower == "show":
        show(world, state)
    elif cmd_lower == "quit":
        state["running"] = False
        logger.info("Quit command received. Shutting down...")
    else:
        logger.error("Unknown command: /%s. Type /help for available commands.", command)

    return return_value


__all__ = ["execute", "HELP_TEXT"]
