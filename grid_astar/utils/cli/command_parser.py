"""Simple command parsing utilities for the interactive CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


@dataclass
class CLICommand:
    """Result of parsing a command string."""
    name: str
    args: List[str]


def parse_command(text: str) -> Optional[CLICommand]:
    """Return a :class:`CLICommand` from ``text`` if it starts with ``/``."""
    text = text.strip()
    if not text.startswith("/"):
        return None
    parts = text[1:].split()
    if not parts:
        return None

    return CLICommand(name=parts[0].lower(), args=parts[1:])


def parse_coords(args: List[str], count: int) -> Optional[List[int]]:
    """Return the first ``count`` arguments as ints, or ``None`` if malformed."""
    if len(args) < count:
        return None
    try:
        return [int(a) for a in args[:count]]
    except ValueError:
        return None


__all__ = ["CLICommand", "parse_command", "parse_coords"]
