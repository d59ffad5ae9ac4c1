"""Enumerations used throughout the game."""

from __future__ import annotations

from enum import Enum, IntEnum, unique


@unique
class Direction(IntEnum):
    """Cardinal movement directions."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


@unique
class LuckTag(str, Enum):
    """Semantic tags appended to a cell key to separate oracle draws."""

    CACHE = ""
    INITIAL_VALUE = "initialValue"


@unique
class EventCategory(str, Enum):
    """Categories for the session event feed."""

    SPAWN = "spawn"
    MOVE = "move"
    TAKE = "take"
    DEPOSIT = "deposit"
    RESET = "reset"
