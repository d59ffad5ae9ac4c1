"""Core data models and the cell/coin ledger."""

from geocoin.core.board import Board
from geocoin.core.enums import Direction, EventCategory, LuckTag
from geocoin.core.errors import (
    CacheOutOfReachError,
    EmptyCacheError,
    EmptyInventoryError,
    GeocoinError,
    UnknownCellLookupError,
)
from geocoin.core.inventory import PlayerInventory
from geocoin.core.ledger import CacheLedger
from geocoin.core.models import Cell, Coin, LatLng, LatLngBounds

__all__ = [
    "Board",
    "CacheLedger",
    "CacheOutOfReachError",
    "Cell",
    "Coin",
    "Direction",
    "EmptyCacheError",
    "EmptyInventoryError",
    "EventCategory",
    "GeocoinError",
    "LatLng",
    "LatLngBounds",
    "LuckTag",
    "PlayerInventory",
    "UnknownCellLookupError",
]
