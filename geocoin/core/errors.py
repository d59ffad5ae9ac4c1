"""Recoverable error conditions raised by the core and the session layer."""

from __future__ import annotations


class GeocoinError(Exception):
    """Base class for expected, user-facing game errors."""


class EmptyCacheError(GeocoinError):
    """A coin was requested from a cache that holds none."""

    def __init__(self, cell) -> None:
        super().__init__(f"Cache {cell.key} is empty.")
        self.cell = cell


class EmptyInventoryError(GeocoinError):
    """A deposit was requested while the player holds no coins."""

    def __init__(self) -> None:
        super().__init__("Inventory is empty.")


class UnknownCellLookupError(GeocoinError):
    """A point or index pair maps to a cell that was never registered."""

    def __init__(self, i: int, j: int) -> None:
        super().__init__(f"No known cell at {i},{j}.")
        self.i = i
        self.j = j


class CacheOutOfReachError(GeocoinError):
    """The player tried to interact with a cache beyond the visibility radius."""

    def __init__(self, cell, distance: int, radius: int) -> None:
        super().__init__(
            f"Cache {cell.key} is {distance} tiles away (reach is {radius})."
        )
        self.cell = cell
        self.distance = distance
        self.radius = radius
