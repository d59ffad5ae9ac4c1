"""Core value objects: Cell, LatLng, LatLngBounds, Coin."""

from __future__ import annotations

from dataclasses import dataclass

from geocoin.core.enums import Direction


@dataclass(frozen=True, slots=True)
class Cell:
    """Immutable grid offset (i, j) from the board origin.

    ``i`` runs along latitude, ``j`` along longitude.
    """

    i: int
    j: int

    @property
    def key(self) -> str:
        return f"{self.i},{self.j}"

    def chebyshev(self, i: int, j: int) -> int:
        return max(abs(self.i - i), abs(self.j - j))

    def __repr__(self) -> str:
        return f"Cell({self.i}, {self.j})"


@dataclass(frozen=True, slots=True)
class LatLng:
    """Immutable geographic point in degrees."""

    lat: float
    lng: float

    def offset(self, dlat: float, dlng: float) -> LatLng:
        return LatLng(self.lat + dlat, self.lng + dlng)


@dataclass(frozen=True, slots=True)
class LatLngBounds:
    """Axis-aligned rectangle in degrees."""

    south: float
    west: float
    north: float
    east: float

    def contains(self, point: LatLng) -> bool:
        return self.south <= point.lat <= self.north and self.west <= point.lng <= self.east


@dataclass(frozen=True, slots=True)
class Coin:
    """A uniquely serialized token.  Identity never changes with custody."""

    origin: Cell
    serial: int

    @property
    def label(self) -> str:
        return f"{self.origin.i}:{self.origin.j}#{self.serial}"

    def __repr__(self) -> str:
        return f"Coin({self.label})"


# Direction -> (di, dj) tile offsets; NORTH increases latitude.
DIRECTION_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (1, 0),
    Direction.EAST: (0, 1),
    Direction.SOUTH: (-1, 0),
    Direction.WEST: (0, -1),
}
