"""Grid registry: canonical cell identities over a geographic origin."""

from __future__ import annotations

import math
from typing import Iterator

from geocoin.core.errors import UnknownCellLookupError
from geocoin.core.models import Cell, LatLng, LatLngBounds


class Board:
    """Registry of known cells, centered on ``origin + (i, j) * tile_width``.

    Cells are interned: every lookup of the same (i, j) returns the same
    ``Cell`` object for the lifetime of the board.  Cells are never removed.
    """

    __slots__ = ("tile_width", "visibility_radius", "origin", "_known")

    def __init__(self, tile_width: float, visibility_radius: int, origin: LatLng | None = None) -> None:
        self.tile_width = tile_width
        self.visibility_radius = visibility_radius
        self.origin = origin if origin is not None else LatLng(0.0, 0.0)
        self._known: dict[Cell, Cell] = {}

    # -- registration --

    def canonicalize(self, i: int, j: int) -> Cell:
        """Register (i, j) if unseen and return its canonical cell."""
        candidate = Cell(i, j)
        cell = self._known.get(candidate)
        if cell is None:
            self._known[candidate] = candidate
            cell = candidate
        return cell

    def lookup(self, i: int, j: int) -> Cell:
        cell = self._known.get(Cell(i, j))
        if cell is None:
            raise UnknownCellLookupError(i, j)
        return cell

    def is_known(self, i: int, j: int) -> bool:
        return Cell(i, j) in self._known

    def known_cells(self) -> list[Cell]:
        """All registered cells in registration order."""
        return list(self._known.values())

    def __len__(self) -> int:
        return len(self._known)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._known.values())

    # -- geometry --

    def indices_for_point(self, point: LatLng) -> tuple[int, int]:
        """Return the (i, j) of the cell whose bounds enclose *point*.

        Half-up rounding: a point on a shared south/west edge belongs to the
        cell to its north/east.
        """
        i = math.floor((point.lat - self.origin.lat) / self.tile_width + 0.5)
        j = math.floor((point.lng - self.origin.lng) / self.tile_width + 0.5)
        return i, j

    def cell_for_point(self, point: LatLng) -> Cell:
        """Canonical cell enclosing *point*.  Raises if it was never registered."""
        return self.lookup(*self.indices_for_point(point))

    def center_of(self, cell: Cell) -> LatLng:
        return LatLng(
            self.origin.lat + cell.i * self.tile_width,
            self.origin.lng + cell.j * self.tile_width,
        )

    def bounds_of(self, cell: Cell) -> LatLngBounds:
        center = self.center_of(cell)
        half = self.tile_width / 2
        return LatLngBounds(
            south=center.lat - half,
            west=center.lng - half,
            north=center.lat + half,
            east=center.lng + half,
        )

    # -- neighborhood --

    def known_cells_near(self, point: LatLng, radius: int | None = None) -> list[Cell]:
        """Registered cells within Chebyshev *radius* of the cell containing *point*.

        The containing cell does not need to be registered.  Results are
        ordered by ``i`` then ``j``.
        """
        if radius is None:
            radius = self.visibility_radius
        ci, cj = self.indices_for_point(point)
        result: list[Cell] = []
        for di in range(-radius, radius + 1):
            for dj in range(-radius, radius + 1):
                cell = self._known.get(Cell(ci + di, cj + dj))
                if cell is not None:
                    result.append(cell)
        return result
