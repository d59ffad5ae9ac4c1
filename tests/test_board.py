"""Tests for the Board grid registry.

Covers:
- Canonical cell identity (same object on every lookup)
- Lookup misses raise UnknownCellLookupError
- Point -> cell rounding around a non-zero origin
- Cell bounds centered on origin + cell * tile_width
- Chebyshev neighborhood queries and their ordering
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from geocoin.core.board import Board
from geocoin.core.errors import UnknownCellLookupError
from geocoin.core.models import Cell, LatLng

ORIGIN = LatLng(36.98949379578401, -122.06277128548504)
TILE = 1e-4


def _make_board(radius: int = 2) -> Board:
    return Board(TILE, radius, ORIGIN)


def _point(i: float, j: float) -> LatLng:
    """Point at fractional cell offsets from the origin."""
    return LatLng(ORIGIN.lat + i * TILE, ORIGIN.lng + j * TILE)


class TestCanonicalize:

    def test_returns_same_object(self):
        board = _make_board()
        a = board.canonicalize(2, 3)
        b = board.canonicalize(2, 3)
        assert a is b
        assert a == Cell(2, 3)

    def test_registers_once(self):
        board = _make_board()
        board.canonicalize(1, 1)
        board.canonicalize(1, 1)
        board.canonicalize(-1, 1)
        assert len(board) == 2
        assert board.known_cells() == [Cell(1, 1), Cell(-1, 1)]

    def test_distinct_pairs_stay_distinct(self):
        board = _make_board()
        # "1,-23" vs "-12,3" style pairs must not share identity
        a = board.canonicalize(1, -23)
        b = board.canonicalize(-12, 3)
        assert a is not b
        assert a.key == "1,-23"
        assert b.key == "-12,3"

    def test_lookup_returns_canonical(self):
        board = _make_board()
        cell = board.canonicalize(5, -5)
        assert board.lookup(5, -5) is cell
        assert board.is_known(5, -5)

    def test_lookup_miss_raises(self):
        board = _make_board()
        with pytest.raises(UnknownCellLookupError) as info:
            board.lookup(7, 8)
        assert (info.value.i, info.value.j) == (7, 8)
        assert not board.is_known(7, 8)


class TestPointMapping:

    def test_origin_maps_to_zero(self):
        board = _make_board()
        assert board.indices_for_point(ORIGIN) == (0, 0)

    def test_points_inside_cell(self):
        board = _make_board()
        assert board.indices_for_point(_point(2.3, 3.2)) == (2, 3)
        assert board.indices_for_point(_point(1.7, 2.6)) == (2, 3)
        assert board.indices_for_point(_point(-0.4, -0.4)) == (0, 0)
        assert board.indices_for_point(_point(-0.6, -1.2)) == (-1, -1)

    def test_cell_for_point_known(self):
        board = _make_board()
        cell = board.canonicalize(2, 3)
        assert board.cell_for_point(_point(2.1, 2.9)) is cell

    def test_cell_for_point_unknown_raises(self):
        board = _make_board()
        board.canonicalize(2, 3)
        with pytest.raises(UnknownCellLookupError):
            board.cell_for_point(_point(4.0, 4.0))

    def test_center_maps_back_to_cell(self):
        board = _make_board()
        for i in range(-5, 6):
            for j in range(-5, 6):
                center = board.center_of(Cell(i, j))
                assert board.indices_for_point(center) == (i, j)


class TestBounds:

    def test_bounds_centered_on_cell(self):
        board = _make_board()
        b = board.bounds_of(Cell(2, 3))
        assert b.south == pytest.approx(ORIGIN.lat + 1.5 * TILE)
        assert b.north == pytest.approx(ORIGIN.lat + 2.5 * TILE)
        assert b.west == pytest.approx(ORIGIN.lng + 2.5 * TILE)
        assert b.east == pytest.approx(ORIGIN.lng + 3.5 * TILE)

    def test_bounds_width_is_tile(self):
        board = _make_board()
        b = board.bounds_of(Cell(-4, 9))
        assert b.north - b.south == pytest.approx(TILE)
        assert b.east - b.west == pytest.approx(TILE)

    def test_bounds_contain_center(self):
        board = _make_board()
        cell = Cell(-3, 1)
        assert board.bounds_of(cell).contains(board.center_of(cell))
        assert not board.bounds_of(cell).contains(board.center_of(Cell(-3, 2)))


class TestNeighborhood:

    def test_only_known_cells_within_radius(self):
        board = _make_board(radius=2)
        for i, j in [(0, 0), (2, 2), (-2, 1), (3, 0), (0, -3), (5, 5)]:
            board.canonicalize(i, j)
        near = board.known_cells_near(ORIGIN)
        assert near == [Cell(-2, 1), Cell(0, 0), Cell(2, 2)]

    def test_explicit_radius(self):
        board = _make_board(radius=2)
        for i, j in [(0, 0), (3, 0), (0, -3)]:
            board.canonicalize(i, j)
        assert board.known_cells_near(ORIGIN, radius=3) == [Cell(0, -3), Cell(0, 0), Cell(3, 0)]
        assert board.known_cells_near(ORIGIN, radius=0) == [Cell(0, 0)]

    def test_center_cell_need_not_be_known(self):
        board = _make_board(radius=1)
        board.canonicalize(11, 10)
        assert board.known_cells_near(_point(10, 10)) == [Cell(11, 10)]

    def test_returns_canonical_instances(self):
        board = _make_board(radius=1)
        cell = board.canonicalize(1, 0)
        assert board.known_cells_near(ORIGIN)[0] is cell

    def test_ordering_is_stable(self):
        board = _make_board(radius=3)
        for i, j in [(3, -1), (-1, 2), (0, 0), (-1, -2), (2, 2)]:
            board.canonicalize(i, j)
        first = board.known_cells_near(ORIGIN)
        assert first == board.known_cells_near(ORIGIN)
        assert first == sorted(first, key=lambda c: (c.i, c.j))

    def test_read_only(self):
        board = _make_board(radius=4)
        board.canonicalize(0, 0)
        board.known_cells_near(ORIGIN)
        assert len(board) == 1
