"""Tests for the TransferEngine.

Covers:
- Conservation: caches + inventory == coins ever minted
- No partial transfer on EmptyCacheError / EmptyInventoryError
- Take-then-deposit round trip restores the cache
- Rollback when the target cell has no cache
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from geocoin.core.errors import EmptyCacheError, EmptyInventoryError
from geocoin.core.inventory import PlayerInventory
from geocoin.core.ledger import CacheLedger
from geocoin.core.models import Cell
from geocoin.engine.transfer import TransferEngine
from tests.helpers.oracles import FixedLuckOracle

# (2,3) -> 2 coins, (0,0) -> 3 coins, (5,5) -> 0 coins
LUCK = {"2,3,initialValue": 0.5, "0,0,initialValue": 0.8, "5,5,initialValue": 0.0}
CELLS = [Cell(2, 3), Cell(0, 0), Cell(5, 5)]


def _make_engine() -> tuple[TransferEngine, CacheLedger, PlayerInventory]:
    ledger = CacheLedger(FixedLuckOracle(LUCK))
    for cell in CELLS:
        ledger.materialize(cell)
    inventory = PlayerInventory()
    return TransferEngine(ledger, inventory), ledger, inventory


def _custody(ledger: CacheLedger, inventory: PlayerInventory) -> list:
    held = list(inventory.coins())
    for cell in CELLS:
        held.extend(ledger.coins(cell))
    return held


class TestTakeFromCache:

    def test_moves_top_coin(self):
        engine, ledger, inventory = _make_engine()
        coin = engine.take_from_cache(Cell(2, 3))
        assert coin.label == "2:3#2"
        assert inventory.coins() == (coin,)
        assert [c.serial for c in ledger.coins(Cell(2, 3))] == [1]

    def test_empty_cache_is_noop(self):
        engine, ledger, inventory = _make_engine()
        engine.take_from_cache(Cell(2, 3))
        with pytest.raises(EmptyCacheError):
            engine.take_from_cache(Cell(5, 5))
        assert inventory.count() == 1
        assert ledger.count(Cell(5, 5)) == 0

    def test_drain_then_error(self):
        engine, ledger, inventory = _make_engine()
        engine.take_from_cache(Cell(2, 3))
        engine.take_from_cache(Cell(2, 3))
        with pytest.raises(EmptyCacheError):
            engine.take_from_cache(Cell(2, 3))
        assert inventory.count() == 2


class TestDepositToCache:

    def test_moves_last_coin(self):
        engine, ledger, inventory = _make_engine()
        taken = engine.take_from_cache(Cell(0, 0))
        deposited = engine.deposit_to_cache(Cell(5, 5))
        assert deposited is taken
        assert ledger.coins(Cell(5, 5)) == (taken,)
        assert inventory.count() == 0

    def test_empty_inventory_is_noop(self):
        engine, ledger, _ = _make_engine()
        before = {cell: ledger.coins(cell) for cell in CELLS}
        with pytest.raises(EmptyInventoryError):
            engine.deposit_to_cache(Cell(2, 3))
        assert {cell: ledger.coins(cell) for cell in CELLS} == before

    def test_unknown_cache_rolls_back(self):
        engine, ledger, inventory = _make_engine()
        coin = engine.take_from_cache(Cell(0, 0))
        with pytest.raises(ValueError):
            engine.deposit_to_cache(Cell(9, 9))
        assert inventory.coins() == (coin,)
        assert Cell(9, 9) not in ledger


class TestInvariants:

    def test_round_trip_restores_cache(self):
        engine, ledger, _ = _make_engine()
        before = ledger.coins(Cell(0, 0))
        engine.take_from_cache(Cell(0, 0))
        engine.deposit_to_cache(Cell(0, 0))
        assert ledger.coins(Cell(0, 0)) == before

    def test_conservation_over_mixed_sequence(self):
        engine, ledger, inventory = _make_engine()
        minted = ledger.total_minted()
        assert minted == 5
        script = [
            ("take", Cell(0, 0)), ("take", Cell(0, 0)), ("deposit", Cell(5, 5)),
            ("take", Cell(2, 3)), ("take", Cell(5, 5)), ("take", Cell(5, 5)),
            ("deposit", Cell(2, 3)), ("deposit", Cell(2, 3)), ("deposit", Cell(0, 0)),
            ("deposit", Cell(0, 0)), ("take", Cell(0, 0)), ("deposit", Cell(5, 5)),
        ]
        for op, cell in script:
            try:
                if op == "take":
                    engine.take_from_cache(cell)
                else:
                    engine.deposit_to_cache(cell)
            except (EmptyCacheError, EmptyInventoryError):
                pass
            assert engine.total_coins() == minted

    def test_each_coin_in_exactly_one_place(self):
        engine, ledger, inventory = _make_engine()
        engine.take_from_cache(Cell(0, 0))
        engine.take_from_cache(Cell(2, 3))
        engine.deposit_to_cache(Cell(5, 5))
        custody = _custody(ledger, inventory)
        assert len(custody) == len(set(custody)) == ledger.total_minted()

    def test_coin_identity_survives_moves(self):
        engine, ledger, _ = _make_engine()
        coin = engine.take_from_cache(Cell(2, 3))
        engine.deposit_to_cache(Cell(5, 5))
        moved = engine.take_from_cache(Cell(5, 5))
        assert moved == coin
        assert moved.origin == Cell(2, 3)
        assert moved.label == "2:3#2"
