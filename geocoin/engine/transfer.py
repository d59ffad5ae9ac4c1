"""Transfer engine: the only path that moves coins between caches and the player."""

from __future__ import annotations

from typing import TYPE_CHECKING

from geocoin.core.models import Cell, Coin

if TYPE_CHECKING:
    from geocoin.core.inventory import PlayerInventory
    from geocoin.core.ledger import CacheLedger


class TransferEngine:
    """Moves one coin at a time, all-or-nothing.

    Every failure is raised before any container is mutated, or the
    mutation is rolled back before the error propagates.
    """

    __slots__ = ("_ledger", "_inventory")

    def __init__(self, ledger: CacheLedger, inventory: PlayerInventory) -> None:
        self._ledger = ledger
        self._inventory = inventory

    def take_from_cache(self, cell: Cell) -> Coin:
        """Move the top coin of *cell*'s cache into the inventory.

        Raises ``EmptyCacheError`` with the inventory untouched.
        """
        coin = self._ledger.take(cell)
        self._inventory.take(coin)
        return coin

    def deposit_to_cache(self, cell: Cell) -> Coin:
        """Move the most recently acquired coin into *cell*'s cache.

        Raises ``EmptyInventoryError`` with every cache untouched.
        """
        coin = self._inventory.give_last()
        try:
            self._ledger.deposit(cell, coin)
        except ValueError:
            self._inventory.take(coin)
            raise
        return coin

    def total_coins(self) -> int:
        """Coins in all caches plus coins held; constant once minted."""
        return self._ledger.total_coins() + self._inventory.count()
