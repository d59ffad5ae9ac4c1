"""Cache ledger: per-cell coin stacks, materialized exactly once."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator

from geocoin.core.errors import EmptyCacheError
from geocoin.core.models import Cell, Coin

if TYPE_CHECKING:
    from geocoin.systems.luck import SpawnOracle

logger = logging.getLogger(__name__)


class CacheLedger:
    """Owns the ordered coins resident in every materialized cache.

    The last element of a cache's list is the top of its stack; ``take``
    and ``deposit`` both operate on that end.
    """

    __slots__ = ("_oracle", "_caches", "_minted")

    def __init__(self, oracle: SpawnOracle) -> None:
        self._oracle = oracle
        self._caches: dict[Cell, list[Coin]] = {}
        self._minted: int = 0

    def materialize(self, cell: Cell) -> tuple[Coin, ...]:
        """Return the cache's current coins, minting them on the first call only."""
        coins = self._caches.get(cell)
        if coins is None:
            count = self._oracle.initial_coin_count(cell)
            coins = [Coin(cell, serial) for serial in range(1, count + 1)]
            self._caches[cell] = coins
            self._minted += count
            logger.debug("Materialized cache %s with %d coins", cell.key, count)
        return tuple(coins)

    def take(self, cell: Cell) -> Coin:
        """Remove and return the top coin of *cell*'s cache."""
        coins = self._caches.get(cell)
        if not coins:
            raise EmptyCacheError(cell)
        return coins.pop()

    def deposit(self, cell: Cell, coin: Coin) -> None:
        coins = self._caches.get(cell)
        if coins is None:
            raise ValueError(f"Cannot deposit into cell {cell.key}: no cache was materialized there")
        coins.append(coin)

    # -- queries --

    def coins(self, cell: Cell) -> tuple[Coin, ...]:
        return tuple(self._caches.get(cell, ()))

    def count(self, cell: Cell) -> int:
        return len(self._caches.get(cell, ()))

    def total_coins(self) -> int:
        return sum(len(c) for c in self._caches.values())

    def total_minted(self) -> int:
        """Number of coins ever created, regardless of current custody."""
        return self._minted

    def cells(self) -> Iterator[Cell]:
        return iter(self._caches)

    def __contains__(self, cell: object) -> bool:
        return cell in self._caches

    def __len__(self) -> int:
        return len(self._caches)
