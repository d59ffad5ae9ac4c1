"""Cache spawner: places caches around a point and materializes their coins."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from geocoin.core.models import Cell

if TYPE_CHECKING:
    from geocoin.core.board import Board
    from geocoin.core.ledger import CacheLedger
    from geocoin.systems.luck import SpawnOracle

logger = logging.getLogger(__name__)


class CacheSpawner:
    """Scans a square neighborhood and registers every lucky cell as a cache.

    Spawn decisions depend only on cell coordinates, so rescanning an area
    is harmless: known cells keep their coins.
    """

    __slots__ = ("_board", "_ledger", "_oracle")

    def __init__(self, board: Board, ledger: CacheLedger, oracle: SpawnOracle) -> None:
        self._board = board
        self._ledger = ledger
        self._oracle = oracle

    def populate(self, center: tuple[int, int], size: int) -> list[Cell]:
        """Spawn caches for i in [ci - size, ci + size) and likewise j.

        Returns the cells that became known during this call, in scan order.
        """
        ci, cj = center
        spawned: list[Cell] = []
        for i in range(ci - size, ci + size):
            for j in range(cj - size, cj + size):
                if self._board.is_known(i, j):
                    continue
                candidate = Cell(i, j)
                if not self._oracle.should_spawn_cache(candidate):
                    continue
                cell = self._board.canonicalize(i, j)
                coins = self._ledger.materialize(cell)
                spawned.append(cell)
                logger.debug("Spawned cache at %s (%d coins)", cell.key, len(coins))
        return spawned
