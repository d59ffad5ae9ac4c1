"""SessionManager: lock-guarded owner of the single GameSession behind the API.

Route handlers may run on a thread pool; every call into the session is
serialized under one lock so each action runs to completion before the next.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from geocoin.core.enums import Direction
from geocoin.core.models import Cell, Coin
from geocoin.core.snapshot import CacheView, SessionSnapshot
from geocoin.engine.session import GameSession
from geocoin.utils.event_log import GameEvent

if TYPE_CHECKING:
    from geocoin.config import GameConfig

logger = logging.getLogger(__name__)


class SessionManager:
    """Thread-safe facade over one :class:`GameSession`."""

    def __init__(self, config: GameConfig) -> None:
        self.config = config
        self._lock = threading.Lock()
        self._session = GameSession(config)
        logger.info(
            "Session built: %d caches near origin (seed=%d)",
            len(self._session.board), config.world_seed,
        )

    # -- reads --

    def get_snapshot(self) -> SessionSnapshot:
        with self._lock:
            return self._session.snapshot()

    def get_cache(self, i: int, j: int) -> CacheView:
        with self._lock:
            cell = self._session.cache_at(i, j)
            return self._view(cell)

    def events_since(self, turn: int) -> list[GameEvent]:
        with self._lock:
            return self._session.events.since_turn(turn)

    def latest_events(self, count: int = 50) -> list[GameEvent]:
        with self._lock:
            return self._session.events.latest(count)

    # -- actions --

    def move(self, direction: Direction) -> SessionSnapshot:
        with self._lock:
            self._session.move(direction)
            return self._session.snapshot()

    def take(self, i: int, j: int) -> tuple[Coin, CacheView, SessionSnapshot]:
        with self._lock:
            coin = self._session.take(i, j)
            return coin, self._view(self._session.cache_at(i, j)), self._session.snapshot()

    def deposit(self, i: int, j: int) -> tuple[Coin, CacheView, SessionSnapshot]:
        with self._lock:
            coin = self._session.deposit(i, j)
            return coin, self._view(self._session.cache_at(i, j)), self._session.snapshot()

    def reset(self) -> SessionSnapshot:
        with self._lock:
            self._session.reset()
            return self._session.snapshot()

    def _view(self, cell: Cell) -> CacheView:
        session = self._session
        return CacheView(cell=cell, bounds=session.board.bounds_of(cell), coins=session.ledger.coins(cell))
