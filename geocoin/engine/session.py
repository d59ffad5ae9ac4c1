"""Game session: single owner of all mutable game state."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from geocoin.core.board import Board
from geocoin.core.enums import Direction, EventCategory
from geocoin.core.errors import CacheOutOfReachError
from geocoin.core.inventory import PlayerInventory
from geocoin.core.ledger import CacheLedger
from geocoin.core.models import DIRECTION_OFFSETS, Cell, Coin, LatLng
from geocoin.core.snapshot import SessionSnapshot
from geocoin.engine.transfer import TransferEngine
from geocoin.systems.luck import SpawnOracle
from geocoin.systems.spawner import CacheSpawner
from geocoin.utils.event_log import EventLog, GameEvent

if TYPE_CHECKING:
    from geocoin.config import GameConfig

logger = logging.getLogger(__name__)


class GameSession:
    """Wires the board, ledger, inventory and transfer engine together.

    Every player action goes through this object; the view layer only
    reads snapshots and calls the action methods.
    """

    def __init__(self, config: GameConfig) -> None:
        self.config = config
        self.events = EventLog(config.event_log_size)
        self._build()

    def _build(self) -> None:
        cfg = self.config
        self.origin = LatLng(cfg.origin_lat, cfg.origin_lng)
        self.oracle = SpawnOracle(
            seed=cfg.world_seed,
            cache_spawn_probability=cfg.cache_spawn_probability,
            coin_thresholds=cfg.coin_thresholds,
        )
        self.board = Board(cfg.tile_degrees, cfg.visibility_radius, self.origin)
        self.ledger = CacheLedger(self.oracle)
        self.inventory = PlayerInventory()
        self.transfer = TransferEngine(self.ledger, self.inventory)
        self.spawner = CacheSpawner(self.board, self.ledger, self.oracle)
        self.turn: int = 0
        self.player_position: LatLng = self.origin
        self._populate()

    def reset(self) -> None:
        """Discard all state and regenerate the world from the config."""
        self.events.clear()
        self._build()
        self._log(EventCategory.RESET, "Session reset.")
        logger.info("Session reset (seed=%d)", self.config.world_seed)

    # -- player position --

    @property
    def player_indices(self) -> tuple[int, int]:
        return self.board.indices_for_point(self.player_position)

    def move(self, direction: Direction) -> LatLng:
        """Step one tile in *direction* and spawn caches around the new position."""
        di, dj = DIRECTION_OFFSETS[Direction(direction)]
        step = self.config.tile_degrees
        self.player_position = self.player_position.offset(di * step, dj * step)
        self.turn += 1
        i, j = self.player_indices
        self._log(EventCategory.MOVE, f"Moved {Direction(direction).name.lower()} to {i},{j}.", (i, j))
        self._populate()
        return self.player_position

    def _populate(self) -> None:
        for cell in self.spawner.populate(self.player_indices, self.config.neighborhood_size):
            self._log(
                EventCategory.SPAWN,
                f"Cache {cell.key} appeared with {self.ledger.count(cell)} coins.",
                (cell.i, cell.j),
            )

    # -- caches --

    def visible_caches(self) -> list[Cell]:
        return self.board.known_cells_near(self.player_position)

    def cache_at(self, i: int, j: int) -> Cell:
        return self.board.lookup(i, j)

    def _reachable(self, i: int, j: int) -> Cell:
        cell = self.board.lookup(i, j)
        distance = cell.chebyshev(*self.player_indices)
        radius = self.config.visibility_radius
        if distance > radius:
            raise CacheOutOfReachError(cell, distance, radius)
        return cell

    # -- transfers --

    def take(self, i: int, j: int) -> Coin:
        """Take the top coin from the cache at (i, j) into the inventory."""
        cell = self._reachable(i, j)
        coin = self.transfer.take_from_cache(cell)
        self.turn += 1
        self._log(EventCategory.TAKE, f"Took coin {coin.label} from cache {cell.key}.", (i, j))
        return coin

    def deposit(self, i: int, j: int) -> Coin:
        """Deposit the most recently taken coin into the cache at (i, j)."""
        cell = self._reachable(i, j)
        coin = self.transfer.deposit_to_cache(cell)
        self.turn += 1
        self._log(EventCategory.DEPOSIT, f"Deposited coin {coin.label} into cache {cell.key}.", (i, j))
        return coin

    # -- reads --

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot.from_session(self)

    def _log(self, category: EventCategory, message: str, cell: tuple[int, int] | None = None) -> None:
        self.events.append(GameEvent(turn=self.turn, category=category, message=message, cell=cell))
