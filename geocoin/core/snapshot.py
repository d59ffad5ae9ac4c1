"""Immutable snapshot of a game session for readers outside the engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from geocoin.core.models import Cell, Coin, LatLng, LatLngBounds

if TYPE_CHECKING:
    from geocoin.engine.session import GameSession


@dataclass(frozen=True, slots=True)
class CacheView:
    """Read-only view of one cache: where it is and what it holds."""

    cell: Cell
    bounds: LatLngBounds
    coins: tuple[Coin, ...]


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    """Read-only view of the session, safe to hand to another thread."""

    turn: int
    seed: int
    player_position: LatLng
    player_cell: tuple[int, int]
    inventory: tuple[Coin, ...]
    caches: tuple[CacheView, ...]
    known_cells: int
    total_minted: int
    total_coins: int

    @classmethod
    def from_session(cls, session: GameSession) -> SessionSnapshot:
        board = session.board
        ledger = session.ledger
        caches = tuple(
            CacheView(cell=cell, bounds=board.bounds_of(cell), coins=ledger.coins(cell))
            for cell in session.visible_caches()
        )
        return cls(
            turn=session.turn,
            seed=session.config.world_seed,
            player_position=session.player_position,
            player_cell=session.player_indices,
            inventory=session.inventory.coins(),
            caches=caches,
            known_cells=len(board),
            total_minted=ledger.total_minted(),
            total_coins=session.transfer.total_coins(),
        )
