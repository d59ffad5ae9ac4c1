"""GET /api/v1/state and /api/v1/events: session state polled by the UI."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from geocoin.api.dependencies import get_session_manager
from geocoin.api.schemas import (
    BoundsSchema,
    CacheSchema,
    CoinSchema,
    EventSchema,
    PlayerSchema,
    PointSchema,
    SessionStateResponse,
)
from geocoin.api.session_manager import SessionManager
from geocoin.core.models import Coin
from geocoin.core.snapshot import CacheView, SessionSnapshot
from geocoin.utils.event_log import GameEvent

router = APIRouter()


def serialize_coin(coin: Coin) -> CoinSchema:
    return CoinSchema(label=coin.label, origin_i=coin.origin.i, origin_j=coin.origin.j, serial=coin.serial)


def serialize_cache(view: CacheView) -> CacheSchema:
    b = view.bounds
    return CacheSchema(
        i=view.cell.i,
        j=view.cell.j,
        key=view.cell.key,
        bounds=BoundsSchema(south=b.south, west=b.west, north=b.north, east=b.east),
        coin_count=len(view.coins),
        coins=[serialize_coin(c) for c in view.coins],
    )


def serialize_player(snap: SessionSnapshot) -> PlayerSchema:
    pos = snap.player_position
    return PlayerSchema(
        position=PointSchema(lat=pos.lat, lng=pos.lng),
        cell=snap.player_cell,
        coin_count=len(snap.inventory),
        coins=[serialize_coin(c) for c in snap.inventory],
    )


def serialize_event(event: GameEvent) -> EventSchema:
    return EventSchema(turn=event.turn, category=event.category.value, message=event.message, cell=event.cell)


@router.get("/state", response_model=SessionStateResponse)
def get_state(
    events: int = Query(20, ge=0, le=500, description="Number of recent events to include"),
    manager: SessionManager = Depends(get_session_manager),
) -> SessionStateResponse:
    snap = manager.get_snapshot()
    return SessionStateResponse(
        turn=snap.turn,
        seed=snap.seed,
        player=serialize_player(snap),
        caches=[serialize_cache(v) for v in snap.caches],
        known_cells=snap.known_cells,
        total_minted=snap.total_minted,
        total_coins=snap.total_coins,
        recent_events=[serialize_event(e) for e in manager.latest_events(events)],
    )


@router.get("/events", response_model=list[EventSchema])
def get_events(
    since: int = Query(0, ge=0, description="Return events with turn >= since"),
    manager: SessionManager = Depends(get_session_manager),
) -> list[EventSchema]:
    return [serialize_event(e) for e in manager.events_since(since)]
