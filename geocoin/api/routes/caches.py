"""Cache endpoints: list visible caches, inspect one, take and deposit coins."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from geocoin.api.dependencies import get_session_manager
from geocoin.api.routes.state import serialize_cache, serialize_coin, serialize_player
from geocoin.api.schemas import CacheListResponse, CacheSchema, TransferResponse
from geocoin.api.session_manager import SessionManager
from geocoin.core.errors import (
    CacheOutOfReachError,
    EmptyCacheError,
    EmptyInventoryError,
    UnknownCellLookupError,
)

router = APIRouter()


@router.get("/caches", response_model=CacheListResponse)
def list_caches(manager: SessionManager = Depends(get_session_manager)) -> CacheListResponse:
    snap = manager.get_snapshot()
    return CacheListResponse(
        player_cell=snap.player_cell,
        caches=[serialize_cache(v) for v in snap.caches],
    )


@router.get("/caches/{i}/{j}", response_model=CacheSchema)
def get_cache(i: int, j: int, manager: SessionManager = Depends(get_session_manager)) -> CacheSchema:
    try:
        view = manager.get_cache(i, j)
    except UnknownCellLookupError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return serialize_cache(view)


@router.post("/caches/{i}/{j}/take", response_model=TransferResponse)
def take_coin(i: int, j: int, manager: SessionManager = Depends(get_session_manager)) -> TransferResponse:
    try:
        coin, view, snap = manager.take(i, j)
    except UnknownCellLookupError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except CacheOutOfReachError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc
    except EmptyCacheError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return TransferResponse(
        action="take",
        coin=serialize_coin(coin),
        cache=serialize_cache(view),
        player=serialize_player(snap),
        turn=snap.turn,
    )


@router.post("/caches/{i}/{j}/deposit", response_model=TransferResponse)
def deposit_coin(i: int, j: int, manager: SessionManager = Depends(get_session_manager)) -> TransferResponse:
    try:
        coin, view, snap = manager.deposit(i, j)
    except UnknownCellLookupError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except CacheOutOfReachError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc
    except EmptyInventoryError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return TransferResponse(
        action="deposit",
        coin=serialize_coin(coin),
        cache=serialize_cache(view),
        player=serialize_player(snap),
        turn=snap.turn,
    )
