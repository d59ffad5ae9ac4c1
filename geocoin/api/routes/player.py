"""GET /api/v1/player and POST /api/v1/player/move/{direction}."""

from __future__ import annotations

from enum import Enum

from fastapi import APIRouter, Depends

from geocoin.api.dependencies import get_session_manager
from geocoin.api.routes.state import serialize_player
from geocoin.api.schemas import PlayerSchema
from geocoin.api.session_manager import SessionManager
from geocoin.core.enums import Direction

router = APIRouter()


class MoveDirection(str, Enum):
    north = "north"
    east = "east"
    south = "south"
    west = "west"


@router.get("/player", response_model=PlayerSchema)
def get_player(manager: SessionManager = Depends(get_session_manager)) -> PlayerSchema:
    return serialize_player(manager.get_snapshot())


@router.post("/player/move/{direction}", response_model=PlayerSchema)
def move_player(
    direction: MoveDirection,
    manager: SessionManager = Depends(get_session_manager),
) -> PlayerSchema:
    snap = manager.move(Direction[direction.name.upper()])
    return serialize_player(snap)
