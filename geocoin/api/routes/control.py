"""POST /api/v1/control/{action}: session lifecycle controls."""

from __future__ import annotations

from enum import Enum

from fastapi import APIRouter, Depends

from geocoin.api.dependencies import get_session_manager
from geocoin.api.schemas import ControlResponse
from geocoin.api.session_manager import SessionManager

router = APIRouter()


class ControlAction(str, Enum):
    reset = "reset"


@router.post("/control/{action}", response_model=ControlResponse)
def control(
    action: ControlAction,
    manager: SessionManager = Depends(get_session_manager),
) -> ControlResponse:
    match action:
        case ControlAction.reset:
            snap = manager.reset()
            return ControlResponse(status="ok", message="Session reset.", turn=snap.turn)
