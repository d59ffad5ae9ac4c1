"""GET /api/v1/config: expose game configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from geocoin.api.dependencies import get_session_manager
from geocoin.api.schemas import GameConfigResponse, PointSchema
from geocoin.api.session_manager import SessionManager

router = APIRouter()


@router.get("/config", response_model=GameConfigResponse)
def get_config(
    manager: SessionManager = Depends(get_session_manager),
) -> GameConfigResponse:
    cfg = manager.config
    return GameConfigResponse(
        origin=PointSchema(lat=cfg.origin_lat, lng=cfg.origin_lng),
        gameplay_zoom_level=cfg.gameplay_zoom_level,
        tile_degrees=cfg.tile_degrees,
        neighborhood_size=cfg.neighborhood_size,
        visibility_radius=cfg.visibility_radius,
        world_seed=cfg.world_seed,
        cache_spawn_probability=cfg.cache_spawn_probability,
        coin_thresholds=list(cfg.coin_thresholds),
    )
