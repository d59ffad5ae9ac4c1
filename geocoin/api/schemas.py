"""Pydantic response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field


# --- Geometry ---

class PointSchema(BaseModel):
    lat: float
    lng: float


class BoundsSchema(BaseModel):
    south: float
    west: float
    north: float
    east: float


# --- Coins & caches ---

class CoinSchema(BaseModel):
    label: str = Field(description='Permanent coin label, "i:j#serial"')
    origin_i: int
    origin_j: int
    serial: int


class CacheSchema(BaseModel):
    i: int
    j: int
    key: str
    bounds: BoundsSchema
    coin_count: int
    coins: list[CoinSchema] = Field(default_factory=list, description="Bottom to top of the stack")


class CacheListResponse(BaseModel):
    player_cell: tuple[int, int]
    caches: list[CacheSchema]


# --- Player ---

class PlayerSchema(BaseModel):
    position: PointSchema
    cell: tuple[int, int]
    coin_count: int
    coins: list[CoinSchema] = Field(default_factory=list, description="Oldest first; the last coin is deposited next")


class TransferResponse(BaseModel):
    action: str
    coin: CoinSchema
    cache: CacheSchema
    player: PlayerSchema
    turn: int


# --- Events ---

class EventSchema(BaseModel):
    turn: int
    category: str
    message: str
    cell: tuple[int, int] | None = None


# --- Full state ---

class SessionStateResponse(BaseModel):
    turn: int
    seed: int
    player: PlayerSchema
    caches: list[CacheSchema]
    known_cells: int
    total_minted: int
    total_coins: int
    recent_events: list[EventSchema] = Field(default_factory=list)


class ControlResponse(BaseModel):
    status: str
    message: str
    turn: int = 0


# --- Config ---

class GameConfigResponse(BaseModel):
    origin: PointSchema
    gameplay_zoom_level: int
    tile_degrees: float
    neighborhood_size: int
    visibility_radius: int
    world_seed: int
    cache_spawn_probability: float
    coin_thresholds: list[int]
