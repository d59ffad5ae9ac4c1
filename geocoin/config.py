"""Game configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class GameConfig:
    """Immutable configuration for a game session."""

    # Map origin (Oakes College classroom)
    origin_lat: float = 36.98949379578401
    origin_lng: float = -122.06277128548504
    gameplay_zoom_level: int = 19

    # Grid
    tile_degrees: float = 1e-4
    neighborhood_size: int = 8      # Half-width of the spawn scan around the player
    visibility_radius: int = 8      # Chebyshev reach for visible / interactive caches

    # Spawning
    world_seed: int = 0
    cache_spawn_probability: float = 0.1
    # A cache gets one coin per threshold its point value (0..99) exceeds
    coin_thresholds: tuple[int, ...] = field(default=(0, 33, 66))

    # Logging
    log_level: str = "INFO"
    event_log_size: int = 500

    def __post_init__(self) -> None:
        if self.tile_degrees <= 0:
            raise ValueError(f"tile_degrees must be positive, got {self.tile_degrees}")
        if self.neighborhood_size < 0 or self.visibility_radius < 0:
            raise ValueError("neighborhood_size and visibility_radius must be non-negative")
        if not 0.0 <= self.cache_spawn_probability <= 1.0:
            raise ValueError(
                f"cache_spawn_probability must be in [0, 1], got {self.cache_spawn_probability}"
            )
        if list(self.coin_thresholds) != sorted(self.coin_thresholds):
            raise ValueError(f"coin_thresholds must be ascending, got {self.coin_thresholds}")
        if self.world_seed < 0:
            raise ValueError(f"world_seed must be non-negative, got {self.world_seed}")
        if self.event_log_size <= 0:
            raise ValueError("event_log_size must be positive")
