"""World systems: luck oracle and cache spawning."""

from geocoin.systems.luck import SpawnOracle, luck
from geocoin.systems.spawner import CacheSpawner

__all__ = ["CacheSpawner", "SpawnOracle", "luck"]
