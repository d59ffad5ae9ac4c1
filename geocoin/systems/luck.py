"""Deterministic hash-based luck oracle using xxhash.

The world is a pure function of its keys: whether cell (i, j) hosts a cache
and how many coins it starts with depend ONLY on the key string and the
world seed, never on visit order.

Formula: luck(key) = (xxh64(key, seed) >> 11) / 2**53
"""

from __future__ import annotations

import math

import xxhash

from geocoin.core.enums import LuckTag
from geocoin.core.models import Cell

# Top 53 bits of the digest map exactly onto a double in [0, 1).
_SPAN = 1 << 53


def luck_key(cell: Cell, tag: LuckTag = LuckTag.CACHE) -> str:
    """Build the oracle key for *cell*, e.g. ``"2,3"`` or ``"2,3,initialValue"``."""
    if tag.value:
        return f"{cell.key},{tag.value}"
    return cell.key


def luck(key: str, seed: int = 0) -> float:
    """Return a deterministic float in [0.0, 1.0) for *key*."""
    return (xxhash.xxh64_intdigest(key.encode("utf-8"), seed) >> 11) / _SPAN


def coins_for_point_value(point_value: int, thresholds: tuple[int, ...]) -> int:
    """Count the thresholds that *point_value* strictly exceeds."""
    return sum(1 for t in thresholds if point_value > t)


class SpawnOracle:
    """Stateless spawn-decision policy on top of :func:`luck`.

    Each call is a pure function of (seed, cell, tag); the oracle holds
    only its tunables.
    """

    __slots__ = ("_seed", "_probability", "_thresholds")

    def __init__(
        self,
        seed: int = 0,
        cache_spawn_probability: float = 0.1,
        coin_thresholds: tuple[int, ...] = (0, 33, 66),
    ) -> None:
        self._seed = seed
        self._probability = cache_spawn_probability
        self._thresholds = tuple(coin_thresholds)

    @property
    def thresholds(self) -> tuple[int, ...]:
        return self._thresholds

    def luck(self, key: str) -> float:
        return luck(key, self._seed)

    def should_spawn_cache(self, cell: Cell) -> bool:
        return self.luck(luck_key(cell, LuckTag.CACHE)) < self._probability

    def point_value(self, cell: Cell) -> int:
        """Integer percentage in [0, 100) drawn for the cell's initial value."""
        return math.floor(self.luck(luck_key(cell, LuckTag.INITIAL_VALUE)) * 100)

    def initial_coin_count(self, cell: Cell) -> int:
        return coins_for_point_value(self.point_value(cell), self._thresholds)
