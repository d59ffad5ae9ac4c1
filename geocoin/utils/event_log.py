"""Thread-safe ring buffer of game events exposed via the API."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass

from geocoin.core.enums import EventCategory


@dataclass(frozen=True, slots=True)
class GameEvent:
    """A single entry in the session event feed."""

    turn: int
    category: EventCategory
    message: str
    cell: tuple[int, int] | None = None  # (i, j) of the cache involved, if any


class EventLog:
    """Bounded event log. Writers append; readers snapshot a slice.

    The oldest events are dropped once *maxlen* is reached.
    """

    __slots__ = ("_buffer", "_lock")

    def __init__(self, maxlen: int = 500) -> None:
        self._buffer: deque[GameEvent] = deque(maxlen=maxlen)
        self._lock = threading.Lock()

    def append(self, event: GameEvent) -> None:
        with self._lock:
            self._buffer.append(event)

    def since_turn(self, turn: int) -> list[GameEvent]:
        """Return all events with turn >= *turn*."""
        with self._lock:
            return [e for e in self._buffer if e.turn >= turn]

    def latest(self, count: int = 50) -> list[GameEvent]:
        """Return the *count* most recent events."""
        with self._lock:
            items = list(self._buffer)
        return items[-count:] if count > 0 else []

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)
