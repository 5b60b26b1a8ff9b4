"""Discrete simulation events reported to audio and scoring collaborators."""

from __future__ import annotations

from collections import deque
from enum import Enum

from astroflock.config import EVENT_QUEUE_LIMIT


class SimulationEvent(Enum):
    SHOT_FIRED = "shot_fired"
    OBSTACLE_DESTROYED = "obstacle_destroyed"
    PLAYER_DESTROYED = "player_destroyed"


class EventQueue:
    """Buffer of events raised since the last drain.

    Holds at most `limit` entries; when nobody drains it the oldest events
    are dropped first.
    """

    def __init__(self, limit: int = EVENT_QUEUE_LIMIT):
        if limit < 1:
            raise ValueError(f"limit must be >= 1, got {limit}")
        self._pending: deque[SimulationEvent] = deque(maxlen=limit)

    @property
    def limit(self) -> int:
        return self._pending.maxlen

    def emit(self, event: SimulationEvent, count: int = 1):
        self._pending.extend([event] * count)

    def drain(self) -> list[SimulationEvent]:
        drained = list(self._pending)
        self._pending.clear()
        return drained

    def __len__(self) -> int:
        return len(self._pending)
