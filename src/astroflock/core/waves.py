"""Obstacle refill policies applied when a wave has been cleared."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from astroflock.config import OBSTACLE_SPAWN_MAX_RADIUS, OBSTACLE_SPAWN_MIN_RADIUS, WAVE_BASE_OBSTACLES


@dataclass(frozen=True)
class WavePlan:
    """How many obstacles to spawn, and in which ring around the player."""

    count: int
    min_radius: float = OBSTACLE_SPAWN_MIN_RADIUS
    max_radius: float = OBSTACLE_SPAWN_MAX_RADIUS

    def __post_init__(self):
        if self.count < 0:
            raise ValueError(f"WavePlan count must be >= 0, got {self.count}")
        if self.max_radius <= self.min_radius:
            raise ValueError(
                f"WavePlan max_radius must exceed min_radius, got min={self.min_radius}, max={self.max_radius}"
            )


class WavePolicy(Protocol):
    def on_wave_cleared(self, level: int) -> WavePlan: ...


class HoldWavePolicy:
    """Leave the field empty once every obstacle is gone."""

    def on_wave_cleared(self, level: int) -> WavePlan:
        return WavePlan(count=0)


class ProgressiveWavePolicy:
    """Spawn `level + base` obstacles for each new wave."""

    def __init__(self, base: int = WAVE_BASE_OBSTACLES):
        if base < 0:
            raise ValueError(f"base must be >= 0, got {base}")
        self.base = base

    def on_wave_cleared(self, level: int) -> WavePlan:
        return WavePlan(count=max(0, level + self.base))
