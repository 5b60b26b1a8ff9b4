"""Boid swarm with separation, cohesion, alignment and point attractors.

State is kept as parallel numpy arrays: row `i` of `positions`,
`velocities` and `accelerations` always describes the same boid. Every
neighbor force in a tick is computed from the previous tick's arrays
before any boid moves.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Sequence

import numpy as np

from astroflock.config import (
    FLOCK,
    SEPARATION_INVERSE_SQUARE_GAIN,
    SEPARATION_LAW_INVERSE_SQUARE,
    FlockConfig,
)
from astroflock.runtime import (
    Vec2,
    angle_from_vector,
    clamp_row_lengths,
    row_lengths,
    scale_rows_to_length,
    wrap_positions,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Boid:
    """Read-only view of one swarm member."""

    position: Vec2
    velocity: Vec2
    acceleration: Vec2

    @property
    def heading(self) -> float:
        return angle_from_vector(self.velocity)


@dataclass(frozen=True)
class Attractor:
    position: Vec2
    radius: float
    force_magnitude: float


def _vec(row: np.ndarray) -> Vec2:
    return Vec2(float(row[0]), float(row[1]))


class FlockingSimulationEngine:
    def __init__(self, config: FlockConfig = FLOCK, rng: np.random.Generator | None = None):
        self.config = config
        self.rng = rng or np.random.default_rng()

        self.positions = np.zeros((0, 2))
        self.velocities = np.zeros((0, 2))
        self.accelerations = np.zeros((0, 2))

        self.attractor_positions = np.zeros((0, 2))
        self.attractor_radii = np.zeros(0)
        self.attractor_forces = np.zeros(0)

    def __len__(self) -> int:
        return len(self.positions)

    def populate(self, bounds: Sequence[float]):
        for _ in range(self.config.boid_count):
            self.spawn_random()
        for _ in range(self.config.attractor_count):
            self.spawn_attractor(bounds)
        logger.debug("Flock populated: boids=%d attractors=%d", len(self), len(self.attractor_radii))

    def spawn_boid(self, position: Sequence[float], velocity: Sequence[float]) -> int:
        self.positions = np.vstack([self.positions, np.asarray(position, dtype=np.float64)])
        self.velocities = np.vstack([self.velocities, np.asarray(velocity, dtype=np.float64)])
        self.accelerations = np.vstack([self.accelerations, np.zeros(2)])
        return len(self.positions) - 1

    def spawn_random(self) -> int:
        extent = self.config.spawn_extent
        speed = self.config.spawn_speed
        position = self.rng.random(2) * extent
        velocity = self.rng.random(2) * (2.0 * speed) - speed
        return self.spawn_boid(position, velocity)

    def spawn_attractor(
        self,
        bounds: Sequence[float],
        position: Sequence[float] | None = None,
        radius: float | None = None,
        force: float | None = None,
    ) -> int:
        if position is None:
            extent = np.asarray(bounds, dtype=np.float64)
            position = self.rng.random(2) * extent - extent / 2.0
        self.attractor_positions = np.vstack(
            [self.attractor_positions, np.asarray(position, dtype=np.float64)]
        )
        self.attractor_radii = np.append(self.attractor_radii, self.config.attractor_radius if radius is None else radius)
        self.attractor_forces = np.append(self.attractor_forces, self.config.attractor_force if force is None else force)
        return len(self.attractor_radii) - 1

    def update(self, dt: float, bounds: Sequence[float]):
        if not len(self):
            return
        positions = self.positions.copy()
        velocities = self.velocities.copy()

        nudged = velocities - self._attraction(positions)
        accelerations = clamp_row_lengths(self._neighbor_forces(positions, velocities), self.config.acceleration_limit)

        nudged = self._clamp_speed(nudged + accelerations * dt)
        self.accelerations = accelerations
        self.velocities = nudged
        self.positions = wrap_positions(positions + nudged * dt, bounds)

    def _attraction(self, positions: np.ndarray) -> np.ndarray:
        """Velocity change pulling each boid toward attractors whose radius it is inside."""
        if not len(self.attractor_radii):
            return np.zeros_like(positions)
        offsets = positions[:, None, :] - self.attractor_positions[None, :, :]
        distances = np.linalg.norm(offsets, axis=2)
        active = (distances < self.attractor_radii[None, :]) & (distances > 0)
        scale = np.divide(
            self.attractor_forces[None, :],
            distances,
            out=np.zeros_like(distances),
            where=active,
        )
        return (offsets * scale[:, :, None]).sum(axis=1)

    def _separation_weights(self, distances_sq: np.ndarray, mask: np.ndarray) -> np.ndarray:
        config = self.config
        if config.separation_law == SEPARATION_LAW_INVERSE_SQUARE:
            return np.divide(
                SEPARATION_INVERSE_SQUARE_GAIN,
                distances_sq,
                out=np.zeros_like(distances_sq),
                where=mask & (distances_sq > 0),
            )
        distances = np.sqrt(distances_sq)
        weights = 1.0 - (config.separation_distance - distances) / config.separation_distance
        return np.where(mask, weights, 0.0)

    def _neighbor_forces(self, positions: np.ndarray, velocities: np.ndarray) -> np.ndarray:
        config = self.config
        count = len(positions)

        # offsets[b, t] = position[b] - position[t]
        offsets = positions[:, None, :] - positions[None, :, :]
        distances_sq = np.einsum("ijk,ijk->ij", offsets, offsets)
        others = ~np.eye(count, dtype=bool)

        separating = others & (distances_sq < config.separation_distance ** 2)
        outside = others & ~separating
        cohering = outside & (distances_sq < config.cohesion_distance ** 2)
        aligning = outside & (distances_sq < config.alignment_distance ** 2)

        weights = self._separation_weights(distances_sq, separating)
        separation = (offsets * weights[:, :, None]).sum(axis=1)
        cohesion = (offsets * cohering[:, :, None]).sum(axis=1)
        alignment = aligning.astype(np.float64) @ velocities

        return (
            scale_rows_to_length(separation, config.separation_force)
            - scale_rows_to_length(cohesion, config.cohesion_force)
            + scale_rows_to_length(alignment, config.alignment_force)
        )

    def _clamp_speed(self, velocities: np.ndarray) -> np.ndarray:
        min_speed, max_speed = self.config.speed_band
        velocities = clamp_row_lengths(velocities, max_speed)
        if min_speed is None or min_speed == 0:
            return velocities

        speeds = row_lengths(velocities)
        slow = speeds < min_speed
        if not slow.any():
            return velocities
        # Stalled boids have no direction to keep; send them along +Y.
        stalled = slow & (speeds == 0)
        velocities = velocities.copy()
        velocities[stalled] = (0.0, 1.0)
        velocities[slow] = scale_rows_to_length(velocities[slow], min_speed)
        return velocities

    def boids(self) -> list[Boid]:
        return [
            Boid(_vec(position), _vec(velocity), _vec(acceleration))
            for position, velocity, acceleration in zip(self.positions, self.velocities, self.accelerations)
        ]

    def attractors(self) -> list[Attractor]:
        return [
            Attractor(_vec(position), float(radius), float(force))
            for position, radius, force in zip(self.attractor_positions, self.attractor_radii, self.attractor_forces)
        ]
