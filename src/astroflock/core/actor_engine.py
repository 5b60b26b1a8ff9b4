"""Newtonian physics, wrapping and collisions for ship, projectiles and obstacles.

Positions are in world units (pixels) with the origin at the screen center
and +Y pointing up. Speeds are capped so small actors cannot tunnel through
each other between ticks.
"""

from __future__ import annotations

import logging
import math
import random
from typing import Iterator

from astroflock.config import (
    INITIAL_OBSTACLE_COUNT,
    LIFE_EPSILON,
    MAX_OBSTACLE_VELOCITY,
    MAX_PHYSICS_VELOCITY,
    OBSTACLE_SPAWN_MAX_RADIUS,
    OBSTACLE_SPAWN_MIN_RADIUS,
    PLAYER_THRUST,
    PLAYER_TURN_RATE,
    PROJECTILE_SPEED,
)
from astroflock.core.actor import Actor, InputState, create_obstacle, create_player, create_projectile
from astroflock.core.events import EventQueue, SimulationEvent
from astroflock.core.waves import HoldWavePolicy, WavePolicy
from astroflock.runtime import Vec2, clamp_length, random_vector, vector_from_angle, wrap_position

logger = logging.getLogger(__name__)


class ActorSimulationEngine:
    """Owns the player, its projectiles and the obstacle field."""

    def __init__(
        self,
        initial_obstacles: int = INITIAL_OBSTACLE_COUNT,
        rng: random.Random | None = None,
        wave_policy: WavePolicy | None = None,
    ):
        self.rng = rng or random.Random()
        self.wave_policy = wave_policy or HoldWavePolicy()
        self.events = EventQueue()

        self.player = create_player()
        self.projectiles: list[Actor] = []
        self.obstacles: list[Actor] = []
        self.spawn_obstacles(
            initial_obstacles,
            self.player.position,
            OBSTACLE_SPAWN_MIN_RADIUS,
            OBSTACLE_SPAWN_MAX_RADIUS,
        )

    def reset_player(self):
        self.player = create_player()

    def update(self, dt: float, input_state: InputState, screen_width: float, screen_height: float):
        self._apply_player_input(input_state, dt)

        bounds = (float(screen_width), float(screen_height))
        for actor in [self.player, *self.projectiles, *self.obstacles]:
            self._integrate(actor, dt, bounds)
            if actor.kind.has_timed_life:
                self._age(actor, dt)

    @staticmethod
    def _age(actor: Actor, dt: float):
        actor.life -= dt
        if actor.life < LIFE_EPSILON:
            actor.life = min(actor.life, 0.0)

    def _apply_player_input(self, input_state: InputState, dt: float):
        player = self.player
        player.facing += dt * PLAYER_TURN_RATE * input_state.x_axis
        if input_state.y_axis > 0:
            thrust = vector_from_angle(player.facing) * PLAYER_THRUST
            player.velocity = player.velocity + thrust * dt

    @staticmethod
    def _integrate(actor: Actor, dt: float, bounds: tuple[float, float]):
        actor.velocity = clamp_length(actor.velocity, MAX_PHYSICS_VELOCITY)
        actor.position = wrap_position(actor.position + actor.velocity * dt, bounds)
        # Spin is a fixed per-tick step, independent of dt.
        actor.facing += actor.angular_velocity

    def fire_projectile(self) -> Actor:
        """Launch a projectile from the player's nose. Callers rate-limit."""
        projectile = create_projectile()
        projectile.position = self.player.position
        projectile.facing = self.player.facing
        projectile.velocity = vector_from_angle(projectile.facing) * PROJECTILE_SPEED
        self.projectiles.append(projectile)
        self.events.emit(SimulationEvent.SHOT_FIRED)
        return projectile

    def resolve_collisions(self) -> int:
        """Zero the life of every overlapping pair and return the projectile hit count.

        Only actors alive when the call starts take part, so one obstacle can
        absorb several projectiles in the same tick and a repeated call
        without movement reports no new hits.
        """
        obstacles = [obstacle for obstacle in self.obstacles if obstacle.is_alive]
        projectiles = [projectile for projectile in self.projectiles if projectile.is_alive]
        player_alive = self.player.is_alive

        hits = 0
        destroyed = 0
        for obstacle in obstacles:
            if player_alive and obstacle.overlaps(self.player):
                self.player.life = 0.0
            obstacle_hit = False
            for projectile in projectiles:
                if obstacle.overlaps(projectile):
                    projectile.life = 0.0
                    obstacle.life = 0.0
                    obstacle_hit = True
                    hits += 1
            if obstacle_hit:
                destroyed += 1

        if player_alive and not self.player.is_alive:
            logger.debug("Player destroyed at (%.1f, %.1f)", self.player.position.x, self.player.position.y)
            self.events.emit(SimulationEvent.PLAYER_DESTROYED)
        self.events.emit(SimulationEvent.OBSTACLE_DESTROYED, destroyed)
        return hits

    def reclaim_dead(self):
        projectile_count = len(self.projectiles)
        obstacle_count = len(self.obstacles)
        self.projectiles = [projectile for projectile in self.projectiles if projectile.is_alive]
        self.obstacles = [obstacle for obstacle in self.obstacles if obstacle.is_alive]
        reclaimed = projectile_count - len(self.projectiles) + obstacle_count - len(self.obstacles)
        if reclaimed:
            logger.debug("Reclaimed %d dead actors", reclaimed)

    def is_player_dead(self) -> bool:
        return self.player.life <= 0

    def are_obstacles_empty(self) -> bool:
        return not self.obstacles

    def spawn_obstacles(self, count: int, exclusion_center: Vec2, min_radius: float, max_radius: float) -> list[Actor]:
        """Scatter obstacles in a ring around `exclusion_center`.

        Positions may fall outside the world; they wrap on the next update,
        so they must not be wrapped here.
        """
        if max_radius <= min_radius:
            raise ValueError(f"max_radius must exceed min_radius, got min={min_radius}, max={max_radius}")
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")

        spawned = []
        for _ in range(count):
            obstacle = create_obstacle()
            angle = self.rng.random() * 2.0 * math.pi
            distance = self.rng.random() * (max_radius - min_radius) + min_radius
            obstacle.position = exclusion_center + vector_from_angle(angle) * distance
            obstacle.velocity = random_vector(MAX_OBSTACLE_VELOCITY, self.rng)
            spawned.append(obstacle)
        self.obstacles.extend(spawned)
        if spawned:
            logger.debug("Spawned %d obstacles", len(spawned))
        return spawned

    def on_wave_cleared(self, level: int) -> list[Actor]:
        plan = self.wave_policy.on_wave_cleared(level)
        logger.info("Wave cleared: level=%d next_wave=%d", level, plan.count)
        return self.spawn_obstacles(plan.count, self.player.position, plan.min_radius, plan.max_radius)

    def entities(self) -> Iterator[Actor]:
        """Live actors, player first, for rendering collaborators."""
        if self.player.is_alive:
            yield self.player
        for projectile in self.projectiles:
            if projectile.is_alive:
                yield projectile
        for obstacle in self.obstacles:
            if obstacle.is_alive:
                yield obstacle

    def drain_events(self) -> list[SimulationEvent]:
        return self.events.drain()
