"""Fixed-timestep session wiring the actor and flocking engines together."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import random

import numpy as np

from astroflock.config import (
    FLOCK,
    INITIAL_OBSTACLE_COUNT,
    MAX_STEPS_PER_FRAME,
    PLAYER_SHOT_TIME,
    WORLD,
    FlockConfig,
    WorldConfig,
)
from astroflock.core import (
    ActorKind,
    ActorSimulationEngine,
    FlockingSimulationEngine,
    InputState,
    SimulationEvent,
    WavePolicy,
)
from astroflock.runtime import Vec2

logger = logging.getLogger(__name__)

BOID_KIND = "boid"


@dataclass(frozen=True)
class EntityView:
    """What a renderer needs to draw one live entity."""

    kind: ActorKind | str
    position: Vec2
    facing: float
    radius: float = 0.0


@dataclass(frozen=True)
class StepReport:
    hits: int = 0
    events: list[SimulationEvent] = field(default_factory=list)
    game_over: bool = False


class FixedTimestep:
    """Accumulates real elapsed time and hands out whole fixed steps."""

    def __init__(self, dt: float, max_steps: int = MAX_STEPS_PER_FRAME):
        if dt <= 0:
            raise ValueError(f"dt must be positive, got {dt}")
        if max_steps < 1:
            raise ValueError(f"max_steps must be >= 1, got {max_steps}")
        self.dt = dt
        self.max_steps = max_steps
        self.accumulator = 0.0

    def consume(self, elapsed: float) -> int:
        self.accumulator += max(0.0, elapsed)
        steps = int(self.accumulator // self.dt)
        if steps > self.max_steps:
            logger.debug("Dropping %d fixed steps behind real time", steps - self.max_steps)
            self.accumulator = 0.0
            return self.max_steps
        self.accumulator -= steps * self.dt
        return steps


class GameSession:
    """Score, level and fire-rate bookkeeping around both engines."""

    def __init__(
        self,
        world: WorldConfig = WORLD,
        flock_config: FlockConfig = FLOCK,
        *,
        wave_policy: WavePolicy | None = None,
        initial_obstacles: int = INITIAL_OBSTACLE_COUNT,
        seed: int | None = None,
    ):
        self.world = world
        self.dt = world.fixed_dt
        self.flock_config = flock_config
        self.wave_policy = wave_policy
        self.initial_obstacles = initial_obstacles
        self.seed = seed
        self.clock = FixedTimestep(self.dt)
        self.restart()

    @property
    def bounds(self) -> tuple[float, float]:
        return self.world.bounds

    def restart(self):
        self.actors = ActorSimulationEngine(
            initial_obstacles=self.initial_obstacles,
            rng=random.Random(self.seed),
            wave_policy=self.wave_policy,
        )
        self.flock = FlockingSimulationEngine(self.flock_config, rng=np.random.default_rng(self.seed))
        self.flock.populate(self.bounds)

        self.level = 0
        self.score = 0
        self.shot_timeout = 0.0
        self.game_over = False
        self.frame_count = 0
        # An empty starting field counts as a cleared wave on the first tick.
        self._wave_cleared = False

    def step(self, input_state: InputState) -> StepReport:
        """Advance one fixed tick: input, actors, collisions, reclamation, waves, flock."""
        if self.game_over:
            return StepReport(game_over=True)
        self.frame_count += 1

        self.shot_timeout -= self.dt
        if input_state.fire and self.shot_timeout < 0:
            self.shot_timeout = PLAYER_SHOT_TIME
            self.actors.fire_projectile()

        width, height = self.bounds
        self.actors.update(self.dt, input_state, width, height)
        hits = self.actors.resolve_collisions()
        self.score += hits
        self.actors.reclaim_dead()

        if self.actors.are_obstacles_empty():
            if not self._wave_cleared:
                self.level += 1
                self.actors.on_wave_cleared(self.level)
            self._wave_cleared = self.actors.are_obstacles_empty()
        else:
            self._wave_cleared = False

        if self.actors.is_player_dead():
            self.game_over = True
            logger.info("Game over: score=%d level=%d frames=%d", self.score, self.level, self.frame_count)

        self.flock.update(self.dt, self.bounds)
        return StepReport(hits=hits, events=self.actors.drain_events(), game_over=self.game_over)

    def advance(self, elapsed: float, input_state: InputState) -> list[StepReport]:
        return [self.step(input_state) for _ in range(self.clock.consume(elapsed))]

    def entities(self) -> list[EntityView]:
        views = [
            EntityView(actor.kind, actor.position, actor.facing, actor.bounding_radius)
            for actor in self.actors.entities()
        ]
        views.extend(EntityView(BOID_KIND, boid.position, boid.heading) for boid in self.flock.boids())
        return views
