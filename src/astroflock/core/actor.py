"""Entity model for the player ship, projectiles and obstacles."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from astroflock.config import (
    OBSTACLE_BOUNDING_RADIUS,
    OBSTACLE_LIFE,
    PLAYER_BOUNDING_RADIUS,
    PLAYER_LIFE,
    PROJECTILE_ANGULAR_VELOCITY,
    PROJECTILE_BOUNDING_RADIUS,
    PROJECTILE_LIFE,
)
from astroflock.runtime import Vec2


class ActorKind(Enum):
    PLAYER = "player"
    OBSTACLE = "obstacle"
    PROJECTILE = "projectile"

    @property
    def has_timed_life(self) -> bool:
        return self is ActorKind.PROJECTILE


@dataclass
class Actor:
    """A simulated point entity with a circular hit box.

    `life` is hit points for players and obstacles and seconds left to live
    for projectiles. Either way the actor is alive while it is positive.
    """

    kind: ActorKind
    position: Vec2 = field(default_factory=lambda: Vec2(0.0, 0.0))
    facing: float = 0.0
    velocity: Vec2 = field(default_factory=lambda: Vec2(0.0, 0.0))
    angular_velocity: float = 0.0
    bounding_radius: float = 0.0
    life: float = 0.0

    @property
    def is_alive(self) -> bool:
        return self.life > 0

    def overlaps(self, other: "Actor") -> bool:
        offset = self.position - other.position
        reach = self.bounding_radius + other.bounding_radius
        return offset.x * offset.x + offset.y * offset.y < reach * reach


@dataclass
class InputState:
    """Device-independent controls for one tick; axes lie in [-1, 1]."""

    x_axis: float = 0.0
    y_axis: float = 0.0
    fire: bool = False

    @classmethod
    def neutral(cls) -> "InputState":
        return cls()


def create_player() -> Actor:
    return Actor(
        kind=ActorKind.PLAYER,
        bounding_radius=PLAYER_BOUNDING_RADIUS,
        life=PLAYER_LIFE,
    )


def create_obstacle() -> Actor:
    return Actor(
        kind=ActorKind.OBSTACLE,
        bounding_radius=OBSTACLE_BOUNDING_RADIUS,
        life=OBSTACLE_LIFE,
    )


def create_projectile() -> Actor:
    return Actor(
        kind=ActorKind.PROJECTILE,
        angular_velocity=PROJECTILE_ANGULAR_VELOCITY,
        bounding_radius=PROJECTILE_BOUNDING_RADIUS,
        life=PROJECTILE_LIFE,
    )
