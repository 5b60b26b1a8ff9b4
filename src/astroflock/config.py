"""Central configuration for Astroflock."""

from __future__ import annotations

from dataclasses import dataclass
import os


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class RuntimeFlags:
    show_actors: bool
    show_flock: bool
    log_level: str


@dataclass(frozen=True)
class WorldConfig:
    width: int
    height: int
    fps: int

    @property
    def fixed_dt(self) -> float:
        return 1.0 / self.fps

    @property
    def bounds(self) -> tuple[float, float]:
        return float(self.width), float(self.height)


SEPARATION_LAW_LINEAR = "linear"
SEPARATION_LAW_INVERSE_SQUARE = "inverse_square"
SEPARATION_LAWS = (SEPARATION_LAW_LINEAR, SEPARATION_LAW_INVERSE_SQUARE)
SEPARATION_INVERSE_SQUARE_GAIN = 1000.0


@dataclass(frozen=True)
class FlockConfig:
    """Tunable swarm settings.

    Separation must act over a strictly shorter radius than cohesion and
    alignment, otherwise the flock never forms.
    """

    boid_count: int = 100
    attractor_count: int = 8

    separation_distance: float = 40.0
    cohesion_distance: float = 200.0
    alignment_distance: float = 200.0

    separation_force: float = 10.15
    cohesion_force: float = 0.1
    alignment_force: float = 0.25
    separation_law: str = SEPARATION_LAW_LINEAR

    acceleration_limit: float = 60.0
    max_speed: float = 100.0
    min_speed: float | None = 50.0

    attractor_radius: float = 150.0
    attractor_force: float = 0.525

    spawn_extent: float = 100.0
    spawn_speed: float = 200.0

    def __post_init__(self):
        if self.boid_count < 0 or self.attractor_count < 0:
            raise ValueError(
                f"boid_count and attractor_count must be >= 0, got {self.boid_count}, {self.attractor_count}"
            )
        for name in ("separation_distance", "cohesion_distance", "alignment_distance", "acceleration_limit", "max_speed"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.min_speed is not None and not 0 <= self.min_speed <= self.max_speed:
            raise ValueError(f"min_speed must lie in [0, max_speed={self.max_speed}], got {self.min_speed}")
        if self.separation_distance >= min(self.cohesion_distance, self.alignment_distance):
            raise ValueError(
                "separation_distance must be smaller than cohesion_distance and alignment_distance. "
                f"separation={self.separation_distance}, cohesion={self.cohesion_distance}, "
                f"alignment={self.alignment_distance}"
            )
        if self.separation_law not in SEPARATION_LAWS:
            raise ValueError(f"separation_law must be one of {SEPARATION_LAWS}, got {self.separation_law!r}")

    @property
    def speed_band(self) -> tuple[float | None, float]:
        return self.min_speed, self.max_speed


FLAGS = RuntimeFlags(
    show_actors=_env_flag("ASTROFLOCK_SHOW_ACTORS", True),
    show_flock=_env_flag("ASTROFLOCK_SHOW_FLOCK", True),
    log_level=os.getenv("ASTROFLOCK_LOG_LEVEL", "INFO"),
)

WORLD = WorldConfig(
    width=800,
    height=800,
    fps=60,
)

FLOCK = FlockConfig()

# Runtime
FPS = WORLD.fps
MAX_STEPS_PER_FRAME = 5
EVENT_QUEUE_LIMIT = 256
WINDOW_TITLE = "Astroflock"

# Actor lifetimes: hit points for player/obstacles, seconds for projectiles
PLAYER_LIFE = 1.0
OBSTACLE_LIFE = 1.0
PROJECTILE_LIFE = 2.0
LIFE_EPSILON = 1e-9

# Collision radii
PLAYER_BOUNDING_RADIUS = 12.0
OBSTACLE_BOUNDING_RADIUS = 12.0
PROJECTILE_BOUNDING_RADIUS = 6.0

# Physics tuning
PLAYER_TURN_RATE = 3.0  # radians per second
PLAYER_THRUST = 100.0  # units per second squared
MAX_PHYSICS_VELOCITY = 250.0
PROJECTILE_SPEED = 200.0
PROJECTILE_ANGULAR_VELOCITY = 0.1  # radians per tick
MAX_OBSTACLE_VELOCITY = 50.0
PLAYER_SHOT_TIME = 0.5  # seconds between shots

# Waves
INITIAL_OBSTACLE_COUNT = 5
WAVE_BASE_OBSTACLES = 5
OBSTACLE_SPAWN_MIN_RADIUS = 100.0
OBSTACLE_SPAWN_MAX_RADIUS = 250.0

# Rendering
FONT_SIZE_BAR = 14
BB_HEIGHT = 26
UI_STATUS_SEPARATOR = "   /   "
BOID_DRAW_LENGTH = 10.0
FACING_TICK_LENGTH = 16.0

# Colors
COLOR_AQUA = (102, 212, 200)
COLOR_DEEP_TEAL = (38, 110, 105)
COLOR_CORAL = (244, 137, 120)
COLOR_SLATE_GRAY = (97, 101, 107)
COLOR_FOG_GRAY = (230, 231, 235)
COLOR_CHARCOAL = (28, 30, 36)
COLOR_NEAR_BLACK = (18, 18, 22)
COLOR_SOFT_WHITE = (238, 238, 242)
COLOR_AMBER = (255, 224, 130)
