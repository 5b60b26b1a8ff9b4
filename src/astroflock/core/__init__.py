"""Core simulation modules."""

from .actor import Actor, ActorKind, InputState, create_obstacle, create_player, create_projectile
from .actor_engine import ActorSimulationEngine
from .events import EventQueue, SimulationEvent
from .flock import Attractor, Boid, FlockingSimulationEngine
from .waves import HoldWavePolicy, ProgressiveWavePolicy, WavePlan, WavePolicy

__all__ = [
    "Actor",
    "ActorKind",
    "InputState",
    "create_obstacle",
    "create_player",
    "create_projectile",
    "ActorSimulationEngine",
    "EventQueue",
    "SimulationEvent",
    "Attractor",
    "Boid",
    "FlockingSimulationEngine",
    "HoldWavePolicy",
    "ProgressiveWavePolicy",
    "WavePlan",
    "WavePolicy",
]
