"""Arcade shooter physics and boid swarm simulation core."""

__version__ = "0.1.0"
