"""2D geometry helpers for a centered, +Y-up world space.

Headings are measured from the +Y axis, so a facing of 0 points up and
positive angles turn clockwise on screen.
"""

from __future__ import annotations

import math
import random
from typing import Sequence

import numpy as np
from pyglet.math import Vec2


def vector_from_angle(angle: float) -> Vec2:
    """Unit vector for a heading in radians."""
    return Vec2(math.sin(angle), math.cos(angle))


def angle_from_vector(vector: Vec2) -> float:
    return math.atan2(vector.x, vector.y)


def random_vector(max_magnitude: float, rng: random.Random | None = None) -> Vec2:
    """Random direction with a magnitude drawn from [0, max_magnitude)."""
    rng = rng or random
    angle = rng.random() * 2.0 * math.pi
    magnitude = rng.random() * max_magnitude
    return vector_from_angle(angle) * magnitude


def world_to_screen(screen_width: float, screen_height: float, point: Vec2) -> Vec2:
    """Map world space (origin center, +Y up) to screen space (origin top-left, +Y down)."""
    width = float(screen_width)
    height = float(screen_height)
    return Vec2(point.x + width / 2.0, height - (point.y + height / 2.0))


def length_squared(vector: Vec2) -> float:
    return vector.x * vector.x + vector.y * vector.y


def normalize_or_zero(vector: Vec2) -> Vec2:
    norm_sq = length_squared(vector)
    if norm_sq == 0:
        return Vec2(0.0, 0.0)
    norm = math.sqrt(norm_sq)
    return Vec2(vector.x / norm, vector.y / norm)


def clamp_length(vector: Vec2, max_length: float) -> Vec2:
    """Rescale `vector` down to `max_length` if it is longer."""
    norm_sq = length_squared(vector)
    if norm_sq > max_length * max_length:
        return normalize_or_zero(vector) * max_length
    return vector


def _wrap_axis(value: float, extent: float) -> float:
    half = extent / 2.0
    if value > half:
        value -= extent * math.ceil((value - half) / extent)
    elif value < -half:
        value += extent * math.ceil((-half - value) / extent)
    return value


def wrap_position(position: Vec2, bounds: Sequence[float]) -> Vec2:
    """Fold a position back onto the torus spanned by `bounds` (width, height)."""
    width, height = bounds
    return Vec2(_wrap_axis(position.x, float(width)), _wrap_axis(position.y, float(height)))


# Array variants used by the swarm. Rows are vectors.


def wrap_positions(positions: np.ndarray, bounds: Sequence[float]) -> np.ndarray:
    extent = np.asarray(bounds, dtype=np.float64)
    half = extent / 2.0
    wrapped = np.where(positions > half, positions - extent * np.ceil((positions - half) / extent), positions)
    return np.where(wrapped < -half, wrapped + extent * np.ceil((-half - wrapped) / extent), wrapped)


def row_lengths(vectors: np.ndarray) -> np.ndarray:
    return np.sqrt(np.einsum("ij,ij->i", vectors, vectors))


def scale_rows_to_length(vectors: np.ndarray, length: float) -> np.ndarray:
    """Give every non-zero row the requested length; zero rows stay zero."""
    norms = row_lengths(vectors)[:, None]
    units = np.divide(vectors, norms, out=np.zeros_like(vectors), where=norms > 0)
    return units * length


def clamp_row_lengths(vectors: np.ndarray, max_length: float) -> np.ndarray:
    norms = row_lengths(vectors)
    over = norms > max_length
    if not over.any():
        return vectors
    clamped = vectors.copy()
    clamped[over] *= (max_length / norms[over])[:, None]
    return clamped
