"""Runtime helpers for Astroflock."""

from .geometry import (
    Vec2,
    angle_from_vector,
    clamp_length,
    clamp_row_lengths,
    length_squared,
    normalize_or_zero,
    random_vector,
    row_lengths,
    scale_rows_to_length,
    vector_from_angle,
    world_to_screen,
    wrap_position,
    wrap_positions,
)
from .helpers import configure_logging, format_run_context, log_run_context

__all__ = [
    "Vec2",
    "angle_from_vector",
    "clamp_length",
    "clamp_row_lengths",
    "length_squared",
    "normalize_or_zero",
    "random_vector",
    "row_lengths",
    "scale_rows_to_length",
    "vector_from_angle",
    "world_to_screen",
    "wrap_position",
    "wrap_positions",
    "configure_logging",
    "format_run_context",
    "log_run_context",
]
