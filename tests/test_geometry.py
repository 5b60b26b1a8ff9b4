import math
import random

import numpy as np
import pytest

from astroflock.runtime import (
    Vec2,
    angle_from_vector,
    clamp_length,
    clamp_row_lengths,
    normalize_or_zero,
    random_vector,
    row_lengths,
    scale_rows_to_length,
    vector_from_angle,
    world_to_screen,
    wrap_position,
    wrap_positions,
)


def test_vector_from_angle_measures_from_positive_y():
    up = vector_from_angle(0.0)
    right = vector_from_angle(math.pi / 2)

    assert (up.x, up.y) == pytest.approx((0.0, 1.0))
    assert (right.x, right.y) == pytest.approx((1.0, 0.0))


@pytest.mark.parametrize("angle", [-2.5, -1.0, 0.0, 0.3, 1.7, 3.0])
def test_angle_from_vector_inverts_vector_from_angle(angle):
    assert angle_from_vector(vector_from_angle(angle)) == pytest.approx(angle)


def test_random_vector_stays_below_max_magnitude():
    rng = random.Random(7)
    for _ in range(200):
        vector = random_vector(50.0, rng)
        assert math.hypot(vector.x, vector.y) < 50.0


def test_world_to_screen_flips_y_and_moves_origin():
    center = world_to_screen(800, 600, Vec2(0.0, 0.0))
    top_left = world_to_screen(800, 600, Vec2(-400.0, 300.0))

    assert (center.x, center.y) == pytest.approx((400.0, 300.0))
    assert (top_left.x, top_left.y) == pytest.approx((0.0, 0.0))


def test_wrap_position_is_noop_inside_bounds():
    position = Vec2(120.0, -250.0)
    wrapped = wrap_position(position, (800.0, 600.0))

    assert (wrapped.x, wrapped.y) == (120.0, -250.0)


def test_wrap_position_reenters_on_opposite_edge():
    wrapped = wrap_position(Vec2(410.0, -305.0), (800.0, 600.0))

    assert (wrapped.x, wrapped.y) == pytest.approx((-390.0, 295.0))


def test_wrap_position_always_lands_in_bounds():
    rng = random.Random(3)
    bounds = (800.0, 600.0)
    for _ in range(500):
        position = Vec2(rng.uniform(-5000, 5000), rng.uniform(-5000, 5000))
        wrapped = wrap_position(position, bounds)
        assert -400.0 <= wrapped.x <= 400.0
        assert -300.0 <= wrapped.y <= 300.0


def test_wrap_positions_matches_scalar_wrap():
    rng = np.random.default_rng(11)
    positions = rng.uniform(-3000, 3000, size=(100, 2))
    bounds = (800.0, 600.0)

    wrapped = wrap_positions(positions, bounds)

    for row, original in zip(wrapped, positions):
        expected = wrap_position(Vec2(*original), bounds)
        assert tuple(row) == pytest.approx((expected.x, expected.y))


def test_clamp_length_only_shrinks_long_vectors():
    short = clamp_length(Vec2(3.0, 4.0), 10.0)
    long = clamp_length(Vec2(30.0, 40.0), 10.0)

    assert (short.x, short.y) == (3.0, 4.0)
    assert (long.x, long.y) == pytest.approx((6.0, 8.0))


def test_clamp_length_keeps_direction_at_cap():
    clamped = clamp_length(Vec2(0.0, -500.0), 250.0)

    assert (clamped.x, clamped.y) == pytest.approx((0.0, -250.0))


def test_normalize_or_zero_handles_zero_vector():
    zero = normalize_or_zero(Vec2(0.0, 0.0))

    assert (zero.x, zero.y) == (0.0, 0.0)


def test_array_helpers_never_produce_nan():
    vectors = np.array([[0.0, 0.0], [3.0, 4.0], [0.0, -2.0]])

    scaled = scale_rows_to_length(vectors, 5.0)
    clamped = clamp_row_lengths(vectors, 1.0)

    assert not np.isnan(scaled).any()
    assert row_lengths(scaled).tolist() == pytest.approx([0.0, 5.0, 5.0])
    assert row_lengths(clamped).tolist() == pytest.approx([0.0, 1.0, 1.0])
