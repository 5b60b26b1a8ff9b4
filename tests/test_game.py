import pytest

from astroflock.config import FlockConfig, WorldConfig
from astroflock.core import ActorKind, InputState, ProgressiveWavePolicy, SimulationEvent, create_obstacle
from astroflock.game import BOID_KIND, FixedTimestep, GameSession
from astroflock.runtime import Vec2

SMALL_FLOCK = FlockConfig(boid_count=6, attractor_count=1)


def make_session(**kwargs):
    kwargs.setdefault("initial_obstacles", 0)
    kwargs.setdefault("seed", 99)
    return GameSession(flock_config=SMALL_FLOCK, **kwargs)


def add_obstacle(session, x, y):
    obstacle = create_obstacle()
    obstacle.position = Vec2(x, y)
    session.actors.obstacles.append(obstacle)
    return obstacle


def run_until_hit(session, max_ticks=20):
    fire = InputState(fire=True)
    reports = []
    for _ in range(max_ticks):
        reports.append(session.step(fire))
        if session.score:
            break
    return reports


def test_fire_is_rate_limited_by_shot_timeout():
    session = make_session()
    fire = InputState(fire=True)

    events = []
    for _ in range(45):
        events.extend(session.step(fire).events)

    assert events.count(SimulationEvent.SHOT_FIRED) == 2


def test_hit_scores_and_reports_destroyed_obstacle():
    session = make_session()
    add_obstacle(session, 0.0, 30.0)

    reports = run_until_hit(session)

    assert session.score == 1
    assert reports[-1].hits == 1
    assert SimulationEvent.OBSTACLE_DESTROYED in reports[-1].events
    assert session.actors.obstacles == []


def test_cleared_wave_advances_level_once_with_hold_policy():
    session = make_session()
    add_obstacle(session, 0.0, 30.0)
    run_until_hit(session)

    for _ in range(10):
        session.step(InputState())

    assert session.level == 1
    assert session.actors.are_obstacles_empty()


def test_cleared_wave_refills_with_progressive_policy():
    session = make_session(wave_policy=ProgressiveWavePolicy(base=2))
    add_obstacle(session, 0.0, 30.0)

    run_until_hit(session)

    assert session.level == 1
    assert len(session.actors.obstacles) == 3


def test_empty_start_counts_as_cleared_wave():
    session = make_session(wave_policy=ProgressiveWavePolicy(base=5), seed=1)

    session.step(InputState())

    assert session.level == 1
    assert len(session.actors.obstacles) == 6

    for _ in range(120):
        session.step(InputState())

    assert session.level == 1
    assert not session.actors.are_obstacles_empty()


def test_empty_start_with_hold_policy_advances_level_once():
    session = make_session()

    for _ in range(30):
        session.step(InputState())

    assert session.level == 1
    assert session.actors.are_obstacles_empty()


def test_player_collision_ends_game_until_restart():
    session = make_session()
    add_obstacle(session, 5.0, 0.0)

    report = session.step(InputState())
    frames = session.frame_count

    assert report.game_over
    assert SimulationEvent.PLAYER_DESTROYED in report.events
    assert session.step(InputState()).game_over
    assert session.frame_count == frames

    session.restart()
    assert not session.game_over
    assert session.score == 0
    assert not session.actors.is_player_dead()


def test_step_moves_the_flock():
    session = make_session()
    before = session.flock.positions.copy()

    session.step(InputState())

    assert (session.flock.positions != before).any()


def test_entities_lists_live_actors_and_boids():
    session = make_session(initial_obstacles=3)

    kinds = [entity.kind for entity in session.entities()]

    assert kinds.count(ActorKind.PLAYER) == 1
    assert kinds.count(ActorKind.OBSTACLE) == 3
    assert kinds.count(BOID_KIND) == SMALL_FLOCK.boid_count


def test_advance_runs_whole_fixed_steps():
    session = GameSession(
        world=WorldConfig(width=800, height=800, fps=4),
        flock_config=SMALL_FLOCK,
        initial_obstacles=0,
        seed=1,
    )

    assert len(session.advance(0.6, InputState())) == 2
    assert len(session.advance(0.2, InputState())) == 1
    assert session.frame_count == 3


def test_fixed_timestep_drops_backlog_past_step_cap():
    clock = FixedTimestep(0.25, max_steps=5)

    assert clock.consume(10.0) == 5
    assert clock.accumulator == 0.0
    assert clock.consume(0.1) == 0


@pytest.mark.parametrize("dt,max_steps", [(0.0, 5), (-1.0, 5), (0.1, 0)])
def test_fixed_timestep_rejects_bad_settings(dt, max_steps):
    with pytest.raises(ValueError):
        FixedTimestep(dt, max_steps=max_steps)
