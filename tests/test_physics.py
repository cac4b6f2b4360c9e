"""
Unit tests for the physics step and scoring.

Track on the 1280x720 viewport: centre (640, 360), outer radii (540, 260),
inner radii (320, 40). The top edge of the road is at y = 100.
"""

import math

import numpy as np
import pytest

from drift.config.physics_config import CarParams, DriftParams, SteeringParams
from drift.engine.car import InputIntent, TractionState
from drift.engine.physics import (
    apply_longitudinal,
    classify_traction,
    clamp_dt,
    steer_rate,
    update,
)

COAST = InputIntent()
GAS = InputIntent(accelerate=True)
RIGHT = InputIntent(steer_right=True)
LEFT = InputIntent(steer_left=True)


def place_at_top_edge(context, speed=300.0, score=100.0):
    """Car just inside the top edge, driving straight up into the wall."""
    context.car.x = 640.0
    context.car.y = 101.0
    context.car.heading = -math.pi / 2
    context.car.speed = speed
    context.session.score = score
    return context


def test_clamp_dt():
    """Elapsed time is clamped into [0, 0.04]."""
    assert clamp_dt(0.01) == 0.01
    assert clamp_dt(0.04) == 0.04
    assert clamp_dt(1.0) == 0.04
    assert clamp_dt(-0.5) == 0.0
    assert clamp_dt(0.5, max_dt=0.1) == 0.1


def test_long_frame_is_clamped(straight_context):
    """A one-second hitch integrates only 0.04 s of throttle."""
    result = update(straight_context, GAS, 1.0)

    assert result.dt == 0.04
    assert straight_context.car.speed == pytest.approx(12.8)


def test_zero_dt_changes_nothing(straight_context):
    """A zero-length frame leaves the car where it was."""
    straight_context.car.speed = 100.0
    update(straight_context, GAS, 0.0)

    assert straight_context.car.speed == 100.0
    assert straight_context.car.x == 640.0
    assert straight_context.car.y == 210.0


def test_friction_pulls_toward_zero_without_overshoot():
    """Coasting never crosses zero in either direction."""
    car = CarParams()

    speed = 100.0
    previous = speed
    for _ in range(50):
        speed = apply_longitudinal(speed, COAST, 0.04, car)
        assert 0.0 <= speed <= previous
        previous = speed
    assert speed == 0.0

    assert apply_longitudinal(-5.0, COAST, 0.04, car) == 0.0
    assert apply_longitudinal(-100.0, COAST, 0.04, car) == pytest.approx(-91.2)


def test_speed_limits():
    """Forward speed caps at MAX_SPEED and reverse at half of it."""
    car = CarParams()

    assert apply_longitudinal(515.0, GAS, 0.04, car) == 520.0
    assert apply_longitudinal(-255.0, InputIntent(brake=True), 0.04, car) == -260.0
    assert car.min_speed == -260.0


def test_brake_reverses_from_rest():
    """Holding brake at rest starts reversing."""
    speed = apply_longitudinal(0.0, InputIntent(brake=True), 0.02, CarParams())
    assert speed == pytest.approx(-8.4)


def test_gas_wins_over_brake():
    """With both pedals held only the throttle applies."""
    both = InputIntent(accelerate=True, brake=True)
    assert apply_longitudinal(0.0, both, 0.02, CarParams()) == pytest.approx(6.4)


def test_right_overrides_left():
    """Holding both steering keys steers right."""
    both = InputIntent(steer_left=True, steer_right=True)
    car, steering = CarParams(), SteeringParams()

    assert both.steer_direction == 1
    assert steer_rate(300.0, both, car, steering) == steer_rate(300.0, RIGHT, car, steering)


def test_steer_visual_cancels_when_both_held(straight_context):
    """The wheels show right minus left, so both keys draw them straight."""
    straight_context.car.speed = 100.0

    update(straight_context, InputIntent(steer_left=True, steer_right=True), 0.02)
    assert straight_context.car.steer_visual == 0
    assert straight_context.car.heading > 0.0, "Physics still steers right"

    update(straight_context, LEFT, 0.02)
    assert straight_context.car.steer_visual == -1
    update(straight_context, RIGHT, 0.02)
    assert straight_context.car.steer_visual == 1
    update(straight_context, COAST, 0.02)
    assert straight_context.car.steer_visual == 0


def test_negative_dt_is_a_zero_step(straight_context):
    """Clock skew never integrates backwards."""
    straight_context.car.speed = 100.0
    result = update(straight_context, GAS, -0.5)

    assert result.dt == 0.0
    assert straight_context.car.speed == 100.0
    assert straight_context.car.x == 640.0


def test_steer_rate_scaling():
    """Steering grows with speed up to 45% of top speed and is weaker in reverse."""
    car, steering = CarParams(), SteeringParams()

    assert steer_rate(0.0, RIGHT, car, steering) == pytest.approx(2.6 * 0.8)
    assert steer_rate(400.0, RIGHT, car, steering) == pytest.approx(2.6 * 1.2)
    assert steer_rate(520.0, LEFT, car, steering) == pytest.approx(-2.6 * 1.2)
    assert steer_rate(300.0, COAST, car, steering) == 0.0

    forward = steer_rate(100.0, RIGHT, car, steering)
    reverse = steer_rate(-100.0, RIGHT, car, steering)
    assert reverse == pytest.approx(forward * 0.6)


def test_classify_traction_threshold():
    """Drift needs steering and more than 35% of top speed."""
    drift = DriftParams()

    assert classify_traction(True, 0.4 * 520, 520, drift) is TractionState.DRIFTING
    assert classify_traction(True, -0.4 * 520, 520, drift) is TractionState.DRIFTING
    assert classify_traction(True, 0.3 * 520, 520, drift) is TractionState.GRIPPING
    assert classify_traction(False, 520, 520, drift) is TractionState.GRIPPING


def test_drift_step_scores_and_leaves_mark(straight_context):
    """A fast steering frame drifts, scores 25 points/s and drops a skid mark."""
    straight_context.car.speed = 400.0
    result = update(straight_context, RIGHT, 0.02)

    assert result.drifting
    assert result.scoring
    assert not result.collided
    assert straight_context.car.traction(straight_context.config.drift) == 0.35
    assert straight_context.session.score == pytest.approx(0.5)
    assert result.score_delta == pytest.approx(0.5)
    assert straight_context.session.drift_timer == pytest.approx(0.02)
    assert straight_context.session.drift_active
    assert len(straight_context.trail) == 1

    # The mark sits a quarter car length behind the car
    car = straight_context.car
    mark = list(straight_context.trail)[0]
    assert mark.x == pytest.approx(car.x - math.cos(car.heading) * 16.0)
    assert mark.y == pytest.approx(car.y - math.sin(car.heading) * 16.0)


def test_drift_over_rotates_heading(straight_context):
    """Low traction amplifies the heading change by (2 - traction)."""
    straight_context.car.speed = 400.0
    update(straight_context, RIGHT, 0.02)

    expected = 2.6 * 1.2 * 0.02 * 1.65
    assert straight_context.car.heading == pytest.approx(expected)


def test_grip_heading_change(straight_context):
    """Slow steering keeps grip: heading changes by rate * dt * 1.08."""
    straight_context.car.speed = 100.0
    result = update(straight_context, RIGHT, 0.02)

    assert not result.drifting
    speed = 100.0 - 220.0 * 0.02
    rate = 2.6 * (0.8 + 0.4 * speed / 234.0)
    assert straight_context.car.heading == pytest.approx(rate * 0.02 * 1.08)
    assert straight_context.car.traction(straight_context.config.drift) == 0.92


def test_drift_end_awards_bonus(straight_context):
    """Ending a drift awards floor(10 * duration) and resets the timer."""
    session = straight_context.session
    session.drift_active = True
    session.drift_timer = 1.25
    straight_context.car.speed = 100.0

    result = update(straight_context, COAST, 0.02)

    assert result.drift_bonus == 12.0
    assert session.score == 12.0
    assert session.drift_timer == 0.0
    assert not session.drift_active


def test_no_bonus_without_active_drift(straight_context):
    """A gripping frame after no drift awards nothing."""
    straight_context.car.speed = 100.0
    result = update(straight_context, COAST, 0.02)

    assert result.drift_bonus == 0.0
    assert straight_context.session.score == 0.0


def test_collision_bounce_and_penalty(context):
    """Leaving the road bounces the car back, reverses speed and costs 40 points."""
    place_at_top_edge(context)
    result = update(context, COAST, 0.02)

    assert result.collided
    assert context.session.score == 60.0
    assert result.score_delta == -40.0
    assert context.car.speed == pytest.approx(-0.35 * 295.6)
    assert context.car.y == pytest.approx(95.088 + 1.6 * 5.912)
    assert context.car.x == pytest.approx(640.0)
    assert context.session.drift_timer == 0.0
    assert not context.session.drift_active

    marks = list(context.trail)
    assert len(marks) == 1
    assert marks[0].max_life == 0.8


def test_collision_score_floor(context):
    """The collision penalty never drives the score negative."""
    place_at_top_edge(context, score=10.0)
    result = update(context, COAST, 0.02)

    assert result.collided
    assert context.session.score == 0.0
    assert result.score_delta == -10.0


def test_collision_cancels_drift_without_bonus(context):
    """Hitting a wall mid-drift throws the drift away."""
    place_at_top_edge(context, score=100.0)
    context.session.drift_active = True
    context.session.drift_timer = 1.0

    result = update(context, LEFT, 0.02)

    assert result.drifting
    assert result.collided
    assert result.drift_bonus == 0.0
    assert context.session.drift_timer == 0.0
    assert not context.session.drift_active
    # 0.5 drift points earned, then the 40 point penalty
    assert context.session.score == pytest.approx(60.5)


def test_straight_acceleration_run(straight_context):
    """One second of throttle on the top straight reaches 320 px/s without hitting anything."""
    collided = False
    for _ in range(25):
        result = update(straight_context, GAS, 0.04)
        collided = collided or result.collided

    assert not collided
    assert straight_context.car.speed == pytest.approx(320.0)
    assert straight_context.car.x == pytest.approx(640.0 + 166.4)
    assert straight_context.car.y == pytest.approx(210.0)
    assert len(straight_context.trail) == 0


def test_random_inputs_keep_invariants(context):
    """Speed stays in range, score stays non-negative and the trail stays capped."""
    rng = np.random.default_rng(1234)
    car_params = context.config.car

    for _ in range(5000):
        a, b, l, r = (bool(v) for v in rng.integers(0, 2, size=4))
        intent = InputIntent(accelerate=a, brake=b, steer_left=l, steer_right=r)
        result = update(context, intent, float(rng.uniform(0.0, 0.1)))

        assert 0.0 <= result.dt <= 0.04
        assert car_params.min_speed <= context.car.speed <= car_params.MAX_SPEED
        assert context.session.score >= 0.0
        assert len(context.trail) <= 1500
        assert math.isfinite(context.car.x) and math.isfinite(context.car.y)
        if result.drifting:
            assert context.car.traction_state is TractionState.DRIFTING
