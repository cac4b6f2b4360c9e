"""
Unit tests for the session state machine.
"""

import numpy as np
import pytest

from drift.engine.car import InputIntent
from drift.engine.controller import SessionController, SessionPhase

GAS = InputIntent(accelerate=True)


@pytest.fixture
def controller():
    return SessionController(1280, 720, rng=np.random.default_rng(0))


def test_starts_idle(controller):
    """A new controller is idle and ticks do nothing."""
    assert controller.phase is SessionPhase.IDLE
    assert controller.tick(1.0, GAS) is None
    assert controller.context.car.speed == 0.0


def test_start_then_tick(controller):
    """After start, ticks integrate the clamped elapsed time."""
    controller.start(10.0)
    assert controller.phase is SessionPhase.RUNNING

    result = controller.tick(10.02, GAS)
    assert result is not None
    assert result.dt == pytest.approx(0.02)
    assert controller.context.car.speed == pytest.approx(6.4)
    assert controller.last_result is result


def test_first_tick_after_long_wait_is_clamped(controller):
    """The first step after start never sees more than 0.04 s."""
    controller.start(0.0)
    result = controller.tick(3.0, GAS)

    assert result.dt == 0.04


def test_start_twice_keeps_clock(controller):
    """A second start is ignored and does not rewind the reference time."""
    controller.start(0.0)
    controller.tick(0.02, GAS)
    controller.start(5.0)

    assert controller.phase is SessionPhase.RUNNING
    assert controller.last_time == 0.02


def test_pause_freezes_and_resume_has_no_stale_dt(controller):
    """Paused ticks do nothing, and the first tick after resume uses a fresh dt."""
    controller.start(0.0)
    controller.tick(0.02, GAS)
    speed = controller.context.car.speed

    controller.toggle_pause()
    assert controller.phase is SessionPhase.PAUSED
    assert controller.tick(0.5, GAS) is None
    assert controller.tick(2.0, GAS) is None
    assert controller.context.car.speed == speed

    controller.toggle_pause()
    assert controller.phase is SessionPhase.RUNNING
    result = controller.tick(2.01, GAS)
    assert result.dt == pytest.approx(0.01)


def test_toggle_pause_when_idle_is_ignored(controller):
    controller.toggle_pause()
    assert controller.phase is SessionPhase.IDLE
    assert not controller.context.session.paused


def test_space_starts_then_toggles(controller):
    """SPACE starts an idle session, then toggles pause."""
    controller.space_pressed(0.0)
    assert controller.phase is SessionPhase.RUNNING

    controller.space_pressed(0.1)
    assert controller.phase is SessionPhase.PAUSED

    controller.space_pressed(0.2)
    assert controller.phase is SessionPhase.RUNNING


def test_reset_restores_initial_state(controller):
    """Reset returns to idle with a fresh car, zero score and no marks."""
    context = controller.context
    controller.start(0.0)
    context.car.x, context.car.y = 640.0, 210.0
    context.car.heading = 0.0
    context.car.speed = 400.0
    now = 0.0
    for _ in range(5):
        now += 0.02
        controller.tick(now, InputIntent(steer_right=True))
    assert context.session.score > 0
    assert len(context.trail) > 0

    controller.reset(now)

    assert controller.phase is SessionPhase.IDLE
    assert controller.last_result is None
    car = controller.context.car
    assert (car.x, car.y) == (640, 160)
    assert car.heading == pytest.approx(np.pi / 2)
    assert car.speed == 0.0
    assert not car.is_drifting
    session = controller.context.session
    assert session.score == 0.0
    assert session.drift_timer == 0.0
    assert not session.drift_active
    assert not session.paused
    assert len(controller.context.trail) == 0


def test_reset_from_paused(controller):
    controller.start(0.0)
    controller.toggle_pause()
    controller.reset()

    assert controller.phase is SessionPhase.IDLE


def test_resize_updates_track(controller):
    """Resizing recomputes the track without touching the car."""
    car = controller.context.car
    controller.resize(1920, 1080)

    assert controller.context.track.cx == 960
    assert controller.context.track.rx == 860
    assert controller.context.car is car
