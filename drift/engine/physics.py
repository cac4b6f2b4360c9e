"""
Arcade drift physics and scoring.

One call to update() advances a SimulationContext by one frame:

1. Longitudinal dynamics (throttle, brake/reverse, coasting friction)
2. Steering rate from speed and direction
3. Drift classification (steering while fast)
4. Heading integration, amplified by slip
5. Position integration along the heading
6. Skid marks and drift score
7. Track boundary collision (bounce and penalty)
8. Skid trail ageing

The model is intentionally simple: velocity always points along the heading,
so a "drift" is an over-rotation of the heading rather than a true sideways
slide. Every quantity that could diverge is clamped, so update() never
raises.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from drift.config.physics_config import CarParams, DriftParams, PhysicsConfig, SteeringParams
from drift.engine.car import InputIntent, TractionState
from drift.engine.session import SimulationContext


@dataclass
class StepResult:
    """
    What happened during one physics step.

    Attributes:
        dt: Effective (clamped) timestep
        drifting: Car was classified as drifting
        scoring: Drift was fast enough to leave marks and earn points
        collided: Car left the road and bounced
        drift_bonus: Completion bonus awarded this step
        score_delta: Score after minus score before
    """
    dt: float
    drifting: bool = False
    scoring: bool = False
    collided: bool = False
    drift_bonus: float = 0.0
    score_delta: float = 0.0


def clamp_dt(dt: float, max_dt: float = 0.04) -> float:
    """
    Clamp an elapsed time to [0, max_dt].

    The lower bound goes beyond a plain min(dt, max_dt): a negative dt from
    clock skew becomes a zero-length step instead of running time backwards.
    """
    return min(max_dt, max(0.0, dt))


def apply_longitudinal(speed: float, intent: InputIntent, dt: float, car: CarParams) -> float:
    """
    Throttle, brake or coast, then clamp to the speed range.

    Coasting friction pulls speed toward zero and stops there.
    """
    if intent.accelerate:
        speed += car.ACCEL * dt
    elif intent.brake:
        speed -= car.BRAKE * dt
    elif speed > 0:
        speed = max(0.0, speed - car.FRICTION * dt)
    else:
        speed = min(0.0, speed + car.FRICTION * dt)

    return max(car.min_speed, min(car.MAX_SPEED, speed))


def steer_rate(speed: float, intent: InputIntent, car: CarParams, steering: SteeringParams) -> float:
    """
    Signed angular rate requested by the steering input (rad/s).

    Steering gets stronger with speed (up to SPEED_FACTOR_RATIO of top speed)
    and weaker in reverse.
    """
    direction = intent.steer_direction
    if direction == 0:
        return 0.0

    speed_factor = min(1.0, abs(speed) / (car.MAX_SPEED * steering.SPEED_FACTOR_RATIO))
    base = car.STEER_SPEED * (1.0 if speed >= 0 else car.REVERSE_STEER_RATIO)
    return direction * base * (steering.STEER_BASE + steering.STEER_GAIN * speed_factor)


def classify_traction(steering_active: bool, speed: float, max_speed: float, drift: DriftParams) -> TractionState:
    """Drifting iff steering while |speed| exceeds the drift threshold."""
    if steering_active and abs(speed) > max_speed * drift.DRIFT_SPEED_RATIO:
        return TractionState.DRIFTING
    return TractionState.GRIPPING


def update(context: SimulationContext, intent: InputIntent, dt: float) -> StepResult:
    """
    Advance the simulation by one frame.

    Args:
        context: Simulation to mutate in place
        intent: Player controls sampled for this frame
        dt: Elapsed time in seconds (clamped to TimingParams.MAX_DT)

    Returns:
        StepResult describing the frame
    """
    config: PhysicsConfig = context.config
    car = context.car
    session = context.session
    params = config.car

    dt = clamp_dt(dt, config.timing.MAX_DT)
    result = StepResult(dt=dt)
    score_before = session.score

    car.speed = apply_longitudinal(car.speed, intent, dt, params)

    steer = steer_rate(car.speed, intent, params, config.steering)
    # Both keys held cancel visually, though the physics lets right win
    car.steer_visual = int(intent.steer_right) - int(intent.steer_left)

    car.traction_state = classify_traction(intent.steering, car.speed, params.MAX_SPEED, config.drift)
    traction = car.traction(config.drift)
    result.drifting = car.is_drifting

    # Low traction over-rotates the car relative to the requested rate
    car.heading += steer * dt * (1.0 + (1.0 - traction))

    dx = math.cos(car.heading) * car.speed * dt
    dy = math.sin(car.heading) * car.speed * dt
    car.x += dx
    car.y += dy

    if car.is_drifting and abs(car.speed) > params.MAX_SPEED * config.drift.SKID_SPEED_RATIO:
        offset = params.LENGTH * config.drift.SKID_OFFSET_RATIO
        context.trail.add(car.x - math.cos(car.heading) * offset, car.y - math.sin(car.heading) * offset)
        session.drift_timer += dt
        session.drift_active = True
        session.score += dt * config.scoring.DRIFT_POINTS_PER_SECOND
        result.scoring = True
    else:
        if session.drift_active:
            result.drift_bonus = float(math.floor(session.drift_timer * config.scoring.DRIFT_BONUS_PER_SECOND))
            session.score += result.drift_bonus
        session.end_drift()

    if not context.track.contains(car.x, car.y):
        collision = config.collision
        car.x -= dx * collision.BOUNCE_FACTOR
        car.y -= dy * collision.BOUNCE_FACTOR
        car.speed *= collision.RESTITUTION
        context.trail.add(car.x, car.y, life=collision.SKID_LIFE)
        session.score = max(0.0, session.score - config.scoring.COLLISION_PENALTY)
        session.end_drift()
        result.collided = True

    context.trail.tick(dt)

    result.score_delta = session.score - score_before
    return result
