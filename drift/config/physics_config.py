"""
Physics configuration for the drift simulation.

This module centralizes every tunable scalar used by the physics update step
and provides a single source of truth for car handling, drift thresholds,
scoring, collision response, skid marks and track geometry.

Units are screen pixels and seconds.
"""

from dataclasses import dataclass, field


@dataclass
class CarParams:
    """
    Car handling parameters.
    """
    MAX_SPEED: float = 520.0  # Forward speed cap (px/s)
    ACCEL: float = 320.0  # Throttle acceleration (px/s^2)
    BRAKE: float = 420.0  # Brake / reverse deceleration (px/s^2)
    FRICTION: float = 220.0  # Coasting deceleration toward zero (px/s^2)
    STEER_SPEED: float = 2.6  # Baseline steering rate (rad/s)

    # Body dimensions (px)
    WIDTH: float = 36.0
    LENGTH: float = 64.0

    REVERSE_SPEED_RATIO: float = 0.5  # Reverse cap = -MAX_SPEED * ratio
    REVERSE_STEER_RATIO: float = 0.6  # Steering scaled down when reversing

    def __post_init__(self):
        for name in ("MAX_SPEED", "ACCEL", "BRAKE", "FRICTION", "STEER_SPEED", "WIDTH", "LENGTH"):
            if getattr(self, name) <= 0:
                raise ValueError(f"CarParams.{name} must be positive, got {getattr(self, name)}")

    @property
    def min_speed(self):
        """Most negative (reverse) speed allowed."""
        return -self.MAX_SPEED * self.REVERSE_SPEED_RATIO


@dataclass
class SteeringParams:
    """
    Steering effectiveness.

    steer = base * (STEER_BASE + STEER_GAIN * speed_factor), where
    speed_factor = min(1, |speed| / (MAX_SPEED * SPEED_FACTOR_RATIO)).
    Faster cars turn harder, which is what lets them break into a drift.
    """
    SPEED_FACTOR_RATIO: float = 0.45
    STEER_BASE: float = 0.8
    STEER_GAIN: float = 0.4


@dataclass
class DriftParams:
    """
    Drift classification and traction.

    Drifting is a pure function of (steering active, |speed|): there is no
    hysteresis and nothing is carried between frames.
    """
    DRIFT_SPEED_RATIO: float = 0.35  # Drift when |speed| > MAX_SPEED * ratio while steering
    SKID_SPEED_RATIO: float = 0.3  # Skid marks and scoring above MAX_SPEED * ratio
    DRIFT_TRACTION: float = 0.35  # Low grip while sliding
    GRIP_TRACTION: float = 0.92  # Near-full grip otherwise
    SKID_OFFSET_RATIO: float = 0.25  # Skid mark behind the car by LENGTH * ratio

    def __post_init__(self):
        for name in ("DRIFT_TRACTION", "GRIP_TRACTION"):
            value = getattr(self, name)
            if not 0.0 < value <= 1.0:
                raise ValueError(f"DriftParams.{name} must be in (0, 1], got {value}")


@dataclass
class ScoringParams:
    """Score accrual and penalties."""
    DRIFT_POINTS_PER_SECOND: float = 25.0  # Continuous reward while drifting
    DRIFT_BONUS_PER_SECOND: float = 10.0  # Completion bonus = floor(drift_timer * this)
    COLLISION_PENALTY: float = 40.0  # Subtracted on wall hit (score floored at 0)


@dataclass
class CollisionParams:
    """
    Boundary collision response.

    The car is pushed back by BOUNCE_FACTOR times its attempted displacement,
    which leaves it behind its pre-move position.
    """
    BOUNCE_FACTOR: float = 1.6
    RESTITUTION: float = -0.35  # speed *= RESTITUTION (flips sign and damps)
    SKID_LIFE: float = 0.8  # Life of the mark left at the impact point (s)


@dataclass
class SkidParams:
    """Skid trail lifecycle."""
    DEFAULT_LIFE: float = 1.2  # Life of a drift mark (s)
    MAX_MARKS: int = 1500  # Hard cap, oldest discarded first
    MIN_WIDTH: float = 6.0  # Mark width = MIN_WIDTH + U(0, 1) * WIDTH_JITTER
    WIDTH_JITTER: float = 6.0

    def __post_init__(self):
        if self.MAX_MARKS < 1:
            raise ValueError(f"SkidParams.MAX_MARKS must be >= 1, got {self.MAX_MARKS}")
        if self.DEFAULT_LIFE <= 0:
            raise ValueError(f"SkidParams.DEFAULT_LIFE must be positive, got {self.DEFAULT_LIFE}")


@dataclass
class TimingParams:
    """Frame timing."""
    MAX_DT: float = 0.04  # Longest step ever simulated (s)


@dataclass
class TrackParams:
    """
    Oval track geometry, derived from the viewport size.

    Outer radii: rx = max(MIN_RX, width/2 - MARGIN - EDGE_INSET),
                 ry = max(MIN_RY, height/2 - MARGIN - EDGE_INSET).
    Inner radii: outer radii minus INNER_OFFSET (the road width).
    """
    MARGIN: float = 60.0
    INNER_OFFSET: float = 220.0
    MIN_RX: float = 220.0
    MIN_RY: float = 140.0
    EDGE_INSET: float = 40.0
    MIN_INNER_RADIUS: float = 1.0  # Floor on |inner radius| (avoids a zero divisor)
    SPAWN_OFFSET_Y: float = 200.0  # Spawn above the centre by this much
    LANE_OFFSET: float = 10.0  # Dashed lane drawn slightly outside mid-road
    SHOULDER: float = 80.0  # Dark shoulder drawn outside the road

    def __post_init__(self):
        if self.INNER_OFFSET <= 0:
            raise ValueError(f"TrackParams.INNER_OFFSET must be positive, got {self.INNER_OFFSET}")
        if self.MIN_RX <= 0 or self.MIN_RY <= 0:
            raise ValueError("TrackParams.MIN_RX and MIN_RY must be positive")


@dataclass
class PhysicsConfig:
    """
    Complete physics configuration combining all parameter groups.

    Usage:
        config = PhysicsConfig()
        print(config.car.MAX_SPEED)  # 520.0
        print(config.drift.DRIFT_TRACTION)  # 0.35
    """
    car: CarParams = field(default_factory=CarParams)
    steering: SteeringParams = field(default_factory=SteeringParams)
    drift: DriftParams = field(default_factory=DriftParams)
    scoring: ScoringParams = field(default_factory=ScoringParams)
    collision: CollisionParams = field(default_factory=CollisionParams)
    skid: SkidParams = field(default_factory=SkidParams)
    timing: TimingParams = field(default_factory=TimingParams)
    track: TrackParams = field(default_factory=TrackParams)


def get_physics_config():
    """Return a fresh PhysicsConfig with default values."""
    return PhysicsConfig()


DEFAULT_PHYSICS_CONFIG = PhysicsConfig()
