"""
Car kinematic state and player input.

The car is a point with a heading and a signed scalar speed. Traction and the
drift flag are not stored independently: both are views of a TractionState
that the physics step recomputes from scratch every frame.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from drift.config.physics_config import DriftParams


class TractionState(Enum):
    """Grip regime of the current frame."""
    GRIPPING = "gripping"
    DRIFTING = "drifting"


@dataclass(frozen=True)
class InputIntent:
    """
    Snapshot of the four player controls for one frame.

    Left and right may both be held; the physics step lets right win.
    """
    accelerate: bool = False
    brake: bool = False
    steer_left: bool = False
    steer_right: bool = False

    @property
    def steering(self) -> bool:
        """True if either steering control is held."""
        return self.steer_left or self.steer_right

    @property
    def steer_direction(self) -> int:
        """-1 for left, +1 for right, 0 for none (right overrides left)."""
        if self.steer_right:
            return 1
        if self.steer_left:
            return -1
        return 0

    @classmethod
    def from_action(cls, action: Sequence[float]) -> InputIntent:
        """
        Build an intent from a 4-element binary action.

        Args:
            action: [accelerate, brake, steer_left, steer_right], truthy = pressed
        """
        if len(action) != 4:
            raise ValueError(f"Expected 4 action components, got {len(action)}")
        accelerate, brake, left, right = (bool(a) for a in action)
        return cls(accelerate=accelerate, brake=brake, steer_left=left, steer_right=right)


@dataclass
class CarState:
    """
    Mutable kinematic state of the car.

    Attributes:
        x, y: Position in pixels
        heading: Yaw in radians, 0 = +x axis (screen y grows downward)
        speed: Signed speed along the heading (px/s), negative = reverse
        traction_state: Grip regime decided by the last physics step
        steer_visual: Right minus left input of the last step (-1, 0, +1), for rendering
    """
    x: float
    y: float
    heading: float = math.pi / 2
    speed: float = 0.0
    traction_state: TractionState = TractionState.GRIPPING
    steer_visual: int = 0

    @property
    def is_drifting(self) -> bool:
        return self.traction_state is TractionState.DRIFTING

    def traction(self, params: DriftParams | None = None) -> float:
        """Grip multiplier for the current traction state (1 = full grip)."""
        if params is None:
            params = DriftParams()
        if self.is_drifting:
            return params.DRIFT_TRACTION
        return params.GRIP_TRACTION

    def normalized_heading(self) -> float:
        """Heading wrapped to [-pi, pi]."""
        return math.atan2(math.sin(self.heading), math.cos(self.heading))
