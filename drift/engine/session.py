"""
Session state and the simulation context.

SimulationContext bundles everything one simulation owns: the car, the score
and drift bookkeeping, the skid trail, the track and the physics config. It
is passed explicitly to the physics step, so several independent simulations
can run side by side (e.g. one per environment instance).
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from drift.config.physics_config import PhysicsConfig
from drift.engine.car import CarState
from drift.engine.skid_trail import SkidTrail
from drift.engine.track import TrackGeometry


@dataclass
class SessionState:
    """
    Score and run flags.

    Attributes:
        score: Cumulative score, never negative
        drift_timer: Duration of the current continuous drift (s)
        drift_active: Whether a drift was scoring on the last step
        running: Session has been started
        paused: Simulation time is frozen
    """
    score: float = 0.0
    drift_timer: float = 0.0
    drift_active: bool = False
    running: bool = False
    paused: bool = False

    def end_drift(self) -> None:
        """Forget the current drift without awarding anything."""
        self.drift_timer = 0.0
        self.drift_active = False


class SimulationContext:
    """
    Owner of all mutable simulation state.

    Args:
        width, height: Viewport size used to derive the track and spawn point
        config: PhysicsConfig (defaults to PhysicsConfig())
        rng: numpy Generator for skid width jitter
    """

    def __init__(
        self,
        width: float,
        height: float,
        config: PhysicsConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        if config is None:
            config = PhysicsConfig()
        self.config = config
        self.width = width
        self.height = height
        self.track = TrackGeometry.from_viewport(width, height, config.track)
        self.trail = SkidTrail(config.skid, rng)
        self.car = self._spawn_car()
        self.session = SessionState()

    def _spawn_car(self) -> CarState:
        x, y = self.track.spawn_point(self.config.track)
        return CarState(x=x, y=y)

    def reset(self) -> None:
        """Put car, session and trail back to their initial values."""
        self.car = self._spawn_car()
        self.session = SessionState()
        self.trail.clear()

    def resize(self, width: float, height: float) -> None:
        """Recompute the track for a new viewport size."""
        self.width = width
        self.height = height
        self.track = self.track.resize(width, height, self.config.track)
