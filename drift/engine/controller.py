"""
Session controller: the Idle / Running / Paused state machine.

The controller owns a SimulationContext and is driven by an external tick
source (the play script's frame loop, or an environment's step()). It never
schedules anything itself: each tick() receives the current clock reading
and the sampled input, and decides whether the physics step runs.
"""

from __future__ import annotations

from enum import Enum

import numpy as np

from drift.config.physics_config import PhysicsConfig
from drift.engine.car import InputIntent
from drift.engine.physics import StepResult, clamp_dt, update
from drift.engine.session import SimulationContext


class SessionPhase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


class SessionController:
    """
    Start / pause / reset control around one simulation.

    Args:
        width, height: Initial viewport size
        config: PhysicsConfig (defaults to PhysicsConfig())
        rng: numpy Generator for skid width jitter
        verbose: Print state transitions

    Usage:
        controller = SessionController(1280, 720)
        controller.start(now=time.perf_counter())
        while playing:
            controller.tick(time.perf_counter(), intent)
    """

    def __init__(
        self,
        width: float,
        height: float,
        config: PhysicsConfig | None = None,
        rng: np.random.Generator | None = None,
        verbose: bool = False,
    ) -> None:
        self.context = SimulationContext(width, height, config, rng)
        self.verbose = verbose
        self.last_time = 0.0
        self.last_result: StepResult | None = None

    @property
    def phase(self) -> SessionPhase:
        session = self.context.session
        if not session.running:
            return SessionPhase.IDLE
        if session.paused:
            return SessionPhase.PAUSED
        return SessionPhase.RUNNING

    def start(self, now: float) -> None:
        """Idle -> Running. Ignored once the session is running."""
        if self.context.session.running:
            return
        self.context.session.running = True
        self.context.session.paused = False
        self.last_time = now
        if self.verbose:
            print("Session started")

    def toggle_pause(self) -> None:
        """Running <-> Paused. Ignored while idle."""
        session = self.context.session
        if not session.running:
            return
        session.paused = not session.paused
        if self.verbose:
            print("Paused" if session.paused else "Resumed")

    def space_pressed(self, now: float) -> None:
        """Start when idle, otherwise toggle pause."""
        if not self.context.session.running:
            self.start(now)
        else:
            self.toggle_pause()

    def reset(self, now: float = 0.0) -> None:
        """Any -> Idle, with car, score and skid trail reinitialised."""
        self.context.reset()
        self.last_time = now
        self.last_result = None
        if self.verbose:
            print("Session reset")

    def resize(self, width: float, height: float) -> None:
        """Recompute the track for a new viewport size."""
        self.context.resize(width, height)

    def tick(self, now: float, intent: InputIntent) -> StepResult | None:
        """
        Handle one frame.

        Args:
            now: Monotonic clock reading in seconds
            intent: Controls sampled for this frame

        Returns:
            StepResult if the physics step ran, else None
        """
        phase = self.phase
        if phase is SessionPhase.IDLE:
            return None

        if phase is SessionPhase.PAUSED:
            # Keep the reference current so resuming does not apply a stale dt
            self.last_time = now
            return None

        dt = clamp_dt(now - self.last_time, self.context.config.timing.MAX_DT)
        self.last_time = now
        result = update(self.context, intent, dt)
        self.last_result = result

        if self.verbose and result.collided:
            print(f"Collision! score={self.context.session.score:.0f}")
        elif self.verbose and result.drift_bonus > 0:
            print(f"Drift bonus +{result.drift_bonus:.0f}")
        return result
