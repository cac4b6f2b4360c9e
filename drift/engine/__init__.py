"""
Simulation core for the drift game.

This package contains the state, the physics step and the session state
machine. Nothing here depends on pygame or gymnasium.
"""

from .car import CarState, InputIntent, TractionState
from .controller import SessionController, SessionPhase
from .physics import StepResult, clamp_dt, update
from .session import SessionState, SimulationContext
from .skid_trail import SkidMark, SkidTrail
from .track import TrackGeometry

__all__ = [
    'CarState',
    'InputIntent',
    'TractionState',
    'SessionController',
    'SessionPhase',
    'StepResult',
    'clamp_dt',
    'update',
    'SessionState',
    'SimulationContext',
    'SkidMark',
    'SkidTrail',
    'TrackGeometry',
]
