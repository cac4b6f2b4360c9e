"""
Gymnasium environment for the drift game.

This package wraps the simulation core so agents can be trained or
evaluated against the same physics a human plays.
"""

from gymnasium.envs.registration import register

from .drift_env import DriftEnv

register(
    id="Drift-v0",
    entry_point="drift.env.drift_env:DriftEnv",
)

__all__ = ['DriftEnv']
