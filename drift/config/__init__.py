"""
Configuration module for the drift game.

This module provides centralized configuration for:
- Shared constants (constants.py)
- Physics parameters (physics_config.py)
- Rendering settings (rendering_config.py)
"""

from .constants import *
from .physics_config import (
    PhysicsConfig,
    CarParams,
    SteeringParams,
    DriftParams,
    ScoringParams,
    CollisionParams,
    SkidParams,
    TimingParams,
    TrackParams,
    get_physics_config,
    DEFAULT_PHYSICS_CONFIG,
)
from .rendering_config import (
    RenderingConfig,
    VideoConfig,
    TrackColors,
    CarColors,
    SkidColors,
    HudConfig,
    get_rendering_config,
    DEFAULT_RENDERING_CONFIG,
)

__all__ = [
    # From constants.py (imported via *)
    'OBS_DIM',
    'ACTION_DIM',
    'DEFAULT_ENV_FPS',
    'DEFAULT_MAX_EPISODE_STEPS',
    'DRIFT_TIMER_NORMALIZATION',
    'SPEED_DISPLAY_SCALE',
    'DEFAULT_LOG_INTERVAL',
    # Physics config
    'PhysicsConfig',
    'CarParams',
    'SteeringParams',
    'DriftParams',
    'ScoringParams',
    'CollisionParams',
    'SkidParams',
    'TimingParams',
    'TrackParams',
    'get_physics_config',
    'DEFAULT_PHYSICS_CONFIG',
    # Rendering config
    'RenderingConfig',
    'VideoConfig',
    'TrackColors',
    'CarColors',
    'SkidColors',
    'HudConfig',
    'get_rendering_config',
    'DEFAULT_RENDERING_CONFIG',
]
