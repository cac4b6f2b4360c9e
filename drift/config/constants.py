"""
Shared constants for the drift game and its environment wrapper.

This module defines constants used across scripts, the gymnasium
environment and telemetry, providing a single source of truth for values
that are not physics parameters.
"""

from __future__ import annotations

# ===========================
# Environment
# ===========================

OBS_DIM: int = 8  # x, y, cos(heading), sin(heading), speed, traction, drifting, drift_timer
ACTION_DIM: int = 4  # accelerate, brake, steer_left, steer_right

DEFAULT_ENV_FPS: int = 50  # Fixed simulation rate for the env (dt = 1/50 s)
DEFAULT_MAX_EPISODE_STEPS: int = 3000  # 60 s of driving at 50 FPS
DRIFT_TIMER_NORMALIZATION: float = 5.0  # Drift timer is divided by this in observations

# ===========================
# Display
# ===========================

SPEED_DISPLAY_SCALE: float = 240.0  # Displayed "km/h" at MAX_SPEED

# ===========================
# Telemetry
# ===========================

DEFAULT_LOG_INTERVAL: int = 1  # Log every N frames
