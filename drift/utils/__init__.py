"""
Utility modules for the drift game.

This package provides shared utility functions for:
- Display utilities (format_intent, get_display_speed, format_score, format_drift_timer)

The pygame renderer, keyboard mapping and telemetry logger live in their own
modules and are imported directly:
    from drift.utils.renderer import TrackRenderer
    from drift.utils.controls import intent_from_keys
    from drift.utils.telemetry import TelemetryLogger
"""

from .display import format_intent, get_display_speed, format_score, format_drift_timer

__all__ = ['format_intent', 'get_display_speed', 'format_score', 'format_drift_timer']
