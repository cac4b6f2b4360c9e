"""
2D top-down drift game.

Packages:
- drift.config: physics, rendering and shared constants
- drift.engine: track, skid trail, car state, physics step and session control
- drift.env: gymnasium environment
- drift.utils: display helpers, pygame renderer, keyboard mapping, telemetry
"""

__version__ = "0.1.0"
