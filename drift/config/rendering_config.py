"""
Rendering configuration for the drift game.

This module centralizes window size, frame rate, palette and HUD layout used
by the pygame renderer and the human play script.
"""

from dataclasses import dataclass, field


@dataclass
class VideoConfig:
    """Window and frame rate settings."""
    WINDOW_W: int = 1280  # Initial window width (pixels)
    WINDOW_H: int = 720  # Initial window height (pixels)
    FPS: int = 50  # Target frames per second


@dataclass
class TrackColors:
    """Track palette (RGB)."""
    BACKGROUND: tuple = (31, 31, 31)
    SHOULDER: tuple = (34, 34, 34)
    ROAD: tuple = (59, 59, 59)
    INFIELD: tuple = (16, 19, 22)
    LANE: tuple = (255, 255, 255)
    LANE_ALPHA: int = 38  # ~0.15 opacity
    LANE_WIDTH: int = 2
    DASH_LENGTH: float = 18.0
    DASH_GAP: float = 12.0
    DASH_SCROLL_RATE: float = 50.0  # Dash offset scroll (px/s)


@dataclass
class CarColors:
    """Car body palette (RGB / RGBA)."""
    SHADOW: tuple = (3, 3, 3, 89)
    BODY: tuple = (230, 230, 230)
    ROOF: tuple = (191, 191, 191)
    WINDOW: tuple = (12, 12, 12)
    WHEEL: tuple = (32, 32, 32)
    STRIPE: tuple = (196, 18, 46)
    WHEEL_STEER_ANGLE: float = 0.15  # Front wheel visual angle per unit steer (rad)


@dataclass
class SkidColors:
    """Skid mark appearance."""
    COLOR: tuple = (8, 8, 8)
    MAX_ALPHA: float = 0.25  # Mark opacity at full life


@dataclass
class HudConfig:
    """HUD layout and text."""
    FONT_SIZE: int = 24
    TEXT_COLOR: tuple = (230, 237, 243)
    MUTED_COLOR: tuple = (154, 166, 178)
    PANEL_COLOR: tuple = (0, 0, 0, 140)
    BUTTON_COLOR: tuple = (48, 54, 61)
    BUTTON_HOVER_COLOR: tuple = (58, 65, 73)
    BUTTON_W: int = 110
    BUTTON_H: int = 30
    PADDING: int = 10
    START_LABEL: str = "Start"
    PAUSE_LABEL: str = "Pause"
    RESUME_LABEL: str = "Resume"
    RESET_LABEL: str = "Reset"


@dataclass
class RenderingConfig:
    """
    Complete rendering configuration combining all rendering parameter groups.

    Usage:
        config = RenderingConfig()
        print(config.video.WINDOW_W)  # 1280
        print(config.skids.MAX_ALPHA)  # 0.25
    """
    video: VideoConfig = field(default_factory=VideoConfig)
    track: TrackColors = field(default_factory=TrackColors)
    car: CarColors = field(default_factory=CarColors)
    skids: SkidColors = field(default_factory=SkidColors)
    hud: HudConfig = field(default_factory=HudConfig)


def get_rendering_config():
    """Return a fresh RenderingConfig with default values."""
    return RenderingConfig()


DEFAULT_RENDERING_CONFIG = RenderingConfig()
