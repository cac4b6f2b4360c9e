"""
Display utilities for the drift game.

This module provides shared helpers for turning simulation state into the
HUD strings shown on screen and printed by the scripts.
"""

import math

from drift.config.constants import SPEED_DISPLAY_SCALE


def format_intent(intent):
    """
    Format player controls for display.

    Args:
        intent: InputIntent

    Returns:
        Human-readable description, e.g. "LEFT + GAS"
    """
    if intent.steer_direction < 0:
        steer_desc = "LEFT"
    elif intent.steer_direction > 0:
        steer_desc = "RIGHT"
    else:
        steer_desc = "STRAIGHT"

    if intent.accelerate:
        pedal_desc = "GAS"
    elif intent.brake:
        pedal_desc = "BRAKE"
    else:
        pedal_desc = "COAST"

    return f"{steer_desc} + {pedal_desc}"


def get_display_speed(speed, max_speed):
    """
    Convert the signed car speed to the arcade "km/h" gauge.

    Args:
        speed: Car speed (px/s, may be negative)
        max_speed: Speed cap (px/s), shown as SPEED_DISPLAY_SCALE

    Returns:
        Non-negative integer gauge reading
    """
    return max(0, round(abs(speed) / max_speed * SPEED_DISPLAY_SCALE))


def format_score(score):
    """Score as shown on the HUD (whole points, rounded down)."""
    return str(math.floor(score))


def format_drift_timer(drift_timer):
    """Current drift duration, e.g. "1.4s"."""
    if drift_timer > 0:
        return f"{drift_timer:.1f}s"
    return "0.0s"
