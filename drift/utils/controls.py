"""
Keyboard mapping for human play.

Controls:
    - Gas:        W, Up Arrow
    - Brake:      S, Down Arrow
    - Steering:   A/D, Left/Right
"""

import pygame

from drift.engine.car import InputIntent

ACCELERATE_KEYS = (pygame.K_w, pygame.K_UP)
BRAKE_KEYS = (pygame.K_s, pygame.K_DOWN)
LEFT_KEYS = (pygame.K_a, pygame.K_LEFT)
RIGHT_KEYS = (pygame.K_d, pygame.K_RIGHT)


def intent_from_keys(keys):
    """
    Sample an InputIntent from a key-state mapping.

    Args:
        keys: Result of pygame.key.get_pressed() (or any mapping indexed by key code)

    Returns:
        InputIntent for this frame
    """
    def held(codes):
        return any(keys[code] for code in codes)

    return InputIntent(
        accelerate=held(ACCELERATE_KEYS),
        brake=held(BRAKE_KEYS),
        steer_left=held(LEFT_KEYS),
        steer_right=held(RIGHT_KEYS),
    )
