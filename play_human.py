"""
Human-playable drift game with arcade-style keyboard controls.

This script uses Pygame to read the held keys every frame and drives the
session controller with the real frame time, so the physics sees the same
clamped dt it would in any other host.

Usage:
    python play_human.py

    # With telemetry logging (every frame)
    python play_human.py --log-telemetry

    # Custom log file and interval (every 5 frames)
    python play_human.py --log-telemetry --log-file my_session.csv --log-interval 5

Controls:
    - Gas:        W, Up Arrow
    - Brake:      S, Down Arrow (reverses once stopped)
    - Steering:   A/D, Left/Right
    - Start:      SPACE (SPACE again toggles pause)
    - Pause:      P
    - Reset:      R
    - Quit:       ESC
"""

import argparse
import time

import numpy as np
import pygame

from drift.config.constants import DEFAULT_LOG_INTERVAL
from drift.config.rendering_config import RenderingConfig
from drift.engine.controller import SessionController, SessionPhase
from drift.utils.controls import intent_from_keys
from drift.utils.display import format_score
from drift.utils.renderer import TrackRenderer
from drift.utils.telemetry import TelemetryLogger


def parse_args():
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description='Play the drift game')
    parser.add_argument('--fps', type=int, default=None,
                        help='Display FPS (default: from rendering config, 50)')
    parser.add_argument('--width', type=int, default=None,
                        help='Initial window width (default: 1280)')
    parser.add_argument('--height', type=int, default=None,
                        help='Initial window height (default: 720)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for skid mark jitter (default: random)')
    parser.add_argument('--verbose', action='store_true',
                        help='Print collisions and drift bonuses')

    # Telemetry logging options
    parser.add_argument('--log-telemetry', action='store_true',
                        help='Enable telemetry logging to CSV file')
    parser.add_argument('--log-file', type=str, default=None,
                        help='Output CSV filename (default: auto-generated with timestamp)')
    parser.add_argument('--log-interval', type=int, default=DEFAULT_LOG_INTERVAL,
                        help='Log every N frames (default: 1 = every frame)')
    return parser.parse_args()


def play_human(args):
    """Run the game loop until the window is closed."""
    render_config = RenderingConfig()
    width = args.width or render_config.video.WINDOW_W
    height = args.height or render_config.video.WINDOW_H
    fps = args.fps or render_config.video.FPS

    # Initialize Pygame
    pygame.init()
    pygame.font.init()
    screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
    pygame.display.set_caption("Drift")
    clock = pygame.time.Clock()

    renderer = TrackRenderer(render_config)
    controller = SessionController(
        width, height, rng=np.random.default_rng(args.seed), verbose=args.verbose
    )

    # Create telemetry logger if requested
    logger = None
    if args.log_telemetry:
        logger = TelemetryLogger(filename=args.log_file, log_interval=args.log_interval)
        print(f"✓ Telemetry logging enabled: {logger.filename}")
        print(f"  Log interval: every {args.log_interval} frame(s)")

    print("=" * 60)
    print("DRIFT - HUMAN PLAYER")
    print("=" * 60)
    print("\nKEYBOARD CONTROLS:")
    print("  - Gas:        W or Up Arrow")
    print("  - Brake:      S or Down Arrow")
    print("  - Steering:   A / D or Left / Right Arrow")
    print("  - Start:      SPACE (then SPACE or P to pause)")
    print("  - Reset:      R")
    print("  - Quit:       ESC")
    print("\nHold a turn at speed to drift; hitting the walls costs 40 points.")
    print("=" * 60)

    best_score = 0.0
    collisions = 0
    drift_time = 0.0
    start_wall = time.perf_counter()

    try:
        running = True
        while running:
            now = time.perf_counter()

            # --- Pygame Event Handling ---
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                    controller.resize(event.w, event.h)
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_SPACE:
                        controller.space_pressed(now)
                    elif event.key == pygame.K_p:
                        controller.toggle_pause()
                    elif event.key == pygame.K_r:
                        print(f"Resetting (score was {format_score(controller.context.session.score)})")
                        controller.reset(now)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    button = renderer.button_at(event.pos)
                    if button == "start":
                        controller.start(now)
                    elif button == "pause":
                        controller.toggle_pause()
                    elif button == "reset":
                        controller.reset(now)

            # --- Step Simulation ---
            intent = intent_from_keys(pygame.key.get_pressed())
            result = controller.tick(now, intent)

            if result is not None:
                best_score = max(best_score, controller.context.session.score)
                drift_time += result.dt if result.scoring else 0.0
                collisions += int(result.collided)
                if logger:
                    logger.log_frame(controller.context, intent, result)

            # --- Render ---
            renderer.draw(screen, controller.context, controller.phase, t=now - start_wall, intent=intent)
            pygame.display.flip()
            clock.tick(fps)

    except KeyboardInterrupt:
        print("\nInterrupted by user")
    finally:
        if logger:
            logger.close()
        pygame.quit()

    # Final statistics
    print("\n" + "=" * 60)
    print("GAME SUMMARY")
    print("=" * 60)
    print(f"Best score: {format_score(best_score)}")
    print(f"Time drifting: {drift_time:.1f}s")
    print(f"Wall hits: {collisions}")
    if controller.phase is not SessionPhase.IDLE:
        print(f"Final score: {format_score(controller.context.session.score)}")
    print("=" * 60)


def main():
    args = parse_args()
    play_human(args)


if __name__ == "__main__":
    main()
