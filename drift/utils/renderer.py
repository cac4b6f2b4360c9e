"""
Pygame renderer for the drift game.

Reads a SimulationContext and draws the oval track, the skid trail, the car
and a HUD with Start / Pause / Reset buttons. The renderer never mutates the
simulation.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
import numpy.typing as npt
import pygame
from pygame import gfxdraw

from drift.config.rendering_config import RenderingConfig
from drift.engine.car import CarState, InputIntent
from drift.engine.controller import SessionPhase
from drift.engine.session import SimulationContext
from drift.engine.skid_trail import SkidTrail
from drift.engine.track import TrackGeometry
from drift.utils.display import format_drift_timer, format_intent, format_score, get_display_speed


def _ellipse_rect(cx: float, cy: float, rx: float, ry: float) -> pygame.Rect:
    return pygame.Rect(round(cx - rx), round(cy - ry), round(2 * rx), round(2 * ry))


class TrackRenderer:
    """
    Draw the simulation onto a pygame surface.

    Args:
        config: RenderingConfig (defaults to RenderingConfig())

    Usage:
        renderer = TrackRenderer()
        renderer.draw(screen, controller.context, phase=controller.phase, t=now)
        pygame.display.flip()
    """

    def __init__(self, config: RenderingConfig | None = None) -> None:
        if config is None:
            config = RenderingConfig()
        self.config = config
        self.font: pygame.font.Font | None = None
        self.buttons: dict[str, pygame.Rect] = {}

    def _get_font(self) -> pygame.font.Font:
        if self.font is None:
            pygame.font.init()
            self.font = pygame.font.Font(None, self.config.hud.FONT_SIZE)
        return self.font

    # ------------------------------------------------------------------
    # Track
    # ------------------------------------------------------------------

    def draw_track(self, surface: pygame.Surface, track: TrackGeometry, shoulder: float, t: float = 0.0) -> None:
        """Background, shoulder, road, infield and the scrolling lane dashes."""
        colors = self.config.track
        surface.fill(colors.BACKGROUND)

        pygame.draw.ellipse(
            surface, colors.SHOULDER, _ellipse_rect(track.cx, track.cy, track.rx + shoulder, track.ry + shoulder)
        )
        pygame.draw.ellipse(surface, colors.ROAD, _ellipse_rect(track.cx, track.cy, track.rx, track.ry))
        pygame.draw.ellipse(
            surface, colors.INFIELD, _ellipse_rect(track.cx, track.cy, track.inner_rx, track.inner_ry)
        )

        lane_rx, lane_ry = track.lane_radii()
        self._draw_dashed_ellipse(surface, track.cx, track.cy, lane_rx, lane_ry, t)

    def _draw_dashed_ellipse(self, surface: pygame.Surface, cx: float, cy: float, rx: float, ry: float, t: float) -> None:
        colors = self.config.track
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        color = (*colors.LANE, colors.LANE_ALPHA)

        # Sample the ellipse densely and walk along it, toggling dash/gap by arc length
        n = 720
        angles = np.linspace(0.0, 2.0 * math.pi, n + 1)
        xs = cx + rx * np.cos(angles)
        ys = cy + ry * np.sin(angles)

        period = colors.DASH_LENGTH + colors.DASH_GAP
        distance = (t * colors.DASH_SCROLL_RATE) % period
        for i in range(n):
            seg = math.hypot(xs[i + 1] - xs[i], ys[i + 1] - ys[i])
            if distance % period < colors.DASH_LENGTH:
                pygame.draw.line(
                    overlay, color, (xs[i], ys[i]), (xs[i + 1], ys[i + 1]), colors.LANE_WIDTH
                )
            distance += seg

        surface.blit(overlay, (0, 0))

    # ------------------------------------------------------------------
    # Skid marks
    # ------------------------------------------------------------------

    def draw_skids(self, surface: pygame.Surface, trail: SkidTrail) -> None:
        """Draw marks oldest first, each fading with its remaining life."""
        if len(trail) == 0:
            return
        skids = self.config.skids
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        for mark in trail:
            alpha = int(255 * skids.MAX_ALPHA * mark.alpha)
            if alpha <= 0:
                continue
            rect = _ellipse_rect(mark.x, mark.y, mark.width, mark.width * 0.5)
            pygame.draw.ellipse(overlay, (*skids.COLOR, alpha), rect)
        surface.blit(overlay, (0, 0))

    # ------------------------------------------------------------------
    # Car
    # ------------------------------------------------------------------

    def _draw_polygon(
        self,
        surface: pygame.Surface,
        poly: list[tuple[float, float]],
        color: Any,
        angle: float,
        translation: tuple[float, float],
    ) -> None:
        points = [pygame.math.Vector2(c).rotate_rad(angle) for c in poly]
        points = [(p[0] + translation[0], p[1] + translation[1]) for p in points]
        gfxdraw.aapolygon(surface, points, color)
        gfxdraw.filled_polygon(surface, points, color)

    @staticmethod
    def _rect(x0: float, y0: float, x1: float, y1: float) -> list[tuple[float, float]]:
        return [(x0, y0), (x1, y0), (x1, y1), (x0, y1)]

    def draw_car(self, surface: pygame.Surface, car: CarState, length: float, width: float) -> None:
        """
        Draw the car body, roof, windscreen, wheels and stripe.

        Local frame: +x points along the heading, +y to the car's right.
        Front wheels are turned with the last steering input.
        """
        colors = self.config.car
        pos = (car.x, car.y)
        angle = car.heading
        hl = length / 2
        hw = width / 2

        # Shadow sits slightly behind the body
        shadow = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        self._draw_polygon(
            shadow, self._rect(-hl - length * 0.1, -hw * 0.9, hl - length * 0.1, hw * 0.9),
            colors.SHADOW, angle, pos,
        )
        surface.blit(shadow, (0, 0))

        # Wheels under the body so only the tyre edges show
        wheel_l, wheel_w = 16.0, 6.0
        steer_angle = colors.WHEEL_STEER_ANGLE * car.steer_visual
        for wx, turned in ((length * 0.12, True), (-length * 0.28, False)):
            for wy in (-hw * 0.9, hw * 0.9):
                wheel = self._rect(-wheel_l / 2, -wheel_w / 2, wheel_l / 2, wheel_w / 2)
                if turned:
                    wheel = [tuple(pygame.math.Vector2(c).rotate_rad(steer_angle)) for c in wheel]
                wheel = [(c[0] + wx, c[1] + wy) for c in wheel]
                self._draw_polygon(surface, wheel, colors.WHEEL, angle, pos)

        self._draw_polygon(surface, self._rect(-hl, -hw, hl, hw), colors.BODY, angle, pos)
        self._draw_polygon(
            surface, self._rect(hl - 8 - length * 0.35, -width / 3, hl - 8, width / 3), colors.ROOF, angle, pos
        )
        self._draw_polygon(
            surface, self._rect(length * 0.12, -width * 0.25, length * 0.3, width * 0.25), colors.WINDOW, angle, pos
        )
        self._draw_polygon(
            surface, self._rect(length / 6 - 6, -hw + 6, length / 6, hw - 6), colors.STRIPE, angle, pos
        )

    # ------------------------------------------------------------------
    # HUD
    # ------------------------------------------------------------------

    def layout_buttons(self, surface_size: tuple[int, int]) -> dict[str, pygame.Rect]:
        """Place the Start / Pause / Reset buttons along the top-right edge."""
        hud = self.config.hud
        w, _ = surface_size
        names = ("start", "pause", "reset")
        x = w - hud.PADDING - len(names) * (hud.BUTTON_W + hud.PADDING) + hud.PADDING
        self.buttons = {}
        for name in names:
            self.buttons[name] = pygame.Rect(x, hud.PADDING, hud.BUTTON_W, hud.BUTTON_H)
            x += hud.BUTTON_W + hud.PADDING
        return self.buttons

    def button_at(self, pos: tuple[int, int]) -> str | None:
        """Name of the button under a mouse position, if any."""
        for name, rect in self.buttons.items():
            if rect.collidepoint(pos):
                return name
        return None

    def draw_hud(
        self,
        surface: pygame.Surface,
        context: SimulationContext,
        phase: SessionPhase,
        intent: InputIntent | None = None,
    ) -> None:
        """Score, drift timer, speed gauge, held controls and control buttons."""
        hud = self.config.hud
        font = self._get_font()
        session = context.session

        panel = pygame.Surface((220, 90 if intent is None else 114), pygame.SRCALPHA)
        panel.fill(hud.PANEL_COLOR)
        surface.blit(panel, (hud.PADDING, hud.PADDING))

        lines = [
            f"Score: {format_score(session.score)}",
            f"Drift: {format_drift_timer(session.drift_timer)}",
            f"Speed: {get_display_speed(context.car.speed, context.config.car.MAX_SPEED)}",
        ]
        if intent is not None:
            lines.append(f"Input: {format_intent(intent)}")
        for i, line in enumerate(lines):
            text = font.render(line, True, hud.TEXT_COLOR)
            surface.blit(text, (2 * hud.PADDING, 2 * hud.PADDING + i * 24))

        labels = {
            "start": hud.START_LABEL,
            "pause": hud.RESUME_LABEL if phase is SessionPhase.PAUSED else hud.PAUSE_LABEL,
            "reset": hud.RESET_LABEL,
        }
        mouse = pygame.mouse.get_pos() if pygame.display.get_init() else (-1, -1)
        for name, rect in self.layout_buttons(surface.get_size()).items():
            color = hud.BUTTON_HOVER_COLOR if rect.collidepoint(mouse) else hud.BUTTON_COLOR
            pygame.draw.rect(surface, color, rect, border_radius=4)
            text = font.render(labels[name], True, hud.TEXT_COLOR)
            surface.blit(text, text.get_rect(center=rect.center))

        if phase is not SessionPhase.RUNNING:
            message = "Press SPACE to start" if phase is SessionPhase.IDLE else "PAUSED"
            text = font.render(message, True, hud.MUTED_COLOR)
            w, h = surface.get_size()
            surface.blit(text, text.get_rect(center=(w / 2, h / 2)))

    # ------------------------------------------------------------------
    # Frame
    # ------------------------------------------------------------------

    def draw(
        self,
        surface: pygame.Surface,
        context: SimulationContext,
        phase: SessionPhase = SessionPhase.RUNNING,
        t: float = 0.0,
        hud: bool = True,
        intent: InputIntent | None = None,
    ) -> None:
        """Draw one complete frame, with the held controls on the HUD when given."""
        self.draw_track(surface, context.track, context.config.track.SHOULDER, t)
        self.draw_skids(surface, context.trail)
        self.draw_car(surface, context.car, context.config.car.LENGTH, context.config.car.WIDTH)
        if hud:
            self.draw_hud(surface, context, phase, intent)

    @staticmethod
    def create_image_array(surface: pygame.Surface) -> npt.NDArray[np.uint8]:
        """Copy a surface into an (H, W, 3) uint8 array."""
        return np.transpose(np.array(pygame.surfarray.pixels3d(surface)), axes=(1, 0, 2))
