from __future__ import annotations

from typing import Any

import numpy as np
import numpy.typing as npt

import gymnasium as gym
from gymnasium import spaces
from gymnasium.error import DependencyNotInstalled
from gymnasium.utils import EzPickle

from drift.config.constants import (
    ACTION_DIM,
    DEFAULT_ENV_FPS,
    DEFAULT_MAX_EPISODE_STEPS,
    DRIFT_TIMER_NORMALIZATION,
    OBS_DIM,
)
from drift.config.physics_config import PhysicsConfig
from drift.config.rendering_config import RenderingConfig
from drift.engine.car import InputIntent
from drift.engine.controller import SessionController, SessionPhase

try:
    # The renderer needs pygame; the physics itself does not
    import pygame
    from drift.utils.renderer import TrackRenderer
except ImportError as e:
    raise DependencyNotInstalled(
        "pygame is not installed, run `pip install pygame`"
    ) from e


class DriftEnv(gym.Env, EzPickle):
    """
    ## Description
    A top-down drift environment on a fixed oval track. The agent scores by
    holding long, fast slides and loses points for hitting the track walls.

    ## Action Space
    MultiBinary(4): [accelerate, brake/reverse, steer left, steer right].
    Holding both steering buttons steers right.

    ## Observation Space
    8D float32 vector:
    - x, y offset from the track centre, divided by the outer radii
    - cos(heading), sin(heading)
    - speed / MAX_SPEED (negative when reversing)
    - traction (0.35 drifting, 0.92 gripping)
    - drifting flag (0 or 1)
    - drift timer / DRIFT_TIMER_NORMALIZATION

    ## Rewards
    The score delta of each step: +25 points per second of drifting, a
    floor(10 * drift seconds) bonus when a drift ends, -40 per wall hit
    (the score itself never goes below 0, so a penalty is capped by the
    points available).

    ## Starting State
    The car starts at rest on the top straight, pointing down (heading pi/2).

    ## Episode Termination
    There is no terminal state. Episodes are truncated after
    `max_episode_steps` steps.
    """
    metadata = {
        "render_modes": [
            "human",
            "rgb_array",
        ],
        "render_fps": DEFAULT_ENV_FPS,
    }

    def __init__(
        self,
        render_mode: str | None = None,
        verbose: bool = False,
        width: int = 1280,
        height: int = 720,
        max_episode_steps: int | None = DEFAULT_MAX_EPISODE_STEPS,
        physics_config: PhysicsConfig | None = None,
        rendering_config: RenderingConfig | None = None,
    ):
        """
        Args:
            render_mode: "human", "rgb_array" or None
            verbose: Print session events
            width, height: Viewport size the track is derived from
            max_episode_steps: Truncate after this many steps (None for unlimited)
            physics_config: PhysicsConfig (defaults to PhysicsConfig())
            rendering_config: RenderingConfig (defaults to RenderingConfig())
        """
        EzPickle.__init__(
            self,
            render_mode,
            verbose,
            width,
            height,
            max_episode_steps,
            physics_config,
            rendering_config,
        )
        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unsupported render_mode '{render_mode}'")

        self.render_mode = render_mode
        self.verbose = verbose
        self.width = width
        self.height = height
        self.max_episode_steps = max_episode_steps
        self.physics_config = physics_config if physics_config is not None else PhysicsConfig()
        self.rendering_config = rendering_config if rendering_config is not None else RenderingConfig()
        self.dt = 1.0 / self.metadata["render_fps"]

        self.controller: SessionController | None = None
        self.episode_steps = 0
        self.sim_time = 0.0

        self.screen = None
        self.clock = None
        self.renderer = None

        self.action_space = spaces.MultiBinary(ACTION_DIM)
        self.observation_space = spaces.Box(
            low=-np.inf, high=np.inf, shape=(OBS_DIM,), dtype=np.float32
        )

    def _get_observation(self) -> npt.NDArray[np.float32]:
        context = self.controller.context
        car = context.car
        track = context.track
        return np.array(
            [
                (car.x - track.cx) / track.rx,
                (car.y - track.cy) / track.ry,
                np.cos(car.heading),
                np.sin(car.heading),
                car.speed / context.config.car.MAX_SPEED,
                car.traction(context.config.drift),
                1.0 if car.is_drifting else 0.0,
                context.session.drift_timer / DRIFT_TIMER_NORMALIZATION,
            ],
            dtype=np.float32,
        )

    def _get_info(self, result=None) -> dict[str, Any]:
        context = self.controller.context
        info = {
            "score": context.session.score,
            "drift_timer": context.session.drift_timer,
            "skid_count": len(context.trail),
            "on_track": context.track.contains(context.car.x, context.car.y),
        }
        if result is not None:
            info["drifting"] = result.drifting
            info["collided"] = result.collided
            info["drift_bonus"] = result.drift_bonus
        return info

    def reset(
        self,
        *,
        seed: int | None = None,
        options: dict[str, Any] | None = None,
    ) -> tuple[npt.NDArray[np.float32], dict[str, Any]]:
        super().reset(seed=seed)

        self.controller = SessionController(
            self.width,
            self.height,
            config=self.physics_config,
            rng=self.np_random,
            verbose=self.verbose,
        )
        self.episode_steps = 0
        self.sim_time = 0.0
        self.controller.start(self.sim_time)

        if self.render_mode == "human":
            self.render()
        return self._get_observation(), self._get_info()

    def step(
        self, action: npt.NDArray[np.int8] | list[int]
    ) -> tuple[
        npt.NDArray[np.float32],
        float,
        bool,
        bool,
        dict[str, Any],
    ]:
        """
        Advance one fixed timestep (1 / render_fps seconds).

        Args:
            action: [accelerate, brake, steer_left, steer_right]

        Returns:
            observation, reward, terminated, truncated, info
        """
        if self.controller is None:
            raise RuntimeError("Environment must be reset before calling step()")

        intent = InputIntent.from_action(action)
        self.sim_time += self.dt
        result = self.controller.tick(self.sim_time, intent)
        self.episode_steps += 1

        reward = float(result.score_delta)
        terminated = False
        truncated = self.max_episode_steps is not None and self.episode_steps >= self.max_episode_steps

        if self.verbose and truncated:
            print(f"Episode truncated after {self.episode_steps} steps, score={self.controller.context.session.score:.1f}")

        if self.render_mode == "human":
            self.render()
        return self._get_observation(), reward, terminated, truncated, self._get_info(result)

    def render(self) -> npt.NDArray[np.uint8] | None:
        if self.render_mode is None:
            gym.logger.warn(
                "You are calling render method without specifying any render mode. "
                "You can specify the render_mode at initialization, "
                f'e.g. gym.make("{self.spec.id if self.spec else "DriftEnv"}", render_mode="rgb_array")'
            )
            return None
        if self.controller is None:
            return None

        if self.renderer is None:
            pygame.font.init()
            self.renderer = TrackRenderer(self.rendering_config)
        if self.screen is None and self.render_mode == "human":
            pygame.init()
            pygame.display.init()
            self.screen = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption("Drift")
        if self.clock is None:
            self.clock = pygame.time.Clock()

        surf = pygame.Surface((self.width, self.height))
        self.renderer.draw(surf, self.controller.context, SessionPhase.RUNNING, t=self.sim_time)

        if self.render_mode == "human":
            pygame.event.pump()
            self.clock.tick(self.metadata["render_fps"])
            self.screen.blit(surf, (0, 0))
            pygame.display.flip()
            return None
        return TrackRenderer.create_image_array(surf)

    def close(self) -> None:
        if self.screen is not None:
            pygame.display.quit()
            pygame.quit()
            self.screen = None
