"""
Skid trail: a bounded, time-decaying collection of skid marks.

Marks are appended while the car drifts or hits a wall. Each mark fades out
over its life and is dropped when the life runs out. The trail never holds
more than MAX_MARKS entries; on overflow the oldest marks go first.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from drift.config.physics_config import SkidParams


@dataclass
class SkidMark:
    """A single fading skid mark."""
    x: float
    y: float
    life: float
    max_life: float
    width: float
    alpha: float = 1.0


class SkidTrail:
    """
    Ordered skid mark buffer with FIFO eviction and expiry.

    Args:
        params: SkidParams (defaults to SkidParams())
        rng: numpy Generator used for the width jitter (defaults to a fresh one)

    Usage:
        trail = SkidTrail(rng=np.random.default_rng(0))
        trail.add(100.0, 200.0)            # drift mark, life 1.2 s
        trail.add(100.0, 200.0, life=0.8)  # impact mark
        trail.tick(0.02)                   # age and prune
    """

    def __init__(self, params: SkidParams | None = None, rng: np.random.Generator | None = None) -> None:
        if params is None:
            params = SkidParams()
        self.params = params
        self.rng = rng if rng is not None else np.random.default_rng()
        self.marks: deque[SkidMark] = deque(maxlen=params.MAX_MARKS)

    def add(self, x: float, y: float, life: float | None = None) -> SkidMark:
        """
        Append a mark at (x, y).

        Args:
            x, y: Mark position
            life: Lifetime in seconds (default: SkidParams.DEFAULT_LIFE)

        Returns:
            The new mark
        """
        if life is None:
            life = self.params.DEFAULT_LIFE
        width = self.params.MIN_WIDTH + float(self.rng.random()) * self.params.WIDTH_JITTER
        mark = SkidMark(x=float(x), y=float(y), life=life, max_life=life, width=width)
        # deque(maxlen) discards from the left, i.e. the oldest mark
        self.marks.append(mark)
        return mark

    def tick(self, dt: float) -> None:
        """
        Age every mark by dt, refresh its alpha and drop expired marks.

        Args:
            dt: Elapsed time in seconds
        """
        for mark in self.marks:
            mark.life -= dt
            mark.alpha = max(0.0, mark.life / mark.max_life)

        if any(mark.life <= 0 for mark in self.marks):
            alive = [mark for mark in self.marks if mark.life > 0]
            self.marks.clear()
            self.marks.extend(alive)

    def clear(self) -> None:
        """Remove all marks."""
        self.marks.clear()

    def __len__(self) -> int:
        return len(self.marks)

    def __iter__(self) -> Iterator[SkidMark]:
        """Iterate oldest to newest."""
        return iter(self.marks)
