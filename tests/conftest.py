"""
Shared fixtures for the drift test suite.
"""

import os
import sys

# Headless pygame for renderer and environment tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import pytest

from drift.engine.session import SimulationContext

VIEW_W = 1280
VIEW_H = 720


@pytest.fixture
def context():
    """Simulation on a 1280x720 viewport with seeded skid jitter.

    Track: centre (640, 360), outer radii (540, 260), inner radii (320, 40).
    Spawn: (640, 160), heading pi/2.
    """
    return SimulationContext(VIEW_W, VIEW_H, rng=np.random.default_rng(0))


@pytest.fixture
def straight_context(context):
    """Car at rest mid-road on the top straight, pointing along +x."""
    context.car.x = 640.0
    context.car.y = 210.0
    context.car.heading = 0.0
    return context

