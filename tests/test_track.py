"""
Unit tests for the oval track geometry.
"""

import dataclasses

import pytest

from drift.config.physics_config import TrackParams
from drift.engine.track import TrackGeometry


def test_radii_from_viewport():
    """Outer radii follow the viewport, inner radii subtract the road width."""
    track = TrackGeometry.from_viewport(1280, 720)

    assert (track.cx, track.cy) == (640, 360)
    assert track.rx == 540
    assert track.ry == 260
    assert track.inner_rx == 320
    assert track.inner_ry == 40


def test_minimum_outer_radii():
    """Small viewports fall back to the minimum outer radii."""
    track = TrackGeometry.from_viewport(300, 200)

    assert track.rx == 220
    assert track.ry == 140
    assert track.inner_rx < track.rx
    assert track.inner_ry < track.ry


def test_inner_radius_never_zero():
    """A road exactly as wide as the outer radius keeps a positive inner radius."""
    track = TrackGeometry.from_viewport(300, 200)

    # rx hits the 220 floor, so rx - INNER_OFFSET would be 0
    assert track.inner_rx == TrackParams().MIN_INNER_RADIUS
    assert isinstance(track.contains(track.cx, track.cy), bool)


def test_contains_road_infield_and_outside():
    """Only the annulus between the ellipses is drivable."""
    track = TrackGeometry.from_viewport(1280, 720)

    assert track.contains(1070, 360), "Right-hand straight should be road"
    assert track.contains(640, 210), "Top straight should be road"
    assert not track.contains(640, 360), "Centre is infield"
    assert not track.contains(640, 90), "Above the outer ellipse is off track"
    assert not track.contains(5, 5), "Corner of the screen is off track"


def test_contains_is_inclusive_on_both_edges():
    """Points exactly on either ellipse count as road."""
    track = TrackGeometry.from_viewport(1280, 720)

    assert track.contains(track.cx + track.rx, track.cy)
    assert track.contains(track.cx + track.inner_rx, track.cy)
    assert track.contains(track.cx, track.cy - track.ry)


def test_resize_returns_new_geometry():
    """Resizing produces a new track and leaves the old one untouched."""
    track = TrackGeometry.from_viewport(1280, 720)
    bigger = track.resize(1920, 1080)

    assert bigger is not track
    assert track.rx == 540
    assert bigger.rx == 960 - 100
    assert bigger.ry == 540 - 100

    with pytest.raises(dataclasses.FrozenInstanceError):
        track.rx = 10


def test_spawn_point_on_road():
    """Default spawn sits on the top straight."""
    track = TrackGeometry.from_viewport(1280, 720)
    x, y = track.spawn_point()

    assert (x, y) == (640, 160)
    assert track.contains(x, y)


def test_lane_radii_between_edges():
    """The lane marking runs between the inner and outer edges."""
    track = TrackGeometry.from_viewport(1280, 720)
    lane_rx, lane_ry = track.lane_radii()

    assert lane_rx == (540 + 320) / 2 + 10
    assert track.inner_rx < lane_rx < track.rx
    assert track.inner_ry < lane_ry < track.ry
