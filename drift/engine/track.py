"""
Oval track geometry.

The drivable road is the annulus between two concentric, axis-aligned
ellipses centred in the viewport. Radii are derived from the viewport size
and recomputed on every resize; a TrackGeometry instance itself never
changes.
"""

from __future__ import annotations

from dataclasses import dataclass

from drift.config.physics_config import TrackParams


@dataclass(frozen=True)
class TrackGeometry:
    """
    Annular road between an outer and an inner ellipse.

    Attributes:
        cx, cy: Shared centre of both ellipses
        rx, ry: Outer ellipse radii
        inner_rx, inner_ry: Inner ellipse radii (outer minus the road width)
    """
    cx: float
    cy: float
    rx: float
    ry: float
    inner_rx: float
    inner_ry: float

    @classmethod
    def from_viewport(
        cls,
        width: float,
        height: float,
        params: TrackParams | None = None,
    ) -> TrackGeometry:
        """
        Build the track for a viewport.

        Args:
            width, height: Viewport size in pixels
            params: TrackParams (defaults to TrackParams())

        Returns:
            TrackGeometry centred in the viewport
        """
        if params is None:
            params = TrackParams()

        rx = max(params.MIN_RX, width / 2 - params.MARGIN - params.EDGE_INSET)
        ry = max(params.MIN_RY, height / 2 - params.MARGIN - params.EDGE_INSET)
        # Only the squares of the inner radii enter the containment test, so a
        # road wider than the outer radius behaves like its magnitude.
        inner_rx = max(params.MIN_INNER_RADIUS, abs(rx - params.INNER_OFFSET))
        inner_ry = max(params.MIN_INNER_RADIUS, abs(ry - params.INNER_OFFSET))
        return cls(width / 2, height / 2, rx, ry, inner_rx, inner_ry)

    def resize(self, width: float, height: float, params: TrackParams | None = None) -> TrackGeometry:
        """Return the geometry for a new viewport size."""
        return TrackGeometry.from_viewport(width, height, params)

    def outer_value(self, x: float, y: float) -> float:
        """Normalized squared distance from the centre against the outer ellipse."""
        nx = (x - self.cx) / self.rx
        ny = (y - self.cy) / self.ry
        return nx * nx + ny * ny

    def inner_value(self, x: float, y: float) -> float:
        """Normalized squared distance from the centre against the inner ellipse."""
        nx = (x - self.cx) / self.inner_rx
        ny = (y - self.cy) / self.inner_ry
        return nx * nx + ny * ny

    def contains(self, x: float, y: float) -> bool:
        """
        Point-in-road test.

        A point is on the road if it lies inside (or on) the outer ellipse
        and outside (or on) the inner ellipse.
        """
        return self.outer_value(x, y) <= 1.0 and self.inner_value(x, y) >= 1.0

    def lane_radii(self, params: TrackParams | None = None) -> tuple[float, float]:
        """Radii of the dashed lane marking, slightly outside mid-road."""
        if params is None:
            params = TrackParams()
        return (
            (self.rx + self.inner_rx) / 2 + params.LANE_OFFSET,
            (self.ry + self.inner_ry) / 2 + params.LANE_OFFSET,
        )

    def spawn_point(self, params: TrackParams | None = None) -> tuple[float, float]:
        """Spawn position: on the top straight, above the centre."""
        if params is None:
            params = TrackParams()
        return (self.cx, self.cy - params.SPAWN_OFFSET_Y)
