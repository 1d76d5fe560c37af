"""Scene objects for the funhouse ray-traced scene editor.

This module defines the two kinds of things a user places in a scene:

* :class:`Sphere` -- the placement and sizing of a sphere.
* :class:`Curve` -- a quadratic Bezier path given by three control
  points.

Both render through a :class:`funhouse.drawable.Drawable`.
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence

from funhouse import bezier
from funhouse.config import (
    MAX_SELECT_DISTANCE,
    MAX_SUBDIVISION_DEPTH,
    MIN_SCALE,
    SMOOTHNESS,
    Bounds,
    Color,
    RenderStyle,
    as_bounds,
    as_color,
)
from funhouse.drawable import LIGHT0, LIGHTING
from funhouse.geom import dist, dist2, point, sub

logger = logging.getLogger(__name__)


class Sphere:
    """Placement of a sphere in the scene.

    Editing operations never fail: requests that would push the sphere
    outside the scene bounds are clamped instead.
    """

    def __init__(self, color: Color, position):
        self.color = as_color(color)
        self.position = point(position)
        self.radius = MIN_SCALE

    def __repr__(self):
        return f"Sphere(color={self.color}, position={self.position}, radius={self.radius})"

    def _fit(self, bounds: Bounds) -> None:
        # the footprint must fit: cap the radius at half the smaller
        # extent, then clamp the center so the footprint stays inside
        half = min(bounds.right - bounds.left, bounds.top - bounds.bottom) / 2.0
        r = self.radius = min(self.radius, half)
        p = self.position
        p[0] = min(max(p[0], bounds.left + r), bounds.right - r)
        p[1] = min(max(p[1], bounds.bottom + r), bounds.top - r)

    def resize(self, scale: float, bounds: Bounds) -> float:
        """Set the radius, no larger than the distance from the center to
        any side of ``bounds`` and never below ``MIN_SCALE``.

        A center on a side, outside ``bounds``, or closer than
        ``MIN_SCALE`` to a side is pulled in just far enough for a
        ``MIN_SCALE`` footprint to fit.  Only bounds narrower than
        ``2*MIN_SCALE`` give a smaller radius: half their extent.
        """

        bounds = as_bounds(bounds)
        x, y = self.position[0], self.position[1]
        scale = min(scale,
                    bounds.right - x, bounds.top - y,
                    x - bounds.left, y - bounds.bottom)
        self.radius = max(scale, MIN_SCALE)
        self._fit(bounds)
        return self.radius

    def move_to(self, position, bounds: Bounds) -> list:
        """Relocate the sphere, clamping its center so the current radius
        stays inside ``bounds``.  A sphere wider than ``bounds`` first
        shrinks to fit them.

        The caller's ``position`` is not modified; the clamped position
        is stored as a new point and returned.
        """

        bounds = as_bounds(bounds)
        self.position = point(position)
        self._fit(bounds)
        return point(self.position)

    def contains(self, query) -> bool:
        """Is ``query`` strictly inside the sphere?"""

        return dist2(self.position, query) < self.radius * self.radius

    includes = contains

    def render(self, drawing, highlight: Optional[Color] = None,
               filled: bool = True, shaded: bool = False) -> None:
        with drawing.pushed():
            drawing.translate(self.position[0], self.position[1], self.position[2])
            drawing.scale(self.radius, self.radius, self.radius)
            if filled:
                if shaded:
                    drawing.enable(LIGHTING)
                    drawing.enable(LIGHT0)
                try:
                    drawing.color(*self.color.as_tuple())
                    drawing.draw_primitive('sphere')
                finally:
                    if shaded:
                        drawing.disable(LIGHT0)
                        drawing.disable(LIGHTING)

            if highlight is not None:
                drawing.color(*as_color(highlight).as_tuple())
                drawing.draw_primitive('sphere-wireframe')


class Curve:
    """A controllable quadratic Bezier curve in a scene.

    ``control_points`` is the caller's list of three points and is kept
    by reference.  The caller may edit those points in place, but must
    then call :meth:`invalidate` so the polyline approximation gets
    recomputed the next time it is used.  Without that call the curve
    keeps serving the old samples.
    """

    def __init__(self, control_points: Sequence[list], *,
                 smoothness: float = SMOOTHNESS,
                 max_depth: int = MAX_SUBDIVISION_DEPTH):
        if len(control_points) != 3:
            raise ValueError(
                f"Curve needs exactly 3 control points, got {len(control_points)}")
        self.control_points = control_points
        self.smoothness = smoothness
        self.max_depth = max_depth
        self.samples: List[list] = []
        self.compiled = False

    def __repr__(self):
        return f"Curve({self.control_points!r}, compiled={self.compiled})"

    def invalidate(self) -> None:
        """Mark the samples stale; they are rebuilt on next use."""

        self.compiled = False

    update = invalidate

    def compile(self) -> None:
        """Recompute the polyline samples if they are stale."""

        if self.compiled:
            return
        self.samples = bezier.flatten_quadratic(self.control_points,
                                                smoothness=self.smoothness,
                                                max_depth=self.max_depth)
        self.compiled = True
        logger.debug("Compiled curve into %d samples", len(self.samples))

    @property
    def points(self) -> List[list]:
        self.compile()
        return self.samples

    def length(self) -> float:
        return bezier.polyline_length(self.points)

    def evaluate(self, u: float) -> list:
        return bezier.evaluate_quadratic(self.control_points, u)

    def pick_control_point(self, query) -> Optional[int]:
        """Return the index of the control point nearest ``query``, or
        ``None`` if none is within ``MAX_SELECT_DISTANCE``.  Ties go to
        the lower index.
        """

        which = None
        best = MAX_SELECT_DISTANCE * MAX_SELECT_DISTANCE
        for i in range(3):
            d2 = dist2(query, self.control_points[i])
            if d2 < best:
                which = i
                best = d2
        return which

    choose_control_point = pick_control_point

    def render(self, drawing, style: RenderStyle = RenderStyle()) -> None:
        self.compile()
        self.render_curve(drawing, style)
        self.render_controls(drawing, style)

    def render_curve(self, drawing, style: RenderStyle = RenderStyle()) -> None:
        """Draw the polyline, one thin ``path`` primitive per segment."""

        samples = self.points
        for index in range(1, len(samples)):
            p0 = samples[index - 1]
            p1 = samples[index]
            length = dist(p0, p1)
            if length == 0.0:
                continue
            delta = sub(p1, p0)
            angle = math.degrees(math.atan2(delta[1], delta[0]))
            with drawing.pushed():
                drawing.translate(p0[0], p0[1], style.curve_depth)
                drawing.rotate(angle, 0.0, 0.0, 1.0)
                drawing.rotate(90.0, 0.0, 1.0, 0.0)
                drawing.scale(style.path_width, style.path_width, length)
                drawing.color(*style.curve_color.as_tuple())
                drawing.draw_primitive('path')

    def render_controls(self, drawing, style: RenderStyle = RenderStyle()) -> None:
        """Draw the three control points as small square markers."""

        size = style.marker_size
        for p in self.control_points:
            with drawing.pushed():
                drawing.translate(p[0], p[1], style.control_depth)
                drawing.scale(size, size, size)
                drawing.color(*style.point_color.as_tuple())
                drawing.draw_primitive('square')


__all__ = ['Sphere', 'Curve']
