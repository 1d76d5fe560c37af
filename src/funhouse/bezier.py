"""Quadratic Bezier helpers for funhouse.

Provides the adaptive flattening used by :class:`funhouse.scene.Curve`
together with exact evaluation and polyline measurement.  Curves are
sequences of three :func:`funhouse.geom.point` values: start, handle,
and end.
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from funhouse.config import EPSILON, MAX_SUBDIVISION_DEPTH, SMOOTHNESS
from funhouse.geom import dist, midpoint, point

logger = logging.getLogger(__name__)


def _check_control_points(ctrl: Sequence[list]) -> None:
    if len(ctrl) != 3:
        raise ValueError(
            f"quadratic Bezier needs exactly 3 control points, got {len(ctrl)}")


def is_flat(p0, p1, p2, smoothness: float = SMOOTHNESS) -> bool:
    """Return ``True`` if the control polygon is close enough to its chord.

    The ratio of control polygon length to chord length is at least 1
    and approaches 1 as the curve flattens.  A chord shorter than
    ``EPSILON`` counts as flat.
    """

    chord = dist(p0, p2)
    if chord < EPSILON:
        return True
    return (dist(p0, p1) + dist(p1, p2)) / chord <= 1.0 + 1.0 / smoothness


def subdivide(p0, p1, p2) -> Tuple[List[list], List[list]]:
    """Split a curve at ``u = 0.5`` by de Casteljau's construction.

    Returns the control points of the left and right halves.  The two
    halves share the on-curve point ``p012``.
    """

    p01 = midpoint(p0, p1)
    p12 = midpoint(p1, p2)
    p012 = midpoint(p01, p12)
    return [p0, p01, p012], [p012, p12, p2]


def flatten_quadratic(ctrl: Sequence[list], *,
                      smoothness: float = SMOOTHNESS,
                      max_depth: int = MAX_SUBDIVISION_DEPTH) -> List[list]:
    """Approximate a quadratic Bezier by a polyline.

    Flat curves contribute their own three control points, which are
    returned as the caller's objects rather than copies.  Otherwise the
    curve is split in half and the halves flattened recursively; the
    point where they join appears once in the result.  Recursion stops
    at ``max_depth`` levels, falling back to the flat case.
    """

    _check_control_points(ctrl)
    if max_depth < 0:
        raise ValueError('max_depth must be >= 0')

    truncated = [0]

    def _flatten(p0, p1, p2, depth):
        if is_flat(p0, p1, p2, smoothness):
            return [p0, p1, p2]
        if depth >= max_depth:
            truncated[0] += 1
            return [p0, p1, p2]
        left, right = subdivide(p0, p1, p2)
        samples = _flatten(*left, depth + 1)
        samples.extend(_flatten(*right, depth + 1)[1:])
        return samples

    samples = _flatten(ctrl[0], ctrl[1], ctrl[2], 0)
    if truncated[0]:
        logger.warning("Bezier subdivision hit depth limit %d on %d span(s)",
                       max_depth, truncated[0])
    return samples


def evaluate_quadratic(ctrl: Sequence[list], u: float) -> list:
    """Evaluate a quadratic Bezier at parameter ``u`` in ``[0, 1]``."""

    _check_control_points(ctrl)
    u = max(0.0, min(1.0, float(u)))
    a = (1.0 - u) * (1.0 - u)
    b = 2.0 * u * (1.0 - u)
    c = u * u
    p0, p1, p2 = ctrl
    return point(a * p0[0] + b * p1[0] + c * p2[0],
                 a * p0[1] + b * p1[1] + c * p2[1],
                 a * p0[2] + b * p1[2] + c * p2[2])


def polyline_length(points: Sequence[list]) -> float:
    """Total length of the segments joining consecutive ``points``."""

    return sum(dist(points[i - 1], points[i]) for i in range(1, len(points)))


__all__ = [
    'is_flat',
    'subdivide',
    'flatten_quadratic',
    'evaluate_quadratic',
    'polyline_length',
]
