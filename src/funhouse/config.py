"""Constants and value types shared by funhouse scene objects.

Module-level constants follow the ``epsilon`` convention of
:mod:`funhouse.geom`: redefine these at your peril.  Rendering colors
are not module state; they travel in a :class:`RenderStyle` passed to
each ``render`` call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Tuple

MIN_SCALE = 0.1                 # smallest sphere radius we can place
MAX_SELECT_DISTANCE = 0.2       # pick radius for curve control points
SMOOTHNESS = 500.0              # flatness tolerance is 1 + 1/SMOOTHNESS
EPSILON = 1e-8                  # chords shorter than this are degenerate
MAX_SUBDIVISION_DEPTH = 20      # bound on adaptive subdivision recursion


@dataclass(frozen=True)
class Color:
    """Immutable RGB color with float channels in ``[0, 1]``."""

    r: float
    g: float
    b: float

    def __post_init__(self):
        for channel in (self.r, self.g, self.b):
            if isinstance(channel, bool) or not isinstance(channel, (int, float)):
                raise ValueError(f"bad color channel: {channel!r}")
            if channel < 0.0 or channel > 1.0:
                raise ValueError(f"color channel out of range: {channel}")

    def as_tuple(self) -> Tuple[float, float, float]:
        return (float(self.r), float(self.g), float(self.b))

    def as_bytes(self) -> Tuple[int, int, int]:
        """Return the color as 0-255 integer channels."""

        return tuple(int(round(c * 255.0)) for c in self.as_tuple())


def as_color(value) -> Color:
    """Accept a :class:`Color` or any RGB triple."""

    if isinstance(value, Color):
        return value
    if isinstance(value, (tuple, list)) and len(value) == 3:
        return Color(*value)
    raise ValueError(f"bad color: {value!r}")


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned scene rectangle in the XY plane."""

    left: float
    right: float
    bottom: float
    top: float

    def __post_init__(self):
        if not (self.left < self.right and self.bottom < self.top):
            raise ValueError(f"empty or inverted bounds: {self!r}")


def as_bounds(value) -> Bounds:
    """Accept a :class:`Bounds`, a mapping with left/right/bottom/top
    keys, or a ``(left, right, bottom, top)`` sequence."""

    if isinstance(value, Bounds):
        return value
    if isinstance(value, Mapping):
        return Bounds(value["left"], value["right"], value["bottom"], value["top"])
    if isinstance(value, (tuple, list)) and len(value) == 4:
        return Bounds(*value)
    raise ValueError(f"bad bounds: {value!r}")


POINT_COLOR = Color(0.9, 0.8, 0.1)
CURVE_COLOR = Color(0.2, 0.5, 0.9)


@dataclass(frozen=True)
class RenderStyle:
    """Colors and fixed sizes used when drawing a :class:`~funhouse.scene.Curve`.

    ``curve_depth`` and ``control_depth`` are the z offsets at which the
    polyline and the control point markers are drawn, so that markers
    sit in front of the path.
    """

    curve_color: Color = field(default=CURVE_COLOR)
    point_color: Color = field(default=POINT_COLOR)
    curve_depth: float = 1.5
    control_depth: float = 1.9
    path_width: float = 0.01
    marker_size: float = 0.02


__all__ = [
    "MIN_SCALE",
    "MAX_SELECT_DISTANCE",
    "SMOOTHNESS",
    "EPSILON",
    "MAX_SUBDIVISION_DEPTH",
    "Color",
    "as_color",
    "Bounds",
    "as_bounds",
    "POINT_COLOR",
    "CURVE_COLOR",
    "RenderStyle",
]
