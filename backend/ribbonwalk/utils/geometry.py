"""Leaf-node geometry helpers for circles. No engine imports.

Circles are anything with ``x``, ``y`` and ``radius`` attributes. The
vectorised helpers take parallel numpy arrays so the generators can test a
candidate against the whole chain in one call.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Protocol

import numpy as np
from numpy.typing import NDArray

TWO_PI = 2.0 * math.pi


class CircleLike(Protocol):
    x: float
    y: float
    radius: float


def distance(a: CircleLike, b: CircleLike) -> float:
    """Distance between two circle centers."""
    return math.hypot(a.x - b.x, a.y - b.y)


def overlaps(a: CircleLike, b: CircleLike, epsilon: float = 0.0) -> bool:
    """True if the two circles intersect by more than ``epsilon``.

    Tangent circles (distance == sum of radii) never overlap.
    """
    return distance(a, b) < a.radius + b.radius - epsilon


def overlaps_any(
    x: float,
    y: float,
    radius: float,
    xs: NDArray[np.float64],
    ys: NDArray[np.float64],
    rs: NDArray[np.float64],
    epsilon: float = 0.0,
) -> bool:
    """Vectorised overlap test of one candidate against many circles."""
    if len(xs) == 0:
        return False
    dists = np.hypot(xs - x, ys - y)
    return bool(np.any(dists < rs + radius - epsilon))


def is_outside(c: CircleLike, width: float, height: float) -> bool:
    """True if any part of the circle's bounding box exceeds the canvas."""
    return (
        c.x - c.radius < 0
        or c.x + c.radius > width
        or c.y - c.radius < 0
        or c.y + c.radius > height
    )


def is_fully_outside(c: CircleLike, width: float, height: float) -> bool:
    """True if the circle lies entirely beyond one of the canvas edges."""
    return (
        c.x + c.radius < 0
        or c.x - c.radius > width
        or c.y + c.radius < 0
        or c.y - c.radius > height
    )


def is_inside(c: CircleLike, width: float, height: float) -> bool:
    """True if the whole circle lies within ``[0, width] x [0, height]``."""
    return is_within(c, (0.0, 0.0, width, height))


def is_within(c: CircleLike, bounds: tuple[float, float, float, float]) -> bool:
    """True if the whole circle lies within ``(xmin, ymin, xmax, ymax)``."""
    xmin, ymin, xmax, ymax = bounds
    return (
        c.x - c.radius >= xmin
        and c.x + c.radius <= xmax
        and c.y - c.radius >= ymin
        and c.y + c.radius <= ymax
    )


def viewport_bounds(width: float, height: float, size: float) -> tuple[float, float, float, float]:
    """Square of side ``size`` centred on the canvas, clipped to the canvas."""
    half = size / 2
    cx, cy = width / 2, height / 2
    return (max(0.0, cx - half), max(0.0, cy - half), min(width, cx + half), min(height, cy + half))


def fully_outside_count(circles: Sequence[CircleLike], width: float, height: float) -> int:
    return sum(1 for c in circles if is_fully_outside(c, width, height))


def circles_bbox(circles: Sequence[CircleLike]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) over radius-extended circle extents."""
    if len(circles) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    arr = np.array([(c.x, c.y, c.radius) for c in circles], dtype=np.float64)
    x, y, r = arr[:, 0], arr[:, 1], arr[:, 2]
    return (
        float(np.min(x - r)),
        float(np.min(y - r)),
        float(np.max(x + r)),
        float(np.max(y + r)),
    )


def angle_between(a: CircleLike, b: CircleLike) -> float:
    """Direction from the center of ``a`` toward the center of ``b`` (radians)."""
    return math.atan2(b.y - a.y, b.x - a.x)


def wrap_angle(angle: float) -> float:
    """Normalize an angle into [0, 2π)."""
    wrapped = math.fmod(angle, TWO_PI)
    if wrapped < 0:
        wrapped += TWO_PI
    # fmod of a tiny negative value can round up to exactly 2π
    if wrapped >= TWO_PI:
        wrapped = 0.0
    return wrapped


def lerp(start: float, stop: float, t: float) -> float:
    return start + (stop - start) * t
