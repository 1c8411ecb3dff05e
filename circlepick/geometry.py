"""Points, circle membership and the circle through three points."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

_EPSILON = 1e-6


@dataclass(frozen=True)
class Point:
    """An integer pixel position."""

    x: int
    y: int


@dataclass(frozen=True)
class CircleInfo:
    """A circle's centre and radius; ``valid`` is False when none exists."""

    cx: float = 0.0
    cy: float = 0.0
    radius: float = 0.0
    valid: bool = False


def in_circle(i: int, j: int, center_x: int, center_y: int, radius: float) -> bool:
    """Return True if pixel (i, j) lies within ``radius`` of the centre."""
    dx = i - center_x
    dy = j - center_y
    return dx * dx + dy * dy <= radius * radius


def circumscribed_circle(points: Sequence[Point]) -> CircleInfo:
    """Return the circle through the first three points.

    Collinear points give an invalid ``CircleInfo`` with zero fields.
    """
    if len(points) < 3:
        raise ValueError("three points are needed to define a circle")
    (x1, y1), (x2, y2), (x3, y3) = ((float(p.x), float(p.y)) for p in points[:3])

    area = x1 * (y2 - y3) - y1 * (x2 - x3) + x2 * y3 - x3 * y2
    if abs(area) < _EPSILON:
        return CircleInfo()

    a1 = x1 * x1 + y1 * y1
    b1 = x2 * x2 + y2 * y2
    c1 = x3 * x3 + y3 * y3

    d = 2.0 * (x1 * (y2 - y3) + x2 * (y3 - y1) + x3 * (y1 - y2))
    if abs(d) < _EPSILON:
        return CircleInfo()

    ux = (a1 * (y2 - y3) + b1 * (y3 - y1) + c1 * (y1 - y2)) / d
    uy = (a1 * (x3 - x2) + b1 * (x1 - x3) + c1 * (x2 - x1)) / d
    radius = math.hypot(x1 - ux, y1 - uy)
    return CircleInfo(ux, uy, radius, True)