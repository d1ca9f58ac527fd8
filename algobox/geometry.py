"""The smallest circle enclosing a set of points."""

from __future__ import annotations

import itertools
import math
from collections.abc import Sequence
from dataclasses import dataclass

_TOLERANCE = 1e-9


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: float = 0.0
    y: float = 0.0


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)


def triangle_area(a: Point, b: Point, c: Point) -> float:
    """Area of the triangle abc by Heron's formula."""
    ab = distance(a, b)
    bc = distance(b, c)
    ca = distance(c, a)
    p = (ab + bc + ca) / 2
    return math.sqrt(max(0.0, p * (p - ab) * (p - bc) * (p - ca)))


def all_within(points: Sequence[Point], center: Point, radius: float) -> bool:
    """Tell whether every point lies in the circle, allowing for rounding error."""
    limit = radius + _TOLERANCE * max(1.0, radius)
    return all(distance(p, center) <= limit for p in points)


def _circumcircle(a: Point, b: Point, c: Point) -> tuple[Point, float] | None:
    det = a.x * (b.y - c.y) + b.x * (c.y - a.y) + c.x * (a.y - b.y)
    area = triangle_area(a, b, c)
    if det == 0 or area == 0:
        return None
    sa = a.x * a.x + a.y * a.y
    sb = b.x * b.x + b.y * b.y
    sc = c.x * c.x + c.y * c.y
    cx = -0.5 * (a.y * (sb - sc) + b.y * (sc - sa) + c.y * (sa - sb)) / det
    cy = 0.5 * (a.x * (sb - sc) + b.x * (sc - sa) + c.x * (sa - sb)) / det
    radius = distance(a, b) * distance(b, c) * distance(c, a) / (4 * area)
    return Point(cx, cy), radius


def smallest_enclosing_circle(points: Sequence[Point]) -> tuple[Point, float]:
    """Center and radius of the smallest circle holding every point.

    Circles through every triple of points and on every pair as diameter
    are tried; of the enclosing ones with least radius the last tried wins.
    """
    points = list(points)
    if not points:
        raise ValueError("at least one point is needed")
    if len(points) == 1:
        return points[0], 0.0

    best: tuple[Point, float] | None = None

    def consider(center: Point, radius: float) -> None:
        nonlocal best
        if not all_within(points, center, radius):
            return
        if best is None or radius <= best[1]:
            best = (center, radius)

    for a, b, c in itertools.combinations(points, 3):
        circle = _circumcircle(a, b, c)
        if circle is not None:
            consider(*circle)
    for a, b in itertools.combinations(points, 2):
        center = Point((a.x + b.x) / 2, (a.y + b.y) / 2)
        consider(center, distance(center, a))

    assert best is not None
    return best