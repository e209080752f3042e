"""Largest empty circle and smallest enclosing circle of point sets."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import combinations

Point = tuple[float, float]

EPS = 1e-5


@dataclass(frozen=True)
class Circle:
    """A circle given by its centre and radius."""

    center: Point
    radius: float

    def contains(self, point: Sequence[float]) -> bool:
        """Return True if point lies inside or on the circle, within EPS."""
        return math.dist(point, self.center) <= self.radius + EPS


def _points(points: Sequence[Sequence[float]]) -> list[Point]:
    return [(float(x), float(y)) for x, y in points]


def _midpoint(a: Point, b: Point) -> Point:
    return ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)


def largest_empty_circle(points: Sequence[Sequence[float]]) -> Circle:
    """Return the largest circle spanned by two points as diameter holding no other point.

    A point on the boundary counts as inside.
    """
    pts = _points(points)
    if len(pts) < 2:
        raise ValueError("at least two points are needed")
    best: Circle | None = None
    for (i, a), (j, b) in combinations(enumerate(pts), 2):
        radius = math.dist(a, b) / 2
        if best is not None and radius <= best.radius:
            continue
        center = _midpoint(a, b)
        if all(math.dist(p, center) > radius for k, p in enumerate(pts) if k not in (i, j)):
            best = Circle(center, radius)
    if best is None:
        raise ValueError("no pair of points spans an empty circle")
    return best


def centroid_bounding_circle(points: Sequence[Sequence[float]]) -> Circle:
    """Return the circle around the centroid that reaches the farthest point."""
    pts = _points(points)
    if not pts:
        raise ValueError("at least one point is needed")
    center = (sum(x for x, _ in pts) / len(pts), sum(y for _, y in pts) / len(pts))
    return Circle(center, max(math.dist(p, center) for p in pts))


def circumcenter(a: Sequence[float], b: Sequence[float], c: Sequence[float]) -> Point:
    """Return the centre of the circle through three points."""
    ax, ay = a
    bx, by = b
    cx, cy = c
    d = 2 * (ax * (by - cy) + bx * (cy - ay) + cx * (ay - by))
    if d == 0:
        raise ValueError("points are collinear")
    a2, b2, c2 = ax * ax + ay * ay, bx * bx + by * by, cx * cx + cy * cy
    x = a2 * (by - cy) + b2 * (cy - ay) + c2 * (ay - by)
    y = a2 * (cx - bx) + b2 * (ax - cx) + c2 * (bx - ax)
    return (x / d, y / d)


def _diameter_circle(a: Point, b: Point) -> Circle:
    return Circle(_midpoint(a, b), math.dist(a, b) / 2)


def _three_point_circle(a: Point, b: Point, c: Point) -> Circle:
    try:
        center = circumcenter(a, b, c)
    except ValueError:
        return max((_diameter_circle(p, q) for p, q in ((a, b), (a, c), (b, c))),
                   key=lambda circle: circle.radius)
    return Circle(center, math.dist(center, c))


def min_bounding_circle(
    points: Sequence[Sequence[float]],
    rng: random.Random | None = None,
) -> Circle:
    """Return the smallest circle enclosing all points (randomised incremental)."""
    pts = _points(points)
    (rng or random.Random()).shuffle(pts)
    circle = Circle((0.0, 0.0), 0.0)
    for i, p in enumerate(pts):
        if circle.contains(p):
            continue
        circle = Circle(p, 0.0)
        for j, q in enumerate(pts[:i]):
            if circle.contains(q):
                continue
            circle = _diameter_circle(p, q)
            for r in pts[:j]:
                if not circle.contains(r):
                    circle = _three_point_circle(p, q, r)
    return circle