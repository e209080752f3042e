"""Closest pair of points by exhaustive comparison."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from itertools import combinations

Point = tuple[float, float]

DEFAULT_COUNT = 100
DEFAULT_SIZE = 280.0


def distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the Euclidean distance between two points."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def closest_pair(points: Sequence[Sequence[float]]) -> tuple[int, int, float]:
    """Return (i, j, distance) for the closest two points, with i < j.

    Every pair is compared; on ties the pair with the lowest indices wins.
    """
    pts = list(points)
    if len(pts) < 2:
        raise ValueError("at least two points are needed")
    best: tuple[int, int, float] | None = None
    for (i, a), (j, b) in combinations(enumerate(pts), 2):
        d = distance(a, b)
        if best is None or d < best[2]:
            best = (i, j, d)
    assert best is not None
    return best


def closest_distance(points: Sequence[Sequence[float]]) -> float:
    """Return the smallest distance between any two of the points."""
    return closest_pair(points)[2]


def random_points(
    count: int = DEFAULT_COUNT,
    size: float = DEFAULT_SIZE,
    rng: random.Random | None = None,
) -> list[Point]:
    """Return count points drawn uniformly from the square [0, size]²."""
    if count < 0:
        raise ValueError("count must not be negative")
    rng = rng or random.Random()
    return [(rng.uniform(0.0, size), rng.uniform(0.0, size)) for _ in range(count)]