"""Graham-scan convex hull with an ASCII rendering and a demo command."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from enum import IntEnum
from functools import cmp_to_key

Point = tuple[int, int]

EXAMPLE_POINTS: list[Point] = [
    (0, 0), (1, 1), (2, 2), (4, 4), (0, 3),
    (1, 2), (3, 1), (3, 3), (2, 1), (1, 0),
    (2, 3), (4, 2), (0, 1), (3, 0), (2, 4),
]


class Orientation(IntEnum):
    """Turn direction of an ordered triplet of points."""

    COLLINEAR = 0
    CLOCKWISE = 1
    COUNTERCLOCKWISE = 2


def orientation(p: Sequence[float], q: Sequence[float], r: Sequence[float]) -> Orientation:
    """Return the orientation of the ordered triplet (p, q, r)."""
    val = (q[1] - p[1]) * (r[0] - q[0]) - (q[0] - p[0]) * (r[1] - q[1])
    if val == 0:
        return Orientation.COLLINEAR
    return Orientation.CLOCKWISE if val > 0 else Orientation.COUNTERCLOCKWISE


def _dist_sq(a: Sequence[float], b: Sequence[float]) -> float:
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2


def _polar_key(pivot: tuple):
    def compare(p1: tuple, p2: tuple) -> int:
        turn = orientation(pivot, p1, p2)
        if turn == Orientation.COLLINEAR:
            d1, d2 = _dist_sq(pivot, p1), _dist_sq(pivot, p2)
            return (d1 > d2) - (d1 < d2)
        return -1 if turn == Orientation.COUNTERCLOCKWISE else 1

    return cmp_to_key(compare)


def convex_hull(points: Sequence[Sequence[float]]) -> list[tuple]:
    """Return the hull vertices in counter-clockwise order from the lowest point.

    Fewer than three points are returned unchanged; if all points are
    collinear the result is empty.
    """
    pts = [tuple(p) for p in points]
    if len(pts) < 3:
        return pts

    lowest = min(range(len(pts)), key=lambda k: (pts[k][1], pts[k][0]))
    pts[0], pts[lowest] = pts[lowest], pts[0]
    pivot = pts[0]
    ordered = sorted(pts[1:], key=_polar_key(pivot))

    # Of each run of points collinear with the pivot keep only the farthest.
    reduced = [pivot]
    previous = None
    for p in ordered:
        if previous is not None and orientation(pivot, previous, p) == Orientation.COLLINEAR:
            reduced[-1] = p
        else:
            reduced.append(p)
        previous = p

    if len(reduced) < 3:
        return []

    hull = reduced[:3]
    for p in reduced[3:]:
        while len(hull) > 1 and orientation(hull[-2], hull[-1], p) != Orientation.COUNTERCLOCKWISE:
            hull.pop()
        hull.append(p)
    return hull


def is_on_segment(p: Sequence[float], start: Sequence[float], end: Sequence[float]) -> bool:
    """Return True if p lies on the closed segment from start to end."""
    if orientation(start, p, end) != Orientation.COLLINEAR:
        return False
    return (min(start[0], end[0]) <= p[0] <= max(start[0], end[0])
            and min(start[1], end[1]) <= p[1] <= max(start[1], end[1]))


def render_ascii(
    points: Sequence[Sequence[int]],
    hull: Sequence[Sequence[int]],
    size: int = 15,
) -> str:
    """Draw points ('o'), hull vertices ('H') and hull edges ('#') as text."""
    if size < 2:
        raise ValueError("size must be at least 2")
    if not points:
        return ""

    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    min_x, max_x = min(xs) - 1, max(xs) + 1
    min_y, max_y = min(ys) - 1, max(ys) + 1

    width = min(size, max_x - min_x + 1)
    height = min(size, max_y - min_y + 1)
    grid = [[" "] * width for _ in range(height)]

    scale_x = (width - 1) / (max_x - min_x)
    scale_y = (height - 1) / (max_y - min_y)

    hull_points = [tuple(h) for h in hull]
    edges = list(zip(hull_points, hull_points[1:] + hull_points[:1]))

    if len(hull_points) >= 3:
        for y, row in enumerate(grid):
            for x in range(width):
                real = (int(min_x + x / scale_x), int(min_y + (height - 1 - y) / scale_y))
                if any(is_on_segment(real, a, b) for a, b in edges):
                    row[x] = "#"

    hull_set = set(hull_points)
    for p in points:
        gx = int((p[0] - min_x) * scale_x)
        gy = height - 1 - int((p[1] - min_y) * scale_y)
        if 0 <= gx < width and 0 <= gy < height:
            grid[gy][gx] = "H" if tuple(p) in hull_set else "o"

    border = "-" * (width + 2)
    lines = ["ASCII Visualization (H = Hull Point, o = Regular Point, # = Hull Edge):", border]
    lines.extend("|" + "".join(row) + "|" for row in grid)
    lines.append(border)
    return "\n".join(lines)


def _format(p: Sequence[int]) -> str:
    return f"({p[0]}, {p[1]})"


def main(argv: Sequence[str] | None = None) -> int:
    """Compute and display the hull of a fixed example point set."""
    parser = argparse.ArgumentParser(description="Convex hull of an example point set.")
    parser.add_argument("--size", type=int, default=15, help="maximum grid size of the drawing")
    args = parser.parse_args(argv)
    if args.size < 2:
        parser.error("size must be at least 2")

    print("Original Points:")
    for p in EXAMPLE_POINTS:
        print(_format(p))

    hull = convex_hull(EXAMPLE_POINTS)
    print("Convex Hull Points:")
    for p in hull:
        print(_format(p))

    print()
    print(render_ascii(EXAMPLE_POINTS, hull, args.size))
    return 0