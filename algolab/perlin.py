"""Gradient-noise sampling on a unit grid and rendering of noise images."""

from __future__ import annotations

import random

import numpy as np

DEFAULT_SIZE = 28


def interpolate(a: float, b: float, t: float) -> float:
    """Linearly interpolate between a and b by t."""
    return a * (1 - t) + b * t


def _dot_grid_gradient(ix: int, iy: int, x: float, y: float, rng: random.Random) -> float:
    # A fresh gradient with components in [0, 1) is drawn for every corner.
    gx, gy = rng.random(), rng.random()
    return (x - ix) * gx + (y - iy) * gy


def perlin(x: float, y: float, rng: random.Random | None = None) -> float:
    """Return a noise value at (x, y) by blending corner gradients of its grid cell.

    Gradients are random per call, so repeated calls at the same point differ
    unless the same seeded generator state is used.
    """
    if rng is None:
        rng = random.Random()
    x0, y0 = int(x), int(y)
    x1, y1 = x0 + 1, y0 + 1
    sx, sy = x - x0, y - y0

    n0 = _dot_grid_gradient(x0, y0, x, y, rng)
    n1 = _dot_grid_gradient(x1, y0, x, y, rng)
    top = interpolate(n0, n1, sx)
    n0 = _dot_grid_gradient(x0, y1, x, y, rng)
    n1 = _dot_grid_gradient(x1, y1, x, y, rng)
    bottom = interpolate(n0, n1, sx)
    return interpolate(top, bottom, sy)


def noise_image(
    width: int = DEFAULT_SIZE,
    height: int = DEFAULT_SIZE,
    rng: random.Random | None = None,
) -> np.ndarray:
    """Return a height×width uint8 image of noise sampled over the unit square."""
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive")
    if rng is None:
        rng = random.Random()
    rows = [
        [int(min(max(perlin(x / width, y / height, rng) * 255, 0.0), 255.0))
         for x in range(width)]
        for y in range(height)
    ]
    return np.array(rows, dtype=np.uint8)