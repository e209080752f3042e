"""Image resynthesis by sampling each pixel from its neighbourhood."""

from __future__ import annotations

import random

import numpy as np

DEFAULT_SIZE = 2


def _check(image: np.ndarray, size: int) -> np.ndarray:
    arr = np.asarray(image)
    if arr.ndim != 2:
        raise ValueError("image must be a two-dimensional grayscale array")
    if size < 1:
        raise ValueError("size must be at least 1")
    return arr


def neighbourhood_values(image: np.ndarray, size: int = DEFAULT_SIZE) -> list[list[list[int]]]:
    """Return, for each pixel [row][col], the values within size of it, excluding itself.

    Values are listed in row-major order of the clipped window.
    """
    arr = _check(image, size)
    height, width = arr.shape
    return [
        [
            [int(arr[ii, jj])
             for ii in range(max(0, i - size), min(height, i + size + 1))
             for jj in range(max(0, j - size), min(width, j + size + 1))
             if (ii, jj) != (i, j)]
            for j in range(width)
        ]
        for i in range(height)
    ]


def wave_function_collapse(
    image: np.ndarray,
    size: int = DEFAULT_SIZE,
    rng: random.Random | None = None,
) -> np.ndarray:
    """Return a uint8 image whose pixels are drawn uniformly from their neighbourhoods."""
    arr = _check(image, size)
    if arr.size < 2:
        raise ValueError("image needs at least two pixels")
    if rng is None:
        rng = random.Random()
    options = neighbourhood_values(arr, size)
    return np.array([[rng.choice(cell) for cell in row] for row in options], dtype=np.uint8)