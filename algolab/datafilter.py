"""Random data generation and threshold filtering."""

from __future__ import annotations

import random
from collections.abc import Iterable

DATA_SIZE = 100
THRESHOLD = 50


def generate_data(count: int = DATA_SIZE, rng: random.Random | None = None) -> list[int]:
    """Return count random integers in the range 0..99."""
    if count < 0:
        raise ValueError("count must not be negative")
    rng = rng or random.Random()
    return [rng.randrange(100) for _ in range(count)]


def filter_above(values: Iterable[int], threshold: int = THRESHOLD) -> list[int]:
    """Return the values strictly greater than threshold, in their original order."""
    return [v for v in values if v > threshold]