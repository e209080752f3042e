"""Numerical integration by rectangle sums."""

from __future__ import annotations

from collections.abc import Callable


def left_riemann_sum(
    func: Callable[[float], float],
    lower: float = 0.0,
    upper: float = 1.0,
    intervals: int = 100,
) -> float:
    """Approximate the integral of func over [lower, upper] with left endpoints."""
    if intervals <= 0:
        raise ValueError("intervals must be positive")
    width = (upper - lower) / intervals
    return sum(func(lower + width * i) * width for i in range(intervals))