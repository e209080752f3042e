"""One-dimensional balls falling under gravity and bouncing off the ground."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass

GRAVITY = 9.81
DT = 0.01
STEPS = 1000
BALL_COUNT = 1000
MAX_START_HEIGHT = 100.0


@dataclass
class Ball:
    """Height x, velocity v, mass m and radius r of a ball."""

    x: float = 0.0
    v: float = 0.0
    m: float = 1.0
    r: float = 1.0

    def advance(self, dt: float = DT, gravity: float = GRAVITY) -> None:
        """Move one time step; below its radius the ball is lifted and bounces up."""
        self.x += self.v * dt
        self.v -= gravity * dt
        if self.x < self.r:
            self.x = self.r
            self.v = abs(self.v)


def simulate(
    balls: Sequence[Ball],
    steps: int = STEPS,
    dt: float = DT,
    gravity: float = GRAVITY,
) -> list[Ball]:
    """Advance every ball by the given number of steps in place and return them."""
    if steps < 0:
        raise ValueError("steps must not be negative")
    for _ in range(steps):
        for ball in balls:
            ball.advance(dt, gravity)
    return list(balls)


def random_balls(count: int = BALL_COUNT, rng: random.Random | None = None) -> list[Ball]:
    """Return count balls at rest at random heights in [0, 100)."""
    if count < 0:
        raise ValueError("count must not be negative")
    rng = rng or random.Random()
    return [Ball(x=rng.random() * MAX_START_HEIGHT) for _ in range(count)]