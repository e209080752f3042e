"""Direct-summation gravitational N-body simulation in two dimensions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

G = 6.67430e-11  # gravitational constant
DT = 1.0  # time step in seconds


@dataclass
class Body:
    """A point mass with position (m), velocity (m/s), mass (kg) and force (N)."""

    x: float
    y: float
    vx: float
    vy: float
    mass: float
    fx: float = 0.0
    fy: float = 0.0

    def __post_init__(self) -> None:
        if self.mass <= 0:
            raise ValueError("mass must be positive")


@dataclass
class Universe:
    """A set of bodies advanced together with a fixed time step."""

    bodies: list[Body] = field(default_factory=list)
    dt: float = DT

    @property
    def positions(self) -> list[tuple[float, float]]:
        """Current (x, y) of every body."""
        return [(b.x, b.y) for b in self.bodies]

    def step(self) -> None:
        """Compute pairwise forces, then move each body and update its velocity."""
        for body in self.bodies:
            fx = fy = 0.0
            for other in self.bodies:
                if other is body:
                    continue
                dx = other.x - body.x
                dy = other.y - body.y
                r2 = dx * dx + dy * dy
                if r2 == 0:
                    raise ValueError("two bodies occupy the same position")
                r = math.sqrt(r2)
                force = G * body.mass * other.mass / r2
                fx += force * dx / r
                fy += force * dy / r
            body.fx, body.fy = fx, fy

        for body in self.bodies:
            body.x += self.dt * body.vx
            body.y += self.dt * body.vy
            body.vx += self.dt * body.fx / body.mass
            body.vy += self.dt * body.fy / body.mass

    def run(self, steps: int) -> None:
        """Advance the simulation by the given number of steps."""
        if steps < 0:
            raise ValueError("steps must not be negative")
        for _ in range(steps):
            self.step()


def solar_system() -> Universe:
    """Return the demonstration system: two suns with planets."""
    return Universe([
        Body(0.0, 0.0, 0.0, 0.0, 1.989e30),  # Sun
        Body(149.6e9, 0.0, 0.0, 29800.0, 5.972e24),  # Earth
        Body(-149e9, 0.0, 0.0, 0.0, 1.989e30),  # second sun
        Body(-149.6e9, 0.0, 0.0, -29800.0, 5.972e24),  # moon of the second sun
        Body(108.9e9, 0.0, 0.0, 35074.0, 4.867e24),  # Venus
        Body(227.9e9, 0.0, 0.0, 24077.0, 6.39e23),  # Mars
        Body(778.3e9, 0.0, 0.0, 13070.0, 1.898e27),  # Jupiter
    ])