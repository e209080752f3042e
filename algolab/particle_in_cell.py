"""One-dimensional electrostatic particle-in-cell simulation on a periodic grid."""

from __future__ import annotations

import random
from collections.abc import Sequence

import numpy as np

NUM_PARTICLES = 1000
NUM_CELLS = 100
DT = 0.01
LENGTH = 1.0
CHARGE = 1.0
MASS = 1.0


class ParticleOutOfBounds(ValueError):
    """Raised when a particle's position maps to no grid cell."""


class Simulation:
    """Particles pushed by a field derived from an accumulating charge density."""

    def __init__(
        self,
        positions: Sequence[float] | None = None,
        velocities: Sequence[float] | None = None,
        *,
        num_particles: int = NUM_PARTICLES,
        num_cells: int = NUM_CELLS,
        length: float = LENGTH,
        dt: float = DT,
        charge: float = CHARGE,
        mass: float = MASS,
        rng: random.Random | None = None,
    ) -> None:
        if num_cells <= 0:
            raise ValueError("num_cells must be positive")
        if length <= 0:
            raise ValueError("length must be positive")
        if mass == 0:
            raise ValueError("mass must not be zero")
        if positions is None:
            if num_particles < 0:
                raise ValueError("num_particles must not be negative")
            rng = rng or random.Random()
            positions = [length * rng.random() for _ in range(num_particles)]
        self.positions = np.array(positions, dtype=float)
        if velocities is None:
            self.velocities = np.zeros_like(self.positions)
        else:
            self.velocities = np.array(velocities, dtype=float)
            if self.velocities.shape != self.positions.shape:
                raise ValueError("positions and velocities must have the same length")

        self.num_cells = num_cells
        self.length = length
        self.dt = dt
        self.charge = charge
        self.mass = mass
        self.cell_width = length / num_cells
        self.density = np.zeros(num_cells)
        self.field = np.zeros(num_cells)

    def _cells(self) -> np.ndarray:
        cells = np.trunc(self.positions / self.cell_width).astype(np.int64)
        if np.any((cells < 0) | (cells >= self.num_cells)):
            raise ParticleOutOfBounds("Particle out of bounds!")
        return cells

    def step(self) -> None:
        """Push velocities and positions, deposit charge, then recompute the field."""
        cells = self._cells()
        self.velocities += self.charge / self.mass * self.field[cells] * self.dt

        x = self.positions + self.velocities * self.dt
        x = np.where(x < 0, x + self.length, np.where(x > self.length, x - self.length, x))
        self.positions = x

        cells = self._cells()
        np.add.at(self.density, cells, self.charge / self.cell_width)

        self.field = (np.roll(self.density, -1) - np.roll(self.density, 1)) / (2 * self.cell_width)

    def run(self, steps: int) -> None:
        """Advance the simulation by the given number of steps."""
        if steps < 0:
            raise ValueError("steps must not be negative")
        for _ in range(steps):
            self.step()