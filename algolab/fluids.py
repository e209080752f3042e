"""Explicit finite-difference fluid models on square grids."""

from __future__ import annotations

import numpy as np

GRID_SIZE = 100

SHALLOW_DT = 0.01
REST_DEPTH = 0.1
GRAVITY = 9.8
MEAN_VELOCITY = 1.0
RAISED_DEPTH = 1.0

FLOW_DT = 0.01
DX = 1.0
VISCOSITY = 0.1
INLET_VELOCITY = 1.0

_INNER = (slice(1, -1), slice(1, -1))


def _check_size(*sizes: int) -> None:
    if any(s < 3 for s in sizes):
        raise ValueError("grid needs at least three cells along each axis")


class ShallowWater:
    """Linearised shallow-water model with a raised square of water in the middle.

    Depth, u (along columns) and v (along rows) are updated in place; the
    outermost ring of cells is never changed.
    """

    def __init__(
        self,
        rows: int = GRID_SIZE,
        cols: int = GRID_SIZE,
        dt: float = SHALLOW_DT,
        rest_depth: float = REST_DEPTH,
        gravity: float = GRAVITY,
        mean_velocity: float = MEAN_VELOCITY,
    ) -> None:
        _check_size(rows, cols)
        if mean_velocity == 0:
            raise ValueError("mean velocity must not be zero")
        if rest_depth == 0:
            raise ValueError("rest depth must not be zero")
        self.dt = dt
        self.rest_depth = rest_depth
        self.gravity = gravity
        self.mean_velocity = mean_velocity
        self.time_step = 0

        self.depth = np.full((rows, cols), rest_depth, dtype=np.float32)
        r0, r1 = rows // 4, rows // 4 * 3
        c0, c1 = cols // 4, cols // 4 * 3
        self.depth[r0:r1 + 1, c0:c1 + 1] = RAISED_DEPTH
        self.u = np.full((rows, cols), mean_velocity, dtype=np.float32)
        self.v = np.zeros((rows, cols), dtype=np.float32)

    def step(self) -> None:
        """Update the depth from the velocity divergence, then the velocity from the depth."""
        h, u, v = self.depth, self.u, self.v
        k = self.rest_depth / self.mean_velocity
        h[_INNER] = (h[_INNER]
                     - k * (u[_INNER] - u[1:-1, :-2]) * self.dt
                     - k * (v[_INNER] - v[:-2, 1:-1]) * self.dt)

        scale = self.gravity * self.dt / (2 * self.rest_depth)
        u[_INNER] -= scale * (h[1:-1, 2:] - h[1:-1, :-2])
        v[_INNER] -= scale * (h[2:, 1:-1] - h[:-2, 1:-1])
        self.time_step += 1


class DiffusionFlow:
    """A jet of velocity diffusing across a channel, carrying a density field.

    Each step writes only interior cells; the boundary of every field is zero
    after the first step.
    """

    def __init__(
        self,
        size: int = GRID_SIZE,
        dt: float = FLOW_DT,
        dx: float = DX,
        viscosity: float = VISCOSITY,
    ) -> None:
        _check_size(size)
        if dx == 0:
            raise ValueError("dx must not be zero")
        self.dt = dt
        self.dx = dx
        self.viscosity = viscosity
        self.time_step = 0

        self.u = np.zeros((size, size), dtype=np.float32)
        self.u[:, size // 4:3 * size // 4 + 1] = 1.0
        self.v = np.zeros((size, size), dtype=np.float32)
        self.density = np.ones((size, size), dtype=np.float32)

    def step(self) -> None:
        """Diffuse u along rows and v along columns, then advect the density."""
        u, v, rho = self.u, self.v, self.density
        diffusion = self.viscosity / (self.dx * self.dx) * self.dt

        new_u = np.zeros_like(u)
        new_v = np.zeros_like(v)
        new_u[_INNER] = u[_INNER] + diffusion * (u[2:, 1:-1] - 2 * u[_INNER] + u[:-2, 1:-1])
        new_v[_INNER] = v[_INNER] + diffusion * (v[1:-1, 2:] - 2 * v[_INNER] + v[1:-1, :-2])

        centre = rho[_INNER]
        half = self.dt / (2 * self.dx)
        new_rho = np.zeros_like(rho)
        new_rho[_INNER] = (centre
                           - centre * (new_u[2:, 1:-1] - new_u[:-2, 1:-1]) * half
                           - centre * (new_v[1:-1, 2:] - new_v[1:-1, :-2]) * half)

        self.u, self.v, self.density = new_u, new_v, new_rho
        self.time_step += 1


class InletFlow:
    """A still field driven by a fixed inlet velocity along its first row."""

    def __init__(
        self,
        size: int = GRID_SIZE,
        dt: float = FLOW_DT,
        dx: float = DX,
        viscosity: float = VISCOSITY,
        inlet_velocity: float = INLET_VELOCITY,
    ) -> None:
        _check_size(size)
        if dx == 0:
            raise ValueError("dx must not be zero")
        self.dt = dt
        self.dx = dx
        self.viscosity = viscosity
        self.inlet_velocity = inlet_velocity
        self.time_step = 0
        self.u = np.zeros((size, size), dtype=np.float32)
        self.v = np.zeros((size, size), dtype=np.float32)

    def step(self) -> None:
        """Advance the interior by one explicit step, then reset the inlet row."""
        u, v = self.u, self.v
        two_dx = 2 * self.dx
        u_x = (u[2:, 1:-1] - u[:-2, 1:-1]) / two_dx
        u_y = (u[1:-1, 2:] - u[1:-1, :-2]) / two_dx
        v_x = (v[2:, 1:-1] - v[:-2, 1:-1]) / two_dx
        v_y = (v[1:-1, 2:] - v[1:-1, :-2]) / two_dx

        uc, vc = u[_INNER], v[_INNER]
        spread = self.viscosity * (u_x + v_y)
        du_dt = -uc * u_x - vc * u_y + spread
        dv_dt = -uc * v_x - vc * v_y + spread

        new_u = u.copy()
        new_v = v.copy()
        new_u[_INNER] = uc + du_dt * self.dt
        new_v[_INNER] = vc + dv_dt * self.dt
        new_u[0, 1:-1] = self.inlet_velocity
        new_v[0, 1:-1] = 0.0

        self.u, self.v = new_u, new_v
        self.time_step += 1