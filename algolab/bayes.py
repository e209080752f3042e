"""Simple predict-and-correct filters, including a lunar lander descent model."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

MIN_THROTTLE = 0.6
MAX_THROTTLE = 1.0

DESCENT_KP = 1.0
DESCENT_THRUST_SCALE = 15000.0

LANDER_KP = 2.0
LANDER_THRUST_SCALE = 1500.0
LANDER_DEAD_BAND = 0.3
GRAVITY = 1.625


@dataclass(frozen=True)
class LanderStep:
    """State of the lander at one control step and the throttle chosen there."""

    time: float
    rate: float
    altitude: float
    measurement: float
    throttle: float


def _check_lengths(**sequences: Sequence[float]) -> int:
    lengths = {len(seq) for seq in sequences.values()}
    if len(lengths) > 1:
        names = ", ".join(sequences)
        raise ValueError(f"{names} must have the same length")
    return lengths.pop() if lengths else 0


def simple_filter(
    state: Sequence[float],
    measurement: Sequence[float],
    control: Sequence[float],
) -> list[float]:
    """Apply control then move halfway toward the measurement, element-wise."""
    _check_lengths(state=state, measurement=measurement, control=control)
    result = []
    for s, m, c in zip(state, measurement, control):
        predicted = s + c
        result.append(predicted + (m - predicted) / 2)
    return result


def descent_filter(
    initial_rate: float,
    measurement: Sequence[float],
    control: Sequence[float],
    dt: float = 0.05,
    target_rate: float = 2.0,
) -> list[float]:
    """Track a descent rate under proportional throttle; returns len(control)+1 states."""
    _check_lengths(measurement=measurement, control=control)
    states = [float(initial_rate)]
    for m, c in zip(measurement, control):
        current = states[-1]
        throttle = DESCENT_KP * (target_rate - current) + MIN_THROTTLE
        throttle = min(max(throttle, MIN_THROTTLE), MAX_THROTTLE)
        predicted = current + (c * throttle / DESCENT_THRUST_SCALE) * dt
        states.append(predicted + (m - predicted) / 2)
    return states


def _lander_throttle(error: float) -> float:
    throttle = LANDER_KP * error
    if LANDER_DEAD_BAND < throttle < MIN_THROTTLE:
        return MIN_THROTTLE
    if throttle > MAX_THROTTLE:
        return MAX_THROTTLE
    return 0.0


def lander_filter(
    initial_rate: float,
    initial_altitude: float,
    measurement_noise: Sequence[float],
    control: Sequence[float],
    dt: float = 0.05,
    target_rate: float = -2.0,
) -> list[LanderStep]:
    """Simulate a lander under gravity and return one LanderStep per control input.

    The measured rate is the current rate plus the given noise; the throttle is
    MIN_THROTTLE in a narrow band, MAX_THROTTLE above it, and off otherwise.
    """
    _check_lengths(measurement_noise=measurement_noise, control=control)
    rate = float(initial_rate)
    altitude = float(initial_altitude)
    steps = []
    for i, (noise, c) in enumerate(zip(measurement_noise, control)):
        measured = noise + rate
        throttle = _lander_throttle(target_rate - measured)
        steps.append(LanderStep(i * dt, rate, altitude, measured, throttle))

        next_rate = rate + (c * throttle / LANDER_THRUST_SCALE) * dt - GRAVITY * dt
        next_altitude = altitude + next_rate * dt
        next_rate += (measured - next_rate) / 2
        next_altitude += (altitude - next_altitude) / 2
        rate, altitude = next_rate, next_altitude
    return steps