"""Stochastic gradient descent for linear regression and logistic classification."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass

from algolab.neural import sigmoid

NUM_EXAMPLES = 1000
NUM_EPOCHS = 100
LEARNING_RATE = 0.001
FEATURE_RANGE = 10.0
NOISE_SCALE = 0.1
TRUE_WEIGHT = 3.0
TRUE_BIAS = 2.0


@dataclass(frozen=True)
class Example:
    """A training example: feature vector x and target y."""

    x: tuple[float, ...]
    y: float


def _rng(rng: random.Random | None) -> random.Random:
    return random.Random() if rng is None else rng


def _uniform(rng: random.Random) -> float:
    return rng.uniform(-FEATURE_RANGE, FEATURE_RANGE)


def linear_data(count: int = NUM_EXAMPLES, rng: random.Random | None = None) -> list[Example]:
    """Return examples with y = 3x + 2 plus uniform noise of at most 1."""
    if count < 0:
        raise ValueError("count must not be negative")
    rng = _rng(rng)
    examples = []
    for _ in range(count):
        x = _uniform(rng)
        examples.append(Example((x,), TRUE_WEIGHT * x + TRUE_BIAS + _uniform(rng) * NOISE_SCALE))
    return examples


def classification_data(
    count: int = NUM_EXAMPLES,
    features: int = 2,
    rng: random.Random | None = None,
) -> list[Example]:
    """Return examples labelled 1 when the first two features sum above zero, else 0."""
    if count < 0:
        raise ValueError("count must not be negative")
    if features < 2:
        raise ValueError("at least two features are needed")
    rng = _rng(rng)
    examples = []
    for _ in range(count):
        x = tuple(_uniform(rng) for _ in range(features))
        examples.append(Example(x, 1 if x[0] + x[1] > 0 else 0))
    return examples


def _prepare(examples: Sequence[Example], epochs: int) -> tuple[list[Example], int]:
    data = list(examples)
    if not data:
        raise ValueError("no examples given")
    if epochs < 0:
        raise ValueError("epochs must not be negative")
    width = len(data[0].x)
    if any(len(ex.x) != width for ex in data):
        raise ValueError("examples have different numbers of features")
    return data, width


def _dot(weights: Sequence[float], x: Sequence[float], bias: float) -> float:
    return bias + sum(w * xi for w, xi in zip(weights, x))


def train_linear(
    examples: Sequence[Example],
    epochs: int = NUM_EPOCHS,
    learning_rate: float = LEARNING_RATE,
    rng: random.Random | None = None,
) -> tuple[list[float], float]:
    """Fit a linear model by per-example gradient steps; returns (weights, bias)."""
    data, width = _prepare(examples, epochs)
    rng = _rng(rng)
    weights = [0.0] * width
    bias = 0.0
    for _ in range(epochs):
        rng.shuffle(data)
        for ex in data:
            error = _dot(weights, ex.x, bias) - ex.y
            weights = [w - learning_rate * error * xi for w, xi in zip(weights, ex.x)]
            bias -= learning_rate * error
    return weights, bias


def train_logistic(
    examples: Sequence[Example],
    epochs: int = NUM_EPOCHS,
    learning_rate: float = LEARNING_RATE,
    rng: random.Random | None = None,
) -> tuple[list[float], float]:
    """Fit a logistic model by per-example gradient steps; returns (weights, bias)."""
    data, width = _prepare(examples, epochs)
    rng = _rng(rng)
    weights = [0.0] * width
    bias = 0.0
    for _ in range(epochs):
        rng.shuffle(data)
        for ex in data:
            prediction = sigmoid(_dot(weights, ex.x, bias))
            step = learning_rate * (ex.y - prediction) * prediction * (1.0 - prediction)
            weights = [w + step * xi for w, xi in zip(weights, ex.x)]
            bias += step
    return weights, bias