"""A fully connected feed-forward network with sigmoid activations."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np


def sigmoid(x: float) -> float:
    """Return the logistic function of x without overflowing for large |x|."""
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    e = math.exp(x)
    return e / (1.0 + e)


class FeedForwardNetwork:
    """Layers of sigmoid units with normally distributed initial weights and biases."""

    def __init__(self, layer_sizes: Sequence[int], rng: np.random.Generator | None = None) -> None:
        sizes = [int(s) for s in layer_sizes]
        if not sizes:
            raise ValueError("at least one layer is needed")
        if any(s <= 0 for s in sizes):
            raise ValueError("layer sizes must be positive")
        if rng is None:
            rng = np.random.default_rng()
        self.layer_sizes = tuple(sizes)
        self.biases = [rng.standard_normal(n) for n in sizes[1:]]
        self.weights = [rng.standard_normal((n, m)) for m, n in zip(sizes, sizes[1:])]

    def feedforward(self, inputs: Sequence[float]) -> list[float]:
        """Propagate inputs through every layer and return the output activations."""
        activations = np.asarray(inputs, dtype=float)
        if activations.shape != (self.layer_sizes[0],):
            raise ValueError(f"expected {self.layer_sizes[0]} inputs")
        for weights, biases in zip(self.weights, self.biases):
            z = weights @ activations + biases
            activations = np.array([sigmoid(v) for v in z])
        return [float(a) for a in activations]