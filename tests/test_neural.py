import numpy as np
import pytest

from algolab.neural import FeedForwardNetwork, sigmoid


def test_sigmoid_at_zero():
    assert sigmoid(0.0) == 0.5


@pytest.mark.parametrize("x", [-5.0, -0.3, 0.7, 12.0])
def test_sigmoid_symmetry(x):
    assert sigmoid(x) + sigmoid(-x) == pytest.approx(1.0)


def test_sigmoid_extremes_do_not_overflow():
    assert sigmoid(-1000.0) == 0.0
    assert sigmoid(1000.0) == 1.0


def test_output_size_and_range():
    net = FeedForwardNetwork([2, 3, 1], np.random.default_rng(0))
    output = net.feedforward([1.0, 2.0])
    assert len(output) == 1
    assert 0.0 < output[0] < 1.0


def test_weight_shapes_follow_layers():
    net = FeedForwardNetwork([4, 3, 2], np.random.default_rng(1))
    assert [w.shape for w in net.weights] == [(3, 4), (2, 3)]
    assert [b.shape for b in net.biases] == [(3,), (2,)]


def test_zero_parameters_give_half():
    net = FeedForwardNetwork([2, 3, 2], np.random.default_rng(2))
    net.weights = [np.zeros_like(w) for w in net.weights]
    net.biases = [np.zeros_like(b) for b in net.biases]
    assert net.feedforward([5.0, -4.0]) == [0.5, 0.5]


def test_single_layer_returns_input():
    net = FeedForwardNetwork([3])
    assert net.feedforward([0.1, 2.0, -1.5]) == [0.1, 2.0, -1.5]


def test_reproducible_with_seed():
    a = FeedForwardNetwork([2, 3, 1], np.random.default_rng(7)).feedforward([1.0, 2.0])
    b = FeedForwardNetwork([2, 3, 1], np.random.default_rng(7)).feedforward([1.0, 2.0])
    assert a == b


def test_wrong_input_size_raises():
    net = FeedForwardNetwork([2, 3, 1], np.random.default_rng(0))
    with pytest.raises(ValueError):
        net.feedforward([1.0, 2.0, 3.0])


@pytest.mark.parametrize("sizes", [[], [2, 0, 1], [-1, 2]])
def test_invalid_layer_sizes_raise(sizes):
    with pytest.raises(ValueError):
        FeedForwardNetwork(sizes)