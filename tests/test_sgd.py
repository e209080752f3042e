import random

import pytest

from algolab.sgd import (
    Example,
    classification_data,
    linear_data,
    train_linear,
    train_logistic,
)


def test_linear_data_follows_line_within_noise():
    examples = linear_data(200, random.Random(1))
    assert len(examples) == 200
    for ex in examples:
        (x,) = ex.x
        assert -10.0 <= x <= 10.0
        assert abs(ex.y - (3.0 * x + 2.0)) <= 1.0


def test_classification_labels_follow_rule():
    examples = classification_data(300, 3, random.Random(2))
    for ex in examples:
        assert len(ex.x) == 3
        assert ex.y == (1 if ex.x[0] + ex.x[1] > 0 else 0)


def test_classification_needs_two_features():
    with pytest.raises(ValueError):
        classification_data(10, 1)


@pytest.mark.parametrize("factory", [linear_data, classification_data])
def test_negative_count_raises(factory):
    with pytest.raises(ValueError):
        factory(-1)


def test_train_linear_recovers_line():
    rng = random.Random(3)
    examples = [Example((x,), 3.0 * x + 2.0) for x in (rng.uniform(-10, 10) for _ in range(500))]
    weights, bias = train_linear(examples, epochs=100, rng=random.Random(4))
    assert weights[0] == pytest.approx(3.0, abs=0.05)
    assert bias == pytest.approx(2.0, abs=0.05)


def test_train_linear_on_noisy_data():
    weights, bias = train_linear(linear_data(1000, random.Random(5)), epochs=30, rng=random.Random(6))
    assert weights[0] == pytest.approx(3.0, abs=0.1)
    assert bias == pytest.approx(2.0, abs=0.1)


def test_zero_epochs_leave_model_untrained():
    assert train_linear(linear_data(10, random.Random(0)), epochs=0) == ([0.0], 0.0)


def test_train_logistic_separates_classes():
    examples = classification_data(1000, 2, random.Random(7))
    weights, bias = train_logistic(examples, epochs=10, rng=random.Random(8))
    correct = sum(
        (bias + weights[0] * ex.x[0] + weights[1] * ex.x[1] > 0) == (ex.y == 1)
        for ex in examples
    )
    assert correct / len(examples) >= 0.9


def test_training_is_reproducible_with_seed():
    examples = classification_data(100, 2, random.Random(9))
    first = train_logistic(examples, epochs=3, rng=random.Random(10))
    second = train_logistic(examples, epochs=3, rng=random.Random(10))
    assert first == second


@pytest.mark.parametrize("trainer", [train_linear, train_logistic])
def test_empty_examples_raise(trainer):
    with pytest.raises(ValueError):
        trainer([])


@pytest.mark.parametrize("trainer", [train_linear, train_logistic])
def test_mismatched_features_raise(trainer):
    with pytest.raises(ValueError):
        trainer([Example((1.0,), 1.0), Example((1.0, 2.0), 0.0)])


@pytest.mark.parametrize("trainer", [train_linear, train_logistic])
def test_negative_epochs_raise(trainer):
    with pytest.raises(ValueError):
        trainer([Example((1.0,), 1.0)], epochs=-1)