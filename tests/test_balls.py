import random

import pytest

from algolab.balls import Ball, random_balls, simulate


def test_ball_defaults():
    ball = Ball()
    assert (ball.x, ball.v, ball.m, ball.r) == (0.0, 0.0, 1.0, 1.0)


def test_ball_on_ground_bounces_upward():
    ball = Ball()
    ball.advance()
    assert ball.x == 1.0
    assert ball.v > 0


def test_free_fall_step():
    ball = Ball(x=50.0)
    ball.advance(dt=0.5, gravity=2.0)
    assert ball.x == 50.0
    assert ball.v == pytest.approx(-1.0)
    ball.advance(dt=0.5, gravity=2.0)
    assert ball.x == pytest.approx(49.5)


def test_simulate_keeps_balls_above_radius():
    balls = random_balls(50, random.Random(1))
    result = simulate(balls, steps=500)
    assert all(b.x >= b.r for b in result)


def test_simulate_returns_same_objects():
    balls = [Ball(x=10.0), Ball(x=20.0)]
    result = simulate(balls, steps=3)
    assert result[0] is balls[0]
    assert result[1] is balls[1]
    assert balls[0].x < 10.0


def test_simulate_zero_steps():
    balls = [Ball(x=5.0, v=2.0)]
    simulate(balls, steps=0)
    assert (balls[0].x, balls[0].v) == (5.0, 2.0)


def test_simulate_negative_steps_raises():
    with pytest.raises(ValueError):
        simulate([Ball()], steps=-1)


def test_random_balls_in_range_and_at_rest():
    balls = random_balls(200, random.Random(7))
    assert len(balls) == 200
    assert all(0.0 <= b.x < 100.0 for b in balls)
    assert all(b.v == 0.0 for b in balls)


def test_random_balls_reproducible():
    first = [b.x for b in random_balls(10, random.Random(3))]
    second = [b.x for b in random_balls(10, random.Random(3))]
    assert first == second


def test_random_balls_negative_count():
    with pytest.raises(ValueError):
        random_balls(-1)