import random
from itertools import combinations

import pytest

from algolab.closest_pair import closest_distance, closest_pair, distance, random_points


def test_distance_pythagorean_triple():
    assert distance((0, 0), (3, 4)) == 5.0


def test_distance_is_symmetric():
    a, b = (1.5, -2.0), (7.0, 3.25)
    assert distance(a, b) == distance(b, a)


def test_distance_to_self_is_zero():
    assert distance((12.5, 7.0), (12.5, 7.0)) == 0.0


def test_closest_pair_small_set():
    points = [(0, 0), (10, 0), (0, 3)]
    assert closest_pair(points) == (0, 2, 3.0)


def test_closest_pair_prefers_lowest_indices_on_tie():
    points = [(0, 0), (1, 0), (5, 5), (6, 5)]
    i, j, d = closest_pair(points)
    assert (i, j) == (0, 1)
    assert d == distance(points[2], points[3])


def test_duplicate_points_give_zero():
    assert closest_distance([(4, 4), (1, 1), (4, 4)]) == 0.0


def test_random_set_invariants():
    pts = random_points(60, 280.0, random.Random(7))
    i, j, d = closest_pair(pts)
    assert i < j
    assert d == distance(pts[i], pts[j])
    assert all(distance(a, b) >= d for a, b in combinations(pts, 2))
    assert closest_distance(pts) == d


@pytest.mark.parametrize("points", [[], [(1.0, 1.0)]])
def test_too_few_points(points):
    with pytest.raises(ValueError):
        closest_pair(points)
    with pytest.raises(ValueError):
        closest_distance(points)


def test_random_points_within_bounds():
    pts = random_points(200, 50.0, random.Random(1))
    assert len(pts) == 200
    assert all(0.0 <= x <= 50.0 and 0.0 <= y <= 50.0 for x, y in pts)


def test_random_points_reproducible_with_seed():
    first = random_points(20, 10.0, random.Random(3))
    second = random_points(20, 10.0, random.Random(3))
    assert first == second
    assert len(first) == 20
    assert all(0.0 <= x <= 10.0 and 0.0 <= y <= 10.0 for x, y in first)


def test_random_points_negative_count():
    with pytest.raises(ValueError):
        random_points(-1, 10.0, random.Random(0))