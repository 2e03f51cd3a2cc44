"""Tests for the point helpers."""

import math

from sc2.position import Point2

from supplybot.geometry import distance, are_equal, avg_points, n_closest_points, within


def test_distance():
    assert distance((0, 0), (3, 4)) == 5
    assert distance(Point2((1, 1)), Point2((1, 1))) == 0


def test_are_equal_tolerates_float_noise():
    assert are_equal((20.5, 30.5), (20.5 + 1e-4, 30.5 - 1e-4))
    assert not are_equal((20.5, 30.5), (20.6, 30.5))


def test_avg_points():
    centroid = avg_points([(0, 0), (4, 0), (4, 4), (0, 4)])
    assert isinstance(centroid, Point2)
    assert centroid == Point2((2, 2))


def test_n_closest_points_orders_by_distance():
    points = [(10, 0), (1, 0), (5, 0), (2, 0)]
    assert n_closest_points(points, (0, 0), 2) == [(1, 0), (2, 0)]
    assert n_closest_points(points, (0, 0), 10) == [(1, 0), (2, 0), (5, 0), (10, 0)]


def test_within_is_inclusive():
    assert within((3, 0), (0, 0), 3, 6.5)
    assert within((6.5, 0), (0, 0), 3, 6.5)
    assert not within((2.9, 0), (0, 0), 3, 6.5)
    assert not within((0, math.nextafter(6.5, 7)), (0, 0), 3, 6.5)


def test_helpers_take_tuples_and_points_alike():
    assert distance((0, 0), Point2((3, 4))) == 5
    assert distance(Point2((0, 0)), (3, 4)) == 5

    closest = n_closest_points([(5, 5), Point2((1, 1))], Point2((0, 0)), 1)
    assert closest == [Point2((1, 1))]
    assert all(isinstance(p, Point2) for p in closest)


def test_n_closest_points_keeps_input_order_on_ties():
    assert n_closest_points([(0, 2), (2, 0), (0, -2)], (0, 0), 2) == [(0, 2), (2, 0)]
