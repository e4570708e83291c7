import math

import pytest

from domain.route_guide import Point, Rectangle, haversine, in_range


ONE_DEGREE_METERS = 111194  # 6371000 * pi / 180, truncated


def test_haversine_same_point_is_zero():
    p = Point(407838351, -746143763)
    assert haversine(p, p) == 0
    assert haversine(Point(0, 0), Point(0, 0)) == 0


@pytest.mark.parametrize(
    "a, b",
    [
        (Point(407838351, -746143763), Point(408122808, -743999179)),
        (Point(0, 0), Point(10000000, 10000000)),
        (Point(-337000000, 1512000000), Point(515000000, -1270000)),
        (Point(900000000, 0), Point(-900000000, 0)),
    ],
)
def test_haversine_is_symmetric(a, b):
    assert haversine(a, b) == haversine(b, a)


def test_haversine_one_degree_along_meridian_and_equator():
    assert haversine(Point(0, 0), Point(10000000, 0)) == ONE_DEGREE_METERS
    assert haversine(Point(0, 0), Point(0, 10000000)) == ONE_DEGREE_METERS


def test_haversine_truncates_instead_of_rounding():
    a, b = Point(0, 0), Point(10000000, 0)
    exact = 6371000 * math.radians(1.0)
    assert exact - int(exact) > 0.5  # would round up
    assert haversine(a, b) == int(exact)
    assert isinstance(haversine(a, b), int)


def test_haversine_antipodal_points():
    half_circumference = int(6371000 * math.pi)
    assert haversine(Point(0, 0), Point(0, 1800000000)) == half_circumference


def test_in_range_normalizes_corners():
    inside = Point(410000000, -745000000)
    rect = Rectangle(lo=Point(400000000, -750000000), hi=Point(420000000, -730000000))
    flipped = Rectangle(lo=rect.hi, hi=rect.lo)
    mixed = Rectangle(lo=Point(420000000, -750000000), hi=Point(400000000, -730000000))

    assert in_range(inside, rect)
    assert in_range(inside, flipped)
    assert in_range(inside, mixed)


def test_in_range_is_inclusive_on_every_edge():
    rect = Rectangle(lo=Point(10, 20), hi=Point(30, 40))
    for p in (Point(10, 20), Point(30, 40), Point(10, 40), Point(30, 20), Point(20, 30)):
        assert in_range(p, rect)
    for p in (Point(9, 30), Point(31, 30), Point(20, 19), Point(20, 41)):
        assert not in_range(p, rect)


def test_in_range_degenerate_rectangle_matches_only_that_point():
    corner = Point(407838351, -746143763)
    rect = Rectangle(lo=corner, hi=corner)
    assert in_range(corner, rect)
    assert not in_range(Point(407838351, -746143762), rect)
    assert not in_range(Point(407838352, -746143763), rect)
