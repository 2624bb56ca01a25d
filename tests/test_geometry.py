import math

import pytest

from scanslam.geometry import (
    OrientedPoint,
    Point,
    absolute_difference,
    absolute_sum,
    euclidean_dist,
    interpolate,
    normalize_angle,
    point_max,
    point_min,
    radial_order_key,
    square_dist,
)


def test_point_arithmetic_round_trip():
    p, q = Point(1.5, -2.0), Point(3.0, 4.25)
    assert (p + q) - q == p
    assert 2 * p == p * 2 == p + p


def test_point_dot_is_squared_norm():
    p = Point(3.0, -1.5)
    assert p.dot(p) == pytest.approx(math.hypot(p.x, p.y) ** 2)


def test_point_ordering_is_lexicographic():
    pts = [Point(2, 1), Point(1, 5), Point(1, 2)]
    assert sorted(pts) == [Point(1, 2), Point(1, 5), Point(2, 1)]


def test_oriented_point_arithmetic():
    a, b = OrientedPoint(1.0, 2.0, 0.5), OrientedPoint(-0.5, 4.0, 1.0)
    assert (a + b) - b == a
    assert a * 2.0 == 2.0 * a == a + a


@pytest.mark.parametrize("theta", [0.0, 1.0, -3.0, 7.5, -12.0, 100.0])
def test_normalize_angle_range_and_direction(theta):
    r = normalize_angle(theta)
    assert -math.pi <= r < math.pi
    assert math.cos(r) == pytest.approx(math.cos(theta))
    assert math.sin(r) == pytest.approx(math.sin(theta))


def test_normalize_angle_pi_wraps_to_minus_pi():
    assert normalize_angle(math.pi) == pytest.approx(-math.pi)


def test_normalized_keeps_position():
    p = OrientedPoint(1.0, 2.0, 9.0).normalized()
    assert (p.x, p.y) == (1.0, 2.0)
    assert -math.pi <= p.theta < math.pi


def test_rotate_preserves_distance_and_adds_angle():
    p = OrientedPoint(3.0, 4.0, 0.2)
    r = p.rotate(0.7)
    assert math.hypot(r.x, r.y) == pytest.approx(math.hypot(p.x, p.y))
    assert r.theta == pytest.approx(0.9)


def test_position():
    assert OrientedPoint(1.0, 2.0, 3.0).position() == Point(1.0, 2.0)


@pytest.mark.parametrize(
    "p1,p2",
    [
        (OrientedPoint(1.0, 2.0, 0.3), OrientedPoint(-4.0, 0.5, 2.9)),
        (OrientedPoint(0.0, 0.0, -3.0), OrientedPoint(5.0, 5.0, 3.0)),
    ],
)
def test_absolute_sum_inverts_difference(p1, p2):
    delta = absolute_difference(p2, p1)
    result = absolute_sum(p1, delta)
    assert result.x == pytest.approx(p2.x, abs=1e-9)
    assert result.y == pytest.approx(p2.y, abs=1e-9)
    assert math.cos(result.theta) == pytest.approx(math.cos(p2.theta), abs=1e-9)
    assert math.sin(result.theta) == pytest.approx(math.sin(p2.theta), abs=1e-9)


def test_absolute_sum_with_point_keeps_length():
    pose = OrientedPoint(1.0, -1.0, 1.2)
    offset = Point(2.0, 0.5)
    result = absolute_sum(pose, offset)
    assert isinstance(result, Point)
    assert euclidean_dist(result, pose) == pytest.approx(math.hypot(offset.x, offset.y))


def test_interpolate_points_endpoints():
    p1, p2 = Point(0.0, 1.0), Point(4.0, -3.0)
    assert interpolate(p1, 1.0, p2, 3.0, 1.0) == p1
    assert interpolate(p1, 1.0, p2, 3.0, 3.0) == p2


def test_interpolate_poses_start():
    p1, p2 = OrientedPoint(0.0, 1.0, 0.4), OrientedPoint(4.0, -3.0, 1.1)
    r = interpolate(p1, 0.0, p2, 2.0, 0.0)
    assert r.x == pytest.approx(p1.x, abs=1e-9)
    assert r.y == pytest.approx(p1.y, abs=1e-9)
    assert math.cos(r.theta) == pytest.approx(math.cos(p1.theta), abs=1e-9)
    assert math.sin(r.theta) == pytest.approx(math.sin(p1.theta), abs=1e-9)
    end = interpolate(p1, 0.0, p2, 2.0, 2.0)
    assert (end.x, end.y) == (p2.x, p2.y)


def test_distances():
    a, b = OrientedPoint(1.0, 2.0, 0.0), OrientedPoint(-2.0, 6.0, 1.0)
    assert euclidean_dist(a, b) == pytest.approx(euclidean_dist(b, a))
    assert square_dist(a, b) == pytest.approx(euclidean_dist(a, b) ** 2)
    assert euclidean_dist(a, Point(1.0, 2.0)) == 0.0


def test_point_max_min():
    p, q = Point(1, 7), Point(4, -2)
    hi, lo = point_max(p, q), point_min(p, q)
    assert hi.x >= max(p.x, q.x) and hi.y >= max(p.y, q.y)
    assert hi + lo == p + q


def test_radial_order_key():
    origin = Point(1.0, 1.0)
    pts = [Point(1.0 + math.cos(a), 1.0 + math.sin(a)) for a in (3.0, -2.0, 0.5)]
    ordered = sorted(pts, key=radial_order_key(origin))
    assert ordered == [pts[1], pts[2], pts[0]]