import math

import pytest

from scanslam.geometry import OrientedPoint
from scanslam.movement import FSRMovement, frame_transformation


POSES = [
    (OrientedPoint(0.0, 0.0, 0.0), OrientedPoint(1.0, 2.0, 0.5)),
    (OrientedPoint(3.0, -1.0, 2.5), OrientedPoint(-2.0, 4.0, -2.8)),
    (OrientedPoint(-5.0, 5.0, -1.0), OrientedPoint(-5.0, 5.0, 1.0)),
]


@pytest.mark.parametrize("a,b", POSES)
def test_between_then_move_reaches_target(a, b):
    m = FSRMovement.between(a, b)
    result = m.move(a)
    assert result.x == pytest.approx(b.x, abs=1e-9)
    assert result.y == pytest.approx(b.y, abs=1e-9)
    assert math.cos(result.theta) == pytest.approx(math.cos(b.theta), abs=1e-9)
    assert math.sin(result.theta) == pytest.approx(math.sin(b.theta), abs=1e-9)


@pytest.mark.parametrize("a,b", POSES)
def test_compose_with_inverse_is_identity(a, b):
    m = FSRMovement.between(a, b)
    ident = m.composed(m.inverted())
    assert ident.f == pytest.approx(0.0, abs=1e-9)
    assert ident.s == pytest.approx(0.0, abs=1e-9)
    assert math.sin(ident.r) == pytest.approx(0.0, abs=1e-9)
    assert math.cos(ident.r) == pytest.approx(1.0)


def test_composition_matches_sequential_moves():
    m1, m2 = FSRMovement(1.0, 0.5, 0.3), FSRMovement(-0.2, 2.0, 1.4)
    start = OrientedPoint(2.0, -1.0, 0.7)
    combined = m1.composed(m2).move(start)
    sequential = m2.move(m1.move(start))
    assert combined.x == pytest.approx(sequential.x, abs=1e-9)
    assert combined.y == pytest.approx(sequential.y, abs=1e-9)
    assert math.cos(combined.theta) == pytest.approx(math.cos(sequential.theta), abs=1e-9)
    assert math.sin(combined.theta) == pytest.approx(math.sin(sequential.theta), abs=1e-9)


@pytest.mark.parametrize("r", [0.0, 4.0, -7.0, 3 * math.pi])
def test_normalized_range(r):
    m = FSRMovement(1.0, 2.0, r).normalized()
    assert -math.pi <= m.r < math.pi
    assert math.cos(m.r) == pytest.approx(math.cos(r))
    assert (m.f, m.s) == (1.0, 2.0)


def test_inverted_twice_is_original():
    m = FSRMovement(1.5, -0.5, 0.9)
    back = m.inverted().inverted()
    assert back.f == pytest.approx(m.f)
    assert back.s == pytest.approx(m.s)
    assert back.r == pytest.approx(m.r)


def test_frame_transformation_reference_maps_to_reference():
    ref1 = OrientedPoint(1.0, 2.0, 0.4)
    ref2 = OrientedPoint(-3.0, 0.5, -1.2)
    result = frame_transformation(ref1, ref2, ref1)
    assert result.x == pytest.approx(ref2.x, abs=1e-9)
    assert result.y == pytest.approx(ref2.y, abs=1e-9)
    assert math.cos(result.theta) == pytest.approx(math.cos(ref2.theta), abs=1e-9)
    assert math.sin(result.theta) == pytest.approx(math.sin(ref2.theta), abs=1e-9)


def test_frame_transformation_same_frame_is_identity():
    ref = OrientedPoint(1.0, 2.0, 0.4)
    pose = OrientedPoint(4.0, -1.0, 2.0)
    result = frame_transformation(ref, ref, pose)
    assert result.x == pytest.approx(pose.x, abs=1e-9)
    assert result.y == pytest.approx(pose.y, abs=1e-9)
    assert math.cos(result.theta) == pytest.approx(math.cos(pose.theta), abs=1e-9)
    assert math.sin(result.theta) == pytest.approx(math.sin(pose.theta), abs=1e-9)