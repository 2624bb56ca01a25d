"""Planar points, oriented poses and the usual operations on them."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Callable, Union

Number = Union[int, float]


def normalize_angle(theta: float) -> float:
    """Bring an angle into the half-open interval [-pi, pi)."""
    if -math.pi <= theta < math.pi:
        return theta
    multiplier = int(theta / (2 * math.pi))
    theta -= multiplier * 2 * math.pi
    if theta >= math.pi:
        theta -= 2 * math.pi
    if theta < -math.pi:
        theta += 2 * math.pi
    return theta


@dataclass(frozen=True, order=True)
class Point:
    """A 2-D point; integer coordinates denote grid cells."""

    x: Number = 0
    y: Number = 0

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: Number) -> Point:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Point(self.x * factor, self.y * factor)

    def __rmul__(self, factor: Number) -> Point:
        return self.__mul__(factor)

    def dot(self, other: Point) -> Number:
        """Inner product of two points taken as vectors."""
        return self.x * other.x + self.y * other.y


@dataclass(frozen=True)
class OrientedPoint:
    """A pose: position plus heading angle."""

    x: float = 0.0
    y: float = 0.0
    theta: float = 0.0

    def __add__(self, other: OrientedPoint) -> OrientedPoint:
        if not isinstance(other, OrientedPoint):
            return NotImplemented
        return OrientedPoint(self.x + other.x, self.y + other.y, self.theta + other.theta)

    def __sub__(self, other: OrientedPoint) -> OrientedPoint:
        if not isinstance(other, OrientedPoint):
            return NotImplemented
        return OrientedPoint(self.x - other.x, self.y - other.y, self.theta - other.theta)

    def __mul__(self, factor: Number) -> OrientedPoint:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return OrientedPoint(self.x * factor, self.y * factor, self.theta * factor)

    def __rmul__(self, factor: Number) -> OrientedPoint:
        return self.__mul__(factor)

    def normalized(self) -> OrientedPoint:
        """The same pose with its heading in [-pi, pi)."""
        return replace(self, theta=normalize_angle(self.theta))

    def rotate(self, alpha: float) -> OrientedPoint:
        """Rotate the pose about the origin by ``alpha``."""
        s, c = math.sin(alpha), math.cos(alpha)
        a = alpha + self.theta
        a = math.atan2(math.sin(a), math.cos(a))
        return OrientedPoint(c * self.x - s * self.y, s * self.x + c * self.y, a)

    def position(self) -> Point:
        """The position part of the pose."""
        return Point(self.x, self.y)


def absolute_difference(p1: OrientedPoint, p2: OrientedPoint) -> OrientedPoint:
    """Express ``p1`` in the frame whose origin is ``p2``."""
    delta = p1 - p2
    dtheta = math.atan2(math.sin(delta.theta), math.cos(delta.theta))
    s, c = math.sin(p2.theta), math.cos(p2.theta)
    return OrientedPoint(c * delta.x + s * delta.y, -s * delta.x + c * delta.y, dtheta)


def absolute_sum(p1: OrientedPoint, p2: Union[OrientedPoint, Point]):
    """Apply the increment ``p2``, given in the frame of ``p1``, to ``p1``."""
    s, c = math.sin(p1.theta), math.cos(p1.theta)
    if isinstance(p2, OrientedPoint):
        return OrientedPoint(c * p2.x - s * p2.y, s * p2.x + c * p2.y, p2.theta) + p1
    return Point(c * p2.x - s * p2.y, s * p2.x + c * p2.y) + p1.position()


def interpolate(p1, t1: float, p2, t2: float, t3: float):
    """Linear interpolation between ``p1`` at time ``t1`` and ``p2`` at ``t2``."""
    gain = (t3 - t1) / (t2 - t1)
    if isinstance(p1, OrientedPoint):
        x = p1.x + (p2.x - p1.x) * gain
        y = p1.y + (p2.y - p1.y) * gain
        s = math.sin(p1.theta) + math.sin(p2.theta) * gain
        c = math.cos(p1.theta) + math.cos(p2.theta) * gain
        return OrientedPoint(x, y, math.atan2(s, c))
    return p1 + (p2 - p1) * gain


def euclidean_dist(p1, p2) -> float:
    """Distance between the positions of two points or poses."""
    return math.hypot(p1.x - p2.x, p1.y - p2.y)


def square_dist(p1, p2) -> float:
    """Squared distance between the positions of two points or poses."""
    return (p1.x - p2.x) * (p1.x - p2.x) + (p1.y - p2.y) * (p1.y - p2.y)


def point_max(p1, p2):
    """``p1`` with each coordinate replaced by the larger of the two."""
    return replace(p1, x=p1.x if p1.x > p2.x else p2.x, y=p1.y if p1.y > p2.y else p2.y)


def point_min(p1, p2):
    """``p1`` with each coordinate replaced by the smaller of the two."""
    return replace(p1, x=p1.x if p1.x < p2.x else p2.x, y=p1.y if p1.y < p2.y else p2.y)


def radial_order_key(origin) -> Callable[[Point], float]:
    """Sort key ordering points by their bearing seen from ``origin``."""

    def key(p) -> float:
        return math.atan2(p.y - origin.y, p.x - origin.x)

    return key