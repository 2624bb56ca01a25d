"""Forward/sideward/rotate movements between poses."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .geometry import OrientedPoint, normalize_angle


@dataclass(frozen=True)
class FSRMovement:
    """A movement expressed as forward, sideward and rotational parts."""

    f: float = 0.0
    s: float = 0.0
    r: float = 0.0

    def normalized(self) -> FSRMovement:
        """The same movement with its rotation in [-pi, pi)."""
        return FSRMovement(self.f, self.s, normalize_angle(self.r))

    def inverted(self) -> FSRMovement:
        """The movement that undoes this one."""
        c, s = math.cos(self.r), math.sin(self.r)
        return FSRMovement(
            -c * self.f - s * self.s,
            s * self.f - c * self.s,
            -self.r,
        ).normalized()

    def composed(self, other: FSRMovement) -> FSRMovement:
        """This movement followed by ``other``."""
        c, s = math.cos(self.r), math.sin(self.r)
        return FSRMovement(
            c * other.f - s * other.s + self.f,
            s * other.f + c * other.s + self.s,
            self.r + other.r,
        ).normalized()

    def move(self, pose: OrientedPoint) -> OrientedPoint:
        """Apply the movement to ``pose``."""
        c, s = math.cos(pose.theta), math.sin(pose.theta)
        return OrientedPoint(
            pose.x + self.f * c - self.s * s,
            pose.y + self.f * s + self.s * c,
            self.r + pose.theta,
        ).normalized()

    @classmethod
    def between(cls, pt1: OrientedPoint, pt2: OrientedPoint) -> FSRMovement:
        """The movement that takes ``pt1`` to ``pt2``."""
        s, c = math.sin(pt1.theta), math.cos(pt1.theta)
        dx, dy = pt2.x - pt1.x, pt2.y - pt1.y
        return cls(dy * s + dx * c, dy * c - dx * s, pt2.theta - pt1.theta).normalized()


def frame_transformation(
    reference_frame1: OrientedPoint,
    reference_frame2: OrientedPoint,
    pose_frame1: OrientedPoint,
) -> OrientedPoint:
    """Map a pose from frame 1 to frame 2, given one reference pose in each."""
    zero = OrientedPoint()
    inverse_ref1 = FSRMovement.between(zero, reference_frame1).inverted()
    to_ref2 = FSRMovement.between(zero, reference_frame2)
    to_pose = FSRMovement.between(zero, pose_frame1)
    return to_ref2.composed(inverse_ref1).composed(to_pose).move(zero)