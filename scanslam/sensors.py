"""Sensors and the readings they produce: odometry and range scanners."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Sequence

from .geometry import OrientedPoint, Point

_MAX = sys.float_info.max


@dataclass
class Sensor:
    """Base class of all sensors; a sensor is known by its name."""

    name: str = ""


SensorMap = Dict[str, Sensor]


@dataclass
class OdometrySensor(Sensor):
    """An odometry source; ``ideal`` marks a noise-free one."""

    ideal: bool = False


@dataclass
class Beam:
    """One beam of a range sensor, with its cached sine and cosine."""

    pose: OrientedPoint = field(default_factory=OrientedPoint)
    span: float = 0.0
    max_range: float = 89.0
    s: float = field(init=False, default=0.0)
    c: float = field(init=False, default=1.0)

    def __post_init__(self) -> None:
        self.s = math.sin(self.pose.theta)
        self.c = math.cos(self.pose.theta)


@dataclass
class RangeSensor(Sensor):
    """A range scanner mounted at ``pose`` relative to the robot."""

    pose: OrientedPoint = field(default_factory=OrientedPoint)
    beams: List[Beam] = field(default_factory=list)
    new_format: bool = False

    @classmethod
    def from_resolution(
        cls,
        name: str,
        beams: int,
        resolution: float,
        pose: OrientedPoint = OrientedPoint(),
        span: float = 0.0,
        max_range: float = 89.0,
    ) -> RangeSensor:
        """A sensor of ``beams`` equally spaced beams centred on its heading."""
        angle = -0.5 * resolution * beams
        beam_list = []
        for _ in range(beams):
            beam_list.append(Beam(OrientedPoint(0.0, 0.0, angle), span, max_range))
            angle += resolution
        return cls(name=name, pose=pose, beams=beam_list)

    @classmethod
    def from_angles(
        cls,
        name: str,
        angles: Iterable[float],
        pose: OrientedPoint = OrientedPoint(),
        span: float = 0.0,
        max_range: float = 89.0,
    ) -> RangeSensor:
        """A sensor whose beams point at the given angles."""
        beam_list = [Beam(OrientedPoint(0.0, 0.0, a), span, max_range) for a in angles]
        return cls(name=name, pose=pose, beams=beam_list)

    def update_beams_lookup(self) -> None:
        """Recompute the cached sine and cosine of every beam."""
        for beam in self.beams:
            beam.s = math.sin(beam.pose.theta)
            beam.c = math.cos(beam.pose.theta)


@dataclass
class SensorReading:
    """A timestamped reading from a sensor."""

    sensor: Optional[Sensor] = None
    time: float = 0.0


@dataclass
class OdometryReading(SensorReading):
    """Pose, speed and acceleration reported by odometry."""

    pose: OrientedPoint = field(default_factory=OrientedPoint)
    speed: OrientedPoint = field(default_factory=OrientedPoint)
    acceleration: OrientedPoint = field(default_factory=OrientedPoint)


def _kept(angles: Sequence[float], dists: Sequence[float], density: float) -> Iterator[bool]:
    """Whether each beam end lies at least ``density`` from the last kept one."""
    last = Point(0.0, 0.0)
    for angle, dist in zip(angles, dists):
        end = Point(math.cos(angle) * dist, math.sin(angle) * dist)
        delta = last - end
        if math.sqrt(delta.dot(delta)) < density:
            yield False
        else:
            last = end
            yield True


@dataclass
class RangeReading(SensorReading):
    """One scan: a distance per beam, the beam angles and the robot pose.

    When no angles are given they are taken from the sensor's beams, whose
    number must then match the number of distances.
    """

    dists: List[float] = field(default_factory=list)
    angles: List[float] = field(default_factory=list)
    pose: OrientedPoint = field(default_factory=OrientedPoint)

    def __post_init__(self) -> None:
        self.dists = [float(d) for d in self.dists]
        self.angles = [float(a) for a in self.angles]
        if self.angles:
            if len(self.angles) != len(self.dists):
                raise ValueError("a range reading needs one angle per distance")
        elif self.dists and isinstance(self.sensor, RangeSensor):
            if len(self.sensor.beams) != len(self.dists):
                raise ValueError("number of distances does not match the sensor's beams")
            self.angles = [beam.pose.theta for beam in self.sensor.beams]

    def __len__(self) -> int:
        return len(self.dists)

    def _range_sensor(self) -> RangeSensor:
        if not isinstance(self.sensor, RangeSensor):
            raise ValueError("the reading does not come from a range sensor")
        return self.sensor

    def raw_view(self, density: float = 0.0) -> List[float]:
        """The distances, with beams ending closer than ``density`` to the
        previous kept beam end replaced by the largest float."""
        if density == 0:
            return list(self.dists)
        self._range_sensor()
        return [
            dist if keep else _MAX
            for dist, keep in zip(self.dists, _kept(self.angles, self.dists, density))
        ]

    def active_beams(self, density: float = 0.0) -> int:
        """How many beams survive the ``density`` filter of :meth:`raw_view`."""
        if density == 0.0:
            return len(self.dists)
        sensor = self._range_sensor()
        if len(sensor.beams) < len(self.dists):
            raise ValueError("the sensor has fewer beams than the reading")
        angles = [beam.pose.theta for beam in sensor.beams]
        return sum(_kept(angles, self.dists, density))

    def cartesian_form(self, max_range: float = 1e6) -> List[Point]:
        """Beam end points in the robot frame; beams at or past ``max_range``
        give the origin."""
        sensor = self._range_sensor()
        if not sensor.beams:
            raise ValueError("the range sensor has no beams")
        if len(self.dists) < len(sensor.beams):
            raise ValueError("the reading has fewer distances than the sensor has beams")
        px, py = sensor.pose.x, sensor.pose.y
        ps, pc = math.sin(sensor.pose.theta), math.cos(sensor.pose.theta)
        points = []
        for beam, rho in zip(sensor.beams, self.dists):
            if rho >= max_range:
                points.append(Point(0, 0))
                continue
            bx = beam.pose.x + beam.c * rho
            by = beam.pose.y + beam.s * rho
            points.append(Point(px + pc * bx - ps * by, py + ps * bx + pc * by))
        return points