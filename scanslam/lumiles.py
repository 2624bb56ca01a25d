"""Closed-form rigid alignment of two corresponding point sets."""

from __future__ import annotations

import math
from typing import Sequence

from .geometry import OrientedPoint, Point


def lu_miles_step(source: Sequence[Point], destination: Sequence[Point]) -> OrientedPoint:
    """The pose (translation and rotation) that maps ``source`` onto ``destination``.

    Points correspond pairwise. Raises ValueError when the sets differ in
    size or are empty.
    """
    if len(source) != len(destination):
        raise ValueError("point sets must have the same size")
    if not source:
        raise ValueError("point sets must not be empty")
    count = len(source)
    smx = sum(p.x for p in source) / count
    smy = sum(p.y for p in source) / count
    dmx = sum(p.x for p in destination) / count
    dmy = sum(p.y for p in destination) / count

    sxx = sxy = syx = syy = 0.0
    for s, d in zip(source, destination):
        sx, sy = s.x - smx, s.y - smy
        dx, dy = d.x - dmx, d.y - dmy
        sxx += sx * dx
        sxy += sx * dy
        syx += sy * dx
        syy += sy * dy

    omega = math.atan2(sxy - syx, sxx + syy)
    c, s = math.cos(omega), math.sin(omega)
    return OrientedPoint(dmx - smx * c + smy * s, dmy - smx * s - smy * c, omega)