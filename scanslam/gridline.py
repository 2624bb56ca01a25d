"""Bresenham traversal of the grid cells between two cells."""

from __future__ import annotations

from typing import List

from .geometry import Point


def grid_line_core(start: Point, end: Point) -> List[Point]:
    """Cells on the line between two cells, walked along the major axis upwards."""
    dx, dy = abs(end.x - start.x), abs(end.y - start.y)
    points: List[Point] = []
    if dy <= dx:
        d = 2 * dy - dx
        incr1, incr2 = 2 * dy, 2 * (dy - dx)
        if start.x > end.x:
            x, y, xend, ydir = end.x, end.y, start.x, -1
        else:
            x, y, xend, ydir = start.x, start.y, end.x, 1
        step = 1 if (end.y - start.y) * ydir > 0 else -1
        points.append(Point(x, y))
        while x < xend:
            x += 1
            if d < 0:
                d += incr1
            else:
                y += step
                d += incr2
            points.append(Point(x, y))
    else:
        d = 2 * dx - dy
        incr1, incr2 = 2 * dx, 2 * (dx - dy)
        if start.y > end.y:
            x, y, yend, xdir = end.x, end.y, start.y, -1
        else:
            x, y, yend, xdir = start.x, start.y, end.y, 1
        step = 1 if (end.x - start.x) * xdir > 0 else -1
        points.append(Point(x, y))
        while y < yend:
            y += 1
            if d < 0:
                d += incr1
            else:
                x += step
                d += incr2
            points.append(Point(x, y))
    return points


def grid_line(start: Point, end: Point) -> List[Point]:
    """Cells on the line from ``start`` to ``end``, in that order."""
    points = grid_line_core(start, end)
    if points[0].x != start.x or points[0].y != start.y:
        points.reverse()
    return points