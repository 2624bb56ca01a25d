import pytest

from scanslam.geometry import Point
from scanslam.gridline import grid_line, grid_line_core

PAIRS = [
    (Point(0, 0), Point(5, 2)),
    (Point(5, 2), Point(0, 0)),
    (Point(3, 7), Point(1, -4)),
    (Point(-2, 3), Point(6, 3)),
    (Point(4, 4), Point(4, -3)),
    (Point(0, 0), Point(3, 3)),
    (Point(2, 2), Point(2, 2)),
    (Point(10, 1), Point(0, 6)),
]


@pytest.mark.parametrize("start,end", PAIRS)
def test_endpoints_and_length(start, end):
    line = grid_line(start, end)
    assert line[0] == start
    assert line[-1] == end
    assert len(line) == max(abs(end.x - start.x), abs(end.y - start.y)) + 1


@pytest.mark.parametrize("start,end", PAIRS)
def test_steps_are_eight_connected(start, end):
    line = grid_line(start, end)
    for a, b in zip(line, line[1:]):
        assert max(abs(a.x - b.x), abs(a.y - b.y)) == 1


@pytest.mark.parametrize("start,end", PAIRS)
def test_reverse_direction_gives_reversed_path(start, end):
    assert grid_line(end, start) == list(reversed(grid_line(start, end)))


def test_horizontal_line():
    assert grid_line(Point(0, 0), Point(3, 0)) == [Point(x, 0) for x in range(4)]


def test_core_walks_from_lower_x():
    core = grid_line_core(Point(3, 0), Point(0, 0))
    assert core[0] == Point(0, 0)
    assert core[-1] == Point(3, 0)