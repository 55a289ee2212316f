"""Robots moving in straight lines on a wrapping grid."""

from __future__ import annotations

import re
from itertools import count

from aoc2024.common import string_to_int

REPEATS = 100
SEGMENT_LENGTH = 12

_ROBOT_RE = re.compile(r"p=(.+),(.+) v=(.+),(.+)")


class Grid:
    """Robot counts per cell, indexed as ``cells[x][y]``."""

    def __init__(self, nx, ny):
        self.cells = [[0] * ny for _ in range(nx)]

    @property
    def nx(self):
        return len(self.cells)

    @property
    def ny(self):
        return len(self.cells[0])

    def increment(self, point):
        x, y = point
        self.cells[x][y] += 1

    def is_symmetric(self):
        """Tell whether the grid is mirror-symmetric about its vertical middle."""
        nx = self.nx
        mid = (nx - 1) // 2
        return all(self.cells[x] == self.cells[nx - x - 1] for x in range(mid))

    def contains_segment(self, length):
        """Tell whether some row holds ``length`` occupied cells in a row."""
        for x in range(self.nx - length):
            for y in range(self.ny):
                if all(self.cells[x + k][y] for k in range(length)):
                    return True
        return False

    def __str__(self):
        return "".join(
            "".join("#" if column[y] else "." for column in self.cells) + "\n"
            for y in range(self.ny)
        )


def propagate(p, v, size, repeats):
    """Position after ``repeats`` steps from ``p`` with velocity ``v``, wrapping."""
    return (
        (p[0] + repeats * v[0]) % size[0],
        (p[1] + repeats * v[1]) % size[1],
    )


def _robots(lines):
    robots = []
    for line in lines:
        match = _ROBOT_RE.search(line)
        if match is None:
            raise ValueError(f"unexpected line: {line!r}")
        px, py, vx, vy = (string_to_int(group) for group in match.groups())
        robots.append(((px, py), (vx, vy)))
    return robots


def part1(lines, nx, ny):
    """Safety factor: product of robot counts in the four quadrants after 100 steps."""
    size = (nx, ny)
    mid_x, mid_y = (nx - 1) // 2, (ny - 1) // 2
    quadrants = [0, 0, 0, 0]
    for p, v in _robots(lines):
        x, y = propagate(p, v, size, REPEATS)
        if x == mid_x or y == mid_y:
            continue
        quadrants[(x > mid_x) + 2 * (y > mid_y)] += 1
    q1, q2, q3, q4 = quadrants
    return q1 * q2 * q3 * q4


def part2(lines, nx, ny):
    """First step at which the robots line up in a long horizontal segment."""
    size = (nx, ny)
    robots = _robots(lines)
    for step in count(1):
        grid = Grid(nx, ny)
        for p, v in robots:
            grid.increment(propagate(p, v, size, step))
        if grid.contains_segment(SEGMENT_LENGTH):
            return step