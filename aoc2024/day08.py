"""Antinodes produced by pairs of antennas sharing a frequency."""

from __future__ import annotations

from collections import defaultdict
from itertools import combinations
from math import gcd

_EMPTY = "."


def _antenna_groups(lines):
    """Group antenna positions by frequency, in reading order."""
    groups = defaultdict(list)
    for r, line in enumerate(lines):
        for c, cell in enumerate(line):
            if cell != _EMPTY:
                groups[cell].append((r, c))
    return groups.values()


def _is_inside(coord, n):
    r, c = coord
    return 0 <= r < n and 0 <= c < n


def part1(lines):
    """Count cells holding an antinode at twice the distance of a pair."""
    n = len(lines)
    antinodes = set()
    for coords in _antenna_groups(lines):
        for (r1, c1), (r2, c2) in combinations(coords, 2):
            dr, dc = r1 - r2, c1 - c2
            for candidate in ((r1 + dr, c1 + dc), (r2 - dr, c2 - dc)):
                if _is_inside(candidate, n):
                    antinodes.add(candidate)
    return len(antinodes)


def part2(lines):
    """Count cells on any grid-aligned line through a pair of antennas."""
    n = len(lines)
    antinodes = set()
    for coords in _antenna_groups(lines):
        for (r1, c1), (r2, c2) in combinations(coords, 2):
            dr, dc = r1 - r2, c1 - c2
            step = gcd(dr, dc)
            dr, dc = dr // step, dc // step
            for sr, sc in ((dr, dc), (-dr, -dc)):
                coord = (r1, c1)
                while _is_inside(coord, n):
                    antinodes.add(coord)
                    coord = (coord[0] + sr, coord[1] + sc)
    return len(antinodes)