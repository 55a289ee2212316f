"""Hiking trails climbing from height 0 to height 9 one step at a time."""

from __future__ import annotations

from aoc2024.common import string_to_int

_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))
_TOP = 9


def _parse(lines):
    n = len(lines)
    heights = {}
    for r, line in enumerate(lines):
        if len(line) > n:
            raise ValueError(f"line {r} is longer than the grid size {n}")
        for c, cell in enumerate(line):
            heights[(r, c)] = string_to_int(cell)
    return heights


def _neighbours(coord):
    r, c = coord
    return ((r + dr, c + dc) for dr, dc in _STEPS)


def part12(lines):
    """Return the summed trailhead scores and the summed trailhead ratings.

    A score counts the distinct tops reachable from a trailhead; a rating
    counts the distinct trails from it to any top.
    """
    heights = _parse(lines)
    by_height = {}
    for coord, height in heights.items():
        by_height.setdefault(height, []).append(coord)

    tops = {coord: {coord} for coord in by_height.get(_TOP, [])}
    ways = {coord: 1 for coord in by_height.get(_TOP, [])}

    for height in range(_TOP - 1, -1, -1):
        for coord in by_height.get(height, []):
            reached = set()
            count = 0
            for nxt in _neighbours(coord):
                if heights.get(nxt) == height + 1:
                    reached |= tops.get(nxt, set())
                    count += ways.get(nxt, 0)
            tops[coord] = reached
            ways[coord] = count

    trailheads = by_height.get(0, [])
    part1 = sum(len(tops[coord]) for coord in trailheads)
    part2 = sum(ways[coord] for coord in trailheads)
    return part1, part2