"""Falling bytes blocking the shortest way across a memory grid."""

from __future__ import annotations

from collections import deque
from typing import NamedTuple

from aoc2024.common import string_to_int


class Coord(NamedTuple):
    x: int
    y: int

    def neighbours(self):
        yield Coord(self.x, self.y - 1)
        yield Coord(self.x + 1, self.y)
        yield Coord(self.x, self.y + 1)
        yield Coord(self.x - 1, self.y)


class Grid:
    """A square grid of side ``n`` with a set of corrupted cells."""

    def __init__(self, n):
        self.n = n
        self.obstacles = set()

    def is_inside(self, coord):
        return 0 <= coord.x < self.n and 0 <= coord.y < self.n

    def is_free(self, coord):
        return self.is_inside(coord) and coord not in self.obstacles

    def __str__(self):
        return "".join(
            "".join("#" if Coord(x, y) in self.obstacles else "." for x in range(self.n))
            + "\n"
            for y in range(self.n)
        )


def dijkstra(grid):
    """Shortest path from the top left to the bottom right corner.

    Returns ``(distance, cells on one shortest path excluding the start, found)``;
    without a path it returns ``(-1, None, False)``.
    """
    start = Coord(0, 0)
    end = Coord(grid.n - 1, grid.n - 1)
    parents = {start: None}
    distances = {start: 0}
    queue = deque([start])
    while queue and end not in distances:
        node = queue.popleft()
        for nxt in node.neighbours():
            if nxt not in distances and grid.is_free(nxt):
                distances[nxt] = distances[node] + 1
                parents[nxt] = node
                queue.append(nxt)
    if end not in distances:
        return -1, None, False
    on_path = set()
    node = end
    while node != start:
        on_path.add(node)
        node = parents[node]
    return distances[end], on_path, True


def part12(lines, n, drops):
    """Shortest path after ``drops`` bytes, and the first byte that cuts all paths."""
    coords = []
    for line in lines:
        x, y = line.split(",")
        coords.append(Coord(string_to_int(x), string_to_int(y)))

    grid = Grid(n)
    grid.obstacles.update(coords[:drops])
    part1, on_path, _ = dijkstra(grid)

    blocker = Coord(0, 0)
    for coord in coords[drops:]:
        grid.obstacles.add(coord)
        if on_path is not None and coord in on_path:
            _, on_path, found = dijkstra(grid)
            if not found:
                blocker = coord
    return part1, blocker