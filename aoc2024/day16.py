"""Cheapest routes through a reindeer maze where turning costs 1000 points."""

from __future__ import annotations

import heapq
from collections import deque
from dataclasses import dataclass
from itertools import count

START = "S"
END = "E"
WALL = "#"
EMPTY = "."

UP = 0
RIGHT = 1
DOWN = 2
LEFT = 3

STEP_COST = 1
TURN_COST = 1000

_OFFSETS = ((-1, 0), (0, 1), (1, 0), (0, -1))
_OPEN = frozenset((EMPTY, START, END))


@dataclass(frozen=True)
class Node:
    """A position in the maze together with the way the reindeer faces."""

    coord: tuple
    orientation: int

    def __post_init__(self):
        if not 0 <= self.orientation <= 3:
            raise ValueError(f"invalid orientation: {self.orientation}")

    def ahead(self):
        """The coordinate one step forward."""
        dr, dc = _OFFSETS[self.orientation]
        return self.coord[0] + dr, self.coord[1] + dc

    def turn_right(self):
        return Node(self.coord, (self.orientation + 1) % 4)

    def turn_left(self):
        return Node(self.coord, (self.orientation + 3) % 4)

    def __str__(self):
        return f"Node(({self.coord[0]},{self.coord[1]}),{self.orientation})"


def _parse(lines):
    cells = {}
    start = end = None
    for r, line in enumerate(lines):
        for c, cell in enumerate(line):
            cells[(r, c)] = cell
            if cell == START:
                start = (r, c)
            elif cell == END:
                end = (r, c)
    if start is None or end is None:
        raise ValueError("the maze needs a start and an end")
    return cells, start, end


def _moves(cells, node):
    forward = node.ahead()
    if cells.get(forward) in _OPEN:
        yield Node(forward, node.orientation), STEP_COST
    yield node.turn_right(), TURN_COST
    yield node.turn_left(), TURN_COST


def part2(lines):
    """Count the cells that lie on at least one cheapest route from S to E."""
    cells, start, end = _parse(lines)
    origin = Node(start, RIGHT)
    distances = {origin: 0}
    parents = {}
    visited = set()
    end_nodes = []
    best = None
    order = count()
    heap = [(0, next(order), origin)]

    while heap:
        dist, _, node = heapq.heappop(heap)
        if node in visited or dist > distances[node]:
            continue
        if best is not None and dist > best:
            break
        visited.add(node)
        if node.coord == end:
            best = dist
            end_nodes.append(node)
            continue
        for nxt, cost in _moves(cells, node):
            if nxt in visited:
                continue
            candidate = dist + cost
            current = distances.get(nxt)
            if current is None or candidate < current:
                distances[nxt] = candidate
                parents[nxt] = [node]
                heapq.heappush(heap, (candidate, next(order), nxt))
            elif candidate == current:
                parents[nxt].append(node)

    if not end_nodes:
        raise ValueError("no route from start to end")

    on_best = set()
    seen = set(end_nodes)
    queue = deque(end_nodes)
    while queue:
        node = queue.popleft()
        on_best.add(node.coord)
        for parent in parents.get(node, ()):
            if parent not in seen:
                seen.add(parent)
                queue.append(parent)
    return len(on_best)