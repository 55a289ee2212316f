"""A guard patrolling a grid, turning right at obstacles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

OBSTACLE = "#"
GUARD_NORTH = "^"
_BLANK = "\0"


class Direction(Enum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


_OFFSETS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_RIGHT_TURN = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}


@dataclass(frozen=True)
class Coord:
    r: int
    c: int

    def in_dir(self, direction):
        """Return the neighbouring coordinate in ``direction``."""
        dr, dc = _OFFSETS[direction]
        return Coord(self.r + dr, self.c + dc)


@dataclass(frozen=True)
class Guard:
    coord: Coord
    direction: Direction

    def turn_right(self):
        """Return the guard at the same place, turned 90 degrees clockwise."""
        return Guard(self.coord, _RIGHT_TURN[self.direction])


@dataclass
class Grid:
    """A square grid of cell characters."""

    cells: list

    @property
    def size(self):
        return len(self.cells)

    def clone(self):
        """Return an independent copy of the grid."""
        return Grid([list(row) for row in self.cells])

    def is_inside(self, coord):
        n = self.size
        return 0 <= coord.r < n and 0 <= coord.c < n

    def is_obstacle(self, coord):
        return self.is_inside(coord) and self.cells[coord.r][coord.c] == OBSTACLE


def parse_grid_from_lines(lines):
    """Build the grid and the guard (facing up) from the puzzle lines."""
    n = len(lines)
    cells = []
    guard = Guard(Coord(0, 0), Direction.UP)
    for r, line in enumerate(lines):
        if len(line) > n:
            raise ValueError(f"line {r} is longer than the grid size {n}")
        cells.append(list(line) + [_BLANK] * (n - len(line)))
        for c, cell in enumerate(line):
            if cell == GUARD_NORTH:
                guard = Guard(Coord(r, c), Direction.UP)
    return Grid(cells), guard


def move_guard(grid, guard):
    """Advance the guard one step, or turn right if blocked."""
    ahead = guard.coord.in_dir(guard.direction)
    if grid.is_obstacle(ahead):
        return guard.turn_right()
    return Guard(ahead, guard.direction)


def walks_in_loop(grid, guard):
    """Tell whether the guard ends up repeating a position and heading."""
    seen = {guard}
    while grid.is_inside(guard.coord):
        seen.add(guard)
        guard = move_guard(grid, guard)
        if guard in seen:
            return True
    return False


def part1(lines):
    """Count the distinct cells the guard visits before leaving the grid."""
    grid, guard = parse_grid_from_lines(lines)
    walked = set()
    while grid.is_inside(guard.coord):
        walked.add(guard.coord)
        guard = move_guard(grid, guard)
    return len(walked)


def part2(lines):
    """Count the cells where one extra obstacle traps the guard in a loop."""
    grid, guard = parse_grid_from_lines(lines)
    n = grid.size
    solutions = 0
    for r in range(n):
        for c in range(n):
            if Coord(r, c) == guard.coord:
                continue
            candidate = grid.clone()
            candidate.cells[r][c] = OBSTACLE
            if walks_in_loop(candidate, guard):
                solutions += 1
    return solutions