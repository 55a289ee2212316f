"""Race track cheats that shortcut through walls."""

from __future__ import annotations

START = "S"
END = "E"
WALL = "#"
EMPTY = "."

THRESHOLD = 100

_OFFSETS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def parse_grid(lines):
    """Return the track as rows of characters, plus the start and end cells.

    The start and end cells are stored as empty track.
    """
    grid = []
    start = end = None
    for r, line in enumerate(lines):
        row = list(line)
        for c, value in enumerate(row):
            if value == START:
                start = (r, c)
                row[c] = EMPTY
            elif value == END:
                end = (r, c)
                row[c] = EMPTY
        grid.append(row)
    if start is None or end is None:
        raise ValueError("the track needs a start and an end")
    return grid, start, end


def _is_empty(grid, coord):
    r, c = coord
    return 0 <= r < len(grid) and 0 <= c < len(grid[r]) and grid[r][c] == EMPTY


def find_single_path(grid, start, end):
    """Follow the single track from ``start`` to ``end``; return its cells in order."""
    path = [start]
    visited = {start}
    coord = start
    while coord != end:
        r, c = coord
        for dr, dc in _OFFSETS:
            nxt = (r + dr, c + dc)
            if _is_empty(grid, nxt) and nxt not in visited:
                break
        else:
            raise ValueError("next not found")
        coord = nxt
        path.append(coord)
        visited.add(coord)
    return path


def _count_cheats(path, max_cheat, min_save, bound=None):
    """Count cheats of length 2..max_cheat saving at least the threshold."""
    along = {coord: index for index, coord in enumerate(path)}
    total = 0
    for index, (r, c) in enumerate(path):
        low_r, high_r = r - max_cheat, r + max_cheat
        if bound is not None:
            low_r, high_r = max(low_r, 0), min(high_r, bound)
        for tr in range(low_r, high_r + 1):
            dr = abs(tr - r)
            low_c, high_c = c - max_cheat + dr, c + max_cheat - dr
            if bound is not None:
                low_c, high_c = max(low_c, 0), min(high_c, bound)
            for tc in range(low_c, high_c + 1):
                length = dr + abs(tc - c)
                if length < 2:
                    continue
                target = along.get((tr, tc))
                if target is None or index + length >= target:
                    continue
                saved = target - (index + length)
                if saved >= min_save and saved >= THRESHOLD:
                    total += 1
    return total


def part1(lines):
    """Count two-step cheats that save at least 100 picoseconds."""
    grid, start, end = parse_grid(lines)
    return _count_cheats(find_single_path(grid, start, end), 2, 0)


def part2(lines, max_cheat, min_save):
    """Count cheats up to ``max_cheat`` long that save at least 100 picoseconds.

    Cheats saving less than ``min_save`` are ignored as well.
    """
    grid, start, end = parse_grid(lines)
    path = find_single_path(grid, start, end)
    return _count_cheats(path, max_cheat, min_save, bound=len(grid) - 1)