"""Typing door codes through a chain of robots operating directional keypads."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from aoc2024.common import string_to_int

ACTIVATE = "A"

# Neighbour offsets in the order up, right, down, left.
_OFFSETS = ((-1, 0), (0, 1), (1, 0), (0, -1))
_ARROWS = {(-1, 0): "^", (0, 1): ">", (1, 0): "v", (0, -1): "<"}


@dataclass(frozen=True)
class Path:
    """A walk over keypad cells, given as ``(row, col)`` coordinates."""

    coords: tuple

    def __post_init__(self):
        object.__setattr__(self, "coords", tuple(self.coords))

    @property
    def start(self):
        return self.coords[0]

    @property
    def end(self):
        return self.coords[-1]

    def __len__(self):
        return len(self.coords)

    def to_input_string(self):
        """The arrow presses that walk the path, followed by the activate key."""
        if not self.coords:
            raise ValueError("empty path")
        arrows = []
        for here, there in zip(self.coords, self.coords[1:]):
            delta = (there[0] - here[0], there[1] - here[1])
            try:
                arrows.append(_ARROWS[delta])
            except KeyError:
                raise ValueError(f"cells {here} and {there} are not adjacent") from None
        return "".join(arrows) + ACTIVATE


class Keypad:
    """Keys laid out on a grid; a robot arm starts over ``start``."""

    def __init__(self, cells, start):
        self.cells = dict(cells)
        if start not in self.cells:
            raise ValueError(f"start {start} is not a key")
        self.start = start
        self._positions = {value: coord for coord, value in self.cells.items()}

    def coord_of(self, value):
        """Return the coordinate of the key labelled ``value``."""
        try:
            return self._positions[value]
        except KeyError:
            raise ValueError(f"no cell for value {value!r}") from None

    def shortest_paths(self, start, end):
        """Every shortest path over the keys from ``start`` to ``end``."""
        for coord in (start, end):
            if coord not in self.cells:
                raise ValueError(f"{coord} is not a key")
        distances = {start: 0}
        parents = {start: []}
        queue = deque([start])
        while queue:
            pos = queue.popleft()
            step = distances[pos] + 1
            for dr, dc in _OFFSETS:
                nxt = (pos[0] + dr, pos[1] + dc)
                if nxt not in self.cells:
                    continue
                if nxt not in distances:
                    distances[nxt] = step
                    parents[nxt] = [pos]
                    queue.append(nxt)
                elif distances[nxt] == step:
                    parents[nxt].append(pos)
        if end not in distances:
            raise ValueError(f"{end} cannot be reached from {start}")
        return self._paths_to(parents, end)

    def _paths_to(self, parents, end):
        sources = parents[end]
        if not sources:
            return [Path((end,))]
        return [
            Path(sub.coords + (end,))
            for parent in sources
            for sub in self._paths_to(parents, parent)
        ]


def numpad():
    """The door's numeric keypad."""
    cells = {
        (0, 0): "7", (0, 1): "8", (0, 2): "9",
        (1, 0): "4", (1, 1): "5", (1, 2): "6",
        (2, 0): "1", (2, 1): "2", (2, 2): "3",
        (3, 1): "0", (3, 2): ACTIVATE,
    }
    return Keypad(cells, (3, 2))


def controller():
    """A directional keypad."""
    cells = {
        (0, 1): "^", (0, 2): ACTIVATE,
        (1, 0): "<", (1, 1): "v", (1, 2): ">",
    }
    return Keypad(cells, (0, 2))


def keep_shortest(strings):
    """Keep only the strings of minimal length, in their original order."""
    shortest = []
    for text in strings:
        if not shortest or len(text) < len(shortest[0]):
            shortest = [text]
        elif len(text) == len(shortest[0]):
            shortest.append(text)
    return shortest


class _PressCounter:
    """Fewest presses on the first keypad of a chain to produce a sequence.

    ``chain[0]`` is typed on directly; each later keypad is operated by a
    robot driven from the keypad before it.
    """

    def __init__(self, chain):
        self.chain = chain
        self._cache = {}

    def sequence(self, level, sequence):
        keypad = self.chain[level]
        pos = keypad.start
        total = 0
        for key in sequence:
            target = keypad.coord_of(key)
            total += self._move(level, pos, target)
            pos = target
        return total

    def _move(self, level, start, end):
        key = (level, start, end)
        if key not in self._cache:
            inputs = (
                path.to_input_string()
                for path in self.chain[level].shortest_paths(start, end)
            )
            if level == 0:
                self._cache[key] = min(len(text) for text in inputs)
            else:
                self._cache[key] = min(self.sequence(level - 1, text) for text in inputs)
        return self._cache[key]


def part1(lines):
    """Sum of code complexities: shortest input length times the code's number."""
    counter = _PressCounter((controller(), controller(), numpad()))
    top = len(counter.chain) - 1
    return sum(
        counter.sequence(top, line) * string_to_int(line[:-1]) for line in lines
    )