"""Garden plots grouped into regions, priced by perimeter and by sides."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

_BLANK = "\0"
_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(eq=False)
class Edge:
    """A straight boundary segment between two grid corners."""

    c1: tuple
    c2: tuple

    def is_horizontal(self):
        return self.c1[0] == self.c2[0]

    def contains(self, coord):
        return coord == self.c1 or coord == self.c2

    def the_other_end(self, coord):
        """Return the end of the edge that is not ``coord``."""
        if coord == self.c1:
            return self.c2
        if coord == self.c2:
            return self.c1
        raise ValueError(f"other end not found, e: {self}, c: {coord}")

    def __str__(self):
        return f"Edge[({self.c1[0]},{self.c1[1]}), ({self.c2[0]},{self.c2[1]})]"


def _aligned(first, second):
    return first.is_horizontal() == second.is_horizontal()


def _parse(lines):
    n = len(lines)
    cells = []
    for r, line in enumerate(lines):
        if len(line) > n:
            raise ValueError(f"line {r} is longer than the grid size {n}")
        cells.append(list(line) + [_BLANK] * (n - len(line)))
    return cells


def _regions(cells):
    """Yield the sets of cells forming each connected region."""
    n = len(cells)
    assigned = set()
    for r in range(n):
        for c in range(n):
            if (r, c) in assigned:
                continue
            value = cells[r][c]
            region = {(r, c)}
            queue = deque([(r, c)])
            while queue:
                cr, cc = queue.popleft()
                for dr, dc in _STEPS:
                    nr, nc = cr + dr, cc + dc
                    if (
                        0 <= nr < n
                        and 0 <= nc < n
                        and (nr, nc) not in region
                        and cells[nr][nc] == value
                    ):
                        region.add((nr, nc))
                        queue.append((nr, nc))
            assigned |= region
            yield region


def _boundary_edges(region):
    """Unit edges separating the region from the outside, as an ordered set."""
    edges = []
    for r, c in sorted(region):
        if (r - 1, c) not in region:
            edges.append(Edge((r, c), (r, c + 1)))
        if (r + 1, c) not in region:
            edges.append(Edge((r + 1, c), (r + 1, c + 1)))
        if (r, c - 1) not in region:
            edges.append(Edge((r, c), (r + 1, c)))
        if (r, c + 1) not in region:
            edges.append(Edge((r, c + 1), (r + 1, c + 1)))
    return dict.fromkeys(edges)


def _merge_once(edges):
    """Merge one pair of aligned edges meeting at a plain corner."""
    for edge in edges:
        for end, keep in ((edge.c1, edge.c2), (edge.c2, edge.c1)):
            others = [other for other in edges if other is not edge and other.contains(end)]
            if len(others) > 1:
                break
            if not others:
                continue
            other = others[0]
            if _aligned(edge, other):
                del edges[edge]
                del edges[other]
                edges[Edge(keep, other.the_other_end(end))] = None
                return True
    return False


def part1(lines):
    """Return total fencing cost by perimeter and total cost by number of sides."""
    total = 0
    total_sides = 0
    for region in _regions(_parse(lines)):
        edges = _boundary_edges(region)
        perimeter = len(edges)
        while _merge_once(edges):
            pass
        area = len(region)
        total += area * perimeter
        total_sides += area * len(edges)
    return total, total_sides