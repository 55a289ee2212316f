"""Claw machines reached by pressing two buttons a whole number of times."""

from __future__ import annotations

import re
from dataclasses import dataclass

from aoc2024.common import string_to_int

OFFSET = 10000000000000
MAX_PRESSES = 100
COST_A = 3
COST_B = 1

_A_RE = re.compile(r"Button A: X\+(.+?), Y\+(.+)")
_B_RE = re.compile(r"Button B: X\+(.+?), Y\+(.+)")
_PRIZE_RE = re.compile(r"Prize: X=(.+?), Y=(.+)")


@dataclass(frozen=True)
class Machine:
    """Button moves ``a`` and ``b`` and the prize position, as (x, y) pairs."""

    a: tuple
    b: tuple
    target: tuple

    def solve(self):
        """Return the presses ``(na, nb)`` reaching the prize, or None."""
        (ax, ay), (bx, by), (tx, ty) = self.a, self.b, self.target
        det = ax * by - ay * bx
        if det == 0:
            raise ValueError("button moves are collinear")
        na, rest = divmod(by * tx - bx * ty, det)
        if rest:
            return None
        nb, rest = divmod(ax * ty - ay * tx, det)
        if rest:
            return None
        return na, nb


def _pair(pattern, line):
    match = pattern.search(line)
    if match is None:
        raise ValueError(f"unexpected line: {line!r}")
    return string_to_int(match.group(1)), string_to_int(match.group(2))


def _machines(lines, offset=0):
    if len(lines) % 3:
        raise ValueError("incomplete machine description")
    rows = iter(lines)
    for line_a, line_b, line_prize in zip(rows, rows, rows):
        tx, ty = _pair(_PRIZE_RE, line_prize)
        yield Machine(_pair(_A_RE, line_a), _pair(_B_RE, line_b), (tx + offset, ty + offset))


def part1(lines):
    """Total tokens for prizes won with at most 100 presses per button."""
    total = 0
    for machine in _machines(lines):
        solution = machine.solve()
        if solution is not None:
            na, nb = solution
            if na <= MAX_PRESSES and nb <= MAX_PRESSES:
                total += COST_A * na + COST_B * nb
    return total


def part2(lines):
    """Total tokens for prizes moved far away, with no press limit."""
    total = 0
    for machine in _machines(lines, OFFSET):
        solution = machine.solve()
        if solution is not None:
            na, nb = solution
            total += COST_A * na + COST_B * nb
    return total