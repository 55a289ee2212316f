"""Sum the products of well-formed ``mul(x,y)`` instructions."""

from __future__ import annotations

import re

_MUL = r"mul\((\d{1,3}),(\d{1,3})\)"
_DO = r"do\(\)"
_DONT = r"don't\(\)"

_MUL_RE = re.compile(_MUL)
_COMBINED_RE = re.compile(f"({_MUL})|({_DO})|({_DONT})")


def part1(lines):
    """Sum every ``mul`` product found in the lines."""
    return sum(
        int(match.group(1)) * int(match.group(2))
        for line in lines
        for match in _MUL_RE.finditer(line)
    )


def part2(lines):
    """Sum ``mul`` products, honouring ``do()`` and ``don't()`` switches."""
    total = 0
    enabled = True
    for line in lines:
        for match in _COMBINED_RE.finditer(line):
            text = match.group(0)
            if text.startswith("mul("):
                if enabled:
                    total += int(match.group(2)) * int(match.group(3))
            elif text.startswith("do("):
                enabled = True
            elif text.startswith("don't("):
                enabled = False
            else:
                raise ValueError(f"unexpected match {text!r}")
    return total