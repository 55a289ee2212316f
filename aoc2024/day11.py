"""Counting stones that change and split each time you blink."""

from __future__ import annotations

from functools import lru_cache

from aoc2024.common import string_to_int

BLINKS = 75


@lru_cache(maxsize=None)
def count_stones(value, steps):
    """Number of stones one stone engraved with ``value`` becomes after ``steps`` blinks."""
    if steps == 0:
        return 1
    if value == 0:
        return count_stones(1, steps - 1)
    digits = str(value)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return count_stones(string_to_int(digits[:half]), steps - 1) + count_stones(
            string_to_int(digits[half:]), steps - 1
        )
    return count_stones(value * 2024, steps - 1)


def part1(lines):
    """Count the stones after the configured number of blinks."""
    stones = [string_to_int(token) for token in lines[0].split(" ")]
    return sum(count_stones(stone, BLINKS) for stone in stones)