"""Designs built by laying towel patterns end to end."""

from __future__ import annotations


def get_towels(lines):
    """Return the towel patterns, longest first, ties alphabetically."""
    return sorted(lines[0].split(", "), key=lambda towel: (-len(towel), towel))


def can_compose(towels, target, cache=None):
    """Tell whether ``target`` can be made from the towels."""
    if cache is None:
        cache = {}
    for towel in towels:
        if towel == target:
            return True
        if target.startswith(towel):
            if target in cache:
                possible = cache[target]
            else:
                rest = target[len(towel):]
                possible = can_compose(towels, rest, cache)
                cache[rest] = possible
            if possible:
                return True
    return False


def count_arrangements(towels, target, cache=None):
    """Count the ways ``target`` can be made from the towels."""
    if cache is None:
        cache = {}
    count = 0
    for towel in towels:
        if towel == target:
            count += 1
        elif target.startswith(towel):
            rest = target[len(towel):]
            if rest not in cache:
                cache[rest] = count_arrangements(towels, rest, cache)
            count += cache[rest]
    return count


def part1(lines):
    """Count the designs that can be made at all."""
    towels = get_towels(lines)
    cache = {}
    return sum(1 for design in lines[2:] if can_compose(towels, design, cache))


def part2(lines):
    """Sum the number of arrangements over all designs."""
    towels = get_towels(lines)
    cache = {}
    return sum(count_arrangements(towels, design, cache) for design in lines[2:])