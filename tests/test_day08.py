import pytest

from aoc2024.day08 import part1, part2

EXAMPLE = [
    "............",
    "........0...",
    ".....0......",
    ".......0....",
    "....0.......",
    "......A.....",
    "............",
    "............",
    "........A...",
    ".........A..",
    "............",
    "............",
]


def _transpose(lines):
    return ["".join(column) for column in zip(*lines)]


def test_part1_example():
    assert part1(EXAMPLE) == 14


def test_part2_example():
    assert part2(EXAMPLE) == 34


def test_no_antennas_gives_no_antinodes():
    lines = ["...", "...", "..."]
    assert part1(lines) == part2(lines) == 0


@pytest.mark.parametrize("part", [part1, part2])
def test_transpose_keeps_count(part):
    assert part(_transpose(EXAMPLE)) == part(EXAMPLE)


@pytest.mark.parametrize("part", [part1, part2])
def test_vertical_flip_keeps_count(part):
    assert part(list(reversed(EXAMPLE))) == part(EXAMPLE)


def test_part2_covers_part1():
    lines = [
        "a.....",
        "......",
        "..a...",
        ".....b",
        "...b..",
        "......",
    ]
    assert part1(lines) <= part2(lines)
    assert part1(EXAMPLE) <= part2(EXAMPLE)


def test_part2_includes_the_antennas_themselves():
    lines = ["a..", "...", "..a"]
    # both antennas lie on the line through them
    assert part2(lines) >= len([c for line in lines for c in line if c == "a"])