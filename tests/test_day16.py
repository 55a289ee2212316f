import pytest

from aoc2024.day16 import DOWN, LEFT, RIGHT, UP, Node, part2

FIRST_EXAMPLE = [
    "###############",
    "#.......#....E#",
    "#.#.###.#.###.#",
    "#.....#.#...#.#",
    "#.###.#####.#.#",
    "#.#.#.......#.#",
    "#.#.#####.###.#",
    "#...........#.#",
    "###.#.#####.#.#",
    "#...#.....#.#.#",
    "#.#.#.###.#.#.#",
    "#.....#...#.#.#",
    "#.###.#.#.#.#.#",
    "#S..#.....#...#",
    "###############",
]

SECOND_EXAMPLE = [
    "#################",
    "#...#...#...#..E#",
    "#.#.#.#.#.#.#.#.#",
    "#.#.#.#...#...#.#",
    "#.#.#.#.###.#.#.#",
    "#...#.#.#.....#.#",
    "#.#.#.#.#.#####.#",
    "#.#...#.#.#.....#",
    "#.#.#####.#.###.#",
    "#.#.#.......#...#",
    "#.#.###.#####.###",
    "#.#.#...#.....#.#",
    "#.#.#.#####.###.#",
    "#.#.#.........#.#",
    "#.#.#.#########.#",
    "#S#.............#",
    "#################",
]


def test_first_example():
    assert part2(FIRST_EXAMPLE) == 45


def test_second_example():
    assert part2(SECOND_EXAMPLE) == 64


def test_corridor_covers_every_open_cell():
    lines = ["#######", "#S...E#", "#######"]
    open_cells = sum(ch != "#" for line in lines for ch in line)
    assert part2(lines) == open_cells


def test_no_route_raises():
    with pytest.raises(ValueError):
        part2(["#####", "#S#E#", "#####"])


def test_missing_end_raises():
    with pytest.raises(ValueError):
        part2(["#####", "#S..#", "#####"])


@pytest.mark.parametrize("orientation", [UP, RIGHT, DOWN, LEFT])
def test_four_right_turns_return_to_start(orientation):
    node = Node((2, 3), orientation)
    assert node.turn_right().turn_right().turn_right().turn_right() == node


@pytest.mark.parametrize("orientation", [UP, RIGHT, DOWN, LEFT])
def test_left_undoes_right(orientation):
    node = Node((1, 1), orientation)
    assert node.turn_right().turn_left() == node


def test_turn_right_from_up_faces_right():
    assert Node((0, 0), UP).turn_right() == Node((0, 0), RIGHT)


def test_turn_left_from_up_faces_left():
    assert Node((0, 0), UP).turn_left() == Node((0, 0), LEFT)


@pytest.mark.parametrize("orientation", [-1, 4])
def test_invalid_orientation(orientation):
    with pytest.raises(ValueError):
        Node((0, 0), orientation)