import pytest

from aoc2024.day13 import Machine, part1, part2

EXAMPLE = [
    "Button A: X+94, Y+34",
    "Button B: X+22, Y+67",
    "Prize: X=8400, Y=5400",
    "Button A: X+26, Y+66",
    "Button B: X+67, Y+21",
    "Prize: X=12748, Y=12176",
    "Button A: X+17, Y+86",
    "Button B: X+84, Y+37",
    "Prize: X=7870, Y=6450",
    "Button A: X+69, Y+23",
    "Button B: X+27, Y+71",
    "Prize: X=18641, Y=10279",
]

TOO_MANY_PRESSES = [
    "Button A: X+1, Y+0",
    "Button B: X+0, Y+1",
    "Prize: X=101, Y=0",
]


def _chunks(lines):
    return [lines[i:i + 3] for i in range(0, len(lines), 3)]


def test_solve_example_machine():
    assert Machine((94, 34), (22, 67), (8400, 5400)).solve() == (80, 40)


def test_solve_unreachable_prize():
    assert Machine((26, 66), (67, 21), (12748, 12176)).solve() is None


def test_solution_reaches_target():
    machine = Machine((17, 86), (84, 37), (7870, 6450))
    na, nb = machine.solve()
    assert na * 17 + nb * 84 == 7870
    assert na * 86 + nb * 37 == 6450


def test_collinear_buttons_raise():
    with pytest.raises(ValueError):
        Machine((1, 2), (2, 4), (10, 20)).solve()


def test_part1_example():
    assert part1(EXAMPLE) == 480


def test_part1_is_additive():
    assert part1(EXAMPLE) == sum(part1(chunk) for chunk in _chunks(EXAMPLE))


def test_part1_ignores_machines_needing_too_many_presses():
    assert part1(EXAMPLE + TOO_MANY_PRESSES) == part1(EXAMPLE)


def test_part2_is_additive():
    assert part2(EXAMPLE) == sum(part2(chunk) for chunk in _chunks(EXAMPLE))


def test_part2_collinear_raises():
    lines = ["Button A: X+1, Y+1", "Button B: X+2, Y+2", "Prize: X=5, Y=5"]
    with pytest.raises(ValueError):
        part2(lines)


def test_incomplete_input_raises():
    with pytest.raises(ValueError):
        part1(EXAMPLE[:4])


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        part1(["Button A: X-1, Y+1", EXAMPLE[1], EXAMPLE[2]])