import pytest

from aoc2024.day07 import Operation, concatenate, parse_lines, part12

EXAMPLE = [
    "190: 10 19",
    "3267: 81 40 27",
    "83: 17 5",
    "156: 15 6",
    "7290: 6 8 6 15",
    "161011: 16 10 13",
    "192: 17 8 14",
    "21037: 9 7 18 13",
    "292: 11 6 16 20",
]


def test_part12_example():
    assert part12(EXAMPLE) == (3749, 11387)


def test_part12_empty():
    assert part12([]) == (0, 0)


def test_concatenate_documented():
    assert concatenate(12, 34) == 1234


@pytest.mark.parametrize("a,b", [(1, 2), (15, 6), (486, 6), (7, 100), (9, 0)])
def test_concatenate_matches_digits(a, b):
    assert str(concatenate(a, b)) == f"{a}{b}"


def test_add_mul_reachable():
    assert Operation(190, (10, 19)).can_be_made_true()
    assert Operation(3267, (81, 40, 27)).can_be_made_true()


def test_concatenation_needed():
    operation = Operation(156, (15, 6))
    assert not operation.can_be_made_true()
    assert operation.can_be_made_true3()


def test_unreachable():
    operation = Operation(83, (17, 5))
    assert not operation.can_be_made_true()
    assert not operation.can_be_made_true3()


def test_part1_true_implies_part2_true():
    for operation in parse_lines(EXAMPLE):
        if operation.can_be_made_true():
            assert operation.can_be_made_true3()


def test_single_operand_rejected():
    with pytest.raises(ValueError):
        Operation(5, (5,)).can_be_made_true()


def test_parse_lines_basic():
    assert parse_lines(["5: 2 3", "", "   ", " 7:1  6 "]) == [
        Operation(5, (2, 3)),
        Operation(7, (1, 6)),
    ]


def test_parse_lines_no_values():
    assert parse_lines(["9:"]) == [Operation(9, ())]


@pytest.mark.parametrize("line", ["12 3", "abc: 1 2", "4: 1 x"])
def test_parse_lines_errors(line):
    with pytest.raises(ValueError):
        parse_lines([line])


def test_part12_propagates_parse_error():
    with pytest.raises(ValueError):
        part12(["190 10 19"])