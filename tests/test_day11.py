import pytest

from aoc2024.day11 import BLINKS, count_stones, part1


def test_example_after_six_blinks():
    assert count_stones(125, 6) + count_stones(17, 6) == 22


def test_example_after_twenty_five_blinks():
    assert count_stones(125, 25) + count_stones(17, 25) == 55312


def test_single_blink_example():
    assert sum(count_stones(v, 1) for v in (0, 1, 10, 99, 999)) == 7


@pytest.mark.parametrize("value", [0, 5, 17, 1234, 999999])
def test_no_blinks_keeps_one_stone(value):
    assert count_stones(value, 0) == count_stones(value + 1, 0)


@pytest.mark.parametrize("steps", [1, 5, 20])
def test_zero_becomes_one(steps):
    assert count_stones(0, steps) == count_stones(1, steps - 1)


@pytest.mark.parametrize("steps", [1, 4, 12])
def test_even_digits_split(steps):
    assert count_stones(1000, steps) == count_stones(10, steps - 1) + count_stones(0, steps - 1)


@pytest.mark.parametrize("steps", [1, 6, 15])
def test_odd_digits_multiply(steps):
    assert count_stones(3, steps) == count_stones(3 * 2024, steps - 1)


def test_count_never_shrinks():
    counts = [count_stones(125, steps) for steps in range(15)]
    assert counts == sorted(counts)


def test_part1_sums_every_stone():
    assert part1(["125 17"]) == count_stones(125, BLINKS) + count_stones(17, BLINKS)


def test_part1_rejects_bad_token():
    with pytest.raises(ValueError):
        part1(["125 x"])


def test_part1_rejects_double_space():
    with pytest.raises(ValueError):
        part1(["125  17"])