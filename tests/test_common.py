import re

import pytest

from aoc2024.common import (
    get_lines_from_file,
    get_one_regex_group,
    int_sgn,
    string_to_int,
    to_integer_values,
)


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("  first  \n\n   \nsecond\n", encoding="utf-8")
    return path


def test_lines_trimmed_and_skipped(sample_file):
    assert get_lines_from_file(sample_file, True, True) == ["first", "second"]


def test_lines_trimmed_not_skipped(sample_file):
    assert get_lines_from_file(sample_file, False, True) == ["first", "", "", "second"]


def test_lines_raw(sample_file):
    assert get_lines_from_file(sample_file, False, False) == [
        "  first  ",
        "",
        "   ",
        "second",
    ]


def test_lines_crlf(tmp_path):
    path = tmp_path / "crlf.txt"
    path.write_bytes(b"a\r\nb\r\n")
    assert get_lines_from_file(path, True, True) == ["a", "b"]


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        get_lines_from_file(tmp_path / "absent.txt", True, True)


def test_to_integer_values():
    assert to_integer_values([" 12", "7 ", "-3", "+4"]) == [12, 7, -3, 4]


@pytest.mark.parametrize("text", ["abc", "1_0", "", "1.5", " 5"])
def test_string_to_int_rejects(text):
    with pytest.raises(ValueError):
        string_to_int(text)


def test_string_to_int_round_trip():
    for value in (-1000, -1, 0, 1, 987654321):
        assert string_to_int(str(value)) == value


@pytest.mark.parametrize("value,expected", [(-17, -1), (0, 0), (42, 1)])
def test_int_sgn(value, expected):
    assert int_sgn(value) == expected


def test_one_regex_group_string_pattern():
    assert get_one_regex_group(r"id=(\w+)", "x id=abc y") == "abc"


def test_one_regex_group_compiled_pattern():
    assert get_one_regex_group(re.compile(r"(\d+)$"), "value 314") == "314"


def test_one_regex_group_no_match():
    with pytest.raises(ValueError):
        get_one_regex_group(r"id=(\w+)", "nothing here")


def test_one_regex_group_too_many_groups():
    with pytest.raises(ValueError):
        get_one_regex_group(r"(a)(b)", "ab")