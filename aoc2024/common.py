"""Helpers for reading puzzle input and parsing numbers."""

from __future__ import annotations

import re

_INT_RE = re.compile(r"[+-]?[0-9]+")


def get_lines_from_file(file_name, skip_empty, trim):
    """Read a text file into a list of lines.

    With ``trim`` leading and trailing spaces are removed; with ``skip_empty``
    lines that end up empty are dropped.
    """
    lines = []
    with open(file_name, encoding="utf-8") as handle:
        for raw in handle:
            line = raw.rstrip("\n")
            if trim:
                line = line.strip(" ")
            if skip_empty and not line:
                continue
            lines.append(line)
    return lines


def string_to_int(s):
    """Parse a decimal integer with an optional sign, rejecting anything else."""
    if not _INT_RE.fullmatch(s):
        raise ValueError(f"invalid integer: {s!r}")
    return int(s)


def to_integer_values(lines):
    """Parse every line, stripped of surrounding spaces, as an integer."""
    return [string_to_int(line.strip(" ")) for line in lines]


def int_sgn(value):
    """Return -1 for negative values, 0 for zero and 1 for positive values."""
    return (value > 0) - (value < 0)


def get_one_regex_group(pattern, line):
    """Return the single capture group of ``pattern`` found in ``line``."""
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    match = compiled.search(line)
    if match is None or compiled.groups != 1:
        raise ValueError(f"wrong number of groups in line {line}")
    return match.group(1) or ""