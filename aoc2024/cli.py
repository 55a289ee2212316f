"""Command line entry point: solve the keypad puzzle for an input file."""

from __future__ import annotations

import argparse
import sys

from aoc2024 import day21
from aoc2024.common import get_lines_from_file

DEFAULT_INPUT = "day21/21.txt"


def main(argv=None):
    """Read the puzzle input and print the answer; return an exit status."""
    parser = argparse.ArgumentParser(prog="aoc2024", description=__doc__)
    parser.add_argument(
        "input",
        nargs="?",
        default=DEFAULT_INPUT,
        help=f"puzzle input file (default: {DEFAULT_INPUT})",
    )
    args = parser.parse_args(argv)

    try:
        lines = get_lines_from_file(args.input, True, True)
    except OSError as err:
        print(f"error reading input file: {err}", file=sys.stderr)
        return 1

    print(day21.part1(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())