"""Character grid rotations and the X-MAS pattern count."""

from __future__ import annotations

import sys
from pathlib import Path

_X_MAS_CORNERS = {
    ("M", "M", "S", "S"),
    ("M", "S", "M", "S"),
    ("S", "S", "M", "M"),
    ("S", "M", "S", "M"),
}


def rotate_matrix_90(matrix):
    """Rotate a grid of characters by 90 degrees clockwise."""
    if not matrix:
        return matrix
    return [list(column) for column in zip(*reversed(matrix))]


def rotate_matrix_45(matrix):
    """Rotate a grid by 45 degrees clockwise into lines of diagonals.

    The diagonals are emitted starting from the centre one and alternating
    outwards.
    """
    if not matrix:
        return []
    rows = len(matrix)
    cols = len(matrix[0])
    max_sum = rows + cols - 2
    centre = max_sum // 2

    order = []
    for distance in range(centre + 1):
        order.append(centre - distance)
        right = centre + distance
        if distance and right <= max_sum:
            order.append(right)

    lines = []
    for diagonal in order:
        chars = [
            row[cols - 1 - diagonal + i]
            for i, row in enumerate(matrix)
            if 0 <= cols - 1 - diagonal + i < cols
        ]
        if chars:
            lines.append("".join(chars))
    return lines


def read_matrix(input_file):
    """Read a file into a grid padded with spaces; return it with its width."""
    with open(input_file, encoding="utf-8") as handle:
        matrix = [list(line.rstrip("\n")) for line in handle]
    max_cols = max((len(row) for row in matrix), default=0)
    for row in matrix:
        row.extend(" " * (max_cols - len(row)))
    return matrix, max_cols


def write_matrix(rotated, output_file):
    """Write a grid (rows of characters or strings) one row per line."""
    lines = []
    for row in rotated:
        if isinstance(row, str):
            lines.append(row)
        elif isinstance(row, list):
            lines.append("".join(row))
        else:
            raise TypeError("unsupported type for rotated matrix")
    with open(output_file, "w", encoding="utf-8") as handle:
        handle.writelines(f"{line}\n" for line in lines)


def write_to_file(matrix, dir_name, name_only, suffix, ext):
    """Write ``matrix`` to ``<dir_name>/<name_only>_<suffix><ext>``."""
    path = Path(dir_name) / f"{name_only}_{suffix}{ext}"
    write_matrix(matrix, path)
    return path


def count_x_mas(matrix, nr_cols):
    """Count 'A' cells whose diagonal corners spell MAS twice in an X."""
    total = 0
    for r in range(1, nr_cols - 1):
        for c in range(1, nr_cols - 1):
            if matrix[r][c] != "A":
                continue
            corners = (
                matrix[r - 1][c - 1],
                matrix[r - 1][c + 1],
                matrix[r + 1][c - 1],
                matrix[r + 1][c + 1],
            )
            if corners in _X_MAS_CORNERS:
                total += 1
    return total


def main(argv=None):
    """Print the X-MAS count of the grid file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: rotate90 <input_file>")
        return 1

    input_file = Path(args[0])
    if not input_file.exists():
        print(f"Error: File '{input_file}' does not exist.")
        return 1
    if input_file.is_dir():
        print(f"Error: '{input_file}' is a directory, not a file.")
        return 1

    try:
        matrix, nr_cols = read_matrix(input_file)
    except OSError as err:
        print(f"error reading input file: {err}")
        return 1

    print(count_x_mas(matrix, nr_cols))
    return 0


if __name__ == "__main__":
    sys.exit(main())