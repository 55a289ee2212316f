# aoc2024

Solutions to puzzles of a 2024 daily programming puzzle calendar, written as a plain
Python package with no runtime dependencies.

Each solved day lives in its own module and works on a list of input lines. The
modules and the answers they return:

| Module | Functions |
| --- | --- |
| `aoc2024.day03` | `part1(lines)`, `part2(lines)` |
| `aoc2024.day04` | `count_x_mas(matrix, nr_cols)`, grid helpers `rotate_matrix_90`, `rotate_matrix_45`, `read_matrix`, `write_matrix`, `write_to_file`, and `main(argv=None)` |
| `aoc2024.day06` | `part1(lines)`, `part2(lines)` |
| `aoc2024.day07` | `part12(lines)` returning both answers |
| `aoc2024.day08` | `part1(lines)`, `part2(lines)` |
| `aoc2024.day09` | `part1(lines)`, `part2(lines)` |
| `aoc2024.day10` | `part12(lines)` returning both answers |
| `aoc2024.day11` | `part1(lines)`, counting stones after 75 blinks; `count_stones(value, steps)` for any number of blinks |
| `aoc2024.day12` | `part1(lines)` returning the perimeter price and the sides price |
| `aoc2024.day13` | `part1(lines)`, `part2(lines)` |
| `aoc2024.day14` | `part1(lines, nx, ny)`, `part2(lines, nx, ny)` |
| `aoc2024.day15` | `part1(lines)`, `part2(lines)` |
| `aoc2024.day16` | `part2(lines)` |
| `aoc2024.day17` | `part1(lines)`, `part2(lines)`, and the `Computer` class |
| `aoc2024.day18` | `part12(lines, n, drops)` returning the path length and the blocking byte |
| `aoc2024.day19` | `part1(lines)`, `part2(lines)` |
| `aoc2024.day20` | `part1(lines)`, `part2(lines, max_cheat, min_save)` |
| `aoc2024.day21` | `part1(lines)` |

`aoc2024.common` holds the input helpers, among them
`get_lines_from_file(file_name, skip_empty, trim)`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

The `aoc2024` command reads a day 21 input file and prints the answer to part one.
Without an argument it reads `day21/21.txt` relative to the current directory:

```
aoc2024 path/to/21.txt
```

The `aoc2024-day04` command takes the path of a day 4 letter grid and prints how
many X-shaped "MAS" patterns it contains:

```
aoc2024-day04 path/to/04.txt
```

## Library use

```python
from aoc2024.common import get_lines_from_file
from aoc2024 import day07, day19

lines = get_lines_from_file("day07/07.txt", True, True)
part1, part2 = day07.part12(lines)

towel_lines = get_lines_from_file("day19/19.txt", False, True)
print(day19.part1(towel_lines), day19.part2(towel_lines))
```

Some parts take extra parameters that the puzzle fixes, for example
`day14.part1(lines, 101, 103)` for the grid size, `day18.part12(lines, 71, 1024)` for
the memory size and the number of fallen bytes, and `day20.part2(lines, 20, 100)` for
the longest cheat and the smallest saving that counts. Day 20 only counts cheats that
save at least 100 steps, whatever `min_save` is.

Day 15 and day 17 inputs contain a blank separator line, so read them with
`get_lines_from_file(path, False, True)`.

## What the package does not do

- Days 1, 2 and 5 have no module, and there is nothing for days after 21.
- Day 16 answers only the second part (cells on any cheapest route); day 21 answers
  only the first part (two robot keypads).
- Day 17's `part2` searches for register A using the arithmetic of one particular
  puzzle program, not the program given in the input.
- Only days 4 and 21 have a command; every other day is used from Python.