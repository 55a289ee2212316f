"""A robot pushing boxes around a warehouse, in normal and double width."""

from __future__ import annotations

from dataclasses import dataclass

BOX = "O"
ROBOT = "@"
WALL = "#"
EMPTY = "."
BIG_BOX_LEFT = "["
BIG_BOX_RIGHT = "]"

UP = "^"
RIGHT = ">"
DOWN = "v"
LEFT = "<"

_OFFSETS = {UP: (-1, 0), DOWN: (1, 0), LEFT: (0, -1), RIGHT: (0, 1)}
_WIDE = {
    WALL: (WALL, WALL),
    BOX: (BIG_BOX_LEFT, BIG_BOX_RIGHT),
    EMPTY: (EMPTY, EMPTY),
}


def _step(coord, direction):
    try:
        dr, dc = _OFFSETS[direction]
    except KeyError:
        raise ValueError(f"invalid direction {direction!r}") from None
    return coord[0] + dr, coord[1] + dc


@dataclass
class Grid:
    """Warehouse cells as rows of characters, addressed by ``(row, col)``."""

    cells: list

    def __getitem__(self, coord):
        return self.cells[coord[0]][coord[1]]

    def __setitem__(self, coord, value):
        self.cells[coord[0]][coord[1]] = value

    def _find_empty(self, coord, direction):
        """First empty cell from ``coord`` along ``direction``, or None at a wall."""
        while True:
            value = self[coord]
            if value == WALL:
                return None
            if value == EMPTY:
                return coord
            coord = _step(coord, direction)

    def push(self, coord, direction):
        """Push the box at ``coord``; return whether it moved."""
        if self[coord] != BOX:
            raise ValueError("invalid coord for box")
        empty = self._find_empty(coord, direction)
        if empty is None:
            return False
        self[empty] = BOX
        self[coord] = EMPTY
        return True

    def push_big_box(self, coord, direction):
        """Push the wide box touching ``coord``; return whether it moved."""
        if self[coord] not in (BIG_BOX_LEFT, BIG_BOX_RIGHT):
            raise ValueError("invalid coord for box")

        if direction in (LEFT, RIGHT):
            empty = self._find_empty(coord, direction)
            if empty is None:
                return False
            distance = abs(empty[1] - coord[1])
            if distance < 2:
                raise ValueError("a wide box cannot fit in the gap")
            step = 1 if direction == RIGHT else -1
            self[empty] = BIG_BOX_RIGHT if direction == RIGHT else BIG_BOX_LEFT
            self[coord] = EMPTY
            row = self.cells[coord[0]]
            for k in range(coord[1] + step, coord[1] + step * distance, step):
                if row[k] == BIG_BOX_LEFT:
                    row[k] = BIG_BOX_RIGHT
                elif row[k] == BIG_BOX_RIGHT:
                    row[k] = BIG_BOX_LEFT
                else:
                    raise ValueError(
                        f"wrong cell content grid[{coord[0]}][{k}]={row[k]}"
                    )
            return True

        boxes = set()
        if not self._collect(coord, direction, boxes):
            return False
        for r, c in boxes:
            self[(r, c)] = EMPTY
            self[(r, c + 1)] = EMPTY
        for box in boxes:
            r, c = _step(box, direction)
            self[(r, c)] = BIG_BOX_LEFT
            self[(r, c + 1)] = BIG_BOX_RIGHT
        return True

    def _collect(self, coord, direction, boxes):
        """Gather the left halves of boxes moved vertically; tell if all can move."""
        value = self[coord]
        if value not in (BIG_BOX_LEFT, BIG_BOX_RIGHT) or direction not in (UP, DOWN):
            raise ValueError("invalid coord for box")
        box = coord if value == BIG_BOX_LEFT else _step(coord, LEFT)
        boxes.add(box)

        left = _step(box, direction)
        right = _step(left, RIGHT)
        left_value, right_value = self[left], self[right]

        if left_value == EMPTY and right_value == EMPTY:
            return True
        if WALL in (left_value, right_value):
            return False
        if left_value == BIG_BOX_LEFT:
            return self._collect(left, direction, boxes)

        can_left = left_value == EMPTY or (
            left_value == BIG_BOX_RIGHT and self._collect(left, direction, boxes)
        )
        can_right = right_value == EMPTY or (
            right_value == BIG_BOX_LEFT and self._collect(right, direction, boxes)
        )
        return can_left and can_right

    def encode_box_coords(self, target):
        """Sum of ``100 * row + col`` over cells holding ``target``."""
        return sum(
            100 * r + c
            for r, row in enumerate(self.cells)
            for c, value in enumerate(row)
            if value == target
        )

    def __str__(self):
        return "".join(" ".join(row) + " \n" for row in self.cells)


def parse_input(lines):
    """Return the grid, the robot position and the move string."""
    n = len(lines[0])
    cells = [[EMPTY] * n for _ in range(n)]
    robot = (0, 0)
    moves = []
    reading_map = True
    for r, line in enumerate(lines):
        if not line:
            reading_map = False
            continue
        if reading_map:
            for c, value in enumerate(line):
                if value == ROBOT:
                    robot = (r, c)
                    cells[r][c] = EMPTY
                else:
                    cells[r][c] = value
        else:
            moves.append(line)
    return Grid(cells), robot, "".join(moves)


def part1(lines):
    """GPS sum of the boxes after all moves."""
    grid, robot, moves = parse_input(lines)
    for direction in moves:
        ahead = _step(robot, direction)
        value = grid[ahead]
        if value == EMPTY:
            robot = ahead
        elif value == BOX and grid.push(ahead, direction):
            robot = ahead
    return grid.encode_box_coords(BOX)


def part2(lines):
    """GPS sum of the wide boxes after all moves in the widened warehouse."""
    grid, robot, moves = parse_input(lines)
    wide_cells = []
    for row in grid.cells:
        wide_row = []
        for value in row:
            if value not in _WIDE:
                raise ValueError(f"unexpected cell {value!r}")
            wide_row.extend(_WIDE[value])
        wide_cells.append(wide_row)
    wide = Grid(wide_cells)
    robot = (robot[0], robot[1] * 2)

    for direction in moves:
        ahead = _step(robot, direction)
        value = wide[ahead]
        if value == WALL:
            continue
        if value == EMPTY:
            robot = ahead
        elif value in (BIG_BOX_LEFT, BIG_BOX_RIGHT):
            if wide.push_big_box(ahead, direction):
                robot = ahead
        else:
            raise ValueError(f"unexpected cell {value!r}")
    return wide.encode_box_coords(BIG_BOX_LEFT)