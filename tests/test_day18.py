from aoc2024.day18 import Coord, Grid, dijkstra, part12

EXAMPLE = (
    "5,4 4,2 4,5 3,0 2,1 6,3 2,4 1,5 0,6 3,3 2,6 5,1 1,2 "
    "5,5 2,5 6,5 1,4 0,4 6,4 1,1 6,1 1,0 0,5 1,6 2,0"
).split()


def test_example():
    part1, blocker = part12(EXAMPLE, 7, 12)
    assert part1 == 22
    assert blocker == (6, 1)


def test_empty_grid_distance_is_manhattan():
    n = 5
    distance, cells, found = dijkstra(Grid(n))
    assert found
    assert distance == 2 * (n - 1)
    assert len(cells) == distance
    assert Coord(n - 1, n - 1) in cells
    assert Coord(0, 0) not in cells


def test_path_cells_are_free_and_inside():
    grid = Grid(7)
    grid.obstacles.update({Coord(1, 0), Coord(1, 1), Coord(1, 2)})
    distance, cells, found = dijkstra(grid)
    assert found
    assert len(cells) == distance
    assert all(grid.is_free(cell) for cell in cells)


def test_wall_blocks_path():
    grid = Grid(4)
    grid.obstacles.update(Coord(2, y) for y in range(4))
    assert dijkstra(grid) == (-1, None, False)


def test_no_blocker_keeps_origin():
    lines = ["1,1"]
    part1, blocker = part12(lines, 3, 0)
    assert part1 == 4
    assert blocker == Coord(0, 0)


def test_single_cell_grid():
    assert dijkstra(Grid(1)) == (0, set(), True)