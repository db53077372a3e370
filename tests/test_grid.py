import random

from timed_snake import collision
from timed_snake.grid import Grid
from timed_snake.snake import Snake


def test_in_bounds_edges():
    grid = Grid(10, 8)
    assert grid.in_bounds((0, 0))
    assert grid.in_bounds((9, 7))
    assert not grid.in_bounds((10, 0))
    assert not grid.in_bounds((0, 8))
    assert not grid.in_bounds((-1, 3))


def test_random_cell_stays_on_grid():
    grid = Grid(4, 3, random.Random(1))
    cells = {grid.random_cell() for _ in range(500)}
    assert all(grid.in_bounds(c) for c in cells)
    assert len(cells) == 12


def test_center():
    assert Grid(10, 10).center() == (5, 5)
    assert Grid(7, 5).center() == (3, 2)


def test_collision_with_wall():
    grid = Grid(10, 10)
    assert collision.check(Snake([(10, 5)]), grid)
    assert collision.check(Snake([(3, -1)]), grid)
    assert not collision.check(Snake([(9, 9)]), grid)


def test_collision_with_self():
    grid = Grid(10, 10)
    assert collision.check(Snake([(2, 2), (2, 3), (3, 3), (3, 2), (2, 2)]), grid)
    assert not collision.check(Snake([(2, 2), (2, 3), (3, 3)]), grid)
