"""Wall and self collision checks."""

from .grid import Grid
from .snake import Snake


def check(snake: Snake, grid: Grid) -> bool:
    head = snake.head
    if not grid.in_bounds(head):
        return True
    return snake.collides_with_self(head)
