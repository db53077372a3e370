"""Grid coordinate space."""

import random
from typing import Optional

from .models import Cell


class Grid:
    def __init__(self, cols: int, rows: int, rng: Optional[random.Random] = None):
        self.cols = cols
        self.rows = rows
        self.rng = rng or random.Random()

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.cols and 0 <= y < self.rows

    def random_cell(self) -> Cell:
        return (self.rng.randrange(self.cols), self.rng.randrange(self.rows))

    def center(self) -> Cell:
        return (self.cols // 2, self.rows // 2)
