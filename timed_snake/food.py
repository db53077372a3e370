"""Food items and their expiry timers."""

import logging
from itertools import count
from typing import Optional

from .grid import Grid
from .models import Cell, FoodItem
from .scheduler import Scheduler
from .snake import Snake

logger = logging.getLogger(__name__)


class FoodSet:
    """Live food items keyed by id, each with its own expiry timer.

    Removal is idempotent: whichever of "eaten" and "expired" happens
    first takes the item, the other finds nothing and does nothing.
    """

    def __init__(self, grid: Grid, scheduler: Scheduler):
        self.grid = grid
        self.scheduler = scheduler
        self._items: dict[int, FoodItem] = {}
        self._ids = count(1)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: int) -> bool:
        return item_id in self._items

    def items(self) -> list[FoodItem]:
        return list(self._items.values())

    def positions(self) -> list[Cell]:
        return [item.position for item in self._items.values()]

    def try_spawn(self, now: float, snake: Snake, lifetime_ms: float) -> Optional[FoodItem]:
        pos = self.grid.random_cell()
        if snake.occupies(pos):
            # No retry; the next spawn period gets another chance.
            logger.debug("Spawn at %s landed on the snake, skipped", pos)
            return None
        return self.place(pos, now, lifetime_ms)

    def place(self, position: Cell, now: float, lifetime_ms: float) -> FoodItem:
        item_id = next(self._ids)
        item = FoodItem(item_id=item_id, position=position, expires_at=now + lifetime_ms)
        item.handle = self.scheduler.call_later(lifetime_ms, lambda: self.expire(item_id))
        self._items[item_id] = item
        return item

    def consume_at(self, cell: Cell) -> bool:
        for item_id, item in self._items.items():
            if item.position == cell:
                del self._items[item_id]
                if item.handle is not None:
                    item.handle.cancel()
                return True
        return False

    def expire(self, item_id: int) -> bool:
        item = self._items.pop(item_id, None)
        if item is None:
            return False
        logger.debug("Food %d at %s expired", item_id, item.position)
        return True

    def clear(self):
        for item in self._items.values():
            if item.handle is not None:
                item.handle.cancel()
        self._items.clear()
