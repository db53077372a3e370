"""Data models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from .constants import (
    GRID_W, GRID_H, TICK_INTERVAL_MS, FOOD_LIFETIME_MS,
    SPAWN_PERIOD_MS, CLOCK_PERIOD_MS, SPEEDUP_FACTOR,
)

Cell = tuple[int, int]
Direction = tuple[int, int]


def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


class GamePhase(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class PacingState:
    tick_interval_ms: float = TICK_INTERVAL_MS
    food_lifetime_ms: float = FOOD_LIFETIME_MS


@dataclass
class FoodItem:
    item_id: int
    position: Cell
    expires_at: float
    handle: Optional[Any] = field(default=None, repr=False, compare=False)


@dataclass
class EngineConfig:
    cols: int = GRID_W
    rows: int = GRID_H
    tick_interval_ms: float = TICK_INTERVAL_MS
    food_lifetime_ms: float = FOOD_LIFETIME_MS
    spawn_period_ms: float = SPAWN_PERIOD_MS
    clock_period_ms: float = CLOCK_PERIOD_MS
    speedup_factor: float = SPEEDUP_FACTOR

    def initial_pacing(self) -> PacingState:
        return PacingState(self.tick_interval_ms, self.food_lifetime_ms)
