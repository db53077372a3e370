"""Core game state and logic."""

import logging
import random
from typing import Optional

from . import collision
from .constants import KEY_DIRECTIONS, RIGHT
from .food import FoodSet
from .grid import Grid
from .input_queue import InputQueue
from .models import EngineConfig, GamePhase, PacingState
from .pacing import on_food_eaten
from .scheduler import PeriodicTask, Scheduler
from .snake import Snake
from .views import GameView

logger = logging.getLogger(__name__)


class GameEngine:
    """Owns one run of the game and every timer that drives it.

    Three periodic tasks are armed by start(): the tick (at the current
    pacing interval), the food spawner and the elapsed-time reporter.
    Each food item adds its own one-shot expiry timer. end() cancels all
    of them, and every callback also checks the phase, so nothing can
    change state after a run is over.
    """

    def __init__(
        self,
        view: GameView,
        scheduler: Scheduler,
        config: Optional[EngineConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self.view = view
        self.scheduler = scheduler
        self.config = config or EngineConfig()
        self.grid = Grid(self.config.cols, self.config.rows, rng)
        self.snake = Snake([self.grid.center()])
        self.direction = RIGHT
        self.inputs = InputQueue()
        self.food = FoodSet(self.grid, scheduler)
        self.score = 0
        self.pacing: PacingState = self.config.initial_pacing()
        self.phase = GamePhase.GAME_OVER
        self.started_at = 0.0
        self.ended_at = 0.0
        self._tick_task: Optional[PeriodicTask] = None
        self._spawn_task: Optional[PeriodicTask] = None
        self._clock_task: Optional[PeriodicTask] = None

    @property
    def running(self) -> bool:
        return self.phase is GamePhase.RUNNING

    def start(self):
        self._cancel_timers()
        self.snake = Snake([self.grid.center()])
        self.direction = RIGHT
        self.inputs.clear()
        self.score = 0
        self.pacing = self.config.initial_pacing()
        self.started_at = self.scheduler.time()
        self.phase = GamePhase.RUNNING

        self.view.hide_game_over()
        self.view.set_score(self.score)
        self.view.set_elapsed(0.0)

        self._tick_task = self.scheduler.call_every(self.pacing.tick_interval_ms, self.tick)
        self._spawn_task = self.scheduler.call_every(self.config.spawn_period_ms, self.spawn_food)
        self._clock_task = self.scheduler.call_every(self.config.clock_period_ms, self.report_elapsed)
        logger.info("Run started on a %dx%d grid", self.grid.cols, self.grid.rows)

    def tick(self):
        if not self.running:
            return

        self.direction = self.inputs.consume_next(self.direction)
        head = self.snake.advance(self.direction)

        if self.food.consume_at(head):
            self.score += 1
            self.pacing = on_food_eaten(self.pacing, self.config.speedup_factor)
            self._rearm_tick()
            self.view.set_score(self.score)
        else:
            self.snake.trim_tail()

        if collision.check(self.snake, self.grid):
            self.end()
            return

        self.view.draw(self.snake.segments(), self.food.positions())

    def spawn_food(self):
        if not self.running:
            return
        self.food.try_spawn(self.scheduler.time(), self.snake, self.pacing.food_lifetime_ms)

    def report_elapsed(self):
        if not self.running:
            return
        self.view.set_elapsed(self.elapsed_seconds())

    def elapsed_seconds(self) -> float:
        now = self.scheduler.time() if self.running else self.ended_at
        return round((now - self.started_at) / 1000, 1)

    def end(self):
        if not self.running:
            return
        self._cancel_timers()
        self.phase = GamePhase.GAME_OVER
        self.ended_at = self.scheduler.time()
        self.view.show_game_over()
        logger.info("Run over: score %d, length %d, %.1fs", self.score, len(self.snake), self.elapsed_seconds())

    def propose_direction(self, key: str) -> bool:
        direction = KEY_DIRECTIONS.get(key)
        if direction is None or not self.running:
            return False
        return self.inputs.propose(direction, self.direction)

    def snapshot(self) -> dict:
        return {
            "phase": self.phase.value,
            "score": self.score,
            "elapsed": self.elapsed_seconds(),
            "snake": self.snake.segments(),
            "food": self.food.positions(),
            "tick_interval_ms": self.pacing.tick_interval_ms,
            "food_lifetime_ms": self.pacing.food_lifetime_ms,
        }

    def _rearm_tick(self):
        if self._tick_task is not None:
            self._tick_task.cancel()
        self._tick_task = self.scheduler.call_every(self.pacing.tick_interval_ms, self.tick)

    def _cancel_timers(self):
        for task in (self._tick_task, self._spawn_task, self._clock_task):
            if task is not None:
                task.cancel()
        self._tick_task = self._spawn_task = self._clock_task = None
        self.food.clear()
