import random
from itertools import count

import pytest

from timed_snake.game import GameEngine
from timed_snake.models import EngineConfig
from timed_snake.scheduler import Scheduler
from timed_snake.views import GameView


class ManualTimer:
    def __init__(self, when, seq, callback):
        self.when = when
        self.seq = seq
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class ManualScheduler(Scheduler):
    """Scheduler on a virtual millisecond clock, advanced by hand."""

    def __init__(self):
        super().__init__()
        self.now = 0.0
        self.timers = []
        self._seq = count()

    def time(self):
        return self.now

    def call_later(self, delay_ms, callback):
        timer = ManualTimer(self.now + delay_ms, next(self._seq), callback)
        self.timers.append(timer)
        return timer

    def live(self):
        return [t for t in self.timers if not t.cancelled]

    def advance(self, ms):
        target = self.now + ms
        while True:
            due = [t for t in self.live() if t.when <= target]
            if not due:
                break
            timer = min(due, key=lambda t: (t.when, t.seq))
            self.timers.remove(timer)
            self.now = timer.when
            timer.callback()
        self.now = target


class RecordingView(GameView):
    def __init__(self):
        self.events = []

    def draw(self, snake_segments, food_positions):
        self.events.append(("draw", snake_segments, food_positions))

    def set_score(self, score):
        self.events.append(("score", score))

    def set_elapsed(self, seconds):
        self.events.append(("elapsed", seconds))

    def show_game_over(self):
        self.events.append(("game_over", True))

    def hide_game_over(self):
        self.events.append(("game_over", False))

    def of(self, kind):
        return [e for e in self.events if e[0] == kind]


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def view():
    return RecordingView()


@pytest.fixture
def engine(view, scheduler):
    return GameEngine(view, scheduler, EngineConfig(cols=10, rows=10), rng=random.Random(7))
