"""Cancellable timers on the asyncio event loop.

Every engine callback (ticks, food spawns, food expiries, the elapsed
clock) is delivered through a Scheduler, so they all run on one loop
and never overlap. Delays are in milliseconds.
"""

import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class PeriodicTask:
    """Runs a callback every `period_ms` until cancelled.

    The next run is armed only after the current one returns, and only
    if the task was not cancelled meanwhile, including from inside its
    own callback.
    """

    def __init__(self, scheduler: "Scheduler", period_ms: float, callback: Callable[[], None]):
        self.scheduler = scheduler
        self.period_ms = period_ms
        self.callback = callback
        self.cancelled = False
        self._handle = None

    def start(self) -> "PeriodicTask":
        self._arm()
        return self

    def cancel(self):
        self.cancelled = True
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _arm(self):
        self._handle = self.scheduler.call_later(self.period_ms, self._run)

    def _run(self):
        self._handle = None
        if self.cancelled:
            return
        self.callback()
        if not self.cancelled:
            self._arm()


class Scheduler:
    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def time(self) -> float:
        return self.loop.time() * 1000

    def call_later(self, delay_ms: float, callback: Callable[[], None]):
        return self.loop.call_later(delay_ms / 1000, callback)

    def call_every(self, period_ms: float, callback: Callable[[], None]) -> PeriodicTask:
        logger.debug("Arming periodic %s every %.1f ms", getattr(callback, "__name__", callback), period_ms)
        return PeriodicTask(self, period_ms, callback).start()
