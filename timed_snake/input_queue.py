"""Buffered direction input."""

from collections import deque
from typing import Iterable

from .models import Direction, is_opposite


class InputQueue:
    """FIFO of direction changes, drained one entry per tick.

    A proposal is checked against the last direction the player intended:
    the newest queued entry, or the current motion when nothing is queued.
    An exact reversal is dropped, so two quick turns can never fold the
    head back onto the neck within a single tick.
    """

    def __init__(self, pending: Iterable[Direction] = ()):
        self._queue: deque[Direction] = deque(pending)

    def __len__(self) -> int:
        return len(self._queue)

    def pending(self) -> tuple[Direction, ...]:
        return tuple(self._queue)

    def propose(self, direction: Direction, current_motion: Direction) -> bool:
        last = self._queue[-1] if self._queue else current_motion
        if is_opposite(direction, last):
            return False
        self._queue.append(direction)
        return True

    def consume_next(self, current_motion: Direction) -> Direction:
        if self._queue:
            return self._queue.popleft()
        return current_motion

    def clear(self):
        self._queue.clear()
