"""Snake body and movement."""

from collections import deque
from itertools import islice
from typing import Iterable, Iterator, Optional

from .models import Cell, Direction


class Snake:
    def __init__(self, segments: Iterable[Cell]):
        self._body: deque[Cell] = deque(segments)

    def __len__(self) -> int:
        return len(self._body)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._body)

    @property
    def head(self) -> Cell:
        return self._body[0]

    def segments(self) -> list[Cell]:
        return list(self._body)

    def occupies(self, cell: Cell) -> bool:
        return cell in self._body

    def advance(self, direction: Direction) -> Cell:
        """Push the next head onto the body and return it.

        The tail stays put; the caller trims it when nothing was eaten.
        """
        hx, hy = self._body[0]
        dx, dy = direction
        new_head = (hx + dx, hy + dy)
        self._body.appendleft(new_head)
        return new_head

    def trim_tail(self) -> Cell:
        return self._body.pop()

    def collides_with_self(self, head: Optional[Cell] = None) -> bool:
        if head is None:
            head = self._body[0]
        return head in islice(self._body, 1, None)
