"""The snake: a grid body that moves, turns and grows."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """A heading on the grid; the value is the (dx, dy) step it takes."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def opposite(self) -> Direction:
        """Return the heading that points the other way."""
        dx, dy = self.value
        return Direction((-dx, -dy))


@dataclass(frozen=True)
class Position:
    """A cell on the grid."""

    x: int = 0
    y: int = 0

    def moved(self, direction: Direction) -> Position:
        """Return the neighbouring cell in ``direction``."""
        dx, dy = direction.value
        return Position(self.x + dx, self.y + dy)


class Snake:
    """A snake of three segments that starts at a cell heading right."""

    def __init__(self, start_x: int, start_y: int) -> None:
        self._body: deque[Position] = deque(
            Position(start_x - offset, start_y) for offset in range(3)
        )
        self.direction = Direction.RIGHT
        self._next_direction = Direction.RIGHT
        self._should_grow = False

    @property
    def body(self) -> tuple[Position, ...]:
        """The segments, head first."""
        return tuple(self._body)

    @property
    def next_direction(self) -> Direction:
        """The heading the next move will take."""
        return self._next_direction

    def __len__(self) -> int:
        return len(self._body)

    def __iter__(self):
        return iter(self._body)

    def __contains__(self, position: object) -> bool:
        return position in self._body

    def set_direction(self, direction: Direction) -> None:
        """Queue a turn; turning straight back on the current heading is ignored."""
        if direction is self.direction.opposite():
            return
        self._next_direction = direction

    def move(self) -> None:
        """Advance one cell, keeping the tail if a grow is pending."""
        self.direction = self._next_direction
        self._body.appendleft(self._body[0].moved(self.direction))
        if self._should_grow:
            self._should_grow = False
        else:
            self._body.pop()

    def grow(self) -> None:
        """Make the next move lengthen the snake by one segment."""
        self._should_grow = True

    def head(self) -> Position:
        """Return the head's cell, or the origin for an empty body."""
        return self._body[0] if self._body else Position()

    def check_self_collision(self) -> bool:
        """Return True when the head shares a cell with another segment."""
        if len(self._body) < 2:
            return False
        head = self._body[0]
        return any(segment == head for segment in list(self._body)[1:])