"""The food item and where it is placed on the grid."""

from __future__ import annotations

import random

from taskbench.snake import Position, Snake

MAX_SPAWN_ATTEMPTS = 100


class Food:
    """Food that sits on one grid cell and respawns away from the snake."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.position = Position()
        self._rng = rng if rng is not None else random.Random()

    def spawn(self, grid_width: int, grid_height: int, snake: Snake) -> Position:
        """Pick a random cell off the snake, giving up after a bounded number of tries.

        When every try lands on the snake the last cell drawn is used anyway.
        """
        for _ in range(MAX_SPAWN_ATTEMPTS):
            candidate = Position(
                self._rng.randint(0, grid_width - 1),
                self._rng.randint(0, grid_height - 1),
            )
            if self.is_position_valid(candidate, snake):
                break
        self.position = candidate
        return candidate

    def is_position_valid(self, position: Position, snake: Snake) -> bool:
        """Return True when no snake segment occupies ``position``."""
        return all(segment != position for segment in snake.body)