"""Snake game rules: states, input, timed movement, scoring and speed."""

from __future__ import annotations

import random
from enum import Enum, auto

from taskbench.food import Food
from taskbench.snake import Direction, Snake

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
GRID_SIZE = 20
GRID_WIDTH = WINDOW_WIDTH // GRID_SIZE
GRID_HEIGHT = WINDOW_HEIGHT // GRID_SIZE

START_SPEED = 0.2
MIN_SPEED = 0.05
SPEED_STEP = 0.005
POINTS_PER_FOOD = 10

_DIRECTION_KEYS = {
    "up": Direction.UP,
    "w": Direction.UP,
    "down": Direction.DOWN,
    "s": Direction.DOWN,
    "left": Direction.LEFT,
    "a": Direction.LEFT,
    "right": Direction.RIGHT,
    "d": Direction.RIGHT,
}


class GameState(Enum):
    """The screen the game is on."""

    MENU = auto()
    PLAYING = auto()
    GAME_OVER = auto()


class GameEvent(Enum):
    """Something that happened during an update and may deserve a sound."""

    ATE = auto()
    GAME_OVER = auto()


class SnakeGame:
    """The state of one snake game, independent of any display."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.grid_width = GRID_WIDTH
        self.grid_height = GRID_HEIGHT
        self.state = GameState.MENU
        self.game_started = False
        self.snake = self._new_snake()
        self.food = Food(rng)
        self.food.spawn(self.grid_width, self.grid_height, self.snake)
        self.score = 0
        self.game_speed = START_SPEED
        self.move_timer = 0.0

    def _new_snake(self) -> Snake:
        return Snake(self.grid_width // 2, self.grid_height // 2)

    def handle_key(self, key: str) -> None:
        """React to a key name such as ``"space"``, ``"up"``, ``"w"`` or ``"r"``."""
        key = key.lower()
        if self.state is GameState.MENU:
            if key == "space":
                self.state = GameState.PLAYING
                self.game_started = True
        elif self.state is GameState.PLAYING:
            direction = _DIRECTION_KEYS.get(key)
            if direction is not None:
                self.snake.set_direction(direction)
        elif self.state is GameState.GAME_OVER:
            if key == "r":
                self.reset()

    def update(self, delta_time: float) -> GameEvent | None:
        """Advance the clock; move the snake when a step is due and report what happened."""
        if self.state is not GameState.PLAYING:
            return None
        self.move_timer += delta_time
        if self.move_timer < self.game_speed:
            return None
        self.move_timer = 0.0

        self.snake.move()
        head = self.snake.head()
        out_of_bounds = not (
            0 <= head.x < self.grid_width and 0 <= head.y < self.grid_height
        )
        if out_of_bounds or self.snake.check_self_collision():
            self.state = GameState.GAME_OVER
            return GameEvent.GAME_OVER

        if head == self.food.position:
            self.snake.grow()
            self.food.spawn(self.grid_width, self.grid_height, self.snake)
            self.score += POINTS_PER_FOOD
            self.increase_speed()
            return GameEvent.ATE
        return None

    def reset(self) -> None:
        """Start a fresh round straight away."""
        self.snake = self._new_snake()
        self.food.spawn(self.grid_width, self.grid_height, self.snake)
        self.score = 0
        self.game_speed = START_SPEED
        self.move_timer = 0.0
        self.state = GameState.PLAYING

    def increase_speed(self) -> None:
        """Shorten the step interval until it reaches the minimum."""
        if self.game_speed > MIN_SPEED:
            self.game_speed -= SPEED_STEP

    def score_text(self) -> str:
        """The score line shown on screen."""
        return f"Score: {self.score}"