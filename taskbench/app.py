"""Windowed snake game: drawing, sound and the main loop."""

from __future__ import annotations

import argparse
import math
import sys
import time
from pathlib import Path
from typing import Sequence

import pygame

from taskbench.game import (
    GRID_SIZE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    GameEvent,
    GameState,
    SnakeGame,
)
from taskbench.snake import Direction

FONT_PATHS = ("assets/fonts/arial.ttf", "assets/arial.ttf", "arial.ttf")
BACKGROUND_PATH = "assets/textures/background.png"
APPLE_PATH = "assets/textures/apple.png"
HEAD_PATH = "assets/textures/snake_head.png"
BODY_PATH = "assets/textures/snake_body.png"
EAT_SOUND_PATH = "assets/sounds/eat.wav"
GAME_OVER_SOUND_PATH = "assets/sounds/gameover.wav"
MUSIC_PATH = "assets/sounds/background.ogg"

SPRITE_SIZE = 20
WHITE = (255, 255, 255)
RED = (255, 0, 0)
YELLOW = (255, 255, 0)

# Rotation in degrees, counter-clockwise, for a head sprite drawn facing right.
_HEAD_ROTATION = {
    Direction.RIGHT: 0,
    Direction.UP: 90,
    Direction.LEFT: 180,
    Direction.DOWN: -90,
}

_KEY_NAMES = {
    pygame.K_SPACE: "space",
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_w: "w",
    pygame.K_a: "a",
    pygame.K_s: "s",
    pygame.K_d: "d",
    pygame.K_r: "r",
}


def make_background(width: int, height: int, grid_size: int) -> pygame.Surface:
    """Build a dark checkerboard background."""
    surface = pygame.Surface((width, height))
    surface.fill((20, 20, 20))
    for x in range(0, width, grid_size):
        for y in range(0, height, grid_size):
            if (x // grid_size + y // grid_size) % 2 == 0:
                surface.fill((25, 25, 25), pygame.Rect(x, y, grid_size, grid_size))
    return surface


def make_apple_surface() -> pygame.Surface:
    """Draw a small apple with a stem, a leaf and a highlight."""
    surface = pygame.Surface((SPRITE_SIZE, SPRITE_SIZE), pygame.SRCALPHA)
    surface.fill((0, 0, 0, 0))
    for x in range(SPRITE_SIZE):
        for y in range(SPRITE_SIZE):
            if math.hypot(x - 10.0, y - 12.0) <= 7.0:
                surface.set_at((x, y), RED)
    for y in (3, 4, 5):
        surface.set_at((10, y), (101, 67, 33))
    for point in ((9, 4), (8, 5)):
        surface.set_at(point, (0, 255, 0))
    for point in ((8, 8), (7, 9), (8, 9)):
        surface.set_at(point, (255, 150, 150))
    return surface


def make_head_surface() -> pygame.Surface:
    """Draw the snake's head, facing right."""
    surface = pygame.Surface((SPRITE_SIZE, SPRITE_SIZE))
    surface.fill((0, 200, 0))
    surface.fill((0, 255, 0), pygame.Rect(6, 6, 4, 4))
    for point in ((5, 5), (14, 5), (5, 6), (14, 6)):
        surface.set_at(point, (0, 0, 0))
    return surface


def make_body_surface() -> pygame.Surface:
    """Draw one scaled body segment."""
    surface = pygame.Surface((SPRITE_SIZE, SPRITE_SIZE))
    surface.fill((0, 150, 0))
    for i in range(2, 18):
        for j in range(2, 18):
            if (i + j) % 4 == 0:
                surface.set_at((i, j), (0, 180, 0))
    return surface


def pulse_scale(elapsed: float) -> float:
    """Scale factor of the food's pulsing animation after ``elapsed`` seconds."""
    return 1.0 + 0.1 * math.sin(elapsed * 3.0)


def _load_image(path: str, fallback: pygame.Surface) -> pygame.Surface:
    try:
        return pygame.image.load(path).convert_alpha()
    except (pygame.error, FileNotFoundError):
        return fallback


def _load_font(size: int) -> pygame.font.Font:
    for path in FONT_PATHS:
        if Path(path).is_file():
            try:
                return pygame.font.Font(path, size)
            except (pygame.error, OSError):
                continue
    return pygame.font.Font(None, size)


def _load_sound(path: str, volume: float, label: str) -> pygame.mixer.Sound | None:
    try:
        sound = pygame.mixer.Sound(path)
    except (pygame.error, FileNotFoundError):
        print(f"Warning: Could not load {label}", file=sys.stderr)
        return None
    sound.set_volume(volume)
    return sound


class SnakeApp:
    """A window that shows and plays a :class:`SnakeGame`."""

    def __init__(self) -> None:
        pygame.init()
        self.window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Snake Game")
        self.clock = pygame.time.Clock()
        self.game = SnakeGame()
        self._animation_start = time.monotonic()
        self._running = False
        self._load_assets()

    def _load_assets(self) -> None:
        if not any(Path(path).is_file() for path in FONT_PATHS):
            print("Warning: Could not load font. Using default font.", file=sys.stderr)
        self.score_font = _load_font(24)
        self.big_font = _load_font(48)
        self.title_font = _load_font(36)
        self.small_font = _load_font(18)

        self.background = _load_image(
            BACKGROUND_PATH, make_background(WINDOW_WIDTH, WINDOW_HEIGHT, GRID_SIZE)
        )
        self.apple = _load_image(APPLE_PATH, make_apple_surface())
        self.head = _load_image(HEAD_PATH, make_head_surface())
        self.body = _load_image(BODY_PATH, make_body_surface())

        self.eat_sound = None
        self.game_over_sound = None
        try:
            pygame.mixer.init()
        except pygame.error:
            print("Warning: Could not open audio device", file=sys.stderr)
            return
        self.eat_sound = _load_sound(EAT_SOUND_PATH, 0.5, "eat sound")
        self.game_over_sound = _load_sound(GAME_OVER_SOUND_PATH, 0.7, "game over sound")
        try:
            pygame.mixer.music.load(MUSIC_PATH)
        except (pygame.error, FileNotFoundError):
            print("Warning: Could not load background music", file=sys.stderr)
        else:
            pygame.mixer.music.set_volume(0.3)
            pygame.mixer.music.play(-1)

    def run(self) -> None:
        """Run the event, update and draw loop until the window is closed."""
        self._running = True
        try:
            while self._running:
                delta_time = self.clock.tick(60) / 1000.0
                self._handle_events()
                if self.game.state is GameState.PLAYING:
                    self._play_event(self.game.update(delta_time))
                self._render()
        finally:
            pygame.quit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False
            elif event.type == pygame.KEYDOWN:
                name = _KEY_NAMES.get(event.key)
                if name is not None:
                    self.game.handle_key(name)

    def _play_event(self, event: GameEvent | None) -> None:
        sound = {
            GameEvent.ATE: self.eat_sound,
            GameEvent.GAME_OVER: self.game_over_sound,
        }.get(event) if event is not None else None
        if sound is not None:
            sound.play()

    def _blit_centered(
        self, font: pygame.font.Font, text: str, colour: tuple[int, int, int], offset: int
    ) -> None:
        image = font.render(text, True, colour)
        x = (WINDOW_WIDTH - image.get_width()) / 2
        y = (WINDOW_HEIGHT - image.get_height()) / 2 + offset
        self.window.blit(image, (x, y))

    def _draw_snake(self) -> None:
        body = self.game.snake.body
        for segment in body[1:]:
            self.window.blit(self.body, (segment.x * GRID_SIZE, segment.y * GRID_SIZE))
        if body:
            head = pygame.transform.rotate(
                self.head, _HEAD_ROTATION[self.game.snake.direction]
            )
            self.window.blit(head, (body[0].x * GRID_SIZE, body[0].y * GRID_SIZE))

    def _draw_food(self) -> None:
        scale = pulse_scale(time.monotonic() - self._animation_start)
        width = max(1, round(self.apple.get_width() * scale))
        height = max(1, round(self.apple.get_height() * scale))
        image = pygame.transform.smoothscale(self.apple, (width, height))
        position = self.game.food.position
        shift = GRID_SIZE * (1.0 - scale) / 2.0
        self.window.blit(
            image, (position.x * GRID_SIZE + shift, position.y * GRID_SIZE + shift)
        )

    def _render(self) -> None:
        self.window.fill((0, 0, 0))
        self.window.blit(self.background, (0, 0))
        state = self.game.state
        if state is GameState.MENU:
            self._blit_centered(self.title_font, "SNAKE GAME", WHITE, -50)
            self._blit_centered(self.small_font, "Press SPACE to start", YELLOW, 20)
        else:
            self._draw_snake()
            self._draw_food()
            score = self.score_font.render(self.game.score_text(), True, WHITE)
            self.window.blit(score, (10, 10))
            if state is GameState.GAME_OVER:
                self._blit_centered(self.big_font, "GAME OVER", RED, -50)
                self._blit_centered(self.small_font, "Press R to restart", WHITE, 20)
        pygame.display.flip()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and play until it is closed."""
    parser = argparse.ArgumentParser(description="Play snake.")
    parser.parse_args(argv)
    try:
        SnakeApp().run()
    except (pygame.error, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())