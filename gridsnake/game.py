"""Snake game state: grid positions, the snake, its food and the play loop."""

from __future__ import annotations

import enum
import random
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Protocol

import pygame

GRID_SIZE: tuple[int, int] = (30, 20)
GRID_CELL_SIZE: tuple[int, int] = (32, 32)
SCREEN_SIZE: tuple[float, float] = (
    float(GRID_SIZE[0] * GRID_CELL_SIZE[0]),
    float(GRID_SIZE[1] * GRID_CELL_SIZE[1]),
)
DESIRED_FPS = 8

BACKGROUND_COLOR = (15, 15, 28)
FOOD_COLOR = (0, 0, 255)
BODY_COLOR = (92, 43, 117)
HEAD_COLOR = (236, 64, 122)


class SfxPlayer(Protocol):
    def play_sfx(self, name: str) -> None: ...


class Direction(enum.Enum):
    """A direction of travel on the grid."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    def inverse(self) -> Direction:
        return _INVERSES[self]

    @classmethod
    def from_key(cls, key: int) -> Direction | None:
        """Map an arrow key code to a direction, or None for any other key."""
        return _KEY_DIRECTIONS.get(key)


_INVERSES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


@dataclass(frozen=True)
class GridPos:
    """A cell on the game grid."""

    x: int
    y: int

    @classmethod
    def random(cls, rng: random.Random, max_x: int, max_y: int) -> GridPos:
        return cls(rng.randrange(max_x), rng.randrange(max_y))

    def moved(self, direction: Direction) -> GridPos:
        """The neighbouring cell in a direction, wrapping at the grid edges."""
        width, height = GRID_SIZE
        if direction is Direction.UP:
            return GridPos(self.x, (self.y - 1) % height)
        if direction is Direction.DOWN:
            return GridPos(self.x, (self.y + 1) % height)
        if direction is Direction.LEFT:
            return GridPos((self.x - 1) % width, self.y)
        return GridPos((self.x + 1) % width, self.y)

    def rect(self) -> pygame.Rect:
        """The screen rectangle covered by this cell."""
        cell_w, cell_h = GRID_CELL_SIZE
        return pygame.Rect(self.x * cell_w, self.y * cell_h, cell_w, cell_h)


class Ate(enum.Enum):
    """What the snake's head ran into on its last move."""

    ITSELF = "itself"
    FOOD = "food"


@dataclass
class Food:
    pos: GridPos

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(FOOD_COLOR, self.pos.rect())


class Snake:
    """The player's snake: a head, a body and its direction of travel."""

    def __init__(self, pos: GridPos) -> None:
        self.head = pos
        self.body: deque[GridPos] = deque([GridPos(pos.x - 1, pos.y)])
        self.dir = Direction.RIGHT
        self.last_update_dir = Direction.RIGHT
        self.next_dir: Direction | None = None
        self.ate: Ate | None = None

    def __len__(self) -> int:
        return len(self.body) + 1

    def segments(self) -> Iterable[GridPos]:
        yield self.head
        yield from self.body

    def eats(self, food: Food) -> bool:
        return self.head == food.pos

    def eats_self(self) -> bool:
        return self.head in self.body

    def update(self, food: Food) -> None:
        """Advance one cell, recording in ``ate`` what the head hit."""
        if self.last_update_dir == self.dir and self.next_dir is not None:
            self.dir = self.next_dir
            self.next_dir = None

        new_head = self.head.moved(self.dir)
        self.body.appendleft(self.head)
        self.head = new_head

        if self.eats_self():
            self.ate = Ate.ITSELF
        elif self.eats(food):
            self.ate = Ate.FOOD
        else:
            self.ate = None

        if self.ate is None:
            self.body.pop()

        self.last_update_dir = self.dir

    def draw(self, surface: pygame.Surface) -> None:
        for segment in self.body:
            surface.fill(BODY_COLOR, segment.rect())
        surface.fill(HEAD_COLOR, self.head.rect())


class GameState:
    """One round of play: the snake, the food and the fixed-rate clock."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.snake = Snake(GridPos(GRID_SIZE[0] // 4, GRID_SIZE[1] // 2))
        self.food = Food(GridPos.random(self.rng, *GRID_SIZE))
        self.gameover = False
        self._residual = 0.0

    def tick(self, audio: SfxPlayer) -> Ate | None:
        """Run one step of the game and return what the snake ate, if anything."""
        if self.gameover:
            return None
        self.snake.update(self.food)
        ate = self.snake.ate
        if ate is Ate.FOOD:
            audio.play_sfx("eat")
            self.food.pos = GridPos.random(self.rng, *GRID_SIZE)
        elif ate is Ate.ITSELF:
            audio.play_sfx("die")
            self.gameover = True
        return ate

    def update(self, elapsed: float, audio: SfxPlayer) -> int:
        """Add elapsed seconds and run every step now due; return how many ran."""
        step = 1.0 / DESIRED_FPS
        self._residual += elapsed
        ticks = 0
        while self._residual >= step:
            self._residual -= step
            self.tick(audio)
            ticks += 1
        return ticks

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(BACKGROUND_COLOR)
        self.snake.draw(surface)
        self.food.draw(surface)

    def key_down(self, key: int) -> None:
        """Steer the snake from an arrow key, never straight back on itself."""
        direction = Direction.from_key(key)
        if direction is None:
            return
        snake = self.snake
        if snake.dir != snake.last_update_dir and direction.inverse() != snake.dir:
            snake.next_dir = direction
        elif direction.inverse() != snake.last_update_dir:
            snake.dir = direction