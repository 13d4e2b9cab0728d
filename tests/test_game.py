import random
from collections import deque

import pygame
import pytest

from gridsnake.game import (
    DESIRED_FPS,
    GRID_SIZE,
    SCREEN_SIZE,
    Ate,
    Direction,
    Food,
    GameState,
    GridPos,
    Snake,
)


class RecordingAudio:
    def __init__(self):
        self.played = []

    def play_sfx(self, name):
        self.played.append(name)


def test_last_cell_ends_at_screen_corner():
    corner = GridPos(GRID_SIZE[0] - 1, GRID_SIZE[1] - 1).rect().bottomright
    assert corner == (int(SCREEN_SIZE[0]), int(SCREEN_SIZE[1]))


def test_inverse_pairs():
    assert Direction.UP.inverse() is Direction.DOWN
    assert Direction.DOWN.inverse() is Direction.UP
    assert Direction.LEFT.inverse() is Direction.RIGHT
    assert Direction.RIGHT.inverse() is Direction.LEFT
    for direction in Direction:
        assert Direction.inverse(Direction.inverse(direction)) is direction


@pytest.mark.parametrize("direction", list(Direction))
def test_move_then_inverse_returns(direction):
    pos = GridPos(3, 4)
    assert pos.moved(direction).moved(direction.inverse()) == pos


def test_moves_wrap_around_edges():
    assert GridPos(0, 0).moved(Direction.LEFT) == GridPos(GRID_SIZE[0] - 1, 0)
    assert GridPos(0, 0).moved(Direction.UP) == GridPos(0, GRID_SIZE[1] - 1)
    assert GridPos(GRID_SIZE[0] - 1, 0).moved(Direction.RIGHT) == GridPos(0, 0)
    assert GridPos(0, GRID_SIZE[1] - 1).moved(Direction.DOWN) == GridPos(0, 0)


def test_rect_of_cell():
    assert GridPos(0, 0).rect() == pygame.Rect(0, 0, 32, 32)
    assert GridPos(1, 1).rect() == pygame.Rect(32, 32, 32, 32)


def test_random_is_in_bounds_and_seeded():
    rng = random.Random(5)
    for _ in range(200):
        pos = GridPos.random(rng, *GRID_SIZE)
        assert 0 <= pos.x < GRID_SIZE[0]
        assert 0 <= pos.y < GRID_SIZE[1]
    assert GridPos.random(random.Random(9), 10, 10) == GridPos.random(random.Random(9), 10, 10)


def test_direction_from_key():
    assert Direction.from_key(pygame.K_UP) is Direction.UP
    assert Direction.from_key(pygame.K_DOWN) is Direction.DOWN
    assert Direction.from_key(pygame.K_LEFT) is Direction.LEFT
    assert Direction.from_key(pygame.K_RIGHT) is Direction.RIGHT
    assert Direction.from_key(pygame.K_a) is None


def test_new_snake_layout():
    start = GridPos(5, 5)
    snake = Snake(start)
    assert snake.head == start
    assert list(snake.body) == [GridPos(start.x - 1, start.y)]
    assert snake.dir is Direction.RIGHT
    assert snake.ate is None


def test_snake_moves_without_growing():
    snake = Snake(GridPos(5, 5))
    far_food = Food(GridPos(20, 15))
    snake.update(far_food)
    assert snake.head == GridPos(5, 5).moved(Direction.RIGHT)
    assert list(snake.body) == [GridPos(5, 5)]
    assert snake.ate is None


def test_snake_grows_on_food():
    snake = Snake(GridPos(5, 5))
    food = Food(GridPos(5, 5).moved(Direction.RIGHT))
    snake.update(food)
    assert snake.ate is Ate.FOOD
    assert snake.eats(food)
    assert len(snake) == 3


def test_snake_bites_itself():
    snake = Snake(GridPos(5, 5))
    ahead = GridPos(5, 5).moved(Direction.RIGHT)
    snake.body = deque([ahead, ahead.moved(Direction.DOWN)])
    snake.update(Food(GridPos(20, 15)))
    assert snake.ate is Ate.ITSELF
    assert snake.eats_self()


def test_game_state_start():
    state = GameState(random.Random(1))
    assert state.gameover is False
    assert 0 <= state.food.pos.x < GRID_SIZE[0]
    assert state.snake.head == GridPos(GRID_SIZE[0] // 4, GRID_SIZE[1] // 2)


def test_tick_eats_food_and_plays_sound():
    state = GameState(random.Random(2))
    state.food = Food(state.snake.head.moved(state.snake.dir))
    audio = RecordingAudio()
    assert state.tick(audio) is Ate.FOOD
    assert audio.played == ["eat"]
    assert len(state.snake) == 3
    assert state.gameover is False


def test_tick_self_collision_ends_game():
    state = GameState(random.Random(3))
    ahead = state.snake.head.moved(state.snake.dir)
    state.snake.body = deque([ahead, ahead.moved(Direction.UP)])
    state.food = Food(GridPos(0, 0))
    audio = RecordingAudio()
    assert state.tick(audio) is Ate.ITSELF
    assert audio.played == ["die"]
    assert state.gameover is True
    head = state.snake.head
    assert state.tick(audio) is None
    assert state.snake.head == head


def test_update_runs_at_fixed_rate():
    state = GameState(random.Random(4))
    state.food = Food(GridPos(0, 0))
    audio = RecordingAudio()
    step = 1.0 / DESIRED_FPS
    assert state.update(step * 0.8, audio) == 0
    assert state.update(step * 0.4, audio) == 1
    assert state.update(step * 2, audio) == 2


def test_key_down_refuses_reverse():
    state = GameState(random.Random(6))
    state.key_down(pygame.K_LEFT)
    assert state.snake.dir is Direction.RIGHT
    state.key_down(pygame.K_UP)
    assert state.snake.dir is Direction.UP


def test_key_down_queues_second_turn():
    state = GameState(random.Random(7))
    state.food = Food(GridPos(0, 0))
    state.key_down(pygame.K_UP)
    state.key_down(pygame.K_LEFT)
    assert state.snake.dir is Direction.UP
    assert state.snake.next_dir is Direction.LEFT
    audio = RecordingAudio()
    state.tick(audio)
    assert state.snake.last_update_dir is Direction.UP
    state.tick(audio)
    assert state.snake.dir is Direction.LEFT
    assert state.snake.next_dir is None


def test_key_down_ignores_other_keys():
    state = GameState(random.Random(8))
    state.key_down(pygame.K_SPACE)
    assert state.snake.dir is Direction.RIGHT
    assert state.snake.next_dir is None


def test_draw_paints_cells():
    state = GameState(random.Random(10))
    state.food = Food(GridPos(0, 0))
    surface = pygame.Surface((int(SCREEN_SIZE[0]), int(SCREEN_SIZE[1])))
    state.draw(surface)
    assert surface.get_at(state.snake.head.rect().topleft) == (236, 64, 122, 255)
    assert surface.get_at(state.snake.body[0].rect().topleft) == (92, 43, 117, 255)
    assert surface.get_at(GridPos(0, 0).rect().center) == (0, 0, 255, 255)
    assert surface.get_at(GridPos(GRID_SIZE[0] - 1, GRID_SIZE[1] - 1).rect().center) == (15, 15, 28, 255)