"""The application: scene switching, input routing and the main loop."""

from __future__ import annotations

import argparse
import enum
import os
import random
from functools import lru_cache
from pathlib import Path

import pygame

from gridsnake.audio import AudioManager
from gridsnake.game import SCREEN_SIZE, GameState
from gridsnake.menu import MenuManager, MenuState

RESOURCE_ENV = "GRIDSNAKE_DIR"
PAUSE_BACKGROUND = (15, 15, 28)
PAUSE_TEXT_COLOR = (200, 34, 32)
GAMEOVER_BACKGROUND = (0, 244, 0)
GAMEOVER_TEXT_COLOR = (255, 0, 0)
FRAME_RATE = 60


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


class AppScene(enum.Enum):
    MENU = "menu"
    PLAYING = "playing"
    PAUSE = "pause"
    GAMEOVER = "gameover"


def resource_dir() -> Path:
    """Where sounds are loaded from: the project's audio folder, or ./resources."""
    root = os.environ.get(RESOURCE_ENV)
    if root is not None:
        return Path(root) / "assert" / "audio"
    return Path("./resources")


class AppState:
    """The whole application: current scene, menu, game round and audio."""

    def __init__(
        self,
        audio: AudioManager | None = None,
        resources: Path | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.audio = audio if audio is not None else AudioManager()
        base = resources if resources is not None else Path(".")
        self._rng = rng
        for name, filename in (("eat", "eat.ogg"), ("die", "die.ogg")):
            try:
                self.audio.load_sfx(name, str(base / filename))
            except (pygame.error, OSError):
                pass
        try:
            self.audio.play_bgm(str(base / "bgm.mp3"), True)
        except (pygame.error, OSError):
            pass
        self.scene = AppScene.MENU
        self.menu = MenuManager()
        self.game: GameState | None = GameState(self._rng)
        self.quit_requested = False

    def update(self, elapsed: float) -> None:
        """Advance the game by elapsed seconds while playing."""
        if self.scene is AppScene.PLAYING and self.game is not None:
            self.game.update(elapsed, self.audio)
            if self.game.gameover:
                self.scene = AppScene.GAMEOVER

    def draw(self, surface: pygame.Surface) -> None:
        if self.scene is AppScene.MENU:
            self.menu.draw(surface)
        elif self.scene is AppScene.PLAYING:
            if self.game is not None:
                self.game.draw(surface)
        elif self.scene is AppScene.PAUSE:
            surface.fill(PAUSE_BACKGROUND)
            font = _font(45)
            y = 200.0
            for label in ("Continue", "Quit"):
                text = font.render(label, True, PAUSE_TEXT_COLOR)
                surface.blit(text, (SCREEN_SIZE[0] / 2 - text.get_width() / 2, y))
                y += 100.0
        else:
            surface.fill(GAMEOVER_BACKGROUND)
            text = _font(35).render("Gram Over! Press R to Restart", True, GAMEOVER_TEXT_COLOR)
            surface.blit(text, (100.0, 100.0))

    def key_down(self, key: int) -> None:
        """Route a key press to whatever the current scene does with it."""
        if self.scene is AppScene.MENU:
            if self.menu.state is MenuState.MAIN:
                main = self.menu.main
                if key == pygame.K_UP:
                    main.move_selection(True)
                elif key == pygame.K_DOWN:
                    main.move_selection(False)
                elif key == pygame.K_RETURN:
                    if main.selected == 0:
                        self.scene = AppScene.PLAYING
                        self.game = GameState(self._rng)
                    else:
                        self.quit_requested = True
        elif self.scene is AppScene.GAMEOVER:
            if key == pygame.K_r:
                self.scene = AppScene.MENU
        elif self.scene is AppScene.PLAYING:
            if key == pygame.K_ESCAPE:
                self.scene = AppScene.PAUSE
            if self.game is not None:
                self.game.key_down(key)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until the player quits."""
    parser = argparse.ArgumentParser(prog="gridsnake", description="Play Snake!")
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((int(SCREEN_SIZE[0]), int(SCREEN_SIZE[1])))
        pygame.display.set_caption("Snake!")
        state = AppState(resources=resource_dir())
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    state.key_down(event.key)
            if state.quit_requested:
                running = False
            state.update(clock.tick(FRAME_RATE) / 1000.0)
            state.draw(screen)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0