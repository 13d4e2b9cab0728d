"""The title menu: a list of options with one selected."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from functools import lru_cache

import pygame

from gridsnake.game import SCREEN_SIZE
from gridsnake.level import LevelSelect

MENU_BACKGROUND = (0, 255, 0)
SELECTED_COLOR = (255, 255, 0)
OPTION_COLOR = (255, 255, 255)
FONT_SIZE = 50
FIRST_OPTION_Y = 200
OPTION_SPACING = 50


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


class MenuState(enum.Enum):
    MAIN = "main"
    LEVEL = "level"


def _default_options() -> list[str]:
    return ["Start Game", "Exit"]


@dataclass
class MainMenu:
    """The main menu's options and which one is highlighted."""

    selected: int = 0
    options: list[str] = field(default_factory=_default_options)

    def move_selection(self, up: bool) -> None:
        """Move the highlight one step, wrapping at either end."""
        count = len(self.options)
        step = -1 if up else 1
        self.selected = (self.selected + step) % count

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(MENU_BACKGROUND)
        font = _font(FONT_SIZE)
        y = FIRST_OPTION_Y
        for index, option in enumerate(self.options):
            color = SELECTED_COLOR if index == self.selected else OPTION_COLOR
            text = font.render(option, True, color)
            x = SCREEN_SIZE[0] / 2 - text.get_width() / 2
            surface.blit(text, (x, y))
            y += OPTION_SPACING


@dataclass
class MenuManager:
    """All menu screens and which one is showing."""

    main: MainMenu = field(default_factory=MainMenu)
    level: LevelSelect = field(default_factory=LevelSelect)
    state: MenuState = MenuState.MAIN

    def draw(self, surface: pygame.Surface) -> None:
        if self.state is MenuState.MAIN:
            self.main.draw(surface)