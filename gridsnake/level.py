"""Built-in level definitions."""

from __future__ import annotations

from dataclasses import dataclass, field

from gridsnake.game import GridPos


@dataclass(frozen=True)
class Level:
    name: str
    obstacles: tuple[GridPos, ...]
    speed: float


def basic_levels() -> list[Level]:
    """The three built-in levels, easiest first."""
    hard_obstacles = tuple(GridPos(x, 7) for x in range(5, 15)) + tuple(
        GridPos(5, y) for y in range(7, 12)
    )
    return [
        Level("Easy", (), 5.0),
        Level("Medium", (GridPos(10, 10), GridPos(11, 10), GridPos(12, 10)), 8.0),
        Level("Hard", hard_obstacles, 12.0),
    ]


@dataclass
class LevelSelect:
    levels: list[Level] = field(default_factory=basic_levels)