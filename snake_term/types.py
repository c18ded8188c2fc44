from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Direction(str, Enum):
    UP = "U"
    RIGHT = "R"
    DOWN = "D"
    LEFT = "L"

    @classmethod
    def from_str(cls, raw: str) -> "Direction":
        raw = str(raw).strip().upper()
        try:
            return Direction(raw)
        except ValueError:
            pass
        try:
            return Direction[raw]
        except KeyError as e:
            raise ValueError(f"invalid direction: {raw!r}") from e

    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

# Screen coordinates: y grows downwards.
_DELTAS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}


@dataclass(frozen=True, slots=True)
class Point:
    x: int
    y: int

    def transform(self, direction: Direction, distance: int = 1) -> Point:
        dx, dy = direction.delta
        return Point(self.x + dx * distance, self.y + dy * distance)


@dataclass(frozen=True, slots=True)
class Quit:
    pass


@dataclass(frozen=True, slots=True)
class Turn:
    direction: Direction


Command = Union[Quit, Turn]


class GameOverReason(str, Enum):
    WALL = "wall"
    SELF = "self"
    QUIT = "quit"


@dataclass(frozen=True, slots=True)
class GameState:
    width: int
    height: int
    snake: tuple[Point, ...]  # head first
    direction: Direction
    food: Point | None
    score: int
    speed: int
    steps: int
    alive: bool = True

    @property
    def head(self) -> Point:
        return self.snake[0]
