from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from snake_term.types import Direction


def _adjacent(a: tuple[int, int], b: tuple[int, int]) -> bool:
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


class ReplaySpec(BaseModel):
    """On-disk replay: an initial board and one optional turn per tick."""

    model_config = ConfigDict(extra="forbid")

    schema_version: int = Field(default=1, ge=1)
    width: int = Field(ge=1)
    height: int = Field(ge=1)
    snake: list[tuple[int, int]] = Field(min_length=1)  # head first
    direction: Direction
    food: tuple[int, int] | None = None
    food_queue: list[tuple[int, int]] = Field(default_factory=list)
    moves: list[Direction | None] = Field(default_factory=list)
    seed: int | None = None

    @field_validator("direction", mode="before")
    @classmethod
    def _parse_direction(cls, v: object) -> object:
        if isinstance(v, str):
            return Direction.from_str(v)
        return v

    @field_validator("moves", mode="before")
    @classmethod
    def _parse_moves(cls, v: object) -> object:
        if not isinstance(v, list):
            return v
        return [Direction.from_str(m) if isinstance(m, str) else m for m in v]

    @model_validator(mode="after")
    def _check_board(self) -> ReplaySpec:
        def in_bounds(p: tuple[int, int]) -> bool:
            return 0 <= p[0] < self.width and 0 <= p[1] < self.height

        for p in self.snake:
            if not in_bounds(p):
                raise ValueError(f"snake segment {list(p)} is outside the board")
        if len(set(self.snake)) != len(self.snake):
            raise ValueError("snake segments must be unique")
        for a, b in zip(self.snake, self.snake[1:]):
            if not _adjacent(a, b):
                raise ValueError(f"snake is not contiguous between {list(a)} and {list(b)}")
        if self.food is not None:
            if not in_bounds(self.food):
                raise ValueError(f"food {list(self.food)} is outside the board")
            if self.food in self.snake:
                raise ValueError(f"food {list(self.food)} overlaps the snake")
        return self
