from __future__ import annotations

from collections.abc import Sequence

from snake_term.types import GameState, Point

HEAD = "H"
BODY = "o"
FOOD = "*"
EMPTY = "."


def frame_rows(
    width: int, height: int, food: Point | None, body: Sequence[Point]
) -> list[str]:
    grid = [[EMPTY] * width for _ in range(height)]
    if food is not None and 0 <= food.x < width and 0 <= food.y < height:
        grid[food.y][food.x] = FOOD
    # Tail first so the head wins if a collision has already been drawn.
    for i, p in reversed(list(enumerate(body))):
        if 0 <= p.x < width and 0 <= p.y < height:
            grid[p.y][p.x] = HEAD if i == 0 else BODY
    return ["".join(row) for row in grid]


def render_ascii(state: GameState) -> str:
    rows = frame_rows(state.width, state.height, state.food, state.snake)
    return "\n".join(rows) + "\n"
