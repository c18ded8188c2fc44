from __future__ import annotations

import json
import random
from dataclasses import dataclass
from pathlib import Path

from snake_term.game import Game
from snake_term.schemas import ReplaySpec
from snake_term.snake import Snake
from snake_term.types import Direction, GameState, Point


@dataclass(frozen=True, slots=True)
class Replay:
    width: int
    height: int
    snake: list[Point]
    direction: Direction
    food: Point | None
    food_queue: list[Point]
    moves: list[Direction | None]
    seed: int | None = None


def replay_from_spec(spec: ReplaySpec) -> Replay:
    return Replay(
        width=spec.width,
        height=spec.height,
        snake=[Point(x, y) for x, y in spec.snake],
        direction=spec.direction,
        food=Point(*spec.food) if spec.food is not None else None,
        food_queue=[Point(x, y) for x, y in spec.food_queue],
        moves=list(spec.moves),
        seed=spec.seed,
    )


def load_replay(path: str | Path) -> Replay:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"replay is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ValueError("replay must be a JSON object")
    # pydantic.ValidationError is a ValueError.
    return replay_from_spec(ReplaySpec.model_validate(data))


def build_game(replay: Replay) -> Game:
    return Game(
        replay.width,
        replay.height,
        rng=random.Random(replay.seed),
        snake=Snake.from_body(replay.snake, replay.direction),
        food=replay.food,
        food_queue=replay.food_queue,
    )


def run_replay(replay: Replay) -> GameState:
    game = build_game(replay)
    state = game.state
    for move in replay.moves:
        state = game.step(move)
        if not state.alive:
            break
    return state
