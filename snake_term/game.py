from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol

from snake_term.snake import Snake
from snake_term.types import (
    Command,
    Direction,
    GameOverReason,
    GameState,
    Point,
    Quit,
)

logger = logging.getLogger(__name__)

# Tick interval bounds, in milliseconds.
MAX_INTERVAL = 700
MIN_INTERVAL = 200
MAX_SPEED = 20
INITIAL_LENGTH = 3


class Renderer(Protocol):
    def init(self) -> None: ...

    def restore(self) -> None: ...

    def render(self, food: Point | None, body: Sequence[Point], *, speed: int = 0) -> None: ...


class InputSource(Protocol):
    def poll_input(self, timeout: float) -> Command | None:
        """Return at most one command within ``timeout`` seconds, else None."""
        ...


class Terminal(Renderer, InputSource, Protocol):
    """Presentation boundary driven by ``Game.run``."""


@dataclass(frozen=True)
class GameResult:
    score: int
    speed: int
    steps: int
    reason: GameOverReason

    def summary(self) -> str:
        return f"Game Over! Your score is {self.score}"


def tick_interval_ms(speed: int) -> int:
    speed = max(0, min(speed, MAX_SPEED))
    return MIN_INTERVAL + ((MAX_INTERVAL - MIN_INTERVAL) // MAX_SPEED) * (MAX_SPEED - speed)


def speedup_every(width: int, height: int) -> int:
    # Boards with fewer than MAX_SPEED cells speed up on every food.
    return max(1, (width * height) // MAX_SPEED)


def is_legal_turn(toward: Direction, heading: Direction) -> bool:
    return toward != heading and toward != heading.opposite()


class Game:
    """Single play session: board, snake, food, score and speed.

    ``step`` advances one tick without touching the wall clock and is what
    replays and tests drive. ``run`` is the real-time loop: it collects input
    against a per-tick deadline and then performs the same update.
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
        snake: Snake | None = None,
        food: Point | None = None,
        food_queue: Iterable[Point] | None = None,
    ) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"board must be at least 1x1 (got {width}x{height})")
        self.width = width
        self.height = height
        self._rng = rng or random.Random()
        self._clock = clock
        if snake is None:
            start = Point(width // 2, height // 2)
            direction = self._rng.choice(list(Direction))
            snake = Snake(start, self._fit_length(start, direction), 0, direction)
        self._snake = snake
        if food is not None and self._snake.contains(food):
            raise ValueError(f"food {food} overlaps the snake")
        self._food = food
        self._food_queue = list(food_queue or [])
        self._speed = self._snake.get_speed()
        self._score = 0
        self._steps = 0
        self._over: GameOverReason | None = None

    @property
    def snake(self) -> Snake:
        return self._snake

    @property
    def food(self) -> Point | None:
        return self._food

    @property
    def score(self) -> int:
        return self._score

    @property
    def speed(self) -> int:
        return self._speed

    @property
    def over(self) -> GameOverReason | None:
        return self._over

    @property
    def state(self) -> GameState:
        return GameState(
            width=self.width,
            height=self.height,
            snake=self._snake.get_body(),
            direction=self._snake.get_direction(),
            food=self._food,
            score=self._score,
            speed=self._speed,
            steps=self._steps,
            alive=self._over is None,
        )

    def result(self) -> GameResult:
        if self._over is None:
            raise RuntimeError("game is still running")
        return GameResult(
            score=self._score, speed=self._speed, steps=self._steps, reason=self._over
        )

    def tick_interval(self) -> int:
        return tick_interval_ms(self._speed)

    def _in_bounds(self, p: Point) -> bool:
        return 0 <= p.x < self.width and 0 <= p.y < self.height

    def _fit_length(self, start: Point, direction: Direction) -> int:
        # The body trails behind the head and must stay on the board.
        room = {
            Direction.RIGHT: start.x + 1,
            Direction.LEFT: self.width - start.x,
            Direction.DOWN: start.y + 1,
            Direction.UP: self.height - start.y,
        }[direction]
        return min(INITIAL_LENGTH, room)

    def place_food(self) -> None:
        while self._food_queue:
            queued = self._food_queue.pop(0)
            if self._in_bounds(queued) and not self._snake.contains(queued):
                self._food = queued
                logger.debug("food placed from queue at %s", queued)
                return

        occupied = sum(1 for p in self._snake.get_body() if self._in_bounds(p))
        if occupied >= self.width * self.height:
            self._food = None
            return

        while True:
            point = Point(self._rng.randrange(self.width), self._rng.randrange(self.height))
            if not self._snake.contains(point):
                self._food = point
                logger.debug("food placed at %s", point)
                return

    def step(self, turn: Direction | None = None) -> GameState:
        if self._over is not None:
            return self.state
        if self._food is None:
            self.place_food()
        heading = self._snake.get_direction()
        if turn is not None and is_legal_turn(turn, heading):
            self._snake.set_direction(turn)
        self._advance()
        return self.state

    def _advance(self) -> None:
        self._steps += 1
        if self._snake.hit_wall(self.width, self.height):
            self._finish(GameOverReason.WALL)
            return
        if self._snake.bit_self():
            self._finish(GameOverReason.SELF)
            return

        self._snake.slither()
        if self._food is None or self._snake.get_head() != self._food:
            return

        self._snake.grow()
        self._score += 1
        self._food = None
        self.place_food()
        if self._score % speedup_every(self.width, self.height) == 0:
            self._speed += 1
            self._snake.set_speed(self._speed)
            logger.debug("speed up to %d at score %d", self._speed, self._score)

    def _finish(self, reason: GameOverReason) -> None:
        self._over = reason
        logger.info(
            "game over (%s): score=%d speed=%d steps=%d",
            reason.value,
            self._score,
            self._speed,
            self._steps,
        )

    def _render(self, terminal: Renderer) -> None:
        terminal.render(self._food, self._snake.get_body(), speed=self._speed)

    def _collect_input(self, terminal: InputSource, *, interval: float) -> bool:
        """Poll input until the tick deadline; return True when Quit arrived.

        Turns are judged against the heading captured when the tick started,
        so two quick turns cannot add up to a reversal within one tick.
        """
        heading = self._snake.get_direction()
        started = self._clock()
        while True:
            remaining = interval - (self._clock() - started)
            if remaining <= 0:
                return False
            cmd = terminal.poll_input(remaining)
            if cmd is None:
                continue
            if isinstance(cmd, Quit):
                return True
            if is_legal_turn(cmd.direction, heading):
                self._snake.set_direction(cmd.direction)

    def run(self, terminal: Terminal) -> GameResult:
        if self._food is None:
            self.place_food()
        try:
            terminal.init()
            self._render(terminal)
            while self._over is None:
                if self._food is None:
                    self.place_food()
                quit_requested = self._collect_input(
                    terminal, interval=self.tick_interval() / 1000.0
                )
                self._advance()
                if self._over is not None:
                    break
                self._render(terminal)
                if quit_requested:
                    self._finish(GameOverReason.QUIT)
        finally:
            terminal.restore()
        return self.result()
