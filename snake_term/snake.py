from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from snake_term.types import Direction, Point


def _adjacent(a: Point, b: Point) -> bool:
    return abs(a.x - b.x) + abs(a.y - b.y) == 1


class Snake:
    """Ordered, contiguous body of points, head first.

    The snake only knows how to move and how to test its own collisions.
    Whether a turn is allowed, and what happens after a collision, is decided
    by the game.
    """

    def __init__(
        self,
        start: Point,
        length: int,
        speed: int,
        direction: Direction,
    ) -> None:
        if length < 1:
            raise ValueError(f"snake length must be >= 1 (got {length})")
        opposite = direction.opposite()
        self._body: deque[Point] = deque(start.transform(opposite, i) for i in range(length))
        self.direction = direction
        self.digesting = False
        self.speed = speed

    @classmethod
    def from_body(
        cls, points: Iterable[Point], direction: Direction, *, speed: int = 0
    ) -> Snake:
        body = list(points)
        if not body:
            raise ValueError("snake body must not be empty")
        if len(set(body)) != len(body):
            raise ValueError("snake body must not overlap itself")
        for a, b in zip(body, body[1:]):
            if not _adjacent(a, b):
                raise ValueError(f"snake body is not contiguous between {a} and {b}")

        snake = cls(body[0], 1, speed, direction)
        snake._body = deque(body)
        return snake

    def __len__(self) -> int:
        return len(self._body)

    @property
    def head(self) -> Point:
        return self._body[0]

    @property
    def body(self) -> tuple[Point, ...]:
        return tuple(self._body)

    def get_head(self) -> Point:
        return self.head

    def get_body(self) -> tuple[Point, ...]:
        return self.body

    def get_direction(self) -> Direction:
        return self.direction

    def get_speed(self) -> int:
        return self.speed

    def set_speed(self, speed: int) -> None:
        self.speed = speed

    def set_direction(self, direction: Direction) -> None:
        self.direction = direction

    def contains(self, point: Point) -> bool:
        return point in self._body

    def grow(self) -> None:
        self.digesting = True

    def slither(self) -> None:
        self._body.appendleft(self.head.transform(self.direction, 1))
        if not self.digesting:
            self._body.pop()
        else:
            self.digesting = False

    def bit_self(self) -> bool:
        # Head and tail are excluded: the head moves away and the tail is
        # assumed to vacate its cell on this move.
        next_head = self.head.transform(self.direction, 1)
        inner = list(self._body)[1:-1]
        return next_head in inner

    def hit_wall(self, width: int, height: int) -> bool:
        head = self.head
        if self.direction is Direction.UP:
            return head.y == 0
        if self.direction is Direction.DOWN:
            return head.y == height - 1
        if self.direction is Direction.LEFT:
            return head.x == 0
        return head.x == width - 1
