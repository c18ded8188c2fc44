from __future__ import annotations

from collections.abc import Iterable, Sequence

from snake_term.types import Command, Point


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class ScriptedTerminal:
    """Terminal boundary fed from a fixed script.

    Each script entry is returned by one ``poll_input`` call. A command comes
    back instantly; ``None`` means "no key until the timeout" and moves the
    clock a hair past the remaining budget so the tick deadline is reached
    despite float rounding. Once the script runs out every poll
    behaves like ``None``.
    """

    def __init__(self, clock: FakeClock, script: Iterable[Command | None] = ()) -> None:
        self.clock = clock
        self.script = list(script)
        self.frames: list[tuple[Point | None, tuple[Point, ...], int]] = []
        self.timeouts: list[float] = []
        self.init_calls = 0
        self.restore_calls = 0

    def init(self) -> None:
        self.init_calls += 1

    def restore(self) -> None:
        self.restore_calls += 1

    def render(self, food: Point | None, body: Sequence[Point], *, speed: int = 0) -> None:
        self.frames.append((food, tuple(body), speed))

    def poll_input(self, timeout: float) -> Command | None:
        self.timeouts.append(timeout)
        cmd = self.script.pop(0) if self.script else None
        if cmd is None:
            self.clock.advance(timeout + 1e-9)
        return cmd


class BrokenRenderTerminal(ScriptedTerminal):
    """Raises on the n-th render call, like a display write failing."""

    def __init__(self, clock: FakeClock, *, fail_on: int) -> None:
        super().__init__(clock)
        self.fail_on = fail_on

    def render(self, food: Point | None, body: Sequence[Point], *, speed: int = 0) -> None:
        super().render(food, body, speed=speed)
        if len(self.frames) >= self.fail_on:
            raise OSError("display write failed")
