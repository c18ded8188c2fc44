"""Curses implementation of the presentation boundary.

``CursesTerminal`` is both the renderer and the input source consumed by
``Game.run``. Key decoding is kept in the pure ``decode_key`` function so it
can be tested without a terminal.
"""

from __future__ import annotations

import contextlib
import curses
import logging
from collections.abc import Sequence

from snake_term.game import MAX_SPEED
from snake_term.render import BODY, EMPTY, FOOD, HEAD, frame_rows
from snake_term.types import Command, Direction, Point, Quit, Turn

logger = logging.getLogger(__name__)

KEY_ESC = 27
KEY_CTRL_C = 3

_KEY_TO_DIRECTION = {
    curses.KEY_UP: Direction.UP,
    curses.KEY_RIGHT: Direction.RIGHT,
    curses.KEY_DOWN: Direction.DOWN,
    curses.KEY_LEFT: Direction.LEFT,
    ord("w"): Direction.UP,
    ord("d"): Direction.RIGHT,
    ord("s"): Direction.DOWN,
    ord("a"): Direction.LEFT,
    ord("W"): Direction.UP,
    ord("D"): Direction.RIGHT,
    ord("S"): Direction.DOWN,
    ord("A"): Direction.LEFT,
}

_QUIT_KEYS = {ord("q"), ord("Q"), KEY_ESC, KEY_CTRL_C}

# Colour pair per speed band, slowest first.
_BAND_COLORS = (curses.COLOR_GREEN, curses.COLOR_YELLOW, curses.COLOR_MAGENTA, curses.COLOR_RED)
_PAIR_FOOD = len(_BAND_COLORS) + 1
_PAIR_BORDER = len(_BAND_COLORS) + 2


def decode_key(key: int) -> Command | None:
    if key in _QUIT_KEYS:
        return Quit()
    direction = _KEY_TO_DIRECTION.get(key)
    if direction is None:
        return None
    return Turn(direction)


def speed_band(speed: int) -> int:
    speed = max(0, min(speed, MAX_SPEED))
    return min(len(_BAND_COLORS) - 1, speed * len(_BAND_COLORS) // MAX_SPEED)


class TerminalTooSmall(RuntimeError):
    pass


class CursesTerminal:
    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._screen: curses.window | None = None
        self._colors = False

    def init(self) -> None:
        screen = curses.initscr()
        self._screen = screen
        curses.noecho()
        # Raw mode so Ctrl-C arrives as a key instead of SIGINT.
        curses.raw()
        screen.keypad(True)
        with contextlib.suppress(curses.error):
            curses.curs_set(0)
        curses.set_escdelay(25)
        self._init_colors()

        rows, cols = screen.getmaxyx()
        # Board plus border, and one status line.
        if rows < self.height + 3 or cols < self.width + 2:
            self.restore()
            raise TerminalTooSmall(
                f"terminal is {cols}x{rows}, need at least {self.width + 2}x{self.height + 3}"
            )
        screen.erase()
        self._draw_border()
        screen.refresh()
        logger.debug("curses terminal initialised (%dx%d)", cols, rows)

    def _init_colors(self) -> None:
        if not curses.has_colors():
            return
        curses.start_color()
        for i, color in enumerate(_BAND_COLORS, start=1):
            curses.init_pair(i, color, curses.COLOR_BLACK)
        curses.init_pair(_PAIR_FOOD, curses.COLOR_RED, curses.COLOR_BLACK)
        curses.init_pair(_PAIR_BORDER, curses.COLOR_WHITE, curses.COLOR_BLACK)
        self._colors = True

    def _attr(self, pair: int) -> int:
        return curses.color_pair(pair) if self._colors else curses.A_NORMAL

    def _draw_border(self) -> None:
        assert self._screen is not None
        attr = self._attr(_PAIR_BORDER) | curses.A_DIM
        edge = "#" * (self.width + 2)
        self._screen.addstr(0, 0, edge, attr)
        self._screen.addstr(self.height + 1, 0, edge, attr)
        for y in range(1, self.height + 1):
            self._screen.addstr(y, 0, "#", attr)
            self._screen.addstr(y, self.width + 1, "#", attr)

    def restore(self) -> None:
        screen = self._screen
        if screen is None:
            return
        self._screen = None
        screen.keypad(False)
        curses.noraw()
        curses.echo()
        with contextlib.suppress(curses.error):
            curses.curs_set(1)
        curses.endwin()

    def render(self, food: Point | None, body: Sequence[Point], *, speed: int = 0) -> None:
        screen = self._screen
        if screen is None:
            raise RuntimeError("render() called before init()")
        snake_attr = self._attr(speed_band(speed) + 1)
        glyphs = {
            EMPTY: (" ", curses.A_NORMAL),
            FOOD: ("*", self._attr(_PAIR_FOOD) | curses.A_BOLD),
            HEAD: ("@", snake_attr | curses.A_BOLD),
            BODY: ("o", snake_attr),
        }
        for y, row in enumerate(frame_rows(self.width, self.height, food, body)):
            for x, cell in enumerate(row):
                ch, attr = glyphs[cell]
                screen.addstr(y + 1, x + 1, ch, attr)
        status = f" length {len(body)}  speed {speed}  (arrows/WASD, q to quit)"
        screen.addstr(self.height + 2, 0, status[: self.width + 1])
        screen.clrtoeol()
        screen.refresh()

    def poll_input(self, timeout: float) -> Command | None:
        screen = self._screen
        if screen is None:
            raise RuntimeError("poll_input() called before init()")
        screen.timeout(max(0, int(timeout * 1000)))
        key = screen.getch()
        if key == -1:
            return None
        return decode_key(key)
