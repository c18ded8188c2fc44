from __future__ import annotations

from snake_term.game import (
    MAX_INTERVAL,
    MAX_SPEED,
    MIN_INTERVAL,
    Game,
    GameResult,
    InputSource,
    Renderer,
    Terminal,
    tick_interval_ms,
)
from snake_term.render import render_ascii
from snake_term.replay import Replay, load_replay, run_replay
from snake_term.snake import Snake
from snake_term.types import (
    Command,
    Direction,
    GameOverReason,
    GameState,
    Point,
    Quit,
    Turn,
)

__all__ = [
    "__version__",
    # Game
    "Game",
    "GameResult",
    "tick_interval_ms",
    "MAX_INTERVAL",
    "MIN_INTERVAL",
    "MAX_SPEED",
    # Presentation boundary
    "Renderer",
    "InputSource",
    "Terminal",
    "render_ascii",
    # Snake
    "Snake",
    # Types
    "Command",
    "Direction",
    "GameOverReason",
    "GameState",
    "Point",
    "Quit",
    "Turn",
    # Replay
    "Replay",
    "load_replay",
    "run_replay",
]

__version__ = "0.1.0"
