from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DEFAULT_WIDTH = 20
DEFAULT_HEIGHT = 20


def repo_root() -> Path:
    # Project root is the directory that contains the `snake_term/` package.
    return Path(__file__).resolve().parents[1]


def load_env() -> None:
    # Prefer a project-local `.env`, fall back to searching from CWD.
    root_env = repo_root() / ".env"
    env_path = str(root_env) if root_env.exists() else (find_dotenv(usecwd=True) or str(root_env))
    load_dotenv(env_path)


@dataclass(frozen=True)
class GameSettings:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    seed: int | None = None
    log_level: str = "WARNING"
    log_file: Path | None = None


def _int_from_env(name: str, *, default: int | None, minimum: int | None = None) -> int | None:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer (got {raw!r})") from e
    if minimum is not None and value < minimum:
        raise ValueError(f"{name} must be >= {minimum} (got {value})")
    return value


def _log_level_from_env(name: str, *, default: str) -> str:
    raw = (os.getenv(name) or default).strip().upper()
    if not isinstance(logging.getLevelName(raw), int):
        raise ValueError(f"{name} must be a logging level name (got {raw!r})")
    return raw


def load_settings() -> GameSettings:
    load_env()
    log_file = (os.getenv("SNAKE_LOG_FILE") or "").strip()
    return GameSettings(
        width=_int_from_env("SNAKE_WIDTH", default=DEFAULT_WIDTH, minimum=1),
        height=_int_from_env("SNAKE_HEIGHT", default=DEFAULT_HEIGHT, minimum=1),
        seed=_int_from_env("SNAKE_SEED", default=None),
        log_level=_log_level_from_env("SNAKE_LOG_LEVEL", default="WARNING"),
        log_file=Path(log_file) if log_file else None,
    )


def configure_logging(settings: GameSettings) -> None:
    """Route log records away from the screen while curses owns it."""
    root = logging.getLogger()
    root.setLevel(settings.log_level)
    if settings.log_file is not None:
        handler: logging.Handler = logging.FileHandler(settings.log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler()
        handler.setLevel(logging.WARNING)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)
