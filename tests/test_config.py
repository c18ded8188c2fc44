from __future__ import annotations

import logging
from pathlib import Path

import pytest

from snake_term.config import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    GameSettings,
    configure_logging,
    load_settings,
)

_VARS = ("SNAKE_WIDTH", "SNAKE_HEIGHT", "SNAKE_SEED", "SNAKE_LOG_LEVEL", "SNAKE_LOG_FILE")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.setenv(name, "")


def test_defaults() -> None:
    s = load_settings()
    assert s.width == DEFAULT_WIDTH
    assert s.height == DEFAULT_HEIGHT
    assert s.seed is None
    assert s.log_level == "WARNING"
    assert s.log_file is None


def test_reads_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("SNAKE_WIDTH", "12")
    monkeypatch.setenv("SNAKE_HEIGHT", " 8 ")
    monkeypatch.setenv("SNAKE_SEED", "42")
    monkeypatch.setenv("SNAKE_LOG_LEVEL", "debug")
    monkeypatch.setenv("SNAKE_LOG_FILE", str(tmp_path / "snake.log"))

    s = load_settings()
    assert (s.width, s.height, s.seed) == (12, 8, 42)
    assert s.log_level == "DEBUG"
    assert s.log_file == tmp_path / "snake.log"


@pytest.mark.parametrize(
    ("name", "value", "message"),
    [
        ("SNAKE_WIDTH", "wide", "integer"),
        ("SNAKE_HEIGHT", "0", ">= 1"),
        ("SNAKE_LOG_LEVEL", "chatty", "logging level"),
    ],
)
def test_rejects_bad_values(
    monkeypatch: pytest.MonkeyPatch, name: str, value: str, message: str
) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError, match=message):
        load_settings()


def test_configure_logging_writes_to_log_file(tmp_path: Path) -> None:
    log_file = tmp_path / "snake.log"
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    try:
        configure_logging(GameSettings(log_level="DEBUG", log_file=log_file))
        logging.getLogger("snake_term.game").debug("food placed at %s", "(1, 2)")
        for h in root.handlers:
            h.flush()
    finally:
        for h in root.handlers:
            if h not in before:
                root.removeHandler(h)
                h.close()
        root.setLevel(level)

    assert "food placed at (1, 2)" in log_file.read_text(encoding="utf-8")
