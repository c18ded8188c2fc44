from __future__ import annotations

import argparse
import json
import random
from pathlib import Path

from snake_term.config import GameSettings, configure_logging, load_settings
from snake_term.game import Game, tick_interval_ms
from snake_term.render import render_ascii
from snake_term.replay import load_replay, run_replay
from snake_term.terminal import CursesTerminal, TerminalTooSmall
from snake_term.types import GameState


def _existing_path(value: str) -> Path:
    p = Path(value)
    if not p.exists():
        raise argparse.ArgumentTypeError(f"path not found: {value}")
    return p


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"not an integer: {value}") from e
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1: {value}")
    return n


def _settings() -> GameSettings:
    try:
        return load_settings()
    except ValueError as e:
        raise SystemExit(f"invalid configuration: {e}") from e


def _state_summary(state: GameState) -> dict[str, object]:
    return {
        "alive": state.alive,
        "score": state.score,
        "speed": state.speed,
        "steps": state.steps,
        "head": [state.head.x, state.head.y],
        "length": len(state.snake),
    }


def _play(args: argparse.Namespace) -> int:
    settings = _settings()
    configure_logging(settings)
    width = args.width or settings.width
    height = args.height or settings.height
    seed = args.seed if args.seed is not None else settings.seed

    game = Game(width, height, rng=random.Random(seed))
    try:
        result = game.run(CursesTerminal(width, height))
    except TerminalTooSmall as e:
        raise SystemExit(str(e)) from e
    print(result.summary())
    return 0


def _replay(args: argparse.Namespace) -> int:
    try:
        replay = load_replay(args.path)
    except ValueError as e:
        raise SystemExit(f"invalid replay {args.path}: {e}") from e
    state = run_replay(replay)
    print(json.dumps(_state_summary(state), sort_keys=True, separators=(",", ":")))
    if args.frames:
        print(render_ascii(state), end="")
    return 0


def _config_validate() -> int:
    try:
        settings = load_settings()
    except ValueError as e:
        print("Issues found:")
        print(f"  {e}")
        return 1
    print(f"✓ Board: {settings.width}x{settings.height}")
    print(f"✓ Seed: {settings.seed if settings.seed is not None else 'random'}")
    print(f"✓ Log level: {settings.log_level}")
    if settings.log_file is not None:
        print(f"✓ Log file: {settings.log_file}")
    print(f"✓ Tick interval: {tick_interval_ms(0)}ms at speed 0")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="snake-term")
    sub = parser.add_subparsers(dest="cmd", required=True)

    play_p = sub.add_parser("play", help="play in the terminal")
    play_p.add_argument("--width", type=_positive_int, default=None)
    play_p.add_argument("--height", type=_positive_int, default=None)
    play_p.add_argument("--seed", type=int, default=None, help="seed for food and start direction")

    replay_p = sub.add_parser("replay", help="run a replay file headlessly")
    replay_p.add_argument("path", type=_existing_path)
    replay_p.add_argument("--frames", action="store_true", help="print the final board")

    config_p = sub.add_parser("config", help="configuration utilities")
    config_sub = config_p.add_subparsers(dest="config_cmd", required=True)
    config_sub.add_parser("validate", help="validate configuration")

    args = parser.parse_args(argv)

    if args.cmd == "play":
        return _play(args)
    if args.cmd == "replay":
        return _replay(args)
    if args.cmd == "config":
        if args.config_cmd == "validate":
            return _config_validate()
        raise AssertionError(f"unhandled config_cmd: {args.config_cmd}")

    raise AssertionError(f"unhandled cmd: {args.cmd}")
