from __future__ import annotations

import json
import shutil
from pathlib import Path

import pytest

from snake_term.main import main

REPLAYS = Path(__file__).resolve().parent / "replays"


def test_cli_replay_prints_summary(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["replay", str(REPLAYS / "smoke.json")]) == 0
    first = capsys.readouterr().out.splitlines()[0]
    data = json.loads(first)
    assert set(data.keys()) >= {"alive", "score", "steps", "head"}
    assert data["score"] == 2
    assert data["head"] == [3, 3]


def test_cli_replay_frames(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["replay", str(REPLAYS / "smoke.json"), "--frames"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[1:] == [".....*", ".ooo..", "...o..", "...H.."]


def test_cli_replay_rejects_invalid_file(tmp_path: Path) -> None:
    bad = tmp_path / "bad.json"
    shutil.copy(REPLAYS / "smoke.json", bad)
    data = json.loads(bad.read_text(encoding="utf-8"))
    data["snake"] = []
    bad.write_text(json.dumps(data), encoding="utf-8")

    with pytest.raises(SystemExit, match="invalid replay"):
        main(["replay", str(bad)])


def test_cli_config_validate(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("SNAKE_WIDTH", "15")
    monkeypatch.setenv("SNAKE_HEIGHT", "9")
    assert main(["config", "validate"]) == 0
    assert "Board: 15x9" in capsys.readouterr().out


def test_cli_config_validate_reports_issues(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("SNAKE_WIDTH", "-3")
    assert main(["config", "validate"]) == 1
    assert "SNAKE_WIDTH" in capsys.readouterr().out


def test_cli_play_rejects_bad_configuration(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SNAKE_HEIGHT", "tall")
    with pytest.raises(SystemExit, match="invalid configuration"):
        main(["play"])
