from __future__ import annotations

from snake_term.render import frame_rows, render_ascii
from snake_term.types import Direction, GameState, Point


def test_render_ascii_marks_head_body_food() -> None:
    state = GameState(
        width=4,
        height=3,
        snake=(Point(1, 1), Point(0, 1)),
        direction=Direction.RIGHT,
        food=Point(3, 0),
        score=0,
        speed=0,
        steps=0,
        alive=True,
    )
    out = render_ascii(state)
    assert out.endswith("\n")
    lines = out.splitlines()
    assert lines == ["...*", "oH..", "...."]


def test_frame_rows_clips_off_board_segments() -> None:
    rows = frame_rows(2, 1, None, [Point(0, 0), Point(-1, 0), Point(-2, 0)])
    assert rows == ["H."]
