"""Terminal frontend tests."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from boards import P, make_board
from labyrinth.cli import app as rich_app
from labyrinth.cli.main import app
from labyrinth.engine.gameplay import GamePlay
from labyrinth.engine.generator.difficulty import PUZZLE_TEMPLATES
from labyrinth.models.board import Direction
from labyrinth.models.puzzle import Difficulty, DifficultyProfile, Puzzle

runner = CliRunner()


def _game():
    board = make_board(["╶│╴", "...", "─.."], start=(0, 0), goal=(2, 0))
    puzzle = Puzzle(
        seed="cli",
        template=PUZZLE_TEMPLATES[Difficulty.EASY][0],
        start=P(0, 0),
        goal=P(2, 0),
        board=board,
        solution=board,
        route=(),
        gems=(),
        profile=DifficultyProfile(1, 1, 0),
    )
    return GamePlay.from_puzzle(puzzle)


@pytest.mark.parametrize(
    "token, expected",
    [
        ("a1", P(0, 0)),
        ("b3", P(1, 2)),
        (" C10 ", P(2, 9)),
        ("3b", None),
        ("b", None),
        ("bx", None),
    ],
)
def test_parse_cell(token, expected):
    assert rich_app.parse_cell(token) == expected


def test_cell_name_inverts_parse():
    assert rich_app.cell_name(P(1, 2)) == "b3"
    assert rich_app.parse_cell(rich_app.cell_name(P(4, 0))) == P(4, 0)


def test_glyphs():
    assert rich_app.glyph((Direction.NORTH, Direction.EAST)) == "└"
    assert rich_app.glyph(tuple(Direction)) == "┼"
    assert rich_app.glyph(()) == "□"


def test_render_board_has_label_column():
    table = rich_app.render_board(make_board(["╶─╴", "..."]))
    assert len(table.columns) == 4
    assert table.row_count == 2


def test_apply_reports_outcome():
    game = _game()
    assert "two cells" in rich_app._apply(game, "a1")
    assert "look like" in rich_app._apply(game, "a1 zz")
    assert "Can't swap" in rich_app._apply(game, "a1 b1")
    assert "Swapped" in rich_app._apply(game, "b1 a3")
    assert game.is_won


def test_play_loop_until_quit(monkeypatch):
    game = _game()
    answers = iter(["b1 a3", "u", "q"])
    monkeypatch.setattr(rich_app.Prompt, "ask", lambda *a, **kw: next(answers))

    rich_app.play(game)

    assert not game.is_won
    assert game.state.moves == 0


def test_show_seeded_puzzle():
    result = runner.invoke(app, ["--seed", "abc", "--difficulty", "easy", "--show"])
    assert result.exit_code == 0, result.output
    assert "Practice" in result.output


def test_show_daily_puzzle():
    result = runner.invoke(app, ["--day", "2025-08-11", "--show"])
    assert result.exit_code == 0, result.output
    assert "Puzzle #01" in result.output
