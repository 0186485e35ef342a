"""Play session tests: swaps, undo, completion and rating."""

from __future__ import annotations

import pytest

from boards import P, make_board
from labyrinth.config import EngineConfig
from labyrinth.engine.gameplay import GamePlay
from labyrinth.engine.gamestate import GameState
from labyrinth.engine.generator.difficulty import PUZZLE_TEMPLATES
from labyrinth.models.puzzle import Difficulty, DifficultyProfile, Puzzle


def _puzzle(layout, start, goal, gems=(), profile=(1, 1, 0)):
    board = make_board(layout, start=start, goal=goal, gems=gems)
    return Puzzle(
        seed="test",
        template=PUZZLE_TEMPLATES[Difficulty.EASY][0],
        start=P(*start),
        goal=P(*goal),
        board=board,
        solution=board,
        route=(),
        gems=tuple(P(*g) for g in gems),
        profile=DifficultyProfile(*profile),
    )


@pytest.fixture
def one_swap():
    return GamePlay.from_puzzle(_puzzle(["╶│╴", "...", "─.."], (0, 0), (2, 0)))


def test_fresh_game_is_not_won(one_swap):
    assert not one_swap.is_won
    assert one_swap.state.moves == 0
    assert not one_swap.state.can_undo
    assert one_swap.rating.stars == 0


def test_winning_swap(one_swap):
    assert one_swap.swap(P(1, 0), P(0, 2))
    assert one_swap.is_won
    assert one_swap.connection.path == (P(0, 0), P(1, 0), P(2, 0))
    assert one_swap.state.moves == 1
    assert one_swap.rating.stars == 3


def test_no_swaps_after_completion(one_swap):
    one_swap.swap(P(1, 0), P(0, 2))
    assert not one_swap.swap(P(1, 0), P(0, 2))
    assert one_swap.state.moves == 1


def test_undo_restores_board_and_reopens_game(one_swap):
    before = one_swap.state.board
    one_swap.swap(P(1, 0), P(0, 2))

    assert one_swap.undo()
    assert one_swap.state.board == before
    assert one_swap.state.moves == 0
    assert not one_swap.is_won
    assert not one_swap.undo()


@pytest.mark.parametrize(
    "a, b",
    [
        (P(1, 0), P(1, 0)),  # itself
        (P(1, 0), P(5, 5)),  # out of bounds
        (P(0, 0), P(1, 0)),  # start tile
        (P(2, 0), P(0, 2)),  # goal tile
        (P(1, 0), P(1, 1)),  # empty cell
    ],
)
def test_invalid_swaps_are_rejected(one_swap, a, b):
    assert not one_swap.swap(a, b)
    assert one_swap.state.moves == 0


def test_locked_gem_cannot_move():
    game = GamePlay.from_puzzle(
        _puzzle(["╶│╴", ".╵.", "┬.."], (0, 0), (2, 0), gems=((1, 1),), profile=(1, 1, 1))
    )
    assert not game.swap(P(1, 1), P(0, 2))


def test_gems_count_only_when_reachable():
    game = GamePlay.from_puzzle(
        _puzzle(["╶│╴", ".╵.", "┬.."], (0, 0), (2, 0), gems=((1, 1),), profile=(1, 1, 1))
    )
    assert game.gems_collected == 0
    game.swap(P(1, 0), P(0, 2))
    assert game.is_won
    assert game.gems_collected == 1
    assert game.rating.stars == 3


def test_history_is_bounded():
    game = GamePlay.from_puzzle(
        _puzzle(["╶││╴", "....", "─.─."], (0, 0), (3, 0)),
        EngineConfig(history_capacity=3),
    )
    for _ in range(5):
        assert game.swap(P(0, 2), P(2, 2))
    assert len(game.state.history) == 3

    assert game.undo() and game.undo() and game.undo()
    assert not game.undo()
    assert game.state.moves == 2


def test_snapshot_without_day_uses_seed(one_swap):
    one_swap.swap(P(1, 0), P(0, 2))
    snap = one_swap.snapshot()
    assert snap.day_key == "test"
    assert snap.moves == 1
    assert snap.completed
    assert snap.stars == 3


def test_new_puzzle_resets_state(one_swap):
    one_swap.swap(P(1, 0), P(0, 2))
    one_swap.new_puzzle(seed="fresh")
    assert one_swap.puzzle.seed == "fresh"
    assert one_swap.state.moves == 0
    assert one_swap.puzzle.template.difficulty == Difficulty.EASY


def test_seeded_game_is_reproducible():
    a = GamePlay(seed="repeat", difficulty=Difficulty.EASY)
    b = GamePlay(seed="repeat", difficulty=Difficulty.EASY)
    assert a.state.board == b.state.board


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


def test_clock_pauses_and_resumes():
    clock = FakeClock()
    board = make_board(["╶─╴"], start=(0, 0), goal=(2, 0))
    state = GameState(board, P(0, 0), P(2, 0), clock=clock)

    clock.now = 110.0
    state.pause()
    clock.now = 150.0
    assert state.elapsed_time == pytest.approx(10.0)

    state.resume()
    clock.now = 155.0
    assert state.elapsed_time == pytest.approx(15.0)

    state.restore_elapsed(42.0)
    clock.now = 157.0
    assert state.elapsed_time == pytest.approx(44.0)
