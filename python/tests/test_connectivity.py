"""Connectivity checker tests."""

from __future__ import annotations

import pytest

from boards import P, make_board
from labyrinth.engine.solver.connectivity import (
    can_step,
    check_connection,
    covers_gems,
    reachable,
)

_LOOP = ["┌─┐", "│.│", "╵.╵"]


def test_connected_path_follows_tiles():
    board = make_board(_LOOP, start=(0, 2), goal=(2, 2))
    result = check_connection(board, P(0, 2), P(2, 2))

    assert result.connected
    assert result.path == (P(0, 2), P(0, 1), P(0, 0), P(1, 0), P(2, 0), P(2, 1), P(2, 2))


def test_every_step_of_a_found_path_is_open_both_ways():
    board = make_board(_LOOP, start=(0, 2), goal=(2, 2))
    path = check_connection(board, P(0, 2), P(2, 2)).path
    for a, b in zip(path, path[1:]):
        assert can_step(board, a, b)
        assert can_step(board, b, a)


def test_one_sided_edge_does_not_connect():
    board = make_board(["╶╷"])
    assert not can_step(board, P(0, 0), P(1, 0))
    assert not check_connection(board, P(0, 0), P(1, 0)).connected


def test_two_sided_edge_connects():
    board = make_board(["╶╴"])
    assert can_step(board, P(0, 0), P(1, 0))
    assert check_connection(board, P(0, 0), P(1, 0)).path == (P(0, 0), P(1, 0))


@pytest.mark.parametrize(
    "a, b",
    [
        (P(0, 0), P(2, 0)),  # not adjacent
        (P(0, 0), P(1, 1)),  # diagonal
        (P(2, 0), P(3, 0)),  # out of bounds
    ],
)
def test_can_step_rejects_non_neighbours(a, b):
    board = make_board(["───"])
    assert not can_step(board, a, b)


def test_empty_cell_blocks():
    board = make_board(["╶.╴"])
    result = check_connection(board, P(0, 0), P(2, 0))
    assert not result.connected
    assert result.path == ()


def test_start_equals_goal():
    board = make_board(["╶╴"])
    assert check_connection(board, P(0, 0), P(0, 0)).path == (P(0, 0),)


def test_dead_ends_are_backtracked():
    # the branch going down is a dead end; the goal is to the east
    board = make_board(["╶┬╴", ".│.", ".╵."])
    result = check_connection(board, P(0, 0), P(2, 0))
    assert result.connected
    assert result.path[0] == P(0, 0) and result.path[-1] == P(2, 0)
    assert P(1, 2) not in result.path


def test_reachable_component():
    board = make_board(["╶┬╴", ".╵.", "─.."])
    assert reachable(board, P(0, 0)) == {P(0, 0), P(1, 0), P(2, 0), P(1, 1)}
    assert reachable(board, P(0, 2)) == {P(0, 2)}


def test_reachable_from_empty_cell_is_empty():
    board = make_board(["╶.╴"])
    assert reachable(board, P(1, 0)) == set()


def test_covers_gems_on_side_spur():
    board = make_board(["╶┬╴", ".╵."], gems=((1, 1),))
    assert covers_gems(board, P(0, 0), P(2, 0), [P(1, 1)])


def test_covers_gems_fails_when_spur_detached():
    board = make_board(["╶┬╴", ".╷."], gems=((1, 1),))
    assert check_connection(board, P(0, 0), P(2, 0)).connected
    assert not covers_gems(board, P(0, 0), P(2, 0), [P(1, 1)])


def test_covers_gems_needs_goal():
    board = make_board(["╶┬.", ".╵."], gems=((1, 1),))
    assert not covers_gems(board, P(0, 0), P(2, 0), [P(1, 1)])
