"""Tests for difficulty selection and the session API."""

import pytest

from tictactoe.ai.engine import MoveEngine, make_agent
from tictactoe.ai.minimax_agent import MinimaxAgent
from tictactoe.ai.random_agent import RandomAgent
from tictactoe.ai.tactical_agent import TacticalAgent
from tictactoe.core.board import Board
from tictactoe.errors import EngineInvariantViolation
from tictactoe.game.actions import (
    new_game,
    request_opponent_move,
    reset,
    set_difficulty,
    submit_player_move,
)
from tictactoe.game.results import status_message
from tictactoe.types import IN_PROGRESS, Outcome


def first(moves):
    return moves[0]


def test_make_agent_maps_each_difficulty():
    assert type(make_agent("easy")) is RandomAgent
    assert type(make_agent("medium")) is TacticalAgent
    assert type(make_agent("hard")) is MinimaxAgent


def test_make_agent_rejects_unknown_difficulty():
    with pytest.raises(ValueError):
        make_agent("impossible")


def test_engine_reuses_agent_per_difficulty():
    engine = MoveEngine()
    assert engine.agent_for("hard") is engine.agent_for("hard")
    assert engine.agent_for("easy") is not engine.agent_for("medium")


def test_engine_refuses_finished_boards():
    engine = MoveEngine()
    with pytest.raises(EngineInvariantViolation):
        engine.select_move(Board.from_string("XOX XOO OXX"), "easy")
    with pytest.raises(EngineInvariantViolation):
        engine.select_move(Board.from_string("XXX OO. ..."), "hard")


def test_new_game_starts_empty():
    session = new_game("medium")
    assert session.difficulty == "medium"
    assert session.outcome == IN_PROGRESS
    assert session.board.empty_cells() == list(range(9))
    assert session.last_status


def test_new_game_rejects_unknown_difficulty():
    with pytest.raises(ValueError):
        new_game("impossible")


def test_rejected_player_move_changes_nothing():
    session = new_game("easy")
    assert submit_player_move(session, 4).accepted
    before = session.board.cells[:]

    result = submit_player_move(session, 4)
    assert not result.accepted
    assert result.reason
    assert session.board.cells == before

    assert not submit_player_move(session, 12).accepted
    assert session.board.cells == before


def test_player_win_ends_the_game():
    session = new_game("easy")
    session.board = Board.from_string("XX. OO. ...")

    result = submit_player_move(session, 2)
    assert result.outcome == Outcome.win("X")
    assert session.last_status == status_message(result.outcome)

    # terminal is absorbing
    assert not submit_player_move(session, 8).accepted
    with pytest.raises(EngineInvariantViolation):
        request_opponent_move(session, MoveEngine())


def test_medium_blocks_after_center_opening():
    engine = MoveEngine(pick=first)
    session = new_game("medium")

    assert submit_player_move(session, 4).outcome == IN_PROGRESS
    reply = request_opponent_move(session, engine)
    assert reply.move == 0  # nothing to win or block: picker takes first cell

    submit_player_move(session, 1)  # threat on 1-4-7
    reply = request_opponent_move(session, engine)
    assert reply.move == 7
    assert session.board.cells[7] == "O"
    assert reply.outcome == IN_PROGRESS


def test_hard_reply_to_corner_opening_is_center():
    session = new_game("hard")
    submit_player_move(session, 0)
    reply = request_opponent_move(session, MoveEngine())

    assert reply.move == 4
    assert reply.board.cells[4] == "O"


def test_hard_never_loses_a_full_game_to_easy_player():
    engine = MoveEngine(pick=first)
    session = new_game("hard")
    player = MoveEngine(me="X", pick=first)

    while not session.outcome.is_terminal:
        move = player.select_move(session.board, "easy")
        result = submit_player_move(session, move)
        assert result.accepted
        if not result.outcome.is_terminal:
            request_opponent_move(session, engine)

    assert session.outcome.winner != "X"


def test_turns_alternate_strictly():
    engine = MoveEngine(pick=first)
    session = new_game("easy")
    for idx in range(9):
        if session.outcome.is_terminal:
            break
        if not submit_player_move(session, idx).accepted:
            continue
        x = session.board.cells.count("X")
        o = session.board.cells.count("O")
        assert x == o + 1
        if not session.outcome.is_terminal:
            request_opponent_move(session, engine)
            assert session.board.cells.count("O") == x


def test_set_difficulty_and_reset_clear_the_board():
    session = new_game("easy")
    submit_player_move(session, 4)

    harder = set_difficulty(session, "hard")
    assert harder.difficulty == "hard"
    assert harder.board.empty_cells() == list(range(9))

    submit_player_move(harder, 0)
    again = reset(harder)
    assert again.difficulty == "hard"
    assert again.board.empty_cells() == list(range(9))


def test_player_cannot_move_twice_before_the_reply():
    session = new_game("easy")
    assert submit_player_move(session, 0).accepted
    assert session.to_move == "O"

    result = submit_player_move(session, 1)
    assert not result.accepted
    assert result.reason
    assert session.board.cells[:2] == ["X", None]


def test_opponent_cannot_move_twice_in_a_row():
    engine = MoveEngine(pick=first)
    session = new_game("easy")
    submit_player_move(session, 4)
    request_opponent_move(session, engine)
    assert session.to_move == "X"

    with pytest.raises(EngineInvariantViolation):
        request_opponent_move(session, engine)
    assert session.board.cells.count("O") == 1


def test_opponent_cannot_open_the_game():
    with pytest.raises(EngineInvariantViolation):
        request_opponent_move(new_game("hard"), MoveEngine())
