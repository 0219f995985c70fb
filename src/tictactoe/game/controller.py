from __future__ import annotations

from typing import Callable, Optional

from tictactoe.ai.engine import MoveEngine
from tictactoe.game.actions import (
    new_game,
    request_opponent_move,
    reset,
    set_difficulty,
    submit_player_move,
)
from tictactoe.game.results import player_won
from tictactoe.game.state import GameSession
from tictactoe.types import Difficulty
from tictactoe.ui.effects import ai_thinking, celebrate
from tictactoe.ui.prompts import parse_command
from tictactoe.ui.render import render


def _header(session: GameSession) -> str:
    return f"You: X | Computer: O | Difficulty: {session.difficulty}"


def _show(session: GameSession) -> None:
    render(
        session.board,
        session.last_status,
        header=_header(session),
        highlight=session.outcome.line,
    )


def run_game(
    difficulty: Difficulty,
    engine: Optional[MoveEngine] = None,
    read: Callable[[str], str] = input,
    show_thinking: bool = True,
) -> GameSession:
    """
    Interactive loop: the human is always X and moves first.
    Returns the session as it stood when the player quit.
    """
    engine = engine or MoveEngine()
    session = new_game(difficulty)

    celebrate_now = False

    while True:
        _show(session)
        if celebrate_now:
            # once, right after the winning move
            celebrate()
            celebrate_now = False

        if session.outcome.is_terminal:
            prompt = "Play again (r), change difficulty (e/m/h) or quit (q): "
        else:
            prompt = "Your move: "
        try:
            cmd = parse_command(read(prompt))
        except ValueError as e:
            session.last_status = str(e)
            continue
        except EOFError:
            return session

        if cmd.kind == "quit":
            return session
        if cmd.kind == "reset":
            session = reset(session)
            continue
        if cmd.difficulty is not None:
            session = set_difficulty(session, cmd.difficulty)
            continue
        if cmd.move is None:
            continue

        result = submit_player_move(session, cmd.move)
        if not result.accepted:
            # occupied cell or finished game: nothing happens
            session.last_status = result.reason
            continue
        if result.outcome.is_terminal:
            celebrate_now = player_won(result.outcome)
            continue

        _show(session)
        if show_thinking:
            ai_thinking(engine.agent_for(session.difficulty).name)
        request_opponent_move(session, engine)
