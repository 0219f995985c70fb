from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional

from tictactoe.ai.engine import MoveEngine
from tictactoe.config import DEFAULT_DIFFICULTY, OPPONENT_MARK, PLAYER_MARK
from tictactoe.core.board import Board
from tictactoe.errors import EngineInvariantViolation, InvalidMove
from tictactoe.game.results import start_message, status_message
from tictactoe.game.state import GameSession
from tictactoe.types import DIFFICULTIES, Difficulty, Move, Outcome

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveResult:
    session: GameSession
    outcome: Outcome
    accepted: bool
    move: Optional[Move] = None
    reason: str = ""

    @property
    def board(self) -> Board:
        return self.session.board


def new_game(difficulty: Difficulty = DEFAULT_DIFFICULTY) -> GameSession:
    if difficulty not in DIFFICULTIES:
        raise ValueError(f"Unknown difficulty {difficulty!r}; expected one of {', '.join(DIFFICULTIES)}.")
    session = GameSession(board=Board(), difficulty=difficulty)
    session.outcome = session.board.evaluate()
    session.last_status = start_message()
    log.info("New game (%s)", difficulty)
    return session


def reset(session: GameSession) -> GameSession:
    return new_game(session.difficulty)


def set_difficulty(session: GameSession, difficulty: Difficulty) -> GameSession:
    # switching tiers always restarts the game
    return new_game(difficulty)


def submit_player_move(session: GameSession, index: int) -> MoveResult:
    """
    Apply the human's mark. A rejected move leaves the session untouched.
    When the returned outcome is still in progress the caller is expected
    to ask for the opponent's reply with `request_opponent_move`.
    """
    if not session.board.evaluate().is_terminal and session.to_move != PLAYER_MARK:
        log.info("Ignored player move %s: opponent has not replied yet", index)
        return MoveResult(session, session.outcome, accepted=False, move=None,
                          reason="Waiting for the computer's move.")

    try:
        session.board.place(Move(index), PLAYER_MARK)
    except InvalidMove as e:
        log.info("Ignored player move %s: %s", index, e)
        return MoveResult(session, session.outcome, accepted=False, move=None, reason=str(e))

    session.outcome = session.board.evaluate()
    session.last_status = status_message(session.outcome)
    log.debug("Player -> %s, outcome %s", index, session.outcome)
    return MoveResult(session, session.outcome, accepted=True, move=Move(index))


def request_opponent_move(session: GameSession, engine: MoveEngine) -> MoveResult:
    outcome = session.board.evaluate()
    if outcome.is_terminal:
        log.error("Opponent move requested after the game ended (%s)", outcome)
        raise EngineInvariantViolation(f"Game already ended: {outcome}.")
    if session.to_move != OPPONENT_MARK:
        log.error("Opponent move requested on the player's turn:\n%s", session.board)
        raise EngineInvariantViolation("It is the player's turn.")

    move = engine.select_move(session.board, session.difficulty)
    session.board.place(move, OPPONENT_MARK)

    session.outcome = session.board.evaluate()
    session.last_status = status_message(session.outcome)
    log.debug("Opponent -> %s, outcome %s", move, session.outcome)
    return MoveResult(session, session.outcome, accepted=True, move=move)
