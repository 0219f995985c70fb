from __future__ import annotations
from dataclasses import dataclass, field

from tictactoe.config import DEFAULT_DIFFICULTY, OPPONENT_MARK, PLAYER_MARK
from tictactoe.core.board import Board
from tictactoe.types import Difficulty, Outcome, Player, IN_PROGRESS


@dataclass(slots=True)
class GameSession:
    board: Board = field(default_factory=Board)
    difficulty: Difficulty = DEFAULT_DIFFICULTY
    outcome: Outcome = IN_PROGRESS
    last_status: str = ""

    @property
    def to_move(self) -> Player:
        # the player always opens, so equal counts mean it is X's turn
        cells = self.board.cells
        if cells.count(PLAYER_MARK) == cells.count(OPPONENT_MARK):
            return PLAYER_MARK
        return OPPONENT_MARK
