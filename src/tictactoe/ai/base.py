from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Callable, List, Optional, Protocol, Sequence

from tictactoe.core.board import Board
from tictactoe.errors import EngineInvariantViolation
from tictactoe.types import Move, Player

log = logging.getLogger(__name__)

# Chooses one index out of a non-empty ascending list of empty cells.
Picker = Callable[[Sequence[Move]], Move]


class Agent(Protocol):
    name: str

    def choose_move(self, board: Board) -> Move:
        ...


@dataclass(frozen=True, slots=True)
class SearchResult:
    """
    Minimax node value.
    `index` is the best move at this node (None at terminal nodes);
    only the root's index is ever played.
    """
    index: Optional[Move]
    score: int


def other(p: Player) -> Player:
    return "O" if p == "X" else "X"


def legal_moves(board: Board, agent_name: str) -> List[Move]:
    outcome = board.evaluate()
    if outcome.is_terminal:
        log.error("%s asked to move on a finished board (%s):\n%s", agent_name, outcome, board)
        raise EngineInvariantViolation(f"{agent_name}: game already ended ({outcome}).")
    return board.empty_cells()
