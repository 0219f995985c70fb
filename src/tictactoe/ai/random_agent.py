from __future__ import annotations

from dataclasses import dataclass, field
import random
import time
from typing import Optional, Sequence

from tictactoe.ai.base import Picker, legal_moves
from tictactoe.config import OPPONENT_MARK
from tictactoe.core.board import Board
from tictactoe.types import Move, Player


@dataclass
class RandomAgent:
    name: str = "Random AI"
    me: Player = OPPONENT_MARK
    rng: random.Random = field(default_factory=random.Random)
    pick: Optional[Picker] = None

    last_info: dict = field(default_factory=dict)

    def _pick(self, moves: Sequence[Move]) -> Move:
        if self.pick is not None:
            return self.pick(moves)
        return self.rng.choice(moves)

    def choose_move(self, board: Board) -> Move:
        t0 = time.perf_counter()
        moves = legal_moves(board, self.name)
        move = self._pick(moves)
        self.last_info = {
            "move": int(move),
            "nodes": 0,
            "depth": 0,
            "time_ms": max(1, int((time.perf_counter() - t0) * 1000)),
        }
        return move
