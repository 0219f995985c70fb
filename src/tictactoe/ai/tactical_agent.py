from __future__ import annotations

import time
from dataclasses import dataclass
from typing import List, Optional

from tictactoe.ai.base import legal_moves, other
from tictactoe.ai.random_agent import RandomAgent
from tictactoe.core.board import Board
from tictactoe.types import Move, Player


@dataclass
class TacticalAgent(RandomAgent):
    """
    Cheap one-ply agent:
      1) Play an immediate winning move if there is one
      2) Otherwise block the opponent's immediate winning move
      3) Otherwise a random empty cell

    Candidates are tried in ascending cell order and the first hit is
    played, so a win always beats a block.
    """
    name: str = "Tactical AI"

    def _winning_move(self, board: Board, moves: List[Move], player: Player) -> Optional[Move]:
        for m in moves:
            b2 = board.copy()
            b2.place(m, player)
            if b2.evaluate().winner == player:
                return m
        return None

    def choose_move(self, board: Board) -> Move:
        t0 = time.perf_counter()
        moves = legal_moves(board, self.name)
        nodes = 0

        # 1) win now
        m = self._winning_move(board, moves, self.me)
        nodes += len(moves)
        reason = "win"

        # 2) block opponent win
        if m is None:
            m = self._winning_move(board, moves, other(self.me))
            nodes += len(moves)
            reason = "block"

        # 3) random fallback
        if m is None:
            m = self._pick(moves)
            reason = "random"

        self.last_info = {
            "move": int(m),
            "reason": reason,
            "nodes": nodes,
            "depth": 1,
            "time_ms": max(1, int((time.perf_counter() - t0) * 1000)),
        }
        return m
