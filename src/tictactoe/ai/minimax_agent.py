from __future__ import annotations

from dataclasses import dataclass, field
import time

from tictactoe.ai.base import SearchResult, legal_moves, other
from tictactoe.ai.tt import TranspositionTable
from tictactoe.config import DRAW_SCORE, LOSS_SCORE, OPPONENT_MARK, WIN_SCORE
from tictactoe.core.board import Board
from tictactoe.errors import EngineInvariantViolation
from tictactoe.types import Move, Player


@dataclass
class MinimaxAgent:
    """
    Exhaustive minimax, no pruning and no depth limit.

    Terminal scores are +10 / -10 / 0 from `me`'s point of view regardless
    of how deep the result is found, so a slow win ties with a fast one.
    Ties are kept by the first candidate in ascending cell order: the best
    so far is only replaced on a strict improvement.

    The transposition table only memoises exact subtree results; it never
    changes which move is picked.
    """
    name: str = "Minimax AI"
    me: Player = OPPONENT_MARK
    use_tt: bool = True
    tt: TranspositionTable = field(default_factory=TranspositionTable)

    # Stats
    last_info: dict = field(default_factory=dict)

    _nodes: int = 0
    _tt_hits: int = 0

    def choose_move(self, board: Board) -> Move:
        legal_moves(board, self.name)

        start = time.perf_counter()
        self._nodes = 0
        self._tt_hits = 0

        # owned scratch copy; the caller's board is never touched
        scratch = board.copy()
        best = self.search(scratch, self.me)
        if best.index is None:
            raise EngineInvariantViolation(f"{self.name}: game already ended.")

        elapsed = time.perf_counter() - start
        self.last_info = {
            "move": int(best.index),
            "eval": best.score,
            "depth": len(scratch.empty_cells()),
            "nodes": self._nodes,
            "tt_hits": self._tt_hits,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        return best.index

    def _terminal_score(self, board: Board) -> int | None:
        outcome = board.evaluate()
        if outcome.kind == "win":
            return WIN_SCORE if outcome.winner == self.me else LOSS_SCORE
        if outcome.kind == "draw":
            return DRAW_SCORE
        return None

    def search(self, board: Board, to_play: Player) -> SearchResult:
        self._nodes += 1

        term = self._terminal_score(board)
        if term is not None:
            return SearchResult(index=None, score=term)

        if self.use_tt:
            cached = self.tt.get(board.key(), to_play, self.me)
            if cached is not None:
                self._tt_hits += 1
                return cached

        maximizing = to_play == self.me
        best_index: Move | None = None
        best_score = 0
        for m in board.empty_cells():
            board.place(m, to_play)
            score = self.search(board, other(to_play)).score
            board.undo(m)

            if (
                best_index is None
                or (maximizing and score > best_score)
                or (not maximizing and score < best_score)
            ):
                best_index, best_score = m, score

        best = SearchResult(index=best_index, score=best_score)
        if self.use_tt:
            self.tt.put(board.key(), to_play, self.me, best)
        return best
