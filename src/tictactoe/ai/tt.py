from __future__ import annotations
from typing import Tuple

from tictactoe.ai.base import SearchResult
from tictactoe.types import Cell, Player

Key = Tuple[Tuple[Cell, ...], Player, Player]


class TranspositionTable:
    """
    Exact results of exhaustive searches, keyed by position, side to move
    and the side the scores are counted for.
    """

    def __init__(self) -> None:
        self._d: dict[Key, SearchResult] = {}

    def __len__(self) -> int:
        return len(self._d)

    def get(self, board_key: Tuple[Cell, ...], to_play: Player, perspective: Player) -> SearchResult | None:
        return self._d.get((board_key, to_play, perspective))

    def put(self, board_key: Tuple[Cell, ...], to_play: Player, perspective: Player, result: SearchResult) -> None:
        self._d[(board_key, to_play, perspective)] = result
