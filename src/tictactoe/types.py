# src/tictactoe/types.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Literal, Optional, NewType, Tuple

Player = Literal["X", "O"]
Cell = Optional[Player]
Move = NewType("Move", int)   # cell index 0..8, row-major
Difficulty = Literal["easy", "medium", "hard"]

DIFFICULTIES: Tuple[Difficulty, ...] = ("easy", "medium", "hard")

OutcomeKind = Literal["in_progress", "win", "draw"]


@dataclass(frozen=True, slots=True)
class Outcome:
    kind: OutcomeKind
    winner: Optional[Player] = None
    # display only; two wins by the same mark compare equal
    line: Optional[Tuple[int, int, int]] = field(default=None, compare=False)

    @classmethod
    def win(cls, player: Player, line: Optional[Tuple[int, int, int]] = None) -> "Outcome":
        return cls("win", player, line)

    @property
    def is_terminal(self) -> bool:
        return self.kind != "in_progress"

    def __str__(self) -> str:
        if self.kind == "win":
            return f"win({self.winner})"
        return self.kind


IN_PROGRESS = Outcome("in_progress")
DRAW = Outcome("draw")
