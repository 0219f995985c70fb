# src/tictactoe/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
import logging
from typing import List, Tuple

from tictactoe.config import CELLS, SIZE
from tictactoe.core.rules import check_winner_with_line
from tictactoe.errors import InvalidMove
from tictactoe.types import Cell, Player, Move, Outcome, IN_PROGRESS, DRAW

log = logging.getLogger(__name__)

_SYMBOLS = {"x": "X", "o": "O", ".": None, "-": None, "_": None}


@dataclass(slots=True)
class Board:
    cells: List[Cell] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [None] * CELLS
        if len(self.cells) != CELLS:
            raise ValueError(f"Board needs exactly {CELLS} cells, got {len(self.cells)}.")

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """
        Build a board from a 9-character picture such as "XO.X..O..".
        Whitespace between rows is ignored; '.', '-' and '_' mark empty cells.
        """
        chars = [ch for ch in text if not ch.isspace()]
        try:
            cells: List[Cell] = [_SYMBOLS[ch.lower()] for ch in chars]  # type: ignore[misc]
        except KeyError as e:
            raise ValueError(f"Unknown board symbol: {e.args[0]!r}") from None
        return cls(cells)

    def copy(self) -> "Board":
        return Board(self.cells[:])

    def key(self) -> Tuple[Cell, ...]:
        return tuple(self.cells)

    def empty_cells(self) -> List[Move]:
        return [Move(i) for i, v in enumerate(self.cells) if v is None]

    def is_full(self) -> bool:
        return None not in self.cells

    def evaluate(self) -> Outcome:
        res = check_winner_with_line(self.cells)
        if res is not None:
            return Outcome.win(res[0], res[1])
        if self.is_full():
            return DRAW
        return IN_PROGRESS

    def place(self, index: Move, player: Player) -> None:
        i = int(index)
        if i < 0 or i >= CELLS:
            raise InvalidMove("Cell out of range.")
        if self.cells[i] is not None:
            raise InvalidMove("Cell is already taken.")
        if self.evaluate().is_terminal:
            raise InvalidMove("The game is over.")
        self.cells[i] = player

    def apply_move(self, index: Move, player: Player) -> bool:
        try:
            self.place(index, player)
        except InvalidMove as e:
            log.info("Rejected %s at %s: %s", player, index, e)
            return False
        log.debug("%s -> %s", player, index)
        return True

    def undo(self, index: Move) -> None:
        """
        Clear an occupied cell.
        Only meant for search on a scratch copy.
        """
        i = int(index)
        if self.cells[i] is None:
            raise ValueError("Cannot undo: cell is empty.")
        self.cells[i] = None

    def __str__(self) -> str:
        marks = [v or "." for v in self.cells]
        return "\n".join("".join(marks[r * SIZE:(r + 1) * SIZE]) for r in range(SIZE))
