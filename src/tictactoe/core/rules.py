from __future__ import annotations
from typing import Iterator, Optional, Sequence, Tuple

from tictactoe.types import Cell, Player

Line = Tuple[int, int, int]

# Order matters: evaluation reports the first line that is won.
WIN_LINES: Tuple[Line, ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


def winning_lines(cells: Sequence[Cell]) -> Iterator[Tuple[Player, Line]]:
    for line in WIN_LINES:
        a, b, c = line
        p = cells[a]
        if p and p == cells[b] == cells[c]:
            yield p, line


def check_winner_with_line(cells: Sequence[Cell]) -> Optional[Tuple[Player, Line]]:
    return next(winning_lines(cells), None)


def check_winner(cells: Sequence[Cell]) -> Optional[Player]:
    res = check_winner_with_line(cells)
    return res[0] if res else None


def is_draw(cells: Sequence[Cell]) -> bool:
    return None not in cells and check_winner(cells) is None
