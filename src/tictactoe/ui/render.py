from __future__ import annotations
from typing import Optional, Iterable, Set

from tictactoe.config import CLEAR_SCREEN, SIZE
from tictactoe.core.board import Board
from tictactoe.types import Cell
from tictactoe.ui.colors import c, BOLD, DIM, FG_CYAN, FG_GRAY, FG_RED, FG_YELLOW, REVERSE, RESET


def _piece(cell: Cell, index: int) -> str:
    if cell is None:
        # empty cells show the key that plays them
        return c(str(index + 1), FG_GRAY)
    if cell == "X":
        return c("X", FG_RED)
    return c("O", FG_YELLOW)


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def render(board: Board, status: str = "", header: str = "", highlight: Optional[Iterable[int]] = None) -> None:
    clear_screen()

    hl: Set[int] = set(highlight) if highlight else set()

    print(c("TIC-TAC-TOE", BOLD))
    if header:
        print(c(header, DIM))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    sep = c("   ---+---+---", DIM)
    for r in range(SIZE):
        parts = []
        for col in range(SIZE):
            i = r * SIZE + col
            p = _piece(board.cells[i], i)
            if i in hl:
                p = f"{REVERSE}{p}{RESET}"
            parts.append(f" {p} ")
        print("   " + "|".join(parts))
        if r < SIZE - 1:
            print(sep)

    print(c("   1-9 play · e/m/h difficulty · r reset · q quit", DIM))
