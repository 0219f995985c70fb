from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Optional

from tictactoe.config import CELLS
from tictactoe.types import Difficulty, Move

CommandKind = Literal["move", "quit", "reset", "difficulty"]

_DIFFICULTY_KEYS: dict[str, Difficulty] = {
    "e": "easy", "easy": "easy",
    "m": "medium", "medium": "medium",
    "h": "hard", "hard": "hard",
}


@dataclass(frozen=True)
class Command:
    kind: CommandKind
    move: Optional[Move] = None
    difficulty: Optional[Difficulty] = None


def parse_command(raw: str, cells: int = CELLS) -> Command:
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return Command("quit")
    if s in {"r", "reset"}:
        return Command("reset")
    if s in _DIFFICULTY_KEYS:
        return Command("difficulty", difficulty=_DIFFICULTY_KEYS[s])
    if not s.isdigit():
        raise ValueError("Invalid input. Enter 1-9, e/m/h, r or q.")
    idx = int(s) - 1
    if idx < 0 or idx >= cells:
        raise ValueError(f"Cell must be between 1 and {cells}.")
    return Command("move", move=Move(idx))
