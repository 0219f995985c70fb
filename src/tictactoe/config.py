# src/tictactoe/config.py

from __future__ import annotations

import os

from tictactoe.types import Difficulty, Player


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    if v is not None and str(v).strip() != "":
        return str(v).strip()
    return default


SIZE = 3
CELLS = SIZE * SIZE

PLAYER_MARK: Player = "X"
OPPONENT_MARK: Player = "O"

DEFAULT_DIFFICULTY: Difficulty = "easy"

# Minimax terminal scores (not discounted by depth)
WIN_SCORE = 10
LOSS_SCORE = -10
DRAW_SCORE = 0

# UI toggles
USE_COLOR = _env("NO_COLOR") == ""
CLEAR_SCREEN = True
LANG = _env("TICTACTOE_LANG", "fr")

# “AI thinking” pause so the opponent's reply reads as its own turn
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = float(_env("TICTACTOE_THINK_DELAY", "0.3"))

LOG_LEVEL = _env("TICTACTOE_LOG_LEVEL", "WARNING").upper()
