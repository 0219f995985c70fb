from __future__ import annotations

import time

from tictactoe.config import DEFAULT_DIFFICULTY
from tictactoe.game.controller import run_game
from tictactoe.logging_setup import setup_logging
from tictactoe.types import DIFFICULTIES, Difficulty


def _choose_difficulty(raw: str) -> Difficulty | None:
    s = raw.strip().lower()
    if s in {"1", "e", "easy"}:
        return "easy"
    if s in {"2", "m", "medium"}:
        return "medium"
    if s in {"3", "h", "hard"}:
        return "hard"
    return None


def main() -> None:
    setup_logging()

    print("Select mode:")
    for i, d in enumerate(DIFFICULTIES, start=1):
        print(f"{i}) Human vs AI ({d})")
    print("4) Run difficulty matchup (headless)")

    choice = input("Choice: ").strip()

    if choice == "4":
        from tictactoe.scripts.matchup import main as matchup_main

        matchup_main([])
        return

    difficulty = _choose_difficulty(choice)
    if difficulty is None:
        print(f"\nInvalid choice. Defaulting to {DEFAULT_DIFFICULTY}.\n")
        time.sleep(1)
        difficulty = DEFAULT_DIFFICULTY

    run_game(difficulty)


if __name__ == "__main__":
    main()
