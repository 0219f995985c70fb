from __future__ import annotations
import random
import sys
import time

from tictactoe.config import AI_THINKING_SPINNER, AI_THINK_DELAY_SEC
from tictactoe.ui.colors import c, BOLD, FG_MAGENTA, FG_RED, FG_YELLOW


def ai_thinking(label: str = "AI is thinking", delay: float = AI_THINK_DELAY_SEC) -> None:
    """
    Small user-visible delay + optional spinner so AI moves are not instant.
    """
    if delay <= 0:
        return

    if not AI_THINKING_SPINNER:
        time.sleep(delay)
        return

    frames = ["|", "/", "-", "\\"]
    start = time.time()
    i = 0
    while (time.time() - start) < delay:
        sys.stdout.write(f"\r{label}... {frames[i % len(frames)]}")
        sys.stdout.flush()
        time.sleep(0.08)
        i += 1
    sys.stdout.write("\r" + (" " * (len(label) + 10)) + "\r")
    sys.stdout.flush()


def celebrate(width: int = 30, rows: int = 3, rng: random.Random | None = None) -> None:
    """A few rows of hearts, shown only when the human wins."""
    rng = rng or random.Random()
    colors = [FG_RED, FG_MAGENTA, FG_YELLOW]
    for _ in range(rows):
        line = "".join(
            c("♥", rng.choice(colors)) if rng.random() < 0.3 else " "
            for _ in range(width)
        )
        print(line)
    print(c("  ♥ ♥ ♥  ", BOLD))
