from __future__ import annotations

import argparse
import csv
import logging
import random
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from tictactoe.ai.base import other
from tictactoe.ai.engine import make_agent
from tictactoe.core.board import Board
from tictactoe.logging_setup import setup_logging
from tictactoe.types import DIFFICULTIES, Difficulty, Player
from tictactoe.ui.colors import c, BOLD, DIM, FG_GREEN, FG_RED

from .tally import PairingTally, standings

log = logging.getLogger(__name__)

CSV_COLUMNS = [
    "x", "o",
    "games", "x_wins", "o_wins", "draws",
    "avg_plies",
    "x_nodes_per_move", "o_nodes_per_move",
]


@dataclass
class GameRecord:
    winner: Optional[Player]
    plies: int
    moves: Dict[str, int] = field(default_factory=lambda: {"X": 0, "O": 0})
    nodes: Dict[str, int] = field(default_factory=lambda: {"X": 0, "O": 0})


def play_headless(x: Difficulty, o: Difficulty, seed: int = 0, openings: int = 0) -> GameRecord:
    """
    One game between two tiers, no UI.
    The first `openings` plies are random so the deterministic tiers do not
    replay the same game every time; they are not credited to either tier.
    """
    agents = {
        "X": make_agent(x, me="X", rng=random.Random(seed + 101)),
        "O": make_agent(o, me="O", rng=random.Random(seed + 202)),
    }
    board = Board()
    current: Player = "X"
    plies = 0
    record = GameRecord(winner=None, plies=0)

    rng = random.Random(seed)
    for _ in range(openings):
        if board.evaluate().is_terminal:
            break
        board.place(rng.choice(board.empty_cells()), current)
        current = other(current)
        plies += 1

    outcome = board.evaluate()
    while not outcome.is_terminal:
        agent = agents[current]
        move = agent.choose_move(board)

        info = getattr(agent, "last_info", None) or {}
        record.moves[current] += 1
        record.nodes[current] += int(info.get("nodes", 0))

        board.place(move, current)
        current = other(current)
        plies += 1
        outcome = board.evaluate()

    record.winner = outcome.winner
    record.plies = plies
    return record


def run_matchup(
    difficulties: Sequence[Difficulty] = DIFFICULTIES,
    games_per_pair: int = 10,
    seed: int = 1234,
    openings: int = 1,
) -> List[PairingTally]:
    """Every tier plays X against every tier playing O, itself included."""
    tallies: List[PairingTally] = []

    for i, x in enumerate(difficulties):
        for j, o in enumerate(difficulties):
            tally = PairingTally(x=x, o=o)
            for g in range(games_per_pair):
                game = play_headless(x, o, seed=seed + 1000 * i + 100 * j + g, openings=openings)
                tally.record(game.winner, game.plies)
                for side in ("X", "O"):
                    tally.moves[side] += game.moves[side]
                    tally.nodes[side] += game.nodes[side]

            log.info("X=%s vs O=%s: %s", x, o, tally.wdl("X"))
            tallies.append(tally)

    return tallies


def csv_rows(tallies: Sequence[PairingTally]) -> List[list]:
    return [
        [
            t.x, t.o,
            t.games, t.x_wins, t.o_wins, t.draws,
            round(t.avg_plies(), 3),
            round(t.nodes_per_move("X"), 3),
            round(t.nodes_per_move("O"), 3),
        ]
        for t in tallies
    ]


def export_csv(tallies: Sequence[PairingTally], out_dir: Path) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y%m%d_%H%M%S")
    out_path = out_dir / f"matchup_results_{ts}.csv"

    with open(out_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(CSV_COLUMNS)
        w.writerows(csv_rows(tallies))
    return out_path


def print_grid(tallies: Sequence[PairingTally]) -> None:
    tiers = list(dict.fromkeys(t.x for t in tallies))
    by_pair = {(t.x, t.o): t for t in tallies}

    print(c("W-D-L for the X tier (rows) against the O tier (columns)", BOLD))
    corner = "X/O"
    print(c(f"{corner:<8}" + "".join(f"{o:>12}" for o in tiers), DIM))
    for x in tiers:
        cells = "".join(f"{by_pair[(x, o)].wdl('X'):>12}" for o in tiers)
        print(f"{x:<8}{cells}")

    print()
    print(c(f"{'tier':<8} {'games':>6} {'W-D-L':>12} {'points':>8}", BOLD))
    for tier, s in standings(tallies).items():
        wdl = f"{s.wins}-{s.draws}-{s.losses}"
        mark = c("unbeaten", FG_GREEN) if s.losses == 0 else c(f"lost {s.losses}", FG_RED)
        print(f"{tier:<8} {s.games:>6} {wdl:>12} {s.points:>8.1f}  {mark}")


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play the difficulty tiers against each other.")
    ap.add_argument("--games", type=int, default=10, help="Games per X/O pairing")
    ap.add_argument("--seed", type=int, default=1234, help="Base seed for the random tiers and openings")
    ap.add_argument("--openings", type=int, default=1, help="Random plies played before the tiers take over")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Where matchup_results_*.csv is written")
    ap.add_argument("--no-csv", action="store_true", help="Print the tables only")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    setup_logging()

    start = time.perf_counter()
    tallies = run_matchup(games_per_pair=args.games, seed=args.seed, openings=args.openings)

    print_grid(tallies)
    if not args.no_csv:
        out_path = export_csv(tallies, Path(args.results_dir))
        print(f"\nWrote CSV: {out_path}")

    print(c(f"Total runtime: {time.perf_counter() - start:.3f}s", BOLD))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
