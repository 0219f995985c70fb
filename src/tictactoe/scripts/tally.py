from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

from tictactoe.types import Difficulty, Player


@dataclass
class PairingTally:
    """Results of one tier playing X against one tier playing O."""
    x: Difficulty
    o: Difficulty
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0
    plies: int = 0
    moves: Dict[str, int] = field(default_factory=lambda: {"X": 0, "O": 0})
    nodes: Dict[str, int] = field(default_factory=lambda: {"X": 0, "O": 0})

    @property
    def games(self) -> int:
        return self.x_wins + self.o_wins + self.draws

    def record(self, winner: Optional[Player], plies: int) -> None:
        if winner == "X":
            self.x_wins += 1
        elif winner == "O":
            self.o_wins += 1
        else:
            self.draws += 1
        self.plies += plies

    def avg_plies(self) -> float:
        return (self.plies / self.games) if self.games else 0.0

    def nodes_per_move(self, side: Player) -> float:
        return (self.nodes[side] / self.moves[side]) if self.moves[side] else 0.0

    def wdl(self, side: Player) -> str:
        """W-D-L seen from one seat."""
        wins, losses = (self.x_wins, self.o_wins) if side == "X" else (self.o_wins, self.x_wins)
        return f"{wins}-{self.draws}-{losses}"


@dataclass
class Standing:
    wins: int = 0
    draws: int = 0
    losses: int = 0

    @property
    def games(self) -> int:
        return self.wins + self.draws + self.losses

    @property
    def points(self) -> float:
        return self.wins + 0.5 * self.draws


def standings(tallies: Iterable[PairingTally]) -> Dict[str, Standing]:
    """
    Fold pairings into one line per tier, both seats counted.
    A tier playing itself gets every game twice, once per seat.
    """
    table: Dict[str, Standing] = {}
    for t in tallies:
        x = table.setdefault(t.x, Standing())
        o = table.setdefault(t.o, Standing())
        x.wins += t.x_wins
        x.losses += t.o_wins
        x.draws += t.draws
        o.wins += t.o_wins
        o.losses += t.x_wins
        o.draws += t.draws
    return table
