from __future__ import annotations

import logging
import random
from typing import Dict, Optional

from tictactoe.ai.base import Agent, Picker
from tictactoe.ai.minimax_agent import MinimaxAgent
from tictactoe.ai.random_agent import RandomAgent
from tictactoe.ai.tactical_agent import TacticalAgent
from tictactoe.config import OPPONENT_MARK
from tictactoe.core.board import Board
from tictactoe.errors import EngineInvariantViolation
from tictactoe.types import DIFFICULTIES, Difficulty, Move, Player

log = logging.getLogger(__name__)


def make_agent(
    difficulty: Difficulty,
    me: Player = OPPONENT_MARK,
    pick: Optional[Picker] = None,
    rng: Optional[random.Random] = None,
) -> Agent:
    """
    Build the agent behind a difficulty tier.
    `pick` replaces the random cell selector of the easy and medium tiers.
    """
    rng = rng if rng is not None else random.Random()

    if difficulty == "easy":
        return RandomAgent(name="Easy (random)", me=me, rng=rng, pick=pick)
    if difficulty == "medium":
        return TacticalAgent(name="Medium (win/block)", me=me, rng=rng, pick=pick)
    if difficulty == "hard":
        return MinimaxAgent(name="Hard (minimax)", me=me)

    raise ValueError(f"Unknown difficulty {difficulty!r}; expected one of {', '.join(DIFFICULTIES)}.")


class MoveEngine:
    """Selects the computer's move for a given difficulty."""

    def __init__(
        self,
        me: Player = OPPONENT_MARK,
        pick: Optional[Picker] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.me = me
        self.pick = pick
        self.rng = rng if rng is not None else random.Random()
        self._agents: Dict[Difficulty, Agent] = {}

    def agent_for(self, difficulty: Difficulty) -> Agent:
        # one agent per tier so the minimax table survives between moves
        agent = self._agents.get(difficulty)
        if agent is None:
            agent = make_agent(difficulty, me=self.me, pick=self.pick, rng=self.rng)
            self._agents[difficulty] = agent
        return agent

    def select_move(self, board: Board, difficulty: Difficulty) -> Move:
        outcome = board.evaluate()
        if outcome.is_terminal:
            log.error("Engine called on a finished game (%s):\n%s", outcome, board)
            raise EngineInvariantViolation(f"Game already ended: {outcome}.")

        agent = self.agent_for(difficulty)
        move = agent.choose_move(board)
        log.debug("%s chose %s (%s)", agent.name, move, getattr(agent, "last_info", {}))
        return move
