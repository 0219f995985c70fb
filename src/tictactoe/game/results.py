from __future__ import annotations
from typing import Dict

from tictactoe.config import LANG, PLAYER_MARK
from tictactoe.types import Outcome

_MESSAGES: Dict[str, Dict[str, str]] = {
    "fr": {
        "start": "x commence !",
        "player_win": "Vous avez gagné ! 🎉",
        "opponent_win": "{mark} a gagné !",
        "draw": "Match nul !",
        "turn": "À vous de jouer.",
    },
    "en": {
        "start": "x starts!",
        "player_win": "You won! 🎉",
        "opponent_win": "{mark} won!",
        "draw": "Draw!",
        "turn": "Your move.",
    },
}


def _messages(lang: str) -> Dict[str, str]:
    return _MESSAGES.get(lang, _MESSAGES["en"])


def start_message(lang: str = LANG) -> str:
    return _messages(lang)["start"]


def status_message(outcome: Outcome, lang: str = LANG) -> str:
    msgs = _messages(lang)
    if outcome.kind == "draw":
        return msgs["draw"]
    if outcome.kind == "win":
        if outcome.winner == PLAYER_MARK:
            return msgs["player_win"]
        return msgs["opponent_win"].format(mark=str(outcome.winner).lower())
    return msgs["turn"]


def player_won(outcome: Outcome) -> bool:
    return outcome.kind == "win" and outcome.winner == PLAYER_MARK
