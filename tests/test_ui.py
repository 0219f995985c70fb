import pytest

from tictactoe.ai.engine import MoveEngine
from tictactoe.game.controller import run_game
from tictactoe.game.results import player_won, start_message, status_message
from tictactoe.types import DRAW, IN_PROGRESS, Outcome
from tictactoe.ui.prompts import parse_command


def test_status_messages_in_french():
    assert status_message(Outcome.win("X"), lang="fr") == "Vous avez gagné ! 🎉"
    assert status_message(Outcome.win("O"), lang="fr") == "o a gagné !"
    assert status_message(DRAW, lang="fr") == "Match nul !"
    assert start_message("fr") == "x commence !"


def test_status_messages_in_english_and_unknown_language():
    assert status_message(Outcome.win("X"), lang="en") == "You won! 🎉"
    assert status_message(DRAW, lang="de") == "Draw!"
    assert status_message(IN_PROGRESS, lang="en") == "Your move."


def test_only_player_win_is_celebrated():
    assert player_won(Outcome.win("X"))
    assert not player_won(Outcome.win("O"))
    assert not player_won(DRAW)


@pytest.mark.parametrize(
    "raw,kind,move,difficulty",
    [
        ("5", "move", 4, None),
        (" 1 ", "move", 0, None),
        ("q", "quit", None, None),
        ("Reset", "reset", None, None),
        ("h", "difficulty", None, "hard"),
        ("medium", "difficulty", None, "medium"),
    ],
)
def test_parse_command(raw, kind, move, difficulty):
    cmd = parse_command(raw)
    assert cmd.kind == kind
    assert cmd.move == move
    assert cmd.difficulty == difficulty


@pytest.mark.parametrize("raw", ["0", "10", "x", ""])
def test_parse_command_rejects_bad_input(raw):
    with pytest.raises(ValueError):
        parse_command(raw)


def _scripted(*lines):
    it = iter(lines)

    def read(_prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return read


def test_run_game_plays_a_turn_each_and_quits(capsys):
    session = run_game(
        "medium",
        engine=MoveEngine(pick=lambda moves: moves[0]),
        read=_scripted("5", "5", "oops", "q"),
        show_thinking=False,
    )
    assert session.board.cells[4] == "X"
    assert session.board.cells[0] == "O"
    assert session.board.cells.count(None) == 7
    assert "TIC-TAC-TOE" in capsys.readouterr().out


def test_run_game_difficulty_switch_resets():
    session = run_game(
        "easy",
        engine=MoveEngine(pick=lambda moves: moves[0]),
        read=_scripted("1", "h"),
        show_thinking=False,
    )
    assert session.difficulty == "hard"
    assert session.board.empty_cells() == list(range(9))


def test_run_game_celebrates_a_player_win_once(monkeypatch):
    calls = []
    monkeypatch.setattr("tictactoe.game.controller.celebrate", lambda: calls.append(1))

    # easy opponent takes the first free cell: X 4, O 0, X 1, O 2, X 7 wins
    session = run_game(
        "easy",
        engine=MoveEngine(pick=lambda moves: moves[0]),
        read=_scripted("5", "2", "8", "oops", "9"),
        show_thinking=False,
    )
    assert session.outcome == Outcome.win("X")
    assert calls == [1]


def test_no_color_env_disables_colour(monkeypatch):
    import importlib

    import tictactoe.config as config

    monkeypatch.setenv("NO_COLOR", "1")
    assert importlib.reload(config).USE_COLOR is False

    monkeypatch.delenv("NO_COLOR")
    assert importlib.reload(config).USE_COLOR is True
