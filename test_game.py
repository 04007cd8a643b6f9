"""
Tests for the game loop and the command line entry point.
A scripted terminal feeds keys and records everything written.
"""

import io
import sys

import pytest

import main
from logic.config import GameConfig
from logic.game_state import Mark, OutcomeKind
from terminal.config import TerminalConfig
from terminal.driver import InputReadError


class ScriptedTerminal:
    """Stands in for TerminalDriver: keys come from a string."""

    def __init__(self, keys: str):
        self.keys = list(keys)
        self.output = []
        self.clears = 0
        self.entered = False
        self.exited = False

    def read_key(self) -> str:
        if not self.keys:
            raise InputReadError("input stream closed")
        return self.keys.pop(0)

    def write(self, text: str):
        self.output.append(text)

    def clear_screen(self):
        self.clears += 1

    @property
    def text(self) -> str:
        return "".join(self.output)

    def __enter__(self):
        self.entered = True
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.exited = True


def keys_for(moves, start=(1, 1)):
    """WASD + space keys that place marks at each (x, y) in order."""
    keys = []
    x, y = start
    for tx, ty in moves:
        keys.append(("d" if tx > x else "a") * abs(tx - x))
        keys.append(("s" if ty > y else "w") * abs(ty - y))
        keys.append(" ")
        x, y = tx, ty
    return "".join(keys)


def make_game(keys: str, size: int = 3) -> main.TicTacToeGame:
    config = GameConfig()
    config.BOARD_SIZE = size
    config.disable_delays()
    return main.TicTacToeGame(ScriptedTerminal(keys), config=config)


# ==================== GAME LOOP ====================

def test_quit_first():
    game = make_game("q")
    outcome = game.run()

    assert outcome.kind == OutcomeKind.QUIT
    assert game.terminal.text.endswith("Exiting...")
    assert game.game_state.move_count == 0
    # Initial frame plus one redraw
    assert game.terminal.clears == 2


def test_left_column_win():
    keys = keys_for([(0, 0), (1, 1), (0, 1), (1, 0), (0, 2)])
    game = make_game(keys + "q")
    outcome = game.run()

    assert outcome.kind == OutcomeKind.WIN
    assert outcome.winner == Mark.X
    assert game.terminal.text.endswith("Player 'X' wins!")
    # The loop stopped before the trailing 'q'
    assert game.terminal.keys == ["q"]


def test_draw():
    # X O X / X O O / O X X
    moves = [(0, 0), (1, 0), (2, 0), (1, 1), (0, 1), (2, 1), (1, 2), (0, 2), (2, 2)]
    game = make_game(keys_for(moves))
    outcome = game.run()

    assert outcome.kind == OutcomeKind.DRAW
    assert game.game_state.move_count == 9
    assert game.terminal.text.endswith("Draw!")


def test_occupied_cell_shows_notice():
    game = make_game("  q")
    outcome = game.run()

    assert outcome.kind == OutcomeKind.QUIT
    assert "Position already filled!" in game.terminal.text
    assert game.game_state.move_count == 1
    assert game.game_state.current_player == Mark.O


def test_unknown_keys_redraw():
    game = make_game("xyzq")
    game.run()
    assert game.terminal.clears == 5
    assert game.game_state.cursor == (1, 1)


def test_input_failure_stops_loop():
    game = make_game("wa")
    with pytest.raises(InputReadError):
        game.run()
    assert game.game_state.cursor == (0, 0)


def test_bigger_board_win():
    moves = [(0, 0), (0, 1), (1, 1), (1, 2), (2, 2), (2, 3), (3, 3)]
    game = make_game(keys_for(moves, start=(2, 2)), size=4)
    outcome = game.run()

    assert outcome.kind == OutcomeKind.WIN
    assert outcome.winner == Mark.X


def test_pauses_use_config(monkeypatch):
    slept = []
    monkeypatch.setattr(main.time, "sleep", slept.append)

    config = GameConfig()
    game = main.TicTacToeGame(ScriptedTerminal("  q"), config=config)
    game.run()

    assert slept == [config.NOTICE_DELAY, config.QUIT_DELAY]


# ==================== COMMAND LINE ====================

@pytest.mark.parametrize("size", ["2", "10"])
def test_size_out_of_range(size):
    with pytest.raises(SystemExit) as exc_info:
        main.parse_args(["--size", size])
    assert exc_info.value.code == 2


def test_parse_args_defaults():
    args = main.parse_args([])
    assert args.size == 3
    assert not args.no_delay
    assert args.log_file is None


def test_main_without_terminal(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("q"))
    assert main.main(["--no-delay"]) == 1
    assert "Error configuring terminal" in capsys.readouterr().err


def test_main_plays_and_restores(monkeypatch):
    terminals = []

    def fake_driver(config: TerminalConfig):
        term = ScriptedTerminal("dq")
        terminals.append(term)
        return term

    monkeypatch.setattr(main, "TerminalDriver", fake_driver)
    assert main.main(["--no-delay"]) == 0

    term = terminals[0]
    assert term.entered and term.exited
    assert term.text.endswith("Exiting...")


def test_main_input_failure(monkeypatch, capsys):
    term = ScriptedTerminal("")
    monkeypatch.setattr(main, "TerminalDriver", lambda config: term)

    assert main.main(["--no-delay", "--size", "4"]) == 1
    assert term.exited
    assert "Error reading input" in capsys.readouterr().err


def test_main_keyboard_interrupt_counts_as_quit(monkeypatch):
    class InterruptedTerminal(ScriptedTerminal):
        def read_key(self) -> str:
            raise KeyboardInterrupt

    term = InterruptedTerminal("")
    monkeypatch.setattr(main, "TerminalDriver", lambda config: term)

    assert main.main(["--no-delay"]) == 0
    assert term.entered and term.exited
