"""
Tests for the console UI and the driver loop.
Input is scripted and output is captured, no terminal needed.

Usage:
    pytest test_console.py
    python test_console.py
"""

import random
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from logic import GameEngine, GameConfig, Cell, Score, Outcome, RoundResult
from ui import ConsoleUI
from main import TicTacToeConsole


class ScriptedConsole:
    """Feeds lines to input() and collects everything printed."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.output = []

    def input(self, prompt=""):
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)

    def print(self, text=""):
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


class FirstEmptyRandom:
    """Always picks the lowest empty cell."""

    def choice(self, seq):
        return seq[0]


def make_game(lines, rng=None):
    console = ScriptedConsole(lines)
    engine = GameEngine(rng=rng or FirstEmptyRandom())
    ui = ConsoleUI(input_func=console.input, output_func=console.print)
    return TicTacToeConsole(engine, ui), console


# ==================== CONSOLE UI ====================

def test_format_board_absent():
    assert ConsoleUI().format_board(None) == "No moves yet!"


def test_format_board_glyphs():
    board = [Cell.PLAYER, Cell.EMPTY, Cell.CPU,
             Cell.EMPTY, Cell.PLAYER, Cell.EMPTY,
             Cell.CPU, Cell.EMPTY, Cell.EMPTY]
    lines = ConsoleUI().format_board(board).split("\n")
    assert lines == ["X  .  O  ", ".  X  .  ", "O  .  .  "]


def test_format_board_custom_glyphs():
    config = GameConfig()
    config.EMPTY_GLYPH = "-"
    text = ConsoleUI(config).format_board((Cell.EMPTY,) * 9)
    assert text == "\n".join(["-  -  -  "] * 3)


def test_format_score():
    assert ConsoleUI().format_score(Score(2, 1, 3)) == "Score { player: 2, cpu: 1, tie: 3 }"


def test_render_before_and_after_start():
    console = ScriptedConsole([])
    ui = ConsoleUI(input_func=console.input, output_func=console.print)
    engine = GameEngine()

    ui.render(engine)
    assert console.output == ["No moves yet!", "Score { player: 0, cpu: 0, tie: 0 }"]

    engine.start()
    ui.render(engine)
    assert console.output[2] == "\n".join([".  .  .  "] * 3)


def test_read_index():
    console = ScriptedConsole([" 4 \n", "-3", "abc", "100"])
    ui = ConsoleUI(input_func=console.input, output_func=console.print)

    assert ui.read_index() == 4
    assert ui.read_index() == -3
    assert ui.read_index() is None
    assert console.output == ["Please enter a valid number"]
    assert ui.read_index() == 100

    with pytest.raises(EOFError):
        ui.read_index()


# ==================== DRIVER ====================

def test_turn_places_both_marks():
    game, console = make_game(["4"])
    game.engine.start()

    outcome = game.play_turn()

    assert outcome == Outcome.CONTINUE
    assert game.engine.board[4] == Cell.PLAYER
    assert game.engine.board[0] == Cell.CPU
    assert "You entered: 4" in console.output
    assert console.output[-2:] == ["** Cpu turn **", "** Your turn **"]


@pytest.mark.parametrize("line, message", [
    ("9", "Invalid index!\nMust be between 0 and 8"),
    ("-1", "Invalid index!\nMust be between 0 and 8"),
])
def test_rejected_index_reprompts(line, message):
    game, console = make_game([line])
    game.engine.start()

    assert game.play_turn() is None
    assert console.output[-1] == message
    assert game.engine.board == (Cell.EMPTY,) * 9


def test_occupied_cell_does_not_cost_a_turn():
    game, console = make_game(["1", "0"])
    game.engine.start()
    game.play_turn()  # human 1, cpu 0
    before = game.engine.board

    assert game.play_turn() is None
    assert console.output[-1] == "That area is already occupied!"
    assert game.engine.board == before


def test_move_before_start_is_reported():
    game, console = make_game(["4"])

    assert game.play_turn() is None
    assert console.output[1] == "No moves yet!"
    assert console.output[-1] == "The game has not started!"
    assert game.engine.board is None


def test_non_numeric_input_reprompts():
    game, console = make_game(["x"])
    game.engine.start()

    assert game.play_turn() is None
    assert console.output[-1] == "Please enter a valid number"


def test_player_wins_round():
    # CPU takes 0 and 1 while the human fills 3, 4, 5
    game, console = make_game(["3", "4", "5"])
    game.engine.start()

    game.play_turn()
    game.play_turn()
    outcome = game.play_turn()

    assert outcome == Outcome.WIN
    assert "** You win! **" in console.output
    assert game.engine.current_score() == Score(1, 0, 0)
    assert game.engine.board == (Cell.EMPTY,) * 9


def test_cpu_wins_round():
    # CPU takes 0, 1, 2 while the human plays 3, 4, 6
    game, console = make_game(["3", "4", "6"])
    game.engine.start()

    results = [game.play_turn() for _ in range(3)]

    assert results[-1] == Outcome.WIN
    assert "** Cpu wins! **" in console.output
    assert game.engine.current_score() == Score(0, 1, 0)
    assert game.engine.board == (Cell.EMPTY,) * 9


def test_tie_round():
    # Human: 4, 1, 3, 6, 8   CPU (lowest empty): 0, 2, 5, 7
    # O X O / X X O / X O X -> no line, board full after the human's 5th move
    game, console = make_game(["4", "1", "3", "6", "8"])
    game.engine.start()

    results = [game.play_turn() for _ in range(5)]

    assert results[:4] == [Outcome.CONTINUE] * 4
    assert results[-1] == Outcome.TIE
    assert "** Tie! **" in console.output
    assert game.engine.current_score() == Score(0, 0, 1)


def test_run_plays_until_input_ends():
    game, console = make_game(["3", "4", "5", "0"])

    game.run()

    assert game.engine.current_score() == Score(1, 0, 0)
    assert game.engine.board[0] == Cell.PLAYER
    assert console.output[-1] == "Goodbye!"
    assert not game.is_running


def test_run_with_seeded_random_scores_every_round():
    lines = [str(i) for i in range(9)] * 20
    game, console = make_game(lines, rng=random.Random(5))

    game.run()

    score = game.engine.current_score()
    rounds = score.player + score.cpu + score.tie
    assert rounds == console.output.count("** You win! **") \
        + console.output.count("** Cpu wins! **") \
        + console.output.count("** Tie! **")
    assert rounds > 0


def test_record_matches_round_result():
    game, _ = make_game([])
    game._finish_round("done", RoundResult.TIE)
    assert game.engine.current_score() == Score(0, 0, 1)


if __name__ == "__main__":
    from test_modules import run_all_tests
    sys.exit(run_all_tests(__file__, "Console Tests"))
