"""
Main orchestration script for console TicTacToe.

This script ties together:
- The game engine (board, rules, score, CPU player)
- The console UI (reading indices, printing the board)

Run this script to play TicTacToe against the computer!
"""

import random
from typing import Optional

from logic.config import GameConfig
from logic.game_state import Cell, RoundResult
from logic.move_validator import PlacementError
from logic.win_checker import Outcome
from logic.engine import GameEngine
from ui import ConsoleUI


class TicTacToeConsole:
    """
    Driver loop for a human vs. computer game.

    Game flow:
    1. Human (X) types a cell index 0-8
    2. The engine checks for a human win or tie
    3. Computer (O) places its mark on a random empty cell
    4. The engine checks for a computer win or tie
    5. A finished round is scored and the board is cleared
    6. Repeat until the input ends
    """

    def __init__(
        self,
        engine: Optional[GameEngine] = None,
        ui: Optional[ConsoleUI] = None
    ):
        """
        Initialize the console game.

        Args:
            engine: Game engine (default: new engine with its own RNG).
            ui: Console UI (default: reads stdin, prints to stdout).
        """
        self.engine = engine or GameEngine()
        self.config = self.engine.config
        self.ui = ui or ConsoleUI(self.config)

        self.is_running = False

    def run(self):
        """Start the board and play rounds until the input ends."""
        self.engine.start()
        self.is_running = True

        try:
            while self.is_running:
                self.play_turn()
        except (EOFError, KeyboardInterrupt):
            self.ui.show("")
        finally:
            self.is_running = False
            self.ui.show(self.config.GOODBYE_MESSAGE)

    def play_turn(self) -> Optional[Outcome]:
        """
        Play one human move and, if the round goes on, one CPU move.

        Returns:
            The outcome that ended this turn, or None if the human's
            input was rejected and nothing was played.
        """
        self.ui.show(self.config.PROMPT)
        self.ui.render(self.engine)

        index = self.ui.read_index()
        if index is None:
            return None

        self.ui.show(self.config.ENTERED_MESSAGE.format(index=index))

        result = self.engine.place_human_move(index)
        if not result.is_valid:
            self._report_rejected_move(result.error)
            return None

        # Human's move
        outcome = self.engine.check_outcome(Cell.PLAYER)
        if outcome == Outcome.WIN:
            self._finish_round(self.config.PLAYER_WIN_MESSAGE, RoundResult.PLAYER_WIN)
            return outcome
        if outcome == Outcome.TIE:
            self._finish_round(self.config.TIE_MESSAGE, RoundResult.TIE)
            return outcome
        self.ui.show(self.config.CPU_TURN_MESSAGE)

        # Computer's move
        self.engine.place_cpu_move()
        outcome = self.engine.check_outcome(Cell.CPU)
        if outcome == Outcome.WIN:
            self._finish_round(self.config.CPU_WIN_MESSAGE, RoundResult.CPU_WIN)
            return outcome
        if outcome == Outcome.TIE:
            self._finish_round(self.config.TIE_MESSAGE, RoundResult.TIE)
            return outcome
        self.ui.show(self.config.PLAYER_TURN_MESSAGE)

        return outcome

    def _report_rejected_move(self, error: PlacementError):
        messages = {
            PlacementError.OUT_OF_BOUNDS: self.config.OUT_OF_BOUNDS_MESSAGE,
            PlacementError.CELL_OCCUPIED: self.config.CELL_OCCUPIED_MESSAGE,
            PlacementError.BOARD_NOT_INITIALIZED: self.config.NOT_STARTED_MESSAGE,
        }
        self.ui.show(messages[error])

    def _finish_round(self, message: str, kind: RoundResult):
        """Announce the result, score it, and clear the board."""
        self.ui.show(message)
        self.engine.record_outcome(kind)
        self.engine.reset_board()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against the computer")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the computer's moves for a reproducible game"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print engine diagnostics"
    )

    args = parser.parse_args()

    config = GameConfig()
    config.DEBUG_MODE = args.debug

    engine = GameEngine(rng=random.Random(args.seed), config=config)
    TicTacToeConsole(engine).run()


if __name__ == "__main__":
    main()
