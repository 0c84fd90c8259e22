"""
Win checker for the TicTacToe engine.
Checks if a mark has won or if the round is a tie.
"""

from enum import Enum
from typing import Optional, Tuple

from .game_state import GameState, Cell


class Outcome(Enum):
    """Result of checking the board for one mark."""
    WIN = "win"
    TIE = "tie"
    CONTINUE = "continue"


# All possible winning lines, as board indices
WINNING_LINES = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: the queried mark fills all 3 cells of a line
    (horizontally, vertically, or diagonally).
    """

    WINNING_LINES = WINNING_LINES

    def check_winner(self, game_state: GameState, mark: Cell) -> bool:
        """
        Check if the given mark has won.

        Args:
            game_state: The current game state.
            mark: The mark to test (PLAYER or CPU).

        Returns:
            True if any line is filled with that mark.
        """
        return self.get_winning_line(game_state, mark) is not None

    def get_winning_line(
        self,
        game_state: GameState,
        mark: Cell
    ) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line for a mark if there is one.

        Returns:
            The line as a triple of indices, or None.
        """
        cells = game_state.cells
        if cells is None or mark == Cell.EMPTY:
            return None

        for line in self.WINNING_LINES:
            if all(cells[i] == mark for i in line):
                return line
        return None

    def check_draw(self, game_state: GameState) -> bool:
        """
        Check if the board is full.

        Only meaningful once check_winner() came back False.
        """
        return game_state.is_full()

    def check_outcome(self, game_state: GameState, mark: Cell) -> Outcome:
        """
        Check the board for one mark.

        Args:
            game_state: The game state.
            mark: The mark that just moved.

        Returns:
            WIN, TIE, or CONTINUE. An absent board always continues.
        """
        if not game_state.is_started:
            return Outcome.CONTINUE

        if self.check_winner(game_state, mark):
            return Outcome.WIN

        if self.check_draw(game_state):
            return Outcome.TIE

        return Outcome.CONTINUE


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    # Diagonal win for the player
    game = GameState()
    game.start()
    for i in (0, 4, 8):
        game.cells[i] = Cell.PLAYER

    outcome = checker.check_outcome(game, Cell.PLAYER)
    print(f"Diagonal: outcome = {outcome}, line = {checker.get_winning_line(game, Cell.PLAYER)}")
    assert outcome == Outcome.WIN
    assert checker.check_outcome(game, Cell.CPU) == Outcome.CONTINUE

    print("\nWinChecker test done!")
