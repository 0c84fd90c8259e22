"""
Console UI for TicTacToe.

Two jobs:
- Read the human's cell index from the console
- Render the board and the score as text

Input and output functions are injectable so the console can be
driven by a script in tests.
"""

from typing import Callable, Optional, Sequence

from logic.config import GameConfig
from logic.game_state import Cell, Score
from logic.engine import GameEngine


class ConsoleUI:
    """
    Text front end for the game engine.

    Board layout (index = row * 3 + col):
        0  1  2
        3  4  5
        6  7  8
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print
    ):
        """
        Initialize the console.

        Args:
            config: Game configuration (glyphs and messages).
            input_func: Reads one line, like input().
            output_func: Writes one block of text, like print().
        """
        self.config = config or GameConfig()
        self.input_func = input_func
        self.output_func = output_func

        self.glyphs = {
            Cell.PLAYER: self.config.PLAYER_GLYPH,
            Cell.CPU: self.config.CPU_GLYPH,
            Cell.EMPTY: self.config.EMPTY_GLYPH,
        }

    # ==================== OUTPUT ====================

    def format_board(self, board: Optional[Sequence[Cell]]) -> str:
        """
        Draw the board as 3 lines of 3 glyphs.

        Args:
            board: 9 cells in row-major order, or None if not started.

        Returns:
            The board text, or the "no board" message.
        """
        if board is None:
            return self.config.NO_BOARD_MESSAGE

        size = self.config.BOARD_SIZE
        lines = []
        for row in range(size):
            row_cells = board[row * size:(row + 1) * size]
            lines.append("".join(
                self.glyphs[cell].ljust(self.config.CELL_WIDTH) for cell in row_cells
            ))
        return "\n".join(lines)

    def format_score(self, score: Score) -> str:
        return f"Score {{ player: {score.player}, cpu: {score.cpu}, tie: {score.tie} }}"

    def render(self, engine: GameEngine):
        """Print the board followed by the score."""
        self.output_func(self.format_board(engine.board))
        self.output_func(self.format_score(engine.current_score()))

    def show(self, message: str):
        """Print one message."""
        self.output_func(message)

    # ==================== INPUT ====================

    def read_index(self, prompt: str = "") -> Optional[int]:
        """
        Read a cell index from the console.

        The number is not range-checked here; the engine does that.

        Returns:
            The integer typed, or None if the text was not a number.
            EOFError from input_func is passed on to the caller.
        """
        text = self.input_func(prompt)

        try:
            return int(text.strip())
        except ValueError:
            self.show(self.config.NOT_A_NUMBER_MESSAGE)
            return None
