"""
Game state management for the TicTacToe engine.
Tracks the board lifecycle and the running score.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass

from .config import GameConfig


class Cell(Enum):
    """The state of a single board cell."""
    EMPTY = "empty"
    PLAYER = "player"
    CPU = "cpu"


class RoundResult(Enum):
    """How a finished round is recorded in the score."""
    PLAYER_WIN = "player"
    CPU_WIN = "cpu"
    TIE = "tie"


@dataclass(frozen=True)
class Score:
    """
    Snapshot of the running score.

    Frozen so callers can read it but never change the engine's counters.
    """
    player: int = 0
    cpu: int = 0
    tie: int = 0

    def recorded(self, kind: RoundResult) -> "Score":
        """Return a new score with one more round of the given kind."""
        if kind == RoundResult.PLAYER_WIN:
            return Score(self.player + 1, self.cpu, self.tie)
        if kind == RoundResult.CPU_WIN:
            return Score(self.player, self.cpu + 1, self.tie)
        if kind == RoundResult.TIE:
            return Score(self.player, self.cpu, self.tie + 1)
        raise ValueError(f"Unknown round result: {kind!r}")


def index_to_row_col(index: int):
    """Convert a board index (0-8) to (row, col)."""
    return divmod(index, GameConfig.BOARD_SIZE)


@dataclass
class GameState:
    """
    The board of the TicTacToe game.

    The board has three lifecycle states:
    - not started: cells is None
    - started and empty: 9 EMPTY cells
    - in progress / finished: some cells hold marks

    Cells are stored in row-major order (index = row * 3 + col).
    """

    # None until start() or reset() is called
    cells: Optional[List[Cell]] = None

    @property
    def is_started(self) -> bool:
        """True once the board has been created."""
        return self.cells is not None

    def start(self):
        """Create a fresh board of empty cells."""
        self.cells = [Cell.EMPTY] * GameConfig.NUM_CELLS

    def reset(self):
        """Clear the board for a new round (same board as start())."""
        self.start()

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            List of indices, empty if the board does not exist.
        """
        if self.cells is None:
            return []
        return [i for i, cell in enumerate(self.cells) if cell == Cell.EMPTY]

    def is_full(self) -> bool:
        """True if every cell holds a mark. An absent board is not full."""
        if self.cells is None:
            return False
        return all(cell != Cell.EMPTY for cell in self.cells)
