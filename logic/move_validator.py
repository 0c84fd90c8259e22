"""
Move validator for the TicTacToe engine.
Validates that a human move can be placed on the board.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass

from .config import GameConfig
from .game_state import GameState, Cell, index_to_row_col


class PlacementError(Enum):
    """Why a move was rejected."""
    OUT_OF_BOUNDS = "out_of_bounds"
    BOARD_NOT_INITIALIZED = "board_not_initialized"
    CELL_OCCUPIED = "cell_occupied"


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[PlacementError] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules, checked in this order:
    1. Index must be in 0-8 (even before the board exists)
    2. The board must have been started
    3. Can only place on an empty cell
    """

    def validate_move(self, game_state: GameState, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to place the mark on (not pre-checked by the caller).

        Returns:
            ValidationResult with is_valid, error and error_message.
        """
        if not (0 <= index < GameConfig.NUM_CELLS):
            return ValidationResult(
                is_valid=False,
                error=PlacementError.OUT_OF_BOUNDS,
                error_message=f"Invalid position {index}. Must be 0-{GameConfig.NUM_CELLS - 1}."
            )

        if not game_state.is_started:
            return ValidationResult(
                is_valid=False,
                error=PlacementError.BOARD_NOT_INITIALIZED,
                error_message="The board has not been created yet."
            )

        cell = game_state.cells[index]
        if cell != Cell.EMPTY:
            row, col = index_to_row_col(index)
            return ValidationResult(
                is_valid=False,
                error=PlacementError.CELL_OCCUPIED,
                error_message=f"Cell {index} ({row}, {col}) is already occupied by {cell.value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves.

        Args:
            game_state: Current game state.

        Returns:
            List of valid indices (empty if the board does not exist).
        """
        return game_state.get_empty_cells()
