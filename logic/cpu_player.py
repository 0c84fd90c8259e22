"""
Computer player for the TicTacToe engine.
Picks a uniformly random empty cell.
"""

import random
from typing import Optional

from .game_state import GameState, Cell


class CpuPlayer:
    """
    A computer opponent that plays a random empty cell.

    The random source is injected so games can be replayed:
    pass random.Random(seed) for a fixed sequence.
    """

    def __init__(self, mark: Cell = Cell.CPU, rng: Optional[random.Random] = None):
        """
        Initialize the CPU player.

        Args:
            mark: Which mark the CPU places (default: CPU)
            rng: Random source with a choice() method.
        """
        self.mark = mark
        self.rng = rng if rng is not None else random.Random()

    def choose_move(self, game_state: GameState) -> Optional[int]:
        """
        Choose a cell for the next CPU move.

        Every empty cell is equally likely.

        Args:
            game_state: Current game state.

        Returns:
            Index of the chosen cell, or None if the board is absent or full.
        """
        empty_cells = game_state.get_empty_cells()

        if not empty_cells:
            return None

        # Only one move left, no randomness involved
        if len(empty_cells) == 1:
            return empty_cells[0]

        return self.rng.choice(empty_cells)
