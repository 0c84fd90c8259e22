"""
Game engine for console TicTacToe.

Ties together:
- Game state (board lifecycle)
- Move validation
- Win / tie detection
- The random CPU player
- The running score

The engine does not know whose turn it is. The caller decides the order:
human moves, check PLAYER; then CPU moves, check CPU; repeat.
"""

import random
from typing import List, Optional, Tuple

from .config import GameConfig
from .game_state import GameState, Cell, RoundResult, Score
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, Outcome
from .cpu_player import CpuPlayer


class GameEngine:
    """
    Holds the board and the score, and enforces the rules.

    Round lifecycle:
    1. start() creates the board (it is absent before that)
    2. Human and CPU place marks, the caller checks the outcome after each
    3. On WIN or TIE the caller records the result and calls reset_board()
    4. The score survives resets for the lifetime of the engine
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize the engine. The board is not created yet.

        Args:
            rng: Random source for CPU moves (default: a fresh random.Random).
            config: Game configuration.
        """
        self.config = config or GameConfig()

        self.game_state = GameState()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.cpu = CpuPlayer(Cell.CPU, rng)

        self._score = Score()

    # ==================== LIFECYCLE ====================

    def start(self):
        """Create the board: 9 empty cells."""
        self.game_state.start()
        self._debug("Board created")

    def reset_board(self):
        """Clear the board for the next round. The score is kept."""
        self.game_state.reset()
        self._debug("Board reset")

    @property
    def is_started(self) -> bool:
        return self.game_state.is_started

    @property
    def board(self) -> Optional[Tuple[Cell, ...]]:
        """The 9 cells in row-major order, or None before start()."""
        if self.game_state.cells is None:
            return None
        return tuple(self.game_state.cells)

    # ==================== MOVES ====================

    def place_human_move(self, index: int) -> ValidationResult:
        """
        Place the human's mark.

        Args:
            index: Cell index, validated here (the caller may pass anything).

        Returns:
            ValidationResult. On failure the board is left untouched.
        """
        result = self.validator.validate_move(self.game_state, index)

        if not result.is_valid:
            self._debug(f"Rejected move {index}: {result.error_message}")
            return result

        self.game_state.cells[index] = Cell.PLAYER
        return result

    def place_cpu_move(self) -> Optional[int]:
        """
        Let the computer place its mark on a random empty cell.

        Returns:
            The chosen index, or None if there was nowhere to move
            (board absent or full), in which case nothing changes.
        """
        index = self.cpu.choose_move(self.game_state)

        if index is None:
            self._debug("CPU has no move available")
            return None

        self.game_state.cells[index] = self.cpu.mark
        self._debug(f"CPU plays {index}")
        return index

    def empty_cells(self) -> List[int]:
        """Indices of the empty cells (empty list before start())."""
        return self.validator.get_valid_moves(self.game_state)

    # ==================== OUTCOME ====================

    def check_outcome(self, mark: Cell) -> Outcome:
        """
        Check the board for the mark that just moved.

        Returns:
            WIN if mark fills a line, TIE if the board is full,
            CONTINUE otherwise (including before start()).
        """
        return self.win_checker.check_outcome(self.game_state, mark)

    def winning_line(self, mark: Cell) -> Optional[Tuple[int, int, int]]:
        return self.win_checker.get_winning_line(self.game_state, mark)

    # ==================== SCORE ====================

    def current_score(self) -> Score:
        """Read-only snapshot of the score."""
        return self._score

    def record_outcome(self, kind: RoundResult):
        """
        Count a finished round.

        Args:
            kind: PLAYER_WIN, CPU_WIN, or TIE. Exactly one counter goes up.
        """
        if not isinstance(kind, RoundResult):
            raise ValueError(f"Expected a RoundResult, got {kind!r}")

        self._score = self._score.recorded(kind)
        self._debug(f"Recorded {kind.value}: {self._score}")

    def _debug(self, message: str):
        if self.config.DEBUG_MODE:
            print(f"[engine] {message}")
