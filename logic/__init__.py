"""
Logic module for console TicTacToe.
Handles the board, rules, score, and the random CPU opponent.
"""

from .config import GameConfig
from .game_state import GameState, Cell, RoundResult, Score
from .move_validator import MoveValidator, PlacementError, ValidationResult
from .win_checker import WinChecker, Outcome, WINNING_LINES
from .cpu_player import CpuPlayer
from .engine import GameEngine
