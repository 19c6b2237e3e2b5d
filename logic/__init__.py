"""
Logic module for Tic-Tac-Toe.
Handles the board, game rules, and the minimax computer opponent.
"""

from .config import GameConfig
from .errors import (
    MoveError,
    CellOccupiedError,
    InvalidCellError,
    NotYourTurnError,
    GameOverError,
    InvariantViolation,
)
from .board import Board, BoardSnapshot, Cell, WINNING_LINES
from .game_state import GameState, Move, MoveResult
from .win_checker import WinChecker
from .move_validator import MoveValidator, ValidationResult
from .ai_player import AIPlayer
from .engine import GameEngine, new_game, submit_player_move

__version__ = "1.0.0"
