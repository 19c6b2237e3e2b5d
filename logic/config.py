"""
Game configuration for Tic-Tac-Toe.
Scoring and diagnostics settings for the engine.
"""

from typing import Optional


class GameConfig:
    """
    Configuration class for the game engine.
    The board is always 3x3; the other values can be tuned.
    """

    # ==================== BOARD SETTINGS ====================
    # Classic Tic-Tac-Toe grid (fixed). X and O are fixed too, see logic/board.py
    BOARD_SIZE = 3

    # ==================== MINIMAX SCORING ====================
    # Computer win = WIN_SCORE - depth, Player win = -WIN_SCORE + depth
    WIN_SCORE = 10
    DRAW_SCORE = 0

    # ==================== DEBUG SETTINGS ====================
    # Print engine and AI diagnostics to the console
    VERBOSE = False

    def __init__(self, verbose: Optional[bool] = None):
        """
        Initialize the configuration.

        Args:
            verbose: Override VERBOSE for this instance.
        """
        if verbose is not None:
            self.VERBOSE = verbose
