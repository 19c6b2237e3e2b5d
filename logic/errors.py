"""
Errors raised and reported by the Tic-Tac-Toe engine.
"""


class MoveError(Exception):
    """A move that was rejected. The game state is left unchanged."""

    def __init__(self, message: str, row: int = None, col: int = None):
        super().__init__(message)
        self.row = row
        self.col = col


class CellOccupiedError(MoveError):
    """The target cell already holds a mark."""


class InvalidCellError(MoveError):
    """The target cell is outside the 3x3 grid."""


class NotYourTurnError(MoveError):
    """A player move was submitted while the computer is to move."""


class GameOverError(MoveError):
    """A move was submitted after the game ended."""


class InvariantViolation(RuntimeError):
    """
    Internal sequencing bug in the engine.
    Never expected in normal play; not meant to be caught.
    """
