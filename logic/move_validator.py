"""
Move validator for Tic-Tac-Toe.
Validates that player moves follow the rules.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Tuple

from .board import BOARD_SIZE, Cell, is_valid_position
from .errors import (
    CellOccupiedError,
    GameOverError,
    InvalidCellError,
    MoveError,
    NotYourTurnError,
)

if TYPE_CHECKING:
    from .engine import GameEngine


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[MoveError] = None

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None


class MoveValidator:
    """
    Validates Tic-Tac-Toe player moves.

    Rules:
    1. Game must not be over
    2. It must be the player's turn
    3. Position must be on the 3x3 board
    4. Can only place on empty cells
    """

    def validate_move(self, engine: "GameEngine", row: int, col: int) -> ValidationResult:
        """
        Validate a player move.

        Args:
            engine: The running game.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Returns:
            ValidationResult with is_valid and the rejecting error.
        """
        # Check if game is over
        if engine.state.is_terminal:
            return ValidationResult(
                is_valid=False,
                error=GameOverError("Game is already over!", row, col)
            )

        # Check whose turn it is
        if not engine.player_turn:
            return ValidationResult(
                is_valid=False,
                error=NotYourTurnError("It's not the player's turn!", row, col)
            )

        # Check if row/col are integers in valid range
        if not is_valid_position(row, col):
            return ValidationResult(
                is_valid=False,
                error=InvalidCellError(
                    f"Invalid position ({row!r}, {col!r}). Must be 0-{BOARD_SIZE - 1}.", row, col
                )
            )

        # Check if cell is empty
        occupant = engine.board.get(row, col)
        if occupant != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error=CellOccupiedError(
                    f"Cell ({row}, {col}) is already occupied by {occupant.symbol}", row, col
                )
            )

        # All checks passed!
        return ValidationResult(is_valid=True)

    def get_valid_moves(self, engine: "GameEngine") -> List[Tuple[int, int]]:
        """
        Get all valid moves for the player.

        Returns:
            List of (row, col) valid move positions.
        """
        if engine.state.is_terminal or not engine.player_turn:
            return []
        return engine.board.get_empty_cells()
