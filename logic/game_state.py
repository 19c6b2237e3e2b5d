"""
Game state types for Tic-Tac-Toe.
Outcome of a position, move history entries, and move results.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .board import BoardSnapshot, Cell
from .errors import MoveError


class GameState(Enum):
    """Outcome of the current position. Derived from the board, never stored."""
    IN_PROGRESS = "in_progress"
    PLAYER_WINS = "player_wins"
    COMPUTER_WINS = "computer_wins"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        """True once the game has concluded (a win or a draw)."""
        return self != GameState.IN_PROGRESS

    @staticmethod
    def winner_for(mark: Cell) -> "GameState":
        """The winning state for the side playing `mark`."""
        if mark == Cell.PLAYER:
            return GameState.PLAYER_WINS
        if mark == Cell.COMPUTER:
            return GameState.COMPUTER_WINS
        raise ValueError(f"No winner state for {mark!r}")


@dataclass(frozen=True)
class Move:
    """
    A move in the game.
    """
    mark: Cell              # Who made the move
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    move_number: int        # Ply number, starting at 0

    @property
    def cell(self) -> Tuple[int, int]:
        return (self.row, self.col)


@dataclass(frozen=True)
class MoveResult:
    """
    What happened after a player move was submitted.

    Unpacks as (state, board) for callers that only need those two.
    """
    state: GameState
    board: BoardSnapshot
    player_move: Optional[Move] = None
    computer_move: Optional[Move] = None
    error: Optional[MoveError] = None

    @property
    def accepted(self) -> bool:
        """False if the move was rejected (the game is unchanged)."""
        return self.error is None

    def __iter__(self):
        yield self.state
        yield self.board
