"""
Win checker for Tic-Tac-Toe.
Checks if a side has won or if the game is a draw.
"""

from typing import List, Optional, Tuple

from .board import WINNING_LINES, Board, Cell
from .game_state import GameState


class WinChecker:
    """
    Checks for win conditions in Tic-Tac-Toe.

    Win condition: 3 marks of the same side in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WINNING_LINES

    # Order in which sides are checked when scanning a board
    CHECK_ORDER = (Cell.PLAYER, Cell.COMPUTER)

    def check_winner(self, board: Board) -> Optional[Cell]:
        """
        Check if there's a winner.

        Args:
            board: The board to check.

        Returns:
            The winning mark, or None if no winner yet.
        """
        for mark in self.CHECK_ORDER:
            if board.has_line(mark):
                return mark
        return None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND nobody has a line.
        """
        return board.is_full() and self.check_winner(board) is None

    def evaluate(self, board: Board, mark: Cell) -> GameState:
        """
        Evaluate the position right after `mark` was placed.

        Only the mover can have just completed a line, so only their
        mark is tested for a win.

        Args:
            board: The board after the placement.
            mark: The mark that was just placed.

        Returns:
            The mover's win, DRAW, or IN_PROGRESS.
        """
        if board.has_line(mark):
            return GameState.winner_for(mark)
        if board.is_full():
            return GameState.DRAW
        return GameState.IN_PROGRESS

    def get_state(self, board: Board) -> GameState:
        """
        Derive the state of an arbitrary board.

        Args:
            board: The board to inspect.

        Returns:
            The current GameState.
        """
        winner = self.check_winner(board)
        if winner is not None:
            return GameState.winner_for(winner)
        if board.is_full():
            return GameState.DRAW
        return GameState.IN_PROGRESS

    def get_winning_line(self, board: Board) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as list of (row, col), or None.
        """
        for line in self.WINNING_LINES:
            first = board.get(*line[0])
            if first != Cell.EMPTY and all(board.get(r, c) == first for r, c in line):
                return list(line)
        return None


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    for rows, expected in [
        (["XXX", "OO ", "   "], GameState.PLAYER_WINS),   # Horizontal
        (["XO ", "XO ", " OX"], GameState.COMPUTER_WINS), # Vertical
        (["X O", "OX ", "  X"], GameState.PLAYER_WINS),   # Diagonal
        (["XOX", "XOO", "OXX"], GameState.DRAW),          # Full, no line
    ]:
        state = checker.get_state(Board.from_rows(rows))
        print(f"{rows}: {state.value}")
        assert state == expected

    print("\nWinChecker test done!")
