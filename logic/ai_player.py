"""
AI player for Tic-Tac-Toe.
Uses the Minimax algorithm to choose the best move.
"""

from typing import Optional, Tuple

from .board import Board, Cell
from .config import GameConfig
from .errors import InvariantViolation


class AIPlayer:
    """
    An AI that plays Tic-Tac-Toe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    The full game tree is searched; there is no pruning and no
    depth limit.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize the AI player.

        Args:
            config: Game configuration. Uses defaults if not provided.
        """
        self.config = config or GameConfig()
        self.mark = Cell.COMPUTER
        self.opponent = Cell.PLAYER

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

    def get_best_move(self, board: Board) -> Tuple[int, int]:
        """
        Get the best move for the computer on this board.

        Every empty cell is tried in row-major order; the first cell with
        the strictly highest score wins, so ties go to the lowest row,
        then the lowest column.

        Args:
            board: Current board. It is mutated during the search but
                always restored before returning.

        Returns:
            (row, col) of the best move.

        Raises:
            InvariantViolation: If the board is full or already won.
        """
        if board.has_line(Cell.PLAYER) or board.has_line(Cell.COMPUTER):
            raise InvariantViolation("No legal moves: the game is already won")

        valid_moves = board.get_empty_cells()
        if not valid_moves:
            raise InvariantViolation("No legal moves: the board is full")

        self.positions_evaluated = 0
        best_score = None
        best_move = None

        for row, col in valid_moves:
            score = self.score_move(board, row, col)

            if best_score is None or score > best_score:
                best_score = score
                best_move = (row, col)

        if self.config.VERBOSE:
            print(f"AI evaluated {self.positions_evaluated} positions. "
                  f"Best move: {best_move} (score: {best_score})")

        return best_move

    def score_move(self, board: Board, row: int, col: int) -> int:
        """
        Score a single computer move with minimax.

        Args:
            board: Current board (restored before returning).
            row: Row of the candidate move.
            col: Column of the candidate move.

        Returns:
            The minimax score of the position after the move.
        """
        with board.speculate(row, col, self.mark):
            # Next ply belongs to the player, so start minimizing
            return self.minimax(board, depth=0, is_maximizing=False)

    def minimax(self, board: Board, depth: int, is_maximizing: bool) -> int:
        """
        Score a position by exhaustive minimax.

        Args:
            board: Board as mutated by the search so far.
            depth: Plies from the real position to this one.
            is_maximizing: True if the computer is to move.

        Returns:
            WIN_SCORE - depth for a computer win, depth - WIN_SCORE for
            a player win, DRAW_SCORE for a draw.
        """
        self.positions_evaluated += 1

        # Check terminal states
        if board.has_line(self.opponent):
            return -self.config.WIN_SCORE + depth
        if board.has_line(self.mark):
            return self.config.WIN_SCORE - depth
        if board.is_full():
            return self.config.DRAW_SCORE

        if is_maximizing:
            best_score = None
            for row, col in board.get_empty_cells():
                with board.speculate(row, col, self.mark):
                    score = self.minimax(board, depth + 1, False)
                best_score = score if best_score is None else max(score, best_score)
            return best_score
        else:
            best_score = None
            for row, col in board.get_empty_cells():
                with board.speculate(row, col, self.opponent):
                    score = self.minimax(board, depth + 1, True)
                best_score = score if best_score is None else min(score, best_score)
            return best_score


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")

    ai = AIPlayer(GameConfig(verbose=True))

    # Test 1: AI should block a winning move
    board = Board.from_rows(["XX ", " O ", "   "])
    board.print_board()
    print("\nPlayer is about to win with (0,2)!")

    move = ai.get_best_move(board)
    assert move == (0, 2), f"Expected (0, 2), got {move}"
    print("✓ AI correctly blocks the win!")

    # Test 2: AI should take a winning move
    board = Board.from_rows(["OO ", "XX ", "  X"])
    board.print_board()
    print("\nAI can win with (0,2)!")

    move = ai.get_best_move(board)
    assert move == (0, 2), f"Expected (0, 2), got {move}"
    print("✓ AI correctly takes the win!")

    print("\nAIPlayer test done!")
