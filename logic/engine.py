"""
Move engine for Tic-Tac-Toe.
Sequences player and computer turns and reports the outcome.
"""

from typing import List, Optional, Tuple

from .ai_player import AIPlayer
from .board import Board, BoardSnapshot, Cell
from .config import GameConfig
from .errors import InvariantViolation
from .game_state import GameState, Move, MoveResult
from .move_validator import MoveValidator
from .win_checker import WinChecker


class GameEngine:
    """
    One game of Tic-Tac-Toe, player (X) against computer (O).

    Game flow:
    1. Player submits a cell
    2. Engine validates and places the player's mark
    3. If the game isn't over, the AI picks and places its reply
    4. The resulting state is returned to the caller

    Calls are synchronous; one engine must not be driven from two
    places at once.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize a fresh game with an empty board and the player to move.

        Args:
            config: Game configuration. Uses defaults if not provided.
        """
        self.config = config or GameConfig()
        self.board = Board()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = AIPlayer(self.config)

        # Player always moves first
        self.player_turn = True

        # Move history
        self.history: List[Move] = []

    # ---------------------------------------------------------------- state

    @property
    def state(self) -> GameState:
        """Current outcome, derived from the board."""
        return self.win_checker.get_state(self.board)

    @property
    def is_game_over(self) -> bool:
        return self.state.is_terminal

    @property
    def winning_line(self) -> Optional[List[Tuple[int, int]]]:
        """The completed line if someone has won, else None."""
        return self.win_checker.get_winning_line(self.board)

    def snapshot(self) -> BoardSnapshot:
        """Read-only copy of the board for rendering."""
        return self.board.snapshot()

    # ---------------------------------------------------------------- moves

    def submit_player_move(self, row: int, col: int) -> MoveResult:
        """
        Play the player's move and, if the game goes on, the computer's reply.

        Rejected moves (game over, not the player's turn, off the board,
        occupied cell) change nothing; the error is returned in the result.

        Args:
            row: Row chosen by the player (0-2).
            col: Column chosen by the player (0-2).

        Returns:
            MoveResult with the state after both half-moves, or after
            only the player's half-move if that ended the game.
        """
        validation = self.validator.validate_move(self, row, col)
        if not validation.is_valid:
            if self.config.VERBOSE:
                print(f"WARNING: {validation.error_message}")
            return MoveResult(
                state=self.state,
                board=self.snapshot(),
                error=validation.error
            )

        player_move = self._place(row, col, Cell.PLAYER)
        state = self.win_checker.evaluate(self.board, Cell.PLAYER)

        if state.is_terminal:
            self._report(state)
            return MoveResult(state=state, board=self.snapshot(), player_move=player_move)

        computer_move = self._computer_move()
        state = self.win_checker.evaluate(self.board, Cell.COMPUTER)
        self._report(state)

        return MoveResult(
            state=state,
            board=self.snapshot(),
            player_move=player_move,
            computer_move=computer_move
        )

    def _computer_move(self) -> Move:
        """Pick the computer's move with minimax and place it."""
        if self.player_turn:
            raise InvariantViolation("Computer asked to move on the player's turn")

        row, col = self.ai.get_best_move(self.board)
        return self._place(row, col, Cell.COMPUTER)

    def _place(self, row: int, col: int, mark: Cell) -> Move:
        """Place a mark for real, record it, and pass the turn."""
        self.board.place(row, col, mark)

        move = Move(mark=mark, row=row, col=col, move_number=len(self.history))
        self.history.append(move)
        self.player_turn = not self.player_turn

        if self.config.VERBOSE:
            who = "Player" if mark == Cell.PLAYER else "Computer"
            print(f">>> {who} placed {mark.symbol} at ({row}, {col})")

        return move

    def _report(self, state: GameState):
        if self.config.VERBOSE and state.is_terminal:
            print(f"Game over: {state.value}")

    # ---------------------------------------------------------------- copies

    def copy(self) -> "GameEngine":
        """Create an independent copy of this game."""
        new_engine = GameEngine(self.config)
        new_engine.board = self.board.copy()
        new_engine.player_turn = self.player_turn
        new_engine.history = list(self.history)
        return new_engine


def new_game(config: Optional[GameConfig] = None) -> GameEngine:
    """Start a fresh game: empty board, player to move."""
    return GameEngine(config)


def submit_player_move(engine: GameEngine, row: int, col: int) -> MoveResult:
    """Submit a player move to `engine`. See GameEngine.submit_player_move."""
    return engine.submit_player_move(row, col)
