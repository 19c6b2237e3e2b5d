"""
Main entry point for Tic-Tac-Toe.

Runs the Tkinter UI by default, or a console game with --no-ui.
The human plays X and always moves first; the computer plays O
and never loses.
"""

from typing import Callable, Optional, Tuple

from logic import GameConfig, GameEngine, GameState, new_game


RESULT_TEXT = {
    GameState.PLAYER_WINS: "🎉 Congratulations! You won!",
    GameState.COMPUTER_WINS: "🤖 Computer wins! Better luck next time!",
    GameState.DRAW: "🤝 It's a draw! Good game!",
}


class ConsoleGame:
    """
    Console front end for the engine.

    Game flow:
    1. Human types "row col" (0-2 each)
    2. Engine plays the move and the computer's reply
    3. Board is printed
    4. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        input_fn: Callable[[str], str] = input
    ):
        """
        Initialize the console game.

        Args:
            config: Game configuration.
            input_fn: Reads one line of input (input() by default).
        """
        self.config = config or GameConfig()
        self.input_fn = input_fn
        self.engine: GameEngine = new_game(self.config)

    def start(self) -> Optional[GameState]:
        """
        Play one game.

        Returns:
            The final state, or None if the human quit.
        """
        print("\n" + "="*60)
        print("   Tic-Tac-Toe - You are X, the computer is O")
        print("   Enter moves as 'row col' (0-2), 'q' to quit")
        print("="*60)

        self.engine.board.print_board()

        while not self.engine.is_game_over:
            try:
                line = self.input_fn("\nYour move: ")
            except EOFError:
                print("\nGame quit.")
                return None

            if line.strip().lower() in ("q", "quit", "exit"):
                print("\nGame quit by user.")
                return None

            move = parse_move(line)
            if move is None:
                print("Please enter two numbers, e.g. '1 2'.")
                continue

            result = self.engine.submit_player_move(*move)
            if not result.accepted:
                print(f"WARNING: {result.error}")
                continue

            if result.computer_move is not None:
                print(f">>> Computer plays ({result.computer_move.row}, {result.computer_move.col})")

            self.engine.board.print_board()

        self._show_game_result()
        return self.engine.state

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "="*60)
        print("   GAME OVER!")
        print("="*60)
        print("\n" + RESULT_TEXT[self.engine.state])


def parse_move(line: str) -> Optional[Tuple[int, int]]:
    """
    Parse "row col" (or "row,col") into a pair of ints.

    Returns:
        (row, col), or None if the text isn't two integers.
    """
    parts = line.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return (int(parts[0]), int(parts[1]))
    except ValueError:
        return None


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Tic-Tac-Toe against a minimax computer")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print engine and AI diagnostics"
    )

    args = parser.parse_args()
    config = GameConfig(verbose=args.verbose)

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(config=config)
        ui.run()
        return

    # Console mode (--no-ui)
    game = ConsoleGame(config=config)
    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
