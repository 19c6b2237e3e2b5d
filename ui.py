"""
Tic-Tac-Toe UI
A graphical interface for playing against the computer using Tkinter.

Shows:
- The board (click a cell to place X)
- Game status
- New game / save image / quit controls
"""

import tkinter as tk
from tkinter import messagebox, ttk
from typing import Optional

from PIL import ImageTk

from display import BoardRenderer, DisplayConfig
from logic import GameConfig, GameEngine, GameState, MoveResult, new_game


class TicTacToeUI:
    """
    Main UI class for Tic-Tac-Toe.

    The window only forwards clicks to the engine and draws what the
    engine reports back.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        display_config: Optional[DisplayConfig] = None
    ):
        """Initialize the UI."""
        self.config = config or GameConfig()
        self.display_config = display_config or DisplayConfig()
        self.renderer = BoardRenderer(self.display_config)
        self.engine: GameEngine = new_game(self.config)

        # Create UI
        self._create_ui()
        self._update_display()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(self.display_config.WINDOW_TITLE)
        self.root.configure(bg=self.display_config.WINDOW_BG)
        self.root.resizable(False, False)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=self.display_config.WINDOW_BG)
        style.configure('Status.TLabel', background=self.display_config.WINDOW_BG,
                        foreground='#ffd700', font=self.display_config.STATUS_FONT)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Board canvas
        size = self.display_config.BOARD_PIXELS
        self.board_canvas = tk.Canvas(main_frame, width=size, height=size,
                                      highlightthickness=0, cursor='hand2')
        self.board_canvas.pack()
        self.board_canvas.bind("<Button-1>", self._on_click)

        # Game status
        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=10)

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack()

        buttons = [
            ("New Game", '#10b981', self._new_game),
            ("Save Image", '#6366f1', self._save_image),
            ("Quit", '#ef4444', self._quit),
        ]
        for text, color, command in buttons:
            tk.Button(
                control_frame,
                text=text,
                font=self.display_config.FONT,
                bg=color,
                fg='white',
                width=9,
                command=command
            ).pack(side=tk.LEFT, padx=4)

        # Keyboard shortcuts
        self.root.bind("n", lambda event: self._new_game())
        self.root.bind("s", lambda event: self._save_image())
        self.root.bind("q", lambda event: self._quit())

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_click(self, event):
        """Forward a board click to the engine."""
        cell = self.renderer.cell_at(event.x, event.y)
        if cell is None:
            return

        result = self.engine.submit_player_move(*cell)
        if not result.accepted:
            # Clicks on filled cells or after the game are ignored
            return

        self._update_display()

        if result.state.is_terminal:
            self._show_game_result(result)

    def _update_display(self):
        """Redraw the board and the status line."""
        image = self.renderer.render(self.engine.snapshot(), self.engine.winning_line)
        photo = ImageTk.PhotoImage(image)

        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        self.board_canvas.image = photo  # Keep reference

        self.status_label.configure(text=self._status_text(self.engine.state))

    def _status_text(self, state: GameState) -> str:
        if state.is_terminal:
            return self.display_config.RESULT_MESSAGES[state.value]
        return self.display_config.IN_PROGRESS_MESSAGE

    def _show_game_result(self, result: MoveResult):
        """Show the game-over dialog."""
        message = self.display_config.RESULT_MESSAGES[result.state.value]
        print(message)
        messagebox.showinfo(self.display_config.WINDOW_TITLE, message, parent=self.root)

    def _new_game(self):
        """Throw the old engine away and start over."""
        print("Starting new game...")
        self.engine = new_game(self.config)
        self._update_display()

    def _save_image(self):
        """Save the current board as PNG."""
        self.renderer.save(self.engine.snapshot(), winning_line=self.engine.winning_line)

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Tic-Tac-Toe UI")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print engine and AI diagnostics"
    )

    args = parser.parse_args()

    ui = TicTacToeUI(config=GameConfig(verbose=args.verbose))
    ui.run()


if __name__ == "__main__":
    main()
