"""
Display configuration for Tic-Tac-Toe.
Window, board image and message settings for the presentation shell.
"""


class DisplayConfig:
    """
    Configuration class for the board image and the Tkinter window.
    """

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "Tic Tac Toe"
    WINDOW_BG = "#1a1a2e"

    # ==================== BOARD IMAGE SETTINGS ====================
    # Board is drawn as a square image, one third per cell
    BOARD_PIXELS = 300
    GRID_LINE_WIDTH = 4
    MARK_LINE_WIDTH = 8
    MARK_PADDING = 0.2      # Fraction of a cell left blank around a mark

    # Colours (RGB)
    BOARD_COLOR = (22, 33, 62)
    GRID_COLOR = (85, 85, 85)
    PLAYER_COLOR = (138, 202, 255)     # X
    COMPUTER_COLOR = (255, 138, 138)   # O
    WIN_HIGHLIGHT_COLOR = (6, 95, 70)

    # ==================== TEXT SETTINGS ====================
    FONT = ("Arial", 12, "bold")
    STATUS_FONT = ("Arial", 14, "bold")

    # Shown in the game-over dialog, keyed by GameState value
    RESULT_MESSAGES = {
        "player_wins": "Player wins!",
        "computer_wins": "Computer wins!",
        "draw": "It's a draw!",
    }
    IN_PROGRESS_MESSAGE = "Your move (X)"

    # ==================== SCREENSHOT SETTINGS ====================
    SCREENSHOT_PATTERN = "tictactoe_{timestamp}.png"
