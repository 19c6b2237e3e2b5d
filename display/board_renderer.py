"""
Board renderer for Tic-Tac-Toe.
Draws a board snapshot as a Pillow image.
"""

import time
from pathlib import Path
from typing import List, Optional, Tuple

from PIL import Image, ImageDraw

from logic.board import BOARD_SIZE, BoardSnapshot, Cell
from .config import DisplayConfig


class BoardRenderer:
    """
    Draws the 3x3 grid, the X/O marks and the winning line.

    The same geometry is used to map a click position back to a cell.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Display configuration. Uses defaults if not provided.
        """
        self.config = config or DisplayConfig()
        self.size = self.config.BOARD_PIXELS
        self.cell_size = self.size / BOARD_SIZE

    def render(
        self,
        board: BoardSnapshot,
        winning_line: Optional[List[Tuple[int, int]]] = None
    ) -> Image.Image:
        """
        Render a board snapshot.

        Args:
            board: 3x3 snapshot of cells.
            winning_line: Cells to highlight, or None.

        Returns:
            RGB image of BOARD_PIXELS x BOARD_PIXELS.
        """
        image = Image.new("RGB", (self.size, self.size), self.config.BOARD_COLOR)
        draw = ImageDraw.Draw(image)

        # Highlight winning cells first so grid and marks stay on top
        for row, col in winning_line or []:
            draw.rectangle(self.cell_box(row, col), fill=self.config.WIN_HIGHLIGHT_COLOR)

        # Grid lines
        for i in range(1, BOARD_SIZE):
            offset = int(i * self.cell_size)
            draw.line([(offset, 0), (offset, self.size)],
                      fill=self.config.GRID_COLOR, width=self.config.GRID_LINE_WIDTH)
            draw.line([(0, offset), (self.size, offset)],
                      fill=self.config.GRID_COLOR, width=self.config.GRID_LINE_WIDTH)

        # Marks
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                cell = board[row][col]
                if cell == Cell.PLAYER:
                    self._draw_x(draw, row, col)
                elif cell == Cell.COMPUTER:
                    self._draw_o(draw, row, col)

        return image

    def cell_box(self, row: int, col: int) -> Tuple[int, int, int, int]:
        """Pixel box (x0, y0, x1, y1) covering a cell."""
        x0 = int(col * self.cell_size)
        y0 = int(row * self.cell_size)
        x1 = int((col + 1) * self.cell_size) - 1
        y1 = int((row + 1) * self.cell_size) - 1
        return (x0, y0, x1, y1)

    def cell_at(self, x: float, y: float) -> Optional[Tuple[int, int]]:
        """
        Map a pixel position on the board image to a cell.

        Returns:
            (row, col), or None if the position is off the board.
        """
        if not (0 <= x < self.size and 0 <= y < self.size):
            return None
        return (int(y // self.cell_size), int(x // self.cell_size))

    def save(
        self,
        board: BoardSnapshot,
        path: Optional[str] = None,
        winning_line: Optional[List[Tuple[int, int]]] = None
    ) -> Path:
        """
        Render a board and write it as PNG.

        Args:
            board: Snapshot to render.
            path: Output file. Defaults to SCREENSHOT_PATTERN in the cwd.
            winning_line: Cells to highlight, or None.

        Returns:
            Path of the written file.
        """
        if path is None:
            path = self.config.SCREENSHOT_PATTERN.format(timestamp=int(time.time()))
        path = Path(path)

        self.render(board, winning_line).save(path, format="PNG")
        print(f"Saved: {path}")
        return path

    def _mark_box(self, row: int, col: int) -> Tuple[int, int, int, int]:
        x0, y0, x1, y1 = self.cell_box(row, col)
        pad = int(self.cell_size * self.config.MARK_PADDING)
        return (x0 + pad, y0 + pad, x1 - pad, y1 - pad)

    def _draw_x(self, draw: ImageDraw.ImageDraw, row: int, col: int):
        # Two crossing lines
        x0, y0, x1, y1 = self._mark_box(row, col)
        width = self.config.MARK_LINE_WIDTH
        draw.line([(x0, y0), (x1, y1)], fill=self.config.PLAYER_COLOR, width=width)
        draw.line([(x1, y0), (x0, y1)], fill=self.config.PLAYER_COLOR, width=width)

    def _draw_o(self, draw: ImageDraw.ImageDraw, row: int, col: int):
        draw.ellipse(self._mark_box(row, col),
                     outline=self.config.COMPUTER_COLOR, width=self.config.MARK_LINE_WIDTH)
