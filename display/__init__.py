"""
Display module for Tic-Tac-Toe.
Turns board snapshots into images for the window and for saving.
"""

from .config import DisplayConfig
from .board_renderer import BoardRenderer
