"""
Board model for Tic-Tac-Toe.
Stores the 3x3 grid of cells and answers simple questions about it.
"""

import numbers
from contextlib import contextmanager
from enum import IntEnum
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .config import GameConfig
from .errors import CellOccupiedError, InvalidCellError


BOARD_SIZE = GameConfig.BOARD_SIZE


class Cell(IntEnum):
    """State of a single board cell."""
    EMPTY = 0
    PLAYER = 1
    COMPUTER = 2

    def opposite(self) -> "Cell":
        """Get the other side's mark."""
        if self == Cell.EMPTY:
            raise ValueError("EMPTY has no opposite")
        return Cell.COMPUTER if self == Cell.PLAYER else Cell.PLAYER

    @property
    def symbol(self) -> str:
        """Display symbol for this cell ("X", "O" or "")."""
        return _SYMBOLS[self]


# Display symbols (fixed, not configurable)
PLAYER_MARK = "X"      # Human always moves first
COMPUTER_MARK = "O"
EMPTY_MARK = ""

_SYMBOLS = {
    Cell.EMPTY: EMPTY_MARK,
    Cell.PLAYER: PLAYER_MARK,
    Cell.COMPUTER: COMPUTER_MARK,
}

# Characters accepted by Board.from_rows()
_PARSE = {
    "X": Cell.PLAYER,
    "O": Cell.COMPUTER,
    " ": Cell.EMPTY,
    ".": Cell.EMPTY,
    "": Cell.EMPTY,
}


# All possible winning lines (as list of (row, col) tuples)
WINNING_LINES = [
    # Rows
    [(0, 0), (0, 1), (0, 2)],
    [(1, 0), (1, 1), (1, 2)],
    [(2, 0), (2, 1), (2, 2)],
    # Columns
    [(0, 0), (1, 0), (2, 0)],
    [(0, 1), (1, 1), (2, 1)],
    [(0, 2), (1, 2), (2, 2)],
    # Diagonals
    [(0, 0), (1, 1), (2, 2)],
    [(0, 2), (1, 1), (2, 0)],
]

# Same lines as flat indices into the raveled grid
_LINES = tuple(
    tuple(row * BOARD_SIZE + col for row, col in line) for line in WINNING_LINES
)

BoardSnapshot = Tuple[Tuple[Cell, ...], ...]


def is_valid_position(row, col) -> bool:
    """True if (row, col) are integers naming a cell on the board."""
    for value in (row, col):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            return False
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


class Board:
    """
    The 3x3 Tic-Tac-Toe grid.

    Cells are stored as a numpy int8 array holding Cell values.
    The board is mutated in place; use copy() or snapshot() to keep
    a record of a position.
    """

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize the board.

        Args:
            grid: Optional 3x3 array of Cell values. Empty board if not given.
        """
        if grid is None:
            grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        else:
            grid = np.array(grid, dtype=np.int8)
            if grid.shape != (BOARD_SIZE, BOARD_SIZE):
                raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}, got {grid.shape}")
        self._grid = grid
        # Flat view sharing memory with _grid
        self._flat = grid.reshape(-1)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]]) -> "Board":
        """
        Build a board from text rows, e.g. ["XO ", " X ", "  O"].

        "X" is the player, "O" the computer, " " or "." an empty cell.
        """
        grid = [[_PARSE[str(ch).upper()] for ch in row] for row in rows]
        return cls(grid)

    # ---------------------------------------------------------------- queries

    def get(self, row: int, col: int) -> Cell:
        """Get the state of a cell."""
        self._check_bounds(row, col)
        return Cell(self._flat.item(row * BOARD_SIZE + col))

    def is_empty(self, row: int, col: int) -> bool:
        """True if the cell holds no mark."""
        return self.get(row, col) == Cell.EMPTY

    def is_full(self) -> bool:
        """True if no cell is empty."""
        return Cell.EMPTY not in self._flat.tolist()

    def has_line(self, mark: Cell) -> bool:
        """
        Check all 8 lines (3 rows, 3 columns, 2 diagonals) for `mark`.

        Args:
            mark: PLAYER or COMPUTER.

        Returns:
            True if any line is filled entirely with `mark`.
        """
        # Runs at every search node, so work on a plain list
        cells = self._flat.tolist()
        return any(
            cells[a] == mark and cells[b] == mark and cells[c] == mark
            for a, b, c in _LINES
        )

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells in row-major order.

        Returns:
            List of (row, col) tuples.
        """
        return [
            divmod(index, BOARD_SIZE)
            for index, value in enumerate(self._flat.tolist())
            if value == Cell.EMPTY
        ]

    def count(self, mark: Cell) -> int:
        """Number of cells holding `mark`."""
        return int((self._grid == mark).sum())

    # ---------------------------------------------------------------- mutation

    def place(self, row: int, col: int, mark: Cell):
        """
        Place a mark on an empty cell.

        Raises:
            InvalidCellError: If (row, col) is off the board.
            CellOccupiedError: If the cell already holds a mark.
        """
        if mark == Cell.EMPTY:
            raise ValueError("Cannot place EMPTY; use clear()")
        self._check_bounds(row, col)
        index = row * BOARD_SIZE + col
        if self._flat.item(index) != Cell.EMPTY:
            raise CellOccupiedError(
                f"Cell ({row}, {col}) is already occupied by {self.get(row, col).symbol}",
                row, col
            )
        self._flat[index] = int(mark)

    def clear(self, row: int, col: int):
        """Set a cell back to empty. Only used while searching."""
        self._check_bounds(row, col)
        self._flat[row * BOARD_SIZE + col] = int(Cell.EMPTY)

    @contextmanager
    def speculate(self, row: int, col: int, mark: Cell) -> Iterator["Board"]:
        """
        Place a mark for the duration of a `with` block.

        The cell is cleared again on every exit path, so the board is
        restored exactly even if the block raises.
        """
        self.place(row, col, mark)
        try:
            yield self
        finally:
            self.clear(row, col)

    # ---------------------------------------------------------------- copies

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        return Board(self._grid.copy())

    def snapshot(self) -> BoardSnapshot:
        """Read-only view of the grid for rendering."""
        return tuple(tuple(Cell(int(v)) for v in row) for row in self._grid)

    def tobytes(self) -> bytes:
        """Raw grid bytes, handy for exact comparisons."""
        return self._grid.tobytes()

    # ---------------------------------------------------------------- helpers

    def _check_bounds(self, row: int, col: int):
        if not is_valid_position(row, col):
            raise InvalidCellError(
                f"Invalid position ({row!r}, {col!r}). Must be 0-{BOARD_SIZE - 1}.",
                row, col
            )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._grid, other._grid))

    def __repr__(self) -> str:
        rows = ["".join(Cell(int(v)).symbol or "." for v in row) for row in self._grid]
        return f"Board({rows!r})"

    def __str__(self) -> str:
        lines = []
        for r, row in enumerate(self._grid):
            lines.append(" | ".join(Cell(int(v)).symbol or " " for v in row))
            if r < BOARD_SIZE - 1:
                lines.append("--+---+--")
        return "\n".join(lines)

    def print_board(self):
        """Print the board to console."""
        print("\n    0   1   2")
        print("  ┌───┬───┬───┐")

        for row in range(BOARD_SIZE):
            row_str = "│"
            for col in range(BOARD_SIZE):
                symbol = self.get(row, col).symbol or " "
                row_str += f" {symbol} │"
            print(f"{row} {row_str}")

            if row < BOARD_SIZE - 1:
                print("  ├───┼───┼───┤")

        print("  └───┴───┴───┘")
