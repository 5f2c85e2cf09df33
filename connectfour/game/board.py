"""
board.py - Board representation for Connect Four

This module implements the Board class: a 7x6 grid of cells addressed as
(column, row) with row 0 at the bottom. Pieces fall to the lowest empty row of
a column, so within any column the occupied cells always form one run starting
at the floor.
"""

from typing import Any, List, Optional, Tuple

import numpy as np

from connectfour.debug import debug, DebugLevel
from connectfour.utils import (ROWS, COLS, EMPTY, is_valid_position,
                               render_board_ascii, to_column_label)


class OutOfRangeError(IndexError):
    """Raised when a cell or column outside the 7x6 grid is addressed."""


class Board:
    """
    Represents a Connect Four game board.

    Cells hold either EMPTY or the mark of the player occupying them. Marks are
    opaque; any comparable value (usually a one-character string) works.
    """

    def __init__(self):
        """Initialize an empty Connect Four board."""
        debug.trace("Initializing new Board", "board")
        self.grid = np.full((COLS, ROWS), EMPTY, dtype=object)
        self.last_move: Optional[Tuple[int, int]] = None

    @classmethod
    def empty(cls) -> 'Board':
        """Create a new board with every cell empty."""
        return cls()

    def copy(self) -> 'Board':
        """
        Create a copy of the current board.

        Returns:
            A new Board instance with the same cells
        """
        new_board = Board()
        new_board.grid = self.grid.copy()
        new_board.last_move = self.last_move
        return new_board

    def cell_at(self, col: int, row: int) -> Any:
        """
        Get the content of a cell.

        Args:
            col: Column index (0-6)
            row: Row index (0-5, 0 is the bottom)

        Returns:
            The mark occupying the cell, or EMPTY

        Raises:
            OutOfRangeError: If the position is outside the grid
        """
        if not is_valid_position(col, row):
            raise OutOfRangeError(f"cell ({col}, {row}) is outside the {COLS}x{ROWS} board")
        return self.grid[col, row]

    def _check_column(self, col: int) -> None:
        if not 0 <= col < COLS:
            raise OutOfRangeError(f"column {col} is outside the {COLS}-column board")

    def is_column_full(self, col: int) -> bool:
        self._check_column(col)
        return self.grid[col, ROWS - 1] is not EMPTY

    def next_open_row(self, col: int) -> Optional[int]:
        """Lowest empty row in a column, or None if the column is full."""
        self._check_column(col)
        for row in range(ROWS):
            if self.grid[col, row] is EMPTY:
                return row
        return None

    def available_columns(self) -> List[str]:
        """
        Get the columns that can still take a piece.

        Returns:
            1-based column labels ("1".."7") in ascending order; empty when the
            board is full
        """
        return [to_column_label(col) for col in range(COLS) if not self.is_column_full(col)]

    def is_full(self) -> bool:
        return not self.available_columns()

    def drop(self, mark: Any, column: int) -> 'Board':
        """
        Drop a piece into a column.

        The piece lands in the lowest empty row. Dropping into a full column
        leaves the board untouched.

        Args:
            mark: Mark of the player making the move
            column: The column to play (0-indexed)

        Returns:
            This board

        Raises:
            OutOfRangeError: If the column is not 0-6
        """
        row = self.next_open_row(column)
        if row is None:
            debug.warning(f"Ignoring drop of {mark!r} into full column {column}", "board")
            return self

        debug.debug(f"Placing {mark!r} at ({column}, {row})", "board")
        self.grid[column, row] = mark
        self.last_move = (column, row)
        return self

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    __hash__ = None

    def render(self) -> str:
        """
        Render the board as a string.

        Returns:
            String representation of the board
        """
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()


if __name__ == "__main__":
    debug.configure(level=DebugLevel.DEBUG)

    board = Board()
    for col, mark in [(3, "X"), (3, "O"), (4, "X"), (2, "O")]:
        board.drop(mark, col)
    print(board)
    print(f"Available columns: {board.available_columns()}")
