"""
utils.py - Constants and small helpers shared by the Connect Four modules

Board geometry, the direction vectors used by the win check, the Outcome
value, the default session vocabulary, and the ASCII board renderer.
"""

from typing import Any, NamedTuple, Optional

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win

# Value held by an unoccupied cell
EMPTY = None

# Session defaults
DEFAULT_PLAYERS = ("X", "O")
YES_ANSWERS = ("yes", "y")
NO_ANSWERS = ("no", "n")

# (delta column, delta row) for all eight compass directions
DIRECTION_VECTORS = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0), (1, 0),
    (-1, 1), (0, 1), (1, 1),
)


class Outcome(NamedTuple):
    """Result of a win check: the winning mark, or None when nobody won."""
    winner: Optional[Any] = None

    @property
    def is_win(self) -> bool:
        return self.winner is not None


NO_WINNER = Outcome()


def is_valid_position(col: int, row: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        col: Column index (0-based)
        row: Row index (0 is the bottom row)

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= col < COLS and 0 <= row < ROWS


def to_column_label(col: int) -> str:
    """0-based column index to the 1-based label shown to players."""
    return str(col + 1)


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a board grid as ASCII art.

    The top row is drawn first so pieces appear to rest on the floor. Cells are
    separated by '|', empty cells are blank and the footer numbers the columns
    from 1.

    Args:
        grid: Array indexed [col, row]

    Returns:
        ASCII representation of the board
    """
    lines = []
    for row in range(ROWS - 1, -1, -1):
        cells = []
        for col in range(COLS):
            cell = grid[col, row]
            cells.append(" " if cell is EMPTY else str(cell))
        lines.append("|" + "|".join(cells) + "|")

    lines.append("+" + "-" * (COLS * 2 - 1) + "+")
    lines.append(" " + " ".join(to_column_label(col) for col in range(COLS)))
    return "\n".join(lines)
