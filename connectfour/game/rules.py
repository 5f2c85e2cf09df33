"""
rules.py - Win detection for Connect Four

A player wins with CONNECT_N matching marks in a straight line. The check
walks out from every occupied cell along the eight compass directions; each
line is therefore seen from both of its ends, which keeps the walk simple.
"""

from connectfour.debug import debug
from connectfour.game.board import Board
from connectfour.utils import (CONNECT_N, COLS, DIRECTION_VECTORS, EMPTY, NO_WINNER,
                               ROWS, Outcome, is_valid_position)


def check_cell_for_winner(board: Board, col: int, row: int) -> Outcome:
    """
    Check whether a line of four starts at the given cell.

    Every step of the walk must land inside the grid and on the origin's mark.
    A step that leaves the grid ends the walk for that direction.

    Args:
        board: Board to inspect
        col: Column of the origin cell
        row: Row of the origin cell

    Returns:
        Outcome carrying the origin's mark on a win, NO_WINNER otherwise
    """
    mark = board.cell_at(col, row)
    if mark is EMPTY:
        return NO_WINNER

    for d_col, d_row in DIRECTION_VECTORS:
        for step in range(1, CONNECT_N):
            next_col = col + d_col * step
            next_row = row + d_row * step
            if not is_valid_position(next_col, next_row):
                break
            if board.grid[next_col, next_row] != mark:
                break
        else:
            debug.debug(f"{mark!r} has four from ({col}, {row}) along ({d_col}, {d_row})", "rules")
            return Outcome(mark)

    return NO_WINNER


def check_for_winner(board: Board) -> Outcome:
    """
    Scan the whole board for a winner.

    Cells are visited column by column, bottom row first; the first winning
    line found decides the result.

    Returns:
        Outcome with the winning mark, or NO_WINNER
    """
    debug.start_timer("win_check")
    try:
        for col in range(COLS):
            for row in range(ROWS):
                outcome = check_cell_for_winner(board, col, row)
                if outcome.is_win:
                    return outcome
        return NO_WINNER
    finally:
        debug.end_timer("win_check", "rules")
