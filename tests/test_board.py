"""Unit tests for the board: geometry, gravity, available columns."""

import pytest

from connectfour.game.board import Board, OutOfRangeError
from connectfour.utils import COLS, EMPTY, ROWS


def fill_column(board, col, mark="x"):
    for _ in range(ROWS):
        board.drop(mark, col)


class TestEmptyBoard:
    def test_dimensions(self):
        board = Board.empty()
        assert board.grid.shape == (COLS, ROWS) == (7, 6)

    def test_all_cells_empty(self):
        board = Board.empty()
        assert all(board.cell_at(col, row) is EMPTY
                   for col in range(COLS) for row in range(ROWS))

    def test_boards_are_independent(self):
        first = Board.empty()
        second = Board.empty()
        first.drop("x", 0)
        assert second.cell_at(0, 0) is EMPTY


class TestCellAt:
    def test_returns_mark(self):
        board = Board()
        board.drop("x", 3)
        assert board.cell_at(3, 0) == "x"

    @pytest.mark.parametrize("col,row", [(-1, 0), (0, -1), (COLS, 0), (0, ROWS), (10, 10)])
    def test_out_of_range(self, col, row):
        with pytest.raises(OutOfRangeError):
            Board().cell_at(col, row)

    def test_out_of_range_is_an_index_error(self):
        assert issubclass(OutOfRangeError, IndexError)


class TestDrop:
    def test_lands_on_floor_of_empty_column(self):
        board = Board()
        board.drop("x", 4)
        assert board.cell_at(4, 0) == "x"
        assert board.last_move == (4, 0)

    def test_stacks_in_partially_filled_column(self):
        board = Board()
        for _ in range(4):
            board.drop("x", 3)
        assert [board.cell_at(3, row) for row in range(ROWS)] == ["x", "x", "x", "x", EMPTY, EMPTY]

    def test_other_columns_unchanged(self):
        board = Board()
        board.drop("o", 2)
        before = board.copy()
        board.drop("x", 5)
        for col in range(COLS):
            if col != 5:
                assert list(board.grid[col]) == list(before.grid[col])

    def test_returns_board(self):
        board = Board()
        assert board.drop("x", 0) is board

    def test_full_column_is_noop(self):
        board = Board()
        fill_column(board, 5)
        snapshot = board.copy()
        result = board.drop("o", 5)
        assert result is board
        assert result == snapshot
        assert board.last_move == (5, ROWS - 1)

    @pytest.mark.parametrize("col", [-1, COLS])
    def test_column_out_of_range(self, col):
        board = Board()
        with pytest.raises(OutOfRangeError):
            board.drop("x", col)
        with pytest.raises(OutOfRangeError):
            board.next_open_row(col)
        with pytest.raises(OutOfRangeError):
            board.is_column_full(col)
        assert board == Board.empty()

    def test_next_open_row(self):
        board = Board()
        assert board.next_open_row(1) == 0
        board.drop("x", 1)
        board.drop("o", 1)
        assert board.next_open_row(1) == 2
        fill_column(board, 1)
        assert board.next_open_row(1) is None
        assert board.is_column_full(1)


class TestAvailableColumns:
    def test_empty_board_offers_every_column(self):
        assert Board.empty().available_columns() == ["1", "2", "3", "4", "5", "6", "7"]

    def test_full_columns_are_skipped(self):
        board = Board()
        for label in (2, 3, 4):
            fill_column(board, label - 1)
        assert board.available_columns() == ["1", "5", "6", "7"]

    def test_full_board(self):
        board = Board()
        for col in range(COLS):
            fill_column(board, col)
        assert board.available_columns() == []
        assert board.is_full()


class TestCopyAndEquality:
    def test_copy_is_detached(self):
        board = Board()
        board.drop("x", 0)
        clone = board.copy()
        clone.drop("o", 0)
        assert board.cell_at(0, 1) is EMPTY
        assert board != clone

    def test_equal_boards(self):
        first, second = Board(), Board()
        first.drop("x", 6)
        second.drop("x", 6)
        assert first == second


class TestRender:
    def test_empty_board(self):
        lines = Board().render().splitlines()
        assert lines[:ROWS] == ["| | | | | | | |"] * ROWS
        assert lines[-1] == " 1 2 3 4 5 6 7"

    def test_bottom_row_drawn_last(self):
        board = Board()
        board.drop("X", 0)
        board.drop("O", 0)
        lines = str(board).splitlines()
        assert lines[ROWS - 1] == "|X| | | | | | |"
        assert lines[ROWS - 2] == "|O| | | | | | |"
