"""
Tests for tictactoe.games.game_rules

NumPy board helpers.
"""

import numpy as np
import pytest

from tictactoe.core.types import Mark
from tictactoe.games import game_rules
from tictactoe.games.game_rules import (
    WIN_LINES, empty_board, in_bounds, to_cell, to_position,
    empty_positions, has_won, winning_marks, board_full, count_marks, with_mark,
)


def _board(cells):
    return np.array(cells, dtype=np.int8).reshape(3, 3)


class TestWinLines:

    def test_eight_lines(self):
        assert WIN_LINES.shape == (8, 3)

    def test_every_cell_covered(self):
        assert set(WIN_LINES.ravel().tolist()) == set(range(9))


class TestPositionMapping:

    @pytest.mark.parametrize("position,cell", [
        (1, (0, 0)), (3, (0, 2)), (5, (1, 1)), (7, (2, 0)), (9, (2, 2)),
    ])
    def test_to_cell(self, position, cell):
        assert to_cell(position) == cell

    def test_round_trip(self):
        for position in range(1, 10):
            assert to_position(*to_cell(position)) == position

    @pytest.mark.parametrize("value,expected", [
        (1, True), (9, True), (np.int64(5), True),
        (0, False), (10, False), (-3, False),
        (True, False), (5.0, False), ("5", False), (None, False),
    ])
    def test_in_bounds(self, value, expected):
        assert in_bounds(value) is expected


class TestBoardQueries:

    def test_empty_board(self):
        board = empty_board()
        assert board.shape == (3, 3)
        assert board.dtype == np.int8
        assert empty_positions(board) == list(range(1, 10))

    def test_empty_positions_ascending(self):
        board = _board([1, 0, 2, 0, 1, 0, 0, 2, 0])
        assert empty_positions(board) == [2, 4, 6, 7, 9]

    def test_has_won_row(self):
        board = _board([2, 2, 2, 1, 1, 0, 1, 0, 0])
        assert has_won(board, Mark.O)
        assert not has_won(board, Mark.X)

    def test_winning_marks(self):
        assert winning_marks(_board([1, 1, 1, 2, 2, 0, 0, 0, 0])) == [Mark.X]
        assert winning_marks(empty_board()) == []

    def test_board_full(self):
        assert board_full(_board([1, 2, 1, 1, 2, 2, 2, 1, 1]))
        assert not board_full(_board([1, 2, 1, 1, 2, 2, 2, 1, 0]))

    def test_count_marks(self):
        board = _board([1, 2, 1, 0, 0, 0, 0, 0, 0])
        assert count_marks(board, Mark.X) == 2
        assert count_marks(board, Mark.O) == 1


class TestWithMark:

    def test_returns_copy(self):
        """The board passed in is untouched."""
        board = empty_board()
        new_board = with_mark(board, 5, Mark.X)
        assert new_board[1, 1] == 1
        assert board[1, 1] == 0

    def test_works_on_read_only_board(self):
        board = empty_board()
        board.flags.writeable = False
        new_board = with_mark(board, 1, Mark.O)
        assert new_board[0, 0] == 2
        assert new_board.flags.writeable


def test_module_exports_helpers():
    """The games package re-exports the common helpers."""
    from tictactoe import games
    assert games.in_bounds is game_rules.in_bounds
    assert games.board_full is game_rules.board_full
