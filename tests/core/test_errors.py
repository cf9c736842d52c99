"""
Tests for tictactoe.core.errors
"""

import pytest

from tictactoe.core.errors import (
    TicTacToeError, MoveError,
    PositionOutOfRange, CellOccupied, GameAlreadyOver,
    NoLegalMoves, InvalidBoard,
)


class TestHierarchy:

    @pytest.mark.parametrize("exc", [
        PositionOutOfRange(10),
        CellOccupied(5),
        GameAlreadyOver(),
    ])
    def test_move_errors_are_value_errors(self, exc):
        """Rejected moves can be caught as MoveError or ValueError."""
        assert isinstance(exc, MoveError)
        assert isinstance(exc, ValueError)
        assert isinstance(exc, TicTacToeError)

    def test_no_legal_moves_is_runtime_error(self):
        exc = NoLegalMoves("full")
        assert isinstance(exc, RuntimeError)
        assert not isinstance(exc, MoveError)

    def test_invalid_board_is_value_error(self):
        assert isinstance(InvalidBoard("bad"), ValueError)


class TestMessages:

    def test_out_of_range_keeps_position(self):
        exc = PositionOutOfRange(12)
        assert exc.position == 12
        assert str(exc) == "Invalid position! Please enter a number between 1 and 9."

    def test_occupied_keeps_position(self):
        exc = CellOccupied(4)
        assert exc.position == 4
        assert str(exc) == "Position already occupied! Choose another position."

    def test_game_over_message(self):
        assert "over" in str(GameAlreadyOver())
