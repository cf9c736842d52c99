"""
GameState - immutable game state container.

The board is an int8 array that is locked read-only on construction, so a
state handed to the advisor or renderer can never be changed underneath the
driver. Transitions build a new state from a board copy.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from tictactoe.core.errors import InvalidBoard
from tictactoe.core.types import CELL_STRINGS, Mark, Status
from tictactoe.games import game_rules


class GameState:
    """
    Snapshot of one round.

        board    - (3, 3) int8, 0 = empty, 1 = X, 2 = O
        to_move  - the Mark whose turn it is
        status   - InProgress, Won(mark) or Draw; read from the board when omitted
    """
    __slots__ = ('board', 'to_move', 'status')

    def __init__(
        self,
        board: np.ndarray,
        to_move: Mark = Mark.X,
        status: Optional[Status] = None,
    ):
        board = np.array(board, dtype=np.int8).reshape(3, 3)
        board.flags.writeable = False
        self.board = board
        self.to_move = Mark(to_move)
        self.status = status if status is not None else game_rules.status_of(board)

    @classmethod
    def from_board(cls, board) -> "GameState":
        """
        Build a state from a raw layout (3x3 or flat 9, values 0/1/2).

        The mover is derived from the mark counts and the status from the
        board contents. Raises InvalidBoard for layouts legal play cannot
        produce.
        """
        try:
            arr = np.array(board, dtype=np.int8).reshape(3, 3)
        except ValueError as e:
            raise InvalidBoard(f"Board must have 9 cells: {e}") from e

        if not np.isin(arr, (0, 1, 2)).all():
            raise InvalidBoard("Cells must be 0 (empty), 1 (X) or 2 (O)")

        x_count = game_rules.count_marks(arr, Mark.X)
        o_count = game_rules.count_marks(arr, Mark.O)
        if x_count not in (o_count, o_count + 1):
            raise InvalidBoard(
                f"Impossible mark counts: X={x_count}, O={o_count}"
            )
        if len(game_rules.winning_marks(arr)) > 1:
            raise InvalidBoard("Both marks have a complete line")

        to_move = Mark.O if x_count == o_count + 1 else Mark.X
        return cls(arr, to_move)

    def copy(self) -> "GameState":
        """Independent copy. The board is copied, status is an immutable tuple."""
        return GameState(self.board.copy(), self.to_move, self.status)

    def cell(self, position: int) -> int:
        row, col = game_rules.to_cell(position)
        return int(self.board[row, col])

    def __eq__(self, other) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (
            np.array_equal(self.board, other.board)
            and self.to_move == other.to_move
            and self.status == other.status
        )

    def __hash__(self) -> int:
        return hash((self.board.tobytes(), self.to_move, self.status))

    def __repr__(self) -> str:
        cells = "".join(CELL_STRINGS[int(v)] if v else "." for v in self.board.ravel())
        return f"GameState(board={cells!r}, to_move={self.to_move.symbol}, status={self.status})"
