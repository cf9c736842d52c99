"""
TicTacToe rules engine.

Pure functions over GameState: nothing here performs I/O or keeps state
between calls. apply_move never modifies the state it is given; it either
raises a MoveError or returns a new state.
"""

from __future__ import annotations

from typing import List, Union

import numpy as np

from tictactoe.core.errors import CellOccupied, GameAlreadyOver, PositionOutOfRange
from tictactoe.core.types import EMPTY, Mark, Status
from tictactoe.games import game_rules
from tictactoe.games.game_state import GameState


def new_game() -> GameState:
    """Empty board, X to move, in progress."""
    return GameState(game_rules.empty_board(), Mark.X, Status.in_progress())


def evaluate(state: Union[GameState, np.ndarray]) -> Status:
    """
    Recompute the status from the board contents alone.

    Whose turn it is plays no part. On boards legal play can reach at most
    one mark owns a line; if both do, X is reported.
    """
    board = state.board if isinstance(state, GameState) else np.asarray(state).reshape(3, 3)
    return game_rules.status_of(board)


def has_won(state: Union[GameState, np.ndarray], mark: Mark) -> bool:
    board = state.board if isinstance(state, GameState) else np.asarray(state).reshape(3, 3)
    return game_rules.has_won(board, mark)


def valid_moves(state: GameState) -> List[int]:
    """Empty positions in ascending order; none once the round is over."""
    if state.status.is_terminal:
        return []
    return game_rules.empty_positions(state.board)


def apply_move(state: GameState, position: int) -> GameState:
    """
    Place the mover's mark at `position` and return the resulting state.

    Raises:
        GameAlreadyOver: the round already has a winner or is drawn.
        PositionOutOfRange: position is not an integer in 1..9.
        CellOccupied: the target cell already holds a mark.

    The status is computed for the mark that just moved, before the turn
    passes, so callers never need to look back at who played.
    """
    if state.status.is_terminal:
        raise GameAlreadyOver()

    if not game_rules.in_bounds(position):
        raise PositionOutOfRange(position)
    position = int(position)

    if state.cell(position) != EMPTY:
        raise CellOccupied(position)

    mover = state.to_move
    board = game_rules.with_mark(state.board, position, mover)

    if game_rules.has_won(board, mover):
        status = Status.won(mover)
    elif game_rules.board_full(board):
        status = Status.draw()
    else:
        status = Status.in_progress()

    return GameState(board, mover.opponent, status)
