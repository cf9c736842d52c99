"""
Move selection for the computer opponent.

A fixed-priority heuristic, first match wins:

    1. WIN     - a move that completes a line for the mover
    2. BLOCK   - a move that takes the opponent's completing cell
    3. CENTER  - position 5
    4. CORNER  - 1, 3, 7, 9 in that order
    5. ANY     - first empty position

Within each tier the lowest position wins, so the choice is fully
deterministic. This is deliberately not a full game-tree search and
can be beaten.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, NamedTuple, Optional

import numpy as np

from tictactoe.core.errors import NoLegalMoves
from tictactoe.core.types import CENTER, CORNERS, EMPTY, Mark
from tictactoe.games import game_rules
from tictactoe.games.game_state import GameState

logger = logging.getLogger(__name__)


class Reason(Enum):
    WIN = "win"
    BLOCK = "block"
    CENTER = "center"
    CORNER = "corner"
    ANY = "any"


class Decision(NamedTuple):
    position: int
    reason: Reason


def completing_move(board: np.ndarray, mark: Mark) -> Optional[int]:
    """
    Lowest empty position where placing `mark` wins for `mark`.

    Each candidate is tried on a throwaway copy of the board.
    """
    for position in game_rules.empty_positions(board):
        trial = game_rules.with_mark(board, position, mark)
        if game_rules.has_won(trial, mark):
            return position
    return None


def first_empty(board: np.ndarray, positions: Iterable[int]) -> Optional[int]:
    """First of `positions` (in the given order) that is empty."""
    for position in positions:
        row, col = game_rules.to_cell(position)
        if board[row, col] == EMPTY:
            return position
    return None


def explain_move(state: GameState) -> Decision:
    """
    Pick the move for `state.to_move` and say which tier produced it.

    Raises:
        NoLegalMoves: the round is over or the board is full.
    """
    if state.status.is_terminal:
        raise NoLegalMoves(f"Round is already decided: {state.status}")

    board = state.board
    mover = state.to_move

    position = completing_move(board, mover)
    if position is not None:
        return Decision(position, Reason.WIN)

    position = completing_move(board, mover.opponent)
    if position is not None:
        return Decision(position, Reason.BLOCK)

    if first_empty(board, (CENTER,)) is not None:
        return Decision(CENTER, Reason.CENTER)

    position = first_empty(board, CORNERS)
    if position is not None:
        return Decision(position, Reason.CORNER)

    position = first_empty(board, range(1, 10))
    if position is not None:
        return Decision(position, Reason.ANY)

    raise NoLegalMoves("Board is full")


def choose_move(state: GameState) -> int:
    """Return the position the mover should play."""
    decision = explain_move(state)
    logger.debug(
        "%s plays %d (%s)", state.to_move.symbol, decision.position, decision.reason.value
    )
    return decision.position
