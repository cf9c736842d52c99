"""
NumPy utilities for the 3x3 board.

Boards are int8 arrays of shape (3, 3): 0 = empty, 1 = X, 2 = O.
All helpers are read-only; nothing here writes to a board it is given.
"""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from tictactoe.core.types import EMPTY, Mark, POSITIONS, Status

# Pre-computed winning lines (indices into flattened 3x3 board)
WIN_LINES = np.array([
    [0, 1, 2], [3, 4, 5], [6, 7, 8],  # rows
    [0, 3, 6], [1, 4, 7], [2, 5, 8],  # cols
    [0, 4, 8], [2, 4, 6],             # diagonals
], dtype=np.int8)


def empty_board() -> np.ndarray:
    return np.zeros((3, 3), dtype=np.int8)


def in_bounds(position) -> bool:
    """Return True if position is an integer in 1..9 (bools excluded)."""
    if isinstance(position, (bool, np.bool_)):
        return False
    if not isinstance(position, (int, np.integer)):
        return False
    return int(position) in POSITIONS


def to_cell(position: int) -> Tuple[int, int]:
    """Map a 1-9 position to its (row, col)."""
    index = int(position) - 1
    return index // 3, index % 3


def to_position(row: int, col: int) -> int:
    """Map (row, col) back to the 1-9 position."""
    return row * 3 + col + 1


def empty_positions(board: np.ndarray) -> List[int]:
    """Empty positions in ascending order."""
    return [int(i) + 1 for i in np.flatnonzero(board.ravel() == EMPTY)]


def has_won(board: np.ndarray, mark: Mark) -> bool:
    """Return True if `mark` fills any row, column or diagonal."""
    flat = board.ravel()
    return bool(np.any(np.all(flat[WIN_LINES] == int(mark), axis=1)))


def winning_marks(board: np.ndarray) -> List[Mark]:
    """All marks that own a complete line (at most one in legal play)."""
    return [mark for mark in Mark if has_won(board, mark)]


def board_full(board: np.ndarray) -> bool:
    """Return True if the board has no empty cells."""
    return not np.any(board == EMPTY)


def count_marks(board: np.ndarray, mark: Mark) -> int:
    return int(np.count_nonzero(board == int(mark)))


def with_mark(board: np.ndarray, position: int, mark: Mark) -> np.ndarray:
    """
    Return a writable copy of `board` with `mark` placed at `position`.
    The board passed in is untouched.
    """
    row, col = to_cell(position)
    new_board = board.copy()
    new_board[row, col] = int(mark)
    return new_board


def status_of(board: np.ndarray) -> Status:
    """
    Status read from the board alone: Won for the first mark owning a
    line (X before O), Draw when full, otherwise InProgress.
    """
    for mark in Mark:
        if has_won(board, mark):
            return Status.won(mark)
    if board_full(board):
        return Status.draw()
    return Status.in_progress()
