"""
Core module - fundamental types and errors.

This module provides the building blocks used throughout the game.
"""

from tictactoe.core.types import (
    Mark,
    Outcome,
    Status,
    EMPTY,
    POSITIONS,
    CENTER,
    CORNERS,
    CELL_STRINGS,
)
from tictactoe.core.errors import (
    TicTacToeError,
    MoveError,
    PositionOutOfRange,
    CellOccupied,
    GameAlreadyOver,
    NoLegalMoves,
    InvalidBoard,
)

__all__ = [
    # Types
    "Mark",
    "Outcome",
    "Status",
    # Constants
    "EMPTY",
    "POSITIONS",
    "CENTER",
    "CORNERS",
    "CELL_STRINGS",
    # Errors
    "TicTacToeError",
    "MoveError",
    "PositionOutOfRange",
    "CellOccupied",
    "GameAlreadyOver",
    "NoLegalMoves",
    "InvalidBoard",
]
