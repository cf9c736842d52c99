"""
Core types and constants.

This module contains the fundamental types used throughout the game:
- Mark: the two players' symbols
- Outcome / Status: where a round stands
- Position constants for the 1-9 keypad layout
"""

from __future__ import annotations

from enum import Enum, IntEnum, auto
from typing import NamedTuple, Optional


# Board cell encoding (int8): 0 = empty, otherwise the Mark value
EMPTY = 0

# Positions are 1-indexed, row-major:
#
#     1 | 2 | 3
#     4 | 5 | 6
#     7 | 8 | 9
POSITIONS = range(1, 10)
CENTER = 5
CORNERS = (1, 3, 7, 9)


class Mark(IntEnum):
    """The two players' symbols. Values double as board cell codes."""

    X = 1
    O = 2

    @property
    def opponent(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X

    @property
    def symbol(self) -> str:
        return self.name


# Cell strings: each cell value maps to its display string
CELL_STRINGS = {EMPTY: " ", Mark.X.value: "X", Mark.O.value: "O"}


class Outcome(Enum):
    IN_PROGRESS = auto()
    WON = auto()
    DRAW = auto()


class Status(NamedTuple):
    """Round status. `winner` is set only when outcome is WON."""

    outcome: Outcome = Outcome.IN_PROGRESS
    winner: Optional[Mark] = None

    @classmethod
    def in_progress(cls) -> "Status":
        return cls(Outcome.IN_PROGRESS)

    @classmethod
    def won(cls, mark: Mark) -> "Status":
        return cls(Outcome.WON, Mark(mark))

    @classmethod
    def draw(cls) -> "Status":
        return cls(Outcome.DRAW)

    @property
    def is_terminal(self) -> bool:
        return self.outcome is not Outcome.IN_PROGRESS

    def __str__(self) -> str:
        if self.outcome is Outcome.WON:
            return f"Won({self.winner.symbol})"
        if self.outcome is Outcome.DRAW:
            return "Draw"
        return "InProgress"
