"""
Exception hierarchy.

MoveError subclasses are recoverable: the input loop reports them and
re-prompts. NoLegalMoves means the advisor was asked about a finished
or full board and is a caller bug.
"""


class TicTacToeError(Exception):
    """Base class for all game errors."""


class MoveError(TicTacToeError, ValueError):
    """A move was rejected. The state it was applied to is unchanged."""


class PositionOutOfRange(MoveError):
    def __init__(self, position):
        self.position = position
        super().__init__(
            "Invalid position! Please enter a number between 1 and 9."
        )


class CellOccupied(MoveError):
    def __init__(self, position: int):
        self.position = position
        super().__init__(
            "Position already occupied! Choose another position."
        )


class GameAlreadyOver(MoveError):
    def __init__(self):
        super().__init__("Game is already over!")


class NoLegalMoves(TicTacToeError, RuntimeError):
    """The advisor was called on a terminal or full board."""


class InvalidBoard(TicTacToeError, ValueError):
    """A board layout that cannot arise from legal play."""
