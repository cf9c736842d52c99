"""
tictactoe - console tic-tac-toe with a heuristic computer opponent.

Quick Start:
    from tictactoe import new_game, apply_move, choose_move

    state = new_game()
    state = apply_move(state, 1)          # X takes the top-left corner
    state = apply_move(state, choose_move(state))

Modules:
    core       - Marks, status values and the error hierarchy
    games      - GameState and the rules engine
    selection  - The fixed-priority move advisor
    memory     - Append-only results file
    api / cli  - Round driver and interactive menu
"""

from tictactoe.core import Mark, Outcome, Status
from tictactoe.core.errors import (
    MoveError,
    PositionOutOfRange,
    CellOccupied,
    GameAlreadyOver,
    NoLegalMoves,
)
from tictactoe.games import GameState, new_game, apply_move, evaluate, valid_moves
from tictactoe.selection import choose_move, explain_move
from tictactoe.memory import OutcomeLog
from tictactoe.api import play_round

__version__ = "1.0.0"

__all__ = [
    # Engine
    "new_game",
    "apply_move",
    "evaluate",
    "valid_moves",
    "choose_move",
    "explain_move",
    "play_round",
    "OutcomeLog",
    # Types
    "GameState",
    "Mark",
    "Outcome",
    "Status",
    # Errors
    "MoveError",
    "PositionOutOfRange",
    "CellOccupied",
    "GameAlreadyOver",
    "NoLegalMoves",
]
