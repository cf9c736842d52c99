"""
Games module - board representation and the tic-tac-toe rules engine.
"""

from tictactoe.games.game_state import GameState
from tictactoe.games.game_rules import in_bounds, board_full, empty_positions, to_cell, to_position
from tictactoe.games.tic_tac_toe import new_game, apply_move, evaluate, has_won, valid_moves

__all__ = [
    "GameState",
    "new_game",
    "apply_move",
    "evaluate",
    "has_won",
    "valid_moves",
    "in_bounds",
    "board_full",
    "empty_positions",
    "to_cell",
    "to_position",
]
