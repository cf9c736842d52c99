"""
Selection module - move choice for the computer player.
"""

from tictactoe.selection.advisor import (
    Decision,
    Reason,
    choose_move,
    explain_move,
    completing_move,
    first_empty,
)

__all__ = [
    "Decision",
    "Reason",
    "choose_move",
    "explain_move",
    "completing_move",
    "first_empty",
]
