"""
Public API for playing rounds.

Usage:
    from tictactoe.api import play_round
    from tictactoe.core.types import Mark
    from tictactoe.memory import OutcomeLog

    play_round(human_marks={Mark.X}, outcome_log=OutcomeLog("results.txt"))

The driver owns the round's GameState, asks the human (through `input_fn`)
or the advisor for each move, and records the outcome once the round ends.
"""

from __future__ import annotations

import logging
from typing import Callable, Collection, Optional

import numpy as np

from tictactoe.core.errors import MoveError, NoLegalMoves
from tictactoe.core.types import CELL_STRINGS, Mark, Outcome, Status
from tictactoe.games.game_state import GameState
from tictactoe.games.tic_tac_toe import apply_move, new_game
from tictactoe.memory.outcome_log import OutcomeLog
from tictactoe.selection.advisor import choose_move

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]

_ROW_RULE = "    -----------------------"


def render_board(board: np.ndarray) -> str:
    """Three rows of cells separated by ':' with dashed rules between."""
    rows = []
    for r in range(3):
        cells = [CELL_STRINGS[int(board[r, c])] for c in range(3)]
        rows.append("        " + "   :   ".join(cells))
    return "\n" + f"\n{_ROW_RULE}\n".join(rows) + "\n"


def _human_turn(state: GameState, input_fn: InputFn, prompt: str = "Your Turn :> ") -> GameState:
    """Prompt until the player enters a legal position; return the new state."""
    while True:
        raw = input_fn(prompt).strip()
        try:
            position = int(raw)
        except ValueError:
            print("Invalid input! Please enter a number between 1 and 9.")
            continue

        try:
            return apply_move(state, position)
        except MoveError as e:
            print(e)


def _computer_turn(state: GameState) -> GameState:
    """Advisor selects and the move is applied."""
    print("Computer's turn...")
    position = choose_move(state)
    new_state = apply_move(state, position)
    print(f"Computer chose position {position}")
    return new_state


def _save_outcome(outcome_log: OutcomeLog, status: Status) -> bool:
    try:
        outcome_log.record(status)
    except OSError:
        logger.exception("Could not write result to %s", outcome_log.path)
        print(f"Error: Could not open {outcome_log.path}")
        return False
    print(f"Result saved to {outcome_log.path}")
    return True


def announce(status: Status) -> str:
    if status.outcome is Outcome.WON:
        return f"Player {status.winner.symbol} wins!"
    return "Game Draw"


def play_round(
    human_marks: Collection[Mark],
    outcome_log: Optional[OutcomeLog] = None,
    input_fn: InputFn = input,
    state: Optional[GameState] = None,
) -> Optional[Status]:
    """
    Play one round to completion.

    Parameters
    ----------
    human_marks : Collection[Mark]
        Marks entered by a person; every other mark is played by the advisor.
    outcome_log : OutcomeLog, optional
        Where the finished round is recorded. None skips recording.
    input_fn : callable
        `input`-compatible prompt function used for human moves.
    state : GameState, optional
        Starting position; a fresh game when omitted.

    Returns
    -------
    The terminal Status, or None if the round had to be abandoned.
    """
    humans = set(human_marks)
    hotseat = len(humans) > 1
    state = state if state is not None else new_game()

    logger.info(
        "Round started: humans=%s", ",".join(m.symbol for m in sorted(humans)) or "none"
    )

    while not state.status.is_terminal:
        print(render_board(state.board))

        if state.to_move in humans:
            prompt = f"Player {state.to_move.symbol} :> " if hotseat else "Your Turn :> "
            state = _human_turn(state, input_fn, prompt)
        else:
            try:
                state = _computer_turn(state)
            except NoLegalMoves:
                logger.exception("Advisor had no move; abandoning round")
                return None

    print(render_board(state.board))
    print(f"\n{announce(state.status)}")
    logger.info("Round finished: %s", state.status)

    if outcome_log is not None:
        _save_outcome(outcome_log, state.status)

    return state.status


__all__ = [
    "play_round",
    "render_board",
    "announce",
]
