"""
Shared test fixtures for tictactoe tests.

Boards are written as 9-character strings, row-major, using
'X', 'O' and '.' (empty):

    "XX.O....."  ->  X | X | .
                     O | . | .
                     . | . | .
"""

from pathlib import Path
from typing import Callable, List

import pytest

from tictactoe.core.types import Mark
from tictactoe.games.game_state import GameState
from tictactoe.games.tic_tac_toe import new_game
from tictactoe.memory.outcome_log import OutcomeLog

_CELL_CODES = {".": 0, "X": 1, "O": 2}


def parse_board(layout: str) -> List[int]:
    """Turn a 9-character layout string into cell codes."""
    cells = [c for c in layout if not c.isspace()]
    assert len(cells) == 9, f"layout needs 9 cells, got {len(cells)}"
    return [_CELL_CODES[c] for c in cells]


# =============================================================================
# State Fixtures
# =============================================================================

@pytest.fixture
def fresh() -> GameState:
    """Freshly created game."""
    return new_game()


@pytest.fixture
def make_state() -> Callable[..., GameState]:
    """
    Build a state from a layout string.

    Without `to_move` the mover and status are derived from the board;
    with it the board is taken as-is (useful for advisor-only positions).
    """
    def _make(layout: str, to_move: Mark = None) -> GameState:
        cells = parse_board(layout)
        if to_move is None:
            return GameState.from_board(cells)
        return GameState(cells, to_move)
    return _make


# =============================================================================
# Input Fixtures
# =============================================================================

@pytest.fixture
def scripted_input() -> Callable[[List[str]], Callable[[str], str]]:
    """
    Build an `input`-compatible callable that replays answers in order
    and records the prompts it was shown.
    """
    def _make(answers: List[str]):
        remaining = list(answers)

        def _input(prompt: str = "") -> str:
            _input.prompts.append(prompt)
            if not remaining:
                raise EOFError("script exhausted")
            return remaining.pop(0)

        _input.prompts = []
        return _input
    return _make


# =============================================================================
# Memory Fixtures
# =============================================================================

@pytest.fixture
def results_path(tmp_path: Path) -> Path:
    return tmp_path / "results.txt"


@pytest.fixture
def outcome_log(results_path: Path) -> OutcomeLog:
    return OutcomeLog(results_path)
