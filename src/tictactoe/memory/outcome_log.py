"""
Append-only log of finished rounds.

One line per round:

    Winner : X
    Winner : O
    Draw

The file is opened in append mode for each record and closed straight
away; nothing else ever writes to it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, NamedTuple

from tictactoe.core.types import Mark, Outcome, Status

logger = logging.getLogger(__name__)

DEFAULT_RESULTS_FILE = "results.txt"

_WINNER_PREFIX = "Winner : "
_DRAW_LINE = "Draw"


class Tally(NamedTuple):
    """Round counts read back from a log."""

    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0

    @property
    def total(self) -> int:
        return self.x_wins + self.o_wins + self.draws


def format_record(status: Status) -> str:
    """Render a terminal status as its log line (newline included)."""
    if status.outcome is Outcome.WON:
        return f"{_WINNER_PREFIX}{status.winner.symbol}\n"
    if status.outcome is Outcome.DRAW:
        return f"{_DRAW_LINE}\n"
    raise ValueError(f"Only finished rounds can be logged, got {status}")


def parse_record(line: str) -> Status:
    """Inverse of format_record. Raises ValueError on unknown lines."""
    text = line.strip()
    if text == _DRAW_LINE:
        return Status.draw()
    if text.startswith(_WINNER_PREFIX):
        symbol = text[len(_WINNER_PREFIX):].strip()
        try:
            return Status.won(Mark[symbol])
        except KeyError:
            pass
    raise ValueError(f"Unrecognised result line: {line!r}")


class OutcomeLog:
    """Results file wrapper."""

    def __init__(self, path: str | Path = DEFAULT_RESULTS_FILE):
        self.path = Path(path)

    def record(self, status: Status) -> None:
        """
        Append one line for a finished round.

        Raises ValueError for an unfinished round and OSError if the file
        cannot be opened; the driver decides what to tell the player.
        """
        line = format_record(status)
        with self.path.open("a", encoding="utf-8") as f:
            f.write(line)
        logger.debug("Recorded %s to %s", status, self.path)

    def records(self) -> List[Status]:
        """
        All parseable records, oldest first. A missing file is empty.

        Undecodable bytes are replaced, so such lines are skipped like any
        other unrecognised line. OSError (e.g. the path is a directory)
        propagates to the caller.
        """
        if not self.path.exists():
            return []

        results = []
        with self.path.open("r", encoding="utf-8", errors="replace") as f:
            for lineno, line in enumerate(f, start=1):
                if not line.strip():
                    continue
                try:
                    results.append(parse_record(line))
                except ValueError:
                    logger.warning("Skipping %s:%d: %r", self.path, lineno, line.rstrip("\n"))
        return results

    def tally(self) -> Tally:
        x_wins = o_wins = draws = 0
        for status in self.records():
            if status.outcome is Outcome.DRAW:
                draws += 1
            elif status.winner is Mark.X:
                x_wins += 1
            else:
                o_wins += 1
        return Tally(x_wins, o_wins, draws)
