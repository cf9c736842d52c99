"""
Memory module - persisted round outcomes.
"""

from tictactoe.memory.outcome_log import (
    OutcomeLog,
    Tally,
    DEFAULT_RESULTS_FILE,
    format_record,
    parse_record,
)

__all__ = [
    "OutcomeLog",
    "Tally",
    "DEFAULT_RESULTS_FILE",
    "format_record",
    "parse_record",
]
