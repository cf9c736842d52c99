"""
Configuration and defaults.
"""

import logging
from pathlib import Path

from tictactoe.memory.outcome_log import DEFAULT_RESULTS_FILE


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_LOG_LEVEL = "WARNING"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _normalize_log_level(level: str) -> str:
    """Upper-case a level name and check logging knows it."""
    name = str(level).upper()
    if name not in LOG_LEVELS:
        raise ValueError(
            f"Unknown log level: {level}. Available: {', '.join(LOG_LEVELS)}"
        )
    return name


class Config:
    """Session configuration with sensible defaults."""

    def __init__(
        self,
        results_path: str | Path = DEFAULT_RESULTS_FILE,
        log_level: str = DEFAULT_LOG_LEVEL,
        hotseat: bool = False,
        self_play: bool = False,
    ):
        if hotseat and self_play:
            raise ValueError("hotseat and self_play are mutually exclusive")

        self.results_path = Path(results_path)
        self.log_level = _normalize_log_level(log_level)
        self.hotseat = hotseat
        self.self_play = self_play

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


# Default configuration
DEFAULT_CONFIG = Config()
