"""
Command-line interface: the interactive menu loop.
"""

import argparse
import logging
from enum import Enum
from typing import List, Optional

from tictactoe.api import InputFn, play_round
from tictactoe.core.types import Mark
from tictactoe.memory.outcome_log import OutcomeLog
from tictactoe.utils.config import Config, DEFAULT_LOG_LEVEL, LOG_LEVELS

logger = logging.getLogger(__name__)

MENU = """
========MENU========
1 : Play with X
2 : Play with O
3 : Exit"""


class MenuChoice(Enum):
    PLAY_AS_X = 1
    PLAY_AS_O = 2
    EXIT = 3


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play tic-tac-toe against the computer"
    )
    parser.add_argument(
        "--results", "-r",
        default="results.txt",
        help="File that finished rounds are appended to (default: results.txt)",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--hotseat",
        action="store_true",
        help="Two people share the keyboard; nobody plays against the computer",
    )
    mode.add_argument(
        "--self-play",
        action="store_true",
        help="Computer plays both sides for a single round, no menu",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print the win/draw tally from the results file and exit",
    )
    parser.add_argument(
        "--log-level", "-l",
        choices=LOG_LEVELS,
        type=str.upper,
        default=DEFAULT_LOG_LEVEL,
        help=f"Logging verbosity (default: {DEFAULT_LOG_LEVEL})",
    )
    return parser.parse_args(argv)


def read_menu_choice(input_fn: InputFn = input) -> MenuChoice:
    """Prompt until a valid 1-3 choice is entered."""
    prompt = "Enter your choice:> "
    while True:
        raw = input_fn(prompt).strip()
        try:
            value = int(raw)
        except ValueError:
            prompt = "Invalid input! Enter your choice:> "
            continue

        try:
            return MenuChoice(value)
        except ValueError:
            prompt = "Invalid choice! Enter your choice:> "


def human_marks_for(choice: MenuChoice, hotseat: bool = False) -> set:
    """Which marks a person enters for a menu selection."""
    if choice is MenuChoice.EXIT:
        raise ValueError("EXIT does not start a round")
    if hotseat:
        return {Mark.X, Mark.O}
    return {Mark.X} if choice is MenuChoice.PLAY_AS_X else {Mark.O}


def print_stats(outcome_log: OutcomeLog) -> bool:
    try:
        tally = outcome_log.tally()
    except OSError:
        logger.exception("Could not read results from %s", outcome_log.path)
        print(f"Error: Could not open {outcome_log.path}")
        return False

    print(f"Rounds recorded in {outcome_log.path}: {tally.total}")
    print(f"  X wins : {tally.x_wins}")
    print(f"  O wins : {tally.o_wins}")
    print(f"  Draws  : {tally.draws}")
    return True


def run(config: Config, input_fn: Optional[InputFn] = None) -> None:
    """Menu loop: play rounds until the player picks Exit."""
    input_fn = input_fn if input_fn is not None else input
    outcome_log = OutcomeLog(config.results_path)

    if config.self_play:
        play_round(human_marks=(), outcome_log=outcome_log, input_fn=input_fn)
        return

    while True:
        print(MENU)
        choice = read_menu_choice(input_fn)

        if choice is MenuChoice.EXIT:
            logger.info("Exit selected")
            print("\nThank you for playing! Goodbye!")
            break

        play_round(
            human_marks=human_marks_for(choice, config.hotseat),
            outcome_log=outcome_log,
            input_fn=input_fn,
        )
        input_fn("\nPress Enter to return to menu...")


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    config = Config(
        results_path=args.results,
        log_level=args.log_level,
        hotseat=args.hotseat,
        self_play=args.self_play,
    )
    logging.basicConfig(
        level=config.log_level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.stats:
        print_stats(OutcomeLog(config.results_path))
        return

    try:
        run(config)
    except (KeyboardInterrupt, EOFError):
        print("\nInterrupted - goodbye!")


if __name__ == "__main__":
    main()
