"""
Command-Line Interface for the Course Catalog.

This module provides the interactive menu loop. It reads a choice, hands it
to CatalogShell.dispatch, and repeats until the user exits.

MENU:
-----
1. Load file
2. Print List
3. Search for Course
9. Exit

There are no command-line arguments. Settings come from environment
variables (see config.py).

NOTE: Don't run this file directly. Run from the repository root:
    python -m course_catalog
"""

import logging
import sys
from typing import Optional

from .config import CHOICE_PROMPT, LOG_FORMAT, log_level
from .models import MenuChoice, parse_choice
from .shell import CatalogShell, Prompt


def configure_logging(level: Optional[str] = None):
    """
    Send log records to stderr as "LEVEL: message".

    The level comes from COURSE_CATALOG_LOG_LEVEL (default INFO). An unknown
    level name falls back to INFO.
    """
    level_name = (level or log_level()).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, stream=sys.stderr)


def read_choice(prompt: Prompt) -> MenuChoice:
    """
    Read one menu selection.

    End of input and Ctrl-C are treated as a request to exit.
    """
    try:
        return parse_choice(prompt(CHOICE_PROMPT))
    except (EOFError, KeyboardInterrupt):
        print()
        return MenuChoice.EXIT


def run(shell: CatalogShell) -> int:
    """
    Run the menu loop until the user exits.

    Returns:
        Process exit status. Always 0; failures are reported on stderr but
        never change the exit status.
    """
    state = shell.initial_state()

    while state.running:
        shell.display.print_menu()
        choice = read_choice(shell.prompt)
        try:
            state = shell.dispatch(state, choice)
        except (EOFError, KeyboardInterrupt):
            # Input ended while answering a follow-up prompt
            print()
            state = shell.exit(state)

    return 0


def main() -> int:
    """Entry point for `python -m course_catalog` and the console script."""
    configure_logging()
    return run(CatalogShell())


if __name__ == "__main__":
    sys.exit(main())
