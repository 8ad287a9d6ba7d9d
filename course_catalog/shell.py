"""
Catalog Shell - Command Dispatch.

This module contains the CatalogShell class that connects the menu choices
read by the CLI to the loader, the engines and the display.

NOTE: Don't run this file directly. Run the package instead:
    python -m course_catalog
"""

import logging
from typing import Callable, Optional

from .data import CatalogLoader, strip_terminator
from .engines import CatalogQuery, CatalogValidator
from .models import MenuChoice, ShellState
from .ui import TerminalDisplay
from .config import LOAD_PROMPT, SEARCH_PROMPT, startup_catalog_path, validate_on_load

logger = logging.getLogger(__name__)

Prompt = Callable[[str], str]


class CatalogShell:
    """
    Dispatches menu choices against an explicit ShellState.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    Every action takes the current state and returns the next one:

        1 LOAD    prompt for a path, load it, replace the catalog
        2 LIST    print every course sorted by number
        3 SEARCH  prompt for a course number, print it or report not-found
        9 EXIT    print the farewell, return a stopped state
        INVALID   print the invalid-choice message

    The catalog inside a state is never mutated. A load builds a new
    catalog and a new state around it.

    Follow-up input (file path, course number) is read through `prompt`,
    which defaults to the built-in input(). Tests pass a stub instead.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        shell = CatalogShell()
        state = shell.initial_state()
        state = shell.dispatch(state, MenuChoice.LIST)
    """

    def __init__(self, prompt: Optional[Prompt] = None,
                 validate_after_load: Optional[bool] = None):
        self.loader = CatalogLoader()
        self.validator = CatalogValidator()
        self.query = CatalogQuery()
        self.display = TerminalDisplay()
        self.prompt = prompt or input

        if validate_after_load is None:
            validate_after_load = validate_on_load()
        self.validate_after_load = validate_after_load

        self._actions = {
            MenuChoice.LOAD: self._prompt_and_load,
            MenuChoice.LIST: self.list_courses,
            MenuChoice.SEARCH: self._prompt_and_search,
            MenuChoice.EXIT: self.exit,
        }

    def initial_state(self, path: Optional[str] = None) -> ShellState:
        """
        Build the start-up state by loading the configured catalog path.

        When COURSE_CATALOG_FILE is unset the path is empty, so the loader
        reports an open failure and the catalog starts empty.
        """
        if path is None:
            path = startup_catalog_path()
        return self.load(ShellState(), path)

    def dispatch(self, state: ShellState, choice: MenuChoice) -> ShellState:
        """Run the action for one menu choice and return the next state."""
        action = self._actions.get(choice, self.invalid)
        return action(state)

    # =========================================================================
    #  ACTIONS
    # =========================================================================

    def load(self, state: ShellState, path: str) -> ShellState:
        """Replace the catalog with the contents of `path`."""
        report = self.loader.load(path)
        if report.opened and self.validate_after_load:
            result = self.validator.validate(report.catalog)
            if result.is_valid:
                self.display.print_validation_passed(report.course_count)
        return state.with_catalog(report.catalog)

    def list_courses(self, state: ShellState) -> ShellState:
        self.display.print_course_list(self.query.list_all(state.catalog))
        return state

    def search(self, state: ShellState, number: str) -> ShellState:
        result = self.query.lookup(state.catalog, number)
        if result.found:
            self.display.print_course(result.course)
        else:
            logger.error("Course %s not found.", number)
        return state

    def exit(self, state: ShellState) -> ShellState:
        self.display.print_farewell()
        return state.stopped()

    def invalid(self, state: ShellState) -> ShellState:
        self.display.print_invalid_choice()
        return state

    # =========================================================================
    #  PROMPTING WRAPPERS
    # =========================================================================

    def _prompt_and_load(self, state: ShellState) -> ShellState:
        # The whole line is the path; spaces at either end are part of it
        path = strip_terminator(self.prompt(LOAD_PROMPT))
        return self.load(state, path)

    def _prompt_and_search(self, state: ShellState) -> ShellState:
        # Only the first whitespace-delimited token is the course number
        tokens = self.prompt(SEARCH_PROMPT).split()
        number = tokens[0] if tokens else ""
        return self.search(state, number)
