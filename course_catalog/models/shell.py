"""
Interactive shell data models.

Contains the MenuChoice enum and the ShellState that the command-dispatch
functions take and return.
"""

from dataclasses import dataclass, field, replace
from enum import Enum

from .course import Catalog


class MenuChoice(Enum):
    """
    Typed outcome of reading one menu selection.

    INVALID covers both non-numeric input and integers that are not on the
    menu; the shell treats them the same way.
    """
    LOAD = 1
    LIST = 2
    SEARCH = 3
    EXIT = 9
    INVALID = -1


def parse_choice(text: str) -> MenuChoice:
    """
    Convert raw menu input into a MenuChoice.

    Surrounding whitespace is ignored. Anything that is not one of the menu
    numbers (empty input, "abc", "4", "1.5") becomes MenuChoice.INVALID.
    """
    try:
        value = int(text.strip())
    except (ValueError, AttributeError):
        return MenuChoice.INVALID

    for choice in MenuChoice:
        if choice is not MenuChoice.INVALID and choice.value == value:
            return choice
    return MenuChoice.INVALID


@dataclass(frozen=True)
class ShellState:
    """
    Everything the shell carries between menu cycles.

    The catalog is owned by the state and replaced, never mutated, when a
    new file is loaded.
    """
    catalog: Catalog = field(default_factory=dict)
    running: bool = True

    def with_catalog(self, catalog: Catalog) -> "ShellState":
        return replace(self, catalog=catalog)

    def stopped(self) -> "ShellState":
        return replace(self, running=False)
