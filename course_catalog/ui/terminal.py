"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing to stdout happens in the catalog package;
errors go to stderr through logging.

To create a different UI (web, JSON, etc.), create a new class with
the same method signatures but different output handling.
"""

import sys
from typing import List

from ..config import (
    FAREWELL,
    INVALID_CHOICE_MESSAGE,
    LIST_HEADER,
    MENU_LINES,
    MENU_TITLE,
    NO_PREREQUISITES_MARKER,
)
from ..models import Course


class TerminalDisplay:
    """
    Plain terminal output for menus, listings and course details.

    Course rows and course details are printed without color codes so
    that they can be copied as-is. Colors are used only for headers and
    status lines, and only when stdout is a terminal.
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"

    @staticmethod
    def colors_enabled() -> bool:
        isatty = getattr(sys.stdout, "isatty", None)
        return bool(isatty and isatty())

    @classmethod
    def styled(cls, text: str, *codes: str) -> str:
        """Wrap text in ANSI codes, or return it unchanged when piped."""
        if not codes or not cls.colors_enabled():
            return text
        return f"{''.join(codes)}{text}{cls.RESET}"

    @classmethod
    def print_menu(cls):
        """Print the numbered main menu."""
        print(cls.styled(MENU_TITLE, cls.BOLD))
        for line in MENU_LINES:
            print(line)

    @classmethod
    def print_course_list(cls, courses: List[Course]):
        """
        Print the department header followed by one "<number>: <title>" row
        per course, in the order given.
        """
        print(cls.styled(LIST_HEADER, cls.BOLD, cls.CYAN))
        for course in courses:
            print(f"{course.number}: {course.title}")

    @classmethod
    def print_course(cls, course: Course):
        """Print the number, title and prerequisites of one course."""
        print(f"Course Number: {course.number}")
        print(f"Course Title: {course.title}")
        print(f"Prerequisites: {cls.format_prerequisites(course)}")

    @staticmethod
    def format_prerequisites(course: Course) -> str:
        if not course.has_prerequisites:
            return NO_PREREQUISITES_MARKER
        return ", ".join(course.prerequisites)

    @classmethod
    def print_validation_passed(cls, course_count: int):
        print(cls.styled(f"All prerequisites resolved ({course_count} courses).", cls.GREEN))

    @classmethod
    def print_invalid_choice(cls):
        print(cls.styled(INVALID_CHOICE_MESSAGE, cls.YELLOW))

    @classmethod
    def print_farewell(cls):
        print(FAREWELL)
