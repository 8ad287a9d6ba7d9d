"""
Configuration constants for the course catalog tool.

This module contains all configuration values and constants used throughout
the catalog tool. Values that an operator may want to change without editing
code can be overridden through environment variables.
"""

import os
from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Bundled data files ship inside the package (see package-data in pyproject.toml)
PACKAGE_DIR = Path(__file__).parent
DATA_DIR = PACKAGE_DIR / "data"
SAMPLE_CATALOG_PATH = DATA_DIR / "sample_courses.txt"


# =============================================================================
# ENVIRONMENT HELPERS
# =============================================================================

TRUTHY_VALUES = {"1", "true", "yes", "on"}


def env_str(name: str, default: str = "") -> str:
    """Read a string setting from the environment."""
    return os.environ.get(name, default)


def env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean setting ("1", "true", "yes", "on") from the environment."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in TRUTHY_VALUES


# =============================================================================
# FILE FORMAT
# =============================================================================
# One record per line:
#   <courseNumber>,<courseTitle>[,<prereq1>,<prereq2>,...]
# No header row, no quoting. Field text is kept exactly as written.

FIELD_DELIMITER = ","
MIN_FIELDS = 2
FILE_ENCODING = "utf-8"

# Shown in place of the prerequisite list when a course has none
NO_PREREQUISITES_MARKER = "None"


# =============================================================================
# CONSOLE TEXT
# =============================================================================

MENU_TITLE = "Menu:"
MENU_LINES = (
    "1. Load file",
    "2. Print List",
    "3. Search for Course",
    "9. Exit",
)
CHOICE_PROMPT = "Enter your choice: "
LOAD_PROMPT = "Enter filepath to load: "
SEARCH_PROMPT = "Enter course number to search: "

LIST_HEADER = "Courses in the Computer Science department:"
FAREWELL = "Goodbye!"
INVALID_CHOICE_MESSAGE = "Invalid choice. Please try again."


# =============================================================================
# RUNTIME SETTINGS
# =============================================================================

# Catalog loaded at start-up. Empty by default, so the shell starts with an
# empty catalog and an open-failure report until the user loads a file.
STARTUP_CATALOG_ENV = "COURSE_CATALOG_FILE"

# Run the prerequisite validator after every load
VALIDATE_ON_LOAD_ENV = "COURSE_CATALOG_VALIDATE_ON_LOAD"

LOG_LEVEL_ENV = "COURSE_CATALOG_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(levelname)s: %(message)s"


def startup_catalog_path() -> str:
    return env_str(STARTUP_CATALOG_ENV, "")


def validate_on_load() -> bool:
    return env_flag(VALIDATE_ON_LOAD_ENV, False)


def log_level() -> str:
    return env_str(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL
