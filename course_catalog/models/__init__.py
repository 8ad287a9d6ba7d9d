"""
Data models for the course catalog tool.

This package contains all dataclasses and enums used throughout the tool.
These serve as "contracts" between the loader, the engines and the UI.
"""

from .course import Catalog, Course
from .results import LoadReport, LookupResult, ValidationResult
from .shell import MenuChoice, ShellState, parse_choice

__all__ = [
    # Course models
    "Course",
    "Catalog",
    # Results
    "LoadReport",
    "ValidationResult",
    "LookupResult",
    # Shell models
    "MenuChoice",
    "ShellState",
    "parse_choice",
]
