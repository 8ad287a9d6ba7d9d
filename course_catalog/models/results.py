"""
Result data models.

Contains dataclasses returned by the loader and the engines. These carry
plain data; deciding how to show them is left to the presentation layer.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .course import Catalog, Course


@dataclass
class LoadReport:
    """
    Outcome of loading one catalog file.

    Example for a file whose third line is just "CSCI999":
        path: "courses.txt"
        catalog: {"CSCI100": Course(...), "CSCI101": Course(...)}
        opened: True
        skipped_lines: [3]
    """
    path: str
    catalog: Catalog = field(default_factory=dict)
    opened: bool = True              # False when the file could not be opened
    skipped_lines: List[int] = field(default_factory=list)  # 1-based

    @property
    def course_count(self) -> int:
        return len(self.catalog)


@dataclass
class ValidationResult:
    """
    Outcome of a prerequisite integrity check.

    The check stops at the first dangling reference, so at most one
    missing prerequisite is ever recorded.
    """
    is_valid: bool
    missing_prerequisite: Optional[str] = None  # The undefined course number
    course_number: Optional[str] = None         # The course that listed it


@dataclass
class LookupResult:
    """Outcome of searching the catalog for one course number."""
    number: str
    course: Optional[Course] = None

    @property
    def found(self) -> bool:
        return self.course is not None
