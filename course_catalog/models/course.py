"""
Course data models.

Contains the Course dataclass and the Catalog mapping that together
represent everything loaded from a course file.
"""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class Course:
    """
    Represents a single course record from the catalog file.

    Field text is stored exactly as it appeared between the commas, so
    "CS101" and " CS101" are different course numbers.

    Attributes:
        number: Course number, unique within a catalog (e.g., "CSCI200")
        title: Human-readable course title
        prerequisites: Course numbers required beforehand, in file order
    """
    number: str
    title: str
    prerequisites: List[str] = field(default_factory=list)

    @property
    def has_prerequisites(self) -> bool:
        return len(self.prerequisites) > 0


# Course number -> Course. Iteration order carries no meaning; sorting is
# applied only when courses are displayed.
Catalog = Dict[str, Course]
