"""
Prerequisite Validation Engine.

This module checks that a loaded catalog is referentially complete: every
prerequisite a course lists must itself be a course in the same catalog.
"""

import logging

from ..errors import MissingPrerequisiteError
from ..models import Catalog, ValidationResult

logger = logging.getLogger(__name__)


class CatalogValidator:
    """
    Checks prerequisite references against the catalog's own course numbers.

    RULES:
    ------
    - A catalog is valid when every prerequisite of every course matches
      the number of a course in that catalog (exact string match).
    - The check stops at the first missing prerequisite. Only that one is
      reported; other violations may exist.
    - Which violation is reported first is not defined when there are
      several, since the catalog has no meaningful order.
    - Prerequisite cycles are not detected. "A requires B, B requires A"
      is valid as long as both courses exist.

    The loader does not run this check; callers opt in.
    """

    def validate(self, catalog: Catalog) -> ValidationResult:
        """
        Check all prerequisite references.

        Returns:
            ValidationResult with is_valid=True, or the first missing
            prerequisite and the course that listed it
        """
        try:
            self.check(catalog)
        except MissingPrerequisiteError as e:
            logger.error("%s", e)
            return ValidationResult(
                is_valid=False,
                missing_prerequisite=e.prerequisite,
                course_number=e.course_number,
            )

        logger.debug("All prerequisites resolved for %d courses", len(catalog))
        return ValidationResult(is_valid=True)

    def check(self, catalog: Catalog) -> None:
        """
        Raise MissingPrerequisiteError for the first dangling reference.
        """
        course_numbers = set(catalog.keys())

        for course in catalog.values():
            for prerequisite in course.prerequisites:
                if prerequisite not in course_numbers:
                    raise MissingPrerequisiteError(prerequisite, course.number)
