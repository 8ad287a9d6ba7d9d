"""
Exceptions raised by the strict catalog API.

The interactive shell never lets these escape: every failure is reported on
the error stream and the menu loop continues.
"""


class CatalogError(Exception):
    """Base class for all catalog failures."""


class CatalogOpenError(CatalogError):
    """The catalog file could not be opened for reading."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"Unable to open file: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class MalformedLineError(CatalogError):
    """A catalog line had fewer fields than a course record needs."""

    def __init__(self, line_number: int, field_count: int):
        self.line_number = line_number
        self.field_count = field_count
        super().__init__(
            f"Line {line_number} has less than 2 parameters ({field_count} found)."
        )


class MissingPrerequisiteError(CatalogError):
    """A course lists a prerequisite that is not defined in the catalog."""

    def __init__(self, prerequisite: str, course_number: str):
        self.prerequisite = prerequisite
        self.course_number = course_number
        super().__init__(f"Prerequisite {prerequisite} does not exist as a course.")


class CourseNotFoundError(CatalogError, KeyError):
    """No course with the requested number exists in the catalog."""

    def __init__(self, number: str):
        self.number = number
        super().__init__(f"Course {number} not found.")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]
