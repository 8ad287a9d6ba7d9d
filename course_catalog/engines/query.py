"""
Catalog Query Engine.

Point lookup by course number and the full listing sorted by course number.
"""

from typing import List

from ..errors import CourseNotFoundError
from ..models import Catalog, Course, LookupResult


class CatalogQuery:
    """
    Read-only queries over a catalog.

    Neither method changes the catalog. Sorting uses Python's default string
    ordering (code point by code point), so "CSCI100" < "CSCI2" < "MATH201"
    and upper-case letters sort before lower-case ones.
    """

    def lookup(self, catalog: Catalog, number: str) -> LookupResult:
        """Exact-match lookup. A miss returns a result with course=None."""
        return LookupResult(number=number, course=catalog.get(number))

    def get(self, catalog: Catalog, number: str) -> Course:
        """
        Exact-match lookup that raises on a miss.

        Raises:
            CourseNotFoundError: No course has this number
        """
        result = self.lookup(catalog, number)
        if not result.found:
            raise CourseNotFoundError(number)
        return result.course

    def list_all(self, catalog: Catalog) -> List[Course]:
        """Return every course, ordered by course number."""
        return [catalog[number] for number in sorted(catalog)]
