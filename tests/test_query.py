"""
Tests for catalog lookup and sorted listing.
"""

import pytest

from course_catalog.engines import CatalogQuery
from course_catalog.errors import CourseNotFoundError
from course_catalog.models import Course


@pytest.fixture
def query():
    return CatalogQuery()


@pytest.fixture
def catalog():
    courses = [
        Course("MATH201", "Discrete Mathematics"),
        Course("CSCI300", "Introduction to Algorithms", ["CSCI200", "MATH201"]),
        Course("CSCI100", "Introduction to Computer Science"),
        Course("CSCI200", "Data Structures", ["CSCI100"]),
    ]
    return {c.number: c for c in courses}


def test_lookup_hit(query, catalog):
    result = query.lookup(catalog, "CSCI300")

    assert result.found
    assert result.course.title == "Introduction to Algorithms"
    assert result.course.prerequisites == ["CSCI200", "MATH201"]


def test_lookup_miss_has_no_course(query, catalog):
    result = query.lookup(catalog, "CSCI999")

    assert not result.found
    assert result.course is None
    assert result.number == "CSCI999"


def test_lookup_is_case_sensitive(query, catalog):
    assert not query.lookup(catalog, "csci100").found


def test_lookup_does_not_change_catalog(query, catalog):
    before = dict(catalog)

    query.lookup(catalog, "CSCI999")
    query.lookup(catalog, "CSCI100")

    assert catalog == before


def test_get_raises_not_found(query, catalog):
    with pytest.raises(CourseNotFoundError) as exc_info:
        query.get(catalog, "CSCI999")

    assert exc_info.value.number == "CSCI999"
    assert str(exc_info.value) == "Course CSCI999 not found."


def test_get_returns_course(query, catalog):
    assert query.get(catalog, "MATH201").title == "Discrete Mathematics"


def test_list_all_is_sorted_by_number(query, catalog):
    numbers = [c.number for c in query.list_all(catalog)]

    assert numbers == ["CSCI100", "CSCI200", "CSCI300", "MATH201"]
    assert numbers == sorted(numbers)


def test_list_all_row_count_matches_catalog(query, catalog):
    assert len(query.list_all(catalog)) == len(catalog)


def test_list_all_uses_plain_string_order(query):
    catalog = {n: Course(n, "t") for n in ["CSCI2", "csci1", "CSCI100", "CSCI10"]}

    numbers = [c.number for c in query.list_all(catalog)]

    assert numbers == ["CSCI10", "CSCI100", "CSCI2", "csci1"]


def test_list_all_empty_catalog(query):
    assert query.list_all({}) == []
