"""
Catalog file loading.

This module reads comma-delimited course files and builds a fresh Catalog
from them. It never prints; problems are reported through logging and
returned in a LoadReport.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple, Union

from ..config import FIELD_DELIMITER, FILE_ENCODING, MIN_FIELDS
from ..errors import CatalogOpenError, MalformedLineError
from ..models import Catalog, Course, LoadReport

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def strip_terminator(line: str) -> str:
    """Remove one "\\n" or "\\r\\n" line ending and nothing else."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def split_fields(line: str) -> List[str]:
    """
    Split one catalog line into its fields.

    Field text is not trimmed. A single trailing comma does not produce an
    extra empty field, and an empty line produces no fields at all:

        "CSCI300,Intro to Algorithms,CSCI200," -> ["CSCI300", "Intro to Algorithms", "CSCI200"]
        "CSCI100"                              -> ["CSCI100"]
        ""                                     -> []
    """
    if not line:
        return []
    fields = line.split(FIELD_DELIMITER)
    if line.endswith(FIELD_DELIMITER):
        fields.pop()
    return fields


class CatalogLoader:
    """
    Loads course files into a Catalog.

    FILE FORMAT:
    - One record per line: <number>,<title>[,<prereq1>,<prereq2>,...]
    - No header row, no quoting of embedded commas
    - Field text is kept exactly as written (no whitespace trimming)

    MALFORMED LINES:
    A line with fewer than two fields is skipped and logged. The rest of the
    file still loads.

    DUPLICATES:
    A course number seen again later in the file replaces the earlier record.

    Every call returns a brand new catalog; nothing is cached or merged
    between loads.

    Usage:
        loader = CatalogLoader()
        catalog = loader.load_catalog("courses.txt")
        report = loader.load("courses.txt")            # with details
    """

    def load(self, path: PathLike) -> LoadReport:
        """
        Load a catalog file, reporting problems instead of raising.

        If the file cannot be opened the error is logged and the report
        holds an empty catalog with opened=False.
        """
        path_str = str(path)
        report = LoadReport(path=path_str)

        try:
            with self._open(path_str) as f:
                for line_number, fields in self._records(f):
                    if len(fields) < MIN_FIELDS:
                        logger.error(
                            "Line %d has less than %d parameters, skipping.",
                            line_number, MIN_FIELDS,
                        )
                        report.skipped_lines.append(line_number)
                        continue
                    course = self._build_course(fields)
                    report.catalog[course.number] = course
        except OSError as e:
            logger.error("Unable to open file: %s", path_str)
            logger.debug("Open failure detail for %r: %s", path_str, e)
            return LoadReport(path=path_str, opened=False)

        logger.info("Loaded %d courses from %s", report.course_count, path_str)
        if report.skipped_lines:
            logger.debug("Skipped lines in %s: %s", path_str, report.skipped_lines)
        return report

    def load_catalog(self, path: PathLike) -> Catalog:
        """Load a catalog file and return only the catalog."""
        return self.load(path).catalog

    def load_strict(self, path: PathLike) -> Catalog:
        """
        Load a catalog file, raising on the first problem.

        Raises:
            CatalogOpenError: The file could not be opened
            MalformedLineError: A line has fewer than two fields
        """
        path_str = str(path)
        catalog = {}
        try:
            with self._open(path_str) as f:
                for line_number, fields in self._records(f):
                    if len(fields) < MIN_FIELDS:
                        raise MalformedLineError(line_number, len(fields))
                    course = self._build_course(fields)
                    catalog[course.number] = course
        except OSError as e:
            raise CatalogOpenError(path_str, e.strerror or str(e)) from e
        return catalog

    def _open(self, path: str):
        # An empty path is an open failure like any other
        if not path:
            raise FileNotFoundError(2, "No file path given", path)
        # Lines end at "\n" only; a lone "\r" stays part of the field text
        return open(path, "r", encoding=FILE_ENCODING, errors="replace", newline="\n")

    def _records(self, lines: Iterable[str]) -> Iterator[Tuple[int, List[str]]]:
        """Yield (1-based line number, fields) for every line."""
        for line_number, raw_line in enumerate(lines, 1):
            line = strip_terminator(raw_line)
            fields = split_fields(line)
            logger.debug("Line %d: %d field(s)", line_number, len(fields))
            yield line_number, fields

    def _build_course(self, fields: List[str]) -> Course:
        return Course(
            number=fields[0],
            title=fields[1],
            prerequisites=list(fields[2:]),
        )
