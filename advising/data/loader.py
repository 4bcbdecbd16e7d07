"""
Catalog loading.

This module reads a course file line by line and builds a CourseCatalog.
"""

import logging
from pathlib import Path

from ..config import FILE_ENCODING, FILE_ENCODING_ERRORS
from ..errors import InvalidRecordError, SourceUnavailableError
from ..models import CourseCatalog
from .parser import CourseLineParser

logger = logging.getLogger(__name__)


class CatalogLoader:
    """
    Builds a CourseCatalog from a delimited text file.
    
    ERROR POLICY:
    - Missing/unreadable file: logged as an error, empty catalog returned
      by load(). read() raises SourceUnavailableError for callers that
      want to handle it themselves.
    - Empty line: skipped silently.
    - Line without a course number or title: logged as a warning naming
      the line, skipped, loading continues.
    - Duplicate course number: the later line replaces the earlier one.
    
    The catalog is built completely before it is returned, so callers can
    swap it in place of an old one without anyone seeing a partial load.
    
    Usage:
        loader = CatalogLoader()
        catalog = loader.load("courses.csv")
    """

    def __init__(self, parser: CourseLineParser = None):
        self.parser = parser or CourseLineParser()

    def load(self, path) -> CourseCatalog:
        """Load a catalog, reporting an unavailable file instead of raising."""
        try:
            return self.read(path)
        except SourceUnavailableError as e:
            logger.error("%s", e)
            return CourseCatalog()

    def read(self, path) -> CourseCatalog:
        path = Path(path)
        try:
            handle = open(
                path,
                "r",
                encoding=FILE_ENCODING,
                errors=FILE_ENCODING_ERRORS,
                newline="\n",
            )
        except OSError as e:
            raise SourceUnavailableError(path, e.strerror or str(e)) from e

        catalog = CourseCatalog()
        skipped = 0
        with handle:
            for line_number, raw_line in enumerate(handle, 1):
                # Only LF ends a line; a CR inside a line is kept as data
                line = raw_line.rstrip("\n")
                if line.endswith("\r"):
                    line = line[:-1]
                if not line:
                    continue

                course = self.parser.parse(line)
                try:
                    course.validate(line, line_number)
                except InvalidRecordError as e:
                    logger.warning(
                        "Invalid course data. Skipping line %d: %s",
                        e.line_number,
                        e.line,
                    )
                    skipped += 1
                    continue

                if course.course_number in catalog:
                    logger.debug(
                        "Line %d replaces earlier entry for %s",
                        line_number,
                        course.course_number,
                    )
                catalog.add(course)

        logger.info("Loaded %d courses from %s (%d lines skipped)", len(catalog), path, skipped)
        return catalog
