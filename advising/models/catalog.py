"""
Course catalog.

The in-memory lookup table of loaded courses, keyed by course number.
"""

from typing import Iterable, List, Optional

from ..errors import CourseNotFoundError
from .course import Course


class CourseCatalog:
    """
    Read-only view of the courses loaded from one file.
    
    A catalog is filled once by the CatalogLoader and then only queried.
    Reloading builds a brand new catalog; the shell swaps its reference
    so a half-built catalog is never visible.
    
    Usage:
        catalog = CourseCatalog([Course("CSCI100", "Intro")])
        catalog.get("CSCI100")      # -> Course
        catalog.get("MATH999")      # -> None
        catalog.list_sorted()       # -> [Course, ...] by course number
    """

    def __init__(self, courses: Iterable[Course] = ()):
        self._courses = {}
        for course in courses:
            self.add(course)

    def add(self, course: Course):
        """Insert a course. An existing entry with the same number is replaced."""
        self._courses[course.course_number] = course

    def get(self, course_number: str) -> Optional[Course]:
        """Exact-match lookup. Returns None when the course is not loaded."""
        return self._courses.get(course_number)

    def require(self, course_number: str) -> Course:
        """Like get(), but raises CourseNotFoundError instead of returning None."""
        course = self.get(course_number)
        if course is None:
            raise CourseNotFoundError(course_number)
        return course

    def list_all(self) -> List[Course]:
        """All courses in the order they were loaded."""
        return list(self._courses.values())

    def list_sorted(self) -> List[Course]:
        """
        All courses ordered by course number.
        
        Plain string comparison (code point order): "CSCI100" < "CSCI2" and
        "MATH" < "csci". Computed on every call; nothing is kept sorted.
        """
        return [self._courses[key] for key in sorted(self._courses)]

    def __len__(self):
        return len(self._courses)

    def __contains__(self, course_number):
        return course_number in self._courses

    def __eq__(self, other):
        if not isinstance(other, CourseCatalog):
            return NotImplemented
        return self._courses == other._courses

    def __repr__(self):
        return f"CourseCatalog({len(self)} courses)"
