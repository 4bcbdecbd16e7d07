"""
Course data model.

Contains the Course dataclass that represents one line of the course
file once it has been split into fields.
"""

from dataclasses import dataclass, field

from ..errors import InvalidRecordError


@dataclass
class Course:
    """
    A single course entry from the catalog file.
    
    Prerequisites are kept exactly as written in the file. They are NOT
    checked against the catalog: a prerequisite may name a course that
    was never loaded, and that is accepted.
    
    Attributes:
        course_number: Unique key within a catalog (e.g., "CSCI200")
        title: Human-readable course title
        prerequisites: Course numbers required first, in file order
    """
    course_number: str
    title: str
    prerequisites: list = field(default_factory=list)

    def is_valid(self) -> bool:
        """A course needs both a number and a title to enter a catalog."""
        return bool(self.course_number) and bool(self.title)

    def validate(self, line: str = "", line_number: int = 0):
        if not self.is_valid():
            raise InvalidRecordError(line, line_number)
        return self

    @property
    def has_prerequisites(self) -> bool:
        return len(self.prerequisites) > 0
