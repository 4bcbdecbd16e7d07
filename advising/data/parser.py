"""
Course line parsing.

This module turns one line of the course file into a Course object.
"""

from ..config import FIELD_DELIMITER
from ..models import Course


class CourseLineParser:
    """
    Splits a delimited line into a Course.
    
    FIELD LAYOUT:
        <course number>,<title>[,<prerequisite>]*
    
    WHITESPACE IS KEPT:
    Fields are NOT stripped. "CSCI100, Intro" gives the title " Intro".
    The catalog keys must match what is typed at the prompt byte for byte,
    so the parser never rewrites field contents.
    
    EMPTY PREREQUISITES:
    Blank prerequisite fields are dropped, so a trailing comma or ",,"
    does not produce a spurious "" prerequisite.
    
    The parser never raises. A line with too few fields comes back as a
    Course with an empty number or title; the loader decides what to do
    with it.
    """

    def __init__(self, delimiter: str = FIELD_DELIMITER):
        self.delimiter = delimiter

    def parse(self, line: str) -> Course:
        fields = line.split(self.delimiter)
        course_number = fields[0]
        title = fields[1] if len(fields) > 1 else ""
        prerequisites = [f for f in fields[2:] if f]
        return Course(
            course_number=course_number,
            title=title,
            prerequisites=prerequisites,
        )
