"""
Error taxonomy for the advising tool.

Every expected failure is handled where it is detected and reported to
the user; these exceptions never cross from the data layer into the
shell. Only a failed start-up load ends the process.
"""


class AdvisingError(Exception):
    """Base class for all advising errors."""


class SourceUnavailableError(AdvisingError):
    """The course file could not be opened for reading."""

    def __init__(self, path, reason: str = ""):
        self.path = str(path)
        self.reason = reason
        message = f"Could not open file {self.path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class InvalidRecordError(AdvisingError):
    """A parsed line is missing its course number or title."""

    def __init__(self, line: str, line_number: int = 0):
        self.line = line
        self.line_number = line_number
        super().__init__(f"Invalid course data: {line!r}")


class CourseNotFoundError(AdvisingError, KeyError):
    """No course with the requested number exists in the catalog."""

    def __init__(self, course_number: str):
        self.course_number = course_number
        super().__init__(course_number)

    def __str__(self):
        return f"Course {self.course_number} not found."


class InvalidMenuChoiceError(AdvisingError, ValueError):
    """Menu input was not a number, or not a number in the accepted range."""

    def __init__(self, raw: str, numeric: bool = False):
        self.raw = raw
        self.numeric = numeric
        super().__init__(f"Invalid menu choice: {raw!r}")
