"""
Terminal Display Implementation.

This module handles all console output formatting for the advising
tool. Apart from the prompts read by the shell, it's the ONLY place
where printing happens in the advising package.

To create a different UI (web, curses, etc.), create a new class with
the same method signatures but different output handling.
"""

import sys
from typing import Iterable

from ..config import EXAMPLE_FILE_NAME, MENU_CHOICE_MAX, MENU_CHOICE_MIN
from ..models import Course


class TerminalDisplay:
    """
    Plain-text terminal output for courses and menu screens.
    
    Every course, whichever menu entry asked for it, is rendered by
    format_course() so the "display" and "print" paths always agree.
    """

    MENU_ITEMS = (
        (1, "Load Course Data"),
        (2, "Display All Courses"),
        (3, "Display Course Information"),
        (4, "Display Sorted List of Courses"),
        (5, "Print Course and Prerequisites"),
        (9, "Exit"),
    )

    # Prompts (no trailing newline, input is read on the same line)
    FILE_PATH_PROMPT = f"Enter the CSV file path (e.g., {EXAMPLE_FILE_NAME}): "
    CHOICE_PROMPT = "Enter your choice: "
    COURSE_NUMBER_PROMPT = "Enter the course number: "
    NOT_A_NUMBER_PROMPT = "Invalid input. Please enter a valid number: "
    OUT_OF_RANGE_PROMPT = (
        f"Invalid choice. Please enter a number between {MENU_CHOICE_MIN} and {MENU_CHOICE_MAX}: "
    )

    @classmethod
    def format_course(cls, course: Course) -> str:
        """Two lines: number and title, then the prerequisites (or a marker)."""
        header = f"Course Number: {course.course_number}, Title: {course.title}"
        if course.has_prerequisites:
            return f"{header}\nPrerequisites: {' '.join(course.prerequisites)}"
        return f"{header}\nNo prerequisites"

    @classmethod
    def print_course(cls, course: Course):
        print(cls.format_course(course))

    @classmethod
    def print_courses(cls, courses: Iterable[Course]):
        """Print every course, one after another."""
        for course in courses:
            cls.print_course(course)

    @classmethod
    def print_sorted_courses(cls, courses: list):
        """Print an already-sorted listing under a header."""
        if not courses:
            print("No courses available.")
            return
        print()
        print("Sorted List of Courses:")
        cls.print_courses(courses)

    @classmethod
    def print_not_found(cls, course_number: str):
        print(f"Course {course_number} not found.")

    @classmethod
    def print_menu(cls):
        print()
        print("Menu:")
        for number, label in cls.MENU_ITEMS:
            print(f"{number}. {label}")

    @classmethod
    def print_invalid_option(cls):
        print("Invalid choice. Please enter a valid option.")

    @classmethod
    def print_load_result(cls, count: int):
        if count:
            print("Courses loaded successfully!")
        else:
            print("No courses were loaded.")

    @classmethod
    def print_startup_failure(cls):
        print("No courses were loaded. Exiting program.")

    @classmethod
    def print_source_unavailable(cls, path: str, reason: str = ""):
        """File problems go to stderr, next to the loader's diagnostics."""
        if reason:
            message = f"Error: Could not open file '{path}' ({reason}). Please check the file path."
        else:
            message = f"Error: File '{path}' does not exist. Please check the file path."
        print(message, file=sys.stderr)

    @classmethod
    def print_goodbye(cls):
        print("Exiting program. Goodbye!")
