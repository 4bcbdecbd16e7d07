"""
Data models for the advising tool.

These dataclasses are the "contracts" between the loader, the catalog
and the display layer.
"""

from .course import Course
from .catalog import CourseCatalog

__all__ = [
    "Course",
    "CourseCatalog",
]
