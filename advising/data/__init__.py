"""
Data loading and parsing module.

This package handles all file I/O and line parsing.
"""

from .loader import CatalogLoader
from .parser import CourseLineParser

__all__ = ["CatalogLoader", "CourseLineParser"]
