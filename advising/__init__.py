"""
ABCU Advising Catalog Package
=============================

An interactive console tool for browsing the course catalog used by
academic advisors: course numbers, titles and prerequisites.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                           DATA LAYER                                    │
│        (Pure logic - returns data structures, NO printing)              │
│                                                                         │
│  ┌──────────────────┐  ┌──────────────────┐  ┌──────────────────────┐   │
│  │ CourseLineParser │─▶│  CatalogLoader   │─▶│    CourseCatalog     │   │
│  │ (line → Course)  │  │ (file → catalog) │  │ (lookup, listings)   │   │
│  └──────────────────┘  └──────────────────┘  └──────────────────────┘   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns Course dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                 │
│  ┌─────────────────────────────────────────────────────────────────┐    │
│  │                    TerminalDisplay                              │    │
│  │  • Formats courses and menus, prints to console                 │    │
│  └─────────────────────────────────────────────────────────────────┘    │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                       AdvisingShell                                     │
│        (Orchestrator - owns the catalog, runs the menu loop)            │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

advising/
├── __init__.py          # This file - main exports
├── __main__.py          # python -m advising
├── config.py            # Configuration constants, logging setup
├── errors.py            # Exception classes
├── shell.py             # AdvisingShell orchestrator
├── cli.py               # Command-line entry point
│
├── models/
│   ├── course.py        # Course
│   └── catalog.py       # CourseCatalog
│
├── data/
│   ├── parser.py        # CourseLineParser
│   └── loader.py        # CatalogLoader
│
└── ui/
    └── terminal.py      # TerminalDisplay

INPUT FILE
----------

One course per line, no header, comma-delimited:

    CSCI100,Introduction to Computer Science
    CSCI200,Data Structures,CSCI101
    CSCI300,Introduction to Algorithms,CSCI200,MATH201

USAGE
-----

Programmatic:

    from advising import CatalogLoader

    catalog = CatalogLoader().load("courses.csv")
    course = catalog.get("CSCI200")
    for course in catalog.list_sorted():
        print(course.course_number, course.title)

Running from command line:

    python -m advising

"""

# Version
__version__ = "1.0.0"

# Main exports
from .shell import AdvisingShell, MenuOption, ShellState, parse_menu_choice
from .cli import main

# Model exports
from .models import Course, CourseCatalog

# Data exports
from .data import CatalogLoader, CourseLineParser

# UI exports
from .ui import TerminalDisplay

# Error exports
from .errors import (
    AdvisingError,
    SourceUnavailableError,
    InvalidRecordError,
    CourseNotFoundError,
    InvalidMenuChoiceError,
)

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "AdvisingShell",
    "MenuOption",
    "ShellState",
    "parse_menu_choice",
    "main",
    # Models
    "Course",
    "CourseCatalog",
    # Data
    "CatalogLoader",
    "CourseLineParser",
    # UI
    "TerminalDisplay",
    # Errors
    "AdvisingError",
    "SourceUnavailableError",
    "InvalidRecordError",
    "CourseNotFoundError",
    "InvalidMenuChoiceError",
]
