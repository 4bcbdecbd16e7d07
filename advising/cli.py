"""
Command-Line Interface for the advising tool.

This module provides the entry point used by `python -m advising` and
the `advising` console script.

NOTE: Don't run this file directly. Run from the project directory:
    python3 -m advising
"""

from .config import setup_logging
from .shell import AdvisingShell


def main() -> int:
    """
    Run one interactive session.
    
    Returns the exit status: 0 after the user picks "Exit", 1 when the
    course file is missing or no courses could be loaded from it.
    """
    setup_logging()
    shell = AdvisingShell()
    return shell.run()


if __name__ == "__main__":
    raise SystemExit(main())
