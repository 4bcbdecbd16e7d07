"""
Configuration constants for the advising tool.

This module contains the configuration values used throughout the
advising package. Centralizing these makes it easy to adjust the input
format or the menu without touching the logic.
"""

import logging
import sys

# =============================================================================
# INPUT FILE FORMAT
# =============================================================================

# Each non-empty line is: <course number>,<title>[,<prerequisite>]*
# There is no header row and no quoting, so a comma inside a title splits it.
FIELD_DELIMITER = ","

# Files are read as UTF-8; undecodable bytes are replaced instead of
# aborting the whole load.
FILE_ENCODING = "utf-8"
FILE_ENCODING_ERRORS = "replace"

EXAMPLE_FILE_NAME = "CS 300 ABCU_Advising_Program_Input.csv"


# =============================================================================
# MENU
# =============================================================================

# Accepted range for a menu choice (inclusive). Numbers inside the range
# without a menu entry are rejected by the shell after validation.
MENU_CHOICE_MIN = 1
MENU_CHOICE_MAX = 9


# =============================================================================
# EXIT STATUS
# =============================================================================

EXIT_OK = 0
EXIT_FAILURE = 1


# =============================================================================
# LOGGING
# =============================================================================

LOG_FORMAT = "%(levelname)s: %(message)s"
LOG_LEVEL = logging.WARNING


def setup_logging(level=LOG_LEVEL, stream=None):
    """Route diagnostics (bad lines, missing files) to stderr."""
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        stream=stream if stream is not None else sys.stderr,
    )
    return logging.getLogger("advising")
