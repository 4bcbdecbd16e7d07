"""
Advising Shell - Main Orchestrator.

This module contains the AdvisingShell class that connects the data
layer (loader and catalog) to the presentation layer (TerminalDisplay).

NOTE: Don't run this file directly. Run from the project directory:
    python3 -m advising
"""

import logging
import re
from enum import Enum, IntEnum
from pathlib import Path

from .config import EXIT_FAILURE, EXIT_OK, MENU_CHOICE_MAX, MENU_CHOICE_MIN
from .data import CatalogLoader
from .errors import InvalidMenuChoiceError, SourceUnavailableError
from .models import CourseCatalog
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)

# Plain ASCII digits with an optional minus sign
MENU_CHOICE_PATTERN = re.compile(r"-?[0-9]+")


class ShellState(Enum):
    """
    Lifecycle of one shell session.

    AWAITING_FILE_PATH: Waiting for the user to name the course file
    READY: A non-empty catalog is loaded, menu is waiting for a choice
    MENU_LOOP: A menu command is being carried out
    EXITED: Session finished (normally or after a start-up failure)
    """
    AWAITING_FILE_PATH = "awaiting_file_path"
    READY = "ready"
    MENU_LOOP = "menu_loop"
    EXITED = "exited"


class MenuOption(IntEnum):
    LOAD = 1
    DISPLAY_ALL = 2
    DISPLAY_COURSE = 3
    SORTED_LIST = 4
    PRINT_COURSE = 5
    EXIT = 9


def parse_menu_choice(raw: str) -> int:
    """
    Validate one line of menu input.

    Returns the choice as an int when it is a whole number in
    [MENU_CHOICE_MIN, MENU_CHOICE_MAX]. Raises InvalidMenuChoiceError
    otherwise; its `numeric` flag tells a non-number apart from a number
    outside the range so the shell can word its re-prompt.
    """
    text = raw.strip()
    if not MENU_CHOICE_PATTERN.fullmatch(text):
        raise InvalidMenuChoiceError(raw)
    choice = int(text)
    if not MENU_CHOICE_MIN <= choice <= MENU_CHOICE_MAX:
        raise InvalidMenuChoiceError(raw, numeric=True)
    return choice


class AdvisingShell:
    """
    Interactive menu over a course catalog.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    1. Asks for the course file and loads it with the CatalogLoader
    2. Reads validated menu choices
    3. Queries the CourseCatalog and hands results to the display

    The shell owns the only catalog and the file path for the whole
    session. Reloading builds a new catalog with the loader and then
    rebinds self.catalog, so commands never see a partial load.

    TO CHANGE THE UI:
    -----------------
    Pass a different display class and input function:

        shell = AdvisingShell(display=MyDisplay, input_func=my_reader)

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        shell = AdvisingShell()
        exit_status = shell.run()
    """

    def __init__(self, loader: CatalogLoader = None, display=TerminalDisplay, input_func=None):
        self.loader = loader or CatalogLoader()
        self.display = display
        self.input_func = input_func or input
        self.catalog = CourseCatalog()
        self.file_path = None
        self.state = ShellState.AWAITING_FILE_PATH
        self._handlers = {
            MenuOption.LOAD: self.reload,
            MenuOption.DISPLAY_ALL: self.display_all,
            MenuOption.DISPLAY_COURSE: self.show_course,
            MenuOption.SORTED_LIST: self.display_sorted,
            MenuOption.PRINT_COURSE: self.show_course,
        }

    # =========================================================================
    #  SESSION
    # =========================================================================

    def run(self) -> int:
        """Run a whole session and return the process exit status."""
        status = self.start()
        if status != EXIT_OK:
            return status
        return self.menu_loop()

    def start(self) -> int:
        """
        Ask for the course file and perform the initial load.

        Returns EXIT_OK when a non-empty catalog was loaded, EXIT_FAILURE
        when the file is missing or produced no courses.
        """
        self.state = ShellState.AWAITING_FILE_PATH
        try:
            # Whole line: file names may contain spaces
            file_path = self.input_func(self.display.FILE_PATH_PROMPT)
        except EOFError:
            file_path = ""

        if not file_path or not Path(file_path).exists():
            self.display.print_source_unavailable(file_path)
            self.state = ShellState.EXITED
            return EXIT_FAILURE

        self.file_path = file_path
        catalog = self.loader.load(file_path)
        if not catalog:
            self.display.print_startup_failure()
            self.state = ShellState.EXITED
            return EXIT_FAILURE

        self.catalog = catalog
        self.display.print_load_result(len(catalog))
        self.state = ShellState.READY
        return EXIT_OK

    def menu_loop(self) -> int:
        """Show the menu and dispatch choices until the user exits."""
        while True:
            self.state = ShellState.READY
            self.display.print_menu()
            try:
                choice = self.read_choice()
                if choice == MenuOption.EXIT:
                    break
                handler = self._handlers.get(choice)
                if handler is None:
                    self.display.print_invalid_option()
                    continue
                self.state = ShellState.MENU_LOOP
                handler()
            except EOFError:
                # Input closed: leave the same way option 9 does
                break

        self.display.print_goodbye()
        self.state = ShellState.EXITED
        return EXIT_OK

    # =========================================================================
    #  INPUT
    # =========================================================================

    def read_choice(self) -> int:
        """Read menu input until it is a number in the accepted range."""
        prompt = self.display.CHOICE_PROMPT
        while True:
            raw = self.input_func(prompt)
            try:
                return parse_menu_choice(raw)
            except InvalidMenuChoiceError as e:
                logger.debug("%s", e)
                if e.numeric:
                    prompt = self.display.OUT_OF_RANGE_PROMPT
                else:
                    prompt = self.display.NOT_A_NUMBER_PROMPT

    def read_course_number(self) -> str:
        """Read the first whitespace-delimited token; blank lines are skipped."""
        while True:
            tokens = self.input_func(self.display.COURSE_NUMBER_PROMPT).split()
            if tokens:
                return tokens[0]

    # =========================================================================
    #  COMMANDS
    # =========================================================================

    def reload(self):
        """
        Load the catalog again from the same file.

        A file that has gone missing keeps the current catalog. A file
        that opens but yields no courses replaces it with an empty one;
        either way the user is told, and the session continues.
        """
        try:
            catalog = self.loader.read(self.file_path)
        except SourceUnavailableError as e:
            self.display.print_source_unavailable(self.file_path, e.reason)
            self.display.print_load_result(0)
            return
        self.catalog = catalog
        self.display.print_load_result(len(catalog))

    def display_all(self):
        self.display.print_courses(self.catalog.list_all())

    def display_sorted(self):
        self.display.print_sorted_courses(self.catalog.list_sorted())

    def show_course(self):
        """Menu entries 3 and 5: look one course up and print it."""
        course_number = self.read_course_number()
        course = self.catalog.get(course_number)
        if course is None:
            self.display.print_not_found(course_number)
        else:
            self.display.print_course(course)
