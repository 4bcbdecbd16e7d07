"""Shared fixtures for the advising tests."""

import pytest


SAMPLE_LINES = [
    "MATH201,Discrete Mathematics",
    "CSCI300,Introduction to Algorithms,CSCI200,MATH201",
    "CSCI350,Operating Systems,CSCI300",
    "CSCI101,Introduction to Programming in C++,CSCI100",
    "CSCI100,Introduction to Computer Science",
    "CSCI301,Advanced Programming in C++,CSCI101",
    "CSCI400,Large Software Development,CSCI301,CSCI350",
    "CSCI200,Data Structures,CSCI101",
]


class ScriptedInput:
    """
    Stand-in for input(): returns queued answers, then raises EOFError.

    Prompts are recorded so tests can check which re-prompt was used.
    """

    def __init__(self, *answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def write_course_file(tmp_path):
    """Write lines to a file under tmp_path and return its path."""
    def _write(lines, name="courses.csv"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write


@pytest.fixture
def sample_file(write_course_file):
    return write_course_file(SAMPLE_LINES, name="CS 300 ABCU_Advising_Program_Input.csv")


@pytest.fixture
def scripted_input():
    """Factory for ScriptedInput feeds."""
    return ScriptedInput


@pytest.fixture
def run_shell(scripted_input):
    """Run a full AdvisingShell session; returns (shell, status, feed)."""
    from advising.shell import AdvisingShell

    def _run(*answers):
        feed = scripted_input(*answers)
        shell = AdvisingShell(input_func=feed)
        status = shell.run()
        return shell, status, feed
    return _run
