"""
Tests for building a catalog from a course file.
"""

import logging

import pytest

from advising.data import CatalogLoader
from advising.errors import SourceUnavailableError
from advising.models import Course


def test_scenario_two_courses(write_course_file):
    path = write_course_file(["CS101,Intro to CS,CS100", "CS100,Fundamentals"])
    catalog = CatalogLoader().load(path)

    assert len(catalog) == 2
    assert catalog.get("CS101") == Course("CS101", "Intro to CS", ["CS100"])
    assert catalog.get("CS100").prerequisites == []


def test_sample_file(sample_file):
    catalog = CatalogLoader().load(sample_file)
    assert len(catalog) == 8
    assert catalog.get("CSCI400").prerequisites == ["CSCI301", "CSCI350"]


def test_prerequisites_are_not_checked_against_catalog(write_course_file):
    path = write_course_file(["CSCI900,Capstone,NOPE100"])
    catalog = CatalogLoader().load(path)
    assert catalog.get("CSCI900").prerequisites == ["NOPE100"]
    assert "NOPE100" not in catalog


def test_blank_lines_skipped_silently(write_course_file, caplog):
    path = write_course_file(["", "CSCI100,Intro", "", ""])
    catalog = CatalogLoader().load(path)
    assert len(catalog) == 1
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


def test_invalid_lines_are_logged_and_skipped(write_course_file, caplog):
    path = write_course_file(["CSCI100,Intro", "JUSTANUMBER", ",No Number", "CSCI200,Data Structures"])

    with caplog.at_level(logging.WARNING, logger="advising.data.loader"):
        catalog = CatalogLoader().load(path)

    assert [c.course_number for c in catalog.list_all()] == ["CSCI100", "CSCI200"]
    warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 2
    assert "line 2: JUSTANUMBER" in warnings[0]
    assert "line 3: ,No Number" in warnings[1]


def test_only_invalid_lines_gives_empty_catalog(write_course_file):
    path = write_course_file(["ONE", "TWO", ",Three"])
    assert len(CatalogLoader().load(path)) == 0


def test_only_blank_lines_gives_empty_catalog(write_course_file):
    path = write_course_file(["", "", ""])
    assert not CatalogLoader().load(path)


def test_duplicate_course_last_one_wins(write_course_file):
    path = write_course_file([
        "CSCI100,Old Title,MATH100",
        "CSCI200,Data Structures",
        "CSCI100,New Title",
    ])
    catalog = CatalogLoader().load(path)
    assert len(catalog) == 2
    assert catalog.get("CSCI100") == Course("CSCI100", "New Title", [])


def test_loading_twice_gives_equal_catalogs(sample_file):
    loader = CatalogLoader()
    first = loader.load(sample_file)
    second = loader.load(sample_file)
    assert first is not second
    assert first == second
    assert [c.course_number for c in first.list_all()] == [c.course_number for c in second.list_all()]


def test_crlf_line_endings(tmp_path):
    path = tmp_path / "windows.csv"
    path.write_bytes(b"CSCI100,Intro\r\nCSCI200,Data Structures,CSCI100\r\n")
    catalog = CatalogLoader().load(path)
    assert catalog.get("CSCI200").prerequisites == ["CSCI100"]


def test_missing_file_load_returns_empty(tmp_path, caplog):
    path = tmp_path / "missing.csv"
    with caplog.at_level(logging.ERROR, logger="advising.data.loader"):
        catalog = CatalogLoader().load(path)
    assert len(catalog) == 0
    assert "Could not open file" in caplog.text


def test_missing_file_read_raises(tmp_path):
    with pytest.raises(SourceUnavailableError) as excinfo:
        CatalogLoader().read(tmp_path / "missing.csv")
    assert excinfo.value.path.endswith("missing.csv")


def test_directory_is_unavailable(tmp_path):
    with pytest.raises(SourceUnavailableError):
        CatalogLoader().read(tmp_path)


def test_carriage_return_inside_line_is_data(tmp_path):
    path = tmp_path / "embedded_cr.csv"
    path.write_bytes(b"CS101,Intro\rCS100,Fund\n")
    catalog = CatalogLoader().load(path)

    assert len(catalog) == 1
    assert catalog.get("CS101") == Course("CS101", "Intro\rCS100", ["Fund"])
    assert "CS100" not in catalog
