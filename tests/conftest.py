"""Shared fixtures: calibration documents written under tmp_path."""

import pytest

LITERAL_DOC = "1abc2\npqr3stu8vwx\na1b2c3d4e5f\ntreb7uchet\n"

NAMED_DOC = (
    "two1nine\n"
    "eightwothree\n"
    "abcone2threexyz\n"
    "xtwone3four\n"
    "4nineeightseven2\n"
    "zoneight234\n"
    "7pqrstsixteen\n"
)


@pytest.fixture
def literal_doc(tmp_path):
    """Part 1 example document (literal total 142)."""
    path = tmp_path / "literal.txt"
    path.write_text(LITERAL_DOC, encoding="utf-8")
    return path


@pytest.fixture
def named_doc(tmp_path):
    """Part 2 example document (named total 281)."""
    path = tmp_path / "named.txt"
    path.write_text(NAMED_DOC, encoding="utf-8")
    return path
