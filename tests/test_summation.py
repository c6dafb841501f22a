"""Tests for reading and summing calibration documents."""

import json
from pathlib import Path

import pytest

from trebuchet.models import CalibrationLine, DocumentReport, Rule
from trebuchet.summation import (
    DocumentUnreadableError,
    read_document,
    scan_document,
    split_lines,
    sum_document,
)


# --- Totals ---

def test_literal_total(literal_doc):
    assert sum_document(literal_doc, Rule.LITERAL) == 142


def test_named_total(named_doc):
    assert sum_document(named_doc, Rule.NAMED) == 281


def test_named_rule_on_literal_document(literal_doc):
    """No words in the part 1 example, so both rules agree."""
    assert sum_document(literal_doc, Rule.NAMED) == 142


def test_accepts_str_path(literal_doc):
    assert sum_document(str(literal_doc), Rule.LITERAL) == 142


def test_repeated_passes_are_identical(named_doc):
    totals = {sum_document(named_doc, Rule.NAMED) for _ in range(3)}
    assert totals == {281}


# --- Line splitting ---

def test_crlf_line_breaks(tmp_path):
    path = tmp_path / "crlf.txt"
    path.write_bytes(b"1abc2\r\npqr3stu8vwx\r\n")
    assert sum_document(path, Rule.LITERAL) == 50


def test_split_lines():
    assert split_lines("") == []
    assert split_lines("a\nb") == ["a", "b"]
    assert split_lines("a\r\nb\r\n") == ["a", "b"]
    assert split_lines("a\n\n") == ["a", ""]
    assert split_lines("a\r\r\n") == ["a\r"]


@pytest.mark.parametrize(
    "raw,rule",
    [
        (b"1a\rb2\n", Rule.LITERAL),
        ("1a\u2028b2\n".encode("utf-8"), Rule.LITERAL),
        (b"1a\x0cb2\n", Rule.LITERAL),
        (b"one\x0btwo\n", Rule.NAMED),
        ("1a\x85b2\n".encode("utf-8"), Rule.LITERAL),
    ],
)
def test_only_newline_ends_a_line(tmp_path, raw, rule):
    """A lone CR, vertical tab, form feed or Unicode separator is line content."""
    path = tmp_path / "controls.txt"
    path.write_bytes(raw)
    report = scan_document(path, rule)
    assert len(report.lines) == 1
    assert report.total == 12


def test_blank_and_digitless_lines_contribute_zero(tmp_path):
    path = tmp_path / "gaps.txt"
    path.write_text("1abc2\n\nnothing here\n\n", encoding="utf-8")
    report = scan_document(path, Rule.LITERAL)
    assert [line.value for line in report.lines] == [12, 0, 0, 0]
    assert report.total == 12
    assert report.blank_count == 3


def test_empty_document(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    assert sum_document(path, Rule.NAMED) == 0


def test_no_trailing_newline(tmp_path):
    path = tmp_path / "tail.txt"
    path.write_text("1abc2\ntreb7uchet", encoding="utf-8")
    assert sum_document(path, Rule.LITERAL) == 89


# --- Report ---

def test_scan_document_lines(named_doc):
    report = scan_document(named_doc, Rule.NAMED)
    assert report.rule == Rule.NAMED
    assert report.path == named_doc
    assert len(report.lines) == 7
    assert report.lines[0] == CalibrationLine(number=1, text="two1nine", first=2, last=9)
    assert report.lines[3].value == 24


def test_report_to_dict_is_json_serializable(literal_doc):
    d = scan_document(literal_doc, Rule.LITERAL).to_dict()
    assert d["rule"] == "literal"
    assert d["total"] == 142
    assert d["lines"][2] == {"number": 3, "text": "a1b2c3d4e5f", "first": 1, "last": 5, "value": 15}
    json.dumps(d)


def test_line_value_with_missing_ends():
    assert CalibrationLine(number=1, text="x").value == 0
    assert DocumentReport(path=Path("empty.txt"), rule=Rule.LITERAL).total == 0


# --- Unreadable documents ---

def test_missing_file(tmp_path):
    missing = tmp_path / "nope.txt"
    with pytest.raises(DocumentUnreadableError) as exc_info:
        sum_document(missing, Rule.LITERAL)
    assert exc_info.value.path == missing
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)
    assert "nope.txt" in str(exc_info.value)


def test_directory_is_unreadable(tmp_path):
    with pytest.raises(DocumentUnreadableError) as exc_info:
        read_document(tmp_path)
    assert isinstance(exc_info.value.__cause__, OSError)


def test_invalid_utf8(tmp_path):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"1abc2\n\xff\xfe9\n")
    with pytest.raises(DocumentUnreadableError) as exc_info:
        sum_document(path, Rule.LITERAL)
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
    assert "UTF-8" in exc_info.value.reason
