"""Document summation — read a calibration document and total its lines.

Data flow per pass:
1. Read the whole file as UTF-8 text
2. Split into lines on LF, tolerating CRLF
3. Scan each line under the chosen rule
4. Sum the calibration values

A document that cannot be read aborts the pass; there is no partial result.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from trebuchet.models import CalibrationLine, DocumentReport, Rule
from trebuchet.scanner import scan_line

PathLike = Union[str, Path]


class DocumentUnreadableError(Exception):
    """The calibration document could not be read.

    Covers a missing file, denied permissions and text that is not valid UTF-8.
    The underlying error is chained as __cause__.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")


def read_document(path: PathLike) -> str:
    """Read the entire document into memory."""
    p = Path(path)
    try:
        # newline="" keeps line endings untouched; split_lines handles them
        with open(p, encoding="utf-8", newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise DocumentUnreadableError(p, f"not valid UTF-8 text ({e.reason} at byte {e.start})") from e
    except OSError as e:
        raise DocumentUnreadableError(p, e.strerror or str(e)) from e


def split_lines(text: str) -> list[str]:
    """Split on "\\n" only, dropping one trailing "\\r" from each line.

    Other control characters (a lone "\\r", "\\v", "\\u2028", ...) stay inside
    the line. A final line break does not start an extra empty line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def scan_document(path: PathLike, rule: Rule) -> DocumentReport:
    """Scan every line of the document and return the per-line breakdown."""
    text = read_document(path)
    report = DocumentReport(path=Path(path), rule=rule)
    for number, line in enumerate(split_lines(text), 1):
        first, last = scan_line(line, rule)
        report.lines.append(CalibrationLine(number=number, text=line, first=first, last=last))
    return report


def sum_document(path: PathLike, rule: Rule) -> int:
    """Sum of the calibration values of every line in the document."""
    return scan_document(path, rule).total
