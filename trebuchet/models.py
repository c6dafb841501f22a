"""Data models for trebuchet.

Rule enum, CalibrationLine, DocumentReport — the typed structures that flow
through scanner → summation → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


class Rule(str, Enum):
    """Digit recognition rules."""

    LITERAL = "literal"
    NAMED = "named"


# Puzzle part number for each rule, in the order the default run prints them.
PART_RULES = [(1, Rule.LITERAL), (2, Rule.NAMED)]


@dataclass
class CalibrationLine:
    """First and last digit found on one line of the document."""

    number: int
    text: str
    first: Optional[int] = None
    last: Optional[int] = None

    @property
    def value(self) -> int:
        # A missing end counts as 0
        return (self.first or 0) * 10 + (self.last or 0)

    def to_dict(self) -> dict:
        return {
            "number": self.number,
            "text": self.text,
            "first": self.first,
            "last": self.last,
            "value": self.value,
        }


@dataclass
class DocumentReport:
    """Per-line breakdown of a single pass over a calibration document."""

    path: Path
    rule: Rule
    lines: list[CalibrationLine] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(line.value for line in self.lines)

    @property
    def blank_count(self) -> int:
        """Number of lines that contributed nothing because no digit was found."""
        return sum(1 for line in self.lines if line.first is None)

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "path": str(self.path),
            "rule": self.rule.value,
            "total": self.total,
            "lines": [line.to_dict() for line in self.lines],
        }
