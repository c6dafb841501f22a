"""Digit scanning for calibration lines.

Two rules are supported. The literal rule only recognises the ASCII
characters 0-9. The named rule also recognises the words "one" through
"nine", matched case-sensitively. Spellings may overlap ("twone" reads as 2
from the left and 1 from the right), so the winner is always decided by scan
position, never by the order of DIGIT_WORDS.
"""

from __future__ import annotations

from typing import Optional

from trebuchet.models import Rule

DIGIT_WORDS = (
    ("one", 1),
    ("two", 2),
    ("three", 3),
    ("four", 4),
    ("five", 5),
    ("six", 6),
    ("seven", 7),
    ("eight", 8),
    ("nine", 9),
)

MIN_WORD_LEN = min(len(word) for word, _ in DIGIT_WORDS)  # one, two, six
MAX_WORD_LEN = max(len(word) for word, _ in DIGIT_WORDS)  # three, seven, eight


def digit_value(char: str) -> Optional[int]:
    """Return the value of an ASCII digit, or None for any other character.

    Non-ASCII digits such as '٣' are not digits here.
    """
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    return None


def first_digit(line: str) -> Optional[int]:
    """First ASCII digit of the line, scanning left to right."""
    for char in line:
        digit = digit_value(char)
        if digit is not None:
            return digit
    return None


def last_digit(line: str) -> Optional[int]:
    """Last ASCII digit of the line, scanning right to left."""
    for char in reversed(line):
        digit = digit_value(char)
        if digit is not None:
            return digit
    return None


def _window_first(window: str) -> Optional[int]:
    """Digit that the window starts with: literal first, then words."""
    digit = digit_value(window[0])
    if digit is not None:
        return digit
    for word, value in DIGIT_WORDS:
        if window.startswith(word):
            return value
    return None


def _window_last(window: str) -> Optional[int]:
    """Digit that the window ends with: literal first, then words."""
    digit = digit_value(window[-1])
    if digit is not None:
        return digit
    for word, value in DIGIT_WORDS:
        if window.endswith(word):
            return value
    return None


def first_named_digit(line: str) -> Optional[int]:
    """First digit of the line under the named rule.

    Windows of up to MAX_WORD_LEN characters are tried at each start position
    that leaves room for the shortest word. The last few characters, too close
    to the end to hold a word, can only be literal digits, so the literal scan
    covers them (and the whole of any line shorter than MIN_WORD_LEN).
    """
    for start in range(len(line) - MIN_WORD_LEN + 1):
        digit = _window_first(line[start:start + MAX_WORD_LEN])
        if digit is not None:
            return digit
    return first_digit(line)


def last_named_digit(line: str) -> Optional[int]:
    """Last digit of the line under the named rule.

    Mirror of first_named_digit: windows end at each position from the end of
    the line back to MIN_WORD_LEN.
    """
    for end in range(len(line), MIN_WORD_LEN - 1, -1):
        digit = _window_last(line[max(0, end - MAX_WORD_LEN):end])
        if digit is not None:
            return digit
    return last_digit(line)


def scan_line(line: str, rule: Rule) -> tuple[Optional[int], Optional[int]]:
    """Return (first, last) digits of a line under the given rule."""
    if rule == Rule.NAMED:
        return first_named_digit(line), last_named_digit(line)
    return first_digit(line), last_digit(line)


def extract_value(line: str, rule: Rule) -> int:
    """Calibration value of a line: 10 * first + last, 0 for a missing end."""
    first, last = scan_line(line, rule)
    return (first or 0) * 10 + (last or 0)
