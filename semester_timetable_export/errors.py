"""
Errors raised while reading a schedule and building its calendar.

Everything derived from ScheduleError is bad input and is reported to the user.
RecurrenceError means the code itself reached a state it should never reach.
"""
from __future__ import annotations


class ScheduleError(ValueError):
    """Base class for malformed schedule input."""


class InputFormatError(ScheduleError):
    """Header lines of the input file are missing or not DD/MM/YYYY dates."""


class HTMLParseError(ScheduleError):
    """The HTML fragment could not be parsed."""


class MalformedCellError(ScheduleError):
    """An entry in a day cell does not have the expected fields."""

    def __init__(self, message: str, text: str = "", column: int | None = None):
        detail = message
        if text:
            detail += f": {text!r}"
        if column is not None:
            detail += f" (column {column})"
        super().__init__(detail)
        self.text = text
        self.column = column


class UnknownColumnError(ScheduleError):
    """Entries were found in a day cell that maps to no weekday."""

    def __init__(self, column: int, entries: int):
        super().__init__(
            f"Found {entries} entr{'y' if entries == 1 else 'ies'} in day cell {column}, "
            "but only cells 1-7 (Monday-Sunday) may hold classes; cell 0 is the label column"
        )
        self.column = column
        self.entries = entries


class RecurrenceError(RuntimeError):
    """No first occurrence could be computed for a weekday list."""
