"""
Read the schedule input file: four DD/MM/YYYY header lines, then the HTML table.
"""
from __future__ import annotations

import re
from datetime import date, datetime
from pathlib import Path

from .errors import InputFormatError
from .models import SemesterWindow

INPUT_DATE_FORMAT = "%d/%m/%Y"
_INPUT_DATE_RE = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}")

_HEADER_NAMES = (
    "semester start",
    "midterm start",
    "midterm end",
    "semester end",
)


def parse_input_date(text: str, name: str = "date") -> date:
    """Parse a header date like '15/02/2024' (two-digit day and month)."""
    value = text.strip()
    error = InputFormatError(f"Invalid {name}: '{value}'. Expected DD/MM/YYYY.")
    if not _INPUT_DATE_RE.fullmatch(value):
        raise error
    try:
        return datetime.strptime(value, INPUT_DATE_FORMAT).date()
    except ValueError:
        raise error from None


def split_schedule_input(text: str) -> tuple[SemesterWindow, str]:
    """Split input text into the semester window and the HTML fragment."""
    lines = text.splitlines(keepends=True)
    if len(lines) < len(_HEADER_NAMES):
        raise InputFormatError(
            f"Expected {len(_HEADER_NAMES)} date lines "
            "(semester start, midterm start, midterm end, semester end), "
            f"got {len(lines)} line(s)"
        )

    dates = [
        parse_input_date(line, name)
        for line, name in zip(lines, _HEADER_NAMES)
    ]
    window = SemesterWindow(*dates)
    html = "".join(lines[len(_HEADER_NAMES):])
    return window, html


def read_schedule_input(path: str | Path) -> tuple[SemesterWindow, str]:
    """Read and split the input file. OSError propagates to the caller."""
    text = Path(path).read_text(encoding="utf-8")
    return split_schedule_input(text)
