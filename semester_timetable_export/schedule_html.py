"""
Parse a weekly class-schedule HTML table into grouped course records.

The real HTML structure:
- Elements with class "day-time-cell" in source order, numbered from 0.
  Cell 0 is the leading label column; cells 1-7 are Monday to Sunday.
- Inside each day cell, one element with class "text-truncate" per class
  held that day. Its direct <span> children are, in order:
    "Intro to Systems"
    "CS101"
    "Room 4, 0900 - 1030"
- The third span is "<room>, <time spec>". The time spec is read by position:
  HHMM, a three-character separator, HHMM. The compact "HHMM-HHMM" form is
  accepted as well.

The same course slot appearing under several day cells is grouped into one
CourseRecord with the list of weekday codes it was seen on.
"""
from __future__ import annotations

import re
from typing import Dict, List

from bs4 import BeautifulSoup, Tag  # type: ignore[import]
from bs4.builder import ParserRejectedMarkup  # type: ignore[import]

from .errors import HTMLParseError, MalformedCellError, ScheduleError, UnknownColumnError
from .models import WEEKDAY_CODES, CourseRecord, WeekdaySet

DAY_CELL_CLASS = "day-time-cell"
ENTRY_CLASS = "text-truncate"


# ──────────────────────────────────────────────────────────────────
#  Cell fields
# ──────────────────────────────────────────────────────────────────

# Positional layout [0:2) [2:4) [4:7) [7:9) [9:11), or HHMM-HHMM.
_TIME_SPEC_RE = re.compile(r"^([0-9]{2})([0-9]{2})(?:.{3}|-)([0-9]{2})([0-9]{2})")


def parse_time_spec(text: str) -> tuple[int, int, int, int]:
    """
    Parse '0900 - 1030' (or '0900-1030') into (9, 0, 10, 30).

    Anything after the end minute is ignored. Short or non-numeric specs
    raise MalformedCellError instead of being truncated.
    """
    spec = text.strip()
    m = _TIME_SPEC_RE.match(spec)
    if not m:
        raise MalformedCellError("Malformed time field, expected HHMM - HHMM", spec)
    h1, m1, h2, m2 = (int(g) for g in m.groups())
    for hour, minute in ((h1, m1), (h2, m2)):
        if hour > 23 or minute > 59:
            raise MalformedCellError("Time out of range in time field", spec)
    return h1, m1, h2, m2


def parse_entry_fields(fields: List[str]) -> CourseRecord:
    """Build a CourseRecord from the trimmed span texts of one entry."""
    if len(fields) < 3:
        raise MalformedCellError(
            f"Expected 3 fields (title, course id, room and time), got {len(fields)}",
            " | ".join(fields),
        )
    title, course_id, room_time = fields[0], fields[1], fields[2]
    room, sep, time_spec = room_time.partition(",")
    if not sep:
        raise MalformedCellError("Missing ',' between room and time", room_time)

    start_hour, start_minute, end_hour, end_minute = parse_time_spec(time_spec)
    return CourseRecord(
        title=title.strip(),
        course_id=course_id.strip(),
        room=room.strip(),
        start_hour=start_hour,
        start_minute=start_minute,
        end_hour=end_hour,
        end_minute=end_minute,
    )


def parse_entry(entry: Tag, column: int | None = None) -> CourseRecord:
    """Parse one "text-truncate" entry element."""
    fields = [span.get_text().strip() for span in entry.find_all("span", recursive=False)]
    try:
        return parse_entry_fields(fields)
    except MalformedCellError as e:
        if column is None or e.column is not None:
            raise
        e.column = column
        e.args = (f"{e.args[0]} (column {column})",)
        raise


# ──────────────────────────────────────────────────────────────────
#  Table walk
# ──────────────────────────────────────────────────────────────────

def _weekday_for_column(column: int) -> str | None:
    return WEEKDAY_CODES.get(column)


def walk_schedule_table(soup: BeautifulSoup) -> Dict[CourseRecord, WeekdaySet]:
    """
    Group every entry of every day cell by course slot.

    Day cells are numbered from 0 in source order; 1 = Monday ... 7 = Sunday.
    Entries in cell 0 or past Sunday raise UnknownColumnError; such cells
    are ignored when empty. A slot listed twice under the same day keeps
    both codes.
    """
    courses: Dict[CourseRecord, WeekdaySet] = {}

    for column, cell in enumerate(soup.select(f".{DAY_CELL_CLASS}")):
        entries = cell.select(f".{ENTRY_CLASS}")
        if not entries:
            continue

        day = _weekday_for_column(column)
        if day is None:
            raise UnknownColumnError(column, len(entries))

        for entry in entries:
            record = parse_entry(entry, column)
            courses.setdefault(record, []).append(day)

    return courses


def parse_schedule_html(html: str) -> Dict[CourseRecord, WeekdaySet]:
    """
    Parse the schedule HTML fragment.

    :param html: Raw HTML containing the day cells.
    :returns: Ordered mapping CourseRecord -> weekday codes (first-seen order).
    """
    try:
        soup = BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as e:
        raise HTMLParseError(f"Could not parse schedule HTML: {e}") from e

    courses = walk_schedule_table(soup)
    # An empty table is rejected rather than exported as an empty calendar
    if not courses:
        raise ScheduleError(
            "Could not extract any course data from the HTML.\n"
            f"Expected elements with class '{DAY_CELL_CLASS}' containing "
            f"'{ENTRY_CLASS}' entries after the four date lines."
        )
    return courses
