"""Data models for course slots and the semester calendar window."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Dict, List, Tuple

# Day cell position -> RRULE weekday code. Cells count from 0 and cell 0
# is the leading label column, so it has no code.
WEEKDAY_CODES: Dict[int, str] = {
    1: "MO",
    2: "TU",
    3: "WE",
    4: "TH",
    5: "FR",
    6: "SA",
    7: "SU",
}

# Weekday codes in the order a course was first seen under each day cell.
# Not deduplicated: the order and content go straight into RRULE BYDAY.
WeekdaySet = List[str]


@dataclass(frozen=True)
class CourseRecord:
    """One scheduled class slot; all seven fields form the grouping key."""

    title: str
    course_id: str
    room: str
    start_hour: int
    start_minute: int
    end_hour: int
    end_minute: int

    @property
    def summary(self) -> str:
        return f"{self.title}, {self.course_id}"

    @property
    def time_range(self) -> str:
        return (
            f"{self.start_hour:02d}:{self.start_minute:02d}-"
            f"{self.end_hour:02d}:{self.end_minute:02d}"
        )


@dataclass(frozen=True)
class SemesterWindow:
    """
    Semester dates read from the input header.

    Ordering (start <= midterm start <= midterm end <= end) is the caller's
    responsibility and is not checked here.
    """

    semester_start: date
    midterm_start: date
    midterm_end: date
    semester_end: date

    @property
    def last_class_before_break(self) -> date:
        return self.midterm_start - timedelta(days=1)

    @property
    def first_class_after_break(self) -> date:
        return self.midterm_end + timedelta(days=1)

    def halves(self) -> List[Tuple[date, date]]:
        """(first possible class day, last recurrence day) for each half."""
        return [
            (self.semester_start, self.last_class_before_break),
            (self.first_class_after_break, self.semester_end),
        ]
