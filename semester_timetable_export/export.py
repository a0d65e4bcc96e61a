"""
Export grouped course records to an iCalendar (.ics) file.

Every course slot becomes two weekly recurring events: one from the start of
the semester up to the day before the midterm break, one from the day after
the break to the end of the semester.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Dict, List

import icalendar

from .models import CourseRecord, SemesterWindow, WeekdaySet
from .recurrence import DEFAULT_TIMEZONE, compose_slot, find_first_occurrence, until_stamp

PRODID = "-//Semester Timetable Export//EN"
WEEK_START = "SU"


@dataclass(frozen=True)
class EventSpec:
    """Everything needed to write one recurring VEVENT."""

    uid: str
    summary: str
    location: str
    stamp: datetime
    start: datetime
    end: datetime
    weekdays: WeekdaySet
    until: date


def make_event_spec(
    course: CourseRecord,
    weekdays: WeekdaySet,
    first_possible_day: date,
    last_day: date,
    tz: str = DEFAULT_TIMEZONE,
) -> EventSpec:
    """Anchor a course slot on its first real class day inside one half-semester."""
    day = find_first_occurrence(first_possible_day, weekdays)
    return EventSpec(
        uid=str(uuid.uuid4()),
        summary=course.summary,
        location=course.room,
        stamp=datetime.now(timezone.utc),
        start=compose_slot(day, course.start_hour, course.start_minute, tz),
        end=compose_slot(day, course.end_hour, course.end_minute, tz),
        weekdays=list(weekdays),
        until=last_day,
    )


def build_events(
    courses: Dict[CourseRecord, WeekdaySet],
    window: SemesterWindow,
    tz: str = DEFAULT_TIMEZONE,
) -> List[EventSpec]:
    """Two event specs per course, before-break then after-break, in mapping order."""
    events: List[EventSpec] = []
    for course, weekdays in courses.items():
        for first_day, last_day in window.halves():
            events.append(make_event_spec(course, weekdays, first_day, last_day, tz))
    return events


def _to_vevent(spec: EventSpec) -> icalendar.Event:
    event = icalendar.Event()
    event.add("uid", spec.uid)
    event.add("summary", spec.summary)
    event.add("location", spec.location)
    event.add("dtstamp", spec.stamp)
    # Floating local times; the zone is declared once on the calendar
    event.add("dtstart", spec.start.replace(tzinfo=None))
    event.add("dtend", spec.end.replace(tzinfo=None))
    event.add(
        "rrule",
        {
            "freq": "weekly",
            "wkst": WEEK_START,
            "byday": list(spec.weekdays),
            "until": until_stamp(spec.until),
        },
    )
    return event


def build_calendar(events: List[EventSpec], tz: str = DEFAULT_TIMEZONE) -> icalendar.Calendar:
    cal = icalendar.Calendar()
    cal.add("prodid", PRODID)
    cal.add("version", "2.0")
    cal.add("method", "PUBLISH")
    cal.add("calscale", "GREGORIAN")
    cal.add("x-wr-timezone", tz)

    for spec in events:
        cal.add_component(_to_vevent(spec))
    return cal


def export_ics(
    courses: Dict[CourseRecord, WeekdaySet],
    window: SemesterWindow,
    out_path: str | Path,
    tz: str = DEFAULT_TIMEZONE,
) -> int:
    """
    Export courses to iCalendar and return the number of events written.

    The calendar is fully built before the file is opened, so a failure
    leaves no output behind.
    """
    events = build_events(courses, window, tz)
    data = build_calendar(events, tz).to_ical()
    Path(out_path).write_bytes(data)
    return len(events)
