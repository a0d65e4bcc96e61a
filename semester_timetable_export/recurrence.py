"""
Date arithmetic for weekly recurrences: first class day, slot timestamps, UNTIL.
"""
from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Sequence

import pytz

from .errors import RecurrenceError

# Fixed calendar timezone
DEFAULT_TIMEZONE = "Asia/Bangkok"

_WEEKDAY_OFFSETS = {
    "MO": 0,
    "TU": 1,
    "WE": 2,
    "TH": 3,
    "FR": 4,
    "SA": 5,
    "SU": 6,
}


def weekday_code(day: date) -> str:
    """Two-letter RRULE code for a date, e.g. 2024-01-01 -> 'MO'."""
    return "MO TU WE TH FR SA SU".split()[day.weekday()]


def find_first_occurrence(reference: date, weekdays: Sequence[str]) -> date:
    """
    First class day on or after ``reference`` for a weekday list.

    Codes are tried in list order and the first one falling on or after the
    reference weekday in the same week wins, even if a later code is closer.
    When every code falls earlier in the week, the nearest of them in the
    following week is used. The result is always 0-6 days after reference.
    """
    if not weekdays:
        raise RecurrenceError(f"No weekdays given for first occurrence after {reference}")

    unknown = [d for d in weekdays if d not in _WEEKDAY_OFFSETS]
    if unknown:
        raise RecurrenceError(f"Unknown weekday code(s) {unknown!r}")

    current = _WEEKDAY_OFFSETS[weekday_code(reference)]
    for d in weekdays:
        diff = _WEEKDAY_OFFSETS[d] - current
        if diff >= 0:
            return reference + timedelta(days=diff)

    diff = min((_WEEKDAY_OFFSETS[d] - current) % 7 for d in weekdays)
    return reference + timedelta(days=diff)


def compose_slot(
    day: date, hour: int, minute: int, tz: str = DEFAULT_TIMEZONE
) -> datetime:
    """Wall-clock ``hour:minute`` on ``day`` in ``tz`` (seconds zeroed)."""
    zone = pytz.timezone(tz)
    return zone.localize(datetime.combine(day, time(hour, minute)))


def until_stamp(day: date) -> datetime:
    """RRULE UNTIL value: midnight of ``day`` in floating local time."""
    return datetime.combine(day, time.min)
