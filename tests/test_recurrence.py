import pytest
from datetime import date, datetime, timedelta

from semester_timetable_export.errors import RecurrenceError
from semester_timetable_export.models import SemesterWindow
from semester_timetable_export.recurrence import (
    compose_slot,
    find_first_occurrence,
    until_stamp,
    weekday_code,
)

MONDAY = date(2024, 1, 1)
CODES = ["MO", "TU", "WE", "TH", "FR", "SA", "SU"]


def test_weekday_code():
    assert [weekday_code(MONDAY + timedelta(days=i)) for i in range(7)] == CODES


class TestFindFirstOccurrence:
    def test_reference_weekday_returns_reference(self):
        for i in range(7):
            ref = MONDAY + timedelta(days=i)
            assert find_first_occurrence(ref, [weekday_code(ref)]) == ref

    def test_later_in_same_week(self):
        assert find_first_occurrence(date(2024, 1, 3), ["MO", "FR"]) == date(2024, 1, 5)

    def test_list_order_wins_over_nearest(self):
        # WE is listed first and lies ahead of Monday, so it wins over MO
        assert find_first_occurrence(MONDAY, ["WE", "MO"]) == date(2024, 1, 3)
        assert find_first_occurrence(MONDAY, ["MO", "WE"]) == MONDAY

    def test_wraps_to_next_week(self):
        # 2024-02-23 is a Friday
        assert find_first_occurrence(date(2024, 2, 23), ["MO", "WE"]) == date(2024, 2, 26)
        assert find_first_occurrence(date(2024, 2, 23), ["WE", "TU"]) == date(2024, 2, 27)

    def test_always_within_a_week(self):
        for i in range(7):
            ref = MONDAY + timedelta(days=i)
            for code in CODES:
                found = find_first_occurrence(ref, [code])
                assert 0 <= (found - ref).days <= 6
                assert weekday_code(found) == code

    def test_empty_weekdays(self):
        with pytest.raises(RecurrenceError, match="No weekdays"):
            find_first_occurrence(MONDAY, [])

    def test_unknown_code(self):
        with pytest.raises(RecurrenceError, match="Unknown weekday"):
            find_first_occurrence(MONDAY, ["XX"])


class TestComposeSlot:
    def test_fixed_zone(self):
        slot = compose_slot(date(2024, 2, 26), 9, 5)
        assert slot.replace(tzinfo=None) == datetime(2024, 2, 26, 9, 5)
        assert slot.second == 0 and slot.microsecond == 0
        assert slot.tzinfo.zone == "Asia/Bangkok"
        assert slot.utcoffset() == timedelta(hours=7)

    def test_other_zone(self):
        slot = compose_slot(date(2024, 7, 1), 18, 30, "Europe/Warsaw")
        assert slot.utcoffset() == timedelta(hours=2)


def test_until_stamp_is_midnight():
    assert until_stamp(date(2024, 2, 14)) == datetime(2024, 2, 14, 0, 0)


class TestSemesterWindow:
    def test_break_boundaries(self):
        window = SemesterWindow(
            date(2024, 1, 1), date(2024, 2, 15), date(2024, 2, 22), date(2024, 4, 30)
        )
        assert window.last_class_before_break == date(2024, 2, 14)
        assert window.first_class_after_break == date(2024, 2, 23)
        assert window.halves() == [
            (date(2024, 1, 1), date(2024, 2, 14)),
            (date(2024, 2, 23), date(2024, 4, 30)),
        ]

    def test_boundaries_cross_month(self):
        window = SemesterWindow(
            date(2024, 2, 1), date(2024, 3, 1), date(2024, 3, 31), date(2024, 5, 31)
        )
        assert window.last_class_before_break == date(2024, 2, 29)
        assert window.first_class_after_break == date(2024, 4, 1)
