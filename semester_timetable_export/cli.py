"""
Command-line interface: read a schedule file and export it to cal.ics.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import pytz

from . import __version__
from .errors import RecurrenceError
from .export import export_ics
from .recurrence import DEFAULT_TIMEZONE
from .schedule_html import parse_schedule_html
from .schedule_input import read_schedule_input

DEFAULT_OUTPUT = "cal.ics"


def _timezone_name(value: str) -> str:
    try:
        pytz.timezone(value)
    except pytz.UnknownTimeZoneError:
        raise argparse.ArgumentTypeError(f"Unknown timezone: '{value}'") from None
    return value


def _print_courses(courses) -> None:
    print(f"{'Days':<15} | {'Time':<11} | {'Room':<16} | Course")
    print("-" * 72)
    for course, weekdays in courses.items():
        days = ",".join(weekdays)
        print(f"{days:<15} | {course.time_range:<11} | {course.room[:16]:<16} | {course.summary}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description=(
            "Export a class-schedule HTML table to an ICS calendar.\n"
            "The input file starts with four DD/MM/YYYY lines (semester start, "
            "midterm start, midterm end, semester end) followed by the schedule HTML. "
            "Each class becomes two weekly events, before and after the midterm break."
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("input", metavar="INPUT", help="Schedule input file (dates + HTML).")
    parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT,
        help=f"Output ICS path. Default: {DEFAULT_OUTPUT}",
    )
    parser.add_argument(
        "--timezone",
        type=_timezone_name,
        default=DEFAULT_TIMEZONE,
        help=f"Calendar timezone (X-WR-TIMEZONE). Default: {DEFAULT_TIMEZONE}",
    )
    parser.add_argument(
        "--list-courses",
        action="store_true",
        help="List the courses found in the schedule then exit without writing a file.",
    )
    args = parser.parse_args(argv)

    try:
        window, html = read_schedule_input(args.input)
        courses = parse_schedule_html(html)
    except OSError as e:
        print(f"Error: cannot read input file: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.list_courses:
        _print_courses(courses)
        return 0

    out_path = Path(args.output)
    try:
        count = export_ics(courses, window, out_path, args.timezone)
    except RecurrenceError as e:
        print(f"Internal error: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"Error: cannot write {out_path}: {e}", file=sys.stderr)
        return 1

    print(f"Exported {count} event(s) for {len(courses)} course(s) to {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
