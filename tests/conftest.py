import pytest


def make_schedule_html(days: dict[int, list[tuple[str, str, str]]], columns: int = 7) -> str:
    """
    Build a minimal schedule table: a label cell 0, then day cells 1..columns.
    days: {column (0=label, 1=Mon ... 7=Sun): [(title, course id, "room, time"), ...]}
    """
    html = '<table class="schedule"><tr>'
    for col in range(0, columns + 1):
        html += '<td class="day-time-cell">'
        for title, course_id, room_time in days.get(col, []):
            html += (
                '<div class="text-truncate">'
                f"<span> {title} </span>"
                f"<span>{course_id}</span>"
                f"<span>\n  {room_time}\n</span>"
                "</div>"
            )
        html += "</td>"
    html += "</tr></table>\n"
    return html


INTRO = ("Intro to Systems", "CS101", "Room 4, 0900-1030")

HEADER = "01/01/2024\n15/02/2024\n22/02/2024\n30/04/2024\n"


@pytest.fixture
def intro_html() -> str:
    return make_schedule_html({1: [INTRO], 3: [INTRO]})


@pytest.fixture
def input_file(tmp_path, intro_html):
    path = tmp_path / "schedule.txt"
    path.write_text(HEADER + intro_html, encoding="utf-8")
    return path
