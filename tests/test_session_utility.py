from datetime import date, datetime, timedelta, timezone
import pytest
from portal.modules.sessions.utility import academic_year, generate_session_title, session_end_time
from tests.fakes import local


@pytest.mark.parametrize("today, expected", [
    (date(2025, 4, 1), "2526"),
    (date(2025, 12, 31), "2526"),
    (date(2026, 3, 31), "2526"),
    (date(2025, 1, 15), "2425"),
    (date(2000, 2, 1), "9900"),
    (date(1999, 4, 1), "9900"),
])
def test_academic_year_turns_over_in_april(today, expected):
    assert academic_year(today) == expected


def test_title_matches_fixed_format():
    title = generate_session_title(
        datetime(2025, 6, 15, 9, 5), "CBSE", "Class 10", "A", "Math", today=date(2025, 6, 15),
    )
    assert title == "2506150905-CBSE-Class 10A-Math (2526)"


def test_title_without_section_uses_class_name_alone():
    title = generate_session_title(
        local(2025, 1, 2, 14, 0), "ICSE", "Class 9", None, "History", today=date(2025, 1, 2),
    )
    assert title == "2501021400-ICSE-Class 9-History (2425)"


def test_title_academic_year_comes_from_generation_date_not_session():
    # A session in May 2026 generated in March 2026 still carries 2526
    title = generate_session_title(
        local(2026, 5, 4, 8, 30), "CBSE", "Class 10", "B", "Math", today=date(2026, 3, 10),
    )
    assert title.endswith("(2526)")
    assert title.startswith("2605040830-")


def test_title_is_deterministic():
    args = (local(2025, 6, 15, 9, 5), "CBSE", "Class 10", "A", "Math")
    first = generate_session_title(*args, today=date(2025, 7, 1))
    assert all(generate_session_title(*args, today=date(2025, 7, 1)) == first for _ in range(5))


def test_title_converts_aware_times_to_school_clock():
    utc_start = local(2025, 6, 15, 9, 5).astimezone(timezone.utc)
    title = generate_session_title(utc_start, "CBSE", "Class 10", "A", "Math", today=date(2025, 6, 15))
    assert title.startswith("2506150905-")


def test_end_time_adds_duration_minutes():
    start = local(2025, 6, 15, 23, 30)
    assert session_end_time(start, 45) == start + timedelta(minutes=45)
