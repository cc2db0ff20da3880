from datetime import date, datetime, timedelta
from typing import Optional
from portal.core.clock import school_date, to_school_time

# April, counted from January = 0
ACADEMIC_YEAR_START_MONTH = 3


def academic_year(today: Optional[date] = None) -> str:
    """Academic year label such as ``"2526"`` for April 2025 - March 2026."""
    today = today or school_date()
    start_year = today.year if today.month - 1 >= ACADEMIC_YEAR_START_MONTH else today.year - 1
    end_year = start_year + 1
    return f"{start_year % 100:02d}{end_year % 100:02d}"

def session_end_time(start_time: datetime, duration: int) -> datetime:
    return start_time + timedelta(minutes=duration)

def generate_session_title(
    start_time: datetime,
    board_name: str,
    class_name: str,
    class_section: Optional[str],
    subject_name: str,
    today: Optional[date] = None,
) -> str:
    """Build ``YYMMDDHHmm-Board-ClassSection-Subject (AcademicYear)``.

    The timestamp uses the school wall clock of ``start_time``; the academic
    year is taken from ``today`` (the generation date), not from the session.
    """
    stamp = to_school_time(start_time).strftime("%y%m%d%H%M")
    class_part = f"{class_name}{class_section}" if class_section else class_name
    return f"{stamp}-{board_name}-{class_part}-{subject_name} ({academic_year(today)})"
