from datetime import date, datetime, time, timedelta
from typing import Optional, Tuple
from zoneinfo import ZoneInfo
from portal.core.config import SCHOOL_TIMEZONE


def school_tz() -> ZoneInfo:
    return ZoneInfo(SCHOOL_TIMEZONE)

def now() -> datetime:
    return datetime.now(school_tz())

def to_school_time(value: datetime) -> datetime:
    """Naive values are taken as school wall-clock time; aware ones are converted."""
    if value.tzinfo is None:
        return value.replace(tzinfo=school_tz())
    return value.astimezone(school_tz())

def school_date(value: Optional[datetime] = None) -> date:
    return to_school_time(value or now()).date()

def day_bounds(day: date) -> Tuple[datetime, datetime]:
    """Local midnight to 23:59:59.999 of ``day`` in the school timezone."""
    start = datetime.combine(day, time.min, tzinfo=school_tz())
    end = start + timedelta(days=1) - timedelta(milliseconds=1)
    return start, end
