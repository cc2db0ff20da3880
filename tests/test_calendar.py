from datetime import date
import pytest
from fastapi import HTTPException
from pydantic import ValidationError
from portal.modules.calendar.models import CalendarEntry, CalendarEntryType
from portal.modules.calendar.schemas import CalendarEntryData
from portal.modules.calendar.service import CalendarService
from tests.fakes import FakeCalendarRepository


@pytest.fixture
def calendar_service():
    return CalendarService(FakeCalendarRepository([
        CalendarEntry(id="diwali", date=date(2025, 10, 20), end_date=date(2025, 10, 22),
                      type=CalendarEntryType.HOLIDAY, title="Diwali break"),
        CalendarEntry(id="sports", date=date(2025, 10, 21),
                      type=CalendarEntryType.SCHOOL_EVENT, title="Sports day"),
        CalendarEntry(id="finals", date=date(2026, 3, 2),
                      type=CalendarEntryType.EXAM_DAY, title="Finals"),
    ]))


def test_entry_data_rejects_end_before_start():
    with pytest.raises(ValidationError):
        CalendarEntryData(date=date(2025, 5, 2), end_date=date(2025, 5, 1),
                          type=CalendarEntryType.HOLIDAY, title="Backwards")


def test_entry_is_stored_with_iso_dates():
    entry = CalendarEntry(date=date(2025, 5, 2), type=CalendarEntryType.HALF_DAY, title="PTM")
    doc = entry.model_dump()
    assert doc["date"] == "2025-05-02"
    assert doc["end_date"] is None
    assert doc["type"] == "HALF_DAY"
    assert CalendarEntry(**doc).date == date(2025, 5, 2)


async def test_date_conflicts_report_first_covering_entry(calendar_service):
    conflicts = await calendar_service.check_date_conflicts(
        [date(2025, 10, 21), date(2025, 10, 23), date(2026, 3, 2)]
    )
    assert [(c.date, c.entry.title) for c in conflicts] == [
        (date(2025, 10, 21), "Diwali break"),
        (date(2026, 3, 2), "Finals"),
    ]


async def test_date_conflicts_with_no_dates(calendar_service):
    assert await calendar_service.check_date_conflicts([]) == []


async def test_entries_filtered_by_year(calendar_service):
    entries = await calendar_service.get_entries(2026)
    assert [e.id for e in entries] == ["finals"]


async def test_update_entry_keeps_identity(calendar_service):
    updated = await calendar_service.update_entry("sports", CalendarEntryData(
        date=date(2025, 10, 24), type=CalendarEntryType.SCHOOL_EVENT, title="Sports day (moved)",
    ))
    assert updated.id == "sports"
    stored = await calendar_service.calendar_repo.find_entry("sports")
    assert stored["date"] == "2025-10-24"
    assert stored["title"] == "Sports day (moved)"


async def test_update_and_delete_missing_entry(calendar_service):
    data = CalendarEntryData(date=date(2025, 1, 1), type=CalendarEntryType.HOLIDAY, title="New year")
    with pytest.raises(HTTPException) as exc:
        await calendar_service.update_entry("nope", data)
    assert exc.value.status_code == 404
    with pytest.raises(HTTPException):
        await calendar_service.delete_entry("nope")


async def test_range_query_includes_entries_spanning_start():
    repo = FakeCalendarRepository([
        CalendarEntry(id="span", date=date(2025, 10, 20), end_date=date(2025, 10, 22),
                      type=CalendarEntryType.HOLIDAY, title="Break"),
    ])
    found = await repo.entries_in_range(date(2025, 10, 21), date(2025, 10, 21))
    assert [e["id"] for e in found] == ["span"]
