from fastapi import HTTPException
from typing import List, Optional
from datetime import date
from portal.modules.calendar.repository import CalendarRepository
from portal.modules.calendar.models import CalendarEntry
from portal.modules.calendar.schemas import CalendarEntryData, DateConflict, ConflictEntry


class CalendarService:
    def __init__(self, calendar_repo: CalendarRepository):
        self.calendar_repo = calendar_repo

    async def get_entries(self, year: Optional[int] = None) -> List[CalendarEntry]:
        return [CalendarEntry(**doc) for doc in await self.calendar_repo.list_entries(year)]

    async def create_entry(self, data: CalendarEntryData) -> CalendarEntry:
        entry = CalendarEntry(**data.model_dump())
        await self.calendar_repo.create_entry(entry)
        return entry

    async def update_entry(self, entry_id: str, data: CalendarEntryData) -> CalendarEntry:
        existing = await self.calendar_repo.find_entry(entry_id)
        if not existing:
            raise HTTPException(status_code=404, detail="Calendar entry not found")

        entry = CalendarEntry(**{**existing, **data.model_dump()})
        await self.calendar_repo.update_entry(
            entry_id, entry.model_dump(exclude={"id", "created_at"})
        )
        return entry

    async def delete_entry(self, entry_id: str):
        result = await self.calendar_repo.delete_entry(entry_id)
        if result.deleted_count == 0:
            raise HTTPException(status_code=404, detail="Calendar entry not found")
        return {"message": "Calendar entry deleted"}

    async def check_date_conflicts(self, dates: List[date]) -> List[DateConflict]:
        """Report the first entry covering each of ``dates``."""
        if not dates:
            return []

        entries = await self.get_entries()
        conflicts = []
        for day in dates:
            entry = next((e for e in entries if e.covers(day)), None)
            if entry:
                conflicts.append(DateConflict(
                    date=day,
                    entry=ConflictEntry(type=entry.type, title=entry.title),
                ))
        return conflicts
