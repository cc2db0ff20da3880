from fastapi import Depends
from typing import List, Optional
from datetime import date, datetime
from motor.motor_asyncio import AsyncIOMotorDatabase
from portal.core.database import get_database
from portal.modules.calendar.models import CalendarEntry


class CalendarRepository:
    def __init__(self, db: AsyncIOMotorDatabase = Depends(get_database)):
        self.db = db

    async def create_entry(self, entry: CalendarEntry):
        return await self.db.academic_calendar.insert_one(entry.model_dump())

    async def find_entry(self, entry_id: str) -> Optional[dict]:
        return await self.db.academic_calendar.find_one({"id": entry_id}, {"_id": 0})

    async def update_entry(self, entry_id: str, data: dict):
        return await self.db.academic_calendar.update_one({"id": entry_id}, {"$set": data})

    async def delete_entry(self, entry_id: str):
        return await self.db.academic_calendar.delete_one({"id": entry_id})

    async def list_entries(self, year: Optional[int] = None) -> List[dict]:
        query = {}
        if year:
            query["date"] = {"$gte": f"{year:04d}-01-01", "$lt": f"{year + 1:04d}-01-01"}
        return await self.db.academic_calendar.find(query, {"_id": 0}).sort("date", 1).to_list(None)

    async def entries_in_range(self, start: date, end: date) -> List[dict]:
        """Entries starting inside [start, end] or still running at ``start``."""
        start_s, end_s = start.isoformat(), end.isoformat()
        return await self.db.academic_calendar.find({
            "$or": [
                {"date": {"$gte": start_s, "$lte": end_s}},
                {"date": {"$lte": start_s}, "end_date": {"$gte": start_s}},
            ]
        }, {"_id": 0}).sort("date", 1).to_list(None)

    async def recent_entries(self, since: datetime, limit: int) -> List[dict]:
        return await self.db.academic_calendar.find(
            {"created_at": {"$gte": since}}, {"_id": 0}
        ).sort("created_at", -1).to_list(limit)
