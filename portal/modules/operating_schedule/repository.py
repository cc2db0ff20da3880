from fastapi import Depends
from typing import Optional
from motor.motor_asyncio import AsyncIOMotorDatabase
from portal.core.database import get_database
from portal.modules.operating_schedule.models import OperatingSchedule, SCHEDULE_ID


class OperatingScheduleRepository:
    def __init__(self, db: AsyncIOMotorDatabase = Depends(get_database)):
        self.db = db

    async def find_schedule(self) -> Optional[dict]:
        return await self.db.operating_schedule.find_one({"id": SCHEDULE_ID}, {"_id": 0})

    async def save_schedule(self, schedule: OperatingSchedule):
        return await self.db.operating_schedule.update_one(
            {"id": SCHEDULE_ID}, {"$set": schedule.model_dump()}, upsert=True
        )
