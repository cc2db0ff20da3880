from fastapi import Depends
from typing import List, Optional
from motor.motor_asyncio import AsyncIOMotorDatabase
from portal.core.database import get_database
from portal.modules.allocations.models import TeacherAllocation


class AllocationRepository:
    def __init__(self, db: AsyncIOMotorDatabase = Depends(get_database)):
        self.db = db

    async def create_allocation(self, allocation: TeacherAllocation):
        return await self.db.teacher_allocations.insert_one(allocation.model_dump())

    async def list_allocations(self) -> List[dict]:
        return await self.db.teacher_allocations.find({}, {"_id": 0}).to_list(None)

    async def find_allocation(self, class_id: str, subject_id: str) -> Optional[dict]:
        # find_one returns the first match should duplicates ever exist
        return await self.db.teacher_allocations.find_one(
            {"class_id": class_id, "subject_id": subject_id}, {"_id": 0}
        )

    async def delete_allocation(self, allocation_id: str):
        return await self.db.teacher_allocations.delete_one({"id": allocation_id})
