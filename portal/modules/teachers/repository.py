from fastapi import Depends
from typing import Dict, Iterable, List, Optional
from motor.motor_asyncio import AsyncIOMotorDatabase
from portal.core.database import get_database
from portal.modules.teachers.models import TeacherProfile


class TeacherRepository:
    def __init__(self, db: AsyncIOMotorDatabase = Depends(get_database)):
        self.db = db

    async def create_teacher(self, teacher: TeacherProfile):
        return await self.db.teachers.insert_one(teacher.model_dump())

    async def find_teacher(self, teacher_id: str) -> Optional[dict]:
        return await self.db.teachers.find_one({"id": teacher_id}, {"_id": 0})

    async def list_teachers(self) -> List[dict]:
        return await self.db.teachers.find({}, {"_id": 0}).sort("first_name", 1).to_list(None)

    async def update_teacher(self, teacher_id: str, data: dict):
        return await self.db.teachers.update_one({"id": teacher_id}, {"$set": data})

    async def delete_teacher(self, teacher_id: str):
        return await self.db.teachers.delete_one({"id": teacher_id})

    async def get_roster(self, teacher_ids: Optional[Iterable[str]] = None) -> Dict[str, str]:
        """Map teacher id to display name, optionally restricted to ``teacher_ids``."""
        query = {"id": {"$in": list(teacher_ids)}} if teacher_ids is not None else {}
        docs = await self.db.teachers.find(query, {"_id": 0}).to_list(None)
        return {doc["id"]: TeacherProfile(**doc).display_name for doc in docs}
