from fastapi import Depends
from typing import Iterable, List, Optional
from motor.motor_asyncio import AsyncIOMotorDatabase
from portal.core.database import get_database, run_in_transaction
from portal.modules.students.models import StudentProfile
from portal.modules.users.models import User


class StudentRepository:
    def __init__(self, db: AsyncIOMotorDatabase = Depends(get_database)):
        self.db = db

    async def email_taken(self, email: str) -> bool:
        return await self.db.users.find_one({"email": email}) is not None

    async def create_student(self, user: User, profile: StudentProfile):
        """Write the login account and its student profile together."""
        async def insert_user(db_session):
            await self.db.users.insert_one(user.model_dump(), session=db_session)

        async def insert_profile(db_session):
            await self.db.student_profiles.insert_one(profile.model_dump(), session=db_session)

        await run_in_transaction(self.db, [insert_user, insert_profile])

    async def find_student(self, student_id: str) -> Optional[dict]:
        return await self.db.student_profiles.find_one({"id": student_id}, {"_id": 0})

    async def list_students(self, class_id: Optional[str] = None) -> List[dict]:
        query = {"class_id": class_id} if class_id else {}
        return await self.db.student_profiles.find(query, {"_id": 0}).sort("created_at", -1).to_list(None)

    async def find_users(self, user_ids: Iterable[str]) -> List[dict]:
        return await self.db.users.find(
            {"id": {"$in": list(user_ids)}}, {"_id": 0, "hashed_password": 0}
        ).to_list(None)

    async def delete_student(self, profile: dict):
        async def delete_profile(db_session):
            return await self.db.student_profiles.delete_one({"id": profile["id"]}, session=db_session)

        async def delete_user(db_session):
            return await self.db.users.delete_one({"id": profile["user_id"]}, session=db_session)

        result, _ = await run_in_transaction(self.db, [delete_profile, delete_user])
        return result
