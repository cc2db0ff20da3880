from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase
from portal.core.database import get_database
from portal.modules.users.models import User


class AuthRepository:
    def __init__(self, db: AsyncIOMotorDatabase = Depends(get_database)):
        self.db = db

    async def user_exists(self, email: str) -> bool:
        return await self.db.users.find_one({"email": email}) is not None

    async def create_user(self, user: User) -> dict:
        data = user.model_dump()
        await self.db.users.insert_one(data)
        data.pop("_id", None)
        return data

    async def find_user(self, email: str) -> dict:
        return await self.db.users.find_one({"email": email}, {"_id": 0})

    async def find_user_by_id(self, id: str) -> dict:
        return await self.db.users.find_one({"id": id}, {"_id": 0})
