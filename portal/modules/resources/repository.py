from fastapi import Depends
from typing import List, Optional
from motor.motor_asyncio import AsyncIOMotorDatabase
from portal.core.database import get_database
from portal.modules.resources.models import Resource


class ResourceRepository:
    def __init__(self, db: AsyncIOMotorDatabase = Depends(get_database)):
        self.db = db

    async def create_resource(self, resource: Resource):
        return await self.db.resources.insert_one(resource.model_dump())

    async def find_resource(self, resource_id: str) -> Optional[dict]:
        return await self.db.resources.find_one({"id": resource_id}, {"_id": 0})

    async def update_resource(self, resource_id: str, data: dict):
        return await self.db.resources.update_one({"id": resource_id}, {"$set": data})

    async def delete_resource(self, resource_id: str):
        return await self.db.resources.delete_one({"id": resource_id})

    async def list_resources(
        self, class_id: Optional[str] = None, subject_id: Optional[str] = None, type: Optional[str] = None
    ) -> List[dict]:
        query = {
            key: value
            for key, value in (("class_id", class_id), ("subject_id", subject_id), ("type", type))
            if value
        }
        return await self.db.resources.find(query, {"_id": 0}).sort("created_at", -1).to_list(None)
