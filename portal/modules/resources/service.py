from fastapi import HTTPException
from typing import List, Optional
from portal.modules.academics.repository import AcademicsRepository
from portal.modules.resources.repository import ResourceRepository
from portal.modules.resources.models import Resource, ResourceType
from portal.modules.resources.schemas import ResourceData


class ResourceService:
    def __init__(self,
                 resource_repo: ResourceRepository,
                 academics_repo: AcademicsRepository
                 ):
        self.resource_repo = resource_repo
        self.academics_repo = academics_repo

    async def _check_references(self, data: ResourceData):
        if not await self.academics_repo.find_class(data.class_id):
            raise HTTPException(status_code=404, detail="Class not found")
        if not await self.academics_repo.find_subject(data.subject_id):
            raise HTTPException(status_code=404, detail="Subject not found")
        if data.topic_id and not await self.academics_repo.find_topic(data.topic_id):
            raise HTTPException(status_code=404, detail="Topic not found")

    async def list_resources(
        self, class_id: Optional[str] = None, subject_id: Optional[str] = None,
        type: Optional[ResourceType] = None,
    ) -> List[dict]:
        return await self.resource_repo.list_resources(
            class_id, subject_id, type.value if type else None
        )

    async def create_resource(self, data: ResourceData) -> Resource:
        await self._check_references(data)
        resource = Resource(**data.model_dump())
        await self.resource_repo.create_resource(resource)
        return resource

    async def update_resource(self, resource_id: str, data: ResourceData) -> Resource:
        existing = await self.resource_repo.find_resource(resource_id)
        if not existing:
            raise HTTPException(status_code=404, detail="Resource not found")
        await self._check_references(data)

        update = data.model_dump(mode="json")
        await self.resource_repo.update_resource(resource_id, update)
        return Resource(**{**existing, **update})

    async def delete_resource(self, resource_id: str):
        result = await self.resource_repo.delete_resource(resource_id)
        if result.deleted_count == 0:
            raise HTTPException(status_code=404, detail="Resource not found")
        return {"message": "Resource deleted"}
