from fastapi import APIRouter, Depends
from typing import Dict, Optional
from portal.modules.auth.utility import get_current_user, require_roles
from portal.modules.resources.models import ResourceType
from portal.modules.resources.schemas import ResourceData
from portal.modules.resources.service import ResourceService
from portal.modules.resources.dependencies import get_resource_service

resource_router = APIRouter(prefix="/resources", tags=["Resources"])

@resource_router.get("/")
async def list_resources(
    class_id: Optional[str] = None,
    subject_id: Optional[str] = None,
    type: Optional[ResourceType] = None,
    current_user: Dict = Depends(get_current_user),
    service: ResourceService = Depends(get_resource_service)
    ):
    return await service.list_resources(class_id, subject_id, type)

@resource_router.post("/", status_code=201)
async def create_resource(
    data: ResourceData,
    current_user: Dict = Depends(require_roles("admin")),
    service: ResourceService = Depends(get_resource_service)
    ):
    return await service.create_resource(data)

@resource_router.put("/{resource_id}")
async def update_resource(
    resource_id: str,
    data: ResourceData,
    current_user: Dict = Depends(require_roles("admin")),
    service: ResourceService = Depends(get_resource_service)
    ):
    return await service.update_resource(resource_id, data)

@resource_router.delete("/{resource_id}")
async def delete_resource(
    resource_id: str,
    current_user: Dict = Depends(require_roles("admin")),
    service: ResourceService = Depends(get_resource_service)
    ):
    return await service.delete_resource(resource_id)
