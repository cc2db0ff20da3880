from fastapi import APIRouter, Depends
from typing import Dict
from portal.modules.auth.utility import get_current_user, require_roles
from portal.modules.allocations.schemas import AllocationCreate, AllocationResolution
from portal.modules.allocations.service import AllocationService
from portal.modules.allocations.dependencies import get_allocation_service

allocation_router = APIRouter(prefix="/allocations", tags=["Allocations"])

@allocation_router.get("/")
async def list_allocations(
    current_user: Dict = Depends(get_current_user),
    service: AllocationService = Depends(get_allocation_service)
    ):
    return await service.list_allocations()

@allocation_router.post("/", status_code=201)
async def create_allocation(
    data: AllocationCreate,
    current_user: Dict = Depends(require_roles("admin")),
    service: AllocationService = Depends(get_allocation_service)
    ):
    return await service.create_allocation(data)

@allocation_router.get("/resolve", response_model=AllocationResolution)
async def resolve_teacher(
    class_id: str,
    subject_id: str,
    current_user: Dict = Depends(get_current_user),
    service: AllocationService = Depends(get_allocation_service)
    ):
    return await service.resolve_teacher(class_id, subject_id)

@allocation_router.delete("/{allocation_id}")
async def delete_allocation(
    allocation_id: str,
    current_user: Dict = Depends(require_roles("admin")),
    service: AllocationService = Depends(get_allocation_service)
    ):
    return await service.delete_allocation(allocation_id)
