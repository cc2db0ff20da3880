from fastapi import APIRouter, Depends
from typing import Dict
from portal.modules.auth.utility import get_current_user, require_roles
from portal.modules.operating_schedule.schemas import OperatingScheduleData
from portal.modules.operating_schedule.service import OperatingScheduleService
from portal.modules.operating_schedule.dependencies import get_operating_schedule_service

operating_schedule_router = APIRouter(prefix="/operating-schedule", tags=["Operating Schedule"])

@operating_schedule_router.get("/")
async def get_schedule(
    current_user: Dict = Depends(get_current_user),
    service: OperatingScheduleService = Depends(get_operating_schedule_service)
    ):
    return await service.get_schedule()

@operating_schedule_router.put("/")
async def save_schedule(
    data: OperatingScheduleData,
    current_user: Dict = Depends(require_roles("admin")),
    service: OperatingScheduleService = Depends(get_operating_schedule_service)
    ):
    return await service.save_schedule(data)
