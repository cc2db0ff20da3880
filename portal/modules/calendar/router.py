from fastapi import APIRouter, Depends
from typing import Dict, List, Optional
from portal.modules.auth.utility import get_current_user, require_roles
from portal.modules.calendar.models import CalendarEntry
from portal.modules.calendar.schemas import CalendarEntryData, ConflictCheckRequest, DateConflict
from portal.modules.calendar.service import CalendarService
from portal.modules.calendar.dependencies import get_calendar_service

calendar_router = APIRouter(prefix="/calendar", tags=["Academic-Calendar"])

@calendar_router.get("/", response_model=List[CalendarEntry])
async def get_calendar_entries(
    year: Optional[int] = None,
    current_user: Dict = Depends(get_current_user),
    service: CalendarService = Depends(get_calendar_service)
    ):
    return await service.get_entries(year)

@calendar_router.post("/", response_model=CalendarEntry, status_code=201)
async def create_calendar_entry(
    data: CalendarEntryData,
    current_user: Dict = Depends(require_roles("admin")),
    service: CalendarService = Depends(get_calendar_service)
    ):
    return await service.create_entry(data)

@calendar_router.put("/{entry_id}", response_model=CalendarEntry)
async def update_calendar_entry(
    entry_id: str,
    data: CalendarEntryData,
    current_user: Dict = Depends(require_roles("admin")),
    service: CalendarService = Depends(get_calendar_service)
    ):
    return await service.update_entry(entry_id, data)

@calendar_router.delete("/{entry_id}")
async def delete_calendar_entry(
    entry_id: str,
    current_user: Dict = Depends(require_roles("admin")),
    service: CalendarService = Depends(get_calendar_service)
    ):
    return await service.delete_entry(entry_id)

@calendar_router.post("/conflicts", response_model=List[DateConflict])
async def check_date_conflicts(
    data: ConflictCheckRequest,
    current_user: Dict = Depends(get_current_user),
    service: CalendarService = Depends(get_calendar_service)
    ):
    return await service.check_date_conflicts(data.dates)
