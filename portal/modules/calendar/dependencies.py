from fastapi import Depends
from portal.modules.calendar.repository import CalendarRepository
from portal.modules.calendar.service import CalendarService

def get_calendar_service(
    calendar_repo: CalendarRepository = Depends(),
) -> CalendarService:
    return CalendarService(calendar_repo)
