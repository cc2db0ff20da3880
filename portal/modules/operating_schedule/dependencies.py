from fastapi import Depends
from portal.modules.operating_schedule.repository import OperatingScheduleRepository
from portal.modules.operating_schedule.service import OperatingScheduleService

def get_operating_schedule_service(
    schedule_repo: OperatingScheduleRepository = Depends(),
) -> OperatingScheduleService:
    return OperatingScheduleService(schedule_repo)
