from typing import Optional
import logging
from portal.modules.operating_schedule.repository import OperatingScheduleRepository
from portal.modules.operating_schedule.models import OperatingSchedule
from portal.modules.operating_schedule.schemas import OperatingScheduleData


class OperatingScheduleService:
    def __init__(self, schedule_repo: OperatingScheduleRepository):
        self.schedule_repo = schedule_repo

    async def get_schedule(self) -> Optional[OperatingSchedule]:
        doc = await self.schedule_repo.find_schedule()
        return OperatingSchedule(**doc) if doc else None

    async def save_schedule(self, data: OperatingScheduleData) -> OperatingSchedule:
        schedule = OperatingSchedule(**data.model_dump())
        await self.schedule_repo.save_schedule(schedule)
        logging.info("Operating schedule saved: %s", ",".join(schedule.working_days))
        return schedule
