from pydantic import BaseModel, Field, model_validator
from typing import List
from datetime import time
from portal.modules.operating_schedule.models import WorkingDay


class OperatingScheduleData(BaseModel):
    working_days: List[WorkingDay] = Field(min_length=1)
    school_start_time: time
    school_end_time: time
    default_period_duration: int = Field(ge=1)

    @model_validator(mode="after")
    def check_hours(self):
        if self.school_end_time <= self.school_start_time:
            raise ValueError("School end time must be after start time")
        return self
