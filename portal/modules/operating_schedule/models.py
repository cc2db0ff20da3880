from pydantic import BaseModel, ConfigDict, field_serializer
from typing import List
from datetime import time
from enum import Enum

# One schedule per school
SCHEDULE_ID = "default"


class WorkingDay(str, Enum):
    MON = "MON"
    TUE = "TUE"
    WED = "WED"
    THU = "THU"
    FRI = "FRI"
    SAT = "SAT"
    SUN = "SUN"

class OperatingSchedule(BaseModel):
    model_config = ConfigDict(extra="ignore", use_enum_values=True)
    id: str = SCHEDULE_ID
    working_days: List[WorkingDay]
    school_start_time: time
    school_end_time: time
    default_period_duration: int

    @field_serializer("school_start_time", "school_end_time")
    def serialize_clock(self, value: time) -> str:
        return value.strftime("%H:%M")
