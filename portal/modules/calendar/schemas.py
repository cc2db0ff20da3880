from pydantic import BaseModel, Field, model_validator
from typing import Optional, List
from datetime import date
from portal.modules.calendar.models import CalendarEntryType


class CalendarEntryData(BaseModel):
    date: date
    end_date: Optional[date] = None
    type: CalendarEntryType
    title: str = Field(min_length=1)
    description: Optional[str] = None

    @model_validator(mode="after")
    def check_range(self):
        if self.end_date and self.end_date < self.date:
            raise ValueError("End date must be after start date")
        return self

class ConflictCheckRequest(BaseModel):
    dates: List[date] = []

class ConflictEntry(BaseModel):
    type: CalendarEntryType
    title: str

class DateConflict(BaseModel):
    date: date
    entry: ConflictEntry
