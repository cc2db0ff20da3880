from pydantic import BaseModel, ConfigDict, Field, field_serializer
from typing import Optional
from datetime import date, datetime, timezone
from enum import Enum
import uuid


class CalendarEntryType(str, Enum):
    HOLIDAY = "HOLIDAY"
    SCHOOL_EVENT = "SCHOOL_EVENT"
    EXAM_DAY = "EXAM_DAY"
    HALF_DAY = "HALF_DAY"

# Entry types that make scheduled teaching impossible
CONFLICT_TYPES = (CalendarEntryType.HOLIDAY, CalendarEntryType.EXAM_DAY)

class CalendarEntry(BaseModel):
    model_config = ConfigDict(extra="ignore", use_enum_values=True)
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    date: date
    end_date: Optional[date] = None
    type: CalendarEntryType
    title: str
    description: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Stored as ISO strings so range queries compare lexicographically
    @field_serializer("date", "end_date")
    def serialize_day(self, value: Optional[date]) -> Optional[str]:
        return value.isoformat() if value else None

    def covers(self, day: date) -> bool:
        return self.date <= day <= (self.end_date or self.date)

    @property
    def is_conflict(self) -> bool:
        return self.type in CONFLICT_TYPES
