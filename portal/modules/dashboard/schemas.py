from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from enum import Enum
from portal.modules.sessions.models import Session


class SessionDetail(Session):
    """A session joined with the names needed for display."""
    class_name: str = ""
    class_section: Optional[str] = None
    subject_name: str = ""
    teacher_name: Optional[str] = None

class TodayStats(BaseModel):
    total: int = 0
    completed: int = 0
    upcoming: int = 0
    in_progress: int = 0
    at_risk: int = 0


class FlagType(str, Enum):
    VACANT_SESSION = "VACANT_SESSION"
    CALENDAR_CONFLICT = "CALENDAR_CONFLICT"
    UNLOGGED_SESSION = "UNLOGGED_SESSION"

class FlagSeverity(str, Enum):
    critical = "critical"
    warning = "warning"
    info = "info"

SEVERITY_ORDER = {FlagSeverity.critical: 0, FlagSeverity.warning: 1, FlagSeverity.info: 2}

class OperationalFlag(BaseModel):
    id: str
    type: FlagType
    severity: FlagSeverity
    title: str
    description: str
    entity_type: str = "session"
    entity_id: str
    time: Optional[datetime] = None
    class_name: Optional[str] = None
    subject_name: Optional[str] = None


class ActivityType(str, Enum):
    SESSION_CREATED = "SESSION_CREATED"
    SESSION_UPDATED = "SESSION_UPDATED"
    SESSION_CANCELLED = "SESSION_CANCELLED"
    CALENDAR_ADDED = "CALENDAR_ADDED"

class ActivityItem(BaseModel):
    id: str
    type: ActivityType
    title: str
    description: str
    timestamp: datetime
    entity_id: Optional[str] = None


class ScheduleViewType(str, Enum):
    teacher = "teacher"
    class_ = "class"

class ConflictType(str, Enum):
    HOLIDAY = "HOLIDAY"
    EXAM_DAY = "EXAM_DAY"
    NO_TEACHER = "NO_TEACHER"

class ScheduleSession(BaseModel):
    id: str
    title: str
    start_time: datetime
    end_time: datetime
    status: str
    class_name: str
    class_section: Optional[str] = None
    subject_name: str
    teacher_name: Optional[str] = None
    teacher_id: Optional[str] = None
    has_conflict: bool = False
    conflict_type: Optional[ConflictType] = None
