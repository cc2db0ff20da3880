from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime, timezone
from enum import Enum
import uuid


class SessionStatus(str, Enum):
    SCHEDULED = "SCHEDULED"
    IN_PROGRESS = "IN_PROGRESS"
    PENDING_LOG = "PENDING_LOG"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"

class Session(BaseModel):
    model_config = ConfigDict(extra="ignore", use_enum_values=True)
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    title: str
    description: Optional[str] = None
    start_time: datetime
    end_time: datetime
    class_id: str
    subject_id: str
    chapter_id: Optional[str] = None
    topic_id: Optional[str] = None
    teacher_id: Optional[str] = None
    status: SessionStatus = SessionStatus.SCHEDULED
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

class SessionLog(BaseModel):
    model_config = ConfigDict(extra="ignore")
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    session_id: str
    teacher_id: str
    topics_covered: str
    homework: Optional[str] = None
    class_notes: Optional[str] = None
    challenges: Optional[str] = None
    next_steps: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
