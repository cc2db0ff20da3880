from pydantic import BaseModel, Field, model_validator
from typing import Optional, List
from datetime import datetime
from portal.core.config import DEFAULT_SESSION_DURATION
from portal.modules.sessions.models import SessionStatus


class SessionCreate(BaseModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    start_time: datetime
    end_time: datetime
    class_id: str = Field(min_length=1)
    subject_id: str = Field(min_length=1)
    chapter_id: Optional[str] = None
    topic_id: Optional[str] = None
    teacher_id: Optional[str] = None

    @model_validator(mode="after")
    def check_times(self):
        if self.end_time <= self.start_time:
            raise ValueError("End time must be after start time")
        return self

class SessionUpdate(SessionCreate):
    # Omitted status or teacher leaves the stored value untouched
    status: Optional[SessionStatus] = None

class SessionCancel(BaseModel):
    reason: Optional[str] = None

class SessionLogCreate(BaseModel):
    teacher_id: str = Field(min_length=1)
    topics_covered: str = Field(min_length=1)
    homework: Optional[str] = None
    class_notes: Optional[str] = None
    challenges: Optional[str] = None
    next_steps: Optional[str] = None


class BulkSessionInput(BaseModel):
    start_time: datetime
    duration: int = Field(default=DEFAULT_SESSION_DURATION, gt=0)
    class_id: str = Field(min_length=1)
    subject_id: str = Field(min_length=1)
    chapter_id: Optional[str] = None
    topic_id: Optional[str] = None
    teacher_id: Optional[str] = None
    board_name: str
    class_name: str
    class_section: Optional[str] = None
    subject_name: str

class BulkSessionPreview(BulkSessionInput):
    id: str
    title: str
    end_time: datetime
    teacher_name: str

class BulkPreviewRequest(BaseModel):
    sessions: List[BulkSessionInput]
    auto_assign_teachers: bool = True

class BulkCommitRequest(BaseModel):
    sessions: List[BulkSessionInput]

class BulkPreviewResult(BaseModel):
    success: bool
    sessions: List[BulkSessionPreview] = []
    error: Optional[str] = None

class BulkCommitResult(BaseModel):
    success: bool
    count: int = 0
    error: Optional[str] = None
