from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime, timezone
import uuid


class TeacherAllocation(BaseModel):
    model_config = ConfigDict(extra="ignore")
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    teacher_id: str
    class_id: str
    subject_id: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
