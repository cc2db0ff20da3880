from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime, timezone
from enum import Enum
import uuid


class ResourceType(str, Enum):
    NOTES = "NOTES"
    QUIZ = "QUIZ"
    PRE_CLASS = "PRE_CLASS"
    POST_CLASS = "POST_CLASS"
    REVISION = "REVISION"

class Resource(BaseModel):
    model_config = ConfigDict(extra="ignore", use_enum_values=True)
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    title: str
    description: Optional[str] = None
    type: ResourceType
    url: str
    class_id: str
    subject_id: str
    topic_id: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
