from pydantic import BaseModel, Field
from typing import Optional
from portal.modules.resources.models import ResourceType


class ResourceData(BaseModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    type: ResourceType
    url: str = Field(min_length=1)
    class_id: str = Field(min_length=1)
    subject_id: str = Field(min_length=1)
    topic_id: Optional[str] = None
