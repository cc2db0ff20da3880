from pydantic import BaseModel, Field
from typing import Optional
from portal.modules.teachers.models import UNASSIGNED


class AllocationCreate(BaseModel):
    teacher_id: str = Field(min_length=1)
    class_id: str = Field(min_length=1)
    subject_id: str = Field(min_length=1)

class AllocationResolution(BaseModel):
    teacher_id: Optional[str] = None
    teacher_name: str = UNASSIGNED
