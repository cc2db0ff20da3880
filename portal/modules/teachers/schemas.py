from pydantic import BaseModel, Field
from typing import Optional


class TeacherCreate(BaseModel):
    user_id: Optional[str] = None
    first_name: str = Field(min_length=1)
    last_name: Optional[str] = None
    specialization: Optional[str] = None
    qualification: Optional[str] = None
    experience: Optional[int] = Field(default=None, ge=0)

class TeacherOption(BaseModel):
    id: str
    name: str
