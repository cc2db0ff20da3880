from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime


class StudentCreate(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=8)
    class_id: str = Field(min_length=1)
    parent_phone: Optional[str] = None

class StudentResponse(BaseModel):
    id: str
    user_id: str
    name: str
    email: str
    class_id: str
    class_name: Optional[str] = None
    parent_phone: Optional[str] = None
    created_at: datetime
