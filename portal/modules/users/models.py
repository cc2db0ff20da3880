from pydantic import BaseModel, ConfigDict, Field, EmailStr
from datetime import datetime, timezone
from enum import Enum
import uuid


class UserRole(str, Enum):
    admin = "admin"
    teacher = "teacher"
    student = "student"

class User(BaseModel):
    model_config = ConfigDict(extra="ignore", use_enum_values=True)
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    role: UserRole = UserRole.student
    name: str
    email: EmailStr
    hashed_password: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
