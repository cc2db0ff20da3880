from pydantic import BaseModel, EmailStr, Field
from portal.modules.users.models import UserRole


class UserResponse(BaseModel):
    id: str
    role: UserRole
    name: str
    email: EmailStr

class UserRegister(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=8)
    role: UserRole  # No default - must be explicitly provided

class UserLogin(BaseModel):
    email: EmailStr
    password: str
