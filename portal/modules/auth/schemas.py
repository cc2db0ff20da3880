from pydantic import BaseModel
from portal.modules.users.schemas import UserResponse

class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
