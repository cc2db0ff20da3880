from fastapi import HTTPException
from typing import Dict
import logging
from portal.modules.auth.repository import AuthRepository
from portal.modules.auth.schemas import TokenResponse
from portal.modules.users.schemas import UserResponse, UserLogin, UserRegister
from portal.modules.users.models import User, UserRole
from portal.modules.auth.utility import hash_password, create_token, verify_password


def to_user_response(user: Dict) -> UserResponse:
    return UserResponse(
        id=user["id"],
        role=UserRole(user["role"]),
        name=user["name"],
        email=user["email"],
    )


class AuthService:
    def __init__(self, auth_repo: AuthRepository):
        self.auth_repo = auth_repo

    async def register(self, data: UserRegister) -> UserResponse:
        if await self.auth_repo.user_exists(data.email):
            raise HTTPException(status_code=400, detail="Email already registered")

        user = User(
            name=data.name,
            email=data.email,
            role=data.role,
            hashed_password=hash_password(data.password)
        )
        inserted_user = await self.auth_repo.create_user(user)
        logging.info("Registered %s account %s", user.role, user.id)
        return to_user_response(inserted_user)

    async def login(self, data: UserLogin) -> TokenResponse:
        user = await self.auth_repo.find_user(data.email)
        if not user or not verify_password(data.password, user["hashed_password"]):
            raise HTTPException(status_code=401, detail="Invalid credentials")

        token = create_token(user["id"], user["role"])
        return TokenResponse(access_token=token, user=to_user_response(user))

    async def get_me(self, current_user: Dict) -> UserResponse:
        return to_user_response(current_user)
