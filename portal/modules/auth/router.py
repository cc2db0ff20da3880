from fastapi import APIRouter, Depends
from typing import Dict
from portal.modules.auth.schemas import TokenResponse
from portal.modules.users.schemas import UserLogin, UserRegister, UserResponse
from portal.modules.auth.service import AuthService
from portal.modules.auth.dependencies import get_auth_service
from portal.modules.auth.utility import get_current_user, require_roles

auth_router = APIRouter(prefix="/auth", tags=["Auth"])

@auth_router.post("/register", response_model=UserResponse, status_code=201)
async def register(
    data: UserRegister,
    current_user: Dict = Depends(require_roles("admin")),
    service: AuthService = Depends(get_auth_service)
    ):
    return await service.register(data)

@auth_router.post("/login", response_model=TokenResponse)
async def login(
    data: UserLogin,
    service: AuthService = Depends(get_auth_service)
    ):
    return await service.login(data)

@auth_router.get("/me", response_model=UserResponse)
async def get_me(
    current_user: Dict = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service)
    ):
    return await service.get_me(current_user)
