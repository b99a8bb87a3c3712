"""
Authentication Routes
Registration and login are forwarded to the user service
"""

from fastapi import APIRouter, status

from clinicboard_bff.models.schemas import UserRequest, LoginRequest, payload_of
from clinicboard_bff.utils.dependencies import AuthServiceDep

router = APIRouter()


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(user_data: UserRequest, auth_service: AuthServiceDep):
    """Register a new user"""
    return await auth_service.register(payload_of(user_data))


@router.post("/login", status_code=status.HTTP_200_OK)
async def login(credentials: LoginRequest, auth_service: AuthServiceDep):
    """
    Log in against the user service

    The returned access token is cached and attached to every later
    upstream call.
    """
    return await auth_service.login(payload_of(credentials))


@router.post("/logout", status_code=status.HTTP_200_OK)
async def logout(auth_service: AuthServiceDep):
    """Forget the cached access token"""
    return await auth_service.logout()
