"""
User Management Routes
"""

from fastapi import APIRouter

from clinicboard_bff.models.schemas import UserUpdateRequest, payload_of
from clinicboard_bff.utils.dependencies import UserServiceDep

router = APIRouter()


@router.get("")
async def list_users(user_service: UserServiceDep):
    return await user_service.find_all()


@router.get("/user/{email}")
async def get_user_by_email(email: str, user_service: UserServiceDep):
    return await user_service.find_by_email(email)


@router.get("/{user_id}")
async def get_user(user_id: str, user_service: UserServiceDep):
    return await user_service.find_one(user_id)


@router.put("/{user_id}")
async def update_user(user_id: str, user_data: UserUpdateRequest, user_service: UserServiceDep):
    return await user_service.update(user_id, payload_of(user_data))


@router.delete("/{user_id}")
async def delete_user(user_id: str, user_service: UserServiceDep):
    return await user_service.remove(user_id)
