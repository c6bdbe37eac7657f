from typing import List
from fastapi import APIRouter, Depends
from src.services.users_service.service import UserService
from src.services.users_service.dependencies import get_user_service
from src.services.common import ERROR_RESPONSES, server_error
from src.shared.models.user_dto import UserDTO, CreateUserRequest, UserCreatedResponse
from src.shared.errors import ServiceError
from src.common.logger import log_error

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=List[UserDTO], responses=ERROR_RESPONSES)
async def list_users(
    service: UserService = Depends(get_user_service)
):
    try:
        return await service.list_users()
    except ServiceError as e:
        await log_error(f"Error fetching users: {e}", exc_info=True)
        return server_error("Error fetching users")


@router.post("", response_model=UserCreatedResponse, responses=ERROR_RESPONSES)
async def create_user(
    user_data: CreateUserRequest,
    service: UserService = Depends(get_user_service)
):
    try:
        user = await service.create_user(user_data)
    except ServiceError as e:
        await log_error(f"Error creating user: {e}", exc_info=True)
        return server_error("Error creating user")
    return UserCreatedResponse(message="✅ User created", user=user)
