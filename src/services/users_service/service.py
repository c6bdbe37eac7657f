from typing import List
from src.services.users_service.repository import UserRepository
from src.shared.models.user_dto import UserDTO, CreateUserRequest
from src.common.logger import log_info, TypeMsg


class UserService:
    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def create_user(self, user_data: CreateUserRequest) -> UserDTO:
        # Email не проверяется на уникальность
        user = await self.repository.create_user(user_data)
        await log_info(f"User {user.id} created", type_msg=TypeMsg.INFO)
        return user

    async def list_users(self) -> List[UserDTO]:
        return await self.repository.get_all_users()
