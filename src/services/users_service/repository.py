from typing import List
from src.infra.database import DatabaseManager
from src.infra.documents import DocumentCollection
from src.shared.models.user_dto import UserDTO, CreateUserRequest

USERS_TABLE = "identity_schema.users"


class UserRepository:
    def __init__(self, db: DatabaseManager):
        self.db = db
        self.collection = DocumentCollection(db, USERS_TABLE)

    async def create_user(self, user: CreateUserRequest) -> UserDTO:
        """Сохраняет запись пользователя как есть, id выдаёт БД."""
        document = await self.collection.insert(user.model_dump())
        return UserDTO(**document)

    async def get_all_users(self) -> List[UserDTO]:
        """Все пользователи в порядке вставки."""
        documents = await self.collection.find_all()
        return [UserDTO(**document) for document in documents]
