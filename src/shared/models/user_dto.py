from typing import Optional
from pydantic import BaseModel, ConfigDict


class CreateUserRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    email: Optional[str] = None


class UserDTO(CreateUserRequest):
    id: str


class UserCreatedResponse(BaseModel):
    message: str
    user: UserDTO
