from typing import Optional
from pydantic import BaseModel, ConfigDict


class CreateProductRequest(BaseModel):
    # Неизвестные ключи отбрасываются, известные необязательны
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    price: Optional[float] = None
    stock: Optional[int] = None


class ProductDTO(CreateProductRequest):
    id: str


class ProductCreatedResponse(BaseModel):
    message: str
    product: ProductDTO
