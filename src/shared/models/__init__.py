"""
Общие DTO и Pydantic-модели для межсервисного взаимодействия.
"""

from src.shared.models.common import ErrorResponse, HealthStatus
from src.shared.models.product_dto import CreateProductRequest, ProductDTO, ProductCreatedResponse
from src.shared.models.user_dto import CreateUserRequest, UserDTO, UserCreatedResponse
from src.shared.models.order_dto import CreateOrderRequest, OrderDTO, OrderCreatedResponse

__all__ = [
    # Common
    "ErrorResponse",
    "HealthStatus",
    # Product
    "CreateProductRequest",
    "ProductDTO",
    "ProductCreatedResponse",
    # User
    "CreateUserRequest",
    "UserDTO",
    "UserCreatedResponse",
    # Order
    "CreateOrderRequest",
    "OrderDTO",
    "OrderCreatedResponse",
]
