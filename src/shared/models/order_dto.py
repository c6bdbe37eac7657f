from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from src.common.constants import OrderStatus


class CreateOrderRequest(BaseModel):
    """
    Body of POST /api/orders.

    Neither field is checked against the users or products services.
    A missing productIds is treated as an empty order.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    user_id: Optional[str] = Field(default=None, alias="userId")
    product_ids: List[str] = Field(default_factory=list, alias="productIds")


class OrderDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    user_id: Optional[str] = Field(default=None, alias="userId")
    product_ids: List[str] = Field(default_factory=list, alias="productIds")
    total: float = 0.0
    status: OrderStatus = OrderStatus.CREATED


class OrderCreatedResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    total: float
    order_id: str = Field(alias="orderId")
