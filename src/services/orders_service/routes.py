from typing import List
from fastapi import APIRouter, Depends
from src.services.orders_service.service import OrderService
from src.services.orders_service.dependencies import get_order_service
from src.services.common import ERROR_RESPONSES, server_error
from src.shared.models.order_dto import CreateOrderRequest, OrderDTO, OrderCreatedResponse
from src.shared.errors import ServiceError
from src.common.logger import log_error

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.post("", response_model=OrderCreatedResponse, responses=ERROR_RESPONSES)
async def create_order(
    request: CreateOrderRequest,
    service: OrderService = Depends(get_order_service)
):
    try:
        order = await service.create_order(request)
    except ServiceError as e:
        await log_error(f"Error creating order: {e}", exc_info=True)
        return server_error("Error creating order")
    return OrderCreatedResponse(message="✅ Order created", total=order.total, order_id=order.id)


@router.get("", response_model=List[OrderDTO], responses=ERROR_RESPONSES)
async def list_orders(
    service: OrderService = Depends(get_order_service)
):
    try:
        return await service.list_orders()
    except ServiceError as e:
        await log_error(f"Error fetching orders: {e}", exc_info=True)
        return server_error("Error fetching orders")
