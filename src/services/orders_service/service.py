import math
from typing import Any, Dict, Iterable, List
from src.services.orders_service.repository import OrderRepository
from src.services.orders_service.catalog_client import CatalogClient
from src.shared.models.order_dto import CreateOrderRequest, OrderDTO
from src.common.logger import log_info, TypeMsg


def price_of(item: Dict[str, Any]) -> float:
    """Item price as a number; missing, null or non-numeric prices count as zero."""
    value = item.get("price")
    if value is None:
        return 0.0
    try:
        price = float(value)
    except (TypeError, ValueError):
        return 0.0
    return 0.0 if math.isnan(price) else price


def select_products(catalog: Iterable[Dict[str, Any]], product_ids: Iterable[str]) -> List[Dict[str, Any]]:
    """
    Catalog items whose id (as text) is among product_ids.

    Filters the catalog, not the request: an id repeated in product_ids still
    selects the item once, and ids missing from the catalog are dropped.
    """
    wanted = set(product_ids)
    return [
        item for item in catalog
        if item.get("id") is not None and str(item["id"]) in wanted
    ]


def order_total(items: Iterable[Dict[str, Any]]) -> float:
    return sum((price_of(item) for item in items), 0.0)


class OrderService:
    def __init__(self, repository: OrderRepository, catalog: CatalogClient):
        self.repository = repository
        self.catalog = catalog

    async def create_order(self, request: CreateOrderRequest) -> OrderDTO:
        """
        Prices the order against the current catalog and stores it.

        Nothing is written until the catalog has been fetched, so a failed
        fetch leaves no order behind. The user and product ids are not checked.
        """
        catalog = await self.catalog.fetch_catalog()

        selected = select_products(catalog, request.product_ids)
        total = order_total(selected)

        order = await self.repository.create_order(request.user_id, request.product_ids, total)
        await log_info(
            f"Order {order.id} created",
            type_msg=TypeMsg.INFO,
            extra={
                "user_id": request.user_id,
                "total": total,
                "requested": len(request.product_ids),
                "matched": len(selected),
            },
        )
        return order

    async def list_orders(self) -> List[OrderDTO]:
        # Totals are the ones computed at creation time
        return await self.repository.get_all_orders()
