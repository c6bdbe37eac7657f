from typing import List, Optional
from src.infra.database import DatabaseManager
from src.infra.documents import DocumentCollection
from src.shared.models.order_dto import OrderDTO
from src.common.constants import OrderStatus

ORDERS_TABLE = "orders_schema.orders"


class OrderRepository:
    def __init__(self, db: DatabaseManager):
        self.db = db
        self.collection = DocumentCollection(db, ORDERS_TABLE)

    async def create_order(self, user_id: Optional[str], product_ids: List[str], total: float) -> OrderDTO:
        """Одна запись в БД; статус всегда начальный."""
        document = await self.collection.insert({
            "userId": user_id,
            "productIds": list(product_ids),
            "total": total,
            "status": OrderStatus.CREATED.value,
        })
        return OrderDTO(**document)

    async def get_all_orders(self) -> List[OrderDTO]:
        documents = await self.collection.find_all()
        return [OrderDTO(**document) for document in documents]
