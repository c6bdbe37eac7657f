from src.infra.database import DatabaseManager
from src.services.orders_service.repository import OrderRepository
from src.services.orders_service.service import OrderService
from src.services.orders_service.catalog_client import get_catalog_client

def get_order_repository() -> OrderRepository:
    return OrderRepository(DatabaseManager())

def get_order_service() -> OrderService:
    repository = get_order_repository()
    return OrderService(repository, get_catalog_client())
