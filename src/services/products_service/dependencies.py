from src.infra.database import DatabaseManager
from src.services.products_service.repository import ProductRepository
from src.services.products_service.service import ProductService

def get_product_repository() -> ProductRepository:
    return ProductRepository(DatabaseManager())

def get_product_service() -> ProductService:
    repository = get_product_repository()
    return ProductService(repository)
