from typing import List
from src.infra.database import DatabaseManager
from src.infra.documents import DocumentCollection
from src.shared.models.product_dto import ProductDTO, CreateProductRequest

PRODUCTS_TABLE = "catalog_schema.products"


class ProductRepository:
    def __init__(self, db: DatabaseManager):
        self.db = db
        self.collection = DocumentCollection(db, PRODUCTS_TABLE)

    async def create_product(self, product: CreateProductRequest) -> ProductDTO:
        """Сохраняет товар, id выдаёт БД."""
        document = await self.collection.insert(product.model_dump())
        return ProductDTO(**document)

    async def get_all_products(self) -> List[ProductDTO]:
        """Весь каталог в порядке вставки, без фильтров и сортировки."""
        documents = await self.collection.find_all()
        return [ProductDTO(**document) for document in documents]
