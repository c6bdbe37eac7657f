from typing import List
from src.services.products_service.repository import ProductRepository
from src.shared.models.product_dto import ProductDTO, CreateProductRequest
from src.common.logger import log_info, TypeMsg


class ProductService:
    def __init__(self, repository: ProductRepository):
        self.repository = repository

    async def add_product(self, product_data: CreateProductRequest) -> ProductDTO:
        product = await self.repository.create_product(product_data)
        await log_info(
            f"Product {product.id} added",
            type_msg=TypeMsg.INFO,
            extra={"price": product.price, "stock": product.stock},
        )
        return product

    async def list_products(self) -> List[ProductDTO]:
        # Stock is informational only, nothing reserves or decrements it
        return await self.repository.get_all_products()
