from typing import List
from fastapi import APIRouter, Depends
from src.services.products_service.service import ProductService
from src.services.products_service.dependencies import get_product_service
from src.services.common import ERROR_RESPONSES, server_error
from src.shared.models.product_dto import ProductDTO, CreateProductRequest, ProductCreatedResponse
from src.shared.errors import ServiceError
from src.common.logger import log_error

# Used by the web client and by the orders service
router = APIRouter(prefix="/api/products", tags=["products"])


@router.post("", response_model=ProductCreatedResponse, responses=ERROR_RESPONSES)
async def add_product(
    product_data: CreateProductRequest,
    service: ProductService = Depends(get_product_service)
):
    try:
        product = await service.add_product(product_data)
    except ServiceError as e:
        await log_error(f"Error adding product: {e}", exc_info=True)
        return server_error("Error adding product")
    return ProductCreatedResponse(message="✅ Product added", product=product)


@router.get("", response_model=List[ProductDTO], responses=ERROR_RESPONSES)
async def list_products(
    service: ProductService = Depends(get_product_service)
):
    try:
        return await service.list_products()
    except ServiceError as e:
        await log_error(f"Error fetching products: {e}", exc_info=True)
        return server_error("Error fetching products")
