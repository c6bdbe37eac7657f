from src.services.common import create_service_app
from src.services.products_service.routes import router
from src.common.constants import PRODUCTS_SERVICE_PORT

app = create_service_app(
    title="Product Service",
    service_name="product-service",
    liveness_text="Product Service Running ✅",
    description="Catalog store: sellable items (name, price, stock)",
    routers=[router],
)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "src.services.products_service.app:app",
        host="0.0.0.0",
        port=PRODUCTS_SERVICE_PORT,
    )
