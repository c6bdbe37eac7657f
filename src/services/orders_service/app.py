from src.services.common import create_service_app
from src.services.orders_service.routes import router
from src.services.orders_service.catalog_client import close_catalog_client
from src.common.constants import ORDERS_SERVICE_PORT

app = create_service_app(
    title="Order Service",
    service_name="order-service",
    liveness_text="Order Service Running ✅",
    description="Prices orders against the product catalog and stores them",
    routers=[router],
    shutdown_hooks=[close_catalog_client],
)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "src.services.orders_service.app:app",
        host="0.0.0.0",
        port=ORDERS_SERVICE_PORT,
    )
