import httpx
from typing import Dict, Optional
from src.config import settings
from src.common.constants import USERS_SERVICE_PORT, PRODUCTS_SERVICE_PORT, ORDERS_SERVICE_PORT


def default_resource_urls() -> Dict[str, str]:
    deployment = settings.deployment
    return {
        "products": f"http://{deployment.PRODUCTS_SERVICE_HOST}:{PRODUCTS_SERVICE_PORT}/api/products",
        "users": f"http://{deployment.USERS_SERVICE_HOST}:{USERS_SERVICE_PORT}/api/users",
        "orders": f"http://{deployment.ORDERS_SERVICE_HOST}:{ORDERS_SERVICE_PORT}/api/orders",
    }


class ShopApiClient:
    """
    Read-only client for the three collection endpoints.

    Returns raw responses: the caller decides what a bad body means.
    """

    def __init__(
        self,
        urls: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.urls = urls or default_resource_urls()
        self.client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def close(self):
        await self.client.aclose()

    async def get_resource(self, name: str) -> httpx.Response:
        return await self.client.get(self.urls[name])
