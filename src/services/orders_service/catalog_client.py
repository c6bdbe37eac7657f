from typing import Any, Dict, List, Optional
import httpx
from src.config import settings
from src.shared.errors import CatalogUnavailableError


class CatalogClient:
    """
    HTTP client for the products service.

    No timeout and no retries: a stalled catalog blocks only the order
    request that is waiting on it.
    """

    def __init__(self, base_url: Optional[str] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url or settings.deployment.PRODUCT_SERVICE_URL
        self.client = httpx.AsyncClient(base_url=self.base_url, timeout=None, transport=transport)

    async def close(self):
        await self.client.aclose()

    async def fetch_catalog(self) -> List[Dict[str, Any]]:
        """Returns the whole catalog as raw documents."""
        url = f"{self.base_url}/api/products"
        try:
            response = await self.client.get("/api/products")
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise CatalogUnavailableError(url, e) from e

        if not isinstance(data, list):
            raise CatalogUnavailableError(url, TypeError(f"expected a list, got {type(data).__name__}"))
        return data


_catalog_client: Optional[CatalogClient] = None


def get_catalog_client() -> CatalogClient:
    global _catalog_client
    if _catalog_client is None:
        _catalog_client = CatalogClient()
    return _catalog_client


async def close_catalog_client() -> None:
    global _catalog_client
    if _catalog_client is not None:
        await _catalog_client.close()
        _catalog_client = None
