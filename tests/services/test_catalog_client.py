import json
import pytest
import httpx
from src.services.orders_service.catalog_client import CatalogClient
from src.shared.errors import CatalogUnavailableError

BASE_URL = "http://catalog.test:8081"


def make_client(handler) -> CatalogClient:
    return CatalogClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_fetch_catalog_returns_list(sample_catalog):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, json=sample_catalog)

    client = make_client(handler)
    result = await client.fetch_catalog()
    await client.close()

    assert result == sample_catalog
    assert seen == [f"{BASE_URL}/api/products"]


@pytest.mark.asyncio
async def test_fetch_catalog_connection_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(handler)
    with pytest.raises(CatalogUnavailableError) as exc_info:
        await client.fetch_catalog()
    await client.close()

    assert exc_info.value.url == f"{BASE_URL}/api/products"
    assert isinstance(exc_info.value.cause, httpx.ConnectError)


@pytest.mark.asyncio
async def test_fetch_catalog_error_status():
    client = make_client(lambda request: httpx.Response(500, json={"error": "Error fetching products"}))

    with pytest.raises(CatalogUnavailableError):
        await client.fetch_catalog()
    await client.close()


@pytest.mark.asyncio
async def test_fetch_catalog_invalid_json():
    client = make_client(lambda request: httpx.Response(200, content=b"<html>oops</html>"))

    with pytest.raises(CatalogUnavailableError):
        await client.fetch_catalog()
    await client.close()


@pytest.mark.asyncio
async def test_fetch_catalog_not_a_list():
    client = make_client(lambda request: httpx.Response(200, content=json.dumps({"items": []}).encode()))

    with pytest.raises(CatalogUnavailableError):
        await client.fetch_catalog()
    await client.close()


def test_default_base_url_from_settings():
    client = CatalogClient()

    assert client.base_url == "http://catalog.test:8081"
