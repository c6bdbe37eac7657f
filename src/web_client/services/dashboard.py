from __future__ import annotations

import asyncio
from typing import Any

import httpx
from pydantic import BaseModel, Field

from src.common.logger import log_error
from src.web_client.infra.api_clients import ShopApiClient

RESOURCES = ("products", "users", "orders")
UNREACHABLE_MESSAGE = "Failed to reach one or more services"


class DashboardState(BaseModel):
    """Что показывает главная страница."""

    products: Any = Field(default_factory=list)
    users: Any = Field(default_factory=list)
    orders: Any = Field(default_factory=list)
    loading: bool = True
    error: str = ""


def json_or_empty(response: httpx.Response) -> Any:
    """Тело ответа как JSON; нечитаемое тело превращается в пустой список."""
    try:
        return response.json()
    except ValueError:
        return []


async def load_dashboard(client: ShopApiClient) -> DashboardState:
    """
    Запрашивает три коллекции параллельно.

    Ответ с битым телом даёт пустой список только для своей коллекции.
    Если хотя бы один запрос не получил ответа вовсе (сеть, DNS, отказ
    соединения), вся загрузка считается неудачной.
    """
    try:
        responses = await asyncio.gather(*(client.get_resource(name) for name in RESOURCES))
    except httpx.HTTPError as e:
        await log_error(f"Dashboard fetch failed: {e}")
        return DashboardState(loading=False, error=UNREACHABLE_MESSAGE)

    data = {name: json_or_empty(response) for name, response in zip(RESOURCES, responses)}
    return DashboardState(**data, loading=False, error="")
