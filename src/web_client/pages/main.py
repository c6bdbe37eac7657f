from __future__ import annotations

import json
from typing import Any

from nicegui import ui

from src.web_client.infra.api_clients import ShopApiClient
from src.web_client.services.dashboard import DashboardState, load_dashboard

SECTIONS = (
    ("📦 Products", "products", "No products"),
    ("👤 Users", "users", "No users"),
    ("🧾 Orders", "orders", "No orders"),
)


def format_section(value: Any, empty_text: str) -> str:
    if value is None:
        return empty_text
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


class MainPage:
    """
    Главная страница: данные всех трёх сервисов в виде JSON.
    """

    def __init__(self, client: ShopApiClient | None = None):
        self.client = client or ShopApiClient()
        self.state = DashboardState()

    async def mount(self):
        with ui.column().classes('w-full items-center mt-10'):
            ui.label("Welcome to the Shop Microservices Portfolio 🌍").classes('text-3xl font-bold')
            ui.label("Frontend running in Docker + Kubernetes")

            loading_label = ui.label("Loading data from microservices…")
            content = ui.column().classes('w-full max-w-[900px] mt-10 text-left')

        self.state = await load_dashboard(self.client)
        loading_label.set_visibility(self.state.loading)

        with content:
            if self.state.error:
                ui.label(self.state.error).classes('text-red-600')
                return
            for title, key, empty_text in SECTIONS:
                ui.label(title).classes('text-xl font-semibold')
                ui.code(format_section(getattr(self.state, key), empty_text), language='json').classes('w-full')

    async def shutdown(self):
        await self.client.close()
