import os

# Локальные данные NiceGUI храним во временной папке, а не в корне проекта
os.environ.setdefault('NICEGUI_STORAGE_PATH', '/tmp/shop_nicegui_client')

from nicegui import app, ui
from src.config import settings
from src.common.logger import log_info, setup_logging, TypeMsg
from src.web_client.pages.main import MainPage


def create_app() -> None:

    @ui.page('/')
    async def index():
        page = MainPage()
        try:
            await page.mount()
        finally:
            await page.shutdown()

    @app.on_startup
    async def startup() -> None:
        setup_logging()
        await log_info("Web Client started", type_msg=TypeMsg.INFO)


def run_web_client(host: str = "0.0.0.0", port: int | None = None, reload: bool = False) -> None:
    create_app()
    ui.run(
        host=host,
        port=port or settings.deployment.WEB_CLIENT_PORT,
        reload=reload,
        title="Shop Microservices",
        show=False,
    )
