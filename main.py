#!/usr/bin/env python3
# main.py
"""
Главная точка входа.
Запускает один из сервисов (users, products, orders), все три сервиса
в одном процессе (all) или веб-клиент.
"""

from __future__ import annotations

import asyncio
import sys

from src.config import settings
from src.common.logger import setup_logging, log_info, log_error
from src.common.constants import (
    TypeMsg,
    ComponentMode,
    USERS_SERVICE_PORT,
    PRODUCTS_SERVICE_PORT,
    ORDERS_SERVICE_PORT,
)


# Режим -> (ASGI-приложение, порт)
SERVICES: dict[str, tuple[str, int]] = {
    ComponentMode.USERS.value: ("src.services.users_service.app:app", USERS_SERVICE_PORT),
    ComponentMode.PRODUCTS.value: ("src.services.products_service.app:app", PRODUCTS_SERVICE_PORT),
    ComponentMode.ORDERS.value: ("src.services.orders_service.app:app", ORDERS_SERVICE_PORT),
}

ALL_MODE = "all"
VALID_MODES = (*SERVICES, ComponentMode.WEB_CLIENT.value, ALL_MODE)


def build_server(mode: str):
    """Создаёт uvicorn.Server для сервиса из SERVICES."""
    import uvicorn

    app_path, port = SERVICES[mode]
    config = uvicorn.Config(
        app_path,
        host="0.0.0.0",
        port=port,
        log_level="debug" if settings.system.DEBUG else "info",
    )
    return uvicorn.Server(config)


async def run_service(mode: str) -> None:
    """Запускает один HTTP-сервис."""
    _, port = SERVICES[mode]
    await log_info(f"Запуск сервиса '{mode}' на порту {port}...", type_msg=TypeMsg.INFO)

    server = build_server(mode)
    try:
        await server.serve()
    except asyncio.CancelledError:
        await log_info(f"Сервис '{mode}': graceful shutdown", type_msg=TypeMsg.DEBUG)
        await server.shutdown()


async def run_all_services() -> None:
    """Запускает три сервиса в одном процессе (локальная разработка)."""
    await log_info("Запуск всех сервисов в одном процессе", type_msg=TypeMsg.INFO)
    await asyncio.gather(*(run_service(mode) for mode in SERVICES))


def run_web_client() -> None:
    """Запускает веб-клиент. NiceGUI сам управляет event loop."""
    from src.web_client.app import run_web_client as start_web_client

    start_web_client(port=settings.deployment.WEB_CLIENT_PORT)


def resolve_mode(argv: list[str]) -> str | None:
    """
    Определяет режим: аргумент командной строки, иначе COMPONENT_MODE.
    Возвращает None для неизвестного режима.
    """
    mode = argv[1].lower() if len(argv) > 1 else settings.system.COMPONENT_MODE
    return mode if mode in VALID_MODES else None


async def main(mode: str) -> None:
    setup_logging()
    await log_info(
        f"{settings.system.PROJECT_NAME} v{settings.system.VERSION} — запуск в режиме '{mode}'",
        type_msg=TypeMsg.INFO,
    )

    try:
        if mode == ALL_MODE:
            await run_all_services()
        else:
            await run_service(mode)
    except Exception as e:
        await log_error(f"Критическая ошибка: {e}", exc_info=True)
        raise
    finally:
        await log_info("Приложение остановлено", type_msg=TypeMsg.INFO)


def print_usage() -> None:
    print(f"""
Shop microservices

Использование:
    python main.py [mode]

Режимы:
    users        — User Service (:{USERS_SERVICE_PORT})
    products     — Product Service (:{PRODUCTS_SERVICE_PORT})
    orders       — Order Service (:{ORDERS_SERVICE_PORT})
    web_client   — Web Client (:{settings.deployment.WEB_CLIENT_PORT})
    all          — users + products + orders в одном процессе

Без аргумента режим берётся из COMPONENT_MODE.
    """)


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] in ("--help", "-h"):
        print_usage()
        sys.exit(0)

    mode = resolve_mode(sys.argv)
    if mode is None:
        print(f"Ошибка: неизвестный режим '{sys.argv[1] if len(sys.argv) > 1 else settings.system.COMPONENT_MODE}'")
        print_usage()
        sys.exit(1)

    if mode == ComponentMode.WEB_CLIENT.value:
        run_web_client()
        sys.exit(0)

    try:
        asyncio.run(main(mode))
    except KeyboardInterrupt:
        pass
