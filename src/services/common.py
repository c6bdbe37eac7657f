# src/services/common.py
"""
Общая сборка FastAPI-приложения для микросервисов.

Каждый сервис получает одинаковый каркас: lifespan с подключением к БД,
текстовый liveness на "/", JSON /health и метрики Prometheus.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Awaitable, Callable, Sequence

from fastapi import APIRouter, FastAPI
from fastapi.responses import JSONResponse, PlainTextResponse

from src.common.logger import log_error, log_info, setup_logging
from src.common.constants import TypeMsg
from src.config import settings
from src.infra.database import close_db, get_db, init_db
from src.infra.metrics import install_metrics
from src.shared.models.common import ErrorResponse, HealthStatus

ShutdownHook = Callable[[], Awaitable[None]]

ERROR_RESPONSES = {500: {"model": ErrorResponse}}


def server_error(message: str) -> JSONResponse:
    """Ответ 500 со статическим сообщением без деталей."""
    return JSONResponse(status_code=500, content=ErrorResponse(error=message).model_dump())


def create_service_app(
    *,
    title: str,
    service_name: str,
    liveness_text: str,
    routers: Sequence[APIRouter],
    description: str = "",
    shutdown_hooks: Sequence[ShutdownHook] = (),
) -> FastAPI:
    """
    Собирает приложение сервиса.

    Args:
        title: Заголовок OpenAPI ("Order Service")
        service_name: Имя сервиса для метрик и health ("order-service")
        liveness_text: Ответ на GET /
        routers: Роутеры с бизнес-эндпоинтами
        description: Описание для OpenAPI
        shutdown_hooks: Корутины, вызываемые при остановке до закрытия БД
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        setup_logging()
        await log_info(f"Starting {title}...", type_msg=TypeMsg.INFO)

        # Недоступная БД не роняет процесс: запросы к хранилищу вернут 500
        try:
            await init_db()
            await log_info(f"{title} connected to PostgreSQL", type_msg=TypeMsg.INFO)
        except Exception as e:
            await log_error(f"DB error ({service_name}): {e}", exc_info=True)

        yield

        await log_info(f"Shutting down {title}...", type_msg=TypeMsg.INFO)
        for hook in shutdown_hooks:
            await hook()
        await close_db()

    app = FastAPI(
        title=title,
        description=description,
        version=settings.system.VERSION,
        lifespan=lifespan,
    )

    install_metrics(app, service_name)

    @app.get("/", response_class=PlainTextResponse, tags=["Health"])
    async def liveness():
        return liveness_text

    @app.get("/health", response_model=HealthStatus, tags=["Health"])
    async def health_check() -> HealthStatus:
        # Процесс жив, даже если БД недоступна
        database = "up" if await get_db().health_check() else "down"
        return HealthStatus(service=service_name, database=database)

    for router in routers:
        app.include_router(router)

    return app
