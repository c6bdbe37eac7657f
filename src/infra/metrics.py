# src/infra/metrics.py
"""
Метрики Prometheus для HTTP-сервисов.

У каждого процесса свой CollectorRegistry: стандартные метрики процесса
плюс гистограмма задержки и счётчик запросов с метками method/route/status_code.
"""

from __future__ import annotations

import time
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    GCCollector,
    Histogram,
    PlatformCollector,
    ProcessCollector,
    generate_latest,
)

from src.common.constants import HTTP_LATENCY_BUCKETS
from src.common.logger import log_error

LABEL_NAMES = ("method", "route", "status_code")


class ServiceMetrics:
    """Набор метрик одного сервиса."""

    def __init__(self, service_name: str, registry: CollectorRegistry | None = None):
        self.service_name = service_name
        self.registry = registry or CollectorRegistry()

        ProcessCollector(registry=self.registry)
        PlatformCollector(registry=self.registry)
        GCCollector(registry=self.registry)

        self.request_duration = Histogram(
            "http_request_duration_seconds",
            f"HTTP request latency for {service_name}",
            LABEL_NAMES,
            buckets=HTTP_LATENCY_BUCKETS,
            registry=self.registry,
        )
        self.requests_total = Counter(
            "http_requests_total",
            f"Total HTTP requests for {service_name}",
            LABEL_NAMES,
            registry=self.registry,
        )

    def observe(self, method: str, route: str, status_code: int, duration: float) -> None:
        labels = {"method": method, "route": route, "status_code": str(status_code)}
        self.request_duration.labels(**labels).observe(duration)
        self.requests_total.labels(**labels).inc()

    def render(self) -> bytes:
        return generate_latest(self.registry)


def resolve_route(request: Request) -> str:
    """Шаблон сработавшего маршрута (/api/orders), иначе сырой путь запроса."""
    route = request.scope.get("route")
    path = getattr(route, "path", None)
    return path or request.url.path


def install_metrics(app: FastAPI, service_name: str) -> ServiceMetrics:
    """
    Подключает к приложению middleware замера запросов и эндпоинт /metrics.
    Возвращает набор метрик (также доступен как app.state.metrics).
    """
    metrics = ServiceMetrics(service_name)
    app.state.metrics = metrics

    @app.middleware("http")
    async def measure_request(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            metrics.observe(request.method, resolve_route(request), 500, time.perf_counter() - started)
            raise
        metrics.observe(request.method, resolve_route(request), response.status_code, time.perf_counter() - started)
        return response

    @app.get("/metrics", include_in_schema=False)
    async def metrics_endpoint() -> Response:
        try:
            payload = metrics.render()
        except Exception as e:
            await log_error(f"Error generating metrics: {e}", exc_info=True)
            return Response(status_code=500)
        return Response(content=payload, media_type=CONTENT_TYPE_LATEST)

    return metrics
