# src/shared/models/common.py
"""
Общие модели для всех сервисов.
"""

from __future__ import annotations

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Ответ с ошибкой: только статическое сообщение, без кода."""

    error: str


class HealthStatus(BaseModel):
    """Статус здоровья сервиса."""

    service: str
    status: str = "ok"
    database: str = "down"
