# src/shared/errors.py
"""
Исключения, общие для сервисов.
Маршруты перехватывают ServiceError и отвечают статическим 500.
"""

from __future__ import annotations


class ServiceError(Exception):
    """Базовая ошибка сервиса."""


class PersistenceError(ServiceError):
    """Ошибка хранилища документов (чтение или запись)."""

    def __init__(self, collection: str, operation: str, cause: BaseException | None = None):
        self.collection = collection
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} failed for collection {collection}: {cause!r}")


class CatalogUnavailableError(ServiceError):
    """Не удалось получить каталог товаров из сервиса каталога."""

    def __init__(self, url: str, cause: BaseException | None = None):
        self.url = url
        self.cause = cause
        super().__init__(f"Catalog fetch from {url} failed: {cause!r}")
