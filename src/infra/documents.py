# src/infra/documents.py
"""
Коллекция документов поверх таблицы PostgreSQL с JSONB-телом.

Таблица коллекции: (id UUID, seq BIGSERIAL, body JSONB, created_at).
Идентификатор выдаёт БД, документы отдаются в порядке вставки.
"""

from __future__ import annotations

from typing import Any

import asyncpg

from src.infra.database import DatabaseManager
from src.shared.errors import PersistenceError

# Ошибки драйвера и сети, которые превращаются в PersistenceError.
# RuntimeError бросает DatabaseManager.pool, если пул не поднят.
_DRIVER_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, RuntimeError)


class DocumentCollection:
    def __init__(self, db: DatabaseManager, table: str):
        self.db = db
        self.table = table

    @staticmethod
    def _to_document(record: Any) -> dict[str, Any]:
        body = record["body"] or {}
        return {**body, "id": str(record["id"])}

    async def insert(self, document: dict[str, Any]) -> dict[str, Any]:
        """Сохраняет документ и возвращает его вместе с выданным id."""
        query = f"""
            INSERT INTO {self.table} (body)
            VALUES ($1::jsonb)
            RETURNING id, body
        """
        body = {k: v for k, v in document.items() if k != "id"}
        try:
            async with self.db.acquire() as conn:
                record = await conn.fetchrow(query, body)
        except _DRIVER_ERRORS as e:
            raise PersistenceError(self.table, "insert", e) from e
        return self._to_document(record)

    async def find_all(self) -> list[dict[str, Any]]:
        """Возвращает все документы коллекции без фильтрации и пагинации."""
        query = f"""
            SELECT id, body
            FROM {self.table}
            ORDER BY seq
        """
        try:
            async with self.db.acquire() as conn:
                records = await conn.fetch(query)
        except _DRIVER_ERRORS as e:
            raise PersistenceError(self.table, "find_all", e) from e
        return [self._to_document(record) for record in records]

    async def count(self) -> int:
        query = f"SELECT COUNT(*) FROM {self.table}"
        try:
            async with self.db.acquire() as conn:
                return await conn.fetchval(query)
        except _DRIVER_ERRORS as e:
            raise PersistenceError(self.table, "count", e) from e
