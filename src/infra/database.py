# src/infra/database.py
"""
Менеджер базы данных PostgreSQL.
Пул соединений asyncpg, JSONB-кодек для документов, применение схемы при старте.
"""

from __future__ import annotations

import asyncio
import json
from contextlib import asynccontextmanager
from functools import wraps
from typing import Any, AsyncGenerator, Callable, TypeVar

import asyncpg
from asyncpg import Connection, Pool

from src.common.logger import log_error, log_info, log_warning
from src.common.constants import TypeMsg

T = TypeVar("T")

# Произвольный ID advisory-лока, чтобы сервисы не применяли схему одновременно
SCHEMA_LOCK_ID = 801_802_803


def retry_connect(
    max_attempts: int = 3,
    delay: float = 1.0,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Декоратор повторных попыток для первичного подключения к БД при старте сервиса.
    Запросы обработчиков не повторяются.

    Args:
        max_attempts: Максимальное количество попыток
        delay: Базовая задержка между попытками (секунды), растёт линейно
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            last_error: Exception | None = None

            for attempt in range(1, max_attempts + 1):
                try:
                    return await func(*args, **kwargs)
                except (
                    asyncpg.PostgresConnectionError,
                    asyncpg.InterfaceError,
                    ConnectionRefusedError,
                    OSError,
                ) as e:
                    last_error = e
                    if attempt < max_attempts:
                        await log_warning(
                            f"Ошибка подключения к БД (попытка {attempt}/{max_attempts}): {e}",
                        )
                        await asyncio.sleep(delay * attempt)
                    else:
                        await log_error(f"Не удалось подключиться к БД после {max_attempts} попыток: {e}")

            raise last_error  # type: ignore

        return wrapper  # type: ignore

    return decorator


async def _init_connection(conn: Connection) -> None:
    """Регистрирует JSON-кодек для jsonb на каждом соединении пула."""
    await conn.set_type_codec(
        "jsonb",
        encoder=json.dumps,
        decoder=json.loads,
        schema="pg_catalog",
    )


class DatabaseManager:
    """
    Менеджер подключений к PostgreSQL.
    Singleton: все репозитории процесса работают через один пул.
    """

    _instance: DatabaseManager | None = None
    _pool: Pool | None = None

    def __new__(cls) -> DatabaseManager:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if hasattr(self, "_initialized"):
            return
        self._initialized = True
        self._pool = None

    @property
    def pool(self) -> Pool:
        """Возвращает пул соединений."""
        if self._pool is None:
            raise RuntimeError("Пул соединений не инициализирован. Вызовите connect() сначала.")
        return self._pool

    @property
    def is_connected(self) -> bool:
        return self._pool is not None

    async def connect(
        self,
        dsn: str | None = None,
        min_size: int = 1,
        max_size: int = 10,
        command_timeout: int = 60,
        attempts: int = 3,
        delay: float = 1.0,
    ) -> None:
        """
        Создаёт пул соединений к PostgreSQL.

        Args:
            dsn: Строка подключения (если None, берётся DB_URI из конфига)
            min_size: Минимальный размер пула
            max_size: Максимальный размер пула
            command_timeout: Таймаут команд (секунды)
            attempts: Число попыток подключения
            delay: Базовая задержка между попытками
        """
        if self._pool is not None:
            return

        if dsn is None:
            from src.config import settings
            dsn = settings.database.dsn

        await log_info("Подключение к PostgreSQL...", type_msg=TypeMsg.INFO)

        @retry_connect(max_attempts=attempts, delay=delay)
        async def _create_pool() -> Pool:
            return await asyncpg.create_pool(
                dsn=dsn,
                min_size=min_size,
                max_size=max_size,
                command_timeout=command_timeout,
                init=_init_connection,
            )

        self._pool = await _create_pool()

        await log_info("Подключение к PostgreSQL установлено", type_msg=TypeMsg.INFO)

    async def disconnect(self) -> None:
        """Закрывает пул соединений."""
        if self._pool is not None:
            await self._pool.close()
            self._pool = None
            await log_info("Соединение с PostgreSQL закрыто", type_msg=TypeMsg.INFO)

    @asynccontextmanager
    async def acquire(self) -> AsyncGenerator[Connection, None]:
        """
        Контекстный менеджер для получения соединения из пула.

        Example:
            async with db.acquire() as conn:
                rows = await conn.fetch("SELECT id, body FROM catalog_schema.products")
        """
        async with self.pool.acquire() as connection:
            yield connection

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[Connection, None]:
        """Контекстный менеджер транзакции: commit при успехе, rollback при ошибке."""
        async with self.pool.acquire() as connection:
            async with connection.transaction():
                yield connection

    async def fetchval(self, query: str, *args: Any, column: int = 0) -> Any:
        async with self.acquire() as conn:
            return await conn.fetchval(query, *args, column=column)

    async def health_check(self) -> bool:
        """Проверяет, что БД отвечает на SELECT 1. Без пула сразу False."""
        if not self.is_connected:
            return False
        try:
            result = await self.fetchval("SELECT 1")
            return result == 1
        except Exception as e:
            await log_error(f"Health check PostgreSQL failed: {e}")
            return False


def get_db() -> DatabaseManager:
    """Возвращает экземпляр DatabaseManager процесса."""
    return DatabaseManager()


async def init_db() -> None:
    """
    Подключается к БД с параметрами из конфигурации и применяет схему.
    """
    from src.config import settings

    db = get_db()
    await db.connect(
        dsn=settings.database.dsn,
        min_size=settings.database.DB_MIN_POOL_SIZE,
        max_size=settings.database.DB_MAX_POOL_SIZE,
        command_timeout=settings.database.DB_COMMAND_TIMEOUT,
        attempts=settings.database.DB_CONNECT_ATTEMPTS,
        delay=settings.database.DB_CONNECT_DELAY,
    )

    await apply_schema(db)


async def apply_schema(db: DatabaseManager) -> None:
    """Выполняет migrations/init.sql под advisory-локом."""
    from src.config.loader import get_project_root

    schema_path = get_project_root() / "migrations" / "init.sql"
    if not schema_path.exists():
        await log_error(f"Файл схемы БД не найден: {schema_path}")
        return

    schema_sql = schema_path.read_text(encoding="utf-8")

    try:
        await log_info("Применение схемы БД...", type_msg=TypeMsg.INFO)
        async with db.transaction() as conn:
            await conn.execute(f"SELECT pg_advisory_xact_lock({SCHEMA_LOCK_ID})")
            await conn.execute(schema_sql)
        await log_info("Схема БД успешно применена", type_msg=TypeMsg.INFO)
    except asyncpg.PostgresError as e:
        # Гонка двух сервисов на CREATE ... IF NOT EXISTS: схема уже создана соседом
        if "already exists" in str(e) or "deadlock detected" in str(e):
            await log_warning(f"Игнорируем ошибку инициализации схемы (гонка процессов): {e}")
        else:
            await log_error(f"Ошибка при инициализации схемы БД: {e}")
            raise


async def close_db() -> None:
    """Закрывает подключение к базе данных."""
    await get_db().disconnect()
