# src/common/constants.py
"""
Общие константы и перечисления.
"""

from enum import Enum


class TypeMsg(str, Enum):
    """Типы сообщений для логирования."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class OrderStatus(str, Enum):
    """Статус заказа. Выставляется один раз при создании."""
    CREATED = "Created"

    def __str__(self) -> str:
        return self.value


class ComponentMode(str, Enum):
    """Компоненты, которые может запустить main.py."""
    USERS = "users"
    PRODUCTS = "products"
    ORDERS = "orders"
    WEB_CLIENT = "web_client"


# Порты сервисов фиксированы и не переопределяются конфигом
USERS_SERVICE_PORT = 8080
PRODUCTS_SERVICE_PORT = 8081
ORDERS_SERVICE_PORT = 8082

# Бакеты гистограммы задержки HTTP (секунды)
HTTP_LATENCY_BUCKETS = (0.05, 0.1, 0.3, 0.5, 1, 2, 5)
