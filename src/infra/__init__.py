# src/infra/__init__.py
"""
Инфраструктурный слой.
PostgreSQL (хранилище документов) и метрики Prometheus.
"""

from src.infra.database import DatabaseManager, get_db, init_db, close_db
from src.infra.documents import DocumentCollection
from src.infra.metrics import ServiceMetrics, install_metrics

__all__ = [
    "DatabaseManager",
    "get_db",
    "init_db",
    "close_db",
    "DocumentCollection",
    "ServiceMetrics",
    "install_metrics",
]
