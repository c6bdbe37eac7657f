#!/usr/bin/env python3
# entrypoint_orders_service.py
"""
Точка входа для Order Service в Docker контейнере.
"""

import asyncio
import os
import sys
from pathlib import Path

# Добавляем корневую директорию проекта в путь
sys.path.insert(0, str(Path(__file__).parent.parent.resolve()))

# Имя сервиса попадает в имя лог-файла и в JSON логи
os.environ.setdefault("SERVICE_NAME", "orders")

from main import main


if __name__ == "__main__":
    try:
        asyncio.run(main("orders"))
    except KeyboardInterrupt:
        pass
