#!/usr/bin/env python3
# entrypoint_products_service.py
"""
Точка входа для Product Service в Docker контейнере.
"""

import asyncio
import os
import sys
from pathlib import Path

# Добавляем корневую директорию проекта в путь
sys.path.insert(0, str(Path(__file__).parent.parent.resolve()))

# Имя сервиса попадает в имя лог-файла и в JSON логи
os.environ.setdefault("SERVICE_NAME", "products")

from main import main


if __name__ == "__main__":
    try:
        asyncio.run(main("products"))
    except KeyboardInterrupt:
        pass
