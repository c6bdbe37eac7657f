#!/usr/bin/env python3
# entrypoint_users_service.py
"""
Точка входа для Users Service в Docker контейнере.
"""

import asyncio
import os
import sys
from pathlib import Path

# Добавляем корневую директорию проекта в путь
sys.path.insert(0, str(Path(__file__).parent.parent.resolve()))

# Имя сервиса попадает в имя лог-файла и в JSON логи
os.environ.setdefault("SERVICE_NAME", "users")

from main import main


if __name__ == "__main__":
    try:
        asyncio.run(main("users"))
    except KeyboardInterrupt:
        pass
