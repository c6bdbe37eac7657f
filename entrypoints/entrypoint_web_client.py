#!/usr/bin/env python3
# entrypoint_web_client.py
"""
Точка входа для веб-клиента в Docker контейнере.
"""

import os
import sys
from pathlib import Path

# Добавляем корневую директорию проекта в путь
sys.path.insert(0, str(Path(__file__).parent.parent.resolve()))

os.environ.setdefault("SERVICE_NAME", "web_client")

from src.config import settings
from src.web_client.app import run_web_client


if __name__ == "__main__":
    try:
        # NiceGUI сам управляет event loop
        run_web_client(port=settings.deployment.WEB_CLIENT_PORT)
    except KeyboardInterrupt:
        pass
