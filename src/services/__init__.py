# src/services/__init__.py
"""
Микросервисы приложения.

Архитектура:
- Каждый сервис — независимое FastAPI-приложение (общий каркас в common.py)
- Общая PostgreSQL, у каждого сервиса своя схема с коллекцией документов
- Синхронное взаимодействие по HTTP: orders_service читает каталог у products_service

Сервисы:
- users_service: учётные записи (name, email), порт 8080
- products_service: каталог товаров, порт 8081
- orders_service: создание заказов с расчётом суммы по каталогу, порт 8082
"""

__all__: list[str] = []
