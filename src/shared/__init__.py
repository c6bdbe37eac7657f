# src/shared/__init__.py
"""
Общий код между микросервисами.

Модули:
- models: DTO и Pydantic-модели запросов/ответов
- errors: исключения сервисов
"""

__all__: list[str] = []
