"""
StackAdvisor — REST API модуль

FastAPI REST API для адаптивних сесій рекомендації.

Компоненти:
- app.py: FastAPI application
- routes/: API endpoints
- models.py: Pydantic models
- dependencies.py: Каталог та сесії

Запуск:
    uvicorn stack_advisor.api.app:app --reload --port 8000

Документація:
    http://localhost:8000/docs (Swagger UI)
    http://localhost:8000/redoc (ReDoc)

Endpoints:
    GET    /                              - Root info
    GET    /health                        - Health check

    GET    /api/catalog                   - Список кандидатів
    GET    /api/catalog/{name}            - Один кандидат
    GET    /api/questions                 - Банк питань

    POST   /api/sessions                  - Почати сесію
    GET    /api/sessions/{id}             - Стан сесії
    POST   /api/sessions/{id}/answer      - Відповісти на питання
    POST   /api/sessions/{id}/reset       - Почати спочатку
    DELETE /api/sessions/{id}             - Закрити сесію
"""

from .app import app
from .dependencies import catalog_manager, session_manager, get_catalog, get_sessions


__all__ = [
    "app",
    "catalog_manager",
    "session_manager",
    "get_catalog",
    "get_sessions",
]
